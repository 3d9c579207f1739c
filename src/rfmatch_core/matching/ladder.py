# src/rfmatch_core/matching/ladder.py
"""
Four-element ladder networks (two cascaded L-sections).

Each topology is built from an *anchor* port. The anchor is first turned into
its parallel equivalent resistance rp, and both ports are then matched to the
virtual resistance rv = sqrt(rp * R_opposite). A lowpass section uses a shunt
capacitor and a series inductor; a highpass section a series capacitor and a
shunt inductor. Bandpass variants mix the two.

  ========  ======  ===========  =============
  solver    anchor  anchor side  opposite side
  ========  ======  ===========  =============
  lp1       source  lowpass      lowpass
  lp2       load    lowpass      lowpass
  hp1       source  highpass     highpass
  hp2       load    highpass     highpass
  bp1       source  highpass     lowpass
  bp2       load    highpass     lowpass
  bp3       source  lowpass      highpass
  bp4       load    lowpass      highpass
  ========  ======  ===========  =============

The anchor-side elements are reported as `cs`/`ls`, the opposite side as
`cl`/`ll`. Swapping source and load therefore maps X1 onto X2.
"""
import logging
from typing import Tuple

import numpy as np

from ..units import Unit
from .common import NAN, absorb, is_conjugate_pair, realizable, scale_c, scale_l, split, unit_labels
from .results import CCLL

logger = logging.getLogger(__name__)

LOWPASS = "lowpass"
HIGHPASS = "highpass"


def _anchor_section(ra, xa, rp, rv, w, style) -> Tuple[np.float64, np.float64]:
    qs = np.sqrt(rp / rv - 1)
    if style == LOWPASS:
        q = -xa / ra
        c = qs / (w * rp) - q / (w * rp)
        l = qs * rv / w
    else:
        q = xa / ra
        c = 1 / (w * rv * qs)
        l = rp / (w * qs)
        if xa != 0:
            l = absorb(l, rp / (w * q))
    return c, l


def _opposite_section(ro, xo, rv, w, style) -> Tuple[np.float64, np.float64]:
    ql = np.sqrt(rv / ro - 1)
    if style == LOWPASS:
        l = ro * ql / w - xo / w
        c = ql / (w * rv)
    else:
        l = rv / (w * ql)
        c = 1 / (w * ro * ql)
        if xo != 0:
            c = absorb(c, -1 / (w * xo))
    return c, l


def calc_ladder(
    zs: complex,
    zl: complex,
    w: float,
    anchor_at_source: bool,
    anchor_style: str,
    opposite_style: str,
    c_unit=Unit.FEMTO,
    l_unit=Unit.PICO,
) -> CCLL:
    """Generic two-section ladder; the named solvers below fix its configuration."""
    c_unit, l_unit, c_label, l_label = unit_labels(c_unit, l_unit)
    if is_conjugate_pair(zs, zl):
        return CCLL(0.0, 0.0, 0.0, 0.0, c_label, l_label)

    anchor, opposite = (zs, zl) if anchor_at_source else (zl, zs)
    ra, xa = split(anchor)
    ro, xo = split(opposite)
    w = np.float64(w)
    infeasible = CCLL(NAN, NAN, NAN, NAN, c_label, l_label)

    with np.errstate(divide="ignore", invalid="ignore"):
        q = -xa / ra if anchor_style == LOWPASS else xa / ra
        rp = (1 + q ** 2) * ra
        rv = np.sqrt(rp * ro)
        if rp <= rv:
            return infeasible
        cs, ls = _anchor_section(ra, xa, rp, rv, w, anchor_style)
        cl, ll = _opposite_section(ro, xo, rv, w, opposite_style)

    cs, cl = scale_c(cs, c_unit), scale_c(cl, c_unit)
    ls, ll = scale_l(ls, l_unit), scale_l(ll, l_unit)
    if not realizable(cs, cl, ls, ll):
        return infeasible
    return CCLL(cs, cl, ls, ll, c_label, l_label)


# --IND--------IND--
#  |         |
# CAP       CAP
def calc_lp1(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CCLL:
    return calc_ladder(zs, zl, w, True, LOWPASS, LOWPASS, c_unit, l_unit)


def calc_lp2(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CCLL:
    return calc_ladder(zs, zl, w, False, LOWPASS, LOWPASS, c_unit, l_unit)


# --CAP--------CAP--
#  |         |
# IND       IND
def calc_hp1(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CCLL:
    return calc_ladder(zs, zl, w, True, HIGHPASS, HIGHPASS, c_unit, l_unit)


def calc_hp2(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CCLL:
    return calc_ladder(zs, zl, w, False, HIGHPASS, HIGHPASS, c_unit, l_unit)


def calc_bp1(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CCLL:
    return calc_ladder(zs, zl, w, True, HIGHPASS, LOWPASS, c_unit, l_unit)


def calc_bp2(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CCLL:
    return calc_ladder(zs, zl, w, False, HIGHPASS, LOWPASS, c_unit, l_unit)


def calc_bp3(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CCLL:
    return calc_ladder(zs, zl, w, True, LOWPASS, HIGHPASS, c_unit, l_unit)


def calc_bp4(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CCLL:
    return calc_ladder(zs, zl, w, False, LOWPASS, HIGHPASS, c_unit, l_unit)
