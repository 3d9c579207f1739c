# src/rfmatch_core/matching/pitee.py
"""
Three-element pi and tee networks designed for a target loaded Q.

Both are built as two back-to-back L-sections meeting at a virtual
resistance rv. For the pi network rv = max(Rs, Rl) / (Q**2 + 1) lies below
both port resistances; for the tee, rv = min(Rs, Rl) * (Q**2 + 1) lies above
them. The smallest usable Q is sqrt(max/min - 1); below it no rv exists.

Each network is reported in two realizations (see `PiTee`), whose NaN status
is decided independently.
"""
import logging

import numpy as np

from ..units import Unit
from .common import NAN, absorb, is_conjugate_pair, realizable, scale_c, scale_l, split, unit_labels
from .results import PiTee

logger = logging.getLogger(__name__)


def _screen(zs, zl, q_target, c_label, l_label):
    """Returns a finished result for the trivial and impossible requests, else None."""
    zeros = PiTee(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, c_label, l_label)
    nans = PiTee(NAN, NAN, NAN, NAN, NAN, NAN, NAN, c_label, l_label)
    if is_conjugate_pair(zs, zl):
        return zeros
    if q_target < 0:
        return nans
    rs, rl = complex(zs).real, complex(zl).real
    if q_target == 0 and rs == rl:
        return zeros
    with np.errstate(divide="ignore", invalid="ignore"):
        q_min = np.sqrt(np.float64(max(rs, rl)) / min(rs, rl) - 1)
    if not q_target >= q_min:
        logger.debug("Target Q %s is below the minimum %s for this port pair.", q_target, q_min)
        return nans
    return None


def _finish(c, cs, cl, l, ls, ll, q, c_unit, l_unit, c_label, l_label) -> PiTee:
    c, cs, cl = scale_c(c, c_unit), scale_c(cs, c_unit), scale_c(cl, c_unit)
    l, ls, ll = scale_l(l, l_unit), scale_l(ls, l_unit), scale_l(ll, l_unit)
    if not realizable(c, ls, ll):
        c = ls = ll = NAN
    if not realizable(l, cs, cl):
        l = cs = cl = NAN
    return PiTee(c, cs, cl, l, ls, ll, float(q), c_label, l_label)


def calc_pi(zs, zl, w, q_target, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> PiTee:
    """
    Pi network: shunt - series - shunt.

    Inductor-middle: shunt cs, series l, shunt cl.
    Capacitor-middle: shunt ls, series c, shunt ll.
    """
    c_unit, l_unit, c_label, l_label = unit_labels(c_unit, l_unit)
    screened = _screen(zs, zl, q_target, c_label, l_label)
    if screened is not None:
        return screened

    rs, xs = split(zs)
    rl, xl = split(zl)
    w = np.float64(w)
    with np.errstate(divide="ignore", invalid="ignore"):
        rv = max(rs, rl) / (q_target ** 2 + 1)
        qs, ql = -xs / rs, -xl / rl
        rps, rpl = rs * (1 + qs ** 2), rl * (1 + ql ** 2)
        qxs, qxl = np.sqrt(rps / rv - 1), np.sqrt(rpl / rv - 1)

        # inductor in the middle; port susceptance is subtracted from the shunt caps
        cs = qxs / (w * rps) - qs / (rps * w)
        cl = qxl / (w * rpl) - ql / (rpl * w)
        l = qxs * rv / w + qxl * rv / w

        # capacitor in the middle; the port inductance sits in parallel with ls/ll
        ls = rps / (w * qxs)
        if qs != 0:
            lps = rps / (qs * w)
            ls = ls * lps / (ls + lps)
        ll = rpl / (w * qxl)
        if ql != 0:
            lpl = rpl / (ql * w)
            ll = ll * lpl / (ll + lpl)
        c_source = 1 / (w * qxs * rv)
        c_load = 1 / (w * qxl * rv)
        c = c_source * c_load / (c_source + c_load)

    return _finish(c, cs, cl, l, ls, ll, q_target, c_unit, l_unit, c_label, l_label)


def calc_tee(zs, zl, w, q_target, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> PiTee:
    """
    Tee network: series - shunt - series.

    Inductor-middle: series cs, shunt l, series cl.
    Capacitor-middle: series ls, shunt c, series ll.
    """
    c_unit, l_unit, c_label, l_label = unit_labels(c_unit, l_unit)
    screened = _screen(zs, zl, q_target, c_label, l_label)
    if screened is not None:
        return screened

    rs, xs = split(zs)
    rl, xl = split(zl)
    w = np.float64(w)
    with np.errstate(divide="ignore", invalid="ignore"):
        rv = min(rs, rl) * (q_target ** 2 + 1)
        qxs, qxl = np.sqrt(rv / rs - 1), np.sqrt(rv / rl - 1)

        # inductor in the middle; the port reactance is in series with cs/cl
        cs = 1 / (w * rs * qxs)
        if xs != 0:
            cs = absorb(cs, -1 / (w * xs))
        cl = 1 / (w * rl * qxl)
        if xl != 0:
            cl = absorb(cl, -1 / (w * xl))
        l_source = rv / (w * qxs)
        l_load = rv / (w * qxl)
        l = l_source * l_load / (l_source + l_load)

        # capacitor in the middle
        ls = qxs * rs / w - xs / w
        ll = qxl * rl / w - xl / w
        c = qxs / (w * rv) + qxl / (w * rv)

    return _finish(c, cs, cl, l, ls, ll, q_target, c_unit, l_unit, c_label, l_label)
