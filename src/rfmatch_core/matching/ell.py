# src/rfmatch_core/matching/ell.py
"""
Two-element L-section ("ell") matching.

The `_cl` variants place the capacitor next to the source and the inductor
next to the load; the `_lc` variants are their mirror images, so
hp_ell_cl(zs, zl) == hp_ell_lc(zl, zs) and likewise for the lowpass pair.
The reported q is the loaded Q of the section.
"""
import logging

import numpy as np

from ..units import Unit
from .common import NAN, absorb, is_conjugate_pair, realizable, scale_c, scale_l, split, unit_labels
from .results import CL

logger = logging.getLogger(__name__)


def _finish(c, l, q, c_unit, l_unit, c_label, l_label) -> CL:
    c, l = scale_c(c, c_unit), scale_l(l, l_unit)
    if not realizable(c, l):
        return CL(NAN, NAN, NAN, c_label, l_label)
    return CL(c, l, float(q), c_label, l_label)


def _highpass(r_shunt, x_shunt, r_series, x_series, w, c_unit, l_unit) -> CL:
    """Shunt inductor at the (r_shunt + j x_shunt) port, series capacitor toward the other."""
    c_unit, l_unit, c_label, l_label = unit_labels(c_unit, l_unit)
    with np.errstate(divide="ignore", invalid="ignore"):
        qs = x_shunt / r_shunt
        c_port = -1 / (w * x_series)
        l_port = (1 + qs ** 2) * x_shunt / (w * qs ** 2)
        rp = (1 + qs ** 2) * r_shunt
        if r_series > rp:
            return CL(NAN, NAN, NAN, c_label, l_label)

        q = np.sqrt(rp / r_series - 1)
        l = rp / (w * q)
        c = 1 / (q * w * r_series)
        if x_series != 0:
            c = absorb(c, c_port)
        if x_shunt != 0:
            l = absorb(l, l_port)
    return _finish(c, l, q, c_unit, l_unit, c_label, l_label)


def _lowpass(r_shunt, x_shunt, r_series, x_series, w, c_unit, l_unit) -> CL:
    """Shunt capacitor at the (r_shunt + j x_shunt) port, series inductor toward the other."""
    c_unit, l_unit, c_label, l_label = unit_labels(c_unit, l_unit)
    with np.errstate(divide="ignore", invalid="ignore"):
        qs = -x_shunt / r_shunt
        rp = r_shunt * (1 + qs ** 2)
        if r_series > rp:
            return CL(NAN, NAN, NAN, c_label, l_label)

        q = np.sqrt(rp / r_series - 1)
        c = q / (rp * w) - qs / (rp * w)
        l = q * r_series / w - x_series / w
    return _finish(c, l, q, c_unit, l_unit, c_label, l_label)


def calc_hp_ell_cl(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CL:
    """Series C at the source, shunt L across the load."""
    if is_conjugate_pair(zs, zl):
        return CL(0.0, 0.0, 0.0, *unit_labels(c_unit, l_unit)[2:])
    rs, xs = split(zs)
    rl, xl = split(zl)
    return _highpass(rl, xl, rs, xs, np.float64(w), c_unit, l_unit)


def calc_hp_ell_lc(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CL:
    """Shunt L across the source, series C at the load."""
    if is_conjugate_pair(zs, zl):
        return CL(0.0, 0.0, 0.0, *unit_labels(c_unit, l_unit)[2:])
    rs, xs = split(zs)
    rl, xl = split(zl)
    return _highpass(rs, xs, rl, xl, np.float64(w), c_unit, l_unit)


def calc_lp_ell_cl(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CL:
    """Shunt C across the source, series L at the load."""
    if is_conjugate_pair(zs, zl):
        return CL(0.0, 0.0, 0.0, *unit_labels(c_unit, l_unit)[2:])
    rs, xs = split(zs)
    rl, xl = split(zl)
    return _lowpass(rs, xs, rl, xl, np.float64(w), c_unit, l_unit)


def calc_lp_ell_lc(zs, zl, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CL:
    """Series L at the source, shunt C across the load."""
    if is_conjugate_pair(zs, zl):
        return CL(0.0, 0.0, 0.0, *unit_labels(c_unit, l_unit)[2:])
    rs, xs = split(zs)
    rl, xl = split(zl)
    return _lowpass(rl, xl, rs, xs, np.float64(w), c_unit, l_unit)
