# src/rfmatch_core/matching/ell_w_q.py
"""
L-sections that hit a requested loaded Q.

The series branch carries a resistance chosen so that the network Q equals
`q_target`. Matching real and imaginary parts at once gives a quadratic in
the two reactances, so every topology has two candidate roots sharing the
same discriminant D. xp is the reactance of the inductor and xc that of the
capacitor; l = xp / w and c = -1 / (w * xc).

Root choice: root 1 is kept unless its shunt element comes out negative, or
failing that its series element does, in which case root 2 is used.
"""
import logging
from typing import Callable, NamedTuple, Tuple

import numpy as np

from ..units import Unit
from .common import NAN, is_conjugate_pair, realizable, scale_c, scale_l, split, unit_labels
from .results import CLQ

logger = logging.getLogger(__name__)


class _Roots(NamedTuple):
    xp: Callable[[np.float64], np.float64]
    xc: Callable[[np.float64], np.float64]
    discriminant: np.float64
    q_net: np.float64
    shunt_is_inductor: bool


def _hp_cl_roots(rs, xs, rl, xl, q) -> _Roots:
    rp = (1 + (xs / rs) ** 2) * rl
    d = (
        xl ** 4 - 4 * q * rs * xl ** 3
        + (-4 * rs ** 2 + 4 * q ** 2 * rl * rs + 2 * rl ** 2) * xl ** 2
        + (8 * q * rl * rs ** 2 - 4 * q * rl ** 2 * rs) * xl
        - 4 * q ** 2 * rl ** 2 * rs ** 2
        + 4 * q ** 2 * rl ** 3 * rs
        + rl ** 4
    )

    def xp(s):
        num = q * s - q * xl ** 2 + 2 * q ** 2 * rs * xl + 2 * q * rl * rs - q * rl ** 2
        return -num / ((2 * q ** 2 + 2) * rs - (2 * q ** 2 + 2) * rl)

    def xc(s):
        return ((2 * q * rl - 2 * xl) * xs + s - xl ** 2 - rl ** 2) / (2 * xl - 2 * q * rl)

    return _Roots(xp, xc, d, np.sqrt(rp / rs - 1), True)


def _hp_lc_roots(rs, xs, rl, xl, q) -> _Roots:
    rp = (1 + (xs / rs) ** 2) * rs
    d = (
        xs ** 4 - 4 * q * rl * xs ** 3
        + (2 * rs ** 2 + 4 * q ** 2 * rl * rs - 4 * rl ** 2) * xs ** 2
        + (8 * q * rl ** 2 * rs - 4 * q * rl * rs ** 2) * xs
        + rs ** 4
        + 4 * q ** 2 * rl * rs ** 3
        - 4 * q ** 2 * rl ** 2 * rs ** 2
    )

    def xp(s):
        num = q * s - q * xs ** 2 + 2 * q ** 2 * rl * xs - q * rs ** 2 + 2 * q * rl * rs
        return num / ((2 * q ** 2 + 2) * rs - (2 * q ** 2 + 2) * rl)

    def xc(s):
        return (s - xs ** 2 - 2 * xl * xs + 2 * q * rs * xl - rs ** 2) / (2 * xs - 2 * q * rs)

    return _Roots(xp, xc, d, np.sqrt(rp / rs - 1), True)


def _lp_cl_roots(rs, xs, rl, xl, q) -> _Roots:
    rp = rs * (1 + (xs / rs) ** 2)
    d = (
        xs ** 4
        + (4 * q * rs * xl + 2 * rs ** 2 + 4 * q ** 2 * rl * rs) * xs ** 2
        - 4 * rs ** 2 * xl ** 2
        + (4 * q * rs ** 3 - 8 * q * rl * rs ** 2) * xl
        + rs ** 4
        + 4 * q ** 2 * rl * rs ** 3
        - 4 * q ** 2 * rl ** 2 * rs ** 2
    )

    def xp(s):
        num = q * s - q * xs ** 2 - 2 * q ** 2 * rs * xl - q * rs ** 2 + 2 * q * rl * rs
        return num / ((2 * q ** 2 + 2) * rs)

    def xc(s):
        return (s - xs ** 2 + (-2 * xl - 2 * q * rl) * xs - rs ** 2) / (2 * xs + 2 * xl - 2 * q * rs + 2 * q * rl)

    return _Roots(xp, xc, d, np.sqrt(rp / rl - 1), False)


def _lp_lc_roots(rs, xs, rl, xl, q) -> _Roots:
    rp = rl * (1 + (xl / rl) ** 2)
    d = (
        -4 * rl ** 2 * xs ** 2
        + (4 * q * rl * xl ** 2 - 8 * q * rl ** 2 * rs + 4 * q * rl ** 3) * xs
        + xl ** 4
        + (4 * q ** 2 * rl * rs + 2 * rl ** 2) * xl ** 2
        - 4 * q ** 2 * rl ** 2 * rs ** 2
        + 4 * q ** 2 * rl ** 3 * rs
        + rl ** 4
    )

    def xp(s):
        num = q * s + 2 * q ** 2 * rl * xs + q * xl ** 2 - 2 * q * rl * rs + q * rl ** 2
        return -num / ((2 * q ** 2 + 2) * rl)

    def xc(s):
        return -(s + 2 * xl * xs + xl ** 2 + 2 * q * rs * xl + rl ** 2) / (2 * xs + 2 * xl + 2 * q * rs - 2 * q * rl)

    return _Roots(xp, xc, d, np.sqrt(rp / rs - 1), False)


def _elements(roots: _Roots, s, w) -> Tuple[np.float64, np.float64]:
    return roots.xp(s) / w, -1 / (w * roots.xc(s))


def _solve(builder, zs, zl, q_target, w, c_unit, l_unit) -> CLQ:
    c_unit, l_unit, c_label, l_label = unit_labels(c_unit, l_unit)
    if is_conjugate_pair(zs, zl):
        return CLQ(0.0, 0.0, float(q_target), 0.0, 1, c_label, l_label)

    rs, xs = split(zs)
    rl, xl = split(zl)
    q = np.float64(q_target)
    w = np.float64(w)
    with np.errstate(divide="ignore", invalid="ignore"):
        roots = builder(rs, xs, rl, xl, q)
        sqrt_d = np.sqrt(roots.discriminant)
        l, c = _elements(roots, sqrt_d, w)
        shunt, series = (l, c) if roots.shunt_is_inductor else (c, l)
        index = 1
        if shunt < 0 or series < 0:
            l, c = _elements(roots, -sqrt_d, w)
            index = 2
        q_net = roots.q_net

    c, l = scale_c(c, c_unit), scale_l(l, l_unit)
    if not realizable(c, l):
        logger.debug("No realizable root for target Q %s (tried root %d).", q_target, index)
        return CLQ(NAN, NAN, NAN, NAN, index, c_label, l_label)
    return CLQ(c, l, float(q_target), float(q_net), index, c_label, l_label)


# ---CAP---------
#          |
#         RES
#          |
#         IND
def calc_hp_ell_cl_w_q(zs, zl, q, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CLQ:
    return _solve(_hp_cl_roots, zs, zl, q, w, c_unit, l_unit)


# --------CAP----
#     |
#    RES
#     |
#    IND
def calc_hp_ell_lc_w_q(zs, zl, q, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CLQ:
    return _solve(_hp_lc_roots, zs, zl, q, w, c_unit, l_unit)


# --------RES--IND----
#     |
#    CAP
def calc_lp_ell_cl_w_q(zs, zl, q, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CLQ:
    return _solve(_lp_cl_roots, zs, zl, q, w, c_unit, l_unit)


# ---RES--IND---------
#          |
#         CAP
def calc_lp_ell_lc_w_q(zs, zl, q, w, c_unit=Unit.FEMTO, l_unit=Unit.PICO) -> CLQ:
    return _solve(_lp_lc_roots, zs, zl, q, w, c_unit, l_unit)
