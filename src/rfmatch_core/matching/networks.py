# src/rfmatch_core/matching/networks.py
"""
Entry points of the matching engine.

`calc_networks` normalizes a source/load pair given in any of the supported
representations and runs every topology solver on it. `change_impedance`
re-expresses a source/load pair in another representation.
"""
import logging
import math
from enum import Enum
from typing import Tuple

import numpy as np

from ..frequency import as_hz
from ..rf_utils import calc_gamma, calc_rc, calc_z, calc_z_from_rc, to_mag_angle
from ..units import Unit, parse_unit
from .ell import calc_hp_ell_cl, calc_hp_ell_lc, calc_lp_ell_cl, calc_lp_ell_lc
from .ell_w_q import calc_hp_ell_cl_w_q, calc_hp_ell_lc_w_q, calc_lp_ell_cl_w_q, calc_lp_ell_lc_w_q
from .exceptions import MatchingRequestError
from .ladder import calc_bp1, calc_bp2, calc_bp3, calc_bp4, calc_hp1, calc_hp2, calc_lp1, calc_lp2
from .pitee import calc_pi, calc_tee
from .results import MatchingNetworks

logger = logging.getLogger(__name__)


class ImpedanceRepresentation(Enum):
    """How a (a, b) pair describes a port."""
    ZRI = "zri"  # R + jX ohms
    YRI = "yri"  # G + jB siemens
    GMA = "gma"  # |Γ|, angle in degrees
    GRI = "gri"  # Re(Γ) + j Im(Γ)
    RC = "rc"    # parallel R ohms, C in the capacitance unit

    @classmethod
    def parse(cls, value, error_details: str) -> "ImpedanceRepresentation":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            raise MatchingRequestError(error_details, str(value), [m.value for m in cls]) from None


Z_SCALES = ("se", "diff")


def to_impedance(a: float, b: float, rep, z0: float = 50.0, freq=1.0, c_unit=Unit.FEMTO) -> complex:
    """Impedance in ohms of a port described by (a, b) in representation `rep`."""
    rep = ImpedanceRepresentation.parse(rep, "Impedance type not recognized")
    with np.errstate(divide="ignore", invalid="ignore"):
        if rep is ImpedanceRepresentation.ZRI:
            return complex(a, b)
        if rep is ImpedanceRepresentation.YRI:
            return complex(1 / np.complex128(complex(a, b)))
        if rep is ImpedanceRepresentation.GMA:
            return calc_z(complex(np.complex128(a * np.exp(1j * math.radians(b)))), z0)
        if rep is ImpedanceRepresentation.GRI:
            return calc_z(complex(a, b), z0)
    return calc_z_from_rc(a, b, freq, Unit.BASE, c_unit)


def from_impedance(z: complex, rep, z0: float = 50.0, freq=1.0, c_unit=Unit.FEMTO) -> Tuple[float, float]:
    """Inverse of `to_impedance`."""
    rep = ImpedanceRepresentation.parse(rep, "impedance unit(s) not recognized")
    if rep is ImpedanceRepresentation.ZRI:
        z = complex(z)
        return z.real, z.imag
    if rep is ImpedanceRepresentation.YRI:
        with np.errstate(divide="ignore", invalid="ignore"):
            y = complex(1 / np.complex128(z))
        return y.real, y.imag
    if rep is ImpedanceRepresentation.GMA:
        return to_mag_angle(calc_gamma(z, z0))
    if rep is ImpedanceRepresentation.GRI:
        gamma = calc_gamma(z, z0)
        return gamma.real, gamma.imag
    return calc_rc(z, freq, Unit.BASE, c_unit)


def calc_networks(
    rs: float,
    xs: float,
    rl: float,
    xl: float,
    imp="zri",
    q_net: float = 1.0,
    q: float = 1.0,
    z0: float = 50.0,
    freq=275e9,
    c_unit=Unit.FEMTO,
    l_unit=Unit.PICO,
    z_scale: str = "se",
) -> MatchingNetworks:
    """
    Runs every matching topology for one source/load pair.

    Args:
        rs, xs, rl, xl: The two ports in representation `imp`.
        q_net: Loaded Q the pi and tee networks are designed for.
        q: Target Q handed to the Q-constrained ell solvers.
        freq: A `Frequency` or a value in Hz.
        z_scale: "se" for single-ended ports, "diff" to halve both
            impedances of a differential pair.

    Raises:
        MatchingRequestError: `imp` or `z_scale` is not recognized.
    """
    c_unit, l_unit = parse_unit(c_unit), parse_unit(l_unit)
    if z_scale not in Z_SCALES:
        raise MatchingRequestError("Impedance type not recognized", str(z_scale), Z_SCALES)
    zs = to_impedance(rs, xs, imp, z0, freq, c_unit)
    zl = to_impedance(rl, xl, imp, z0, freq, c_unit)
    if z_scale == "diff":
        zs, zl = zs / 2, zl / 2

    w = 2 * math.pi * as_hz(freq)
    logger.debug("Matching zs=%s to zl=%s at w=%.6g rad/s.", zs, zl, w)
    return MatchingNetworks(
        zs=zs,
        zl=zl,
        hp_ell_cl=calc_hp_ell_cl(zs, zl, w, c_unit, l_unit),
        hp_ell_lc=calc_hp_ell_lc(zs, zl, w, c_unit, l_unit),
        lp_ell_cl=calc_lp_ell_cl(zs, zl, w, c_unit, l_unit),
        lp_ell_lc=calc_lp_ell_lc(zs, zl, w, c_unit, l_unit),
        hp_ell_cl_w_q=calc_hp_ell_cl_w_q(zs, zl, q, w, c_unit, l_unit),
        hp_ell_lc_w_q=calc_hp_ell_lc_w_q(zs, zl, q, w, c_unit, l_unit),
        lp_ell_cl_w_q=calc_lp_ell_cl_w_q(zs, zl, q, w, c_unit, l_unit),
        lp_ell_lc_w_q=calc_lp_ell_lc_w_q(zs, zl, q, w, c_unit, l_unit),
        lp1=calc_lp1(zs, zl, w, c_unit, l_unit),
        lp2=calc_lp2(zs, zl, w, c_unit, l_unit),
        hp1=calc_hp1(zs, zl, w, c_unit, l_unit),
        hp2=calc_hp2(zs, zl, w, c_unit, l_unit),
        bp1=calc_bp1(zs, zl, w, c_unit, l_unit),
        bp2=calc_bp2(zs, zl, w, c_unit, l_unit),
        bp3=calc_bp3(zs, zl, w, c_unit, l_unit),
        bp4=calc_bp4(zs, zl, w, c_unit, l_unit),
        pi=calc_pi(zs, zl, w, q_net, c_unit, l_unit),
        tee=calc_tee(zs, zl, w, q_net, c_unit, l_unit),
    )


def change_impedance(
    rs: float,
    xs: float,
    rl: float,
    xl: float,
    imp_in,
    imp_out,
    z0: float = 50.0,
    freq=275e9,
    c_unit=Unit.FEMTO,
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    Converts a source/load pair between representations.

    Returns:
        ((a_source, b_source), (a_load, b_load)) in `imp_out`.
    """
    details = "impedance unit(s) not recognized"
    rep_in = ImpedanceRepresentation.parse(imp_in, details)
    rep_out = ImpedanceRepresentation.parse(imp_out, details)
    if rep_in is rep_out:
        return (rs, xs), (rl, xl)

    c_unit = parse_unit(c_unit)
    zs = to_impedance(rs, xs, rep_in, z0, freq, c_unit)
    zl = to_impedance(rl, xl, rep_in, z0, freq, c_unit)
    return from_impedance(zs, rep_out, z0, freq, c_unit), from_impedance(zl, rep_out, z0, freq, c_unit)
