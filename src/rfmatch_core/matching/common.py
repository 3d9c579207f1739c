# src/rfmatch_core/matching/common.py
"""Arithmetic shared by the matching solvers."""
import logging
from typing import Tuple

import numpy as np

from ..units import Unit, UnitType, format_unit, parse_unit, scale

logger = logging.getLogger(__name__)

NAN = float("nan")


def split(z: complex) -> Tuple[np.float64, np.float64]:
    """Real and imaginary parts as numpy floats, so divisions by zero follow IEEE rules."""
    z = complex(z)
    return np.float64(z.real), np.float64(z.imag)


def is_conjugate_pair(zs: complex, zl: complex) -> bool:
    """A source already conjugately matched to its load needs no network at all."""
    zs, zl = complex(zs), complex(zl)
    return zs.real == zl.real and zs.imag == -zl.imag


def absorb(x: np.float64, x_port: np.float64) -> np.float64:
    """
    Folds an existing port reactance into a computed element value.

    The element and the port element combine in parallel (or in series for
    capacitors), so the element is rescaled by x_port / (x_port - x). Equal
    values would need an infinite element.
    """
    if x_port == x:
        return np.float64(np.inf)
    return x * x_port / (x_port - x)


def realizable(*values: float) -> bool:
    """Every value is a finite, non-negative component value."""
    return all(np.isfinite(v) and v >= 0.0 for v in values)


def unit_labels(c_unit, l_unit) -> Tuple[Unit, Unit, str, str]:
    c_unit, l_unit = parse_unit(c_unit), parse_unit(l_unit)
    return c_unit, l_unit, format_unit(c_unit, UnitType.FARAD), format_unit(l_unit, UnitType.HENRY)


def scale_c(value, c_unit: Unit) -> float:
    return float(scale(value, c_unit))


def scale_l(value, l_unit: Unit) -> float:
    return float(scale(value, l_unit))
