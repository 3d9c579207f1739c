# src/rfmatch_core/conjugate.py
"""
Simultaneous conjugate match of a two-port.

From the four S-parameters this computes the Rollett stability factor k,
the maximum available gain, and the source/load reflection coefficients
that present a conjugate match at both ports.
"""
import logging
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .frequency import as_hz
from .rf_utils import calc_rc, calc_z, gen_complex
from .units import Unit, UnitType, format_unit, parse_unit

logger = logging.getLogger(__name__)

SParameter = Tuple[float, float]


@dataclass(frozen=True)
class MatchedPort:
    gamma: complex
    z: complex
    r: float
    c: float
    z0: float
    freq_hz: float
    r_unit: str = "Ω"
    c_unit: str = "fF"


@dataclass(frozen=True)
class ConjugateMatch:
    """
    k and the b1/b2 discriminants decide stability; `mag` is in dB and is
    only meaningful when k > 1.
    """
    k: float
    b1: float
    b2: float
    mag: float
    source: MatchedPort
    load: MatchedPort

    @property
    def unconditionally_stable(self) -> bool:
        return self.k > 1 and self.b1 > 0


def _sign(value: float) -> float:
    return math.copysign(1.0, value)


def _port(gamma: complex, z0: float, freq_hz: float, c_unit: Unit) -> MatchedPort:
    z = calc_z(gamma, z0)
    r, c = calc_rc(z, freq_hz, Unit.BASE, c_unit)
    return MatchedPort(
        gamma=gamma,
        z=z,
        r=r,
        c=c,
        z0=z0,
        freq_hz=freq_hz,
        r_unit=format_unit(Unit.BASE, UnitType.OHM),
        c_unit=format_unit(c_unit, UnitType.FARAD),
    )


def calc_match(
    s11: SParameter,
    s12: SParameter,
    s21: SParameter,
    s22: SParameter,
    fmt="ri",
    z0: float = 50.0,
    freq=1e9,
    c_unit=Unit.FEMTO,
) -> ConjugateMatch:
    """
    Args:
        s11, s12, s21, s22: (a, b) pairs read with `gen_complex(a, b, fmt)`.
        fmt: 'ri', 'ma' or 'db'.
        freq: A `Frequency` or hertz; used only for the R || C equivalents.

    Raises:
        MalformedRequestError: `fmt` is not a known complex format.
    """
    c_unit = parse_unit(c_unit)
    freq_hz = as_hz(freq)
    s11, s12, s21, s22 = (np.complex128(gen_complex(a, b, fmt)) for a, b in (s11, s12, s21, s22))

    with np.errstate(divide="ignore", invalid="ignore"):
        delta = s11 * s22 - s12 * s21
        k = (1 + abs(delta) ** 2 - abs(s11) ** 2 - abs(s22) ** 2) / (2 * abs(s12) * abs(s21))
        b1 = 1 + abs(s11) ** 2 - abs(s22) ** 2 - abs(delta) ** 2
        b2 = 1 + abs(s22) ** 2 - abs(s11) ** 2 - abs(delta) ** 2
        mag = 10 * np.log10(abs(s21) / abs(s12)) + 10 * np.log10(abs(k - _sign(b1) * np.sqrt(k ** 2 - 1)))

        c2 = s22 - delta * np.conj(s11)
        gamma_load_mag = (b2 - _sign(b2) * np.sqrt(b2 ** 2 - 4 * abs(c2) ** 2)) / (2 * abs(c2))
        gamma_load = complex(gamma_load_mag * np.exp(-1j * np.angle(c2)))
        gamma_src = complex(np.conj(s11 + s12 * s21 * gamma_load / (1 - gamma_load * s22)))

    if not k > 1:
        logger.debug("Two-port is not unconditionally stable (k=%s); the match is not physical.", k)
    return ConjugateMatch(
        k=float(k),
        b1=float(b1),
        b2=float(b2),
        mag=float(mag),
        source=_port(gamma_src, z0, freq_hz, c_unit),
        load=_port(gamma_load, z0, freq_hz, c_unit),
    )
