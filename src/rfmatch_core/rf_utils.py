# --- src/rfmatch_core/rf_utils.py ---
"""
Impedance and reflection-coefficient primitives.

All arithmetic is carried out on numpy scalars under `np.errstate` so that a
short (Γ = -1), an open (Γ = 1) or a zero frequency yields IEEE inf/NaN instead
of raising ZeroDivisionError. Results are handed back as plain Python numbers.
"""
import cmath
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

import numpy as np

from .errors import MalformedRequestError
from .frequency import as_hz
from .units import Unit, parse_unit, scale, unscale

logger = logging.getLogger(__name__)


def _complex(value) -> np.complex128:
    return np.complex128(value)


def calc_gamma(z: complex, z0: float = 50.0) -> complex:
    """Reflection coefficient of `z` against the reference impedance `z0`."""
    z = _complex(z)
    with np.errstate(divide="ignore", invalid="ignore"):
        return complex((z - z0) / (z + z0))


def calc_z(gamma: complex, z0: float = 50.0) -> complex:
    """Impedance in ohms seen through a reflection coefficient."""
    gamma = _complex(gamma)
    with np.errstate(divide="ignore", invalid="ignore"):
        return complex(z0 * (1 + gamma) / (1 - gamma))


def calc_z_norm(gamma: complex) -> complex:
    """Normalized impedance z/z0 for a reflection coefficient."""
    gamma = _complex(gamma)
    with np.errstate(divide="ignore", invalid="ignore"):
        return complex((1 + gamma) / (1 - gamma))


def calc_rc(z: complex, freq, r_unit=Unit.BASE, c_unit=Unit.BASE) -> Tuple[float, float]:
    """
    Parallel R || C equivalent of an impedance at one frequency.

    Returns:
        (R, C) in the requested display units. A negative C means the
        susceptance is inductive at this frequency.
    """
    r_unit, c_unit = parse_unit(r_unit), parse_unit(c_unit)
    w = np.float64(2 * math.pi * as_hz(freq))
    with np.errstate(divide="ignore", invalid="ignore"):
        y = 1 / _complex(z)
        r = scale(1 / np.float64(y.real), r_unit)
        c = scale(np.float64(y.imag) / w, c_unit)
    return float(r), float(c)


def calc_z_from_rc(r: float, c: float, freq, r_unit=Unit.BASE, c_unit=Unit.BASE) -> complex:
    """Impedance of a parallel R || C pair; the inverse of `calc_rc`."""
    w = np.float64(2 * math.pi * as_hz(freq))
    r_si = np.float64(unscale(r, parse_unit(r_unit)))
    c_si = np.float64(unscale(c, parse_unit(c_unit)))
    with np.errstate(divide="ignore", invalid="ignore"):
        return complex(1 / np.complex128(complex(1 / r_si, w * c_si)))


def calc_gamma_from_rc(r: float, c: float, z0: float, freq, r_unit=Unit.BASE, c_unit=Unit.BASE) -> complex:
    return calc_gamma(calc_z_from_rc(r, c, freq, r_unit, c_unit), z0)


class ComplexFormat(Enum):
    """How a pair of real numbers encodes a complex value."""
    RI = "ri"
    MA = "ma"
    DB = "db"

    @classmethod
    def parse(cls, text) -> "ComplexFormat":
        if isinstance(text, cls):
            return text
        try:
            return _COMPLEX_FORMAT_ALIASES[str(text).strip().lower()]
        except KeyError:
            raise MalformedRequestError("ComplexType not recognized") from None


_COMPLEX_FORMAT_ALIASES = {
    "ri": ComplexFormat.RI, "reim": ComplexFormat.RI,
    "ma": ComplexFormat.MA, "magang": ComplexFormat.MA,
    "db": ComplexFormat.DB, "dbang": ComplexFormat.DB,
}


def gen_complex(a: float, b: float, fmt="ri") -> complex:
    """
    Builds a complex number from two reals.

    ri: a + jb.  ma: magnitude a at b degrees.  db: 20*log10 magnitude a at b degrees.
    """
    fmt = ComplexFormat.parse(fmt)
    if fmt is ComplexFormat.RI:
        return complex(a, b)
    if fmt is ComplexFormat.MA:
        return cmath.rect(a, b * math.pi / 180)
    return cmath.rect(10 ** (a / 20), b * math.pi / 180)


def to_mag_angle(value: complex) -> Tuple[float, float]:
    """Magnitude and angle in degrees."""
    return abs(value), math.degrees(cmath.phase(value))


def calc_z_to_gamma(z: complex, z0: float = 50.0) -> Tuple[float, float, float, float]:
    """Γ of `z` as (re, im, |Γ|, angle in degrees)."""
    gamma = calc_gamma(z, z0)
    mag, ang = to_mag_angle(gamma)
    return gamma.real, gamma.imag, mag, ang


@dataclass(frozen=True)
class ImpedanceReport:
    """One impedance expressed in every form the matching tools display."""
    z: complex
    gamma: complex
    gamma_mag: float
    gamma_ang_deg: float
    r: float
    c: float
    z0: float
    freq_hz: float


IMPEDANCE_INPUTS = ("z", "ri", "ma", "db", "rc")


def calc_impedance(
    a: float,
    b: float,
    rep: str = "z",
    z0: float = 50.0,
    freq=1e9,
    r_unit=Unit.BASE,
    c_unit=Unit.BASE,
) -> ImpedanceReport:
    """
    Converts a single impedance given in any supported representation.

    Args:
        a, b: The two numbers of the representation.
        rep: 'z' (R + jX ohms), 'ri' / 'ma' / 'db' (reflection coefficient in the
             matching `gen_complex` format) or 'rc' (parallel R in ohms, C in `c_unit`).
        z0: Reference impedance.
        freq: Frequency object or hertz, used for the R || C form.
    """
    rep = str(rep).strip().lower()
    freq_hz = as_hz(freq)
    if rep == "z":
        z = complex(a, b)
        gamma = calc_gamma(z, z0)
    elif rep in ("ri", "ma", "db"):
        gamma = gen_complex(a, b, rep)
        z = calc_z(gamma, z0)
    elif rep == "rc":
        z = calc_z_from_rc(a, b, freq_hz, r_unit, c_unit)
        gamma = calc_gamma(z, z0)
    else:
        raise MalformedRequestError(f"impedance representation '{rep}' not recognized")

    r, c = calc_rc(z, freq_hz, r_unit, c_unit)
    mag, ang = to_mag_angle(gamma)
    return ImpedanceReport(z=z, gamma=gamma, gamma_mag=mag, gamma_ang_deg=ang, r=r, c=c, z0=z0, freq_hz=freq_hz)


def interpolate_lut(lut: Sequence[Sequence[float]], freq) -> complex:
    """
    Impedance from a frequency-sorted table of (f_hz, R, X) rows.

    Inside the table the two rows bracketing `freq` are linearly interpolated.
    Outside it, or when the bracket reaches the final row, the nearest row is
    returned unchanged.
    """
    table = np.asarray(lut, dtype=float)
    if table.ndim != 2 or table.shape[0] == 0 or table.shape[1] < 3:
        raise MalformedRequestError("impedance table must be a non-empty list of (f, R, X) rows")
    f = as_hz(freq)
    above = np.nonzero(table[:, 0] > f)[0]
    idx = int(above[0]) if above.size else table.shape[0] - 1
    if idx == 0 or idx == table.shape[0] - 1:
        return complex(table[idx, 1], table[idx, 2])

    f0, r0, x0 = table[idx - 1, :3]
    f1, r1, x1 = table[idx, :3]
    t = (f - f0) / (f1 - f0)
    return complex(r0 + (r1 - r0) * t, x0 + (x1 - x0) * t)
