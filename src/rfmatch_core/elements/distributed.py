# src/rfmatch_core/elements/distributed.py
"""
Distributed elements: a series transmission line and open/shorted shunt stubs.

Lengths may be given in any length prefix or in wavelengths (`Unit.LAMBDA`),
which is why the physical length is always resolved against a frequency.
Phase velocity is c/sqrt(er) with c = 3e8 m/s.
"""
import logging
from typing import Tuple

import numpy as np

from ..constants import DEFAULT_ARC_POINTS, SPEED_OF_LIGHT
from ..frequency import as_hz
from ..rf_utils import calc_z_norm
from ..smith import ArcTrace, arc_smith_points
from ..units import Unit, parse_unit, unscale
from .base import ElementBase, Orientation, _trace, phase_constant, register_element

logger = logging.getLogger(__name__)


class _LineSection(ElementBase):
    value_labels = ("z0", "length")
    value_fields = ("line_z0", "length")
    unit_fields = ("length",)

    def __init__(
        self,
        line_z0: float = 50.0,
        length: float = 1.0,
        length_unit=Unit.MICRO,
        er: float = 1.0,
        orientation=Orientation.SERIES,
        tolerances=None,
    ):
        super().__init__(orientation, tolerances)
        self.line_z0 = float(line_z0)
        self.length = float(length)
        self.length_unit = parse_unit(length_unit)
        self.er = float(er)

    def length_m(self, freq) -> float:
        if self.length_unit is Unit.LAMBDA:
            # Unit.LAMBDA scales by the wavelength itself, so a count of wavelengths multiplies it
            return self.length * self.wavelength(freq)
        return unscale(self.length, self.length_unit)

    def beta(self, freq) -> np.float64:
        return phase_constant(freq, self.er)

    def betal(self, freq) -> np.float64:
        return self.beta(freq) * self.length_m(freq)

    def wavelength(self, freq) -> float:
        return SPEED_OF_LIGHT / (as_hz(freq) * np.sqrt(self.er))


@register_element("transmission_line", "tl", "tline")
class TransmissionLine(_LineSection):
    """
    A series line section of impedance `line_z0` terminated in `zl` ohms.

    `z()` reports the input impedance with the element's own `zl` as load.
    `arc` and `cascade` load the line with the running impedance instead;
    `loaded()` returns a copy whose `zl` is rebound to a given load.
    """

    def __init__(
        self,
        line_z0: float = 50.0,
        length: float = 1.0,
        length_unit=Unit.MICRO,
        zl: complex = 50 + 0j,
        er: float = 1.0,
        orientation=Orientation.SERIES,
        tolerances=None,
    ):
        super().__init__(line_z0, length, length_unit, er, orientation, tolerances)
        self.zl = complex(zl)

    def loaded(self, zl: complex) -> "TransmissionLine":
        return TransmissionLine(
            self.line_z0, self.length, self.length_unit, zl, self.er, self.orientation, self._tolerances
        )

    def _input_impedance(self, freq, zl: complex) -> complex:
        tan_bl = np.tan(self.betal(freq))
        zl = np.complex128(zl)
        z0 = self.line_z0
        with np.errstate(divide="ignore", invalid="ignore"):
            return complex(z0 * (zl + 1j * z0 * tan_bl) / (z0 + 1j * zl * tan_bl))

    def z(self, freq) -> complex:
        return self._input_impedance(freq, self.zl)

    def arc(self, freq, zin_norm: complex = 1 + 0j, z0: float = 50.0, npts: int = DEFAULT_ARC_POINTS, verbose: bool = False) -> ArcTrace:
        # the line is loaded by whatever sits behind it, not by its own `zl`
        zin = complex(zin_norm)
        points = arc_smith_points(
            zin.real,
            zin.imag,
            self.length_m(freq),
            self.line_z0,
            "transmission_line",
            False,
            beta=self.beta(freq),
            z0=z0,
            resolution=npts,
            verbose=verbose,
        )
        start = calc_z_norm(complex(points.x_coord[0], points.y_coord[0]))
        end = calc_z_norm(complex(points.end_x_coord, points.end_y_coord))
        return _trace(points.x_coord, points.y_coord, start, end)

    def cascade(self, freq, zin_norm: complex, z0: float) -> complex:
        return self._input_impedance(freq, complex(zin_norm) * z0) / z0


class _Stub(_LineSection):
    fixed_orientation = Orientation.SHUNT
    stub_type: str = ""

    def __init__(self, line_z0: float = 50.0, length: float = 1.0, length_unit=Unit.MICRO, er: float = 1.0,
                 orientation=Orientation.SHUNT, tolerances=None):
        super().__init__(line_z0, length, length_unit, er, orientation, tolerances)

    def _sweep_start(self, freq) -> float:
        return 0.0

    def _end_susceptance(self, freq, z0: float) -> float:
        raise NotImplementedError

    def arc(self, freq, zin_norm: complex = 1 + 0j, z0: float = 50.0, npts: int = DEFAULT_ARC_POINTS, verbose: bool = False) -> ArcTrace:
        with np.errstate(divide="ignore", invalid="ignore"):
            y = complex(1 / np.complex128(zin_norm))
        points = arc_smith_points(
            y.real,
            y.imag,
            self.length_m(freq),
            self.line_z0,
            self.stub_type,
            True,
            beta=self.beta(freq),
            start_at_qtr_wl=self._sweep_start(freq),
            z0=z0,
            resolution=npts,
            verbose=verbose,
        )
        end = complex(y.real, y.imag + self._end_susceptance(freq, z0))
        return _trace(points.x_coord, points.y_coord, y, end)


@register_element("open_stub", "os")
class OpenStub(_Stub):
    stub_type = "so"

    def z(self, freq) -> complex:
        with np.errstate(divide="ignore", invalid="ignore"):
            return complex(-1j * self.line_z0 / np.tan(self.betal(freq)))

    def _end_susceptance(self, freq, z0: float) -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.tan(self.betal(freq)) / (self.line_z0 / z0))


@register_element("shorted_stub", "ss", "short_stub")
class ShortedStub(_Stub):
    """
    Shorted shunt stub. Stubs shorter than half a wavelength are swept from a
    quarter wavelength, where the stub looks open, so the arc starts at the
    input admittance instead of at the short-circuit point.
    """
    stub_type = "ss"

    def z(self, freq) -> complex:
        return complex(1j * self.line_z0 * np.tan(self.betal(freq)))

    def _sweep_start(self, freq) -> float:
        wavelength = self.wavelength(freq)
        if self.length_m(freq) < 0.5 * wavelength:
            return wavelength / 4.0
        return 0.0

    def _end_susceptance(self, freq, z0: float) -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(-1.0 / (np.tan(self.betal(freq)) * self.line_z0 / z0))


def electrical_length(element: _LineSection, freq) -> Tuple[float, float]:
    """(beta*l in radians, length in wavelengths) of a line or stub."""
    betal = float(element.betal(freq))
    return betal, betal / (2 * np.pi)
