# --- src/rfmatch_core/frequency.py ---
import logging
import math
from dataclasses import dataclass
from typing import Union

from .constants import SPEED_OF_LIGHT
from .units import Unit, ureg, scale, unscale, parse_unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frequency:
    """An operating frequency held in a display unit, e.g. Frequency(280, Unit.GIGA)."""
    value: float
    unit: Unit = Unit.BASE

    def __post_init__(self):
        object.__setattr__(self, "unit", parse_unit(self.unit))

    @property
    def hz(self) -> float:
        return unscale(self.value, self.unit)

    @property
    def w(self) -> float:
        """Angular frequency in rad/s."""
        return 2 * math.pi * self.hz

    def wavelength(self, er: float = 1.0) -> float:
        """Guided wavelength in metres for relative permittivity `er`."""
        return SPEED_OF_LIGHT / (self.hz * math.sqrt(er))

    def beta(self, er: float = 1.0) -> float:
        """Phase constant in rad/m."""
        return self.w * math.sqrt(er) / SPEED_OF_LIGHT

    def converted(self, unit) -> "Frequency":
        unit = parse_unit(unit)
        return Frequency(scale(self.hz, unit), unit)

    @classmethod
    def from_quantity(cls, value: Union[str, float, int], unit=Unit.BASE) -> "Frequency":
        """
        Builds a Frequency from a Pint-parsable string ("280 GHz") or a bare
        number in Hz. The result is expressed in `unit`.
        """
        if isinstance(value, (int, float)):
            hz = float(value)
        else:
            hz = ureg.Quantity(value).to("Hz").magnitude
        unit = parse_unit(unit)
        return cls(scale(hz, unit), unit)

    def __str__(self) -> str:
        return f"{self.hz:.4e} Hz"


def as_hz(freq: Union["Frequency", float, int]) -> float:
    """Accepts either a Frequency or a plain number of hertz."""
    if isinstance(freq, Frequency):
        return freq.hz
    return float(freq)


__all__ = ["Frequency", "as_hz"]
