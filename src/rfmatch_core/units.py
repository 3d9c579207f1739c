# --- src/rfmatch_core/units.py ---
"""
Display units and the shared Pint registry.

Element values and matching results travel through the package as plain
floats expressed in a *display unit* (fF, pH, GHz, ...). The `Unit` enum names
the SI prefix of such a value; `scale` converts an SI value into display units
and `unscale` converts back. Three pseudo-units (Q, K, N) do not scale at all:
they only tell an element how to interpret a value slot (quality factor,
coupling coefficient, turns ratio). `Unit.LAMBDA` expresses a length in
wavelengths and therefore needs the operating frequency and permittivity.

Pint is used wherever free-form quantity strings ("280 GHz", "100 um") enter
the package; see `rfmatch_core.config`.
"""
import logging
import math
from enum import Enum
from typing import Dict

import pint

from .constants import SPEED_OF_LIGHT
from .errors import MalformedRequestError

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.info("Pint Unit Registry initialized.")


class Unit(Enum):
    TERA = "tera"
    GIGA = "giga"
    MEGA = "mega"
    KILO = "kilo"
    BASE = "base"
    MILLI = "milli"
    MICRO = "micro"
    NANO = "nano"
    PICO = "pico"
    FEMTO = "femto"
    LAMBDA = "lambda"
    Q = "q"
    K = "k"
    N = "n"

    def scale(self, freq_hz: float = 1.0, er: float = 1.0) -> float:
        """Multiplier that takes an SI value into this display unit."""
        if self is Unit.LAMBDA:
            return SPEED_OF_LIGHT / (freq_hz * math.sqrt(er))
        return _PREFIX_SCALE.get(self, 1.0)

    def unscale(self, freq_hz: float = 1.0, er: float = 1.0) -> float:
        return 1.0 / self.scale(freq_hz, er)

    @property
    def is_selector(self) -> bool:
        """True for Q, K and N, which select an interpretation instead of a scale."""
        return self in (Unit.Q, Unit.K, Unit.N)


_PREFIX_SCALE: Dict[Unit, float] = {
    Unit.TERA: 1e-12,
    Unit.GIGA: 1e-9,
    Unit.MEGA: 1e-6,
    Unit.KILO: 1e-3,
    Unit.BASE: 1.0,
    Unit.MILLI: 1e3,
    Unit.MICRO: 1e6,
    Unit.NANO: 1e9,
    Unit.PICO: 1e12,
    Unit.FEMTO: 1e15,
}

_PREFIX_SYMBOL: Dict[Unit, str] = {
    Unit.TERA: "T",
    Unit.GIGA: "G",
    Unit.MEGA: "M",
    Unit.KILO: "k",
    Unit.BASE: "",
    Unit.MILLI: "m",
    Unit.MICRO: "μ",
    Unit.NANO: "n",
    Unit.PICO: "p",
    Unit.FEMTO: "f",
    Unit.LAMBDA: "λ",
    Unit.Q: "Q",
    Unit.K: "K",
    Unit.N: "N",
}

# Case matters: "m" is milli and "M" is mega, "k" is kilo and "K" is coupling.
_UNIT_ALIASES: Dict[str, Unit] = {}
for _unit, _aliases in (
    (Unit.TERA, ("tera", "T", "THz", "thz")),
    (Unit.GIGA, ("giga", "G", "GHz", "ghz", "GΩ")),
    (Unit.MEGA, ("mega", "M", "MHz", "mhz", "MΩ")),
    (Unit.KILO, ("kilo", "k", "kHz", "khz", "kΩ")),
    (Unit.MILLI, ("milli", "m", "mΩ", "mF", "mH")),
    (Unit.MICRO, ("micro", "u", "uΩ", "μΩ", "uF", "μF", "uH", "μH", "um", "μm")),
    (Unit.NANO, ("nano", "n", "nΩ", "nF", "nH")),
    (Unit.PICO, ("pico", "p", "pΩ", "pF", "pH")),
    (Unit.FEMTO, ("femto", "f", "fΩ", "fF", "fH")),
    (Unit.LAMBDA, ("lambda", "λ", "wavelength")),
    (Unit.Q, ("Q", "q")),
    (Unit.K, ("K",)),
    (Unit.N, ("N",)),
):
    for _alias in _aliases:
        _UNIT_ALIASES[_alias] = _unit


class UnitType(Enum):
    FARAD = "F"
    HENRY = "H"
    OHM = "Ω"
    HZ = "Hz"


_UNIT_TYPE_ALIASES: Dict[str, UnitType] = {}
for _kind, _aliases in (
    (UnitType.FARAD, ("c", "cap", "capacitor", "F")),
    (UnitType.HENRY, ("l", "ind", "inductor", "H")),
    (UnitType.OHM, ("r", "res", "resistor", "Ω")),
    (UnitType.HZ, ("f", "freq", "frequency", "Hz", "hz")),
):
    for _alias in _aliases:
        _UNIT_TYPE_ALIASES[_alias] = _kind


def parse_unit(text) -> Unit:
    """
    Maps a unit alias to a `Unit`. Anything unrecognized (including the empty
    string) is taken to mean the base unit.
    """
    if isinstance(text, Unit):
        return text
    unit = _UNIT_ALIASES.get(str(text).strip(), Unit.BASE)
    logger.debug(f"Parsed unit '{text}' -> {unit.name}")
    return unit


def parse_unit_type(text) -> UnitType:
    if isinstance(text, UnitType):
        return text
    try:
        return _UNIT_TYPE_ALIASES[str(text).strip()]
    except KeyError:
        raise MalformedRequestError(f"unit type '{text}' not recognized") from None


def format_unit(unit, kind) -> str:
    """Renders a display unit, e.g. (FEMTO, FARAD) -> 'fF', (BASE, OHM) -> 'Ω'."""
    return f"{_PREFIX_SYMBOL[parse_unit(unit)]}{parse_unit_type(kind).value}"


def scale(value: float, unit: Unit, freq_hz: float = 1.0, er: float = 1.0) -> float:
    """SI value -> display value."""
    return value * unit.scale(freq_hz, er)


def unscale(value: float, unit: Unit, freq_hz: float = 1.0, er: float = 1.0) -> float:
    """Display value -> SI value."""
    return value * unit.unscale(freq_hz, er)


def get_unit_scale(text, freq_hz: float = 1.0, er: float = 1.0) -> float:
    return parse_unit(text).scale(freq_hz, er)
