# src/rfmatch_core/config.py
import logging
from typing import Any, Dict, Union

import pint

from .frequency import Frequency
from .units import Unit, ureg

logger = logging.getLogger(__name__)


class ConfigParsingError(ValueError):
    """Custom exception for errors while reading chain configuration values."""
    pass


def parse_quantity(value: Union[str, float, int], unit: str) -> float:
    """
    Magnitude of `value` in `unit`. Bare numbers are taken to already be in
    `unit`; strings go through Pint ("50 ohm", "0.3 mm").
    """
    if isinstance(value, bool):
        raise ConfigParsingError(f"Expected a quantity in '{unit}', got boolean {value!r}.")
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(ureg.Quantity(value).to(unit).magnitude)
    except (ValueError, TypeError, AttributeError, pint.DimensionalityError, pint.UndefinedUnitError) as e:
        raise ConfigParsingError(f"Failed to parse '{value}' as a quantity in '{unit}': {e}") from e


def parse_frequency(value: Union[str, float, int, Frequency], unit=Unit.GIGA) -> Frequency:
    """A `Frequency` expressed in `unit` from a Pint string or a number of hertz."""
    if isinstance(value, Frequency):
        return value.converted(unit)
    hz = parse_quantity(value, "Hz")
    if hz < 0:
        raise ConfigParsingError(f"Frequency must be non-negative, got {value!r}.")
    freq = Frequency.from_quantity(hz, unit)
    logger.debug(f"Parsed frequency {value!r} -> {freq}")
    return freq


def parse_complex(mapping: Dict[str, Any]) -> complex:
    """`{re: .., im: ..}` -> complex; a missing part is zero."""
    if not isinstance(mapping, dict):
        raise ConfigParsingError(f"Expected a mapping with 're' and 'im', got {mapping!r}.")
    unknown = set(mapping) - {"re", "im"}
    if unknown:
        raise ConfigParsingError(f"Unexpected key(s) in complex value: {sorted(unknown)}")
    try:
        return complex(float(mapping.get("re", 0.0)), float(mapping.get("im", 0.0)))
    except (TypeError, ValueError) as e:
        raise ConfigParsingError(f"Failed to parse complex value {mapping!r}: {e}") from e
