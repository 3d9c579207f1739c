# src/rfmatch_core/elements/base.py

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Sequence, Tuple, Type

import numpy as np

from ..constants import DEFAULT_ARC_POINTS, SPEED_OF_LIGHT
from ..frequency import as_hz
from ..smith import ArcTrace, linear_arc
from ..units import Unit, parse_unit
from .exceptions import ElementError, UnknownElementError


logger = logging.getLogger(__name__)


class Orientation(Enum):
    SERIES = "series"
    SHUNT = "shunt"

    @property
    def rotate(self) -> bool:
        """Shunt elements are drawn in the admittance plane."""
        return self is Orientation.SHUNT

    @classmethod
    def parse(cls, value) -> "Orientation":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text in ("series", "ser", "s"):
            return cls.SERIES
        if text in ("shunt", "shnt", "parallel", "p"):
            return cls.SHUNT
        raise ElementError("Orientation", f"orientation '{value}' not recognized; use 'series' or 'shunt'")


class ElementBase(ABC):
    """
    The abstract base class for every element that can be placed in a chain.

    Concrete elements declare their value slots through `value_labels` (the
    names users see) and `value_fields` (the constructor keywords they map
    to). Slots listed in `unit_fields` also take a `<field>_unit` keyword.

    An element knows its own impedance at a frequency, how it moves a
    normalized input impedance (`cascade`), and the arc that movement traces
    on the chart (`arc`). Lumped two-terminal parts share the default series
    and shunt behaviour implemented here.
    """
    element_type_str: ClassVar[str] = "BaseElement"
    value_labels: ClassVar[Tuple[str, ...]] = ()
    value_fields: ClassVar[Tuple[str, ...]] = ()
    unit_fields: ClassVar[Tuple[str, ...]] = ()
    fixed_orientation: ClassVar[Optional[Orientation]] = None

    def __init__(self, orientation=Orientation.SERIES, tolerances: Optional[Sequence[float]] = None):
        orientation = Orientation.parse(orientation)
        if self.fixed_orientation is not None and orientation is not self.fixed_orientation:
            logger.debug(
                f"{type(self).__name__} is always {self.fixed_orientation.value}; "
                f"ignoring requested orientation '{orientation.value}'."
            )
            orientation = self.fixed_orientation
        self._orientation = orientation
        if tolerances is None:
            tolerances = [0.0] * len(self.value_fields)
        self._tolerances = [float(t) for t in tolerances]

    # --- Declared data ---

    def labels(self) -> List[str]:
        return list(self.value_labels)

    def values(self) -> List[float]:
        return [getattr(self, f) for f in self.value_fields]

    def units(self) -> List[Unit]:
        return [getattr(self, f"{f}_unit") if f in self.unit_fields else Unit.BASE for f in self.value_fields]

    def tolerances(self) -> List[float]:
        return list(self._tolerances)

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def rotate(self) -> bool:
        return self._orientation.rotate

    # --- Impedance ---

    @abstractmethod
    def z(self, freq) -> complex:
        """Impedance in ohms at `freq` (a Frequency or hertz)."""
        raise NotImplementedError

    def r(self, freq) -> float:
        return self.z(freq).real

    def x(self, freq) -> float:
        return self.z(freq).imag

    def z_norm(self, freq, z0: float) -> complex:
        return self.z(freq) / z0

    # --- Chart behaviour ---

    def arc(self, freq, zin_norm: complex = 1 + 0j, z0: float = 50.0, npts: int = DEFAULT_ARC_POINTS, verbose: bool = False) -> ArcTrace:
        zin = np.complex128(zin_norm)
        zn = np.complex128(self.z_norm(freq, z0))
        with np.errstate(divide="ignore", invalid="ignore"):
            if self.orientation is Orientation.SERIES:
                start, end = zin, zn + zin
            else:
                start, end = 1 / zin, 1 / zn + 1 / zin
        x_coord, y_coord = linear_arc(start, end, npts, self.rotate, verbose)
        return _trace(x_coord, y_coord, start, end)

    def cascade(self, freq, zin_norm: complex, z0: float) -> complex:
        """Normalized impedance looking into this element with `zin_norm` behind it."""
        zin = np.complex128(zin_norm)
        zn = np.complex128(self.z_norm(freq, z0))
        with np.errstate(divide="ignore", invalid="ignore"):
            if self.orientation is Orientation.SERIES:
                return complex(zin + zn)
            return complex(1 / (1 / zin + 1 / zn))

    # --- Construction ---

    @classmethod
    def from_values(
        cls,
        values: Sequence[float],
        units: Optional[Sequence] = None,
        orientation=None,
        tolerances: Optional[Sequence[float]] = None,
        **extra,
    ) -> "ElementBase":
        """Builds an element from ordered value slots, as a chain file or UI row supplies them."""
        if len(values) != len(cls.value_fields):
            raise ElementError(
                cls.element_type_str,
                f"expected {len(cls.value_fields)} value(s) {list(cls.value_labels)}, got {len(values)}",
            )
        units = list(units or [])
        if len(units) > len(cls.value_fields):
            raise ElementError(cls.element_type_str, f"got {len(units)} units for {len(cls.value_fields)} value(s)")
        units += [Unit.BASE] * (len(cls.value_fields) - len(units))

        kwargs = dict(extra)
        for name, value, unit in zip(cls.value_fields, values, units):
            kwargs[name] = float(value)
            if name in cls.unit_fields:
                kwargs[f"{name}_unit"] = parse_unit(unit)
        if orientation is None:
            orientation = cls.fixed_orientation or Orientation.SERIES
        return cls(orientation=orientation, tolerances=tolerances, **kwargs)

    def __repr__(self) -> str:
        vals = ", ".join(f"{l}={v!r}" for l, v in zip(self.value_labels, self.values()))
        return f"{type(self).__name__}({vals}, orientation={self.orientation.value})"


def angular_frequency(freq) -> np.float64:
    return np.float64(2 * np.pi * as_hz(freq))


def phase_constant(freq, er: float) -> np.float64:
    """beta in rad/m for a line with relative permittivity `er`."""
    return angular_frequency(freq) * np.sqrt(np.float64(er)) / SPEED_OF_LIGHT


def _trace(x_coord, y_coord, start: complex, end: complex) -> ArcTrace:
    return ArcTrace(
        x_coord=tuple(x_coord),
        y_coord=tuple(y_coord),
        start=(float(start.real), float(start.imag)),
        end=(float(end.real), float(end.imag)),
    )


# --- Element Registry ---

ELEMENT_REGISTRY: Dict[str, Type[ElementBase]] = {}


def register_element(type_str: str, *aliases: str):
    """
    A class decorator that makes an element available by its tag (and any
    aliases) to `create_element` and the chain parser.
    """
    def decorator(cls: Type[ElementBase]):
        if not issubclass(cls, ElementBase):
            raise TypeError(f"Class {cls.__name__} must inherit from ElementBase.")
        if len(cls.value_labels) != len(cls.value_fields):
            raise TypeError(
                f"Element class '{cls.__name__}' declares {len(cls.value_labels)} labels "
                f"but {len(cls.value_fields)} value fields."
            )
        if not set(cls.unit_fields) <= set(cls.value_fields):
            raise TypeError(f"Element class '{cls.__name__}' has unit fields that are not value fields.")

        cls.element_type_str = type_str
        for tag in (type_str,) + aliases:
            if tag in ELEMENT_REGISTRY:
                logger.warning(f"Element type '{tag}' is being redefined/overwritten.")
            ELEMENT_REGISTRY[tag] = cls
        logger.info(f"Registered element type '{type_str}' -> {cls.__name__}")
        return cls
    return decorator


# Short tags that also fix the orientation, e.g. "pc" is a shunt capacitor.
ORIENTED_TAGS: Dict[str, Tuple[str, Orientation]] = {
    "sc": ("capacitor", Orientation.SERIES),
    "pc": ("capacitor", Orientation.SHUNT),
    "si": ("inductor", Orientation.SERIES),
    "pi": ("inductor", Orientation.SHUNT),
    "sr": ("resistor", Orientation.SERIES),
    "pr": ("resistor", Orientation.SHUNT),
}


def lookup_element(tag: str) -> Type[ElementBase]:
    try:
        return ELEMENT_REGISTRY[tag]
    except KeyError:
        raise UnknownElementError(tag, known_tags=list(ELEMENT_REGISTRY)) from None


def create_element(
    tag: str,
    values: Sequence[float],
    units: Optional[Sequence] = None,
    orientation=None,
    tolerances: Optional[Sequence[float]] = None,
    **extra,
) -> ElementBase:
    """Instantiates a registered element from its tag and ordered value slots."""
    if tag in ORIENTED_TAGS:
        tag, orientation = ORIENTED_TAGS[tag]
    cls = lookup_element(tag)
    element = cls.from_values(values, units, orientation=orientation, tolerances=tolerances, **extra)
    logger.debug(f"Created {element!r} from tag '{tag}'")
    return element
