# src/rfmatch_core/elements/lumped.py
"""
Lumped two-terminal elements: R, C, L and a series R-L-C.

Capacitors and inductors take their loss either as a series resistance or,
when the resistance slot carries the `Q` pseudo-unit, as a quality factor at
the operating frequency. A Q of zero means lossless.
"""
import logging

import numpy as np

from ..constants import ZERO_TOLERANCE
from ..units import Unit, parse_unit, unscale
from .base import ElementBase, Orientation, angular_frequency, register_element

logger = logging.getLogger(__name__)


def _is_zero(value: float) -> bool:
    return abs(value) <= ZERO_TOLERANCE


@register_element("resistor", "res", "r")
class Resistor(ElementBase):
    value_labels = ("res",)
    value_fields = ("res",)
    unit_fields = ("res",)

    def __init__(self, res: float = 0.0, res_unit=Unit.BASE, orientation=Orientation.SERIES, tolerances=None):
        super().__init__(orientation, tolerances)
        self.res = float(res)
        self.res_unit = parse_unit(res_unit)

    def z(self, freq) -> complex:
        return complex(unscale(self.res, self.res_unit), 0.0)


@register_element("capacitor", "cap", "c")
class Capacitor(ElementBase):
    value_labels = ("res", "cap")
    value_fields = ("res", "cap")
    unit_fields = ("res", "cap")

    def __init__(
        self,
        res: float = 0.0,
        cap: float = 20.0,
        res_unit=Unit.BASE,
        cap_unit=Unit.FEMTO,
        orientation=Orientation.SERIES,
        tolerances=None,
    ):
        super().__init__(orientation, tolerances)
        self.res = float(res)
        self.cap = float(cap)
        self.res_unit = parse_unit(res_unit)
        self.cap_unit = parse_unit(cap_unit)

    def z(self, freq) -> complex:
        w = angular_frequency(freq)
        c = np.float64(unscale(self.cap, self.cap_unit))
        with np.errstate(divide="ignore", invalid="ignore"):
            if self.res_unit is Unit.Q:
                r = 0.0 if _is_zero(self.res) else 1.0 / (w * c * self.res)
            else:
                r = unscale(self.res, self.res_unit)
            return complex(float(r), float(-1.0 / (w * c)))


@register_element("inductor", "ind", "l")
class Inductor(ElementBase):
    value_labels = ("res", "ind")
    value_fields = ("res", "ind")
    unit_fields = ("res", "ind")

    def __init__(
        self,
        res: float = 0.0,
        ind: float = 10.0,
        res_unit=Unit.BASE,
        ind_unit=Unit.PICO,
        orientation=Orientation.SERIES,
        tolerances=None,
    ):
        super().__init__(orientation, tolerances)
        self.res = float(res)
        self.ind = float(ind)
        self.res_unit = parse_unit(res_unit)
        self.ind_unit = parse_unit(ind_unit)

    def z(self, freq) -> complex:
        w = angular_frequency(freq)
        x = w * np.float64(unscale(self.ind, self.ind_unit))
        with np.errstate(divide="ignore", invalid="ignore"):
            if self.res_unit is Unit.Q:
                r = 0.0 if _is_zero(self.res) else x / self.res
            else:
                r = unscale(self.res, self.res_unit)
        return complex(float(r), float(x))


@register_element("rlc", "res_ind_cap", "resistor_inductor_capacitor")
class Rlc(ElementBase):
    """Series R, L and C. A zero capacitance drops the capacitive term instead of shorting it."""
    value_labels = ("res", "ind", "cap")
    value_fields = ("res", "ind", "cap")
    unit_fields = ("res", "ind", "cap")

    def __init__(
        self,
        res: float = 0.0,
        ind: float = 0.0,
        cap: float = 0.0,
        res_unit=Unit.BASE,
        ind_unit=Unit.PICO,
        cap_unit=Unit.FEMTO,
        orientation=Orientation.SERIES,
        tolerances=None,
    ):
        super().__init__(orientation, tolerances)
        self.res = float(res)
        self.ind = float(ind)
        self.cap = float(cap)
        self.res_unit = parse_unit(res_unit)
        self.ind_unit = parse_unit(ind_unit)
        self.cap_unit = parse_unit(cap_unit)

    def z(self, freq) -> complex:
        w = angular_frequency(freq)
        x = w * np.float64(unscale(self.ind, self.ind_unit))
        c = np.float64(unscale(self.cap, self.cap_unit))
        if not _is_zero(self.cap):
            with np.errstate(divide="ignore", invalid="ignore"):
                x = x - 1.0 / (w * c)
        return complex(float(unscale(self.res, self.res_unit)), float(x))
