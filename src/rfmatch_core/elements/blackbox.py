# src/rfmatch_core/elements/blackbox.py
"""
Elements described only by their impedance: a frequency-independent black
box and a user look-up table.
"""
import logging
from typing import Sequence

import numpy as np

from ..rf_utils import interpolate_lut
from .base import ElementBase, Orientation, register_element

logger = logging.getLogger(__name__)


@register_element("blackbox", "bb", "black_box")
class BlackBox(ElementBase):
    """
    A fixed R + jX in series. With `differential` set the values describe a
    balanced load and are halved before use.
    """
    value_labels = ("res", "reac")
    value_fields = ("res", "reac")
    fixed_orientation = Orientation.SERIES

    def __init__(self, res: float = 50.0, reac: float = 0.0, differential: bool = False,
                 orientation=Orientation.SERIES, tolerances=None):
        super().__init__(orientation, tolerances)
        self.res = float(res)
        self.reac = float(reac)
        self.differential = bool(differential)

    def z(self, freq) -> complex:
        z = complex(self.res, self.reac)
        return z / 2 if self.differential else z


@register_element("custom_z", "customZ")
class CustomImpedance(ElementBase):
    """A series impedance interpolated from (f_hz, R, X) table rows."""
    fixed_orientation = Orientation.SERIES

    def __init__(self, lut: Sequence[Sequence[float]] = ((0.0, 50.0, 0.0),), orientation=Orientation.SERIES, tolerances=None):
        super().__init__(orientation, tolerances)
        self.lut = np.asarray(lut, dtype=float)

    def z(self, freq) -> complex:
        return interpolate_lut(self.lut, freq)
