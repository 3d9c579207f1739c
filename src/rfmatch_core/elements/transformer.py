# src/rfmatch_core/elements/transformer.py
import logging
from typing import Tuple

import numpy as np

from ..constants import DEFAULT_ARC_POINTS, ZERO_TOLERANCE
from ..smith import ArcTrace, linear_arc
from ..units import Unit, parse_unit, unscale
from .base import ElementBase, Orientation, _trace, angular_frequency, register_element

logger = logging.getLogger(__name__)


@register_element("transformer", "xfmr")
class Transformer(ElementBase):
    """
    Two coupled inductors modelled as a T network: primary leg Lp - M,
    shunt mutual leg M, secondary leg Ls - M.

    Unit selectors change how the slots are read:
      - res in `Q`: the winding resistances are w*Lp/Q and w*Ls/Q.
      - inds in `N`: the secondary is N**2 * Lp (a turns ratio).
      - m in `K`: M = K * sqrt(Lp * Ls) (a coupling coefficient).
    The transformer always sits in series with the chain.
    """
    value_labels = ("res", "indp", "inds", "m")
    value_fields = ("res", "indp", "inds", "m")
    unit_fields = ("res", "indp", "inds", "m")
    fixed_orientation = Orientation.SERIES

    def __init__(
        self,
        res: float = 0.0,
        indp: float = 20.0,
        inds: float = 20.0,
        m: float = 0.5,
        res_unit=Unit.BASE,
        indp_unit=Unit.PICO,
        inds_unit=Unit.PICO,
        m_unit=Unit.K,
        orientation=Orientation.SERIES,
        tolerances=None,
    ):
        super().__init__(orientation, tolerances)
        self.res = float(res)
        self.indp = float(indp)
        self.inds = float(inds)
        self.m = float(m)
        self.res_unit = parse_unit(res_unit)
        self.indp_unit = parse_unit(indp_unit)
        self.inds_unit = parse_unit(inds_unit)
        self.m_unit = parse_unit(m_unit)

    def inductances(self) -> Tuple[float, float, float]:
        """(Lp, Ls, M) in henries."""
        lp = unscale(self.indp, self.indp_unit)
        if self.inds_unit is Unit.N:
            ls = self.inds ** 2 * lp
        else:
            ls = unscale(self.inds, self.inds_unit)
        if self.m_unit is Unit.K:
            mutual = self.m * np.sqrt(lp * ls)
        else:
            mutual = unscale(self.m, self.m_unit)
        return lp, ls, float(mutual)

    def tee(self, freq) -> Tuple[complex, complex, complex]:
        """Primary, mutual and secondary branch impedances of the T model."""
        w = angular_frequency(freq)
        lp, ls, mutual = self.inductances()
        if self.res_unit is Unit.Q:
            # Q = 0 means lossless windings
            if abs(self.res) <= ZERO_TOLERANCE:
                rp = rs = 0.0
            else:
                rp = w * lp / self.res
                rs = w * ls / self.res
        else:
            rp = rs = unscale(self.res, self.res_unit)
        z1 = np.complex128(complex(rp, w * (lp - mutual)))
        z2 = np.complex128(complex(0.0, w * mutual))
        z3 = np.complex128(complex(rs, w * (ls - mutual)))
        return z1, z2, z3

    def z(self, freq) -> complex:
        z1, z2, z3 = self.tee(freq)
        with np.errstate(divide="ignore", invalid="ignore"):
            return complex(1 / (1 / z1 + 1 / z2) + z3)

    def z_cascade(self, freq, zin: complex) -> complex:
        """Impedance at the secondary with `zin` ohms hanging on the primary."""
        z1, z2, z3 = self.tee(freq)
        with np.errstate(divide="ignore", invalid="ignore"):
            return complex(1 / (1 / (np.complex128(zin) + z1) + 1 / z2) + z3)

    def z_cascade_norm(self, freq, zin_norm: complex, z0: float) -> complex:
        return self.z_cascade(freq, complex(zin_norm) * z0) / z0

    def arc(self, freq, zin_norm: complex = 1 + 0j, z0: float = 50.0, npts: int = DEFAULT_ARC_POINTS, verbose: bool = False) -> ArcTrace:
        start = complex(zin_norm)
        end = self.z_cascade_norm(freq, start, z0)
        x_coord, y_coord = linear_arc(start, end, npts, False, verbose)
        return _trace(x_coord, y_coord, start, end)

    def cascade(self, freq, zin_norm: complex, z0: float) -> complex:
        return self.z_cascade_norm(freq, zin_norm, z0)
