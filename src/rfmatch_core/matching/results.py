# src/rfmatch_core/matching/results.py
"""
Defines the immutable result records returned by the matching solvers.

Every record carries its component values already scaled into the display
units requested by the caller, together with the rendered unit strings
("fF", "pH", ...). An unrealizable solution is represented by NaN in every
numeric field of the affected block; a solver never raises for a physically
infeasible match. Within the ladder records the `s` fields (`cs`, `ls`) belong
to the section attached to the anchor port the topology is built from, and
the `l` fields (`cl`, `ll`) to the section at the opposite port.

Pi and tee results hold two alternative realizations side by side:
  - capacitor-middle: shunt inductors `ls`, `ll` around a series/shunt `c`.
  - inductor-middle: shunt (pi) or series (tee) capacitors `cs`, `cl` around `l`.
Each realization is independently feasible or NaN.
"""
from dataclasses import dataclass, fields

from .common import realizable


@dataclass(frozen=True)
class CL:
    """Two-element (ell) network: one capacitor, one inductor, and its loaded Q."""
    c: float
    l: float
    q: float
    c_unit: str = "fF"
    l_unit: str = "pH"

    @property
    def is_feasible(self) -> bool:
        return realizable(self.c, self.l)


@dataclass(frozen=True)
class CLQ:
    """
    Q-constrained ell network.

    `q_target` echoes the requested network Q, `q_net` is the Q of the
    unconstrained section, and `solution_index` records which root of the
    quadratic was used (1 or 2).
    """
    c: float
    l: float
    q_target: float
    q_net: float
    solution_index: int
    c_unit: str = "fF"
    l_unit: str = "pH"

    @property
    def is_feasible(self) -> bool:
        return realizable(self.c, self.l)


@dataclass(frozen=True)
class CCLL:
    """Four-element ladder network (two L-sections through a virtual resistance)."""
    cs: float
    cl: float
    ls: float
    ll: float
    c_unit: str = "fF"
    l_unit: str = "pH"

    @property
    def is_feasible(self) -> bool:
        return realizable(self.cs, self.cl, self.ls, self.ll)


@dataclass(frozen=True)
class PiTee:
    """Pi or tee network in both of its realizations, plus the Q it was designed for."""
    c: float
    cs: float
    cl: float
    l: float
    ls: float
    ll: float
    q: float
    c_unit: str = "fF"
    l_unit: str = "pH"

    @property
    def capacitor_middle_feasible(self) -> bool:
        return realizable(self.c, self.ls, self.ll)

    @property
    def inductor_middle_feasible(self) -> bool:
        return realizable(self.l, self.cs, self.cl)


@dataclass(frozen=True)
class MatchingNetworks:
    """Every topology the synthesis engine computes for one source/load pair."""
    zs: complex
    zl: complex
    hp_ell_cl: CL
    hp_ell_lc: CL
    lp_ell_cl: CL
    lp_ell_lc: CL
    hp_ell_cl_w_q: CLQ
    hp_ell_lc_w_q: CLQ
    lp_ell_cl_w_q: CLQ
    lp_ell_lc_w_q: CLQ
    lp1: CCLL
    lp2: CCLL
    hp1: CCLL
    hp2: CCLL
    bp1: CCLL
    bp2: CCLL
    bp3: CCLL
    bp4: CCLL
    pi: PiTee
    tee: PiTee

    def topologies(self) -> dict:
        """Solver name -> result, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name not in ("zs", "zl")}
