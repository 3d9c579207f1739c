# src/rfmatch_core/matching/__init__.py
from .results import CL, CLQ, CCLL, PiTee, MatchingNetworks
from .exceptions import MatchingRequestError
from .ell import calc_hp_ell_cl, calc_hp_ell_lc, calc_lp_ell_cl, calc_lp_ell_lc
from .ell_w_q import calc_hp_ell_cl_w_q, calc_hp_ell_lc_w_q, calc_lp_ell_cl_w_q, calc_lp_ell_lc_w_q
from .ladder import (
    calc_ladder,
    calc_lp1, calc_lp2, calc_hp1, calc_hp2,
    calc_bp1, calc_bp2, calc_bp3, calc_bp4,
)
from .pitee import calc_pi, calc_tee
from .networks import ImpedanceRepresentation, calc_networks, change_impedance, from_impedance, to_impedance

__all__ = [
    # Results
    "CL", "CLQ", "CCLL", "PiTee", "MatchingNetworks",
    # Solvers
    "calc_hp_ell_cl", "calc_hp_ell_lc", "calc_lp_ell_cl", "calc_lp_ell_lc",
    "calc_hp_ell_cl_w_q", "calc_hp_ell_lc_w_q", "calc_lp_ell_cl_w_q", "calc_lp_ell_lc_w_q",
    "calc_ladder", "calc_lp1", "calc_lp2", "calc_hp1", "calc_hp2",
    "calc_bp1", "calc_bp2", "calc_bp3", "calc_bp4",
    "calc_pi", "calc_tee",
    # Entry points
    "ImpedanceRepresentation", "calc_networks", "change_impedance", "to_impedance", "from_impedance",
    # Errors
    "MatchingRequestError",
]
