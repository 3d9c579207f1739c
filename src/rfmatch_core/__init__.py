# src/rfmatch_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.info("RFMatch Core package initialized.")

from .units import ureg, Quantity, Unit, UnitType, parse_unit, format_unit, scale, unscale
from .frequency import Frequency
from .rf_utils import calc_gamma, calc_z, calc_rc, gen_complex, calc_impedance, calc_z_to_gamma
from .smith import find_smith_coord, arc_smith_points, ArcTrace
from .elements import create_element, calc_arc, calc_cascade, calc_element_impedance
from .matching import calc_networks, change_impedance, MatchingNetworks
from .conjugate import calc_match, ConjugateMatch
from .parser import ChainParser
from .chain import ElementChain, ChainSegment, build_chain, trace_chain
from .errors import RFMatchError, MalformedRequestError, ChainBuildError, DiagnosableError

__all__ = [
    # Units
    "ureg", "Quantity", "Unit", "UnitType", "parse_unit", "format_unit", "scale", "unscale",
    "Frequency",
    # Impedance utilities
    "calc_gamma", "calc_z", "calc_rc", "gen_complex", "calc_impedance", "calc_z_to_gamma",
    # Smith chart
    "find_smith_coord", "arc_smith_points", "ArcTrace",
    # Elements
    "create_element", "calc_arc", "calc_cascade", "calc_element_impedance",
    # Matching
    "calc_networks", "change_impedance", "MatchingNetworks",
    "calc_match", "ConjugateMatch",
    # Chains
    "ChainParser", "ElementChain", "ChainSegment", "build_chain", "trace_chain",
    # Top-Level Errors (Actionable Diagnostics)
    "RFMatchError", "MalformedRequestError", "ChainBuildError", "DiagnosableError",
]
