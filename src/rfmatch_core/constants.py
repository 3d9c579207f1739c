# --- src/rfmatch_core/constants.py ---
import logging

import numpy as np

logger = logging.getLogger(__name__)

# --- Physical Constants ---

#: Propagation speed used for every electrical-length calculation (m/s).
#: Rounded to 3e8 so that wavelength and beta values agree with published reference tables.
SPEED_OF_LIGHT: float = 3.0e8

# --- Numerical Constants ---

#: Magnitudes at or below this are treated as exactly zero when deciding whether a
#: quality factor or capacitance term contributes to an element impedance.
ZERO_TOLERANCE: float = float(np.finfo(float).eps)

#: Default number of arc subdivisions for Smith chart traces.
DEFAULT_ARC_POINTS: int = 100

logger.debug("Defined core constants: SPEED_OF_LIGHT, ZERO_TOLERANCE, DEFAULT_ARC_POINTS")
