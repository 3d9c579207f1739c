# src/rfmatch_core/elements/evaluate.py
"""
One-shot entry points: build an element from raw slots and evaluate it.

These are what an interactive front end calls for a single row of its element
table; chains of elements go through `rfmatch_core.chain` instead.
"""
import logging
from typing import Optional, Sequence

from ..constants import DEFAULT_ARC_POINTS
from ..smith import ArcTrace
from .base import create_element

logger = logging.getLogger(__name__)


def calc_arc(
    tag: str,
    values: Sequence[float],
    units: Optional[Sequence] = None,
    zin_norm: complex = 1 + 0j,
    z0: float = 50.0,
    freq=1e9,
    npts: int = DEFAULT_ARC_POINTS,
    verbose: bool = False,
    orientation=None,
    **extra,
) -> ArcTrace:
    """
    Traces the arc drawn by adding one element to `zin_norm`.

    Raises:
        UnknownElementError: if `tag` names no registered element.
        ElementError: if the values do not fit the element.
    """
    element = create_element(tag, values, units, orientation=orientation, **extra)
    if verbose:
        logger.info(f"calc_arc({element!r}, zin_norm={zin_norm}, z0={z0}, freq={freq}, npts={npts})")
    trace = element.arc(freq, zin_norm, z0, npts, verbose)
    if verbose:
        logger.info(f"calc_arc -> start={trace.start}, end={trace.end}")
    return trace


def calc_element_impedance(
    tag: str,
    values: Sequence[float],
    units: Optional[Sequence] = None,
    freq=1e9,
    orientation=None,
    **extra,
) -> complex:
    """Impedance in ohms of a single element at `freq`."""
    element = create_element(tag, values, units, orientation=orientation, **extra)
    z = element.z(freq)
    logger.debug(f"{element!r} at {freq} -> z = {z}")
    return z


def calc_cascade(
    tag: str,
    values: Sequence[float],
    units: Optional[Sequence] = None,
    zin_norm: complex = 1 + 0j,
    z0: float = 50.0,
    freq=1e9,
    orientation=None,
    **extra,
) -> complex:
    """Normalized impedance after adding one element to `zin_norm`."""
    element = create_element(tag, values, units, orientation=orientation, **extra)
    return element.cascade(freq, zin_norm, z0)
