# src/rfmatch_core/chain.py
"""
Element chains: an ordered list of elements cascaded from a starting
impedance, as drawn step by step on a Smith chart.

`build_chain` turns the parser IR into concrete elements. `trace_chain` walks
the chain, handing every element the normalized impedance left by the one
before it, and collects the arc each element draws.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .config import ConfigParsingError, parse_complex, parse_frequency, parse_quantity
from .elements import ArcTracer, ElementBase, ElementError, create_element
from .errors import ChainBuildError, DiagnosableError, format_diagnostic_report
from .frequency import Frequency
from .parser.raw_data import ParsedChain, ParsedElementData
from .smith import ArcTrace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementChain:
    name: str
    z0: float
    frequency: Frequency
    npts: int
    start: complex
    elements: List[Tuple[str, ElementBase]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.elements)


@dataclass(frozen=True)
class ChainSegment:
    """One traced element: its arc and the normalized impedances either side of it."""
    instance_id: str
    element: ElementBase
    arc: ArcTrace
    zin_norm: complex
    zout_norm: complex


def _build_element(raw: ParsedElementData) -> ElementBase:
    try:
        return create_element(
            raw.element_type,
            raw.values,
            raw.units,
            orientation=raw.orientation,
            tolerances=raw.tolerances or None,
            **raw.raw_params,
        )
    except TypeError as e:
        # unknown keyword in `params`
        raise ElementError(raw.element_type, f"element '{raw.instance_id}': {e}") from e


def build_chain(parsed: ParsedChain) -> ElementChain:
    """
    Instantiates every element of a parsed chain.

    Raises:
        ChainBuildError: wrapping the diagnostic report of whatever went wrong.
    """
    logger.info(f"--- Building chain '{parsed.chain_name}' ({len(parsed.elements)} element(s)) ---")
    try:
        frequency = parse_frequency(parsed.frequency)
        z0 = parse_quantity(parsed.z0, "ohm")
        if z0 <= 0:
            raise ConfigParsingError(f"Reference impedance must be positive, got {parsed.z0!r}.")
        start = parse_complex(parsed.raw_start)
        elements = [(raw.instance_id, _build_element(raw)) for raw in parsed.elements]
    except DiagnosableError as e:
        raise ChainBuildError(e.get_diagnostic_report()) from e
    except ConfigParsingError as e:
        report = format_diagnostic_report(
            error_type="Invalid Chain Configuration",
            details=str(e),
            suggestion="Give 'frequency' and 'z0' as numbers or Pint quantities such as '275 GHz' or '50 ohm'.",
            context={'source_file': parsed.source_yaml_path}
        )
        raise ChainBuildError(report) from e

    chain = ElementChain(parsed.chain_name, z0, frequency, parsed.npts, start, elements)
    logger.info(f"--- Chain '{chain.name}' built at {frequency} with z0={z0} ---")
    return chain


def trace_chain(chain: ElementChain, verbose: bool = False) -> List[ChainSegment]:
    """Cascades the chain from `chain.start` and returns one segment per element."""
    segments = []
    zin = complex(chain.start)
    for instance_id, element in chain.elements:
        if not isinstance(element, ArcTracer):
            raise ElementError(type(element).__name__, f"'{instance_id}' cannot be traced on the chart")
        arc = element.arc(chain.frequency, zin, chain.z0, chain.npts, verbose)
        zout = element.cascade(chain.frequency, zin, chain.z0)
        if verbose:
            logger.info(f"{instance_id}: {element!r} moves {zin} -> {zout}")
        segments.append(ChainSegment(instance_id, element, arc, zin, zout))
        zin = zout
    logger.debug(f"Traced {len(segments)} segment(s) of chain '{chain.name}'.")
    return segments
