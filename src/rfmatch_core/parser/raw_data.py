# src/rfmatch_core/parser/raw_data.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

# Intermediate representation handed from ChainParser to build_chain. Values
# stay raw here; units, orientation and frequency are resolved by the builder.


@dataclass(frozen=True)
class ParsedElementData:
    """One element entry of a chain file."""
    instance_id: str
    element_type: str
    values: Tuple[float, ...]
    units: Tuple[str, ...]
    orientation: Optional[str]
    tolerances: Tuple[float, ...]
    raw_params: Dict[str, Any]
    source_yaml_path: Path


@dataclass(frozen=True)
class ParsedChain:
    """A whole chain file: the operating point and the ordered elements."""
    chain_name: str
    source_yaml_path: Path
    z0: Any
    frequency: Any
    npts: int
    raw_start: Dict[str, Any]
    elements: List[ParsedElementData] = field(default_factory=list)
