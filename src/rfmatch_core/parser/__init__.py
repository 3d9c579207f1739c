# src/rfmatch_core/parser/__init__.py
from .raw_data import ParsedChain, ParsedElementData
from .parser import ChainParser
from .exceptions import ParsingError, SchemaValidationError

__all__ = [
    # IR Data Structures
    "ParsedChain",
    "ParsedElementData",
    # Parser and Exceptions
    "ChainParser",
    "ParsingError",
    "SchemaValidationError",
]
