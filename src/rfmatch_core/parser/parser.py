# src/rfmatch_core/parser/parser.py
import logging
import re
import string
from pathlib import Path
from typing import Any, Dict, List, Union

import cerberus
import yaml

from .exceptions import ParsingError, SchemaValidationError
from .raw_data import ParsedChain, ParsedElementData

logger = logging.getLogger(__name__)

ID_REGEX = r"^[a-zA-Z_][a-zA-Z0-9_]*$"
ALLOWED_ID_CHARS = set(string.ascii_letters + string.digits + "_")


class EnhancedValidator(cerberus.Validator):
    """Cerberus validator with the identifier and uniqueness rules chain files need."""
    def __init__(self, *args, **kwargs):
        super(EnhancedValidator, self).__init__(*args, **kwargs)
        self.rules['id_regex'] = {'schema': {'type': 'boolean'}}
        self.rules['unique_elements_by_key'] = {'schema': {'type': 'string'}}

    def _validate_id_regex(self, constraint: bool, field: str, value: Any):
        if not constraint: return
        if not isinstance(value, str):
            self._error(field, "must be a string to be validated by id_regex.")
            return

        if not re.match(ID_REGEX, value):
            invalid_chars = sorted(set(value) - ALLOWED_ID_CHARS)
            message = (
                f"Identifier '{value}' is invalid. Identifiers must start with a letter or underscore "
                "and can only contain letters, numbers and underscores. "
                f"This identifier contains the following forbidden character(s): {invalid_chars}"
            )
            self._error(field, message)

    def _validate_unique_elements_by_key(self, key_for_uniqueness: str, field: str, value: List[Dict]):
        """
        Validates that all dictionaries in a list have a unique value for a given key.
        The rule's arguments are validated against this schema:
        {'type': 'string'}
        """
        if not isinstance(value, list):
            return

        seen_keys = set()
        duplicates = []
        for item in value:
            if not isinstance(item, dict):
                continue
            item_key = item.get(key_for_uniqueness)
            if item_key is not None:
                if item_key in seen_keys:
                    duplicates.append(item_key)
                else:
                    seen_keys.add(item_key)

        if duplicates:
            self._error(field, f"Duplicate values found for key '{key_for_uniqueness}': {sorted(set(duplicates))}")


class ChainParser:
    """
    Loads and validates a chain YAML file and produces its IR.

    A chain file looks like::

        chain_name: input_match
        z0: 50
        frequency: 275 GHz
        npts: 100
        start: {re: 1.0, im: 0.0}
        elements:
          - {id: C1, type: capacitor, orientation: shunt, values: [0, 20], units: [base, fF]}
          - {id: TL1, type: tl, values: [50, 0.25], units: [base, lambda], params: {er: 4.0}}
    """
    _id_rule = {"type": "string", "required": True, "empty": False, "id_regex": True}

    _element_schema = {
        "id": _id_rule,
        "type": {"type": "string", "required": True, "empty": False},
        "values": {"type": "list", "required": True, "minlength": 1, "schema": {"type": "number"}},
        "units": {"type": "list", "required": False, "default": [], "schema": {"type": "string"}},
        "orientation": {"type": "string", "required": False, "nullable": True, "default": None, "allowed": ["series", "shunt"]},
        "tolerances": {"type": "list", "required": False, "default": [], "schema": {"type": "number", "min": 0}},
        "params": {"type": "dict", "required": False, "default": {}, "keysrules": {"type": "string", "id_regex": True}},
    }

    _schema = {
        "chain_name": {"type": "string", "required": False, "id_regex": True},
        "z0": {"type": ["number", "string"], "required": False, "default": 50.0},
        "frequency": {"type": ["number", "string"], "required": True},
        "npts": {"type": "integer", "required": False, "min": 1, "default": 100},
        "start": {
            "type": "dict", "required": False, "default": {"re": 1.0, "im": 0.0},
            "schema": {"re": {"type": "number", "required": True}, "im": {"type": "number", "required": True}},
        },
        "elements": {
            "type": "list", "required": True, "minlength": 1, "unique_elements_by_key": "id",
            "schema": {"type": "dict", "schema": _element_schema},
        },
    }

    def __init__(self):
        self._validator = EnhancedValidator(self._schema)
        self._validator.allow_unknown = False
        logger.info("ChainParser initialized with strict structural validation rules.")

    def parse(self, yaml_path: Union[str, Path]) -> ParsedChain:
        """Parses one chain file into a `ParsedChain`."""
        resolved_path = Path(yaml_path).resolve()
        logger.info(f"Parsing chain file: {resolved_path}")
        yaml_content = self._load_yaml(resolved_path)
        return self.parse_document(yaml_content, resolved_path)

    def parse_document(self, yaml_content: Dict[str, Any], source: Path) -> ParsedChain:
        """Validates an already-loaded document; `source` is only used for reporting."""
        if not self._validator.validate(yaml_content):
            raise SchemaValidationError(self._validator.errors, source)
        validated_data = self._validator.document

        elements = [
            ParsedElementData(
                instance_id=raw["id"],
                element_type=raw["type"],
                values=tuple(float(v) for v in raw["values"]),
                units=tuple(raw["units"]),
                orientation=raw["orientation"],
                tolerances=tuple(float(t) for t in raw["tolerances"]),
                raw_params=dict(raw["params"]),
                source_yaml_path=source,
            )
            for raw in validated_data["elements"]
        ]
        logger.debug(f"Chain '{source}' holds {len(elements)} element(s).")
        return ParsedChain(
            chain_name=validated_data.get("chain_name", source.stem),
            source_yaml_path=source,
            z0=validated_data["z0"],
            frequency=validated_data["frequency"],
            npts=validated_data["npts"],
            raw_start=validated_data["start"],
            elements=elements,
        )

    def _load_yaml(self, source: Path) -> Dict[str, Any]:
        if not source.is_file():
            raise ParsingError(details=f"Chain file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
            if content is None:
                raise ParsingError(details="The YAML file is empty or contains no valid content.", file_path=source)
            if not isinstance(content, dict):
                raise ParsingError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
            return content
        except PermissionError as e:
            raise ParsingError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
