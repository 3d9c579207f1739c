# src/rfmatch_core/parser/exceptions.py
"""
Diagnosable exceptions for loading and validating chain files.

`ParsingError` covers file-system and YAML syntax problems; `SchemaValidationError`
covers documents that load but do not have the structure of a chain file.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from ..errors import DiagnosableError, format_diagnostic_report


class BaseParsingError(DiagnosableError):
    """Common base so callers can catch every chain-file problem at once."""
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Parsing Error",
            details=str(self),
            suggestion="Please check the format and content of the chain YAML file.",
            context={}
        )


@dataclass(frozen=True)
class ParsingError(BaseParsingError):
    details: str
    file_path: Path

    def __str__(self):
        return f"Parsing error in file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="YAML Parsing or File Error",
            details=self.details,
            suggestion="Ensure the file exists, is readable, and contains valid YAML syntax.",
            context={'source_file': self.file_path}
        )


def _flatten(errors: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
    """Cerberus nests errors for list items and sub-documents; flatten them to dotted paths."""
    flat = {}
    for key, messages in errors.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        for message in messages:
            if isinstance(message, dict):
                flat.update(_flatten(message, path))
            else:
                flat.setdefault(path, str(message))
    return flat


@dataclass(frozen=True)
class SchemaValidationError(BaseParsingError):
    errors: Dict[str, Any]
    file_path: Path

    def issues(self) -> Dict[str, str]:
        return _flatten(self.errors)

    def __str__(self):
        error_lines = [f"  - In field '{k}': {v}" for k, v in sorted(self.issues().items())]
        return (
            f"YAML schema validation failed for file '{self.file_path}':\n"
            + "\n".join(error_lines)
        )

    def get_diagnostic_report(self) -> str:
        issues = self.issues()
        error_list_str = "\n".join(f"  - Field '{k}': {v}" for k, v in sorted(issues.items()))
        details = (
            "The structure of the YAML file does not conform to the chain file schema.\n"
            f"See details for {len(issues)} issue(s) below:\n\n{error_list_str}"
        )
        return format_diagnostic_report(
            error_type="YAML Schema Validation Error",
            details=details,
            suggestion="Correct the listed fields. Check for invalid or duplicate element ids, a missing 'elements' list, and orientations other than 'series' or 'shunt'.",
            context={'source_file': self.file_path}
        )
