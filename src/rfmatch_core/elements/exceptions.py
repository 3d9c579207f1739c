# src/rfmatch_core/elements/exceptions.py
"""
Diagnosable exceptions for the element subsystem.

`ElementError` covers an element that was recognized but could not be built
from the values it was given. `UnknownElementError` covers a tag that names no
registered element at all; it is also a `MalformedRequestError`.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import DiagnosableError, MalformedRequestError, format_diagnostic_report


@dataclass()
class ElementError(DiagnosableError):
    """Raised when an element cannot be constructed or evaluated."""
    element_type: str
    details: str
    frequency: Optional[float] = None

    def __str__(self) -> str:
        return f"{self.element_type}: {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Element Definition Error",
            details=self.details,
            suggestion="Check the number of values supplied for the element and the unit given for each of them.",
            context={
                'element': self.element_type,
                'frequency': f"{self.frequency:.4e} Hz" if self.frequency is not None else None,
            }
        )


@dataclass()
class UnknownElementError(DiagnosableError, MalformedRequestError):
    """Raised when an element tag does not match any registered element type."""
    tag: str
    known_tags: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"element not recognized: '{self.tag}'"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unknown Element",
            details=f"element not recognized: '{self.tag}'",
            suggestion="Use one of the registered element tags:\n" + ", ".join(sorted(self.known_tags)),
            context={'user_input': self.tag}
        )
