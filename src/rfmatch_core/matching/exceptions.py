# src/rfmatch_core/matching/exceptions.py
from dataclasses import dataclass
from typing import Optional, Sequence

from ..errors import DiagnosableError, MalformedRequestError, format_diagnostic_report


@dataclass()
class MatchingRequestError(DiagnosableError, MalformedRequestError):
    """
    Raised when a matching request names a representation or selector the
    engine does not know. Infeasible matches are never reported this way.
    """
    details: str
    user_input: Optional[str] = None
    allowed: Sequence[str] = ()

    def __str__(self) -> str:
        return self.details

    def get_diagnostic_report(self) -> str:
        suggestion = f"Use one of: {', '.join(self.allowed)}." if self.allowed else ""
        return format_diagnostic_report(
            error_type="Malformed Matching Request",
            details=self.details,
            suggestion=suggestion,
            context={'user_input': self.user_input}
        )
