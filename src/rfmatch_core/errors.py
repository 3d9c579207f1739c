# src/rfmatch_core/errors.py
import logging
from abc import abstractmethod
from typing import Any, Dict, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# --- User-Facing Exception Hierarchy ---

class RFMatchError(Exception):
    """Base class for all user-facing errors raised by RFMatch Core."""
    pass


class MalformedRequestError(RFMatchError, ValueError):
    """
    Raised when a request cannot be interpreted at all: an unknown element tag,
    an unrecognized impedance representation or complex format, or a selector
    outside its allowed set.

    Physically infeasible matches are never reported this way. Those come back
    as NaN-filled results.
    """
    pass


class ChainBuildError(RFMatchError):
    """
    Raised when a chain file cannot be turned into elements, for any reason.
    The message is a pre-formatted, user-friendly diagnostic report.
    """
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """An exception that can render its own multi-line diagnostic report."""
    def get_diagnostic_report(self) -> str:
        ...


class DiagnosableError(RFMatchError, Diagnosable):
    """
    Concrete, catchable base for every diagnosable error in the package.
    Subclasses must implement `get_diagnostic_report`.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Formats a diagnostic report with a consistent layout.

    Args:
        error_type: The high-level category of the error (e.g., "Unknown Element").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for resolving the issue.
        context: Optional keys 'element', 'source_file', 'user_input', 'frequency'.

    Returns:
        The report as a single string.
    """
    lines = [
        "\n",
        "=============== RFMatch Core: Actionable Diagnostic Report ===============",
        f"Error Type:     {error_type}",
    ]
    if element := context.get('element'):
        lines.append(f"Element:        {element}")
    if source_file := context.get('source_file'):
        lines.append(f"Source File:    {source_file}")
    if user_input := context.get('user_input'):
        lines.append(f"User Input:     '{user_input}'")
    if frequency := context.get('frequency'):
        lines.append(f"Frequency:      {frequency}")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("==========================================================================")
    return "\n".join(lines)
