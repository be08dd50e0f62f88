# src/dss_bridge/errors.py
import logging
from typing import Any, Dict, Protocol, abstractmethod
from typing import runtime_checkable

logger = logging.getLogger(__name__)


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    A protocol for exceptions that can generate their own rich diagnostic report.
    """
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...


class DSSBridgeError(Exception):
    """Base class for all custom, user-facing errors raised by dss_bridge."""
    pass


class DiagnosableError(DSSBridgeError, Diagnosable):
    """
    A common, concrete base class for all exceptions that are diagnosable.

    It inherits from `DSSBridgeError`, so every diagnosable error can be caught
    under the package's single root type, and it declares `get_diagnostic_report`
    abstract so that each subclass provides its own report.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        """
        Abstract method to generate the diagnostic report.
        Subclasses MUST implement this.
        """
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    A stateless helper to format the final multi-line report string, ensuring a
    consistent look and feel for all user-facing diagnostics.

    Args:
        error_type: The high-level category of the error (e.g., "Engine Error").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user to resolve the issue.
        context: A dictionary of contextual information (operation, context
            handle, error code, library path, config file).

    Returns:
        A formatted, user-friendly diagnostic report string ready for display.
    """
    lines = [
        "\n",
        "================ dss_bridge: Actionable Diagnostic Report ================",
        f"Error Type:     {error_type}",
    ]
    if operation := context.get('operation'):
        lines.append(f"Operation:      {operation}")
    if (code := context.get('code')) is not None:
        lines.append(f"Engine Code:    {code}")
    if handle := context.get('context'):
        lines.append(f"Context:        {handle}")
    if library := context.get('library'):
        lines.append(f"Library:        {library}")
    if source_file := context.get('source_file'):
        lines.append(f"Source File:    {source_file}")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("==========================================================================")
    return "\n".join(lines)
