# src/dss_bridge/context/exceptions.py
"""
Diagnosable exceptions tied to the lifecycle and use of a DSS engine context.

`EngineError` is the structured form of the engine's last-error record: the
code and message are passed through verbatim, together with the entry point
that produced them. The remaining classes describe failures of the context
itself (creation, use after close, concurrent entry).
"""
from dataclasses import dataclass
from typing import Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass(eq=False)
class InitializationError(DiagnosableError):
    """Raised when an engine instance could not be created or started."""
    details: str
    code: Optional[int] = None

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Engine Initialization Error",
            details=self.details,
            suggestion="The engine could not allocate a new instance. Release unused contexts, or check that the DSS C-API library matches this platform.",
            context={'code': self.code}
        )


@dataclass(eq=False)
class EngineError(DiagnosableError):
    """
    Raised when the engine reports a non-zero error number after an operation.

    A failed operation may have left the engine's internal model partially
    mutated; no retry is attempted.
    """
    code: int
    message: str
    operation: str = ""
    context_handle: Optional[int] = None

    def __str__(self):
        return f"(#{self.code}) {self.message}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Engine Error",
            details=self.message or "(the engine gave no description)",
            suggestion="The engine rejected this operation. The circuit model may be partially updated; inspect or rebuild it before continuing.",
            context={
                'operation': self.operation,
                'code': self.code,
                'context': hex(self.context_handle) if self.context_handle else None,
            }
        )


@dataclass(eq=False)
class ContextClosedError(DiagnosableError):
    """Raised when an operation is issued on a context that was already released."""
    operation: str = ""

    def __str__(self):
        return f"Cannot call '{self.operation}': the DSS context is closed."

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Closed Context",
            details=str(self),
            suggestion="Create a new context with DSSContext.new() and re-run the setup on it.",
            context={'operation': self.operation}
        )


@dataclass(eq=False)
class ContextBusyError(DiagnosableError):
    """Raised when a second thread enters a context while a call is in flight."""
    operation: str = ""

    def __str__(self):
        return f"Cannot call '{self.operation}': the DSS context is in use by another thread."

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Concurrent Context Use",
            details=str(self),
            suggestion="Drive each context from a single thread. Create one context per worker thread for parallel runs.",
            context={'operation': self.operation}
        )
