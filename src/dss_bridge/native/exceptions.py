# src/dss_bridge/native/exceptions.py
"""
Diagnosable exceptions raised at the boundary with the native DSS C-API library.

`LibraryLoadError` and `MissingEntryPointError` cover locating and binding the
shared library. `MarshalError` covers shape and type mismatches detected while
converting Python values to the engine's C representations (or back); these are
never engine-reported failures.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass(eq=False)
class LibraryLoadError(DiagnosableError):
    """Raised when the DSS C-API shared library cannot be located or loaded."""
    details: str
    candidates: List[str] = field(default_factory=list)

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        tried = "\n".join(f"  - {c}" for c in self.candidates) or "  (none)"
        return format_diagnostic_report(
            error_type="Native Library Load Error",
            details=f"{self.details}\nCandidates tried:\n{tried}",
            suggestion="Install the DSS C-API binaries and point the DSS_CAPI_PATH environment variable (or the 'library.path' config key) at the shared library file.",
            context={}
        )


@dataclass(eq=False)
class MissingEntryPointError(LibraryLoadError):
    """Raised when a required entry point is absent from the loaded library."""
    entry_point: str = ""
    library: Optional[str] = None

    def __str__(self):
        return f"Entry point '{self.entry_point}' not found in {self.library or 'the loaded library'}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Missing Native Entry Point",
            details=self.details,
            suggestion="The loaded DSS C-API build is older than the one this binding targets. Upgrade the library.",
            context={'operation': self.entry_point, 'library': self.library}
        )


@dataclass(eq=False)
class MarshalError(DiagnosableError):
    """
    Raised for an input/output shape mismatch detected before or after a native
    call, e.g. a non-numeric sequence, a fixed-length argument of the wrong size,
    a NUL byte inside text, or an interleaved complex buffer of odd length.
    """
    operation: str
    details: str

    def __str__(self):
        prefix = f"{self.operation}: " if self.operation else ""
        return f"{prefix}{self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Marshaling Error",
            details=self.details,
            suggestion="Check the type and length of the value passed to this operation.",
            context={'operation': self.operation}
        )
