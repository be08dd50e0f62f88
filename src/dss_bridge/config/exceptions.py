# src/dss_bridge/config/exceptions.py
"""
Diagnosable exceptions for loading and validating a dss_bridge configuration file.

`ConfigError` covers file-level problems (missing file, unreadable file, invalid
YAML syntax, wrong root type). `ConfigSchemaError` covers structural problems
reported by the Cerberus schema.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from ..errors import DiagnosableError, format_diagnostic_report


class BaseConfigError(DiagnosableError):
    """A local base class for all configuration errors."""
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Configuration Error",
            details=str(self),
            suggestion="Please check the format and content of the configuration file.",
            context={}
        )


@dataclass(eq=False)
class ConfigError(BaseConfigError):
    """Raised for file-system or YAML syntax problems with a configuration file."""
    details: str
    file_path: Optional[Path] = None

    def __str__(self):
        if self.file_path is None:
            return f"Configuration error: {self.details}"
        return f"Configuration error in file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Configuration File Error",
            details=self.details,
            suggestion="Ensure the file exists, is readable, and contains a YAML mapping at its root.",
            context={'source_file': self.file_path}
        )


@dataclass(eq=False)
class ConfigSchemaError(BaseConfigError):
    """Raised when a configuration document does not match the schema."""
    errors: Dict[str, str]
    file_path: Optional[Path] = None

    def _error_lines(self):
        return [f"  - Field '{k}': {v}" for k, v in sorted(self.errors.items())]

    def __str__(self):
        where = f" for file '{self.file_path}'" if self.file_path is not None else ""
        return f"Configuration schema validation failed{where}:\n" + "\n".join(self._error_lines())

    def get_diagnostic_report(self) -> str:
        details = (
            "The configuration does not conform to the required schema.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n" + "\n".join(self._error_lines())
        )
        return format_diagnostic_report(
            error_type="Configuration Schema Error",
            details=details,
            suggestion="Correct the listed fields. Allowed sections are 'library', 'engine', 'logging' and 'parallel'; unknown keys are rejected.",
            context={'source_file': self.file_path}
        )
