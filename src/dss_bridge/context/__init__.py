# src/dss_bridge/context/__init__.py
from .exceptions import (
    ContextBusyError,
    ContextClosedError,
    EngineError,
    InitializationError,
)
from .results import OperationResult
from .context import DSSContext

__all__ = [
    # Exceptions
    "ContextBusyError",
    "ContextClosedError",
    "EngineError",
    "InitializationError",
    # Core Classes
    "DSSContext",
    "OperationResult",
]
