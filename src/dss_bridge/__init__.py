# src/dss_bridge/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.debug("dss_bridge package initialized.")

from .units import ureg, Quantity, to_magnitude
from .errors import DSSBridgeError, DiagnosableError
from .native import (
    LibraryLoadError,
    MarshalError,
    MissingEntryPointError,
    NativeLibrary,
    load_library,
)
from .context import (
    ContextBusyError,
    ContextClosedError,
    DSSContext,
    EngineError,
    InitializationError,
    OperationResult,
)
from .config import BindingConfig, ConfigError, ConfigSchemaError, load_config
from .api import IDSS, ControlModes, SolveModes
from .parallel import run_parallel

__all__ = [
    # Units
    "ureg", "Quantity", "to_magnitude",
    # Library
    "NativeLibrary", "load_library",
    # Contexts
    "DSSContext", "OperationResult",
    # Classic API
    "IDSS", "SolveModes", "ControlModes",
    # Configuration
    "BindingConfig", "load_config",
    # Parallel scenarios
    "run_parallel",
    # Errors (Actionable Diagnostics)
    "DSSBridgeError", "DiagnosableError",
    "LibraryLoadError", "MissingEntryPointError", "MarshalError",
    "InitializationError", "EngineError", "ContextClosedError", "ContextBusyError",
    "ConfigError", "ConfigSchemaError",
]
