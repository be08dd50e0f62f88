# src/dss_bridge/config/__init__.py
from .exceptions import BaseConfigError, ConfigError, ConfigSchemaError
from .settings import BindingConfig, EngineConfig, LibraryConfig
from .loader import ConfigLoader, load_config

__all__ = [
    # Exceptions
    "BaseConfigError",
    "ConfigError",
    "ConfigSchemaError",
    # Settings
    "BindingConfig",
    "EngineConfig",
    "LibraryConfig",
    # Loading
    "ConfigLoader",
    "load_config",
]
