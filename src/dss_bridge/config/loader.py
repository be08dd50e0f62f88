# src/dss_bridge/config/loader.py
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import cerberus
import yaml

from .exceptions import ConfigError, ConfigSchemaError
from .settings import BindingConfig, EngineConfig, LibraryConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidator(cerberus.Validator):
    """Cerberus validator with the binding's extra rules."""
    def __init__(self, *args, **kwargs):
        super(ConfigValidator, self).__init__(*args, **kwargs)
        self.rules['c_text'] = {'schema': {'type': 'boolean'}}

    def _validate_c_text(self, constraint: bool, field: str, value: Any):
        """
        Strings handed to the engine must not contain NUL characters.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if constraint and isinstance(value, str) and "\x00" in value:
            self._error(field, "must not contain NUL characters.")


def _flatten_errors(errors: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
    """Turns Cerberus' nested error tree into 'section.key' -> first message."""
    flat: Dict[str, str] = {}
    for key, entries in errors.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        for entry in entries:
            if isinstance(entry, dict):
                flat.update(_flatten_errors(entry, path))
            elif path not in flat:
                flat[path] = str(entry)
    return flat


class ConfigLoader:
    """
    Loads a YAML configuration file and validates it into a `BindingConfig`.
    Unknown keys anywhere in the document are rejected.
    """
    _schema = {
        "library": {
            "type": "dict", "required": False, "default": {}, "schema": {
                "path": {"type": "string", "required": False, "empty": False, "c_text": True},
                "debug": {"type": "boolean", "required": False, "default": False},
            },
        },
        "engine": {
            "type": "dict", "required": False, "default": {}, "schema": {
                "allow_change_dir": {"type": "boolean", "required": False, "default": True},
                "allow_forms": {"type": "boolean", "required": False, "default": False},
                "compat_flags": {"type": "integer", "required": False, "min": 0, "max": 0xFFFFFFFF},
            },
        },
        "logging": {
            "type": "dict", "required": False, "default": {}, "schema": {
                "level": {"type": "string", "required": False, "coerce": str.upper, "allowed": LOG_LEVELS},
            },
        },
        "parallel": {
            "type": "dict", "required": False, "default": {}, "schema": {
                "num_workers": {"type": "integer", "required": False, "min": 1},
            },
        },
    }

    def __init__(self):
        self._validator = ConfigValidator(self._schema)
        self._validator.allow_unknown = False

    def load(self, config_path: Union[str, Path]) -> BindingConfig:
        """Reads, validates and converts one YAML configuration file."""
        source = Path(config_path).resolve()
        logger.info(f"Loading dss_bridge configuration from: {source}")
        return self.from_dict(self._load_yaml(source), source)

    def from_dict(self, data: Dict[str, Any], source: Optional[Path] = None) -> BindingConfig:
        """Validates an already-parsed configuration mapping."""
        if not self._validator.validate(data):
            raise ConfigSchemaError(_flatten_errors(self._validator.errors), source)
        document = self._validator.document

        library = document.get("library", {})
        lib_path = library.get("path")
        if lib_path is not None:
            lib_path = Path(lib_path)
            if source is not None and not lib_path.is_absolute():
                lib_path = (source.parent / lib_path).resolve()

        engine = document.get("engine", {})
        return BindingConfig(
            library=LibraryConfig(path=lib_path, debug=library.get("debug", False)),
            engine=EngineConfig(
                allow_change_dir=engine.get("allow_change_dir", True),
                allow_forms=engine.get("allow_forms", False),
                compat_flags=engine.get("compat_flags"),
            ),
            log_level=document.get("logging", {}).get("level"),
            num_workers=document.get("parallel", {}).get("num_workers"),
            source_path=source,
        )

    def _load_yaml(self, source: Path) -> Dict[str, Any]:
        """Loads and performs basic sanity checks on a YAML file."""
        if not source.is_file():
            raise ConfigError(details=f"Configuration file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except PermissionError as e:
            raise ConfigError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise ConfigError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        if content is None:
            # An empty file means "all defaults".
            return {}
        if not isinstance(content, dict):
            raise ConfigError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
        return content


def load_config(config_path: Union[str, Path]) -> BindingConfig:
    return ConfigLoader().load(config_path)
