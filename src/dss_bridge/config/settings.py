# src/dss_bridge/config/settings.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Frozen dataclasses: a configuration is read once and then only passed around.


@dataclass(frozen=True)
class LibraryConfig:
    """Where to find the DSS C-API shared library."""
    path: Optional[Path] = None
    debug: bool = False


@dataclass(frozen=True)
class EngineConfig:
    """Options applied to every engine context created from a configuration."""
    allow_change_dir: bool = True
    allow_forms: bool = False
    compat_flags: Optional[int] = None


@dataclass(frozen=True)
class BindingConfig:
    library: LibraryConfig = field(default_factory=LibraryConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    log_level: Optional[str] = None
    num_workers: Optional[int] = None
    source_path: Optional[Path] = None
