# src/dss_bridge/native/__init__.py
from .exceptions import LibraryLoadError, MissingEntryPointError, MarshalError
from .library import (
    LIBRARY_PATH_ENV_VAR,
    NativeLibrary,
    apply_prototypes,
    candidate_library_paths,
    load_library,
)
from .prototypes import PROTOTYPES, RESULT_COUNT_SLOTS

__all__ = [
    # Exceptions
    "LibraryLoadError",
    "MissingEntryPointError",
    "MarshalError",
    # Library loading
    "LIBRARY_PATH_ENV_VAR",
    "NativeLibrary",
    "apply_prototypes",
    "candidate_library_paths",
    "load_library",
    # Prototype table
    "PROTOTYPES",
    "RESULT_COUNT_SLOTS",
]
