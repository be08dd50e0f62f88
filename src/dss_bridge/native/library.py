# src/dss_bridge/native/library.py
"""
Loads the DSS C-API shared library and exposes its entry points.

The library is a process-wide resource: `load_library` loads and declares the
prototypes of each distinct library file at most once, under a lock, and every
`DSSContext` keeps a reference to the `NativeLibrary` it was created from so the
library outlives all of its contexts.
"""
import ctypes
import ctypes.util
import logging
import os
import platform
import threading
from ctypes import pointer
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .exceptions import LibraryLoadError, MissingEntryPointError
from .prototypes import PROTOTYPES

logger = logging.getLogger(__name__)

#: Environment variable that overrides library discovery.
LIBRARY_PATH_ENV_VAR = "DSS_CAPI_PATH"

RELEASE_LIBRARY_NAME = "dss_capi"
DEBUG_LIBRARY_NAME = "dss_capid"

_LOADED_LIBRARIES: Dict[str, "NativeLibrary"] = {}
_LOAD_LOCK = threading.Lock()


def _shared_lib_file_name(name: str) -> str:
    s = platform.system()
    if s == "Windows":
        return f"{name}.dll"
    if s == "Darwin":
        return f"lib{name}.dylib"
    return f"lib{name}.so"


def apply_prototypes(handle: Any) -> List[str]:
    """
    Declares `restype`/`argtypes` on every known entry point of a loaded CDLL.

    Returns the names missing from the library. A missing symbol is not fatal
    here; it only fails when the binding tries to call it.
    """
    missing = []
    for name, (restype, argtypes) in PROTOTYPES.items():
        try:
            func = getattr(handle, name)
        except AttributeError:
            missing.append(name)
            continue
        func.restype = restype
        func.argtypes = argtypes
    if missing:
        logger.debug(f"{len(missing)} entry point(s) not exported by the library: {', '.join(sorted(missing))}")
    return missing


class NativeLibrary:
    """
    Thin owner of a loaded DSS C-API library handle.

    The handle is usually a `ctypes.CDLL` with prototypes applied, but any object
    exposing the same entry-point names as callables is accepted, which is how
    an in-process engine double is plugged in.
    """

    def __init__(self, handle: Any, path: Optional[str] = None):
        self._handle = handle
        self.path = path

    def __repr__(self):
        return f"NativeLibrary(path={self.path!r})"

    def function(self, name: str):
        """Returns the callable bound to entry point `name`."""
        try:
            return getattr(self._handle, name)
        except AttributeError as e:
            raise MissingEntryPointError(
                details=f"The DSS C-API library does not export '{name}'.",
                entry_point=name,
                library=self.path,
            ) from e

    # --- context lifecycle ---

    def new_context(self) -> Optional[int]:
        """Allocates a new engine instance; returns None on a null handle."""
        return self.function("ctx_New")() or None

    def prime_context(self) -> Optional[int]:
        return self.function("ctx_Get_Prime")() or None

    def dispose_context(self, handle: int) -> None:
        self.function("ctx_Dispose")(handle)

    # --- engine-owned buffer release ---

    def dispose_float64(self, data) -> None:
        self.function("DSS_Dispose_PDouble")(pointer(data))

    def dispose_int32(self, data) -> None:
        self.function("DSS_Dispose_PInteger")(pointer(data))

    def dispose_int8(self, data) -> None:
        self.function("DSS_Dispose_PByte")(pointer(data))

    def dispose_strings(self, data, allocated: int) -> None:
        self.function("DSS_Dispose_PPAnsiChar")(pointer(data), allocated)


def candidate_library_paths(path: Optional[Union[str, Path]] = None, debug: bool = False) -> List[str]:
    """
    Lists the library locations to try, in priority order.

    An explicit path is the only candidate when given; a file that fails to
    load is reported rather than replaced by another build.
    """
    if path:
        return [str(path)]
    candidates: List[str] = []
    env_path = os.environ.get(LIBRARY_PATH_ENV_VAR)
    if env_path:
        candidates.append(env_path)

    name = DEBUG_LIBRARY_NAME if debug else RELEASE_LIBRARY_NAME
    found = ctypes.util.find_library(name)
    if found:
        candidates.append(found)
    candidates.append(_shared_lib_file_name(name))
    # Keep order, drop duplicates.
    return list(dict.fromkeys(candidates))


def load_library(path: Optional[Union[str, Path]] = None, debug: bool = False) -> NativeLibrary:
    """
    Loads the DSS C-API library, reusing an already-loaded instance of the same file.

    Args:
        path: Explicit library file. When given, no other source is tried.
        debug: Select the debug build (`dss_capid`) when searching by name.

    Raises:
        LibraryLoadError: If no candidate could be loaded.
    """
    candidates = candidate_library_paths(path, debug)
    errors = []
    with _LOAD_LOCK:
        for candidate in candidates:
            cached = _LOADED_LIBRARIES.get(candidate)
            if cached is not None:
                return cached
            try:
                handle = ctypes.CDLL(candidate)
            except OSError as e:
                errors.append(f"{candidate}: {e}")
                logger.debug(f"Could not load DSS C-API candidate '{candidate}': {e}")
                continue
            apply_prototypes(handle)
            library = NativeLibrary(handle, path=candidate)
            _LOADED_LIBRARIES[candidate] = library
            logger.info(f"Loaded DSS C-API library from '{candidate}'.")
            return library

    raise LibraryLoadError(
        details="Could not load the DSS C-API shared library.\n" + "\n".join(errors),
        candidates=candidates,
    )
