# src/dss_bridge/context/context.py
"""
Defines `DSSContext`, the owned handle to one isolated DSS engine instance.

Every engine call made through a context is immediately followed by a check of
that context's error number. A non-zero number is read, cleared, and raised as
an `EngineError` before control returns to the caller, so an error can never be
attributed to a later, unrelated call. Buffers allocated by the engine for
array results are always handed back to the engine's own deallocators.
"""
import logging
import threading
import weakref
from contextlib import contextmanager
from ctypes import POINTER, c_char_p, c_double, c_int8, c_int32, pointer
from typing import Any, Callable, Iterator, List, Optional, Sequence

import numpy as np

from ..native import marshal
from ..native.exceptions import MarshalError
from ..native.library import NativeLibrary, load_library
from ..native.prototypes import RESULT_COUNT_SLOTS
from .exceptions import (
    ContextBusyError,
    ContextClosedError,
    EngineError,
    InitializationError,
)
from .results import OperationResult

logger = logging.getLogger(__name__)


def _release_context(library: NativeLibrary, handle: int) -> None:
    """Finalizer body; `weakref.finalize` guarantees it runs at most once."""
    library.dispose_context(handle)
    logger.debug(f"Disposed DSS context {handle:#x}.")


class DSSContext:
    """
    Exclusive owner of one engine instance.

    Create instances with `DSSContext.new()` (a fresh, independent engine) or
    `DSSContext.prime()` (the engine instance the library creates on load, which
    is never disposed by the wrapper). A context is released exactly once: by
    `close()`, by leaving a `with` block, or when it is garbage collected.

    A context must be driven by one thread at a time. Entering it from a second
    thread while a call is in flight raises `ContextBusyError`. Separate contexts
    share no state and may be driven fully in parallel.
    """

    def __init__(self, library: NativeLibrary, handle: int, owned: bool = True):
        self._library = library
        self._handle: Optional[int] = handle
        self._owned = owned
        self._call_lock = threading.Lock()
        self._error_number = None
        self._finalizer = weakref.finalize(self, _release_context, library, handle) if owned else None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def new(cls, library: Optional[NativeLibrary] = None) -> "DSSContext":
        """
        Allocates and starts a new engine instance.

        Raises:
            InitializationError: If the engine returns a null handle or fails to start.
        """
        library = library if library is not None else load_library()
        handle = library.new_context()
        if handle is None:
            raise InitializationError("The engine returned a null context handle (ctx_New).")
        ctx = cls(library, handle, owned=True)
        try:
            ctx._start()
        except Exception:
            ctx.close()
            raise
        logger.info(f"Created DSS context {handle:#x}.")
        return ctx

    @classmethod
    def prime(cls, library: Optional[NativeLibrary] = None) -> "DSSContext":
        """Wraps the library's prime context. Closing the wrapper leaves the engine alive."""
        library = library if library is not None else load_library()
        handle = library.prime_context()
        if handle is None:
            raise InitializationError("The engine has no prime context (ctx_Get_Prime returned null).")
        ctx = cls(library, handle, owned=False)
        ctx._start()
        logger.debug(f"Attached to prime DSS context {handle:#x}.")
        return ctx

    def new_context(self) -> "DSSContext":
        """Creates another, independent context from the same library."""
        return type(self).new(self._library)

    def _start(self) -> None:
        started = self._library.function("ctx_DSS_Start")(self._handle, 0)
        self._error_number = self._library.function("ctx_Error_Get_NumberPtr")(self._handle)
        if not self._error_number:
            raise InitializationError("The engine returned a null error-number pointer.")
        code = self._error_number[0]
        if code != 0:
            message = marshal.decode_text(self._library.function("ctx_Error_Get_Description")(self._handle))
            self._error_number[0] = 0
            raise InitializationError(f"The engine failed to start: (#{code}) {message}", code=code)
        if not started:
            raise InitializationError("The engine reported a failed start (ctx_DSS_Start).")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def library(self) -> NativeLibrary:
        return self._library

    @property
    def handle(self) -> Optional[int]:
        """The raw engine handle, or None once closed."""
        return self._handle

    @property
    def closed(self) -> bool:
        return self._handle is None

    @property
    def is_prime(self) -> bool:
        return not self._owned

    def close(self) -> None:
        """Releases the engine instance. Further calls are no-ops."""
        with self._call_lock:
            if self._handle is None:
                return
            handle = self._handle
            self._handle = None
            self._error_number = None
            if self._finalizer is not None:
                self._finalizer()
            else:
                logger.debug(f"Detached from prime DSS context {handle:#x}.")

    def __enter__(self) -> "DSSContext":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def __repr__(self):
        if self._handle is None:
            return "<DSSContext closed>"
        kind = "prime" if self.is_prime else "owned"
        return f"<DSSContext {kind} {self._handle:#x}>"

    # ------------------------------------------------------------------
    # Error translation
    # ------------------------------------------------------------------
    @contextmanager
    def _entered(self, operation: str) -> Iterator[int]:
        if not self._call_lock.acquire(blocking=False):
            raise ContextBusyError(operation=operation)
        try:
            if self._handle is None:
                raise ContextClosedError(operation=operation)
            yield self._handle
        finally:
            self._call_lock.release()

    def _raise_for_error(self, operation: str) -> None:
        code = self._error_number[0]
        if code == 0:
            return
        message = marshal.decode_text(self._library.function("ctx_Error_Get_Description")(self._handle))
        self._error_number[0] = 0
        logger.debug(f"{operation} failed on context {self._handle:#x}: (#{code}) {message}")
        raise EngineError(code=code, message=message, operation=operation, context_handle=self._handle)

    def call(self, entry_point: str, *args: Any) -> Any:
        """
        Calls a context-aware entry point and returns its native result.

        Raises:
            EngineError: If the engine reported an error for this call.
        """
        with self._entered(entry_point) as handle:
            func = self._library.function(entry_point)
            result = func(handle, *args)
            self._raise_for_error(entry_point)
            return result

    def attempt(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> OperationResult:
        """
        Runs `func(*args, **kwargs)` and returns an `OperationResult` instead of raising.

        Only engine-reported and marshaling failures are captured; misuse of the
        context (closed, busy) and unrelated exceptions still propagate.
        """
        try:
            value = func(*args, **kwargs)
        except (EngineError, MarshalError) as e:
            return OperationResult.failure(e)
        return OperationResult.success(value)

    # ------------------------------------------------------------------
    # Scalars and text
    # ------------------------------------------------------------------
    def get_text(self, entry_point: str, *args: Any) -> str:
        return marshal.decode_text(self.call(entry_point, *args))

    def set_text(self, entry_point: str, value: str) -> None:
        self.call(entry_point, marshal.encode_text(value, entry_point))

    # ------------------------------------------------------------------
    # Engine-allocated array results
    # ------------------------------------------------------------------
    def _get_buffer(self, entry_point: str, ctype, reader, release, extra: Sequence[Any]):
        with self._entered(entry_point) as handle:
            func = self._library.function(entry_point)
            data = POINTER(ctype)()
            count = (c_int32 * RESULT_COUNT_SLOTS)()
            try:
                func(handle, pointer(data), count, *extra)
                self._raise_for_error(entry_point)
                return reader(data, count[0])
            finally:
                if data:
                    release(data, count)

    def get_float64_array(self, entry_point: str, *extra: Any) -> np.ndarray:
        return self._get_buffer(
            entry_point, c_double,
            lambda data, n: marshal.read_numeric(data, n, np.float64),
            lambda data, _count: self._library.dispose_float64(data),
            extra,
        )

    def get_int32_array(self, entry_point: str, *extra: Any) -> np.ndarray:
        return self._get_buffer(
            entry_point, c_int32,
            lambda data, n: marshal.read_numeric(data, n, np.int32),
            lambda data, _count: self._library.dispose_int32(data),
            extra,
        )

    def get_int8_array(self, entry_point: str, *extra: Any) -> np.ndarray:
        return self._get_buffer(
            entry_point, c_int8,
            lambda data, n: marshal.read_numeric(data, n, np.int8),
            lambda data, _count: self._library.dispose_int8(data),
            extra,
        )

    def get_string_array(self, entry_point: str, *extra: Any) -> List[str]:
        return self._get_buffer(
            entry_point, c_char_p,
            marshal.read_strings,
            lambda data, count: self._library.dispose_strings(data, count[1]),
            extra,
        )

    def get_complex_array(self, entry_point: str, *extra: Any) -> np.ndarray:
        return marshal.as_complex_array(self.get_float64_array(entry_point, *extra), entry_point)

    def get_complex(self, entry_point: str, *extra: Any) -> complex:
        return marshal.as_complex_scalar(self.get_float64_array(entry_point, *extra), entry_point)

    # ------------------------------------------------------------------
    # Sequence arguments
    # ------------------------------------------------------------------
    def set_float64_array(self, entry_point: str, values: Sequence[float], expected_length: Optional[int] = None) -> None:
        buffer, count = marshal.float64_buffer(values, entry_point, expected_length)
        self.call(entry_point, buffer, count)

    def set_int32_array(self, entry_point: str, values: Sequence[int], expected_length: Optional[int] = None) -> None:
        buffer, count = marshal.int32_buffer(values, entry_point, expected_length)
        self.call(entry_point, buffer, count)

    def set_string_array(self, entry_point: str, values: Sequence[str], expected_length: Optional[int] = None) -> None:
        buffer, count = marshal.text_buffer(values, entry_point, expected_length)
        self.call(entry_point, buffer, count)
