# src/dss_bridge/native/marshal.py
"""
Conversions between Python values and the C shapes the DSS C-API expects.

Inputs are validated here, before any native call, so a malformed value never
reaches the engine. Outputs read from engine-owned buffers are always copied
into Python/NumPy objects; the caller releases the original buffer through the
engine's deallocator.
"""
import ctypes
import logging
from ctypes import c_char_p, c_double, c_int32
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .exceptions import MarshalError

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"


# --- text ---

def encode_text(value: str, operation: str = "") -> bytes:
    """Encodes a Python string as a NUL-terminated-safe C string."""
    if not isinstance(value, str):
        raise MarshalError(operation=operation, details=f"Expected text, got {type(value).__name__}.")
    if "\x00" in value:
        raise MarshalError(operation=operation, details="Text arguments cannot contain NUL characters.")
    return value.encode(TEXT_ENCODING)


def decode_text(raw: Optional[bytes]) -> str:
    """Decodes a C string returned by the engine; NULL becomes an empty string."""
    if raw is None:
        return ""
    return raw.decode(TEXT_ENCODING, errors="replace")


# --- sequences passed to the engine ---

def _as_vector(values, dtype, operation: str, expected_length: Optional[int]) -> np.ndarray:
    try:
        array = np.asarray(values, dtype=dtype)
    except (TypeError, ValueError) as e:
        raise MarshalError(operation=operation, details=f"Could not convert the sequence to {np.dtype(dtype).name}: {e}") from e
    if array.ndim != 1:
        raise MarshalError(operation=operation, details=f"Expected a one-dimensional sequence, got shape {array.shape}.")
    if expected_length is not None and array.size != expected_length:
        raise MarshalError(
            operation=operation,
            details=f"Expected exactly {expected_length} value(s), got {array.size}.",
        )
    return array


def float64_buffer(values: Sequence[float], operation: str = "", expected_length: Optional[int] = None) -> Tuple[ctypes.Array, int]:
    """Builds a `(const double*, count)` argument pair."""
    if np.iscomplexobj(values):
        raise MarshalError(operation=operation, details="Complex values are not accepted here.")
    array = _as_vector(values, np.float64, operation, expected_length)
    return (c_double * array.size)(*array.tolist()), int(array.size)


def int32_buffer(values: Sequence[int], operation: str = "", expected_length: Optional[int] = None) -> Tuple[ctypes.Array, int]:
    """Builds a `(const int32_t*, count)` argument pair."""
    raw = _as_vector(values, np.float64, operation, expected_length)
    if not np.all(np.isfinite(raw)) or not np.all(raw == np.round(raw)):
        raise MarshalError(operation=operation, details="Integer sequence contains non-integral values.")
    info = np.iinfo(np.int32)
    if raw.size and (raw.min() < info.min or raw.max() > info.max):
        raise MarshalError(operation=operation, details="Integer sequence contains values outside the int32 range.")
    array = raw.astype(np.int32)
    return (c_int32 * array.size)(*array.tolist()), int(array.size)


def text_buffer(values: Sequence[str], operation: str = "", expected_length: Optional[int] = None) -> Tuple[ctypes.Array, int]:
    """Builds a `(const char**, count)` argument pair."""
    if isinstance(values, (str, bytes)):
        raise MarshalError(operation=operation, details="Expected a sequence of strings, got a single string.")
    encoded = [encode_text(v, operation) for v in values]
    if expected_length is not None and len(encoded) != expected_length:
        raise MarshalError(
            operation=operation,
            details=f"Expected exactly {expected_length} string(s), got {len(encoded)}.",
        )
    return (c_char_p * len(encoded))(*encoded), len(encoded)


# --- buffers returned by the engine ---

def read_numeric(data, count: int, dtype) -> np.ndarray:
    """Copies `count` elements of an engine-owned numeric buffer into a new array."""
    if count <= 0 or not data:
        return np.zeros(0, dtype=dtype)
    return np.ctypeslib.as_array(data, shape=(count,)).astype(dtype, copy=True)


def read_strings(data, count: int) -> List[str]:
    """Copies `count` C strings out of an engine-owned `char**` buffer."""
    if count <= 0 or not data:
        return []
    return [decode_text(data[i]) for i in range(count)]


def as_complex_array(values: np.ndarray, operation: str = "") -> np.ndarray:
    """
    Reinterprets interleaved (re, im) float64 pairs as a complex128 array.

    The engine reports an empty complex array as a single placeholder value.
    """
    if values.size == 1:
        return np.zeros(0, dtype=np.complex128)
    if values.size % 2:
        raise MarshalError(
            operation=operation,
            details=f"Interleaved complex buffer has odd length {values.size}.",
        )
    return np.ascontiguousarray(values, dtype=np.float64).view(np.complex128)


def as_complex_scalar(values: np.ndarray, operation: str = "") -> complex:
    """Converts a two-element (re, im) float64 buffer into a Python complex."""
    if values.size != 2:
        raise MarshalError(
            operation=operation,
            details=f"Expected 2 values for a complex number, got {values.size}.",
        )
    return complex(float(values[0]), float(values[1]))
