# src/dss_bridge/context/results.py
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

from ..native.exceptions import MarshalError
from .exceptions import EngineError

T = TypeVar("T")

OperationFailure = Union[EngineError, MarshalError]


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of one engine operation: either a value or the structured error.

    Produced by `DSSContext.attempt`. The error is captured at the moment the
    operation returned, so it always belongs to that operation.
    """
    value: Optional[T] = None
    error: Optional[OperationFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def code(self) -> int:
        """Engine error code; 0 on success, -1 for marshaling failures."""
        if self.error is None:
            return 0
        if isinstance(self.error, EngineError):
            return self.error.code
        return -1

    @property
    def message(self) -> str:
        if self.error is None:
            return ""
        if isinstance(self.error, EngineError):
            return self.error.message
        return str(self.error)

    def unwrap(self) -> T:
        """Returns the value, or raises the captured error."""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: OperationFailure) -> "OperationResult":
        return cls(error=error)
