# src/dss_bridge/api/base.py
"""
Base classes shared by the classic API interfaces.

Each interface is a thin view over one `DSSContext`: it holds no engine state
of its own, and every property or method maps onto one engine entry point.
"""
import logging
from typing import Iterator

from ..context import DSSContext

logger = logging.getLogger(__name__)


class Base:
    """Common plumbing: scalar coercions around `DSSContext.call`."""

    def __init__(self, ctx: DSSContext):
        self._ctx = ctx

    @property
    def context(self) -> DSSContext:
        return self._ctx

    def _get_bool(self, entry_point: str) -> bool:
        return self._ctx.call(entry_point) != 0

    def _set_bool(self, entry_point: str, value: bool) -> None:
        self._ctx.call(entry_point, 1 if value else 0)

    def _get_int(self, entry_point: str) -> int:
        return int(self._ctx.call(entry_point))

    def _set_int(self, entry_point: str, value: int) -> None:
        self._ctx.call(entry_point, int(value))

    def _get_float(self, entry_point: str) -> float:
        return float(self._ctx.call(entry_point))

    def _set_float(self, entry_point: str, value: float) -> None:
        self._ctx.call(entry_point, float(value))


class Iterable(Base):
    """
    A collection interface driven by the engine's active-object cursor.

    Subclasses set `_prefix` to the entry-point family (e.g. "ctx_Loads").
    Iteration moves the cursor, activating each object in turn, and yields its
    name.
    """
    _prefix = ""

    def first(self) -> int:
        """Activates the first object; returns 0 if the collection is empty."""
        return self._get_int(f"{self._prefix}_Get_First")

    def next(self) -> int:
        """Activates the next object; returns 0 past the end."""
        return self._get_int(f"{self._prefix}_Get_Next")

    @property
    def count(self) -> int:
        return self._get_int(f"{self._prefix}_Get_Count")

    @property
    def all_names(self):
        return self._ctx.get_string_array(f"{self._prefix}_Get_AllNames")

    @property
    def name(self) -> str:
        """Name of the active object."""
        return self._ctx.get_text(f"{self._prefix}_Get_Name")

    @name.setter
    def name(self, value: str) -> None:
        self._ctx.set_text(f"{self._prefix}_Set_Name", value)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[str]:
        idx = self.first()
        while idx != 0:
            yield self.name
            idx = self.next()
