# src/dss_bridge/api/monitors.py
import numpy as np

from .base import Iterable


class IMonitors(Iterable):
    """Monitors of the active circuit; properties apply to the active monitor."""
    _prefix = "ctx_Monitors"

    @property
    def byte_stream(self) -> np.ndarray:
        """Raw monitor stream as signed bytes, header included."""
        return self._ctx.get_int8_array("ctx_Monitors_Get_ByteStream")

    @property
    def sample_count(self) -> int:
        return self._get_int("ctx_Monitors_Get_SampleCount")

    def channel(self, index: int) -> np.ndarray:
        """Values recorded on one channel (1-based index)."""
        return self._ctx.get_float64_array("ctx_Monitors_Get_Channel", int(index))

    def reset_all(self) -> None:
        self._ctx.call("ctx_Monitors_ResetAll")

    def sample_all(self) -> None:
        self._ctx.call("ctx_Monitors_SampleAll")

    def save_all(self) -> None:
        self._ctx.call("ctx_Monitors_SaveAll")
