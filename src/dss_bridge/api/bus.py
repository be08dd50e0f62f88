# src/dss_bridge/api/bus.py
import numpy as np

from .base import Base


class IBus(Base):
    """The active bus, selected with `ICircuit.set_active_bus`."""

    @property
    def name(self) -> str:
        return self._ctx.get_text("ctx_Bus_Get_Name")

    @property
    def kv_base(self) -> float:
        """Base voltage, kV (L-N)."""
        return self._get_float("ctx_Bus_Get_kVBase")

    @property
    def num_nodes(self) -> int:
        return self._get_int("ctx_Bus_Get_NumNodes")

    @property
    def nodes(self) -> np.ndarray:
        return self._ctx.get_int32_array("ctx_Bus_Get_Nodes")

    @property
    def voltages(self) -> np.ndarray:
        """Complex node voltages, V."""
        return self._ctx.get_complex_array("ctx_Bus_Get_Voltages")

    @property
    def pu_voltages(self) -> np.ndarray:
        return self._ctx.get_complex_array("ctx_Bus_Get_puVoltages")

    @property
    def distance(self) -> float:
        """Distance from the energy meter, if one is defined upstream."""
        return self._get_float("ctx_Bus_Get_Distance")
