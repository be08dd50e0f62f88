# src/dss_bridge/api/cktelement.py
from typing import List, Sequence

import numpy as np

from .base import Base


class ICktElement(Base):
    """The active circuit element, selected with `ICircuit.set_active_element`."""

    @property
    def name(self) -> str:
        """Full name, e.g. "Load.671"."""
        return self._ctx.get_text("ctx_CktElement_Get_Name")

    @property
    def num_phases(self) -> int:
        return self._get_int("ctx_CktElement_Get_NumPhases")

    @property
    def num_terminals(self) -> int:
        return self._get_int("ctx_CktElement_Get_NumTerminals")

    @property
    def bus_names(self) -> List[str]:
        return self._ctx.get_string_array("ctx_CktElement_Get_BusNames")

    @bus_names.setter
    def bus_names(self, value: Sequence[str]) -> None:
        self._ctx.set_string_array("ctx_CktElement_Set_BusNames", value)

    @property
    def all_property_names(self) -> List[str]:
        return self._ctx.get_string_array("ctx_CktElement_Get_AllPropertyNames")

    @property
    def enabled(self) -> bool:
        return self._get_bool("ctx_CktElement_Get_Enabled")

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._set_bool("ctx_CktElement_Set_Enabled", value)

    @property
    def voltages(self) -> np.ndarray:
        return self._ctx.get_complex_array("ctx_CktElement_Get_Voltages")

    @property
    def currents(self) -> np.ndarray:
        return self._ctx.get_complex_array("ctx_CktElement_Get_Currents")

    @property
    def powers(self) -> np.ndarray:
        """Complex power per conductor, kVA."""
        return self._ctx.get_complex_array("ctx_CktElement_Get_Powers")

    @property
    def node_order(self) -> np.ndarray:
        return self._ctx.get_int32_array("ctx_CktElement_Get_NodeOrder")
