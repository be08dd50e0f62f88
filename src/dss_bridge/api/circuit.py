# src/dss_bridge/api/circuit.py
from typing import List

import numpy as np

from ..context import DSSContext
from ..native.marshal import encode_text
from .base import Base
from .bus import IBus
from .cktelement import ICktElement
from .loads import ILoads
from .meters import IMeters
from .monitors import IMonitors
from .settings import ISettings
from .solution import ISolution


class ICircuit(Base):
    """
    The active circuit of a context.

    Child interfaces share the same context; creating them is free and they
    always act on whatever the engine currently has active.
    """

    def __init__(self, ctx: DSSContext):
        super().__init__(ctx)
        self.solution = ISolution(ctx)
        self.settings = ISettings(ctx)
        self.active_bus = IBus(ctx)
        self.active_ckt_element = ICktElement(ctx)
        self.loads = ILoads(ctx)
        self.meters = IMeters(ctx)
        self.monitors = IMonitors(ctx)

    @property
    def name(self) -> str:
        return self._ctx.get_text("ctx_Circuit_Get_Name")

    @property
    def num_buses(self) -> int:
        return self._get_int("ctx_Circuit_Get_NumBuses")

    @property
    def num_nodes(self) -> int:
        return self._get_int("ctx_Circuit_Get_NumNodes")

    @property
    def num_ckt_elements(self) -> int:
        return self._get_int("ctx_Circuit_Get_NumCktElements")

    @property
    def all_bus_names(self) -> List[str]:
        return self._ctx.get_string_array("ctx_Circuit_Get_AllBusNames")

    @property
    def all_node_names(self) -> List[str]:
        return self._ctx.get_string_array("ctx_Circuit_Get_AllNodeNames")

    @property
    def all_element_names(self) -> List[str]:
        return self._ctx.get_string_array("ctx_Circuit_Get_AllElementNames")

    @property
    def all_bus_vmag_pu(self) -> np.ndarray:
        """Per-unit voltage magnitude of every node, in `all_node_names` order."""
        return self._ctx.get_float64_array("ctx_Circuit_Get_AllBusVmagPu")

    @property
    def all_bus_volts(self) -> np.ndarray:
        return self._ctx.get_complex_array("ctx_Circuit_Get_AllBusVolts")

    @property
    def total_power(self) -> complex:
        """Total power delivered by the sources, kVA."""
        return self._ctx.get_complex("ctx_Circuit_Get_TotalPower")

    @property
    def losses(self) -> complex:
        """Total circuit losses, VA."""
        return self._ctx.get_complex("ctx_Circuit_Get_Losses")

    def set_active_element(self, full_name: str) -> int:
        """Activates an element by full name ("Class.name"); returns its index or -1."""
        return int(self._ctx.call("ctx_Circuit_SetActiveElement", encode_text(full_name, "ctx_Circuit_SetActiveElement")))

    def set_active_bus(self, bus_name: str) -> int:
        """Activates a bus by name; returns its index or -1."""
        return int(self._ctx.call("ctx_Circuit_SetActiveBus", encode_text(bus_name, "ctx_Circuit_SetActiveBus")))
