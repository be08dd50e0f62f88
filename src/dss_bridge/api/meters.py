# src/dss_bridge/api/meters.py
from typing import List

import numpy as np

from ..native.exceptions import MarshalError
from .base import Iterable


class IMeters(Iterable):
    """Energy meters of the active circuit; properties apply to the active meter."""
    _prefix = "ctx_Meters"

    @property
    def register_names(self) -> List[str]:
        return self._ctx.get_string_array("ctx_Meters_Get_RegisterNames")

    @property
    def register_values(self) -> np.ndarray:
        return self._ctx.get_float64_array("ctx_Meters_Get_RegisterValues")

    @property
    def totals(self) -> np.ndarray:
        """Register totals summed over all meters."""
        return self._ctx.get_float64_array("ctx_Meters_Get_Totals")

    def register(self, register_name: str, totals: bool = False) -> float:
        """
        Looks up one register by name.

        Register positions can change across engine versions, so lookups go
        through the register names reported by the engine.
        """
        names = self.register_names
        try:
            idx = names.index(register_name)
        except ValueError as e:
            raise MarshalError(
                operation="ctx_Meters_Get_RegisterNames",
                details=f"No energy-meter register named '{register_name}'.",
            ) from e
        values = self.totals if totals else self.register_values
        if idx >= values.size:
            raise MarshalError(
                operation="ctx_Meters_Get_Totals" if totals else "ctx_Meters_Get_RegisterValues",
                details=f"Register '{register_name}' is at index {idx} but only {values.size} value(s) were returned.",
            )
        return float(values[idx])

    def reset(self) -> None:
        self._ctx.call("ctx_Meters_Reset")

    def reset_all(self) -> None:
        self._ctx.call("ctx_Meters_ResetAll")

    def sample_all(self) -> None:
        self._ctx.call("ctx_Meters_SampleAll")

    def save_all(self) -> None:
        self._ctx.call("ctx_Meters_SaveAll")
