# src/dss_bridge/api/loads.py
from typing import Sequence

import numpy as np

from ..units import QuantityLike, to_magnitude
from .base import Iterable

#: The ZIPV property always carries seven coefficients.
ZIPV_LENGTH = 7


class ILoads(Iterable):
    """Load objects of the active circuit; properties apply to the active load."""
    _prefix = "ctx_Loads"

    @property
    def kw(self) -> float:
        return self._get_float("ctx_Loads_Get_kW")

    @kw.setter
    def kw(self, value: QuantityLike) -> None:
        self._set_float("ctx_Loads_Set_kW", to_magnitude(value, "kW", "ctx_Loads_Set_kW"))

    @property
    def kvar(self) -> float:
        return self._get_float("ctx_Loads_Get_kvar")

    @kvar.setter
    def kvar(self, value: float) -> None:
        self._set_float("ctx_Loads_Set_kvar", value)

    @property
    def kv(self) -> float:
        return self._get_float("ctx_Loads_Get_kV")

    @kv.setter
    def kv(self, value: QuantityLike) -> None:
        self._set_float("ctx_Loads_Set_kV", to_magnitude(value, "kV", "ctx_Loads_Set_kV"))

    @property
    def pf(self) -> float:
        return self._get_float("ctx_Loads_Get_PF")

    @pf.setter
    def pf(self, value: float) -> None:
        self._set_float("ctx_Loads_Set_PF", value)

    @property
    def zipv(self) -> np.ndarray:
        """ZIP coefficients plus cutoff voltage, seven values."""
        return self._ctx.get_float64_array("ctx_Loads_Get_ZIPV")

    @zipv.setter
    def zipv(self, value: Sequence[float]) -> None:
        self._ctx.set_float64_array("ctx_Loads_Set_ZIPV", value, expected_length=ZIPV_LENGTH)
