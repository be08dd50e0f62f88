# src/dss_bridge/api/settings.py
from typing import Sequence

import numpy as np

from .base import Base


class ISettings(Base):
    """Circuit-wide options of the active circuit."""

    @property
    def voltage_bases(self) -> np.ndarray:
        """Legal voltage bases in kV (L-L)."""
        return self._ctx.get_float64_array("ctx_Settings_Get_VoltageBases")

    @voltage_bases.setter
    def voltage_bases(self, value: Sequence[float]) -> None:
        self._ctx.set_float64_array("ctx_Settings_Set_VoltageBases", value)

    @property
    def loss_regs(self) -> np.ndarray:
        """Energy-meter register indices summed into the loss total."""
        return self._ctx.get_int32_array("ctx_Settings_Get_LossRegs")

    @loss_regs.setter
    def loss_regs(self, value: Sequence[int]) -> None:
        self._ctx.set_int32_array("ctx_Settings_Set_LossRegs", value)

    @property
    def ue_regs(self) -> np.ndarray:
        """Energy-meter register indices summed into the unserved-energy total."""
        return self._ctx.get_int32_array("ctx_Settings_Get_UEregs")

    @ue_regs.setter
    def ue_regs(self, value: Sequence[int]) -> None:
        self._ctx.set_int32_array("ctx_Settings_Set_UEregs", value)

    @property
    def allow_duplicates(self) -> bool:
        return self._get_bool("ctx_Settings_Get_AllowDuplicates")

    @allow_duplicates.setter
    def allow_duplicates(self, value: bool) -> None:
        self._set_bool("ctx_Settings_Set_AllowDuplicates", value)

    @property
    def zone_lock(self) -> bool:
        return self._get_bool("ctx_Settings_Get_ZoneLock")

    @zone_lock.setter
    def zone_lock(self, value: bool) -> None:
        self._set_bool("ctx_Settings_Set_ZoneLock", value)

    @property
    def norm_vmax_pu(self) -> float:
        return self._get_float("ctx_Settings_Get_NormVmaxpu")

    @norm_vmax_pu.setter
    def norm_vmax_pu(self, value: float) -> None:
        self._set_float("ctx_Settings_Set_NormVmaxpu", value)

    @property
    def norm_vmin_pu(self) -> float:
        return self._get_float("ctx_Settings_Get_NormVminpu")

    @norm_vmin_pu.setter
    def norm_vmin_pu(self, value: float) -> None:
        self._set_float("ctx_Settings_Set_NormVminpu", value)

    @property
    def emerg_vmax_pu(self) -> float:
        return self._get_float("ctx_Settings_Get_EmergVmaxpu")

    @emerg_vmax_pu.setter
    def emerg_vmax_pu(self, value: float) -> None:
        self._set_float("ctx_Settings_Set_EmergVmaxpu", value)

    @property
    def emerg_vmin_pu(self) -> float:
        return self._get_float("ctx_Settings_Get_EmergVminpu")

    @emerg_vmin_pu.setter
    def emerg_vmin_pu(self, value: float) -> None:
        self._set_float("ctx_Settings_Set_EmergVminpu", value)
