# src/dss_bridge/api/solution.py
from typing import Union

from ..units import QuantityLike, to_magnitude
from .base import Base
from .enums import ControlModes, SolveModes


class ISolution(Base):
    """Solution control for the active circuit."""

    def solve(self) -> None:
        self._ctx.call("ctx_Solution_Solve")

    def solve_snap(self) -> None:
        self._ctx.call("ctx_Solution_SolveSnap")

    def solve_no_control(self) -> None:
        self._ctx.call("ctx_Solution_SolveNoControl")

    def check_controls(self) -> None:
        self._ctx.call("ctx_Solution_CheckControls")

    @property
    def mode(self) -> SolveModes:
        return SolveModes(self._get_int("ctx_Solution_Get_Mode"))

    @mode.setter
    def mode(self, value: Union[SolveModes, int]) -> None:
        self._set_int("ctx_Solution_Set_Mode", value)

    @property
    def control_mode(self) -> ControlModes:
        return ControlModes(self._get_int("ctx_Solution_Get_ControlMode"))

    @control_mode.setter
    def control_mode(self, value: Union[ControlModes, int]) -> None:
        self._set_int("ctx_Solution_Set_ControlMode", value)

    @property
    def load_mult(self) -> float:
        return self._get_float("ctx_Solution_Get_LoadMult")

    @load_mult.setter
    def load_mult(self, value: float) -> None:
        self._set_float("ctx_Solution_Set_LoadMult", value)

    @property
    def dbl_hour(self) -> float:
        """Simulation time in hours, including the fractional part."""
        return self._get_float("ctx_Solution_Get_dblHour")

    @dbl_hour.setter
    def dbl_hour(self, value: QuantityLike) -> None:
        self._set_float("ctx_Solution_Set_dblHour", to_magnitude(value, "hour", "ctx_Solution_Set_dblHour"))

    @property
    def hour(self) -> int:
        return self._get_int("ctx_Solution_Get_Hour")

    @hour.setter
    def hour(self, value: int) -> None:
        self._set_int("ctx_Solution_Set_Hour", value)

    @property
    def seconds(self) -> float:
        return self._get_float("ctx_Solution_Get_Seconds")

    @seconds.setter
    def seconds(self, value: QuantityLike) -> None:
        self._set_float("ctx_Solution_Set_Seconds", to_magnitude(value, "second", "ctx_Solution_Set_Seconds"))

    @property
    def number(self) -> int:
        """Number of solutions to perform per `solve()` in time-series modes."""
        return self._get_int("ctx_Solution_Get_Number")

    @number.setter
    def number(self, value: int) -> None:
        self._set_int("ctx_Solution_Set_Number", value)

    @property
    def step_size(self) -> float:
        """Time step in seconds. Accepts quantities such as "15 min" when set."""
        return self._get_float("ctx_Solution_Get_StepSize")

    @step_size.setter
    def step_size(self, value: QuantityLike) -> None:
        self._set_float("ctx_Solution_Set_StepSize", to_magnitude(value, "second", "ctx_Solution_Set_StepSize"))

    def stepsize_min(self, minutes: QuantityLike) -> None:
        """Sets the time step in minutes (write-only in the engine)."""
        self._set_float("ctx_Solution_Set_StepsizeMin", to_magnitude(minutes, "minute", "ctx_Solution_Set_StepsizeMin"))

    def stepsize_hr(self, hours: QuantityLike) -> None:
        """Sets the time step in hours (write-only in the engine)."""
        self._set_float("ctx_Solution_Set_StepsizeHr", to_magnitude(hours, "hour", "ctx_Solution_Set_StepsizeHr"))

    @property
    def tolerance(self) -> float:
        return self._get_float("ctx_Solution_Get_Tolerance")

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        self._set_float("ctx_Solution_Set_Tolerance", value)

    @property
    def max_iterations(self) -> int:
        return self._get_int("ctx_Solution_Get_MaxIterations")

    @max_iterations.setter
    def max_iterations(self, value: int) -> None:
        self._set_int("ctx_Solution_Set_MaxIterations", value)

    @property
    def converged(self) -> bool:
        return self._get_bool("ctx_Solution_Get_Converged")

    @property
    def iterations(self) -> int:
        return self._get_int("ctx_Solution_Get_Iterations")
