# src/dss_bridge/native/prototypes.py
"""
ctypes prototypes for the DSS C-API entry points used by dss_bridge.

Each entry maps an exported symbol to `(restype, argtypes)`. Context-aware
entry points (`ctx_*`) take the context handle as their first argument.
Array getters use the engine-allocating form `(T** ResultPtr, int32_t* ResultCount)`
where `ResultCount` points to four int32 slots; array setters take
`(const T* ValuePtr, int32_t ValueCount)`.
"""
from ctypes import (
    POINTER,
    c_char_p,
    c_double,
    c_int8,
    c_int32,
    c_uint16,
    c_uint32,
    c_void_p,
)
from typing import Dict, List, Optional, Tuple

# ---------------------------------------------------------------------------
# C-API primitive types
# ---------------------------------------------------------------------------
CTX = c_void_p
TEXT = c_char_p
BOOL = c_uint16
INT32 = c_int32
UINT32 = c_uint32
FLOAT64 = c_double

PFLOAT64 = POINTER(c_double)
PINT32 = POINTER(c_int32)
PINT8 = POINTER(c_int8)
PTEXT = POINTER(c_char_p)

PPFLOAT64 = POINTER(PFLOAT64)
PPINT32 = POINTER(PINT32)
PPINT8 = POINTER(PINT8)
PPTEXT = POINTER(PTEXT)

#: Number of int32 slots the engine writes through `ResultCount`
#: (element count, allocated capacity, and two dimension hints).
RESULT_COUNT_SLOTS = 4

Prototype = Tuple[Optional[type], List[type]]


def _getter(restype) -> Prototype:
    return (restype, [CTX])


def _setter(argtype) -> Prototype:
    return (None, [CTX, argtype])


def _action() -> Prototype:
    return (None, [CTX])


def _array_getter(pptype, *extra) -> Prototype:
    return (None, [CTX, pptype, PINT32, *extra])


def _array_setter(ptype) -> Prototype:
    return (None, [CTX, ptype, INT32])


PROTOTYPES: Dict[str, Prototype] = {
    # --- context lifecycle ---
    "ctx_New": (CTX, []),
    "ctx_Dispose": (None, [CTX]),
    "ctx_Get_Prime": (CTX, []),
    "ctx_DSS_Start": (BOOL, [CTX, INT32]),

    # --- error query ---
    "ctx_Error_Get_NumberPtr": (PINT32, [CTX]),
    "ctx_Error_Get_Number": _getter(INT32),
    "ctx_Error_Get_Description": _getter(TEXT),

    # --- engine-owned buffer release (not context-aware) ---
    "DSS_Dispose_PDouble": (None, [PPFLOAT64]),
    "DSS_Dispose_PInteger": (None, [PPINT32]),
    "DSS_Dispose_PByte": (None, [PPINT8]),
    "DSS_Dispose_PPAnsiChar": (None, [PPTEXT, INT32]),

    # --- DSS ---
    "ctx_DSS_ClearAll": _action(),
    "ctx_DSS_Reset": _action(),
    "ctx_DSS_Get_Version": _getter(TEXT),
    "ctx_DSS_NewCircuit": (INT32, [CTX, TEXT]),
    "ctx_DSS_Get_NumCircuits": _getter(INT32),
    "ctx_DSS_Get_Classes": _array_getter(PPTEXT),
    "ctx_DSS_Get_UserClasses": _array_getter(PPTEXT),
    "ctx_DSS_Get_AllowChangeDir": _getter(BOOL),
    "ctx_DSS_Set_AllowChangeDir": _setter(BOOL),
    "ctx_DSS_Get_AllowForms": _getter(BOOL),
    "ctx_DSS_Set_AllowForms": _setter(BOOL),
    "ctx_DSS_Get_CompatFlags": _getter(UINT32),
    "ctx_DSS_Set_CompatFlags": _setter(UINT32),

    # --- Text ---
    "ctx_Text_Get_Command": _getter(TEXT),
    "ctx_Text_Set_Command": _setter(TEXT),
    "ctx_Text_Get_Result": _getter(TEXT),
    "ctx_Text_CommandBlock": _setter(TEXT),
    "ctx_Text_CommandArray": _array_setter(PTEXT),

    # --- Circuit ---
    "ctx_Circuit_Get_Name": _getter(TEXT),
    "ctx_Circuit_Get_NumBuses": _getter(INT32),
    "ctx_Circuit_Get_NumNodes": _getter(INT32),
    "ctx_Circuit_Get_NumCktElements": _getter(INT32),
    "ctx_Circuit_Get_AllBusNames": _array_getter(PPTEXT),
    "ctx_Circuit_Get_AllNodeNames": _array_getter(PPTEXT),
    "ctx_Circuit_Get_AllElementNames": _array_getter(PPTEXT),
    "ctx_Circuit_Get_AllBusVmagPu": _array_getter(PPFLOAT64),
    "ctx_Circuit_Get_AllBusVolts": _array_getter(PPFLOAT64),
    "ctx_Circuit_Get_TotalPower": _array_getter(PPFLOAT64),
    "ctx_Circuit_Get_Losses": _array_getter(PPFLOAT64),
    "ctx_Circuit_SetActiveElement": (INT32, [CTX, TEXT]),
    "ctx_Circuit_SetActiveBus": (INT32, [CTX, TEXT]),

    # --- Solution ---
    "ctx_Solution_Solve": _action(),
    "ctx_Solution_SolveSnap": _action(),
    "ctx_Solution_SolveNoControl": _action(),
    "ctx_Solution_CheckControls": _action(),
    "ctx_Solution_Get_Mode": _getter(INT32),
    "ctx_Solution_Set_Mode": _setter(INT32),
    "ctx_Solution_Get_ControlMode": _getter(INT32),
    "ctx_Solution_Set_ControlMode": _setter(INT32),
    "ctx_Solution_Get_LoadMult": _getter(FLOAT64),
    "ctx_Solution_Set_LoadMult": _setter(FLOAT64),
    "ctx_Solution_Get_dblHour": _getter(FLOAT64),
    "ctx_Solution_Set_dblHour": _setter(FLOAT64),
    "ctx_Solution_Get_Hour": _getter(INT32),
    "ctx_Solution_Set_Hour": _setter(INT32),
    "ctx_Solution_Get_Seconds": _getter(FLOAT64),
    "ctx_Solution_Set_Seconds": _setter(FLOAT64),
    "ctx_Solution_Get_Number": _getter(INT32),
    "ctx_Solution_Set_Number": _setter(INT32),
    "ctx_Solution_Get_StepSize": _getter(FLOAT64),
    "ctx_Solution_Set_StepSize": _setter(FLOAT64),
    "ctx_Solution_Set_StepsizeMin": _setter(FLOAT64),
    "ctx_Solution_Set_StepsizeHr": _setter(FLOAT64),
    "ctx_Solution_Get_Tolerance": _getter(FLOAT64),
    "ctx_Solution_Set_Tolerance": _setter(FLOAT64),
    "ctx_Solution_Get_MaxIterations": _getter(INT32),
    "ctx_Solution_Set_MaxIterations": _setter(INT32),
    "ctx_Solution_Get_Converged": _getter(BOOL),
    "ctx_Solution_Get_Iterations": _getter(INT32),

    # --- Settings ---
    "ctx_Settings_Get_VoltageBases": _array_getter(PPFLOAT64),
    "ctx_Settings_Set_VoltageBases": _array_setter(PFLOAT64),
    "ctx_Settings_Get_AllowDuplicates": _getter(BOOL),
    "ctx_Settings_Set_AllowDuplicates": _setter(BOOL),
    "ctx_Settings_Get_ZoneLock": _getter(BOOL),
    "ctx_Settings_Set_ZoneLock": _setter(BOOL),
    "ctx_Settings_Get_NormVmaxpu": _getter(FLOAT64),
    "ctx_Settings_Set_NormVmaxpu": _setter(FLOAT64),
    "ctx_Settings_Get_NormVminpu": _getter(FLOAT64),
    "ctx_Settings_Set_NormVminpu": _setter(FLOAT64),
    "ctx_Settings_Get_EmergVmaxpu": _getter(FLOAT64),
    "ctx_Settings_Set_EmergVmaxpu": _setter(FLOAT64),
    "ctx_Settings_Get_EmergVminpu": _getter(FLOAT64),
    "ctx_Settings_Set_EmergVminpu": _setter(FLOAT64),
    "ctx_Settings_Get_LossRegs": _array_getter(PPINT32),
    "ctx_Settings_Set_LossRegs": _array_setter(PINT32),
    "ctx_Settings_Get_UEregs": _array_getter(PPINT32),
    "ctx_Settings_Set_UEregs": _array_setter(PINT32),

    # --- Bus (active bus) ---
    "ctx_Bus_Get_Name": _getter(TEXT),
    "ctx_Bus_Get_kVBase": _getter(FLOAT64),
    "ctx_Bus_Get_NumNodes": _getter(INT32),
    "ctx_Bus_Get_Nodes": _array_getter(PPINT32),
    "ctx_Bus_Get_Voltages": _array_getter(PPFLOAT64),
    "ctx_Bus_Get_puVoltages": _array_getter(PPFLOAT64),
    "ctx_Bus_Get_Distance": _getter(FLOAT64),

    # --- CktElement (active circuit element) ---
    "ctx_CktElement_Get_Name": _getter(TEXT),
    "ctx_CktElement_Get_NumPhases": _getter(INT32),
    "ctx_CktElement_Get_NumTerminals": _getter(INT32),
    "ctx_CktElement_Get_BusNames": _array_getter(PPTEXT),
    "ctx_CktElement_Set_BusNames": _array_setter(PTEXT),
    "ctx_CktElement_Get_AllPropertyNames": _array_getter(PPTEXT),
    "ctx_CktElement_Get_Enabled": _getter(BOOL),
    "ctx_CktElement_Set_Enabled": _setter(BOOL),
    "ctx_CktElement_Get_Voltages": _array_getter(PPFLOAT64),
    "ctx_CktElement_Get_Currents": _array_getter(PPFLOAT64),
    "ctx_CktElement_Get_Powers": _array_getter(PPFLOAT64),
    "ctx_CktElement_Get_NodeOrder": _array_getter(PPINT32),

    # --- Loads ---
    "ctx_Loads_Get_First": _getter(INT32),
    "ctx_Loads_Get_Next": _getter(INT32),
    "ctx_Loads_Get_Count": _getter(INT32),
    "ctx_Loads_Get_AllNames": _array_getter(PPTEXT),
    "ctx_Loads_Get_Name": _getter(TEXT),
    "ctx_Loads_Set_Name": _setter(TEXT),
    "ctx_Loads_Get_kW": _getter(FLOAT64),
    "ctx_Loads_Set_kW": _setter(FLOAT64),
    "ctx_Loads_Get_kvar": _getter(FLOAT64),
    "ctx_Loads_Set_kvar": _setter(FLOAT64),
    "ctx_Loads_Get_kV": _getter(FLOAT64),
    "ctx_Loads_Set_kV": _setter(FLOAT64),
    "ctx_Loads_Get_PF": _getter(FLOAT64),
    "ctx_Loads_Set_PF": _setter(FLOAT64),
    "ctx_Loads_Get_ZIPV": _array_getter(PPFLOAT64),
    "ctx_Loads_Set_ZIPV": _array_setter(PFLOAT64),

    # --- Meters ---
    "ctx_Meters_Get_First": _getter(INT32),
    "ctx_Meters_Get_Next": _getter(INT32),
    "ctx_Meters_Get_Count": _getter(INT32),
    "ctx_Meters_Get_AllNames": _array_getter(PPTEXT),
    "ctx_Meters_Get_Name": _getter(TEXT),
    "ctx_Meters_Set_Name": _setter(TEXT),
    "ctx_Meters_Get_RegisterNames": _array_getter(PPTEXT),
    "ctx_Meters_Get_RegisterValues": _array_getter(PPFLOAT64),
    "ctx_Meters_Get_Totals": _array_getter(PPFLOAT64),
    "ctx_Meters_Reset": _action(),
    "ctx_Meters_ResetAll": _action(),
    "ctx_Meters_SampleAll": _action(),
    "ctx_Meters_SaveAll": _action(),

    # --- Monitors ---
    "ctx_Monitors_Get_First": _getter(INT32),
    "ctx_Monitors_Get_Next": _getter(INT32),
    "ctx_Monitors_Get_Count": _getter(INT32),
    "ctx_Monitors_Get_AllNames": _array_getter(PPTEXT),
    "ctx_Monitors_Get_Name": _getter(TEXT),
    "ctx_Monitors_Set_Name": _setter(TEXT),
    "ctx_Monitors_Get_ByteStream": _array_getter(PPINT8),
    "ctx_Monitors_Get_SampleCount": _getter(INT32),
    "ctx_Monitors_Get_Channel": _array_getter(PPFLOAT64, INT32),
    "ctx_Monitors_ResetAll": _action(),
    "ctx_Monitors_SampleAll": _action(),
    "ctx_Monitors_SaveAll": _action(),
}
