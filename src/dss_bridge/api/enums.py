# src/dss_bridge/api/enums.py
from enum import IntEnum


class SolveModes(IntEnum):
    SnapShot = 0
    Daily = 1
    Yearly = 2
    Monte1 = 3
    LD1 = 4
    PeakDay = 5
    DutyCycle = 6
    Direct = 7
    MonteFault = 8
    FaultStudy = 9
    Monte2 = 10
    Monte3 = 11
    LD2 = 12
    AutoAdd = 13
    Dynamic = 14
    Harmonic = 15
    Time = 16
    HarmonicT = 17


class ControlModes(IntEnum):
    Off = -1
    Static = 0
    Event = 1
    Time = 2
    Multirate = 3
