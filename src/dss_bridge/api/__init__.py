# src/dss_bridge/api/__init__.py
from .base import Base, Iterable
from .bus import IBus
from .circuit import ICircuit
from .cktelement import ICktElement
from .dss import IDSS
from .enums import ControlModes, SolveModes
from .loads import ILoads
from .meters import IMeters
from .monitors import IMonitors
from .settings import ISettings
from .solution import ISolution
from .text import IText

__all__ = [
    # Entry point
    "IDSS",
    # Interfaces
    "IBus",
    "ICircuit",
    "ICktElement",
    "ILoads",
    "IMeters",
    "IMonitors",
    "ISettings",
    "ISolution",
    "IText",
    # Enumerations
    "ControlModes",
    "SolveModes",
    # Base classes
    "Base",
    "Iterable",
]
