"""Tunnel control via awg / awg-quick."""

from .awg import AwgController, InterfaceState, ProbeResult, TunnelControl
from .configs import list_configs
from .errors import DirectoryUnreadableError, StoreWriteError, WgToggleError
from .selection import SelectionStore
from .status import StatusReport, build_status
from .switcher import NEXT, PREVIOUS, TunnelSwitcher, next_index

__all__ = [
    "AwgController",
    "InterfaceState",
    "ProbeResult",
    "TunnelControl",
    "list_configs",
    "DirectoryUnreadableError",
    "StoreWriteError",
    "WgToggleError",
    "SelectionStore",
    "StatusReport",
    "build_status",
    "NEXT",
    "PREVIOUS",
    "TunnelSwitcher",
    "next_index",
]
