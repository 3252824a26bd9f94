"""
This package defines the typed channel states and the per-cycle appliance
snapshot that decodes raw properties into them.
"""
from mielelink.domain.state import (
    DateTimeState,
    OnOff,
    OpenClosed,
    QuantityState,
    State,
    StringState,
    UnDef,
    Unit,
)
from mielelink.domain.snapshot import ApplianceSnapshot

__all__ = [
    "ApplianceSnapshot",
    "DateTimeState",
    "OnOff",
    "OpenClosed",
    "QuantityState",
    "State",
    "StringState",
    "UnDef",
    "Unit",
]
