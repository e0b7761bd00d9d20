"""
Storage layer for SanctumPath.

Provides dataclasses for floor and run state and the floor snapshot reader.
"""

from sanctumpath.storage.models import (
    FloorSnapshot,
    PlanResult,
    RoomAttributes,
    RoomCoordinate,
    RoomWeightBreakdown,
    RunContext,
)
from sanctumpath.storage.snapshot import SnapshotError, load_snapshot, snapshot_from_dict

__all__ = [
    "FloorSnapshot",
    "PlanResult",
    "RoomAttributes",
    "RoomCoordinate",
    "RoomWeightBreakdown",
    "RunContext",
    "SnapshotError",
    "load_snapshot",
    "snapshot_from_dict",
]
