"""
Floor snapshot reader for SanctumPath.

A snapshot is a JSON dump of what the game exposes about the current
floor: room layout, room attributes, run resources and active map stats.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from sanctumpath.storage.models import (
    FloorSnapshot,
    RoomAttributes,
    RoomCoordinate,
    RunContext,
)

logger = logging.getLogger(__name__)

# Final boss of each floor identifies the floor number
BOSS_FLOOR_NUMBERS = {
    "Cellar_Boss_1_1": 1,
    "Vaults_Boss_1_1": 2,
    "Nave_Boss_1_1": 3,
    "xxxx_Boss_1_1": 4,
}


class SnapshotError(ValueError):
    """Raised when a floor snapshot cannot be interpreted."""


def floor_number_from_boss(boss_id: Optional[str]) -> int:
    """
    Derive the floor number from the floor boss's room id.

    Args:
        boss_id: Fight room id of the floor's last room

    Returns:
        Floor number 1-4, or -1 if the boss is unknown
    """
    return BOSS_FLOOR_NUMBERS.get(boss_id, -1)


def current_position_from_choices(room_choices: list[int]) -> Optional[RoomCoordinate]:
    """The last chosen room, on the layer given by the number of choices made."""
    if not room_choices:
        return None
    return RoomCoordinate(len(room_choices) - 1, int(room_choices[-1]))


def _parse_room(data: Any) -> RoomAttributes:
    if data is None:
        return RoomAttributes()
    if not isinstance(data, dict):
        raise SnapshotError(f"Room entry must be an object, got {type(data).__name__}")

    rewards = list(data.get("rewards") or [])
    if len(rewards) > 3:
        raise SnapshotError(f"A room has at most 3 rewards, got {len(rewards)}")
    rewards += [None] * (3 - len(rewards))

    return RoomAttributes(
        fight_room=data.get("fight_room"),
        affliction=data.get("affliction"),
        rewards=tuple(rewards),
        reward_room=data.get("reward_room"),
    )


def _parse_layout(data: Any) -> list[list[list[int]]]:
    if not isinstance(data, list):
        raise SnapshotError("'room_layout' must be a list of layers")

    layout = []
    for layer_index, layer in enumerate(data):
        if not isinstance(layer, list):
            raise SnapshotError(f"Layer {layer_index} of 'room_layout' must be a list")
        try:
            layout.append([[int(target) for target in room] for room in layer])
        except (TypeError, ValueError) as e:
            raise SnapshotError(f"Invalid connections on layer {layer_index}: {e}") from e
    return layout


def snapshot_from_dict(data: dict) -> FloorSnapshot:
    """
    Build a FloorSnapshot from parsed JSON.

    Args:
        data: Snapshot dictionary

    Returns:
        FloorSnapshot ready for planning

    Raises:
        SnapshotError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a JSON object")
    if "room_layout" not in data:
        raise SnapshotError("Snapshot is missing 'room_layout'")

    layout = _parse_layout(data["room_layout"])
    rooms = []
    for layer_index, layer in enumerate(data.get("rooms") or []):
        if not isinstance(layer, list):
            raise SnapshotError(f"Layer {layer_index} of 'rooms' must be a list")
        rooms.append([_parse_room(room) for room in layer])

    boss_id = data.get("boss_id")
    floor_number = data.get("floor_number")
    if floor_number is None:
        floor_number = floor_number_from_boss(boss_id)
        if floor_number == -1:
            logger.warning(f"Unknown floor boss '{boss_id}', floor number unknown")

    try:
        context = RunContext.from_map_stats(
            data.get("map_stats") or [],
            current_resolve=int(data.get("current_resolve", 0)),
            max_resolve=int(data.get("max_resolve", 0)),
            inspiration=int(data.get("inspiration", 0)),
            gold=int(data.get("gold", 0)),
            floor_number=int(floor_number),
        )
        room_choices = [int(choice) for choice in data.get("room_choices") or []]
    except (TypeError, ValueError) as e:
        raise SnapshotError(f"Invalid run state in snapshot: {e}") from e

    return FloorSnapshot(
        layout=layout,
        rooms=rooms,
        context=context,
        current_position=current_position_from_choices(room_choices),
        boss_id=boss_id,
    )


def load_snapshot(snapshot_path: str | Path) -> FloorSnapshot:
    """
    Load a floor snapshot from a JSON file.

    Args:
        snapshot_path: Path to the snapshot file

    Returns:
        Parsed FloorSnapshot

    Raises:
        FileNotFoundError: If the file doesn't exist
        SnapshotError: If the file is not a valid snapshot
    """
    try:
        with open(snapshot_path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON in snapshot {snapshot_path}: {e}") from e

    snapshot = snapshot_from_dict(data)
    logger.debug(
        f"Loaded snapshot {snapshot_path}: {len(snapshot.layout)} layers, "
        f"floor {snapshot.context.floor_number}"
    )
    return snapshot
