"""
Text formatting for SanctumPath.

Turns already-computed weight breakdowns and paths into the labels shown to
the player. Nothing here feeds back into costs.
"""

from sanctumpath.storage.models import RoomCoordinate, RoomWeightBreakdown
from sanctumpath.managers.weight_model import BASE_WEIGHT


def player_text(breakdown: RoomWeightBreakdown) -> str:
    """Fight room id followed by any notable rewards, one per line."""
    lines = []
    if breakdown.fight_room_id is not None:
        lines.append(breakdown.fight_room_id)
    lines.extend(breakdown.notable_rewards)
    return "\n".join(lines)


def debug_text(breakdown: RoomWeightBreakdown) -> str:
    """Every applied bonus and the total, one per line."""
    lines = []
    if breakdown.fight_room is not None:
        lines.append(f"RoomType: {breakdown.fight_room}")
    if breakdown.affliction is not None:
        lines.append(f"Affliction: {breakdown.affliction}")
    if breakdown.reward is not None:
        lines.append(f"Currency: {breakdown.reward}")
    if breakdown.room_type is not None:
        lines.append(f"RewardType: {breakdown.room_type}")
    if breakdown.connections is not None:
        lines.append(f"Connections: {breakdown.connections}")
    lines.append(f"Total: {BASE_WEIGHT - breakdown.cost}")
    return "\n".join(lines)


def format_room_label(breakdown: RoomWeightBreakdown, debug: bool = False) -> str:
    """
    Build the label drawn over a room.

    Args:
        breakdown: Weight breakdown of the room
        debug: Append the numeric breakdown to the player text

    Returns:
        Label text, possibly empty
    """
    text = player_text(breakdown)
    if not debug:
        return text
    return "\n".join(part for part in (text, debug_text(breakdown)) if part)


def format_path(path: list[RoomCoordinate]) -> str:
    if not path:
        return "(no path)"
    return " -> ".join(str(room) for room in path)
