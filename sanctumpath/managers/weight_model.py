"""
Room weight model for SanctumPath.

Turns a room's attributes into an integer cost. Every room starts from a
shared base and each applicable bonus is subtracted, so lower costs are
more desirable.
"""

import logging

from sanctumpath.managers.floor_manager import FloorTopology
from sanctumpath.storage.models import (
    RoomAttributes,
    RoomCoordinate,
    RoomWeightBreakdown,
    RunContext,
)
from sanctumpath.weights.defaults import MAJOR_AFFLICTIONS
from sanctumpath.weights.tables import REWARD_SUFFIXES, WeightTables

logger = logging.getLogger(__name__)

BASE_WEIGHT = 1000000

ARENA_ROOM = "Arena"
EXPLORE_ROOM = "Explore"
DEFERRAL_ROOM = "Deferral"
FLOOR_TAX = "Floor Tax"

ARENA_TRAP_MULTIPLIER = 4
EXPLORE_LOW_RESOLVE_THRESHOLD = 50
EXPLORE_LOW_RESOLVE_MULTIPLIER = 10

# Flat stand-in for the expected weight of the extra random minor affliction
RANDOM_AFFLICTION_ADJUSTMENT = 100

EARLY_FLOOR_FILLER = 25
LATE_FLOOR_FILLER = 75
CONNECTION_WEIGHT = 5

NOTABLE_REWARD_WEIGHT = 5000


class WeightModel:
    """
    Cost function over room attributes for one run context.

    Holds no state besides the tables and context it was built with.
    """

    def __init__(self, tables: WeightTables, context: RunContext):
        """
        Initialize the weight model.

        Args:
            tables: Weight tables of the active profile
            context: Run state for this evaluation
        """
        self.tables = tables
        self.context = context

    @property
    def floor_number(self) -> int:
        return self.context.floor_number

    def compute_room_cost(
        self, room: RoomAttributes, layer_index: int, connection_count: int, room_index: int = 0
    ) -> int:
        """
        Compute the cost of a single room.

        Args:
            room: Room attributes
            layer_index: Layer the room sits on
            connection_count: Number of forward connections out of the room
            room_index: Index within the layer, only used to label the breakdown

        Returns:
            Integer cost, lower is better
        """
        return self.breakdown(room, layer_index, connection_count, room_index).cost

    def breakdown(
        self, room: RoomAttributes, layer_index: int, connection_count: int, room_index: int = 0
    ) -> RoomWeightBreakdown:
        """Compute the cost of a room along with every bonus that went into it."""
        floor = self.floor_number
        base = BASE_WEIGHT
        result = RoomWeightBreakdown(
            coordinate=RoomCoordinate(layer_index, room_index), base=base, cost=base
        )

        if room.fight_room is not None:
            weight = self.tables.fight_room_weight(room.fight_room, floor)
            if room.fight_room == ARENA_ROOM and self.context.trap_resolve_affliction:
                weight *= ARENA_TRAP_MULTIPLIER
            elif (
                room.fight_room == EXPLORE_ROOM
                and self.context.current_resolve + self.context.inspiration
                < EXPLORE_LOW_RESOLVE_THRESHOLD
            ):
                base *= EXPLORE_LOW_RESOLVE_MULTIPLIER
            result.fight_room = weight
            result.fight_room_id = room.fight_room

        if room.affliction is not None:
            result.affliction = self._affliction_weight(room.affliction)

        if room.has_all_rewards:
            slot_weights = [
                self.tables.currency_weight(name, suffix)
                for name, suffix in zip(room.rewards, REWARD_SUFFIXES)
            ]
            result.reward = max(slot_weights)
            result.notable_rewards = [
                name for name, weight in zip(room.rewards, slot_weights)
                if weight > NOTABLE_REWARD_WEIGHT
            ]

        room_type_applied = False
        if room.reward_room is not None:
            result.room_type = self.tables.room_type_weight(room.reward_room, floor)
            # A deferral room with rewards on it is not a skip
            room_type_applied = room.reward_room != DEFERRAL_ROOM or not room.has_any_reward

        bonus = sum(
            weight for weight in (result.fight_room, result.affliction, result.reward)
            if weight is not None
        )
        if room_type_applied:
            bonus += result.room_type

        if all(
            step is None
            for step in (result.fight_room, result.affliction, result.reward, result.room_type)
        ):
            result.filler = EARLY_FLOOR_FILLER if floor in (1, 2) else LATE_FLOOR_FILLER
            bonus += result.filler

        if connection_count > 0:
            result.connections = connection_count * CONNECTION_WEIGHT
            bonus += result.connections

        result.base = base
        result.cost = base - bonus
        return result

    def _affliction_weight(self, affliction: str) -> int:
        weight = self.tables.affliction_weight(affliction)
        if self.context.random_affliction_on_affliction:
            weight += RANDOM_AFFLICTION_ADJUSTMENT
        if self.context.ignore_minor_afflictions and affliction not in MAJOR_AFFLICTIONS:
            weight = 0
        if self.floor_number == 4 and affliction == FLOOR_TAX:
            weight = 0
        return weight

    def build_cost_table(
        self, topology: FloorTopology
    ) -> tuple[dict[RoomCoordinate, int], dict[RoomCoordinate, RoomWeightBreakdown]]:
        """
        Weigh every room of a floor.

        Args:
            topology: Floor whose rooms should be weighed

        Returns:
            Tuple of (cost table, breakdown per room)
        """
        costs: dict[RoomCoordinate, int] = {}
        breakdowns: dict[RoomCoordinate, RoomWeightBreakdown] = {}

        for coordinate in topology.rooms():
            details = self.breakdown(
                topology.get_room(coordinate),
                coordinate.layer,
                topology.connection_count(coordinate),
                coordinate.room,
            )
            costs[coordinate] = details.cost
            breakdowns[coordinate] = details
            logger.debug(f"Room {coordinate}: cost {details.cost} (bonus {details.total_bonus})")

        return costs, breakdowns
