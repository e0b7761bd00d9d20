"""
Storage models for SanctumPath.

All dataclasses used across the project for floor topology input, run
state, per-room weights and planning results.
"""

from dataclasses import dataclass, field

# Game map-stat names that switch on run modifiers
STAT_RANDOM_AFFLICTION_ON_AFFLICTION = "SanctumGainRandomMinorAfflictionOnGainingAffliction"
STAT_PREVENT_MINOR_AFFLICTIONS = "SanctumPreventMinorAfflictions"
STAT_TRAP_RESOLVE_AFFLICTION = "AfflictionTrapSanctumDamage"


@dataclass(frozen=True, order=True)
class RoomCoordinate:
    """A room on the floor map, addressed by layer and index within the layer."""
    layer: int
    room: int

    def __str__(self) -> str:
        return f"({self.layer}, {self.room})"


@dataclass(frozen=True)
class RoomAttributes:
    """What a room offers, as shown on the floor map."""
    fight_room: str | None = None
    affliction: str | None = None
    rewards: tuple[str | None, str | None, str | None] = (None, None, None)
    reward_room: str | None = None

    @property
    def has_all_rewards(self) -> bool:
        return all(reward is not None for reward in self.rewards)

    @property
    def has_any_reward(self) -> bool:
        return any(reward is not None for reward in self.rewards)


@dataclass(frozen=True)
class RunContext:
    """Snapshot of the run state taken once per evaluation."""
    current_resolve: int = 0
    max_resolve: int = 0
    inspiration: int = 0
    gold: int = 0
    floor_number: int = -1  # 1-4, -1 when unknown
    random_affliction_on_affliction: bool = False
    ignore_minor_afflictions: bool = False
    trap_resolve_affliction: bool = False

    @classmethod
    def from_map_stats(cls, map_stats, **scalars) -> "RunContext":
        """
        Build a context from the names of the active map stats.

        Args:
            map_stats: Iterable of map-stat names present on the run
            **scalars: Resource values and floor number

        Returns:
            RunContext with modifier flags derived from the stats
        """
        stats = {str(stat) for stat in map_stats}
        return cls(
            random_affliction_on_affliction=STAT_RANDOM_AFFLICTION_ON_AFFLICTION in stats,
            ignore_minor_afflictions=STAT_PREVENT_MINOR_AFFLICTIONS in stats,
            trap_resolve_affliction=STAT_TRAP_RESOLVE_AFFLICTION in stats,
            **scalars,
        )


@dataclass
class RoomWeightBreakdown:
    """Bonuses applied to one room. Each step is None when it did not apply."""
    coordinate: RoomCoordinate
    base: int
    cost: int
    fight_room: int | None = None
    affliction: int | None = None
    reward: int | None = None
    room_type: int | None = None
    filler: int | None = None
    connections: int | None = None
    fight_room_id: str | None = None
    notable_rewards: list[str] = field(default_factory=list)

    @property
    def total_bonus(self) -> int:
        return self.base - self.cost

    def to_dict(self) -> dict:
        return {
            "layer": self.coordinate.layer,
            "room": self.coordinate.room,
            "base": self.base,
            "cost": self.cost,
            "fight_room": self.fight_room,
            "affliction": self.affliction,
            "reward": self.reward,
            "room_type": self.room_type,
            "filler": self.filler,
            "connections": self.connections,
            "fight_room_id": self.fight_room_id,
            "notable_rewards": list(self.notable_rewards),
        }


@dataclass
class FloorSnapshot:
    """Everything one evaluation needs about the current floor."""
    layout: list[list[list[int]]]  # layer -> room -> indices into the next layer
    rooms: list[list[RoomAttributes]] = field(default_factory=list)
    context: RunContext = field(default_factory=RunContext)
    current_position: RoomCoordinate | None = None
    boss_id: str | None = None


@dataclass
class PlanResult:
    """Outcome of one planning cycle."""
    path: list[RoomCoordinate] = field(default_factory=list)
    costs: dict[RoomCoordinate, int] = field(default_factory=dict)
    breakdowns: dict[RoomCoordinate, RoomWeightBreakdown] = field(default_factory=dict)
    current_position: RoomCoordinate | None = None

    def to_dict(self) -> dict:
        return {
            "path": [[c.layer, c.room] for c in self.path],
            "current_position": (
                [self.current_position.layer, self.current_position.room]
                if self.current_position is not None else None
            ),
            "costs": [
                {"layer": c.layer, "room": c.room, "cost": cost}
                for c, cost in sorted(self.costs.items())
            ],
        }
