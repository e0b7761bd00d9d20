"""
Weight lookup tables for SanctumPath.

Holds the four tables of one profile and composes their keys. Lookups
never fail: unknown keys weigh 0.
"""

import logging

logger = logging.getLogger(__name__)

# Reward slot suffixes, in slot order
REWARD_NOW = "_Now"
REWARD_END_OF_FLOOR = "_EndOfFloor"
REWARD_END_OF_SANCTUM = "_EndOfSanctum"
REWARD_SUFFIXES = (REWARD_NOW, REWARD_END_OF_FLOOR, REWARD_END_OF_SANCTUM)

# Mirrors can never be weighted away, whatever the profile says
MIRROR_MARKER = "Mirror"
MIRROR_SAFETY_WEIGHT = 1000000


def floor_key(category: str, floor_number: int) -> str:
    """
    Compose a floor-scoped table key.

    Args:
        category: Fight room or reward room category (e.g., "Arena")
        floor_number: Floor number, -1 when unknown

    Returns:
        Key such as "Arena_Floor3"
    """
    return f"{category}_Floor{floor_number}"


class WeightTables:
    """The fight room, room type, affliction and currency tables of a profile."""

    def __init__(
        self,
        fight_room_weights: dict[str, int] | None = None,
        room_type_weights: dict[str, int] | None = None,
        affliction_weights: dict[str, int] | None = None,
        currency_weights: dict[str, int] | None = None,
    ):
        self.fight_room_weights = dict(fight_room_weights or {})
        self.room_type_weights = dict(room_type_weights or {})
        self.affliction_weights = dict(affliction_weights or {})
        self.currency_weights = dict(currency_weights or {})

    def fight_room_weight(self, category: str, floor_number: int) -> int:
        return self.fight_room_weights.get(floor_key(category, floor_number), 0)

    def room_type_weight(self, category: str, floor_number: int) -> int:
        return self.room_type_weights.get(floor_key(category, floor_number), 0)

    def affliction_weight(self, name: str) -> int:
        return self.affliction_weights.get(name, 0)

    def currency_weight(self, name: str, suffix: str = "") -> int:
        """
        Look up a reward weight for a currency in a given reward slot.

        Args:
            name: Currency name as shown on the map (e.g., "Chaos Orbs")
            suffix: Slot suffix, one of REWARD_SUFFIXES

        Returns:
            Configured weight, MIRROR_SAFETY_WEIGHT for mirrors, else 0
        """
        key = name + suffix
        if MIRROR_MARKER in key:
            return MIRROR_SAFETY_WEIGHT
        return self.currency_weights.get(key, 0)

