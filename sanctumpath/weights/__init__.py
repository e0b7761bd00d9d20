"""
Weight profiles for SanctumPath.

Provides the four lookup tables consulted by the weight model, the stock
default profile, and configuration loading.
"""

from sanctumpath.weights.factory import create_weight_tables, get_current_profile, load_config
from sanctumpath.weights.tables import (
    MIRROR_SAFETY_WEIGHT,
    REWARD_END_OF_FLOOR,
    REWARD_END_OF_SANCTUM,
    REWARD_NOW,
    REWARD_SUFFIXES,
    WeightTables,
)

__all__ = [
    "MIRROR_SAFETY_WEIGHT",
    "REWARD_END_OF_FLOOR",
    "REWARD_END_OF_SANCTUM",
    "REWARD_NOW",
    "REWARD_SUFFIXES",
    "WeightTables",
    "create_weight_tables",
    "get_current_profile",
    "load_config",
]
