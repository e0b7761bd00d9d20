"""
Weight table factory for building profiles from configuration.

Reads config.json and builds the WeightTables of the selected profile,
layered over the stock defaults.
"""

import json
import logging
import re

from sanctumpath.weights.defaults import CATALOGUES, DEFAULT_PROFILE_NAME, default_profile
from sanctumpath.weights.tables import REWARD_SUFFIXES, WeightTables

logger = logging.getLogger(__name__)

TABLE_NAMES = (
    "currency_weights",
    "fight_room_weights",
    "room_type_weights",
    "affliction_weights",
)

_FLOOR_SUFFIX = re.compile(r"_Floor-?\d+$")


def load_config(config_path: str = "config.json") -> dict:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to config.json

    Returns:
        Parsed configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        json.JSONDecodeError: If config file is invalid JSON
    """
    try:
        with open(config_path, 'r') as f:
            config = json.load(f)
        logger.info(f"Loaded configuration from {config_path}")
        return config
    except FileNotFoundError:
        logger.error(f"Configuration file not found: {config_path}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in configuration file: {e}")
        raise


def get_current_profile(config: dict) -> tuple[str, dict]:
    """
    Resolve the active profile of a configuration.

    The configured current profile wins if it exists, then the first
    profile listed, then an empty "Default" profile.

    Args:
        config: Full configuration dictionary

    Returns:
        Tuple of (profile_name, profile_dict)
    """
    profiles = config.get("profiles") or {}
    current = config.get("current_profile")

    if current is not None and current in profiles:
        name = current
    else:
        name = next(iter(profiles), DEFAULT_PROFILE_NAME)

    return name, profiles.get(name) or {}


def _validate_table(profile_name: str, table_name: str, table: dict) -> dict[str, int]:
    """Check that every weight of a table is an integer."""
    if not isinstance(table, dict):
        raise ValueError(
            f"Profile '{profile_name}': '{table_name}' must be an object"
        )

    validated = {}
    for key, value in table.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(
                f"Profile '{profile_name}': weight '{table_name}.{key}' "
                f"must be an integer, got {value!r}"
            )
        validated[str(key)] = value
    return validated


def key_identifier(table_name: str, key: str) -> str | None:
    """
    Strip the slot or floor suffix from a table key.

    Args:
        table_name: One of TABLE_NAMES
        key: Key as written in the profile (e.g., "Chaos Orbs_Now")

    Returns:
        The currency, room or affliction name the key weighs, or None
        for a currency key without a reward slot suffix
    """
    if table_name == "currency_weights":
        for suffix in REWARD_SUFFIXES:
            if key.endswith(suffix):
                return key[:-len(suffix)]
        return None
    if table_name in ("fight_room_weights", "room_type_weights"):
        return _FLOOR_SUFFIX.sub("", key)
    return key


def _warn_unknown_keys(profile_name: str, table_name: str, table: dict[str, int]) -> None:
    """Log every key that weighs nothing the weight model can look up."""
    known = CATALOGUES[table_name]
    unknown = [key for key in table if key_identifier(table_name, key) not in known]
    for key in unknown:
        logger.warning(
            f"Profile '{profile_name}': '{table_name}.{key}' does not name a known "
            f"{table_name.removesuffix('_weights').replace('_', ' ')}"
        )


def create_weight_tables(config: dict, profile_name: str | None = None) -> WeightTables:
    """
    Create the weight tables for a profile.

    Args:
        config: Full configuration dictionary (may be empty)
        profile_name: Profile to use, or None for the current profile

    Returns:
        WeightTables with the profile's entries merged over the defaults

    Raises:
        ValueError: If the named profile is unknown or a weight is invalid
    """
    if profile_name is None:
        profile_name, profile = get_current_profile(config)
    else:
        profiles = config.get("profiles") or {}
        if profile_name not in profiles and profile_name != DEFAULT_PROFILE_NAME:
            raise ValueError(f"Unknown weight profile: {profile_name}")
        profile = profiles.get(profile_name) or {}

    tables = default_profile()
    for table_name in TABLE_NAMES:
        overrides = profile.get(table_name)
        if overrides is None:
            continue
        validated = _validate_table(profile_name, table_name, overrides)
        _warn_unknown_keys(profile_name, table_name, validated)
        tables[table_name].update(validated)

    logger.info(
        f"Using weight profile '{profile_name}' "
        f"({sum(len(t) for t in tables.values())} weights)"
    )

    return WeightTables(
        fight_room_weights=tables["fight_room_weights"],
        room_type_weights=tables["room_type_weights"],
        affliction_weights=tables["affliction_weights"],
        currency_weights=tables["currency_weights"],
    )
