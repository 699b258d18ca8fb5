"""Rules-validation and point-calculation engine.

Every function here is pure: all ship and squadron collections are passed in
by the caller and nothing touches storage.
"""

from .gun_check import add_gun, allowed_directions, can_add_gun, remove_gun
from .scoring import (
    defense_points,
    gun_points,
    pilot_points,
    ship_points,
    speed_points,
    squadron_points,
    upgrade_points,
)
from .ship_validator import gun_violations, validate_ship
from .squadron_validator import pilot_skill_options, rarity_counts, validate_squadron

__all__ = [
    "add_gun",
    "allowed_directions",
    "can_add_gun",
    "remove_gun",
    "defense_points",
    "gun_points",
    "pilot_points",
    "ship_points",
    "speed_points",
    "squadron_points",
    "upgrade_points",
    "gun_violations",
    "validate_ship",
    "pilot_skill_options",
    "rarity_counts",
    "validate_squadron",
]
