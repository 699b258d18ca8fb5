"""Static rule table and upgrade catalog."""

from .catalog import (
    UPGRADE_DEFINITIONS,
    UpgradeDefinition,
    allowed_upgrades,
    attach_upgrade,
    filter_upgrades_for_type,
    get_definition,
    toggle_upgrade,
)
from .ship_rules import (
    DEFENSE_POINTS,
    FIREPOWER_POINTS,
    PILOT_POINTS,
    SHIP_RULES,
    SPEED_POINTS,
    ShipRules,
    get_rules,
)

__all__ = [
    "DEFENSE_POINTS",
    "FIREPOWER_POINTS",
    "PILOT_POINTS",
    "SHIP_RULES",
    "SPEED_POINTS",
    "ShipRules",
    "get_rules",
    "UPGRADE_DEFINITIONS",
    "UpgradeDefinition",
    "allowed_upgrades",
    "attach_upgrade",
    "filter_upgrades_for_type",
    "get_definition",
    "toggle_upgrade",
]
