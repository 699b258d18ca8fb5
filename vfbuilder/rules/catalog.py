"""Static catalog of upgrade definitions.

Definitions are templates; ships carry by-value copies created with
``attach_upgrade`` so that each attached upgrade has its own id.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ..models.dice import Rarity, ShipType, StatModifier, coerce_enum
from ..models.upgrade import Upgrade

SNUB = ShipType.SNUBFIGHTER
GUN = ShipType.GUNSHIP
CORV = ShipType.CORVETTE


@dataclass(frozen=True)
class UpgradeDefinition:
    """Catalog entry for an upgrade."""

    key: str
    name: str
    allowed_ship_types: tuple[ShipType, ...]
    rarity: Rarity
    rules_text: str = ""
    stat_modifier: Optional[StatModifier] = None


UPGRADE_DEFINITIONS: list[UpgradeDefinition] = [
    UpgradeDefinition("agile", "Agile", (SNUB, GUN), Rarity.COMMON,
                      stat_modifier=StatModifier.PILOTING),
    UpgradeDefinition("carrier", "Carrier", (GUN, CORV), Rarity.RARE),
    UpgradeDefinition("death-flower", "Death Flower", (SNUB, GUN), Rarity.RARE),
    UpgradeDefinition("decoy", "Decoy", (GUN, CORV), Rarity.UNCOMMON),
    UpgradeDefinition("ecm", "ECM", (GUN, CORV), Rarity.UNCOMMON),
    UpgradeDefinition("emergency-teleporter", "Emergency Teleporter", (SNUB, GUN), Rarity.RARE),
    UpgradeDefinition("enhanced-turret", "Enhanced Turret", (GUN, CORV), Rarity.UNCOMMON),
    UpgradeDefinition("fast", "Fast", (SNUB, GUN, CORV), Rarity.COMMON),
    UpgradeDefinition("fully-loaded", "Fully Loaded", (SNUB, GUN, CORV), Rarity.COMMON),
    UpgradeDefinition("ground-support", "Ground Support", (GUN,), Rarity.UNCOMMON),
    UpgradeDefinition("hard-point", "Hard Point", (SNUB, GUN, CORV), Rarity.COMMON),
    UpgradeDefinition("maneuverable", "Maneuverable", (SNUB, GUN, CORV), Rarity.COMMON,
                      stat_modifier=StatModifier.PILOTING),
    UpgradeDefinition("mining-charges", "Mining Charges", (GUN, CORV), Rarity.RARE),
    UpgradeDefinition("reinforced-hull", "Reinforced Hull", (CORV,), Rarity.RARE),
    UpgradeDefinition("repair", "Repair", (SNUB, GUN, CORV), Rarity.COMMON),
    UpgradeDefinition("shields", "Shields", (SNUB, GUN, CORV), Rarity.COMMON,
                      stat_modifier=StatModifier.DEFENSE),
    UpgradeDefinition("stealth", "Stealth", (SNUB, GUN), Rarity.UNCOMMON),
    UpgradeDefinition("tailgunner", "Tailgunner", (SNUB, GUN, CORV), Rarity.COMMON),
    UpgradeDefinition("targeting-computer", "Targeting Computer", (SNUB, GUN, CORV),
                      Rarity.COMMON, stat_modifier=StatModifier.FIREPOWER),
    UpgradeDefinition("torpedoes", "Torpedoes", (SNUB, GUN, CORV), Rarity.COMMON),
    UpgradeDefinition("tractor-beam", "Tractor Beam", (CORV,), Rarity.RARE),
    UpgradeDefinition("transport", "Transport", (GUN,), Rarity.UNCOMMON),
]

_DEFINITIONS_BY_KEY = {definition.key: definition for definition in UPGRADE_DEFINITIONS}


def allowed_upgrades(ship_type: ShipType | str) -> list[UpgradeDefinition]:
    """Upgrades a ship type may take, in catalog order."""
    ship_type = coerce_enum(ShipType, ship_type, "ship type")
    return [
        definition
        for definition in UPGRADE_DEFINITIONS
        if ship_type in definition.allowed_ship_types
    ]


def get_definition(key: str) -> UpgradeDefinition | None:
    """Find a catalog entry by key."""
    return _DEFINITIONS_BY_KEY.get(key)


def attach_upgrade(definition: UpgradeDefinition) -> Upgrade:
    """Create a ship-owned copy of a catalog upgrade with a fresh id."""
    return Upgrade(
        key=definition.key,
        name=definition.name,
        allowed_ship_types=list(definition.allowed_ship_types),
        rarity=definition.rarity,
        rules_text=definition.rules_text,
        stat_modifier=definition.stat_modifier,
    )


def toggle_upgrade(upgrades: Iterable[Upgrade], key: str, enabled: bool) -> list[Upgrade]:
    """Enable or disable an upgrade by catalog key.

    Every existing instance of ``key`` is removed; when enabling, one fresh
    copy is appended at the end.

    Args:
        upgrades: Current upgrades of a draft
        key: Catalog key to toggle
        enabled: Whether the upgrade should be present afterwards

    Returns:
        New upgrade list

    Raises:
        KeyError: If enabling a key that is not in the catalog
    """
    remaining = [upgrade for upgrade in upgrades if upgrade.key != key]
    if not enabled:
        return remaining
    definition = get_definition(key)
    if definition is None:
        raise KeyError(f"Unknown upgrade: {key}")
    return remaining + [attach_upgrade(definition)]


def filter_upgrades_for_type(upgrades: Iterable[Upgrade], ship_type: ShipType | str) -> list[Upgrade]:
    """Drop upgrades that the given ship type may not carry."""
    ship_type = coerce_enum(ShipType, ship_type, "ship type")
    return [upgrade for upgrade in upgrades if upgrade.allows(ship_type)]
