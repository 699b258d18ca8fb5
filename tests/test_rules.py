"""Tests for the rule table and upgrade catalog."""

import pytest

from vfbuilder.models import DiceValue, Rarity, ShipType, StatModifier
from vfbuilder.rules import (
    SHIP_RULES,
    UPGRADE_DEFINITIONS,
    allowed_upgrades,
    attach_upgrade,
    filter_upgrades_for_type,
    get_definition,
    get_rules,
    toggle_upgrade,
)


class TestShipRules:
    """Test per-type rules."""

    def test_all_types_present(self):
        """Every ship type has rules."""
        assert set(SHIP_RULES) == set(ShipType)

    def test_snubfighter(self):
        """Snubfighter rules."""
        rules = get_rules("Snubfighter")
        assert rules.max_points == 14
        assert rules.max_guns == 2
        assert rules.max_upgrades == 3
        assert rules.speed_range == (2, 3)
        assert rules.first_gun_must_be_forward is True
        assert rules.allowed_defense == (DiceValue.D6,)
        assert rules.allowed_firepower == (DiceValue.D6, DiceValue.D8)

    def test_gunship(self):
        """Gunship rules."""
        rules = get_rules(ShipType.GUNSHIP)
        assert rules.max_points == 20
        assert rules.speed_range == (1, 2)
        assert rules.first_gun_must_be_forward is False
        assert rules.allowed_defense == (DiceValue.D8,)
        assert DiceValue.D10 in rules.allowed_firepower

    def test_corvette(self):
        """Corvette rules."""
        rules = get_rules(ShipType.CORVETTE)
        assert rules.max_points == 30
        assert rules.max_guns == 3
        assert rules.max_upgrades == 5
        assert rules.speed_range == (1, 1)
        assert rules.allowed_firepower == (DiceValue.D8, DiceValue.D10)
        assert rules.allowed_pilot_skills == (DiceValue.D6, DiceValue.D8)

    def test_speed_allowed_inclusive(self):
        """Speed range bounds are inclusive."""
        rules = get_rules(ShipType.SNUBFIGHTER)
        assert not rules.speed_allowed(1)
        assert rules.speed_allowed(2)
        assert rules.speed_allowed(3)

    def test_unknown_type(self):
        """Unknown types are rejected."""
        with pytest.raises(ValueError, match="Invalid ship type"):
            get_rules("Dreadnought")


class TestCatalog:
    """Test the upgrade catalog."""

    def test_catalog_size_and_unique_keys(self):
        """22 definitions with unique keys."""
        keys = [definition.key for definition in UPGRADE_DEFINITIONS]
        assert len(keys) == 22
        assert len(set(keys)) == 22

    def test_allowed_upgrades_preserve_catalog_order(self):
        """Filtering keeps catalog order."""
        keys = [definition.key for definition in allowed_upgrades(ShipType.CORVETTE)]
        assert keys == [
            "carrier",
            "decoy",
            "ecm",
            "enhanced-turret",
            "fast",
            "fully-loaded",
            "hard-point",
            "maneuverable",
            "mining-charges",
            "reinforced-hull",
            "repair",
            "shields",
            "tailgunner",
            "targeting-computer",
            "torpedoes",
            "tractor-beam",
        ]

    def test_allowed_upgrades_by_type(self):
        """Type-specific upgrades only appear for their types."""
        snub = {d.key for d in allowed_upgrades("Snubfighter")}
        gunship = {d.key for d in allowed_upgrades("Gunship")}
        assert "stealth" in snub
        assert "transport" not in snub
        assert "transport" in gunship
        assert "reinforced-hull" not in gunship

    def test_definition_details(self):
        """Rarity and stat modifier of a few entries."""
        assert get_definition("tailgunner").rarity is Rarity.COMMON
        assert get_definition("carrier").rarity is Rarity.RARE
        assert get_definition("ecm").rarity is Rarity.UNCOMMON
        assert get_definition("targeting-computer").stat_modifier is StatModifier.FIREPOWER
        assert get_definition("nope") is None

    def test_attach_upgrade_copies_by_value(self):
        """Each attachment is a separate record with its own id."""
        definition = get_definition("stealth")
        first = attach_upgrade(definition)
        second = attach_upgrade(definition)

        assert first.key == second.key == "stealth"
        assert first.id != second.id
        assert first.allowed_ship_types == [ShipType.SNUBFIGHTER, ShipType.GUNSHIP]

    def test_toggle_upgrade(self):
        """Enabling appends one copy; disabling removes every copy."""
        upgrades = toggle_upgrade([], "fast", True)
        upgrades = toggle_upgrade(upgrades, "shields", True)
        upgrades = toggle_upgrade(upgrades, "fast", True)

        assert [u.key for u in upgrades] == ["shields", "fast"]
        assert [u.key for u in toggle_upgrade(upgrades, "fast", False)] == ["shields"]

    def test_toggle_unknown_upgrade(self):
        """Enabling an unknown key fails."""
        with pytest.raises(KeyError):
            toggle_upgrade([], "warp-drive", True)

    def test_filter_upgrades_for_type(self):
        """Changing hull type drops upgrades it may not carry."""
        upgrades = [
            attach_upgrade(get_definition("stealth")),
            attach_upgrade(get_definition("fast")),
            attach_upgrade(get_definition("tractor-beam")),
        ]
        kept = filter_upgrades_for_type(upgrades, ShipType.CORVETTE)
        assert [u.key for u in kept] == ["fast", "tractor-beam"]
