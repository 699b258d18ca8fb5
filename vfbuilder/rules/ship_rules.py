"""Per-hull rule table and point tables."""

from dataclasses import dataclass

from ..models.dice import DiceValue, ShipType, coerce_enum

FIREPOWER_POINTS: dict[DiceValue, int] = {
    DiceValue.D6: 2,
    DiceValue.D8: 4,
    DiceValue.D10: 6,
}

DEFENSE_POINTS: dict[DiceValue, int] = {
    DiceValue.D6: 2,
    DiceValue.D8: 4,
    DiceValue.D10: 6,
}

PILOT_POINTS: dict[DiceValue, int] = {
    DiceValue.D6: 1,
    DiceValue.D8: 3,
    DiceValue.D10: 5,
}

SPEED_POINTS: dict[int, int] = {
    1: 1,
    2: 3,
    3: 5,
}


@dataclass(frozen=True)
class ShipRules:
    """Legal ranges and sets for one ship type.

    Attributes:
        type: Ship type these rules apply to
        max_points: Highest legal ship point total
        max_guns: Maximum number of guns
        max_upgrades: Maximum number of upgrades
        speed_range: Inclusive (min, max) speed
        first_gun_must_be_forward: Whether the first gun added must face forward
        allowed_defense: Legal defense dice
        allowed_firepower: Legal gun firepower dice
        allowed_pilot_skills: Legal pilot skill dice for squadron entries
    """

    type: ShipType
    max_points: int
    max_guns: int
    max_upgrades: int
    speed_range: tuple[int, int]
    first_gun_must_be_forward: bool
    allowed_defense: tuple[DiceValue, ...]
    allowed_firepower: tuple[DiceValue, ...]
    allowed_pilot_skills: tuple[DiceValue, ...]

    def speed_allowed(self, speed: int) -> bool:
        """Check speed against the inclusive speed range."""
        low, high = self.speed_range
        return low <= speed <= high


SHIP_RULES: dict[ShipType, ShipRules] = {
    ShipType.SNUBFIGHTER: ShipRules(
        type=ShipType.SNUBFIGHTER,
        max_points=14,
        max_guns=2,
        max_upgrades=3,
        speed_range=(2, 3),
        first_gun_must_be_forward=True,
        allowed_defense=(DiceValue.D6,),
        allowed_firepower=(DiceValue.D6, DiceValue.D8),
        allowed_pilot_skills=(DiceValue.D6, DiceValue.D8, DiceValue.D10),
    ),
    ShipType.GUNSHIP: ShipRules(
        type=ShipType.GUNSHIP,
        max_points=20,
        max_guns=2,
        max_upgrades=4,
        speed_range=(1, 2),
        first_gun_must_be_forward=False,
        allowed_defense=(DiceValue.D8,),
        allowed_firepower=(DiceValue.D6, DiceValue.D8, DiceValue.D10),
        allowed_pilot_skills=(DiceValue.D6, DiceValue.D8, DiceValue.D10),
    ),
    ShipType.CORVETTE: ShipRules(
        type=ShipType.CORVETTE,
        max_points=30,
        max_guns=3,
        max_upgrades=5,
        speed_range=(1, 1),
        first_gun_must_be_forward=False,
        allowed_defense=(DiceValue.D10,),
        allowed_firepower=(DiceValue.D8, DiceValue.D10),
        allowed_pilot_skills=(DiceValue.D6, DiceValue.D8),
    ),
}


def get_rules(ship_type: ShipType | str) -> ShipRules:
    """Look up the rules for a ship type.

    Args:
        ship_type: ShipType member or its string value

    Returns:
        ShipRules for the type

    Raises:
        ValueError: If ship_type is not a known ship type
    """
    return SHIP_RULES[coerce_enum(ShipType, ship_type, "ship type")]
