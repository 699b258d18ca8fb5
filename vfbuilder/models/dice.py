"""Enumerated values shared by ships, guns, upgrades and pilots."""

from enum import Enum


class DiceValue(str, Enum):
    """Dice rating used for defense, firepower and pilot skill.

    Values are ordered by strength: 2d6 < 2d8 < 2d10.
    """

    D6 = "2d6"
    D8 = "2d8"
    D10 = "2d10"

    @property
    def rank(self) -> int:
        """Strength tier (0 for 2d6, 2 for 2d10)."""
        return _DICE_ORDER.index(self)

    def __lt__(self, other):
        if not isinstance(other, DiceValue):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, DiceValue):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, DiceValue):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, DiceValue):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value


_DICE_ORDER = (DiceValue.D6, DiceValue.D8, DiceValue.D10)


class ShipType(str, Enum):
    """Ship hull classes."""

    SNUBFIGHTER = "Snubfighter"
    GUNSHIP = "Gunship"
    CORVETTE = "Corvette"

    def __str__(self) -> str:
        return self.value


class GunDirection(str, Enum):
    """Firing arc of a gun."""

    FORWARD = "Forward"
    REAR = "Rear"
    TURRET = "Turret"

    def __str__(self) -> str:
        return self.value


class Rarity(str, Enum):
    """Upgrade rarity; governs squadron-wide caps."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"

    def __str__(self) -> str:
        return self.value


class StatModifier(str, Enum):
    """Stat category an upgrade is tagged with (not applied to scoring)."""

    FIREPOWER = "firepower"
    DEFENSE = "defense"
    PILOTING = "piloting"

    def __str__(self) -> str:
        return self.value


DICE_VALUES = list(_DICE_ORDER)


def coerce_enum(enum_cls, value, field_name: str):
    """Convert a raw value to an enum member.

    Args:
        enum_cls: Enum class to convert to
        value: Enum member or its string value
        field_name: Name used in the error message

    Returns:
        Matching enum member

    Raises:
        ValueError: If value is not a member of the enumeration
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Invalid {field_name}: {value!r} (must be one of {allowed})") from None
