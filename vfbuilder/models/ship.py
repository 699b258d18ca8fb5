"""Ship data models: the editable draft and the saved record."""

import copy
from dataclasses import dataclass, field

from .dice import DiceValue, ShipType, coerce_enum
from .gun import Gun
from .upgrade import Upgrade


def copy_parts(guns: list[Gun], upgrades: list[Upgrade]) -> tuple[list[Gun], list[Upgrade]]:
    """Deep-copy gun and upgrade records so the copies share no state."""
    return copy.deepcopy(list(guns)), copy.deepcopy(list(upgrades))


class UpgradeHolder:
    """Upgrade lookups shared by drafts and saved ships."""

    upgrades: list[Upgrade]

    def has_upgrade(self, key: str) -> bool:
        """Check whether an upgrade with the given catalog key is attached."""
        return any(upgrade.key == key for upgrade in self.upgrades)


@dataclass
class ShipDraft(UpgradeHolder):
    """An in-progress ship configuration submitted for validation.

    Drafts may be illegal under the ruleset (speed out of range, too many
    guns, ...); the ship validator reports those problems. Only the enum
    fields are checked here.
    """

    name: str
    type: ShipType
    speed: int  # 1-3, legal range depends on type
    defense: DiceValue
    guns: list[Gun] = field(default_factory=list)  # Insertion order matters
    upgrades: list[Upgrade] = field(default_factory=list)

    def __post_init__(self):
        """Normalize enum fields."""
        self.type = coerce_enum(ShipType, self.type, "ship type")
        self.defense = coerce_enum(DiceValue, self.defense, "defense")


@dataclass
class Ship(UpgradeHolder):
    """A saved ship.

    Ships are only created or updated from drafts that passed validation.
    ``points`` is computed at save time; timestamps are ISO-8601 strings.
    """

    id: str
    name: str
    type: ShipType
    speed: int
    defense: DiceValue
    guns: list[Gun] = field(default_factory=list)
    upgrades: list[Upgrade] = field(default_factory=list)
    points: int = 0
    created_at: str = ""
    updated_at: str = ""

    def __post_init__(self):
        """Validate ship data after initialization."""
        if not self.id:
            raise ValueError("Ship id cannot be empty")
        self.type = coerce_enum(ShipType, self.type, "ship type")
        self.defense = coerce_enum(DiceValue, self.defense, "defense")

    def to_draft(self) -> ShipDraft:
        """Return an editable draft with copies of this ship's guns and upgrades."""
        guns, upgrades = copy_parts(self.guns, self.upgrades)
        return ShipDraft(
            name=self.name,
            type=self.type,
            speed=self.speed,
            defense=self.defense,
            guns=guns,
            upgrades=upgrades,
        )
