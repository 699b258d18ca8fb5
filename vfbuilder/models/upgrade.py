"""Upgrade data model."""

import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

from .dice import Rarity, ShipType, StatModifier, coerce_enum


@dataclass
class Upgrade:
    """An upgrade attached to a ship.

    Upgrades are copied onto a ship by value from the catalog. Several ships
    may carry upgrades with the same catalog ``key``; each copy has its own
    ``id``.
    """

    key: str  # Stable catalog key (e.g., "tailgunner")
    name: str  # Display name
    allowed_ship_types: list[ShipType]
    rarity: Rarity
    rules_text: str = ""
    stat_modifier: Optional[StatModifier] = None  # Advisory only
    data: Optional[dict[str, Any]] = None  # Free-form extension data, kept as stored
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        """Validate upgrade data after initialization."""
        if not self.key:
            raise ValueError("Upgrade key cannot be empty")
        self.allowed_ship_types = [
            coerce_enum(ShipType, ship_type, "ship type")
            for ship_type in self.allowed_ship_types
        ]
        self.rarity = coerce_enum(Rarity, self.rarity, "rarity")
        if self.stat_modifier is not None:
            self.stat_modifier = coerce_enum(StatModifier, self.stat_modifier, "stat modifier")

    def allows(self, ship_type) -> bool:
        """Check whether this upgrade may be attached to a ship type."""
        return ship_type in self.allowed_ship_types
