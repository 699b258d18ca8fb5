"""Gun data model."""

import uuid
from dataclasses import dataclass, field

from .dice import DiceValue, GunDirection, coerce_enum


@dataclass
class Gun:
    """A single gun mounted on a ship.

    Guns are owned by exactly one ship and are kept in insertion order;
    the first gun's direction matters for forward-first hull types. The
    point cost is not stored on the record: it is always derived from
    firepower by the scoring functions.
    """

    direction: GunDirection  # Forward, Rear or Turret
    firepower: DiceValue  # Dice rolled when firing
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        """Normalize enum fields."""
        self.direction = coerce_enum(GunDirection, self.direction, "direction")
        self.firepower = coerce_enum(DiceValue, self.firepower, "firepower")
