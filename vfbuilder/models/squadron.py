"""Squadron data models."""

import uuid
from dataclasses import dataclass, field, replace

from .dice import DiceValue, coerce_enum


@dataclass
class SquadronEntry:
    """One ship flown by one pilot within a squadron.

    ``ship_id`` is a non-owning reference: the ship may be deleted later and
    is re-resolved on every validation or scoring call.
    """

    ship_id: str
    pilot_skill: DiceValue
    pilot_points: int = 0  # Stamped when the squadron is saved
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        """Normalize enum fields."""
        self.pilot_skill = coerce_enum(DiceValue, self.pilot_skill, "pilot skill")


@dataclass
class SquadronDraft:
    """An in-progress squadron submitted for validation."""

    name: str
    entries: list[SquadronEntry] = field(default_factory=list)


@dataclass
class Squadron:
    """A saved squadron."""

    id: str
    name: str
    entries: list[SquadronEntry] = field(default_factory=list)
    points: int = 0
    created_at: str = ""
    updated_at: str = ""

    def __post_init__(self):
        """Validate squadron data after initialization."""
        if not self.id:
            raise ValueError("Squadron id cannot be empty")

    def to_draft(self) -> SquadronDraft:
        """Return an editable draft of this squadron."""
        return SquadronDraft(name=self.name, entries=[replace(entry) for entry in self.entries])
