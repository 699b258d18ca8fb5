"""Pydantic schemas for draft input supplied as JSON.

These validate the shape of external input (field presence, enum values,
known upgrade keys). Game-rule legality is left to the engine validators.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.dice import DiceValue, GunDirection, ShipType
from ..models.gun import Gun
from ..models.ship import ShipDraft
from ..models.squadron import SquadronDraft, SquadronEntry
from ..rules.catalog import attach_upgrade, get_definition
from ..rules.ship_rules import get_rules


class GunRequest(BaseModel):
    """Single gun in a ship draft."""

    direction: GunDirection = Field(description="Forward, Rear or Turret")
    firepower: DiceValue = Field(description="2d6, 2d8 or 2d10")


class ShipDraftRequest(BaseModel):
    """Ship draft input."""

    name: str = Field(default="", description="Ship name (unique, case-insensitive)")
    type: ShipType = Field(description="Snubfighter, Gunship or Corvette")
    speed: int = Field(description="Speed rating")
    defense: DiceValue | None = Field(
        default=None, description="Defense dice; defaults to the type's first allowed value"
    )
    guns: list[GunRequest] = Field(default_factory=list, description="Guns in mounting order")
    upgrades: list[str] = Field(default_factory=list, description="Upgrade catalog keys")

    @field_validator("upgrades")
    @classmethod
    def upgrades_in_catalog(cls, keys: list[str]) -> list[str]:
        unknown = [key for key in keys if get_definition(key) is None]
        if unknown:
            raise ValueError(f"Unknown upgrade keys: {', '.join(unknown)}")
        return keys

    def to_draft(self) -> ShipDraft:
        """Build a ShipDraft, attaching catalog upgrades by value."""
        defense = self.defense or get_rules(self.type).allowed_defense[0]
        return ShipDraft(
            name=self.name,
            type=self.type,
            speed=self.speed,
            defense=defense,
            guns=[Gun(direction=g.direction, firepower=g.firepower) for g in self.guns],
            upgrades=[attach_upgrade(get_definition(key)) for key in self.upgrades],
        )


class SquadronEntryRequest(BaseModel):
    """Ship and pilot pairing in a squadron draft."""

    model_config = ConfigDict(populate_by_name=True)

    ship_id: str = Field(alias="shipId", description="Id of a saved ship")
    pilot_skill: DiceValue = Field(alias="pilotSkill", description="Pilot skill dice")


class SquadronDraftRequest(BaseModel):
    """Squadron draft input."""

    name: str = Field(default="", description="Squadron name")
    entries: list[SquadronEntryRequest] = Field(default_factory=list)

    def to_draft(self) -> SquadronDraft:
        """Build a SquadronDraft with fresh entry ids."""
        return SquadronDraft(
            name=self.name,
            entries=[
                SquadronEntry(ship_id=e.ship_id, pilot_skill=e.pilot_skill) for e in self.entries
            ],
        )
