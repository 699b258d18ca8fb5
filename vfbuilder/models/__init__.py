"""Data models for VFBuilder."""

from .dice import DICE_VALUES, DiceValue, GunDirection, Rarity, ShipType, StatModifier
from .gun import Gun
from .ship import Ship, ShipDraft
from .squadron import Squadron, SquadronDraft, SquadronEntry
from .state import FleetState
from .upgrade import Upgrade

__all__ = [
    "DICE_VALUES",
    "DiceValue",
    "GunDirection",
    "Rarity",
    "ShipType",
    "StatModifier",
    "Gun",
    "Upgrade",
    "ShipDraft",
    "Ship",
    "SquadronEntry",
    "SquadronDraft",
    "Squadron",
    "FleetState",
]
