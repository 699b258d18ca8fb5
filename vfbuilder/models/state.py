"""Persisted fleet state container."""

from dataclasses import dataclass, field

from ..utils.constants import STATE_VERSION
from .ship import Ship
from .squadron import Squadron


@dataclass
class FleetState:
    """All ships and squadrons of the single user, plus the schema version.

    The application controller owns one instance and replaces its
    collections wholesale on every accepted mutation.
    """

    ships: list[Ship] = field(default_factory=list)
    squadrons: list[Squadron] = field(default_factory=list)
    version: int = STATE_VERSION

    def ship_index(self) -> dict[str, Ship]:
        """Map ship id to ship."""
        return {ship.id: ship for ship in self.ships}

    def get_ship(self, ship_id: str) -> Ship | None:
        """Find a ship by id."""
        for ship in self.ships:
            if ship.id == ship_id:
                return ship
        return None

    def get_squadron(self, squadron_id: str) -> Squadron | None:
        """Find a squadron by id."""
        for squadron in self.squadrons:
            if squadron.id == squadron_id:
                return squadron
        return None
