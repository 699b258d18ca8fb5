"""Application controller owning the fleet state.

The controller is the only writer of the state object. Each accepted
mutation replaces the affected collections in one step, recomputes
dependent squadron totals, then persists the whole document.
"""

import logging
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Optional

from ..engine.scoring import pilot_points, ship_points, squadron_points
from ..engine.ship_validator import validate_ship
from ..engine.squadron_validator import validate_squadron
from ..models.ship import Ship, ShipDraft, copy_parts
from ..models.squadron import Squadron, SquadronDraft
from ..models.state import FleetState
from ..utils.storage import JsonFileStorage

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class SaveResult:
    """Outcome of a save request.

    Attributes:
        accepted: True if the draft was valid and stored
        errors: Violation messages (empty when accepted)
        record: The stored Ship or Squadron, None when rejected
    """

    accepted: bool
    errors: list[str] = field(default_factory=list)
    record: Optional[Any] = None


class FleetController:
    """Applies validated ship and squadron changes to the fleet state."""

    def __init__(self, state: FleetState | None = None, storage: JsonFileStorage | None = None):
        """Initialize the controller.

        Args:
            state: Initial state; loaded from storage (or empty) if omitted
            storage: Optional persistence collaborator, written after every
                accepted mutation
        """
        self.storage = storage
        if state is None:
            state = storage.load() if storage is not None else FleetState()
        self.state = state

    def _persist(self) -> None:
        if self.storage is not None:
            self.storage.save(self.state)

    def _recompute_squadrons(self, ships: list[Ship], squadrons: list[Squadron]) -> list[Squadron]:
        lookup = {ship.id: ship for ship in ships}
        return [
            replace(squadron, points=squadron_points(squadron.entries, lookup))
            for squadron in squadrons
        ]

    # ------------------------------------------------------------------
    # Ships
    # ------------------------------------------------------------------

    def validate_ship(self, draft: ShipDraft, editing_id: str | None = None) -> list[str]:
        """Validate a ship draft against the currently saved ships."""
        return validate_ship(draft, self.state.ships, editing_id)

    def save_ship(self, draft: ShipDraft, editing_id: str | None = None) -> SaveResult:
        """Create or update a ship from a draft.

        Args:
            draft: Candidate ship configuration
            editing_id: Id of the ship being edited, or None to create

        Returns:
            SaveResult with the stored Ship, or the violations
        """
        errors = self.validate_ship(draft, editing_id)
        if errors:
            logger.warning(f"Ship '{draft.name}' rejected: {errors}")
            return SaveResult(accepted=False, errors=errors)

        existing = self.state.get_ship(editing_id) if editing_id else None
        guns, upgrades = copy_parts(draft.guns, draft.upgrades)
        now = _now()
        ship = Ship(
            id=editing_id or str(uuid.uuid4()),
            name=draft.name,
            type=draft.type,
            speed=draft.speed,
            defense=draft.defense,
            guns=guns,
            upgrades=upgrades,
            points=ship_points(draft),
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )

        if existing is not None:
            ships = [ship if item.id == ship.id else item for item in self.state.ships]
        else:
            ships = [*self.state.ships, ship]

        self.state = replace(
            self.state,
            ships=ships,
            squadrons=self._recompute_squadrons(ships, self.state.squadrons),
        )
        self._persist()
        logger.info(f"Saved ship {ship.id} '{ship.name}' ({ship.points} pts)")
        return SaveResult(accepted=True, record=ship)

    def delete_ship(self, ship_id: str) -> bool:
        """Delete a ship and remove it from every squadron.

        Args:
            ship_id: Id of the ship to delete

        Returns:
            True if deleted, False if not found
        """
        if self.state.get_ship(ship_id) is None:
            return False

        ships = [ship for ship in self.state.ships if ship.id != ship_id]
        squadrons = [
            replace(
                squadron,
                entries=[entry for entry in squadron.entries if entry.ship_id != ship_id],
            )
            for squadron in self.state.squadrons
        ]
        self.state = replace(
            self.state,
            ships=ships,
            squadrons=self._recompute_squadrons(ships, squadrons),
        )
        self._persist()
        logger.info(f"Deleted ship {ship_id}")
        return True

    # ------------------------------------------------------------------
    # Squadrons
    # ------------------------------------------------------------------

    def validate_squadron(self, draft: SquadronDraft) -> list[str]:
        """Validate a squadron draft against the currently saved ships."""
        return validate_squadron(draft, self.state.ship_index())

    def preview_squadron_points(self, draft: SquadronDraft) -> int:
        """Live point total for a draft, valid or not."""
        return squadron_points(draft.entries, self.state.ship_index())

    def save_squadron(self, draft: SquadronDraft, editing_id: str | None = None) -> SaveResult:
        """Create or update a squadron from a draft.

        Args:
            draft: Candidate squadron
            editing_id: Id of the squadron being edited, or None to create

        Returns:
            SaveResult with the stored Squadron, or the violations
        """
        errors = self.validate_squadron(draft)
        if errors:
            logger.warning(f"Squadron '{draft.name}' rejected: {errors}")
            return SaveResult(accepted=False, errors=errors)

        existing = self.state.get_squadron(editing_id) if editing_id else None
        entries = [
            replace(entry, pilot_points=pilot_points(entry.pilot_skill)) for entry in draft.entries
        ]
        now = _now()
        squadron = Squadron(
            id=editing_id or str(uuid.uuid4()),
            name=draft.name,
            entries=entries,
            points=squadron_points(entries, self.state.ship_index()),
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )

        if existing is not None:
            squadrons = [
                squadron if item.id == squadron.id else item for item in self.state.squadrons
            ]
        else:
            squadrons = [*self.state.squadrons, squadron]

        self.state = replace(self.state, squadrons=squadrons)
        self._persist()
        logger.info(f"Saved squadron {squadron.id} '{squadron.name}' ({squadron.points} pts)")
        return SaveResult(accepted=True, record=squadron)

    def delete_squadron(self, squadron_id: str) -> bool:
        """Delete a squadron.

        Returns:
            True if deleted, False if not found
        """
        if self.state.get_squadron(squadron_id) is None:
            return False
        self.state = replace(
            self.state,
            squadrons=[s for s in self.state.squadrons if s.id != squadron_id],
        )
        self._persist()
        logger.info(f"Deleted squadron {squadron_id}")
        return True

    def summary(self) -> dict[str, int]:
        """Counts shown in the builder header."""
        return {"ships": len(self.state.ships), "squadrons": len(self.state.squadrons)}
