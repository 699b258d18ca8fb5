"""Local JSON file persistence for fleet state.

The whole state is read once at startup and rewritten after every accepted
mutation. A missing, unreadable or malformed document is replaced by an
empty default state; this is best-effort recovery and is logged, not raised.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..models.state import FleetState
from ..schemas.documents import StoredDocument
from .serialization import state_from_dict, state_to_dict

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """Reads and writes the fleet state document at a fixed path."""

    def __init__(self, path: str | Path):
        """Initialize storage.

        Args:
            path: Location of the JSON document (parent directories are
                created on first save)
        """
        self.path = Path(path)

    def load(self) -> FleetState:
        """Load fleet state, falling back to an empty default.

        Returns:
            Stored FleetState, or a fresh default state when the document is
            missing, empty, unparseable or fails the shape check
        """
        if not self.path.exists():
            logger.debug(f"No state document at {self.path}; starting empty")
            return FleetState()

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not read {self.path}: {e}; starting empty")
            return FleetState()

        if not raw.strip():
            return FleetState()

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"State document {self.path} is not valid JSON ({e}); starting empty")
            return FleetState()

        return self.parse_document(parsed)

    def parse_document(self, parsed: Any) -> FleetState:
        """Shape-check a decoded document and rebuild the state from it.

        Args:
            parsed: Decoded JSON value

        Returns:
            Rebuilt FleetState, or a default state if the document is malformed
        """
        if not isinstance(parsed, dict):
            logger.warning(f"State document {self.path} is not an object; starting empty")
            return FleetState()

        try:
            # Missing optional fields (version) take their defaults.
            document = StoredDocument.model_validate(parsed)
        except ValidationError as e:
            logger.warning(
                f"State document {self.path} failed shape check "
                f"({e.error_count()} errors); starting empty"
            )
            return FleetState()

        try:
            state = state_from_dict(document.model_dump())
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"State document {self.path} has malformed records ({e}); starting empty")
            return FleetState()

        logger.info(
            f"Loaded {len(state.ships)} ships and {len(state.squadrons)} squadrons "
            f"from {self.path}"
        )
        return state

    def save(self, state: FleetState) -> None:
        """Write the whole fleet state document.

        Args:
            state: Fleet state to persist
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(state_to_dict(state), f, indent=2)
        logger.debug(f"Saved state to {self.path}")
