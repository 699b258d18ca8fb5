"""Utility functions and constants for VFBuilder."""

from .config import configure_logging, resolve_state_path
from .constants import (
    ENV_LOG_LEVEL,
    ENV_STATE_PATH,
    RARE_SHIP_LIMIT,
    STATE_FILENAME,
    STATE_VERSION,
    TAILGUNNER_KEY,
    UNCOMMON_SHIP_LIMIT,
)

__all__ = [
    "ENV_LOG_LEVEL",
    "ENV_STATE_PATH",
    "RARE_SHIP_LIMIT",
    "STATE_FILENAME",
    "STATE_VERSION",
    "TAILGUNNER_KEY",
    "UNCOMMON_SHIP_LIMIT",
    "configure_logging",
    "resolve_state_path",
]
