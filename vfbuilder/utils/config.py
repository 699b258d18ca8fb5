"""Runtime configuration: state file location and logging setup."""

import logging
import os
from pathlib import Path

from .constants import ENV_LOG_LEVEL, ENV_STATE_PATH, STATE_FILENAME

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def default_state_dir() -> Path:
    """Directory used for the state file when nothing else is configured."""
    return Path(__file__).parent.parent.parent / "state"


def resolve_state_path(path: str | None = None) -> Path:
    """Resolve where the fleet state document lives.

    Precedence: explicit argument, then the VFBUILDER_STATE environment
    variable, then ``state/vfbuilder.json`` at the project root.

    Args:
        path: Optional explicit path (e.g., from --state)

    Returns:
        Path to the JSON state document
    """
    if path:
        return Path(path)
    env_path = os.getenv(ENV_STATE_PATH)
    if env_path:
        return Path(env_path)
    return default_state_dir() / STATE_FILENAME


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for command-line use.

    Args:
        verbose: If True, log at DEBUG; otherwise use VFBUILDER_LOG_LEVEL
            (default WARNING)
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv(ENV_LOG_LEVEL, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
