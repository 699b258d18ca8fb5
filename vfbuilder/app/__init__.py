"""Application layer: state controller and roster output."""

from .controller import FleetController, SaveResult
from .roster import render_roster, render_ship_line

__all__ = [
    "FleetController",
    "SaveResult",
    "render_roster",
    "render_ship_line",
]
