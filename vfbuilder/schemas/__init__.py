"""Pydantic schemas for external input."""

from .documents import StoredDocument
from .drafts import GunRequest, ShipDraftRequest, SquadronDraftRequest, SquadronEntryRequest

__all__ = [
    "GunRequest",
    "ShipDraftRequest",
    "SquadronDraftRequest",
    "SquadronEntryRequest",
    "StoredDocument",
]
