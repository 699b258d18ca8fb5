"""Pydantic schema for the shape check of the stored state document."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..utils.constants import STATE_VERSION


class StoredDocument(BaseModel):
    """Top-level layout of the persisted fleet document.

    Only the outer shape is checked here; individual records are rebuilt by
    the serialization module.
    """

    ships: list[dict[str, Any]] = Field(description="Saved ship records")
    squadrons: list[dict[str, Any]] = Field(description="Saved squadron records")
    version: Any = Field(default=STATE_VERSION, description="Schema version counter")

    @field_validator("version", mode="before")
    @classmethod
    def version_or_default(cls, value: Any) -> int:
        # An unusable version never discards the ships and squadrons.
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return STATE_VERSION
