"""
Domain models for BeastQL.

Defines the `Beast` record shared by the store, the seed loader, and the
GraphQL layer. Attribute names are snake_case; aliases follow the camelCase
keys of the bootstrap JSON document.
"""
from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field, field_validator

# Attributes that may be overwritten after creation. `id` is immutable.
MUTABLE_FIELDS = frozenset({"name", "description", "other_names", "image_url"})


class Beast(BaseModel):
    """
    A single cryptid record.

    Instances are frozen; the store replaces a record wholesale when updating it.
    """

    id: int = Field(0, description="System-assigned identifier.")
    name: str = Field("", description="Primary name of the beast.")
    description: str = Field("", description="Free-form description.")
    other_names: List[str] = Field(
        default_factory=list, alias="otherNames", description="Alternative names."
    )
    image_url: str = Field("", alias="imageUrl", description="Link to an image.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("other_names", mode="before")
    @classmethod
    def _null_names_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("name", "description", "image_url", mode="before")
    @classmethod
    def _null_text_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def empty(cls) -> "Beast":
        """Placeholder returned for lookup misses: every field at its zero value."""
        return cls()

    def is_empty(self) -> bool:
        return self == Beast.empty()


__all__ = ["Beast", "MUTABLE_FIELDS"]
