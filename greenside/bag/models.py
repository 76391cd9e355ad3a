from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Club(BaseModel):
    name: str = Field(min_length=1)
    distance: float = Field(gt=0, description="Carry in yards.")

    model_config = ConfigDict(frozen=True)


class ClubEdit(BaseModel):
    """A distance the player typed in by hand, stored per club name."""

    club: str = Field(min_length=1)
    distance: float = Field(gt=0)
    updated_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    model_config = ConfigDict(populate_by_name=True)


__all__ = ["Club", "ClubEdit"]
