from __future__ import annotations

from datetime import datetime, timezone

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class TrackedShot(BaseModel):
    id: str
    club: str = Field(min_length=1)
    distance: float = Field(gt=0, description="Carry in yards, as reported.")
    timestamp: datetime = Field(
        validation_alias=AliasChoices("timestamp", "recorded_at", "recordedAt")
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("timestamp")
    @classmethod
    def _ensure_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class ClubKeyStats(BaseModel):
    key: str
    samples: int
    average_yards: int = Field(
        validation_alias=AliasChoices("average_yards", "averageYards"),
        serialization_alias="averageYards",
    )
    std_dev_yards: float | None = Field(
        default=None,
        validation_alias=AliasChoices("std_dev_yards", "stdDevYards"),
        serialization_alias="stdDevYards",
    )
    last_updated: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("last_updated", "lastUpdated"),
        serialization_alias="lastUpdated",
    )

    model_config = ConfigDict(populate_by_name=True)


__all__ = ["ClubKeyStats", "TrackedShot"]
