from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Hole(BaseModel):
    number: int = Field(ge=1)
    distance_yards: float = Field(
        default=0.0,
        validation_alias=AliasChoices("distance_yards", "distanceYards", "distance"),
        serialization_alias="distanceYards",
    )
    par: int
    handicap_rank: int = Field(
        default=0,
        validation_alias=AliasChoices("handicap_rank", "handicapRank", "handicap"),
        serialization_alias="handicapRank",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TeeOption(BaseModel):
    category: str
    tee_name: str = Field(
        validation_alias=AliasChoices("tee_name", "teeName"),
        serialization_alias="teeName",
    )
    hole_count: int = Field(
        validation_alias=AliasChoices("hole_count", "holeCount"),
        serialization_alias="holeCount",
    )

    model_config = ConfigDict(populate_by_name=True)


__all__ = ["Hole", "TeeOption"]
