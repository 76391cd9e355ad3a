from __future__ import annotations

import datetime as dt
from typing import Any, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greenside.config import get_settings


class Player(BaseModel):
    name: str
    # Raw cell values as entered; anything non-numeric counts as unset.
    hole_scores: List[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("hole_scores", "holeScores", "scores"),
        serialization_alias="holeScores",
    )

    model_config = ConfigDict(populate_by_name=True)


class ScorecardLedger(BaseModel):
    course: str = ""
    hole_count: int = Field(
        default_factory=lambda: get_settings().default_hole_count,
        ge=1,
        validation_alias=AliasChoices("hole_count", "holeCount"),
        serialization_alias="holeCount",
    )
    players: List[Player] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class PersistedPlayer(BaseModel):
    name: str
    scores: List[int]


class ScorecardEntry(BaseModel):
    id: str
    course: str = Field(min_length=1)
    date: dt.date = Field(validation_alias=AliasChoices("date", "data"))
    players: List[PersistedPlayer]

    model_config = ConfigDict(populate_by_name=True)


__all__ = ["PersistedPlayer", "Player", "ScorecardEntry", "ScorecardLedger"]
