from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greenside.courses.models import Hole
from greenside.geometry import GeoPoint

PointKind = Literal["player", "target"]


class ElevationSample(BaseModel):
    point: GeoPoint
    elevation_meters: float = Field(
        validation_alias=AliasChoices("elevation_meters", "elevationMeters"),
        serialization_alias="elevationMeters",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ElevationRequest(BaseModel):
    """Ticket for one pending elevation lookup.

    The result is applied only while the session is alive and ``point`` is
    still the latest point of that kind.
    """

    session_id: str
    kind: PointKind
    point: GeoPoint
    generation: int

    model_config = ConfigDict(frozen=True)


class Readout(BaseModel):
    hole: Hole | None = None
    distance_yards: float | None = Field(
        default=None,
        validation_alias=AliasChoices("distance_yards", "distanceYards"),
        serialization_alias="distanceYards",
    )
    plays_like_yards: float | None = Field(
        default=None,
        validation_alias=AliasChoices("plays_like_yards", "playsLikeYards"),
        serialization_alias="playsLikeYards",
    )
    suggested_club: str | None = Field(
        default=None,
        validation_alias=AliasChoices("suggested_club", "suggestedClub"),
        serialization_alias="suggestedClub",
    )
    elevation_delta_feet: float | None = Field(
        default=None,
        validation_alias=AliasChoices("elevation_delta_feet", "elevationDeltaFeet"),
        serialization_alias="elevationDeltaFeet",
    )
    wind_summary: str = Field(
        default="-- --",
        validation_alias=AliasChoices("wind_summary", "windSummary"),
        serialization_alias="windSummary",
    )

    model_config = ConfigDict(populate_by_name=True)


__all__ = ["ElevationRequest", "ElevationSample", "PointKind", "Readout"]
