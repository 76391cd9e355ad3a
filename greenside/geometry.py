from __future__ import annotations

from math import atan2, cos, degrees, isfinite, radians, sin, sqrt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from greenside.errors import InvalidInput

EARTH_RADIUS_M = 6_371_000.0
YARDS_PER_METER = 1.09361
FEET_PER_METER = 3.28084
FEET_PER_YARD = 3.0

CompassPoint = Literal["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
_COMPASS: tuple[CompassPoint, ...] = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


class GeoPoint(BaseModel):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    model_config = ConfigDict(frozen=True)


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute haversine distance between two lat/lon points in meters."""

    lat1_rad = radians(lat1)
    lon1_rad = radians(lon1)
    lat2_rad = radians(lat2)
    lon2_rad = radians(lon2)

    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = sin(dlat / 2) ** 2 + cos(lat1_rad) * cos(lat2_rad) * sin(dlon / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_RADIUS_M * c


def distance_yards(a: GeoPoint, b: GeoPoint) -> float:
    meters = haversine_m(a.latitude, a.longitude, b.latitude, b.longitude)
    return meters * YARDS_PER_METER


def bearing_deg(a: GeoPoint, b: GeoPoint) -> float:
    """Initial bearing from ``a`` to ``b``; 0 is north, clockwise."""

    lat1 = radians(a.latitude)
    lat2 = radians(b.latitude)
    dlon = radians(b.longitude - a.longitude)

    x = sin(dlon) * cos(lat2)
    y = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(dlon)
    return (degrees(atan2(x, y)) + 360.0) % 360.0


def cardinal_direction(degrees_from: float) -> CompassPoint:
    """Map a compass bearing onto one of eight 45 degree sectors.

    Sector boundaries sit on odd multiples of 22.5 degrees and belong to the
    sector that starts there, so 337.5 is already ``N``. Values outside
    [0, 360) are wrapped first. NaN and infinities have no sector.
    """

    if not isfinite(degrees_from):
        raise InvalidInput(f"bearing must be finite, got {degrees_from!r}")
    normalized = degrees_from % 360.0
    index = int(((normalized + 22.5) % 360.0) // 45.0)
    return _COMPASS[index]


def meters_to_feet(meters: float) -> float:
    return meters * FEET_PER_METER


__all__ = [
    "CompassPoint",
    "EARTH_RADIUS_M",
    "FEET_PER_METER",
    "FEET_PER_YARD",
    "GeoPoint",
    "YARDS_PER_METER",
    "bearing_deg",
    "cardinal_direction",
    "distance_yards",
    "haversine_m",
    "meters_to_feet",
]
