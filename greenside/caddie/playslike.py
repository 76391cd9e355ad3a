"""Deterministic plays-like distance engine."""

from __future__ import annotations

import math

from greenside.errors import InvalidInput
from greenside.geometry import FEET_PER_YARD, cardinal_direction
from greenside.utils import round_half_up

UNKNOWN = "--"


def plays_like_distance(
    raw_yards: float, elevation_delta_feet: float, elevation_factor: float
) -> float:
    """Adjust a horizontal distance for the rise or drop to the target.

    ``elevation_delta_feet`` is target minus player, so uphill shots play
    longer. The factor scales the delta after converting it to yards.
    """
    if elevation_factor < 0:
        raise InvalidInput("elevation factor must be >= 0")
    delta_yards = elevation_delta_feet / FEET_PER_YARD
    return raw_yards + elevation_factor * delta_yards


def _known(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


def wind_summary(speed_mph: float | None, direction_deg: float | None) -> str:
    """Render e.g. "12 mph NW"; missing or non-finite parts show as "--"."""
    speed_txt = f"{round_half_up(speed_mph)} mph" if _known(speed_mph) else UNKNOWN
    direction_txt = cardinal_direction(direction_deg) if _known(direction_deg) else UNKNOWN
    return f"{speed_txt} {direction_txt}"


__all__ = ["UNKNOWN", "plays_like_distance", "wind_summary"]
