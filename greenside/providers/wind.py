from __future__ import annotations

import math
from typing import Any

import httpx
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greenside.config import get_settings
from greenside.metrics import record_provider_call

from .errors import ProviderError

_OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


class WindReading(BaseModel):
    speed_mph: float = Field(
        ge=0,
        validation_alias=AliasChoices("speed_mph", "speedMph"),
        serialization_alias="speedMph",
    )
    # Meteorological convention: the direction the wind blows FROM.
    direction_degrees: float = Field(
        validation_alias=AliasChoices("direction_degrees", "directionDegrees"),
        serialization_alias="directionDegrees",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


def _http_client_factory(**kwargs: Any) -> httpx.Client:
    timeout = kwargs.pop("timeout", get_settings().http_timeout_s)
    return httpx.Client(timeout=timeout, **kwargs)


def get_wind(lat: float, lon: float) -> WindReading:
    params = {
        "latitude": lat,
        "longitude": lon,
        "current": "wind_speed_10m,wind_direction_10m",
        "wind_speed_unit": "mph",
        "timezone": "UTC",
    }
    try:
        with _http_client_factory() as client:
            response = client.get(_OPEN_METEO_FORECAST_URL, params=params)
    except httpx.RequestError as exc:
        record_provider_call("open_meteo_wind", ok=False)
        raise ProviderError(f"open-meteo forecast request failed: {exc}") from exc
    if response.status_code != 200:
        record_provider_call("open_meteo_wind", ok=False)
        raise ProviderError(f"open-meteo forecast failed: {response.status_code}")
    record_provider_call("open_meteo_wind", ok=True)

    try:
        current = response.json()["current"]
        speed = float(current["wind_speed_10m"])
        direction = float(current["wind_direction_10m"])
    except (ValueError, AttributeError, TypeError, IndexError, KeyError) as exc:
        raise ProviderError("open-meteo current wind missing data") from exc
    if not (math.isfinite(speed) and math.isfinite(direction)):
        raise ProviderError("open-meteo current wind not finite")
    if speed < 0:
        raise ProviderError("open-meteo current wind negative speed")

    return WindReading(speed_mph=speed, direction_degrees=direction % 360.0)


__all__ = ["WindReading", "get_wind"]
