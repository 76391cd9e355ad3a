from __future__ import annotations

import logging
import math
from typing import Any

import httpx

from greenside.config import get_settings
from greenside.metrics import record_provider_call

from .errors import ProviderError

logger = logging.getLogger(__name__)

_OPEN_METEO_ELEVATION_URL = "https://api.open-meteo.com/v1/elevation"
_OPENTOPO_URL = "https://api.opentopodata.org/v1/aster30m"


def _http_client_factory(**kwargs: Any) -> httpx.Client:
    timeout = kwargs.pop("timeout", get_settings().http_timeout_s)
    return httpx.Client(timeout=timeout, **kwargs)


def _as_meters(value: Any) -> float | None:
    if value is None:
        return None
    meters = float(value)
    if not math.isfinite(meters):
        raise ValueError(f"non-finite elevation {value!r}")
    return meters


def get_elevation(lat: float, lon: float) -> float | None:
    """Ground elevation in meters, or ``None`` when no provider has data there."""

    try:
        value = _fetch_open_meteo(lat, lon)
    except ProviderError as exc:
        logger.warning("open-meteo elevation failed, trying opentopodata: %s", exc)
        value = None
    if value is None:
        value = _fetch_opentopo(lat, lon)
    return value


def _fetch_open_meteo(lat: float, lon: float) -> float | None:
    params = {"latitude": lat, "longitude": lon}
    try:
        with _http_client_factory() as client:
            response = client.get(_OPEN_METEO_ELEVATION_URL, params=params)
    except httpx.RequestError as exc:
        record_provider_call("open_meteo_elevation", ok=False)
        raise ProviderError(f"open-meteo elevation request failed: {exc}") from exc
    if response.status_code != 200:
        record_provider_call("open_meteo_elevation", ok=False)
        raise ProviderError(f"open-meteo elevation failed: {response.status_code}")
    record_provider_call("open_meteo_elevation", ok=True)
    try:
        elevations = response.json()["elevation"]
        value = elevations[0]
        return _as_meters(value)
    except (ValueError, AttributeError, TypeError, IndexError, KeyError) as exc:
        raise ProviderError("open-meteo elevation returned malformed data") from exc


def _fetch_opentopo(lat: float, lon: float) -> float | None:
    params = {"locations": f"{lat},{lon}"}
    try:
        with _http_client_factory() as client:
            response = client.get(_OPENTOPO_URL, params=params)
    except httpx.RequestError as exc:
        record_provider_call("opentopodata", ok=False)
        raise ProviderError(f"opentopodata request failed: {exc}") from exc
    if response.status_code != 200:
        record_provider_call("opentopodata", ok=False)
        raise ProviderError(f"opentopodata failed: {response.status_code}")
    record_provider_call("opentopodata", ok=True)
    try:
        value = response.json()["results"][0]["elevation"]
        return _as_meters(value)
    except (ValueError, AttributeError, TypeError, IndexError, KeyError) as exc:
        raise ProviderError("opentopodata returned malformed data") from exc


__all__ = ["get_elevation"]
