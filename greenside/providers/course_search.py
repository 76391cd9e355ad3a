from __future__ import annotations

import logging
from typing import Any, Dict, List

import httpx
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greenside.config import get_settings
from greenside.metrics import record_provider_call

from .errors import ProviderError

logger = logging.getLogger(__name__)


class TeeHole(BaseModel):
    par: int
    yardage: float | None = None
    handicap: int | None = None


class TeeBox(BaseModel):
    tee_name: str = Field(
        validation_alias=AliasChoices("tee_name", "teeName"),
        serialization_alias="teeName",
    )
    holes: List[TeeHole] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class CourseSummary(BaseModel):
    id: str
    club_name: str = Field(
        default="",
        validation_alias=AliasChoices("club_name", "clubName"),
        serialization_alias="clubName",
    )
    course_name: str = Field(
        default="",
        validation_alias=AliasChoices("course_name", "courseName"),
        serialization_alias="courseName",
    )
    city: str | None = None
    state: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    # Keyed by tee category as the provider reports it, e.g. "male"/"female".
    tees: Dict[str, List[TeeBox]] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)


def _http_client_factory(**kwargs: Any) -> httpx.Client:
    timeout = kwargs.pop("timeout", get_settings().http_timeout_s)
    return httpx.Client(timeout=timeout, **kwargs)


def _parse_course(raw: Dict[str, Any]) -> CourseSummary:
    location = raw.get("location") or {}
    return CourseSummary(
        id=str(raw.get("id")),
        club_name=raw.get("club_name") or "",
        course_name=raw.get("course_name") or "",
        city=location.get("city"),
        state=location.get("state"),
        latitude=location.get("latitude"),
        longitude=location.get("longitude"),
        tees={
            category: [TeeBox.model_validate(tee) for tee in boxes or []]
            for category, boxes in (raw.get("tees") or {}).items()
        },
    )


def search_courses(query: str) -> List[CourseSummary]:
    settings = get_settings()
    headers = {}
    if settings.course_api_key:
        headers["Authorization"] = f"Key {settings.course_api_key}"
    try:
        with _http_client_factory() as client:
            response = client.get(
                settings.course_api_url,
                params={"search_query": query},
                headers=headers,
            )
    except httpx.RequestError as exc:
        record_provider_call("course_search", ok=False)
        raise ProviderError(f"course search request failed: {exc}") from exc
    if response.status_code != 200:
        record_provider_call("course_search", ok=False)
        raise ProviderError(f"course search failed: {response.status_code}")
    record_provider_call("course_search", ok=True)

    try:
        courses = response.json().get("courses")
        if courses is None:
            return []
        if not isinstance(courses, list):
            raise TypeError(f"courses is {type(courses).__name__}")
        return [_parse_course(raw) for raw in courses]
    except (ValueError, AttributeError, TypeError, IndexError, KeyError) as exc:
        # pydantic ValidationError is a ValueError
        raise ProviderError("course search returned malformed data") from exc


__all__ = ["CourseSummary", "TeeBox", "TeeHole", "search_courses"]
