"""Shared pytest fixtures for greenside tests."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from greenside.app import app
from greenside.bag import PlayerClubService, get_player_club_service
from greenside.club_distance import ShotLogService, get_shot_log_service
from greenside.config import reset_settings_cache
from greenside.courses import get_course_service
from greenside.providers.wind import WindReading
from greenside.rounds import RoundSessionService, get_round_session_service
from greenside.scorecards import ScorecardService, get_scorecard_service
from greenside.storage import JsonFileStore, get_store


class FakeElevation:
    """Elevation lookup keyed by latitude; unknown points have no data."""

    def __init__(self, by_latitude: Optional[dict] = None) -> None:
        self.by_latitude = dict(by_latitude or {})
        self.calls: List[Tuple[float, float]] = []
        self.error: Optional[Exception] = None

    def __call__(self, lat: float, lon: float) -> Optional[float]:
        self.calls.append((lat, lon))
        if self.error is not None:
            raise self.error
        return self.by_latitude.get(lat)


class FakeWeather:
    def __init__(self, reading: Optional[WindReading] = None) -> None:
        self.reading = reading or WindReading(speed_mph=12.4, direction_degrees=315.0)
        self.calls: List[Tuple[float, float]] = []
        self.error: Optional[Exception] = None

    def __call__(self, lat: float, lon: float) -> WindReading:
        self.calls.append((lat, lon))
        if self.error is not None:
            raise self.error
        return self.reading


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch) -> Iterator[None]:
    monkeypatch.setenv("GREENSIDE_DATA_DIR", str(tmp_path / "users"))
    monkeypatch.delenv("GREENSIDE_ELEVATION_FACTOR", raising=False)
    monkeypatch.delenv("REQUIRE_API_KEY", raising=False)
    reset_settings_cache()
    get_store.cache_clear()
    yield
    reset_settings_cache()
    get_store.cache_clear()


@pytest.fixture
def store(tmp_path) -> JsonFileStore:
    return JsonFileStore(tmp_path / "store")


@pytest.fixture
def shot_service(store) -> ShotLogService:
    return ShotLogService(store)


@pytest.fixture
def club_service(store, shot_service) -> PlayerClubService:
    return PlayerClubService(store, shot_service)


@pytest.fixture
def fake_elevation() -> FakeElevation:
    return FakeElevation()


@pytest.fixture
def fake_weather() -> FakeWeather:
    return FakeWeather()


@pytest.fixture
def round_service(club_service, fake_elevation, fake_weather) -> RoundSessionService:
    return RoundSessionService(club_service, fake_elevation, fake_weather)


@pytest.fixture
def api_client(store, shot_service, club_service, round_service):
    scorecards = ScorecardService(store)
    app.dependency_overrides[get_shot_log_service] = lambda: shot_service
    app.dependency_overrides[get_player_club_service] = lambda: club_service
    app.dependency_overrides[get_round_session_service] = lambda: round_service
    app.dependency_overrides[get_scorecard_service] = lambda: scorecards
    client = TestClient(app)
    yield client
    for dependency in (
        get_shot_log_service,
        get_player_club_service,
        get_round_session_service,
        get_scorecard_service,
        get_course_service,
    ):
        app.dependency_overrides.pop(dependency, None)
