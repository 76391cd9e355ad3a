from __future__ import annotations

import httpx
import pytest

from greenside.config import reset_settings_cache
from greenside.courses import Hole
from greenside.errors import NotAuthenticated, SessionNotFound
from greenside.geometry import GeoPoint
from greenside.providers import ProviderError, elevation
from greenside.rounds import RoundSessionService

TEE = GeoPoint(latitude=40.0, longitude=-75.0)
GREEN = GeoPoint(latitude=40.00125, longitude=-75.0)

HOLES = [Hole(number=1, distance_yards=152, par=3), Hole(number=2, distance_yards=410, par=4)]


def test_start_requires_user(round_service):
    with pytest.raises(NotAuthenticated):
        round_service.start(None, holes=HOLES)


def test_sessions_are_scoped_to_their_owner(round_service):
    session = round_service.start("alice", holes=HOLES)
    assert round_service.get(session.id, "alice") is session
    with pytest.raises(SessionNotFound):
        round_service.get(session.id, "bob")
    with pytest.raises(SessionNotFound):
        round_service.get("missing", "alice")


def test_location_fix_fetches_elevation_and_wind(round_service, fake_elevation, fake_weather):
    fake_elevation.by_latitude = {TEE.latitude: 100.0, GREEN.latitude: 110.0}
    session = round_service.start("alice", holes=HOLES, course_name="Pine Valley")

    view = round_service.update_location(session.id, "alice", TEE)
    assert view.notices == []
    assert view.readout.wind_summary == "12 mph NW"
    assert len(fake_weather.calls) == 1

    view = round_service.set_target(session.id, "alice", GREEN)
    assert view.course_name == "Pine Valley"
    assert view.readout.elevation_delta_feet == pytest.approx(32.8)
    assert view.readout.suggested_club == "7I"

    round_service.update_location(session.id, "alice", TEE)
    assert len(fake_weather.calls) == 1


def test_elevation_failure_becomes_notice(round_service, fake_elevation):
    fake_elevation.error = ProviderError("open-meteo down")
    session = round_service.start("alice", holes=HOLES)
    round_service.update_location(session.id, "alice", TEE)
    view = round_service.set_target(session.id, "alice", GREEN)
    assert [n.message for n in view.notices] == ["Elevation is unavailable right now."]
    assert view.notices[0].kind == "external_service_failure"
    assert view.readout.elevation_delta_feet is None
    assert view.readout.suggested_club == "8I"


def test_wind_failure_keeps_previous_reading(round_service, fake_weather):
    session = round_service.start("alice", holes=HOLES)
    round_service.update_location(session.id, "alice", TEE)
    fake_weather.error = ProviderError("timeout")
    view = round_service.refresh_wind(session.id, "alice")
    assert [n.message for n in view.notices] == ["Failed to fetch wind data."]
    assert view.readout.wind_summary == "12 mph NW"


def test_refresh_wind_needs_location(round_service, fake_weather):
    session = round_service.start("alice", holes=HOLES)
    view = round_service.refresh_wind(session.id, "alice")
    assert view.notices[0].message == "Waiting for a location fix."
    assert fake_weather.calls == []
    assert round_service.readout(session.id, "alice").wind_summary == "-- --"


def test_hole_navigation_notices(round_service):
    session = round_service.start("alice", holes=HOLES)
    assert round_service.advance(session.id, "alice").hole_index == 1
    view = round_service.advance(session.id, "alice")
    assert view.hole_index == 1
    assert view.notices[0].message == "You have reached the last hole."
    assert round_service.retreat(session.id, "alice").hole_index == 0


def test_reload_clubs_picks_up_edits(round_service, club_service):
    session = round_service.start("alice", holes=HOLES)
    club_service.update_distance("alice", "8I", 150)
    round_service.reload_clubs(session.id, "alice")
    assert session.club_book.get("8I").distance == 150


def test_end_closes_session(round_service):
    session = round_service.start("alice", holes=HOLES)
    round_service.end(session.id, "alice")
    assert session.active is False
    with pytest.raises(SessionNotFound):
        round_service.view(session.id, "alice")


def test_malformed_elevation_body_becomes_notice(monkeypatch, club_service, fake_weather):
    def html(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>rate limited</html>")

    monkeypatch.setattr(
        elevation,
        "_http_client_factory",
        lambda **kwargs: httpx.Client(transport=httpx.MockTransport(html)),
    )
    service = RoundSessionService(club_service, elevation.get_elevation, fake_weather)
    session = service.start("alice", holes=HOLES)
    view = service.update_location(session.id, "alice", TEE)
    assert [n.message for n in view.notices] == ["Elevation is unavailable right now."]
    view = service.set_target(session.id, "alice", GREEN)
    assert view.notices[0].kind == "external_service_failure"
    assert view.readout.suggested_club == "8I"
    assert session.target_elevation is None


class _RecordingSubscription:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


def test_idle_sessions_are_evicted_with_their_subscription(round_service):
    idle = round_service.start("alice", holes=HOLES)
    subscription = _RecordingSubscription()
    round_service.attach_subscription(idle.id, "alice", subscription)
    busy = round_service.start("alice", holes=HOLES)

    idle.last_touched -= 4 * 60 * 60 + 1
    assert round_service.evict_idle() == 1

    assert idle.active is False
    assert subscription.closed
    with pytest.raises(SessionNotFound):
        round_service.get(idle.id, "alice")
    assert round_service.get(busy.id, "alice") is busy


def test_idle_sweep_runs_on_lookup(round_service):
    idle = round_service.start("alice", holes=HOLES)
    idle.last_touched -= 4 * 60 * 60 + 1
    other = round_service.start("bob", holes=HOLES)
    assert idle.active is False
    assert round_service.view(other.id, "bob").hole_count == 2


def test_idle_expiry_can_be_disabled(round_service, monkeypatch):
    monkeypatch.setenv("GREENSIDE_SESSION_IDLE_TTL_S", "0")
    reset_settings_cache()
    session = round_service.start("alice", holes=HOLES)
    session.last_touched -= 10 * 24 * 60 * 60
    assert round_service.evict_idle() == 0
    assert round_service.get(session.id, "alice") is session


def test_lookups_keep_a_session_alive(round_service):
    session = round_service.start("alice", holes=HOLES)
    session.last_touched -= 4 * 60 * 60 - 5
    round_service.advance(session.id, "alice")
    assert round_service.evict_idle() == 0
