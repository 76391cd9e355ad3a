from __future__ import annotations

import pytest

from greenside.bag import ClubBook, default_clubs
from greenside.courses import Hole
from greenside.geometry import GeoPoint, distance_yards
from greenside.providers.wind import WindReading
from greenside.rounds import RoundSession
from greenside.rounds.session import FIRST_HOLE, LAST_HOLE, NO_HOLES

TEE = GeoPoint(latitude=40.0, longitude=-75.0)
# About 152 yards north of the tee.
GREEN = GeoPoint(latitude=40.00125, longitude=-75.0)
FAR_GREEN = GeoPoint(latitude=40.002, longitude=-75.0)


def _holes(count: int = 3):
    return [
        Hole(number=n, distance_yards=150 + n, par=4, handicap_rank=n)
        for n in range(1, count + 1)
    ]


def _session(holes=None, factor: float = 1.0) -> RoundSession:
    return RoundSession(
        "round-1",
        user_id="alice",
        holes=_holes() if holes is None else holes,
        club_book=ClubBook.build(default_clubs(), {}),
        elevation_factor=factor,
    )


def test_advance_stops_at_last_hole():
    session = _session()
    assert session.advance_hole() is None
    assert session.advance_hole() is None
    notice = session.advance_hole()
    assert notice.kind == "out_of_range"
    assert notice.message == LAST_HOLE
    assert session.current_hole_index == 2
    assert session.current_hole.number == 3


def test_retreat_stops_at_first_hole():
    session = _session()
    notice = session.retreat_hole()
    assert notice.message == FIRST_HOLE
    assert session.current_hole_index == 0
    session.advance_hole()
    assert session.retreat_hole() is None
    assert session.current_hole_index == 0


def test_free_roam_has_no_holes():
    session = _session(holes=[])
    assert session.current_hole is None
    assert session.advance_hole().message == NO_HOLES
    assert session.retreat_hole().message == NO_HOLES


def test_readout_placeholders_without_points():
    readout = _session().current_readout()
    assert readout.hole.number == 1
    assert readout.distance_yards is None
    assert readout.plays_like_yards is None
    assert readout.suggested_club is None
    assert readout.elevation_delta_feet is None
    assert readout.wind_summary == "-- --"


def test_readout_distance_and_suggestion():
    session = _session()
    session.update_location(TEE)
    session.set_target(GREEN)
    readout = session.current_readout()
    assert readout.distance_yards == pytest.approx(distance_yards(TEE, GREEN), abs=0.01)
    assert readout.plays_like_yards is None
    assert readout.suggested_club == "8I"


def test_uphill_target_changes_suggestion():
    session = _session()
    player = session.update_location(TEE)
    target = session.set_target(GREEN)
    assert session.apply_elevation(player, 100.0)
    assert session.apply_elevation(target, 110.0)
    readout = session.current_readout()
    assert readout.elevation_delta_feet == pytest.approx(32.8)
    assert readout.plays_like_yards == pytest.approx(readout.distance_yards + 10.94, abs=0.02)
    assert readout.suggested_club == "7I"


def test_stale_elevation_result_is_dropped():
    session = _session()
    player = session.update_location(TEE)
    session.apply_elevation(player, 100.0)
    first = session.set_target(GREEN)
    second = session.set_target(FAR_GREEN)
    assert session.apply_elevation(first, 150.0) is False
    assert session.target_elevation is None
    assert session.apply_elevation(second, 90.0) is True
    assert session.target_elevation.elevation_meters == 90.0


def test_new_point_clears_previous_sample():
    session = _session()
    player = session.update_location(TEE)
    target = session.set_target(GREEN)
    session.apply_elevation(player, 100.0)
    session.apply_elevation(target, 110.0)
    session.set_target(FAR_GREEN)
    assert session.current_readout().elevation_delta_feet is None


def test_results_after_close_are_ignored():
    session = _session()
    request = session.set_target(GREEN)
    session.close()
    assert session.apply_elevation(request, 12.0) is False
    assert session.apply_wind(WindReading(speed_mph=5, direction_degrees=90)) is False
    assert session.wind is None


def test_missing_elevation_leaves_delta_unknown():
    session = _session()
    player = session.update_location(TEE)
    target = session.set_target(GREEN)
    session.apply_elevation(player, 100.0)
    session.apply_elevation(target, None)
    assert session.current_readout().elevation_delta_feet is None


def test_wind_reading_feeds_summary():
    session = _session()
    session.apply_wind(WindReading(speed_mph=7.6, direction_degrees=200))
    assert session.current_readout().wind_summary == "8 mph S"
