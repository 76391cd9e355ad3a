from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from greenside.club_distance import RunningStats, TrackedShot, aggregate, club_key, summarize

_T0 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def _shot(club: str, distance: float, minutes: int = 0) -> TrackedShot:
    return TrackedShot(
        id=f"{club}-{distance}-{minutes}",
        club=club,
        distance=distance,
        timestamp=_T0 + timedelta(minutes=minutes),
    )


@pytest.mark.parametrize(
    "label, key",
    [("7I", "7"), ("7 iron", "7"), (" 7i ", "7"), ("PW", "PW"), ("pw", "PW"), ("Driver", "DR")],
)
def test_club_key(label, key):
    assert club_key(label) == key


def test_average_per_key():
    shots = [_shot("7I", 160), _shot("7i", 170)]
    assert aggregate(shots) == {"7": 165}


def test_labels_without_digits_group_by_prefix():
    shots = [_shot("PW", 120), _shot("pw", 130), _shot("SW", 100)]
    assert aggregate(shots) == {"PW": 125, "SW": 100}


def test_average_rounds_half_up():
    assert aggregate([_shot("9I", 150), _shot("9I", 151)]) == {"9": 151}


def test_no_shots_no_averages():
    assert aggregate([]) == {}
    assert summarize([]) == []


def test_summary_tracks_spread_and_latest_timestamp():
    shots = [_shot("7I", 160, 0), _shot("7I", 170, 5), _shot("PW", 120, 2)]
    summary = summarize(shots)
    assert [item.key for item in summary] == ["7", "PW"]
    seven = summary[0]
    assert seven.samples == 2
    assert seven.average_yards == 165
    assert seven.std_dev_yards == pytest.approx(7.1)
    assert seven.last_updated == _T0 + timedelta(minutes=5)
    assert summary[1].std_dev_yards is None


def test_running_stats_variance():
    stats = RunningStats()
    for value in (2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0):
        stats.update(value)
    assert stats.mean == pytest.approx(5.0)
    assert stats.variance == pytest.approx(32.0 / 7.0)


def test_naive_timestamps_are_treated_as_utc():
    shot = TrackedShot(id="a", club="7I", distance=150, recorded_at="2024-05-01T09:00:00")
    assert shot.timestamp.tzinfo is timezone.utc
