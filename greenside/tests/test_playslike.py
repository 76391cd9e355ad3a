from __future__ import annotations

import pytest

from greenside.caddie import plays_like_distance, wind_summary
from greenside.errors import InvalidInput


def test_uphill_plays_longer_and_downhill_shorter():
    assert plays_like_distance(150.0, 30.0, 1.0) == pytest.approx(160.0)
    assert plays_like_distance(150.0, -30.0, 1.0) == pytest.approx(140.0)


def test_flat_or_zero_factor_is_raw_distance():
    assert plays_like_distance(150.0, 0.0, 1.0) == 150.0
    assert plays_like_distance(150.0, 45.0, 0.0) == 150.0


def test_adjustment_is_monotonic_in_delta():
    values = [plays_like_distance(150.0, delta, 0.8) for delta in (-20, -5, 0, 5, 20)]
    assert values == sorted(values)


def test_negative_factor_is_rejected():
    with pytest.raises(InvalidInput):
        plays_like_distance(150.0, 10.0, -0.1)


def test_wind_summary_formats_speed_and_sector():
    assert wind_summary(12.4, 315.0) == "12 mph NW"
    assert wind_summary(12.5, 0.0) == "13 mph N"


def test_wind_summary_placeholders():
    assert wind_summary(None, None) == "-- --"
    assert wind_summary(8.0, None) == "8 mph --"


def test_wind_summary_non_finite_parts_are_unknown():
    assert wind_summary(float("nan"), float("nan")) == "-- --"
    assert wind_summary(float("inf"), 90.0) == "-- E"
    assert wind_summary(10.0, float("-inf")) == "10 mph --"
