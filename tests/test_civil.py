from __future__ import annotations

import pytest

from tzmoment import host
from tzmoment.civil import CivilTime, to_civil, to_timezone
from tzmoment.instant import INVALID, InvalidInstantError, create_moment


def test_to_civil_uses_utc_fields_directly():
    civil = to_civil(create_moment("2024-03-21T12:34:56.789Z"), "UTC")
    assert civil == CivilTime(2024, 3, 21, 12, 34, 56, 789)
    assert civil.weekday == 3


def test_to_civil_renders_wall_clock_of_named_zone():
    instant = create_moment("2024-03-21T12:00:00Z")
    assert to_civil(instant, "Asia/Tokyo") == CivilTime(2024, 3, 21, 21, 0, 0)
    assert to_civil(instant, "America/New_York") == CivilTime(2024, 3, 21, 8, 0, 0)
    assert to_civil(instant, "Asia/Kolkata") == CivilTime(2024, 3, 21, 17, 30, 0)


def test_to_civil_crosses_date_line():
    civil = to_civil(create_moment("2024-12-31T23:30:00Z"), "Pacific/Auckland")
    assert (civil.year, civil.month, civil.day, civil.hour) == (2025, 1, 1, 12)


def test_to_civil_raises_for_unknown_zone_and_invalid_instant():
    with pytest.raises(host.UnsupportedZoneError):
        to_civil(create_moment(0), "Invalid/Timezone")
    with pytest.raises(InvalidInstantError):
        to_civil(INVALID, "UTC")


def test_to_timezone_returns_aware_datetime():
    converted = to_timezone("2024-03-21T12:00:00Z", "Asia/Tokyo")
    assert converted.hour == 21
    assert converted.utcoffset().total_seconds() == 9 * 3600


def test_to_timezone_falls_back_to_utc_and_handles_invalid_moments():
    converted = to_timezone("2024-03-21T12:00:00Z", "Invalid/Timezone")
    assert converted.hour == 12
    assert converted.utcoffset().total_seconds() == 0
    assert to_timezone("garbage", "Asia/Tokyo") is None
