from __future__ import annotations

import math

import pytest

from tzmoment import arithmetic
from tzmoment.instant import INVALID, Instant

BASE = "2024-03-21T12:34:56.789Z"


@pytest.mark.parametrize(
    ("unit", "expected"),
    [
        ("days", "2024-03-23T12:34:56.789Z"),
        ("hours", "2024-03-21T14:34:56.789Z"),
        ("minutes", "2024-03-21T12:36:56.789Z"),
        ("seconds", "2024-03-21T12:34:58.789Z"),
        ("milliseconds", "2024-03-21T12:34:56.791Z"),
    ],
)
def test_add_each_unit(unit, expected):
    assert str(arithmetic.add(BASE, 2, unit)) == expected


def test_subtract_is_negative_add():
    assert arithmetic.subtract(BASE, 1, "days") == arithmetic.add(BASE, -1, "days")
    assert str(arithmetic.subtract(BASE, 13, "hours")) == "2024-03-20T23:34:56.789Z"


def test_add_truncates_fractional_amounts_and_ignores_unknown_units():
    assert arithmetic.add(BASE, 1.9, "days") == arithmetic.add(BASE, 1, "days")
    assert arithmetic.add(BASE, 5, "fortnights") == arithmetic.add(BASE, 0, "days")


def test_diff_floors_in_unit():
    later = arithmetic.add(BASE, 36, "hours")
    assert arithmetic.diff(later, BASE, "days") == 1
    assert arithmetic.diff(BASE, later, "days") == -2
    assert arithmetic.diff(later, BASE) == 36 * 3_600_000


def test_comparisons():
    later = arithmetic.add(BASE, 1, "milliseconds")
    assert arithmetic.is_before(BASE, later)
    assert not arithmetic.is_before(later, BASE)
    assert arithmetic.is_after(later, BASE)
    assert not arithmetic.is_after(BASE, BASE)


@pytest.mark.parametrize(
    ("unit", "expected"),
    [
        ("day", "2024-03-21T00:00:00.000Z"),
        ("hour", "2024-03-21T12:00:00.000Z"),
        ("minute", "2024-03-21T12:34:00.000Z"),
    ],
)
def test_start_of(unit, expected):
    assert str(arithmetic.start_of(BASE, unit)) == expected


def test_start_of_before_epoch():
    assert arithmetic.start_of(-1, "day") == Instant.from_fields(1969, 12, 31)


def test_invalid_instants_never_raise():
    assert arithmetic.add(INVALID, 1, "days") == INVALID
    assert arithmetic.add(BASE, math.nan, "days") == INVALID
    assert arithmetic.subtract("nope", 1, "hours") == INVALID
    assert math.isnan(arithmetic.diff(INVALID, BASE))
    assert arithmetic.is_before(INVALID, BASE) is False
    assert arithmetic.is_after(BASE, INVALID) is False
    assert arithmetic.start_of(INVALID, "day") == INVALID
