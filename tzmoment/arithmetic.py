"""Calendar arithmetic and comparison on instants.

Units are fixed-length UTC durations. Invalid instants never raise: shifts
return the invalid instant, differences return ``nan`` and comparisons
return ``False``.
"""

from __future__ import annotations

import math
from typing import Literal

from .instant import INVALID, Instant, MomentInput, create_moment

TimeUnit = Literal["days", "hours", "minutes", "seconds", "milliseconds"]
StartUnit = Literal["day", "hour", "minute"]

UNIT_MS: dict[str, int] = {
    "milliseconds": 1,
    "seconds": 1_000,
    "minutes": 60_000,
    "hours": 3_600_000,
    "days": 86_400_000,
}

_START_MS: dict[str, int] = {
    "minute": 60_000,
    "hour": 3_600_000,
    "day": 86_400_000,
}


def add(value: MomentInput, n: float, unit: TimeUnit) -> Instant:
    """Shift a moment by ``n`` units; fractional amounts are truncated toward zero."""

    instant = create_moment(value)
    if not instant.is_valid:
        return INVALID
    if isinstance(n, float) and not math.isfinite(n):
        return INVALID
    step = UNIT_MS.get(unit)
    if step is None:
        return instant
    return instant.shifted(int(n) * step)


def subtract(value: MomentInput, n: float, unit: TimeUnit) -> Instant:
    return add(value, -n, unit)


def diff(first: MomentInput, second: MomentInput, unit: TimeUnit = "milliseconds") -> float:
    """Floor of ``first - second`` expressed in ``unit``."""

    a = create_moment(first)
    b = create_moment(second)
    if not (a.is_valid and b.is_valid):
        return math.nan
    return (a.epoch_ms - b.epoch_ms) // UNIT_MS.get(unit, 1)


def is_before(first: MomentInput, second: MomentInput) -> bool:
    a = create_moment(first)
    b = create_moment(second)
    return a.is_valid and b.is_valid and a.epoch_ms < b.epoch_ms


def is_after(first: MomentInput, second: MomentInput) -> bool:
    a = create_moment(first)
    b = create_moment(second)
    return a.is_valid and b.is_valid and a.epoch_ms > b.epoch_ms


def start_of(value: MomentInput, unit: StartUnit) -> Instant:
    """Truncate a moment to the start of its UTC day, hour or minute."""

    instant = create_moment(value)
    size = _START_MS.get(unit)
    if not instant.is_valid or size is None:
        return instant
    return Instant(instant.epoch_ms - instant.epoch_ms % size)


__all__ = ["StartUnit", "TimeUnit", "UNIT_MS", "add", "diff", "is_after", "is_before", "start_of", "subtract"]
