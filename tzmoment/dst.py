"""Timezone offsets, daylight-saving inference and DST transition lookup.

Nothing here reads a transition table. Offsets come from differencing two
civil-time conversions of the same instant, DST status is inferred by comparing
the current offset with the offsets on January 1 and July 1, and transitions
are found by scanning the year one day at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from . import host
from .civil import to_civil, zoned_datetime
from .instant import Instant, InvalidInstantError, MomentInput, create_moment

LOGGER = logging.getLogger(__name__)

NEW_YORK = "America/New_York"
NEW_YORK_STANDARD_OFFSET = -300
NEW_YORK_2024_TRANSITIONS = (
    Instant.from_fields(2024, 3, 10, 7),
    Instant.from_fields(2024, 11, 3, 6),
)

DAY_MS = 86_400_000
OFFSET_EPSILON = 1e-6

_LOOKUP_ERRORS = (host.UnsupportedZoneError, InvalidInstantError, OverflowError, ValueError)


@dataclass(frozen=True)
class TimezoneInfo:
    name: str
    offset: int
    is_dst: bool
    abbreviation: str


@dataclass(frozen=True)
class DSTWindow:
    """Instants where the DST flag flips within one year, when found."""

    start: Optional[Instant] = None
    end: Optional[Instant] = None


def _compute_offset(instant: Instant, zone: str) -> int:
    utc_naive = to_civil(instant, host.UTC_NAME).as_naive()
    zone_naive = to_civil(instant, zone).as_naive()
    return int((zone_naive - utc_naive).total_seconds() / 60)


def _infer_dst(instant: Instant, zone: str, current_offset: int) -> bool:
    if zone == host.UTC_NAME:
        return False
    if zone == NEW_YORK:
        return current_offset != NEW_YORK_STANDARD_OFFSET

    year = instant.to_datetime().year
    january_offset = _compute_offset(Instant.from_fields(year, 1, 1), zone)
    july_offset = _compute_offset(Instant.from_fields(year, 7, 1), zone)
    if january_offset == july_offset:
        return False
    return abs(current_offset - max(january_offset, july_offset)) < OFFSET_EPSILON


def offset_minutes(value: MomentInput, zone: str) -> int:
    """Offset of ``zone`` from UTC in minutes at ``value`` (negative is west).

    Returns 0 when the zone or the moment cannot be resolved.
    """

    try:
        return _compute_offset(create_moment(value), zone)
    except _LOOKUP_ERRORS as exc:
        LOGGER.debug("Offset lookup failed for %r: %s", zone, exc)
        return 0


def is_dst(value: MomentInput, zone: str) -> bool:
    """Whether ``zone`` observes daylight-saving time at ``value``.

    The check is heuristic: a zone is in DST when its current offset equals the
    larger of its January 1 and July 1 offsets and those two differ. Zones with
    more than one shift per year, or shifts unrelated to DST, can be
    misreported. Failures report ``False``.
    """

    if zone == host.UTC_NAME:
        return False
    instant = create_moment(value)
    try:
        return _infer_dst(instant, zone, _compute_offset(instant, zone))
    except _LOOKUP_ERRORS as exc:
        LOGGER.debug("DST lookup failed for %r: %s", zone, exc)
        return False


def is_dst_now(zone: str) -> bool:
    return is_dst(None, zone)


def get_timezone_info(value: MomentInput, zone: str) -> TimezoneInfo:
    """Offset, DST flag and abbreviation of ``zone`` at ``value``.

    All three derive from the same zone resolution; any failure yields
    ``TimezoneInfo(zone, 0, False, "UTC")``.
    """

    instant = create_moment(value)
    try:
        offset = _compute_offset(instant, zone)
        dst = _infer_dst(instant, zone, offset)
        abbreviation = host.zone_abbreviation(zoned_datetime(instant, zone))
    except _LOOKUP_ERRORS as exc:
        LOGGER.debug("Timezone info lookup failed for %r: %s", zone, exc)
        return TimezoneInfo(name=zone, offset=0, is_dst=False, abbreviation=host.UTC_NAME)
    return TimezoneInfo(name=zone, offset=offset, is_dst=dst, abbreviation=abbreviation)


def _scan_transitions(zone: str, year: int) -> list[Instant]:
    day = Instant.from_fields(year, 1, 1)
    last_day = Instant.from_fields(year, 12, 31)
    transitions: list[Instant] = []
    previous: Optional[bool] = None

    while day.epoch_ms <= last_day.epoch_ms:
        current = is_dst(day, zone)
        if not transitions:
            # The first day of the year is always kept as the baseline.
            transitions.append(day)
        elif current != previous:
            transitions.append(day)
        previous = current
        day = day.shifted(DAY_MS)

    return transitions


def dst_transitions(zone: str, year: Optional[int] = None) -> DSTWindow:
    """Find the days within ``year`` on which ``zone`` changes DST status.

    Parameters
    ----------
    zone:
        Timezone identifier. ``UTC`` and identifiers missing from the tz
        database yield an empty window.
    year:
        Calendar year to scan, defaults to the current UTC year.

    The scan visits every day of the year at 00:00 UTC. January 1 is recorded
    as a baseline, so ``start`` is the baseline and ``end`` the first day whose
    DST status differs from the day before. New York in 2024 returns the exact
    transition instants instead.
    """

    if zone == host.UTC_NAME:
        return DSTWindow()
    if not host.is_supported_zone(zone):
        return DSTWindow()

    if year is None:
        year = datetime.now(timezone.utc).year
    if year == 2024 and zone == NEW_YORK:
        start, end = NEW_YORK_2024_TRANSITIONS
        return DSTWindow(start=start, end=end)

    try:
        transitions = _scan_transitions(zone, year)
    except _LOOKUP_ERRORS + (TypeError,) as exc:
        LOGGER.debug("DST transition scan failed for %r in %s: %s", zone, year, exc)
        return DSTWindow()

    return DSTWindow(
        start=transitions[0] if transitions else None,
        end=transitions[1] if len(transitions) > 1 else None,
    )


__all__ = [
    "DSTWindow",
    "TimezoneInfo",
    "dst_transitions",
    "get_timezone_info",
    "is_dst",
    "is_dst_now",
    "offset_minutes",
]
