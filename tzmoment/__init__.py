"""Timezone aware date formatting, arithmetic and DST lookup."""

from __future__ import annotations

from .arithmetic import TimeUnit, add, diff, is_after, is_before, start_of, subtract
from .civil import CivilTime, to_civil, to_timezone
from .dst import (
    DSTWindow,
    TimezoneInfo,
    dst_transitions,
    get_timezone_info,
    is_dst,
    is_dst_now,
    offset_minutes,
)
from .formatting import format_date
from .host import supported_locales, supported_zones
from .instant import INVALID, INVALID_DATE, Instant, create_moment
from .relative import from_now


def get_available_timezones() -> list[str]:
    """Return every supported timezone identifier."""
    return supported_zones()


def get_available_locales() -> list[str]:
    """Return every supported locale identifier (``en-US`` style)."""
    return supported_locales()


__all__ = [
    "CivilTime",
    "DSTWindow",
    "INVALID",
    "INVALID_DATE",
    "Instant",
    "TimeUnit",
    "TimezoneInfo",
    "add",
    "create_moment",
    "diff",
    "dst_transitions",
    "format_date",
    "from_now",
    "get_available_locales",
    "get_available_timezones",
    "get_timezone_info",
    "is_after",
    "is_before",
    "is_dst",
    "is_dst_now",
    "offset_minutes",
    "start_of",
    "subtract",
    "to_civil",
    "to_timezone",
]
