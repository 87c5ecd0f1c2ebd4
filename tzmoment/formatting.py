"""Token based rendering of instants."""

from __future__ import annotations

import logging
import re
from typing import Optional

from . import host
from .civil import CivilTime, zoned_datetime
from .instant import INVALID_DATE, MomentInput, create_moment
from .settings import get_settings

LOGGER = logging.getLogger(__name__)

# Longer tokens must precede their prefixes.
TOKEN_PATTERN = re.compile(r"YYYY|MMMM|dddd|MMM|ddd|YY|MM|DD|HH|hh|mm|ss|A|a|Z")
TWELVE_HOUR_PATTERN = re.compile(r"a|A|hh")


def uses_twelve_hour_clock(pattern: str, hour12: Optional[bool] = None) -> bool:
    if hour12 is not None:
        return hour12
    return TWELVE_HOUR_PATTERN.search(pattern) is not None


def _names_for(locale: str) -> host.LocaleNames:
    try:
        return host.locale_names(locale)
    except host.UnsupportedLocaleError:
        LOGGER.warning("Unsupported locale %r, using %s names", locale, host.DEFAULT_LOCALE)
        return host.locale_names(host.DEFAULT_LOCALE)


def build_token_map(civil: CivilTime, names: host.LocaleNames, abbreviation: str, twelve_hour: bool) -> dict[str, str]:
    """Map every format token to its rendered value."""

    year = f"{civil.year:04d}"
    hour24 = f"{civil.hour:02d}"
    if twelve_hour:
        hour12 = f"{civil.hour % 12 or 12:02d}"
        meridiem = names.pm if civil.hour >= 12 else names.am
    else:
        hour12 = hour24
        meridiem = ""

    return {
        "YYYY": year,
        "YY": year[-2:],
        "MMMM": names.months[civil.month],
        "MMM": names.months_short[civil.month],
        "MM": f"{civil.month:02d}",
        "DD": f"{civil.day:02d}",
        "dddd": names.weekdays[civil.weekday],
        "ddd": names.weekdays_short[civil.weekday],
        "HH": hour24,
        "hh": hour12,
        "mm": f"{civil.minute:02d}",
        "ss": f"{civil.second:02d}",
        "A": meridiem.upper(),
        "a": meridiem.lower(),
        "Z": abbreviation,
    }


def format_date(
    value: MomentInput,
    pattern: Optional[str] = None,
    *,
    locale: Optional[str] = None,
    timezone: Optional[str] = None,
    hour12: Optional[bool] = None,
) -> str:
    """Render ``value`` using ``pattern``.

    Parameters
    ----------
    value:
        Anything :func:`tzmoment.create_moment` accepts.
    pattern:
        Mix of format tokens and literal text, ``YYYY-MM-DD HH:mm:ss`` by
        default. Text matching no token is copied unchanged.
    locale:
        Locale for month, weekday and AM/PM names, ``en-US`` by default.
    timezone:
        Zone whose wall clock is rendered, ``UTC`` by default. Unsupported
        zones render in UTC.
    hour12:
        Force the 12-hour clock on or off. When omitted it is on if the
        pattern contains ``a``, ``A`` or ``hh``.
    """

    settings = get_settings()
    pattern = settings.pattern if pattern is None else pattern
    locale = locale or settings.locale
    zone = timezone or settings.timezone

    instant = create_moment(value)
    if not instant.is_valid:
        return INVALID_DATE

    try:
        moment = zoned_datetime(instant, zone)
    except (host.UnsupportedZoneError, OverflowError) as exc:
        LOGGER.warning("Rendering %s in UTC: %s", instant, exc)
        moment = instant.to_datetime()

    tokens = build_token_map(
        CivilTime.from_datetime(moment),
        _names_for(locale),
        host.zone_abbreviation(moment),
        uses_twelve_hour_clock(pattern, hour12),
    )
    return TOKEN_PATTERN.sub(lambda match: tokens.get(match.group(0), match.group(0)), pattern)


__all__ = ["TOKEN_PATTERN", "build_token_map", "format_date", "uses_twelve_hour_clock"]
