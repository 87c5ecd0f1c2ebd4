"""Calendar and locale services backed by dateutil's tz database and Babel's CLDR data."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from functools import lru_cache
from typing import Dict

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel.localedata import locale_identifiers
from dateutil import tz
from dateutil.zoneinfo import get_zonefile_instance

LOGGER = logging.getLogger(__name__)

UTC_NAME = "UTC"
DEFAULT_LOCALE = "en-US"


class UnsupportedZoneError(LookupError):
    """Raised when the tz database does not know a zone identifier."""


class UnsupportedLocaleError(LookupError):
    """Raised when Babel has no CLDR data for a locale identifier."""


@dataclass(frozen=True)
class LocaleNames:
    """Month, weekday and day-period names for one locale.

    Months are keyed 1-12 and weekdays 0-6 with Monday as 0, matching
    ``datetime.weekday()``.
    """

    months: Dict[int, str]
    months_short: Dict[int, str]
    weekdays: Dict[int, str]
    weekdays_short: Dict[int, str]
    am: str
    pm: str


def resolve_zone(name: str) -> tzinfo:
    """Return the tzinfo for ``name`` or raise :class:`UnsupportedZoneError`.

    Only names listed by :func:`supported_zones` resolve, so POSIX TZ strings
    such as ``EST5`` that ``tz.gettz`` would accept are rejected.
    """

    if name == UTC_NAME:
        return tz.UTC
    if not isinstance(name, str) or not is_supported_zone(name):
        raise UnsupportedZoneError(f"Invalid timezone: {name!r}")
    return get_zonefile_instance().get(name)


@lru_cache(maxsize=1)
def _zone_names() -> frozenset[str]:
    return frozenset(get_zonefile_instance().zones)


def supported_zones() -> list[str]:
    """Return every zone identifier in the bundled tz database."""

    return sorted(_zone_names())


def is_supported_zone(name: str) -> bool:
    return name == UTC_NAME or name in _zone_names()


@lru_cache(maxsize=1)
def _locale_identifiers() -> tuple[str, ...]:
    return tuple(sorted(identifier.replace("_", "-") for identifier in locale_identifiers()))


def supported_locales() -> list[str]:
    """Return every locale Babel ships CLDR data for, as ``en-US`` style tags."""

    return list(_locale_identifiers())


@lru_cache(maxsize=64)
def parse_locale(identifier: str) -> Locale:
    """Parse ``en-US`` or ``en_US`` style identifiers into a Babel locale."""

    if not isinstance(identifier, str) or not identifier.strip():
        raise UnsupportedLocaleError(f"Invalid locale: {identifier!r}")
    try:
        return Locale.parse(identifier.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise UnsupportedLocaleError(f"Invalid locale: {identifier!r}") from exc


@lru_cache(maxsize=64)
def locale_names(identifier: str) -> LocaleNames:
    locale = parse_locale(identifier)
    periods = babel_dates.get_period_names(width="abbreviated", context="format", locale=locale)
    return LocaleNames(
        months=dict(babel_dates.get_month_names("wide", context="stand-alone", locale=locale)),
        months_short=dict(babel_dates.get_month_names("abbreviated", context="stand-alone", locale=locale)),
        weekdays=dict(babel_dates.get_day_names("wide", context="stand-alone", locale=locale)),
        weekdays_short=dict(babel_dates.get_day_names("abbreviated", context="stand-alone", locale=locale)),
        am=periods["am"],
        pm=periods["pm"],
    )


def zone_abbreviation(moment: datetime) -> str:
    """Short zone name (``EDT``, ``JST``) the tz database reports for an aware datetime."""

    if moment.tzinfo is tz.UTC:
        return UTC_NAME
    return moment.tzname() or ""


__all__ = [
    "DEFAULT_LOCALE",
    "LocaleNames",
    "UTC_NAME",
    "UnsupportedLocaleError",
    "UnsupportedZoneError",
    "is_supported_zone",
    "locale_names",
    "parse_locale",
    "resolve_zone",
    "supported_locales",
    "supported_zones",
    "zone_abbreviation",
]
