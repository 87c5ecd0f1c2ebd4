"""Human readable phrasing of the distance between two moments."""

from __future__ import annotations

import logging
import math
from datetime import timedelta
from typing import Optional

from babel import Locale
from babel.dates import format_timedelta

from . import host
from .instant import INVALID_DATE, MomentInput, create_moment
from .settings import get_settings

LOGGER = logging.getLogger(__name__)

JUST_NOW = "just now"

_UNIT_SECONDS = {"second": 1, "minute": 60, "hour": 3_600, "day": 86_400}


def _resolve_locale(identifier: str) -> Locale:
    try:
        return host.parse_locale(identifier)
    except host.UnsupportedLocaleError:
        LOGGER.warning("Unsupported locale %r, using %s", identifier, host.DEFAULT_LOCALE)
        return host.parse_locale(host.DEFAULT_LOCALE)


def relative_phrase(amount: int, unit: str, locale: Locale) -> str:
    """Phrase ``amount`` units as future (positive) or past (negative) time."""

    return format_timedelta(
        timedelta(seconds=amount * _UNIT_SECONDS[unit]),
        granularity=unit,
        threshold=math.inf,
        add_direction=True,
        locale=locale,
    )


def from_now(value: MomentInput, now: MomentInput = None, *, locale: Optional[str] = None) -> str:
    """Describe ``value`` relative to ``now`` (the current time by default).

    Gaps under ten seconds read as "just now". Larger gaps use the largest of
    seconds, minutes, hours or days that fits, floored toward the past.
    """

    target = create_moment(value)
    reference = create_moment(now)
    if not (target.is_valid and reference.is_valid):
        return INVALID_DATE

    babel_locale = _resolve_locale(locale or get_settings().locale)
    delta = (target.epoch_ms - reference.epoch_ms) // 1000
    distance = abs(delta)

    if distance < 10:
        return JUST_NOW
    if distance < 60:
        return relative_phrase(-1 if delta < 0 else 1, "second", babel_locale)
    if distance < 3_600:
        return relative_phrase(delta // 60, "minute", babel_locale)
    if distance < 86_400:
        return relative_phrase(delta // 3_600, "hour", babel_locale)
    return relative_phrase(delta // 86_400, "day", babel_locale)


__all__ = ["JUST_NOW", "from_now", "relative_phrase"]
