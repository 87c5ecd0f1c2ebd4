"""Conversion of instants into the wall-clock fields of a named timezone."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from . import host
from .instant import Instant, MomentInput, create_moment

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CivilTime:
    """Date and 24-hour time fields shown by a wall clock in some zone."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int = 0

    @classmethod
    def from_datetime(cls, moment: datetime) -> "CivilTime":
        return cls(
            year=moment.year,
            month=moment.month,
            day=moment.day,
            hour=moment.hour,
            minute=moment.minute,
            second=moment.second,
            millisecond=moment.microsecond // 1000,
        )

    @property
    def weekday(self) -> int:
        """Day of the week with Monday as 0."""
        return date(self.year, self.month, self.day).weekday()

    def as_naive(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second, self.millisecond * 1000)


def zoned_datetime(instant: Instant, zone: str) -> datetime:
    """Return ``instant`` as an aware datetime in ``zone``.

    Raises ``InvalidInstantError`` for the invalid instant and
    ``UnsupportedZoneError`` when the zone cannot be resolved.
    """

    moment = instant.to_datetime()
    if zone == host.UTC_NAME:
        return moment
    try:
        return moment.astimezone(host.resolve_zone(zone))
    except OverflowError as exc:
        raise host.UnsupportedZoneError(f"{zone} cannot represent {instant}") from exc


def to_civil(instant: Instant, zone: str) -> CivilTime:
    """Return the civil fields ``instant`` maps to inside ``zone``."""

    return CivilTime.from_datetime(zoned_datetime(instant, zone))


def to_timezone(value: MomentInput, zone: str) -> Optional[datetime]:
    """Convert a moment into an aware datetime in ``zone``.

    Unsupported zones fall back to UTC. Invalid moments return ``None``.
    """

    instant = create_moment(value)
    if not instant.is_valid:
        return None
    try:
        return zoned_datetime(instant, zone)
    except host.UnsupportedZoneError as exc:
        LOGGER.debug("Falling back to UTC for %r: %s", zone, exc)
        return instant.to_datetime()


__all__ = ["CivilTime", "to_civil", "to_timezone", "zoned_datetime"]
