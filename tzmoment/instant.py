"""Absolute points in time and their construction from loose inputs."""

from __future__ import annotations

import logging
import math
import time
import warnings
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

from dateutil import parser, tz

LOGGER = logging.getLogger(__name__)

INVALID_DATE = "Invalid Date"

EPOCH = datetime(1970, 1, 1, tzinfo=tz.UTC)
_ONE_MS = timedelta(milliseconds=1)
MIN_EPOCH_MS = (datetime.min.replace(tzinfo=tz.UTC) - EPOCH) // _ONE_MS
MAX_EPOCH_MS = (datetime.max.replace(tzinfo=tz.UTC) - EPOCH) // _ONE_MS


class InvalidInstantError(ValueError):
    """Raised when an operation needs the fields of an invalid instant."""


@dataclass(frozen=True)
class Instant:
    """Milliseconds since the Unix epoch; ``None`` marks an invalid instant."""

    epoch_ms: Optional[int] = None

    def __post_init__(self) -> None:
        value = self.epoch_ms
        if value is None:
            return
        if isinstance(value, float):
            value = int(value) if math.isfinite(value) else None
        if value is not None and not (MIN_EPOCH_MS <= value <= MAX_EPOCH_MS):
            value = None
        object.__setattr__(self, "epoch_ms", value)

    @property
    def is_valid(self) -> bool:
        return self.epoch_ms is not None

    @classmethod
    def now(cls) -> "Instant":
        return cls(time.time_ns() // 1_000_000)

    @classmethod
    def from_datetime(cls, value: datetime) -> "Instant":
        """Build an instant from a datetime; naive values are read as UTC."""

        if value.tzinfo is None:
            value = value.replace(tzinfo=tz.UTC)
        return cls((value - EPOCH) // _ONE_MS)

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "Instant":
        """Build an instant from UTC calendar fields.

        Raises ``ValueError`` for fields that do not form a real date.
        """

        moment = datetime(year, month, day, hour, minute, second, millisecond * 1000, tzinfo=tz.UTC)
        return cls.from_datetime(moment)

    def to_datetime(self) -> datetime:
        """Return the instant as an aware UTC datetime."""

        if self.epoch_ms is None:
            raise InvalidInstantError(INVALID_DATE)
        return EPOCH + timedelta(milliseconds=self.epoch_ms)

    def shifted(self, milliseconds: int) -> "Instant":
        if self.epoch_ms is None:
            return self
        return Instant(self.epoch_ms + milliseconds)

    def isoformat(self) -> str:
        if self.epoch_ms is None:
            return INVALID_DATE
        moment = self.to_datetime()
        return (
            f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
            f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
            f".{moment.microsecond // 1000:03d}Z"
        )

    def __str__(self) -> str:
        return self.isoformat()


INVALID = Instant(None)

MomentInput = Union[Instant, datetime, date, str, int, float, None]


# Two defaults differing in every date field; a field that changes between
# them was never present in the input.
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _parse_loose(value: str) -> Optional[datetime]:
    """Lenient parse that refuses missing date fields and unknown zone names."""

    results = []
    with warnings.catch_warnings():
        warnings.simplefilter("error", parser.UnknownTimezoneWarning)
        for default in _FILL_DEFAULTS:
            try:
                results.append(parser.parse(value, default=default))
            except parser.UnknownTimezoneWarning:
                LOGGER.debug("Unknown timezone name in %r", value)
                return None
    first, second = results
    if first.date() != second.date():
        LOGGER.debug("Date string %r has no complete date", value)
        return None
    return first


def _parse_string(value: str) -> Instant:
    cleaned = value.strip()
    if not cleaned:
        return INVALID
    try:
        parsed = parser.isoparse(cleaned)
    except (ValueError, OverflowError):
        try:
            parsed = _parse_loose(cleaned)
        except (parser.ParserError, OverflowError, TypeError, ValueError):
            parsed = None
        if parsed is None:
            LOGGER.debug("Unparsable date string %r", value)
            return INVALID
    try:
        return Instant.from_datetime(parsed)
    except (OverflowError, ValueError):
        return INVALID


def create_moment(value: MomentInput = None) -> Instant:
    """Create an instant from another instant, a datetime, a string or epoch ms.

    ``None`` means now. Anything that cannot be interpreted returns the invalid
    instant instead of raising.
    """

    if value is None:
        return Instant.now()
    if isinstance(value, Instant):
        return Instant(value.epoch_ms)
    if isinstance(value, datetime):
        try:
            return Instant.from_datetime(value)
        except (OverflowError, ValueError):
            return INVALID
    if isinstance(value, date):
        return Instant.from_fields(value.year, value.month, value.day)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return INVALID
        return Instant(int(value))
    if isinstance(value, str):
        return _parse_string(value)
    LOGGER.debug("Unsupported moment input type %s", type(value).__name__)
    return INVALID


__all__ = [
    "INVALID",
    "INVALID_DATE",
    "Instant",
    "InvalidInstantError",
    "MomentInput",
    "create_moment",
]
