"""Random values for property tests and fixtures.

Every function takes an optional ``random.Random`` so callers can seed the stream.
Partial values are sampled by drawing a complete value and wrapping it.
"""

from __future__ import annotations

import random
from datetime import date, datetime, time, timedelta, timezone
from typing import Final

from timext.domain.duration import CalendarDuration
from timext.domain.partial import (
    PartialDate,
    PartialOffsetDateTime,
    PartialPrimitiveDateTime,
    PartialTime,
)
from timext.domain.primitives import I32_MAX, I32_MIN

_MAX_OFFSET_SECONDS: Final[int] = 24 * 3600 - 1


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_duration(rng: random.Random | None = None) -> CalendarDuration:
    """Return a duration uniformly distributed over the whole 32-bit month range."""
    return CalendarDuration.months(_rng(rng).randint(I32_MIN, I32_MAX))


def random_date(rng: random.Random | None = None) -> date:
    return date.fromordinal(_rng(rng).randint(date.min.toordinal(), date.max.toordinal()))


def random_time(rng: random.Random | None = None) -> time:
    source = _rng(rng)
    return time(
        source.randint(0, 23),
        source.randint(0, 59),
        source.randint(0, 59),
        source.randint(0, 999_999),
    )


def random_datetime(rng: random.Random | None = None) -> datetime:
    source = _rng(rng)
    return datetime.combine(random_date(source), random_time(source))


def random_offset(rng: random.Random | None = None) -> timezone:
    seconds = _rng(rng).randint(-_MAX_OFFSET_SECONDS, _MAX_OFFSET_SECONDS)
    return timezone(timedelta(seconds=seconds))


def random_offset_datetime(rng: random.Random | None = None) -> datetime:
    source = _rng(rng)
    return random_datetime(source).replace(tzinfo=random_offset(source))


def random_partial_date(rng: random.Random | None = None) -> PartialDate:
    return PartialDate.from_complete(random_date(rng))


def random_partial_time(rng: random.Random | None = None) -> PartialTime:
    return PartialTime.from_complete(random_time(rng))


def random_partial_datetime(rng: random.Random | None = None) -> PartialPrimitiveDateTime:
    return PartialPrimitiveDateTime.from_complete(random_datetime(rng))


def random_partial_offset_datetime(
    rng: random.Random | None = None,
) -> PartialOffsetDateTime:
    return PartialOffsetDateTime.from_complete(random_offset_datetime(rng))


__all__ = [
    "random_date",
    "random_datetime",
    "random_duration",
    "random_offset",
    "random_offset_datetime",
    "random_partial_date",
    "random_partial_datetime",
    "random_partial_offset_datetime",
    "random_partial_time",
    "random_time",
]
