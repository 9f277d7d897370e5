"""Calendar primitives: the few helpers over ``datetime`` and ``calendar`` the engines need.

``datetime`` is a subclass of ``date`` and naive/aware datetimes share one class, so
:func:`kind_of` is the single place that tells them apart.
"""

from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, date, datetime
from enum import StrEnum
from typing import Final

Month = calendar.Month
Weekday = calendar.Day

MIN_YEAR: Final[int] = MINYEAR
MAX_YEAR: Final[int] = MAXYEAR

I32_MIN: Final[int] = -(2**31)
I32_MAX: Final[int] = 2**31 - 1


class Kind(StrEnum):
    """The closed set of values calendar arithmetic is defined for."""

    DATE = "date"
    PRIMITIVE = "primitive"
    OFFSET = "offset"


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def fits_i32(value: int) -> bool:
    return I32_MIN <= value <= I32_MAX


def kind_of(value: object) -> Kind:
    """Classify ``value`` or raise ``TypeError`` for anything outside the closed set.

    Any datetime carrying a tzinfo is an offset datetime, so its tzinfo survives
    arithmetic and saturation.
    """

    if isinstance(value, datetime):
        return Kind.PRIMITIVE if value.tzinfo is None else Kind.OFFSET
    if isinstance(value, date):
        return Kind.DATE
    raise TypeError(
        f"calendar arithmetic is defined for date and datetime, not {type(value).__name__}"
    )


def bounds_for(value: date) -> tuple[date, date]:
    """Return the ``(MIN, MAX)`` pair matching the kind of ``value``.

    Offset datetimes keep their own tzinfo on both bounds.
    """

    kind = kind_of(value)
    if kind is Kind.DATE:
        return date.min, date.max
    if kind is Kind.PRIMITIVE:
        return datetime.min, datetime.max
    assert isinstance(value, datetime)
    return datetime.min.replace(tzinfo=value.tzinfo), datetime.max.replace(tzinfo=value.tzinfo)


__all__ = [
    "I32_MAX",
    "I32_MIN",
    "MAX_YEAR",
    "MIN_YEAR",
    "Kind",
    "Month",
    "Weekday",
    "bounds_for",
    "days_in_month",
    "fits_i32",
    "kind_of",
]
