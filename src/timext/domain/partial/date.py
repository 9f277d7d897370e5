"""Partial calendar dates."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import TYPE_CHECKING, Self

from timext.domain.partial.base import Incomplete, build, check_range, require
from timext.domain.partial.time import PartialTime
from timext.domain.primitives import MAX_YEAR, MIN_YEAR, Month, Weekday, days_in_month

if TYPE_CHECKING:
    from datetime import time

    from timext.domain.partial.primitive import PartialPrimitiveDateTime

# Longest possible length per month over any year (February peaks in leap years).
_MAX_DAYS = {month: max(days_in_month(2000, month), days_in_month(2001, month)) for month in Month}


@dataclass(frozen=True, slots=True)
class PartialDate(Incomplete[date]):
    """A year/month/day triplet where any component may be unknown.

    Each present component is validated on its own; whether the combination is a real
    date (February 31st) is only checked when completing. Use :meth:`is_satisfiable` to
    reject combinations that can never complete.
    """

    year: int | None = None
    month: Month | None = None
    day: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "year", check_range("year", self.year, MIN_YEAR, MAX_YEAR))
        month = check_range("month", self.month, 1, 12)
        object.__setattr__(self, "month", None if month is None else Month(month))
        object.__setattr__(self, "day", check_range("day", self.day, 1, 31))

    @classmethod
    def from_calendar_date(
        cls, year: int | None, month: int | None, day: int | None
    ) -> Self:
        return cls(year=year, month=month, day=day)  # type: ignore[arg-type]

    @property
    def weekday(self) -> Weekday | None:
        complete = self.checked_into_complete()
        return None if complete is None else Weekday(complete.weekday())

    def is_satisfiable(self) -> bool:
        """Return whether some completion of this value could be a valid date."""

        if self.day is None or self.month is None:
            return True
        if self.year is None:
            return self.day <= _MAX_DAYS[self.month]
        return self.day <= days_in_month(self.year, self.month)

    def replace_year(self, year: int | None) -> Self:
        return replace(self, year=year)

    def replace_month(self, month: int | None) -> Self:
        return replace(self, month=month)

    def replace_day(self, day: int | None) -> Self:
        return replace(self, day=day)

    def with_time(self, time: time) -> PartialPrimitiveDateTime:
        return self.with_partial_time(PartialTime.from_complete(time))

    def with_partial_time(self, time: PartialTime) -> PartialPrimitiveDateTime:
        from timext.domain.partial.primitive import PartialPrimitiveDateTime

        return PartialPrimitiveDateTime(self, time)

    @classmethod
    def from_complete(cls, complete: date) -> Self:
        return cls(year=complete.year, month=Month(complete.month), day=complete.day)

    def into_complete(self) -> date:
        year = require("year", self.year)
        month = require("month", self.month)
        day = require("day", self.day)
        return build("day", lambda: date(year, month, day))

    def with_fallback(self, fallback: date) -> Self:
        merged = type(self)(
            year=fallback.year if self.year is None else self.year,
            month=Month(fallback.month) if self.month is None else self.month,
            day=fallback.day if self.day is None else self.day,
        )
        merged.into_complete()
        return merged

    def __composite_values__(self) -> tuple[int | None, int | None, int | None]:
        """Return values in a shape suitable for SQLAlchemy composite columns."""
        return (self.year, None if self.month is None else int(self.month), self.day)


__all__ = ["PartialDate"]
