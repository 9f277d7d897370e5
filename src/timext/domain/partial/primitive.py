"""Partial date-times without an offset."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Self

from timext.domain.partial.base import Incomplete
from timext.domain.partial.date import PartialDate
from timext.domain.partial.time import PartialTime

if TYPE_CHECKING:
    from datetime import tzinfo

    from timext.domain.partial.offset import PartialOffsetDateTime
    from timext.domain.primitives import Month, Weekday


@dataclass(frozen=True, slots=True)
class PartialPrimitiveDateTime(Incomplete[datetime]):
    """A :class:`PartialDate` paired with a :class:`PartialTime`.

    Completion is the conjunction of both halves: the date is resolved first, so a
    missing ``year`` is reported before a missing ``hour``.
    """

    date: PartialDate = PartialDate()
    time: PartialTime = PartialTime()

    def __post_init__(self) -> None:
        if not isinstance(self.date, PartialDate):
            raise TypeError("date must be a PartialDate")
        if not isinstance(self.time, PartialTime):
            raise TypeError("time must be a PartialTime")

    # Accessors -------------------------------------------------------------

    @property
    def year(self) -> int | None:
        return self.date.year

    @property
    def month(self) -> Month | None:
        return self.date.month

    @property
    def day(self) -> int | None:
        return self.date.day

    @property
    def weekday(self) -> Weekday | None:
        return self.date.weekday

    @property
    def hour(self) -> int | None:
        return self.time.hour

    @property
    def minute(self) -> int | None:
        return self.time.minute

    @property
    def second(self) -> int | None:
        return self.time.second

    @property
    def millisecond(self) -> int | None:
        return self.time.millisecond

    @property
    def microsecond(self) -> int | None:
        return self.time.microsecond

    @property
    def nanosecond(self) -> int | None:
        return self.time.nanosecond

    # Replacement -----------------------------------------------------------

    def replace_date(self, date: PartialDate) -> Self:
        return type(self)(date, self.time)

    def replace_time(self, time: PartialTime) -> Self:
        return type(self)(self.date, time)

    def replace_year(self, year: int | None) -> Self:
        return self.replace_date(self.date.replace_year(year))

    def replace_month(self, month: int | None) -> Self:
        return self.replace_date(self.date.replace_month(month))

    def replace_day(self, day: int | None) -> Self:
        return self.replace_date(self.date.replace_day(day))

    def replace_hour(self, hour: int | None) -> Self:
        return self.replace_time(self.time.replace_hour(hour))

    def replace_minute(self, minute: int | None) -> Self:
        return self.replace_time(self.time.replace_minute(minute))

    def replace_second(self, second: int | None) -> Self:
        return self.replace_time(self.time.replace_second(second))

    def replace_millisecond(self, millisecond: int | None) -> Self:
        return self.replace_time(self.time.replace_millisecond(millisecond))

    def replace_microsecond(self, microsecond: int | None) -> Self:
        return self.replace_time(self.time.replace_microsecond(microsecond))

    def replace_nanosecond(self, nanosecond: int | None) -> Self:
        return self.replace_time(self.time.replace_nanosecond(nanosecond))

    # Offsets ---------------------------------------------------------------

    def assume_offset(self, offset: tzinfo | None) -> PartialOffsetDateTime:
        from timext.domain.partial.offset import PartialOffsetDateTime

        return PartialOffsetDateTime(self, offset)

    def assume_utc(self) -> PartialOffsetDateTime:
        return self.assume_offset(UTC)

    # Completion ------------------------------------------------------------

    @classmethod
    def from_complete(cls, complete: datetime) -> Self:
        return cls(
            PartialDate.from_complete(complete.date()),
            PartialTime.from_complete(complete.time()),
        )

    def into_complete(self) -> datetime:
        return datetime.combine(self.date.into_complete(), self.time.into_complete())

    def with_fallback(self, fallback: datetime) -> Self:
        return type(self)(
            self.date.with_fallback(fallback.date()),
            self.time.with_fallback(fallback.time()),
        )


__all__ = ["PartialPrimitiveDateTime"]
