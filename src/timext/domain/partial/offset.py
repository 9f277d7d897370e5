"""Partial date-times carrying an optional UTC offset."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone, tzinfo
from typing import TYPE_CHECKING, Self

from timext.domain.errors import ComponentOutOfRange
from timext.domain.partial.base import Incomplete, build, require
from timext.domain.partial.primitive import PartialPrimitiveDateTime

if TYPE_CHECKING:
    from timext.domain.partial.date import PartialDate
    from timext.domain.partial.time import PartialTime
    from timext.domain.primitives import Month, Weekday


def _coerce_offset(offset: object) -> timezone | None:
    if offset is None or isinstance(offset, timezone):
        return offset
    if isinstance(offset, tzinfo):
        delta = offset.utcoffset(None)
        if delta is None:
            raise ComponentOutOfRange("offset", f"`offset` {offset!r} is not a fixed UTC offset")
        return timezone(delta)
    if isinstance(offset, timedelta):
        return build("offset", lambda: timezone(offset))
    raise ComponentOutOfRange("offset", f"`offset` must be a tzinfo or timedelta, got {offset!r}")


def _offset_of(value: datetime) -> timezone:
    """Return the fixed offset ``value`` has at its own instant."""

    delta = value.utcoffset()
    if delta is None:
        raise TypeError("expected an aware datetime")
    if isinstance(value.tzinfo, timezone):
        return value.tzinfo
    return timezone(delta)


@dataclass(frozen=True, slots=True)
class PartialOffsetDateTime(Incomplete[datetime]):
    """A :class:`PartialPrimitiveDateTime` with an optional offset.

    The offset is only required by :meth:`into_complete`, after every date and time
    component, so a value can be assembled before its offset is known.

    The offset is always a fixed ``timezone``. Zone-based tzinfo such as ``ZoneInfo``
    is pinned to the offset it has at the instant it is taken from.
    """

    datetime: PartialPrimitiveDateTime = PartialPrimitiveDateTime()
    offset: timezone | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.datetime, PartialPrimitiveDateTime):
            raise TypeError("datetime must be a PartialPrimitiveDateTime")
        object.__setattr__(self, "offset", _coerce_offset(self.offset))

    # Accessors -------------------------------------------------------------

    @property
    def date(self) -> PartialDate:
        return self.datetime.date

    @property
    def time(self) -> PartialTime:
        return self.datetime.time

    @property
    def year(self) -> int | None:
        return self.datetime.year

    @property
    def month(self) -> Month | None:
        return self.datetime.month

    @property
    def day(self) -> int | None:
        return self.datetime.day

    @property
    def weekday(self) -> Weekday | None:
        return self.datetime.weekday

    @property
    def hour(self) -> int | None:
        return self.datetime.hour

    @property
    def minute(self) -> int | None:
        return self.datetime.minute

    @property
    def second(self) -> int | None:
        return self.datetime.second

    @property
    def millisecond(self) -> int | None:
        return self.datetime.millisecond

    @property
    def microsecond(self) -> int | None:
        return self.datetime.microsecond

    @property
    def nanosecond(self) -> int | None:
        return self.datetime.nanosecond

    # Replacement -----------------------------------------------------------

    def replace_offset(self, offset: tzinfo | timedelta | None) -> Self:
        return replace(self, offset=offset)

    def replace_datetime(self, datetime: PartialPrimitiveDateTime) -> Self:
        return replace(self, datetime=datetime)

    def replace_date(self, date: PartialDate) -> Self:
        return self.replace_datetime(self.datetime.replace_date(date))

    def replace_time(self, time: PartialTime) -> Self:
        return self.replace_datetime(self.datetime.replace_time(time))

    def replace_year(self, year: int | None) -> Self:
        return self.replace_datetime(self.datetime.replace_year(year))

    def replace_month(self, month: int | None) -> Self:
        return self.replace_datetime(self.datetime.replace_month(month))

    def replace_day(self, day: int | None) -> Self:
        return self.replace_datetime(self.datetime.replace_day(day))

    def replace_hour(self, hour: int | None) -> Self:
        return self.replace_datetime(self.datetime.replace_hour(hour))

    def replace_minute(self, minute: int | None) -> Self:
        return self.replace_datetime(self.datetime.replace_minute(minute))

    def replace_second(self, second: int | None) -> Self:
        return self.replace_datetime(self.datetime.replace_second(second))

    def replace_millisecond(self, millisecond: int | None) -> Self:
        return self.replace_datetime(self.datetime.replace_millisecond(millisecond))

    def replace_microsecond(self, microsecond: int | None) -> Self:
        return self.replace_datetime(self.datetime.replace_microsecond(microsecond))

    def replace_nanosecond(self, nanosecond: int | None) -> Self:
        return self.replace_datetime(self.datetime.replace_nanosecond(nanosecond))

    # Completion ------------------------------------------------------------

    @classmethod
    def from_complete(cls, complete: datetime) -> Self:
        offset = _offset_of(complete)
        return cls(PartialPrimitiveDateTime.from_complete(complete.replace(tzinfo=None)), offset)

    def into_complete(self) -> datetime:
        naive = self.datetime.into_complete()
        offset = require("offset", self.offset)
        return naive.replace(tzinfo=offset)

    def with_fallback(self, fallback: datetime) -> Self:
        offset = _offset_of(fallback) if self.offset is None else self.offset
        return type(self)(self.datetime.with_fallback(fallback.replace(tzinfo=None)), offset)


__all__ = ["PartialOffsetDateTime"]
