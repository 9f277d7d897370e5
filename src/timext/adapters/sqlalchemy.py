"""SQLAlchemy column types and composites for the timext value types."""

from __future__ import annotations

from datetime import timedelta, timezone, tzinfo
from typing import TYPE_CHECKING, Any

from sqlalchemy import Integer, TypeDecorator
from sqlalchemy.orm import composite

from timext.domain.duration import CalendarDuration
from timext.domain.partial import PartialDate, PartialTime

if TYPE_CHECKING:
    from sqlalchemy import Dialect
    from sqlalchemy.orm import Composite


class CalendarDurationType(TypeDecorator[CalendarDuration]):
    """Store a :class:`CalendarDuration` as its whole-month count."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value: CalendarDuration | None, dialect: Dialect) -> int | None:
        _ = dialect
        if value is None:
            return None
        if not isinstance(value, CalendarDuration):
            raise TypeError(f"expected CalendarDuration, got {type(value).__name__}")
        return value.whole_months

    def process_result_value(self, value: int | None, dialect: Dialect) -> CalendarDuration | None:
        _ = dialect
        if value is None:
            return None
        return CalendarDuration.months(int(value))


class UtcOffsetType(TypeDecorator[tzinfo]):
    """Store a fixed UTC offset as signed seconds east of UTC."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value: tzinfo | None, dialect: Dialect) -> int | None:
        _ = dialect
        if value is None:
            return None
        delta = value.utcoffset(None)
        if delta is None:
            raise ValueError(f"offset {value!r} is not a fixed UTC offset")
        return int(delta.total_seconds())

    def process_result_value(self, value: int | None, dialect: Dialect) -> tzinfo | None:
        _ = dialect
        if value is None:
            return None
        return timezone(timedelta(seconds=int(value)))


def partial_date_composite(year: Any, month: Any, day: Any) -> Composite[PartialDate]:
    """Map three nullable integer columns onto a :class:`PartialDate` attribute."""
    return composite(PartialDate, year, month, day)


def partial_time_composite(
    hour: Any, minute: Any, second: Any, nanosecond: Any
) -> Composite[PartialTime]:
    """Map four nullable integer columns onto a :class:`PartialTime` attribute."""
    return composite(PartialTime, hour, minute, second, nanosecond)


__all__ = [
    "CalendarDurationType",
    "UtcOffsetType",
    "partial_date_composite",
    "partial_time_composite",
]
