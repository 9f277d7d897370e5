"""Public domain surface: calendar durations and partial timestamps."""

from __future__ import annotations

from timext.domain.arithmetic import (
    calendar_add,
    calendar_sub,
    checked_calendar_add,
    checked_calendar_sub,
    saturating_calendar_add,
    saturating_calendar_sub,
)
from timext.domain.duration import CalendarDuration
from timext.domain.errors import (
    ArithmeticOverflow,
    ComponentError,
    ComponentOutOfRange,
    MissingComponent,
)
from timext.domain.partial import (
    Incomplete,
    PartialDate,
    PartialOffsetDateTime,
    PartialPrimitiveDateTime,
    PartialTime,
)
from timext.domain.primitives import Month, Weekday, days_in_month

__all__ = [  # noqa: RUF022
    # durations
    "CalendarDuration",
    "calendar_add",
    "calendar_sub",
    "checked_calendar_add",
    "checked_calendar_sub",
    "saturating_calendar_add",
    "saturating_calendar_sub",
    # partial timestamps
    "Incomplete",
    "PartialDate",
    "PartialTime",
    "PartialPrimitiveDateTime",
    "PartialOffsetDateTime",
    # errors
    "ArithmeticOverflow",
    "ComponentError",
    "ComponentOutOfRange",
    "MissingComponent",
    # primitives
    "Month",
    "Weekday",
    "days_in_month",
]
