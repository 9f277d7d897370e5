"""Calendar arithmetic for ``date`` and naive/aware ``datetime`` values.

The operations are plain functions over the closed set recognised by
:func:`timext.domain.primitives.kind_of`; any other type raises ``TypeError``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from timext.domain.errors import ArithmeticOverflow
from timext.domain.primitives import bounds_for

if TYPE_CHECKING:
    from datetime import date

    from timext.domain.duration import CalendarDuration

log = logging.getLogger(__name__)


def checked_calendar_add[T: date](value: T, duration: CalendarDuration) -> T | None:
    return duration.checked_date_add(value)


def checked_calendar_sub[T: date](value: T, duration: CalendarDuration) -> T | None:
    return duration.checked_date_sub(value)


def calendar_add[T: date](value: T, duration: CalendarDuration) -> T:
    result = checked_calendar_add(value, duration)
    if result is None:
        raise ArithmeticOverflow("resulting value is out of range")
    return result


def calendar_sub[T: date](value: T, duration: CalendarDuration) -> T:
    result = checked_calendar_sub(value, duration)
    if result is None:
        raise ArithmeticOverflow("resulting value is out of range")
    return result


def saturating_calendar_add[T: date](value: T, duration: CalendarDuration) -> T:
    """Add ``duration``, clamping to the kind's MIN/MAX instead of failing."""

    result = checked_calendar_add(value, duration)
    if result is not None:
        return result
    low, high = bounds_for(value)
    bound = low if duration.is_negative else high
    log.debug("Saturated %r + %s to %r", value, duration, bound)
    return bound  # type: ignore[return-value]


def saturating_calendar_sub[T: date](value: T, duration: CalendarDuration) -> T:
    """Subtract ``duration``, clamping to the kind's MIN/MAX instead of failing."""

    result = checked_calendar_sub(value, duration)
    if result is not None:
        return result
    low, high = bounds_for(value)
    bound = high if duration.is_negative else low
    log.debug("Saturated %r - %s to %r", value, duration, bound)
    return bound  # type: ignore[return-value]


__all__ = [
    "calendar_add",
    "calendar_sub",
    "checked_calendar_add",
    "checked_calendar_sub",
    "saturating_calendar_add",
    "saturating_calendar_sub",
]
