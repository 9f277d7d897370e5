"""Build calendar durations from plain numbers."""

from __future__ import annotations

import math

from timext.domain.duration import CalendarDuration
from timext.domain.errors import ArithmeticOverflow
from timext.domain.primitives import fits_i32


def _to_count(value: float) -> int:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"expected an int or float, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ArithmeticOverflow("cannot build `CalendarDuration` from a non-finite number")
    count = int(value)
    if not fits_i32(count):
        raise ArithmeticOverflow("overflow constructing `CalendarDuration`")
    return count


def months(value: float) -> CalendarDuration:
    """``months(1) == CalendarDuration.months(1)``; fractional months are truncated."""
    return CalendarDuration.months(_to_count(value))


def years(value: float) -> CalendarDuration:
    """``years(1.5) == CalendarDuration.months(18)``."""
    if isinstance(value, float):
        return months(value * 12)
    return CalendarDuration.months(_to_count(_to_count(value) * 12))


__all__ = ["months", "years"]
