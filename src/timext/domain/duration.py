"""Calendar durations: signed month counts that respect variable month lengths."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Self

from timext.domain.errors import ArithmeticOverflow
from timext.domain.primitives import (
    I32_MAX,
    I32_MIN,
    MAX_YEAR,
    MIN_YEAR,
    days_in_month,
    fits_i32,
    kind_of,
)

if TYPE_CHECKING:
    from datetime import date


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _scale_operand(value: object) -> int | None:
    """Convert an integer operand to the 32-bit representation, ``None`` if it does not fit."""

    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"expected an integer operand, got {type(value).__name__}")
    converted = int(value)
    return converted if fits_i32(converted) else None


@dataclass(frozen=True, order=True, slots=True)
class CalendarDuration:
    """A signed number of calendar months.

    Unlike ``timedelta`` the length of a month is not fixed: adding one month to
    January 31st yields the last day of February. Every fallible operation has a
    ``checked_*`` form returning ``None`` and an operator form raising
    :class:`ArithmeticOverflow`.
    """

    whole_months: int = 0

    MIN: ClassVar[CalendarDuration]
    MAX: ClassVar[CalendarDuration]
    ZERO: ClassVar[CalendarDuration]

    def __post_init__(self) -> None:
        if isinstance(self.whole_months, bool) or not isinstance(self.whole_months, int):
            raise TypeError("months must be an integer")
        if not fits_i32(self.whole_months):
            raise ArithmeticOverflow("overflow constructing `CalendarDuration`")

    @classmethod
    def new(cls, years: int, months: int) -> Self:
        return cls(years * 12 + months)

    @classmethod
    def years(cls, years: int) -> Self:
        return cls(years * 12)

    @classmethod
    def months(cls, months: int) -> Self:
        return cls(months)

    # Projections -----------------------------------------------------------

    @property
    def whole_years(self) -> int:
        """Number of whole years, truncated toward zero."""
        return _trunc_div(self.whole_months, 12)

    @property
    def subyear_months(self) -> int:
        """Months past the whole years; the sign follows the duration."""
        return self.whole_months - self.whole_years * 12

    @property
    def is_zero(self) -> bool:
        return self.whole_months == 0

    @property
    def is_positive(self) -> bool:
        return self.whole_months > 0

    @property
    def is_negative(self) -> bool:
        return self.whole_months < 0

    def abs(self) -> Self:
        if self.whole_months == I32_MIN:
            raise ArithmeticOverflow("overflow taking the absolute value of `CalendarDuration`")
        return type(self)(abs(self.whole_months))

    # Checked arithmetic ----------------------------------------------------

    def checked_add(self, rhs: CalendarDuration) -> Self | None:
        total = self.whole_months + rhs.whole_months
        return type(self)(total) if fits_i32(total) else None

    def checked_sub(self, rhs: CalendarDuration) -> Self | None:
        total = self.whole_months - rhs.whole_months
        return type(self)(total) if fits_i32(total) else None

    def checked_mul(self, rhs: int) -> Self | None:
        factor = _scale_operand(rhs)
        if factor is None:
            return None
        total = self.whole_months * factor
        return type(self)(total) if fits_i32(total) else None

    def checked_div(self, rhs: int) -> Self | None:
        """Divide, truncating toward zero; ``None`` on division by zero or overflow."""
        divisor = _scale_operand(rhs)
        if divisor is None or divisor == 0:
            return None
        total = _trunc_div(self.whole_months, divisor)
        return type(self)(total) if fits_i32(total) else None

    def checked_neg(self) -> Self | None:
        total = -self.whole_months
        return type(self)(total) if fits_i32(total) else None

    # Calendar arithmetic ---------------------------------------------------

    def checked_date_add[T: date](self, value: T) -> T | None:
        """Shift ``value`` by this many months, clamping the day to the target month.

        ``value`` may be a ``date`` or a naive or aware ``datetime``; only the date part
        changes. Returns ``None`` when the result leaves the representable year range.
        """

        kind_of(value)
        total = value.year * 12 + (value.month - 1) + self.whole_months
        year, month_index = divmod(total, 12)
        if not MIN_YEAR <= year <= MAX_YEAR:
            return None
        month = month_index + 1
        day = min(value.day, days_in_month(year, month))
        try:
            return value.replace(year=year, month=month, day=day)
        except (ValueError, OverflowError):
            return None

    def checked_date_sub[T: date](self, value: T) -> T | None:
        negated = self.checked_neg()
        if negated is None:
            return None
        return negated.checked_date_add(value)

    # Operators -------------------------------------------------------------

    def __add__(self, other: object) -> Self:
        if not isinstance(other, CalendarDuration):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise ArithmeticOverflow("overflow when adding `CalendarDuration`")
        return result

    def __sub__(self, other: object) -> Self:
        if not isinstance(other, CalendarDuration):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise ArithmeticOverflow("overflow when subtracting `CalendarDuration`")
        return result

    def __mul__(self, other: object) -> Self:
        if isinstance(other, bool) or not isinstance(other, numbers.Integral):
            return NotImplemented
        result = self.checked_mul(int(other))
        if result is None:
            raise ArithmeticOverflow("overflow when multiplying `CalendarDuration`")
        return result

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Self:
        if isinstance(other, bool) or not isinstance(other, numbers.Integral):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("division of `CalendarDuration` by zero")
        result = self.checked_div(int(other))
        if result is None:
            raise ArithmeticOverflow("overflow when dividing `CalendarDuration`")
        return result

    def __neg__(self) -> Self:
        result = self.checked_neg()
        if result is None:
            raise ArithmeticOverflow("overflow when negating `CalendarDuration`")
        return result

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero

    def __radd__(self, other: object) -> object:
        # date + duration: ``date.__add__`` returns NotImplemented for us.
        try:
            kind_of(other)
        except TypeError:
            return NotImplemented
        result = self.checked_date_add(other)  # type: ignore[type-var]
        if result is None:
            raise ArithmeticOverflow("resulting value is out of range")
        return result

    def __rsub__(self, other: object) -> object:
        try:
            kind_of(other)
        except TypeError:
            return NotImplemented
        result = self.checked_date_sub(other)  # type: ignore[type-var]
        if result is None:
            raise ArithmeticOverflow("resulting value is out of range")
        return result

    def __str__(self) -> str:
        if self.is_zero:
            return "0mo"
        sign = "-" if self.is_negative else ""
        years = abs(self.whole_years)
        months = abs(self.subyear_months)
        parts = []
        if years:
            parts.append(f"{years}y")
        if months:
            parts.append(f"{months}mo")
        return sign + "".join(parts)


CalendarDuration.MIN = CalendarDuration(I32_MIN)
CalendarDuration.MAX = CalendarDuration(I32_MAX)
CalendarDuration.ZERO = CalendarDuration(0)


__all__ = ["CalendarDuration"]
