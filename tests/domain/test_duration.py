from __future__ import annotations

import pytest

from timext.domain import ArithmeticOverflow, CalendarDuration
from timext.domain.primitives import I32_MAX, I32_MIN


def test_constructors_share_one_month_count() -> None:
    assert CalendarDuration.years(2) == CalendarDuration.months(24)
    assert CalendarDuration.new(1, 2) == CalendarDuration.months(14)
    assert CalendarDuration.new(-1, 2) == CalendarDuration.months(-10)
    assert CalendarDuration() == CalendarDuration.ZERO


@pytest.mark.parametrize(
    "build",
    [
        lambda: CalendarDuration.months(I32_MAX + 1),
        lambda: CalendarDuration.years(I32_MAX // 12 + 1),
        lambda: CalendarDuration.new(I32_MAX // 12, 12),
        lambda: CalendarDuration.months(I32_MIN - 1),
    ],
)
def test_construction_outside_32_bits_overflows(build: object) -> None:
    with pytest.raises(ArithmeticOverflow, match="overflow constructing"):
        build()  # type: ignore[operator]


def test_construction_rejects_non_integers() -> None:
    with pytest.raises(TypeError):
        CalendarDuration.months(1.5)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("months", "whole_years", "subyear_months"),
    [
        (12, 1, 0),
        (-12, -1, 0),
        (6, 0, 6),
        (-6, 0, -6),
        (13, 1, 1),
        (-13, -1, -1),
        (I32_MIN, -178956970, -8),
    ],
)
def test_projections_truncate_toward_zero(
    months: int, whole_years: int, subyear_months: int
) -> None:
    duration = CalendarDuration.months(months)

    assert duration.whole_months == months
    assert duration.whole_years == whole_years
    assert duration.subyear_months == subyear_months


def test_sign_predicates() -> None:
    assert CalendarDuration.months(0).is_zero
    assert not CalendarDuration.months(1).is_zero
    assert CalendarDuration.months(1).is_positive
    assert not CalendarDuration.months(0).is_positive
    assert CalendarDuration.months(-1).is_negative
    assert not CalendarDuration.months(0).is_negative
    assert not CalendarDuration.ZERO
    assert CalendarDuration.months(3)


def test_abs() -> None:
    assert CalendarDuration.months(-7).abs() == CalendarDuration.months(7)
    assert abs(CalendarDuration.months(7)) == CalendarDuration.months(7)
    assert CalendarDuration.MAX.abs() == CalendarDuration.MAX

    with pytest.raises(ArithmeticOverflow):
        CalendarDuration.MIN.abs()


def test_checked_add_and_sub() -> None:
    five = CalendarDuration.months(5)

    assert five.checked_add(five) == CalendarDuration.months(10)
    assert CalendarDuration.months(-5).checked_add(five) == CalendarDuration.ZERO
    assert CalendarDuration.MAX.checked_add(CalendarDuration.months(1)) is None
    assert five.checked_sub(five) == CalendarDuration.ZERO
    assert CalendarDuration.MIN.checked_sub(CalendarDuration.months(1)) is None


def test_checked_mul() -> None:
    five = CalendarDuration.months(5)

    assert five.checked_mul(2) == CalendarDuration.months(10)
    assert five.checked_mul(-2) == CalendarDuration.months(-10)
    assert five.checked_mul(0) == CalendarDuration.ZERO
    assert CalendarDuration.MAX.checked_mul(2) is None
    assert CalendarDuration.MIN.checked_mul(2) is None
    # Operands wider than 32 bits do not convert.
    assert CalendarDuration.ZERO.checked_mul(2**32) is None


def test_checked_div() -> None:
    ten = CalendarDuration.months(10)

    assert ten.checked_div(2) == CalendarDuration.months(5)
    assert ten.checked_div(-2) == CalendarDuration.months(-5)
    assert ten.checked_div(0) is None
    assert CalendarDuration.months(-7).checked_div(2) == CalendarDuration.months(-3)
    assert CalendarDuration.MIN.checked_div(-1) is None


def test_checked_scaling_requires_integers() -> None:
    with pytest.raises(TypeError):
        CalendarDuration.months(1).checked_mul(1.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        CalendarDuration.months(1).checked_div(True)


def test_checked_neg() -> None:
    assert CalendarDuration.months(10).checked_neg() == CalendarDuration.months(-10)
    assert CalendarDuration.MIN.checked_neg() is None
    assert CalendarDuration.MAX.checked_neg() == CalendarDuration.months(-I32_MAX)


def test_operators() -> None:
    five = CalendarDuration.months(5)

    assert five + five == CalendarDuration.months(10)
    assert five - CalendarDuration.months(7) == CalendarDuration.months(-2)
    assert five * 3 == CalendarDuration.months(15)
    assert 3 * five == CalendarDuration.months(15)
    assert CalendarDuration.months(15) / 4 == CalendarDuration.months(3)
    assert -five == CalendarDuration.months(-5)
    assert +five == five


@pytest.mark.parametrize(
    "operation",
    [
        lambda: CalendarDuration.MAX + CalendarDuration.months(1),
        lambda: CalendarDuration.MIN - CalendarDuration.months(1),
        lambda: CalendarDuration.MAX * 2,
        lambda: CalendarDuration.MIN / -1,
        lambda: -CalendarDuration.MIN,
    ],
)
def test_operators_raise_on_overflow(operation: object) -> None:
    with pytest.raises(ArithmeticOverflow):
        operation()  # type: ignore[operator]


def test_division_by_zero_operator() -> None:
    with pytest.raises(ZeroDivisionError):
        CalendarDuration.months(1) / 0


def test_operators_reject_foreign_operands() -> None:
    with pytest.raises(TypeError):
        CalendarDuration.months(1) + 1  # type: ignore[operator]
    with pytest.raises(TypeError):
        CalendarDuration.months(1) * 1.5  # type: ignore[operator]


def test_ordering_and_hashing() -> None:
    assert CalendarDuration.months(-1) < CalendarDuration.ZERO < CalendarDuration.months(1)
    assert len({CalendarDuration.months(12), CalendarDuration.years(1)}) == 1


@pytest.mark.parametrize(
    ("months", "text"),
    [(0, "0mo"), (5, "5mo"), (12, "1y"), (14, "1y2mo"), (-14, "-1y2mo"), (-5, "-5mo")],
)
def test_str_uses_calendar_notation(months: int, text: str) -> None:
    assert str(CalendarDuration.months(months)) == text
