from __future__ import annotations

import calendar
from datetime import date, time

import pytest

from timext.domain import ComponentOutOfRange, MissingComponent, PartialDate, PartialTime
from timext.domain.partial import PartialPrimitiveDateTime


def test_from_complete_round_trips() -> None:
    for value in (date(2024, 2, 29), date.min, date.max, date(1999, 12, 31)):
        assert PartialDate.from_complete(value).into_complete() == value


def test_from_calendar_date_accepts_absent_components() -> None:
    assert PartialDate.from_calendar_date(1998, None, 2) == PartialDate(year=1998, day=2)
    assert PartialDate.from_calendar_date(2024, 2, 29).into_complete() == date(2024, 2, 29)
    assert PartialDate.from_calendar_date(None, 2, None).month is calendar.Month.FEBRUARY
    with pytest.raises(ComponentOutOfRange):
        PartialDate.from_calendar_date(2024, 13, 1)


def test_fields_are_independent_until_completion() -> None:
    partial = PartialDate(year=2023, month=2, day=31)

    assert partial.month is calendar.Month.FEBRUARY
    with pytest.raises(ComponentOutOfRange) as excinfo:
        partial.into_complete()
    assert excinfo.value.component == "day"


@pytest.mark.parametrize(
    ("kwargs", "component"),
    [
        ({"year": 0}, "year"),
        ({"year": 10_000}, "year"),
        ({"month": 0}, "month"),
        ({"month": 13}, "month"),
        ({"day": 0}, "day"),
        ({"day": 32}, "day"),
        ({"day": "1"}, "day"),
    ],
)
def test_each_field_is_validated_against_its_domain(
    kwargs: dict[str, object], component: str
) -> None:
    with pytest.raises(ComponentOutOfRange) as excinfo:
        PartialDate(**kwargs)  # type: ignore[arg-type]
    assert excinfo.value.component == component


@pytest.mark.parametrize(
    ("partial", "missing"),
    [
        (PartialDate(month=1, day=1), "year"),
        (PartialDate(year=2024, day=1), "month"),
        (PartialDate(year=2024, month=1), "day"),
        (PartialDate(), "year"),
    ],
)
def test_into_complete_names_first_missing_field(partial: PartialDate, missing: str) -> None:
    with pytest.raises(MissingComponent, match=f"component `{missing}` does not exist") as exc:
        partial.into_complete()
    assert exc.value.component == missing


def test_checked_into_complete_returns_none() -> None:
    assert PartialDate(month=1, day=1).checked_into_complete() is None
    assert PartialDate(year=2023, month=2, day=31).checked_into_complete() is None
    assert PartialDate(year=2023, month=2, day=3).checked_into_complete() == date(2023, 2, 3)
    assert not PartialDate(month=1).is_complete
    assert PartialDate(year=1, month=1, day=1).is_complete


def test_replace_builds_from_scratch() -> None:
    partial = PartialDate(day=28).replace_year(2023).replace_month(calendar.Month.JANUARY)

    assert partial.into_complete() == date(2023, 1, 28)
    assert partial.replace_day(None) == PartialDate(year=2023, month=1)
    with pytest.raises(ComponentOutOfRange):
        partial.replace_month(13)


def test_weekday_is_none_when_unresolvable() -> None:
    assert PartialDate(year=2024, month=1, day=1).weekday is calendar.Day.MONDAY
    assert PartialDate(month=1, day=1).weekday is None
    assert PartialDate(year=2023, month=2, day=30).weekday is None


def test_with_fallback_fills_every_absent_field() -> None:
    fallback = date(2020, 6, 15)

    merged = PartialDate(day=3).with_fallback(fallback)

    assert merged == PartialDate(year=2020, month=6, day=3)
    assert None not in (merged.year, merged.month, merged.day)
    assert PartialDate().with_fallback(fallback).into_complete() == fallback


def test_with_fallback_revalidates_the_combination() -> None:
    with pytest.raises(ComponentOutOfRange):
        PartialDate(day=31).with_fallback(date(2023, 2, 1))

    assert PartialDate(day=31).checked_fallback(date(2023, 2, 1)) is None
    assert PartialDate(day=31).fallback(date(2023, 1, 1)) == date(2023, 1, 31)


def test_is_satisfiable_rejects_impossible_combinations() -> None:
    assert PartialDate(month=2, day=29).is_satisfiable()
    assert not PartialDate(month=2, day=30).is_satisfiable()
    assert not PartialDate(month=4, day=31).is_satisfiable()
    assert not PartialDate(year=2023, month=2, day=29).is_satisfiable()
    assert PartialDate(year=2024, month=2, day=29).is_satisfiable()
    assert PartialDate(day=31).is_satisfiable()


def test_with_time_composes_datetime() -> None:
    partial = PartialDate(year=2024, month=5)

    composed = partial.with_time(time(10, 30))

    assert isinstance(composed, PartialPrimitiveDateTime)
    assert composed.date == partial
    assert composed.time == PartialTime(hour=10, minute=30, second=0, nanosecond=0)
    assert partial.with_partial_time(PartialTime(hour=1)).hour == 1


def test_values_are_immutable() -> None:
    partial = PartialDate(year=2024)

    with pytest.raises(AttributeError):
        partial.year = 2025  # type: ignore[misc]
