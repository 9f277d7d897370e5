"""Text notation for calendar durations and partial timestamps.

Partial values use an ISO-8601 shape with ``x`` placeholders for absent components::

    1998-xx-02
    xx:24:xx.845
    2016-08-14Txx:xx:xx+02:00

A missing fraction means nanosecond ``0``; ``.x`` means the nanosecond is unknown. A
missing offset suffix means the offset is unknown. Parsed values go through the
validating constructors of the partial types.
"""

from __future__ import annotations

import re
from datetime import timedelta, timezone
from typing import TYPE_CHECKING, Final

from timext.domain.duration import CalendarDuration
from timext.domain.errors import ArithmeticOverflow, ComponentError
from timext.domain.partial import (
    PartialDate,
    PartialOffsetDateTime,
    PartialPrimitiveDateTime,
    PartialTime,
)

if TYPE_CHECKING:
    from datetime import tzinfo

PLACEHOLDER: Final[str] = "x"

_DATE = r"(?P<year>\d{4}|[xX]{4})-(?P<month>\d{2}|[xX]{2})-(?P<day>\d{2}|[xX]{2})"
_TIME = (
    r"(?P<hour>\d{2}|[xX]{2}):(?P<minute>\d{2}|[xX]{2}):(?P<second>\d{2}|[xX]{2})"
    r"(?:\.(?P<fraction>\d{1,9}|[xX]+))?"
)
_OFFSET = r"(?P<offset>Z|[+-]\d{2}:\d{2}(?::\d{2})?)"

_DATE_RE = re.compile(rf"^{_DATE}$")
_TIME_RE = re.compile(rf"^{_TIME}$")
_DATETIME_RE = re.compile(rf"^{_DATE}[T ]{_TIME}$")
_OFFSET_DATETIME_RE = re.compile(rf"^{_DATE}[T ]{_TIME}{_OFFSET}?$")
_DURATION_RE = re.compile(r"^(?P<sign>[+-])?(?:(?P<years>\d+)y)?(?:(?P<months>\d+)mo)?$")
_MONTHS_RE = re.compile(r"^[+-]?\d+$")


class ParseError(ValueError):
    """Raised when text does not match the notation or names an invalid component."""


# Formatting ---------------------------------------------------------------


def _field(value: int | None, width: int) -> str:
    return PLACEHOLDER * width if value is None else f"{value:0{width}d}"


def _fraction(nanosecond: int | None) -> str:
    if nanosecond is None:
        return "." + PLACEHOLDER
    if nanosecond == 0:
        return ""
    return "." + f"{nanosecond:09d}".rstrip("0")


def _offset(offset: tzinfo | None) -> str:
    if offset is None:
        return ""
    delta = offset.utcoffset(None)
    if delta is None:
        raise ValueError(f"offset {offset!r} is not a fixed UTC offset")
    if not delta:
        return "Z"
    sign = "-" if delta < timedelta(0) else "+"
    seconds = int(abs(delta).total_seconds())
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    return f"{text}:{seconds:02d}" if seconds else text


def format_date(value: PartialDate) -> str:
    return f"{_field(value.year, 4)}-{_field(value.month, 2)}-{_field(value.day, 2)}"


def format_time(value: PartialTime) -> str:
    return (
        f"{_field(value.hour, 2)}:{_field(value.minute, 2)}:{_field(value.second, 2)}"
        f"{_fraction(value.nanosecond)}"
    )


def format_datetime(value: PartialPrimitiveDateTime) -> str:
    return f"{format_date(value.date)}T{format_time(value.time)}"


def format_offset_datetime(value: PartialOffsetDateTime) -> str:
    return f"{format_datetime(value.datetime)}{_offset(value.offset)}"


def format_partial(
    value: PartialDate | PartialTime | PartialPrimitiveDateTime | PartialOffsetDateTime,
) -> str:
    match value:
        case PartialDate():
            return format_date(value)
        case PartialTime():
            return format_time(value)
        case PartialPrimitiveDateTime():
            return format_datetime(value)
        case PartialOffsetDateTime():
            return format_offset_datetime(value)
        case _:
            raise TypeError(f"cannot format {type(value).__name__}")


def format_duration(value: CalendarDuration) -> str:
    return str(value)


# Parsing ------------------------------------------------------------------


def _int(text: str | None) -> int | None:
    if text is None or text.lower().startswith(PLACEHOLDER):
        return None
    return int(text)


def _nanosecond(fraction: str | None) -> int | None:
    if fraction is None:
        return 0
    if fraction.lower().startswith(PLACEHOLDER):
        return None
    return int(fraction.ljust(9, "0"))


def _parse_offset(text: str | None) -> tzinfo | None:
    if text is None:
        return None
    if text == "Z":
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    parts = [int(part) for part in text[1:].split(":")]
    hours, minutes = parts[0], parts[1]
    seconds = parts[2] if len(parts) > 2 else 0
    if minutes > 59 or seconds > 59:
        raise ParseError(f"Invalid UTC offset: {text}")
    delta = sign * timedelta(hours=hours, minutes=minutes, seconds=seconds)
    try:
        return timezone(delta)
    except ValueError as exc:
        raise ParseError(f"Invalid UTC offset: {text}") from exc


def _match(pattern: re.Pattern[str], text: str, what: str) -> re.Match[str]:
    matched = pattern.match(text.strip())
    if matched is None:
        raise ParseError(f"Invalid partial {what}: {text}")
    return matched


def _date_from(matched: re.Match[str]) -> PartialDate:
    return PartialDate(
        year=_int(matched["year"]),
        month=_int(matched["month"]),  # type: ignore[arg-type]
        day=_int(matched["day"]),
    )


def _time_from(matched: re.Match[str]) -> PartialTime:
    return PartialTime(
        hour=_int(matched["hour"]),
        minute=_int(matched["minute"]),
        second=_int(matched["second"]),
        nanosecond=_nanosecond(matched["fraction"]),
    )


def parse_date(text: str) -> PartialDate:
    matched = _match(_DATE_RE, text, "date")
    try:
        return _date_from(matched)
    except ComponentError as exc:
        raise ParseError(f"Invalid partial date: {text} ({exc})") from exc


def parse_time(text: str) -> PartialTime:
    matched = _match(_TIME_RE, text, "time")
    try:
        return _time_from(matched)
    except ComponentError as exc:
        raise ParseError(f"Invalid partial time: {text} ({exc})") from exc


def parse_datetime(text: str) -> PartialPrimitiveDateTime:
    matched = _match(_DATETIME_RE, text, "datetime")
    try:
        return PartialPrimitiveDateTime(_date_from(matched), _time_from(matched))
    except ComponentError as exc:
        raise ParseError(f"Invalid partial datetime: {text} ({exc})") from exc


def parse_offset_datetime(text: str) -> PartialOffsetDateTime:
    matched = _match(_OFFSET_DATETIME_RE, text, "datetime")
    try:
        datetime = PartialPrimitiveDateTime(_date_from(matched), _time_from(matched))
    except ComponentError as exc:
        raise ParseError(f"Invalid partial datetime: {text} ({exc})") from exc
    return PartialOffsetDateTime(datetime, _parse_offset(matched["offset"]))


def parse_partial(
    text: str,
) -> PartialDate | PartialTime | PartialPrimitiveDateTime | PartialOffsetDateTime:
    """Parse whichever partial notation ``text`` uses.

    Date-times without an offset suffix come back as :class:`PartialPrimitiveDateTime`.
    """

    stripped = text.strip()
    if _DATE_RE.match(stripped):
        return parse_date(stripped)
    if _TIME_RE.match(stripped):
        return parse_time(stripped)
    if _DATETIME_RE.match(stripped):
        return parse_datetime(stripped)
    return parse_offset_datetime(stripped)


def parse_duration(text: str) -> CalendarDuration:
    """Parse ``1y2mo``/``-13mo``/``2y`` notation; a bare integer counts months."""

    stripped = text.strip()
    try:
        if _MONTHS_RE.match(stripped):
            return CalendarDuration.months(int(stripped))
        matched = _DURATION_RE.match(stripped)
        if matched is None or (matched["years"] is None and matched["months"] is None):
            raise ParseError(f"Invalid calendar duration: {text}")  # noqa: TRY301
        total = int(matched["years"] or 0) * 12 + int(matched["months"] or 0)
        return CalendarDuration.months(-total if matched["sign"] == "-" else total)
    except ArithmeticOverflow as exc:
        raise ParseError(f"Calendar duration out of range: {text}") from exc


__all__ = [
    "PLACEHOLDER",
    "ParseError",
    "format_date",
    "format_datetime",
    "format_duration",
    "format_offset_datetime",
    "format_partial",
    "format_time",
    "parse_date",
    "parse_datetime",
    "parse_duration",
    "parse_offset_datetime",
    "parse_partial",
    "parse_time",
]
