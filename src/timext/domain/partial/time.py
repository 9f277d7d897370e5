"""Partial times of day."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import time
from typing import Final, Self

from timext.domain.partial.base import Incomplete, build, check_range, require

NANOS_PER_MICRO: Final[int] = 1_000
NANOS_PER_MILLI: Final[int] = 1_000_000
MAX_NANOSECOND: Final[int] = 999_999_999


@dataclass(frozen=True, slots=True)
class PartialTime(Incomplete[time]):
    """An hour/minute/second/nanosecond time where any component may be unknown.

    ``datetime.time`` only has microsecond precision, so completion truncates the
    nanosecond to whole microseconds.
    """

    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    nanosecond: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "hour", check_range("hour", self.hour, 0, 23))
        object.__setattr__(self, "minute", check_range("minute", self.minute, 0, 59))
        object.__setattr__(self, "second", check_range("second", self.second, 0, 59))
        object.__setattr__(
            self, "nanosecond", check_range("nanosecond", self.nanosecond, 0, MAX_NANOSECOND)
        )

    @classmethod
    def from_hms(cls, hour: int | None, minute: int | None, second: int | None) -> Self:
        return cls.from_hms_nano(hour, minute, second, 0)

    @classmethod
    def from_hms_milli(
        cls,
        hour: int | None,
        minute: int | None,
        second: int | None,
        millisecond: int | None,
    ) -> Self:
        check_range("millisecond", millisecond, 0, 999)
        nanosecond = None if millisecond is None else millisecond * NANOS_PER_MILLI
        return cls.from_hms_nano(hour, minute, second, nanosecond)

    @classmethod
    def from_hms_micro(
        cls,
        hour: int | None,
        minute: int | None,
        second: int | None,
        microsecond: int | None,
    ) -> Self:
        check_range("microsecond", microsecond, 0, 999_999)
        nanosecond = None if microsecond is None else microsecond * NANOS_PER_MICRO
        return cls.from_hms_nano(hour, minute, second, nanosecond)

    @classmethod
    def from_hms_nano(
        cls,
        hour: int | None,
        minute: int | None,
        second: int | None,
        nanosecond: int | None,
    ) -> Self:
        return cls(hour=hour, minute=minute, second=second, nanosecond=nanosecond)

    @property
    def millisecond(self) -> int | None:
        return None if self.nanosecond is None else self.nanosecond // NANOS_PER_MILLI

    @property
    def microsecond(self) -> int | None:
        return None if self.nanosecond is None else self.nanosecond // NANOS_PER_MICRO

    def replace_hour(self, hour: int | None) -> Self:
        return replace(self, hour=hour)

    def replace_minute(self, minute: int | None) -> Self:
        return replace(self, minute=minute)

    def replace_second(self, second: int | None) -> Self:
        return replace(self, second=second)

    def replace_millisecond(self, millisecond: int | None) -> Self:
        return self.from_hms_milli(self.hour, self.minute, self.second, millisecond)

    def replace_microsecond(self, microsecond: int | None) -> Self:
        return self.from_hms_micro(self.hour, self.minute, self.second, microsecond)

    def replace_nanosecond(self, nanosecond: int | None) -> Self:
        return replace(self, nanosecond=nanosecond)

    @classmethod
    def from_complete(cls, complete: time) -> Self:
        return cls(
            hour=complete.hour,
            minute=complete.minute,
            second=complete.second,
            nanosecond=complete.microsecond * NANOS_PER_MICRO,
        )

    def into_complete(self) -> time:
        hour = require("hour", self.hour)
        minute = require("minute", self.minute)
        second = require("second", self.second)
        nanosecond = require("nanosecond", self.nanosecond)
        return build(None, lambda: time(hour, minute, second, nanosecond // NANOS_PER_MICRO))

    def with_fallback(self, fallback: time) -> Self:
        merged = type(self)(
            hour=fallback.hour if self.hour is None else self.hour,
            minute=fallback.minute if self.minute is None else self.minute,
            second=fallback.second if self.second is None else self.second,
            nanosecond=(
                fallback.microsecond * NANOS_PER_MICRO
                if self.nanosecond is None
                else self.nanosecond
            ),
        )
        merged.into_complete()
        return merged

    def __composite_values__(
        self,
    ) -> tuple[int | None, int | None, int | None, int | None]:
        """Return values in a shape suitable for SQLAlchemy composite columns."""
        return (self.hour, self.minute, self.second, self.nanosecond)


__all__ = ["PartialTime"]
