from __future__ import annotations

from importlib import metadata

from timext.domain import (
    ArithmeticOverflow,
    CalendarDuration,
    ComponentError,
    ComponentOutOfRange,
    Incomplete,
    MissingComponent,
    PartialDate,
    PartialOffsetDateTime,
    PartialPrimitiveDateTime,
    PartialTime,
    calendar_add,
    calendar_sub,
    checked_calendar_add,
    checked_calendar_sub,
    saturating_calendar_add,
    saturating_calendar_sub,
)

try:
    __version__ = metadata.version("timext")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "ArithmeticOverflow",
    "CalendarDuration",
    "ComponentError",
    "ComponentOutOfRange",
    "Incomplete",
    "MissingComponent",
    "PartialDate",
    "PartialOffsetDateTime",
    "PartialPrimitiveDateTime",
    "PartialTime",
    "__version__",
    "calendar_add",
    "calendar_sub",
    "checked_calendar_add",
    "checked_calendar_sub",
    "saturating_calendar_add",
    "saturating_calendar_sub",
]
