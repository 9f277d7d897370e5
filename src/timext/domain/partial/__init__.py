"""Partial timestamps: date/time values with optional components."""

from __future__ import annotations

from timext.domain.partial.base import Incomplete
from timext.domain.partial.date import PartialDate
from timext.domain.partial.offset import PartialOffsetDateTime
from timext.domain.partial.primitive import PartialPrimitiveDateTime
from timext.domain.partial.time import PartialTime

__all__ = [
    "Incomplete",
    "PartialDate",
    "PartialOffsetDateTime",
    "PartialPrimitiveDateTime",
    "PartialTime",
]
