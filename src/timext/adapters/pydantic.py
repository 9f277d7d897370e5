"""Pydantic field types for calendar durations and partial timestamps.

A duration travels as one signed 32-bit integer (its whole-month count). Partial
timestamps travel as their text notation, see :mod:`timext.common.formatting`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any

from pydantic_core import core_schema

from timext.common.formatting import (
    format_partial,
    parse_date,
    parse_datetime,
    parse_offset_datetime,
    parse_time,
)
from timext.domain.duration import CalendarDuration
from timext.domain.partial import (
    PartialDate,
    PartialOffsetDateTime,
    PartialPrimitiveDateTime,
    PartialTime,
)
from timext.domain.primitives import I32_MAX, I32_MIN, fits_i32

if TYPE_CHECKING:
    from collections.abc import Callable

    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue


def _validate_duration(value: Any) -> CalendarDuration:
    if isinstance(value, CalendarDuration):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("expected a whole number of months")  # noqa: TRY004
    if not fits_i32(value):
        raise ValueError(f"month count must be in the range {I32_MIN}..={I32_MAX}")
    return CalendarDuration.months(value)


def _serialize_duration(value: CalendarDuration) -> int:
    return value.whole_months


@dataclass(frozen=True, slots=True, eq=False)
class _WireFormat:
    """Schema marker: validate with ``validate``, dump with ``serialize``."""

    validate: Callable[[Any], Any]
    serialize: Callable[[Any], Any]
    json_schema: dict[str, Any]
    return_schema: core_schema.CoreSchema

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        _ = source_type, handler
        return core_schema.no_info_plain_validator_function(
            self.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                self.serialize,
                return_schema=self.return_schema,
            ),
        )

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        _ = schema, handler
        return dict(self.json_schema)


def _text_validator[P](kind: type[P], parse: Callable[[str], P]) -> Callable[[Any], P]:
    def validate(value: Any) -> P:
        if isinstance(value, kind):
            return value
        if not isinstance(value, str):
            raise ValueError(f"expected {kind.__name__} text notation")  # noqa: TRY004
        return parse(value)

    return validate


def _text_format[P](kind: type[P], parse: Callable[[str], P]) -> _WireFormat:
    return _WireFormat(
        validate=_text_validator(kind, parse),
        serialize=format_partial,
        json_schema={"type": "string"},
        return_schema=core_schema.str_schema(),
    )


CalendarDurationField = Annotated[
    CalendarDuration,
    _WireFormat(
        validate=_validate_duration,
        serialize=_serialize_duration,
        json_schema={"type": "integer", "minimum": I32_MIN, "maximum": I32_MAX},
        return_schema=core_schema.int_schema(),
    ),
]
PartialDateField = Annotated[PartialDate, _text_format(PartialDate, parse_date)]
PartialTimeField = Annotated[PartialTime, _text_format(PartialTime, parse_time)]
PartialDateTimeField = Annotated[
    PartialPrimitiveDateTime,
    _text_format(PartialPrimitiveDateTime, parse_datetime),
]
PartialOffsetDateTimeField = Annotated[
    PartialOffsetDateTime,
    _text_format(PartialOffsetDateTime, parse_offset_datetime),
]


__all__ = [
    "CalendarDurationField",
    "PartialDateField",
    "PartialDateTimeField",
    "PartialOffsetDateTimeField",
    "PartialTimeField",
]
