"""Pydantic field types bound to the fixed date patterns.

Use them as model field annotations::

    class Invoice(BaseModel):
        issued: BoundDate
        sent_at: BoundDateTime | None = None

Strings are parsed strictly on the way in, ``date``/``datetime`` instances are
accepted unchanged, and serialization always writes the fixed pattern.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, WithJsonSchema

from commonkit.binding.dates import (
    DATE_PATTERN,
    DATETIME_PATTERN,
    format_date,
    format_datetime,
    parse_date,
    parse_datetime,
)


def _to_date(value: Any) -> Any:
    if isinstance(value, str):
        return parse_date(value)
    return value


def _to_datetime(value: Any) -> Any:
    if isinstance(value, str):
        return parse_datetime(value)
    return value


BoundDate = Annotated[
    date,
    BeforeValidator(_to_date),
    PlainSerializer(format_date, return_type=str),
    WithJsonSchema({"type": "string", "format": "date", "description": DATE_PATTERN}),
]

BoundDateTime = Annotated[
    datetime,
    BeforeValidator(_to_datetime),
    PlainSerializer(format_datetime, return_type=str),
    WithJsonSchema({"type": "string", "format": "date-time", "description": DATETIME_PATTERN}),
]
