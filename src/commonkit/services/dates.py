"""DateService — parse and format fixed-pattern date text."""

from __future__ import annotations

from datetime import date, datetime

from commonkit.binding.dates import (
    DATE_PATTERN,
    DATETIME_PATTERN,
    format_date,
    format_datetime,
    parse_date,
    parse_datetime,
)
from commonkit.errors import CommonKitError, FormatError
from commonkit.services.base import BaseService
from commonkit.services.result import ServiceResult

# English names regardless of the process locale.
_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class DateService(BaseService):
    """Round-trips text through the fixed date and date-time patterns."""

    def parse(self, text: str, *, with_time: bool = False) -> ServiceResult:
        """Parse fixed-pattern *text*; ``data.value`` is the ISO form."""
        op = "parse_datetime" if with_time else "parse_date"
        try:
            value: date = parse_datetime(text) if with_time else parse_date(text)
        except CommonKitError as exc:
            return self._failure(op, exc, detail={"text": text})
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "text": text,
                "pattern": DATETIME_PATTERN if with_time else DATE_PATTERN,
                "value": value.isoformat(),
                "weekday": _WEEKDAYS[value.weekday()],
            },
        )

    def format(self, iso_text: str, *, with_time: bool = False) -> ServiceResult:
        """Format an ISO 8601 value with the fixed pattern.

        Any ISO form Python accepts is allowed on input; sub-second digits
        and offsets are dropped on output.
        """
        op = "format_datetime" if with_time else "format_date"
        try:
            try:
                value = (
                    datetime.fromisoformat(iso_text)
                    if with_time
                    else date.fromisoformat(iso_text)
                )
            except ValueError as exc:
                raise FormatError(iso_text, "ISO 8601", reason=str(exc)) from exc
        except CommonKitError as exc:
            return self._failure(op, exc, detail={"text": iso_text})

        text = format_datetime(value) if isinstance(value, datetime) else format_date(value)
        warnings: list[str] = []
        if isinstance(value, datetime) and (value.microsecond or value.tzinfo):
            warnings.append("Sub-second digits and UTC offset are not part of the pattern")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "value": iso_text,
                "pattern": DATETIME_PATTERN if with_time else DATE_PATTERN,
                "text": text,
            },
            warnings=warnings,
        )
