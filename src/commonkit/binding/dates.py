"""Strict conversion between dates and their fixed-pattern text form.

Parsing is strict: every numeric part has its exact width, nothing may
surround the value, and the result must be a real calendar value
(``2023-02-30`` and ``2023-13-01`` are rejected).  Formatting propagates
``None`` so optional values bind cleanly.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from commonkit.errors import FormatError

DATE_PATTERN = "yyyy-MM-dd"
DATETIME_PATTERN = "yyyy-MM-dd'T'HH:mm:ss"

_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_DATETIME_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})")


def _match(text: object, regex: re.Pattern[str], pattern: str) -> tuple[int, ...]:
    if not isinstance(text, str):
        raise FormatError(text, pattern, reason=f"expected str, got {type(text).__name__}")
    # fullmatch with an ASCII-only check: \d would also accept other Unicode digits.
    m = regex.fullmatch(text)
    if m is None or not text.isascii():
        raise FormatError(text, pattern)
    return tuple(int(part) for part in m.groups())


def parse_date(text: str) -> date:
    """Parse ``yyyy-MM-dd`` text into a :class:`~datetime.date`.

    Raises:
        FormatError: If *text* does not match the pattern or is not a valid
            calendar date.
    """
    year, month, day = _match(text, _DATE_RE, DATE_PATTERN)
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise FormatError(text, DATE_PATTERN, reason=str(exc)) from exc


def format_date(value: date | None) -> str | None:
    """Format *value* as ``yyyy-MM-dd``; ``None`` passes through."""
    if value is None:
        return None
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_datetime(text: str) -> datetime:
    """Parse ``yyyy-MM-dd'T'HH:mm:ss`` text into a naive :class:`~datetime.datetime`.

    Raises:
        FormatError: If *text* does not match the pattern or any field is
            out of range.
    """
    year, month, day, hour, minute, second = _match(text, _DATETIME_RE, DATETIME_PATTERN)
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError as exc:
        raise FormatError(text, DATETIME_PATTERN, reason=str(exc)) from exc


def format_datetime(value: datetime | None) -> str | None:
    """Format *value* as ``yyyy-MM-dd'T'HH:mm:ss``; ``None`` passes through.

    Wall-clock fields are written as-is: microseconds are truncated and any
    tzinfo is left out.
    """
    if value is None:
        return None
    return (
        f"{format_date(value)}T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
