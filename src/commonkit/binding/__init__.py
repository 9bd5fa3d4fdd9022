"""Date/date-time binding for marshalling layers.

Fixed patterns only: ``yyyy-MM-dd`` and ``yyyy-MM-dd'T'HH:mm:ss``.
"""

from commonkit.binding.dates import format_date, format_datetime, parse_date, parse_datetime
from commonkit.binding.types import BoundDate, BoundDateTime

__all__: list[str] = [
    "BoundDate",
    "BoundDateTime",
    "format_date",
    "format_datetime",
    "parse_date",
    "parse_datetime",
]
