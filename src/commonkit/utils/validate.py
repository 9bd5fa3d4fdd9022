"""Argument validation that raises formatted :class:`InvalidArgumentError`.

Messages are printf-style templates interpolated with ``%`` only when the
check fails, so callers pay nothing for the message on the happy path::

    is_true(i > 0, "The value must be greater than zero: %d", i)
    is_true(low <= i <= high, "The value must be between %d and %d", low, high)

A template with the wrong number of values raises ``TypeError`` from the
``%`` operator; that is a bug at the call site, not a validation failure.
"""

from __future__ import annotations

from typing import Any, TypeVar

from commonkit.errors import InvalidArgumentError
from commonkit.utils.strings import is_blank

T = TypeVar("T")

DEFAULT_IS_TRUE_MESSAGE = "The validated expression is false"
DEFAULT_NOT_NONE_MESSAGE = "The validated object is None"
DEFAULT_NOT_BLANK_MESSAGE = "The validated character sequence is blank"


def _format(message: str, values: tuple[Any, ...]) -> str:
    # No values means the template is a plain message; a literal % is fine.
    if not values:
        return message
    return message % values


def is_true(expression: bool, message: str = DEFAULT_IS_TRUE_MESSAGE, *values: Any) -> None:
    """Raise :class:`InvalidArgumentError` unless *expression* is true.

    Args:
        expression: The condition to check.
        message: ``%``-style template for the error message.
        values: Positional values substituted into *message* on failure.
    """
    if not expression:
        raise InvalidArgumentError(_format(message, values))


def not_none(value: T | None, message: str = DEFAULT_NOT_NONE_MESSAGE, *values: Any) -> T:
    """Return *value*, raising :class:`InvalidArgumentError` if it is ``None``."""
    if value is None:
        raise InvalidArgumentError(_format(message, values))
    return value


def not_blank(text: str | None, message: str = DEFAULT_NOT_BLANK_MESSAGE, *values: Any) -> str:
    """Return *text*, raising :class:`InvalidArgumentError` if it is blank."""
    if is_blank(text):
        raise InvalidArgumentError(_format(message, values))
    assert text is not None
    return text
