"""Exception hierarchy for commonkit.

Every failure raised by the helpers is a :class:`CommonKitError` so callers
can catch the whole family at one boundary (the service layer does).

Hierarchy::

    CommonKitError
    ├── FormatError            (also ValueError)
    ├── InvalidArgumentError   (also ValueError)
    │   └── AmbiguousMemberError
    └── TypeLoadError

``ValueError`` ancestry lets pydantic validators surface these as
``ValidationError`` without extra wrapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from commonkit.domain.descriptors import FieldDescriptor


class CommonKitError(Exception):
    """Base exception for all commonkit errors."""

    code = "ERROR"

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


# --- Date binding ----------------------------------------------------------


class FormatError(CommonKitError, ValueError):
    """Raised when text does not match a fixed date/date-time pattern."""

    code = "INVALID_FORMAT"

    def __init__(self, text: object, pattern: str, *, reason: str | None = None) -> None:
        message = f"Text {text!r} could not be parsed with pattern {pattern}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, hint=f"Expected pattern {pattern}")
        self.text = text
        self.pattern = pattern


# --- Argument validation ---------------------------------------------------


class InvalidArgumentError(CommonKitError, ValueError):
    """Raised when a precondition on an argument is violated."""

    code = "INVALID_ARGUMENT"


class AmbiguousMemberError(InvalidArgumentError):
    """Raised when a field name matches on two or more implemented interfaces."""

    code = "AMBIGUOUS_FIELD"

    def __init__(
        self,
        message: str,
        *,
        field_name: str,
        type_name: str,
        candidates: tuple[FieldDescriptor, ...] = (),
    ) -> None:
        super().__init__(message)
        self.field_name = field_name
        self.type_name = type_name
        self.candidates = candidates


# --- Class loading ---------------------------------------------------------


class TypeLoadError(CommonKitError):
    """Raised when a ``module:Class`` target cannot be imported."""

    code = "IMPORT_FAILED"
