"""Classification enums for descriptors and lookup results."""

from __future__ import annotations

from enum import StrEnum


class TypeKind(StrEnum):
    """Whether a descriptor models a concrete class or an interface."""

    CLASS = "class"
    INTERFACE = "interface"


class Visibility(StrEnum):
    """Access modifier of a field."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PACKAGE = "package"
    PRIVATE = "private"


class LookupStatus(StrEnum):
    """Outcome of a field resolution."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"
