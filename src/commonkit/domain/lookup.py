"""FieldLookup — tagged result of a field resolution.

Three outcomes, never conflated with exceptions:

- ``FOUND``: exactly one field, in :attr:`FieldLookup.field`.
- ``NOT_FOUND``: the name is declared nowhere reachable.
- ``AMBIGUOUS``: two or more interfaces declare it; see ``candidates``.
"""

from __future__ import annotations

from dataclasses import dataclass

from commonkit.domain.descriptors import FieldDescriptor
from commonkit.domain.types import LookupStatus


@dataclass(frozen=True, slots=True)
class FieldLookup:
    """Result of :func:`commonkit.utils.field_utils.resolve_field`."""

    status: LookupStatus
    field: FieldDescriptor | None = None
    candidates: tuple[FieldDescriptor, ...] = ()

    @classmethod
    def found(cls, field: FieldDescriptor) -> FieldLookup:
        return cls(status=LookupStatus.FOUND, field=field, candidates=(field,))

    @classmethod
    def not_found(cls) -> FieldLookup:
        return cls(status=LookupStatus.NOT_FOUND)

    @classmethod
    def ambiguous(cls, candidates: tuple[FieldDescriptor, ...]) -> FieldLookup:
        return cls(status=LookupStatus.AMBIGUOUS, candidates=candidates)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def is_ambiguous(self) -> bool:
        return self.status is LookupStatus.AMBIGUOUS

    def __bool__(self) -> bool:
        return self.is_found
