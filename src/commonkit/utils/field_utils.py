"""Field lookup across a type hierarchy, breaking scope when asked to.

Lookup priority:

1. The type itself, then each superclass, looking only at fields declared on
   that level.  A non-public match is returned (marked accessible) when
   ``force_access`` is set and skipped otherwise.
2. Public fields declared on any implemented interface of the whole
   hierarchy.  Two or more interface matches are ambiguous.

This asymmetry mirrors host member-resolution rules: a superclass field wins
over an interface constant, and unrelated interfaces sharing a name cannot be
ordered against each other.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from commonkit.domain.lookup import FieldLookup
from commonkit.errors import AmbiguousMemberError
from commonkit.utils.class_utils import get_all_interfaces
from commonkit.utils.strings import is_not_blank
from commonkit.utils.validate import is_true

if TYPE_CHECKING:
    from commonkit.domain.descriptors import FieldDescriptor, TypeDescriptor

logger = logging.getLogger(__name__)


def resolve_field(
    cls: TypeDescriptor | None,
    field_name: str | None,
    force_access: bool = False,
) -> FieldLookup:
    """Resolve *field_name* on *cls* into a :class:`FieldLookup`.

    Args:
        cls: The type to search; must not be ``None``.
        field_name: The field to find; must not be blank.
        force_access: Whether non-public superclass-chain fields may match.
            ``False`` only matches public fields.

    Raises:
        InvalidArgumentError: If *cls* is ``None`` or *field_name* is blank.
    """
    is_true(cls is not None, "The class must not be None")
    is_true(is_not_blank(field_name), "The field name must not be blank/empty")
    assert cls is not None and field_name is not None

    for level in cls.lineage():
        declared = level.declared_field(field_name)
        if declared is None:
            continue
        if not declared.is_public:
            if not force_access:
                logger.debug(
                    "Skipping %s field %s.%s without force_access",
                    declared.visibility.value,
                    level.name,
                    field_name,
                )
                continue
            declared = declared.with_access()
        return FieldLookup.found(declared)

    # Interfaces can only declare public fields; a match here is always public.
    matches: list[FieldDescriptor] = []
    for iface in get_all_interfaces(cls) or ():
        declared = iface.declared_field(field_name)
        if declared is not None and declared.is_public:
            matches.append(declared)

    if not matches:
        return FieldLookup.not_found()
    if len(matches) > 1:
        logger.debug(
            "Field %s is ambiguous relative to %s: %s",
            field_name,
            cls.name,
            [m.declaring_type for m in matches],
        )
        return FieldLookup.ambiguous(tuple(matches))
    return FieldLookup.found(matches[0])


def get_field(
    cls: TypeDescriptor | None,
    field_name: str | None,
    force_access: bool = False,
) -> FieldDescriptor | None:
    """Get a field by name, breaking scope if requested.

    Superclasses and interfaces are considered.  Returns ``None`` when no
    declared or interface field matches.

    Raises:
        InvalidArgumentError: If *cls* is ``None`` or *field_name* is blank.
        AmbiguousMemberError: If the field is matched on two or more
            implemented interfaces.
    """
    lookup = resolve_field(cls, field_name, force_access)
    if lookup.is_ambiguous:
        assert cls is not None and field_name is not None
        raise AmbiguousMemberError(
            f"Reference to field {field_name} is ambiguous relative to {cls.name}"
            "; a matching field exists on two or more implemented interfaces.",
            field_name=field_name,
            type_name=cls.name,
            candidates=lookup.candidates,
        )
    return lookup.field
