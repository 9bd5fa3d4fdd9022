"""Type and field descriptors — externally supplied hierarchy metadata.

Descriptors are frozen.  A :class:`TypeDescriptor` compares by identity, the
same way two classes with equal names in different modules are still
different classes; hierarchy walks rely on that to drop duplicates.

INVARIANT: an interface has no superclass, extends only interfaces, and
declares only public fields.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass, field

from commonkit.domain.types import TypeKind, Visibility
from commonkit.utils.validate import is_true, not_blank


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A field declared on one type."""

    name: str
    visibility: Visibility = Visibility.PUBLIC
    declaring_type: str = ""  # filled in by the owning TypeDescriptor
    accessible: bool = False  # True once access has been forced

    def __post_init__(self) -> None:
        not_blank(self.name, "The field name must not be blank")
        object.__setattr__(self, "visibility", Visibility(self.visibility))

    @property
    def is_public(self) -> bool:
        return self.visibility == Visibility.PUBLIC

    def with_access(self) -> FieldDescriptor:
        """Return a copy marked accessible; public fields are returned as-is."""
        if self.is_public or self.accessible:
            return self
        return dataclasses.replace(self, accessible=True)


@dataclass(frozen=True, eq=False, slots=True)
class TypeDescriptor:
    """A class or interface: name, superclass link, interfaces, declared fields."""

    name: str
    kind: TypeKind = TypeKind.CLASS
    superclass: TypeDescriptor | None = None
    interfaces: tuple[TypeDescriptor, ...] = ()
    fields: tuple[FieldDescriptor, ...] = field(default=())

    def __post_init__(self) -> None:
        not_blank(self.name, "The type name must not be blank")
        object.__setattr__(self, "kind", TypeKind(self.kind))
        # Accept lists from callers, store tuples.
        object.__setattr__(self, "interfaces", tuple(self.interfaces))
        object.__setattr__(
            self,
            "fields",
            tuple(
                f if f.declaring_type else dataclasses.replace(f, declaring_type=self.name)
                for f in self.fields
            ),
        )
        for iface in self.interfaces:
            is_true(
                iface.is_interface,
                "%s lists %s as an interface, but it is a class",
                self.name,
                iface.name,
            )
        names = [f.name for f in self.fields]
        is_true(
            len(names) == len(set(names)),
            "%s declares a field name more than once: %s",
            self.name,
            names,
        )
        if self.is_interface:
            is_true(
                self.superclass is None,
                "Interface %s cannot have a superclass",
                self.name,
            )
            for f in self.fields:
                is_true(
                    f.is_public,
                    "Interface %s cannot declare %s field %s",
                    self.name,
                    f.visibility.value,
                    f.name,
                )
        elif self.superclass is not None:
            is_true(
                not self.superclass.is_interface,
                "Class %s cannot extend interface %s",
                self.name,
                self.superclass.name,
            )

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def interface(
        cls,
        name: str,
        *,
        extends: tuple[TypeDescriptor, ...] | list[TypeDescriptor] = (),
        fields: tuple[FieldDescriptor, ...] | list[FieldDescriptor] = (),
    ) -> TypeDescriptor:
        """Build an interface descriptor extending *extends*."""
        return cls(
            name=name,
            kind=TypeKind.INTERFACE,
            interfaces=tuple(extends),
            fields=tuple(fields),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_interface(self) -> bool:
        return self.kind == TypeKind.INTERFACE

    def declared_field(self, name: str) -> FieldDescriptor | None:
        """Return the field declared directly on this type, ignoring ancestors."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def lineage(self) -> Iterator[TypeDescriptor]:
        """Yield this type then each superclass, most derived first."""
        current: TypeDescriptor | None = self
        while current is not None:
            yield current
            current = current.superclass

    def __repr__(self) -> str:
        return f"TypeDescriptor({self.kind.value} {self.name})"
