"""Interface enumeration over a type hierarchy, using descriptor metadata only."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from commonkit.domain.descriptors import TypeDescriptor


def get_all_interfaces(cls: TypeDescriptor | None) -> list[TypeDescriptor] | None:
    """Return every interface implemented by *cls* and its superclasses.

    The order is determined by looking through each interface in turn as
    declared and following its hierarchy up, then considering each
    superclass the same way.  Later duplicates are ignored, so the order
    of first discovery is kept.

    Returns ``None`` for ``None`` input.
    """
    if cls is None:
        return None

    # dict keys keep insertion order; descriptors hash by identity.
    found: dict[TypeDescriptor, None] = {}
    _collect_interfaces(cls, found)
    return list(found)


def _collect_interfaces(cls: TypeDescriptor | None, found: dict[TypeDescriptor, None]) -> None:
    while cls is not None:
        for iface in cls.interfaces:
            if iface not in found:
                found[iface] = None
                _collect_interfaces(iface, found)
        cls = cls.superclass
