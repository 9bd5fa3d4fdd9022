"""Tests for interface enumeration over descriptor hierarchies."""

from __future__ import annotations

from commonkit.domain.descriptors import TypeDescriptor
from commonkit.utils.class_utils import get_all_interfaces


def _names(types: list[TypeDescriptor] | None) -> list[str]:
    assert types is not None
    return [t.name for t in types]


class TestGetAllInterfaces:
    def test_none_input(self) -> None:
        assert get_all_interfaces(None) is None

    def test_no_interfaces(self) -> None:
        assert get_all_interfaces(TypeDescriptor("Plain")) == []

    def test_derived_first(self, diamond: dict[str, TypeDescriptor]) -> None:
        # ID is discovered on Derived, IB via ID's parents; Base adds nothing new.
        assert _names(get_all_interfaces(diamond["Derived"])) == ["ID", "IB"]

    def test_derived_first_without_interface_inheritance(self) -> None:
        ib = TypeDescriptor.interface("IB")
        i_d = TypeDescriptor.interface("ID")
        base = TypeDescriptor("Base", interfaces=(ib,))
        derived = TypeDescriptor("Derived", superclass=base, interfaces=(i_d,))
        assert _names(get_all_interfaces(derived)) == ["ID", "IB"]

    def test_depth_first_before_next_sibling(self) -> None:
        root = TypeDescriptor.interface("Root")
        a_parent = TypeDescriptor.interface("AParent", extends=[root])
        a = TypeDescriptor.interface("A", extends=[a_parent])
        b = TypeDescriptor.interface("B", extends=[root])
        cls = TypeDescriptor("C", interfaces=(a, b))
        assert _names(get_all_interfaces(cls)) == ["A", "AParent", "Root", "B"]

    def test_interface_input_lists_parents(self) -> None:
        ib = TypeDescriptor.interface("IB")
        i_d = TypeDescriptor.interface("ID", extends=[ib])
        assert _names(get_all_interfaces(i_d)) == ["IB"]

    def test_duplicates_kept_at_first_position(self) -> None:
        shared = TypeDescriptor.interface("Shared")
        x = TypeDescriptor.interface("X", extends=[shared])
        base = TypeDescriptor("Base", interfaces=(shared, x))
        derived = TypeDescriptor("Derived", superclass=base, interfaces=(x,))
        assert _names(get_all_interfaces(derived)) == ["X", "Shared"]

    def test_same_name_distinct_types_both_listed(self) -> None:
        first = TypeDescriptor.interface("pkg.Marker")
        second = TypeDescriptor.interface("pkg.Marker")
        found = get_all_interfaces(TypeDescriptor("C", interfaces=(first, second)))
        assert found == [first, second]
