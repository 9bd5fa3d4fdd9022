"""Tests for field lookup across superclasses and interfaces."""

from __future__ import annotations

import pytest

from commonkit.domain.descriptors import FieldDescriptor, TypeDescriptor
from commonkit.domain.types import LookupStatus, Visibility
from commonkit.errors import AmbiguousMemberError, InvalidArgumentError
from commonkit.utils.field_utils import get_field, resolve_field


def public(name: str) -> FieldDescriptor:
    return FieldDescriptor(name, Visibility.PUBLIC)


def private(name: str) -> FieldDescriptor:
    return FieldDescriptor(name, Visibility.PRIVATE)


class TestPreconditions:
    def test_none_type(self) -> None:
        with pytest.raises(InvalidArgumentError, match="class must not be None"):
            get_field(None, "x", False)

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name(self, name: str | None) -> None:
        with pytest.raises(InvalidArgumentError, match="field name must not be blank"):
            get_field(TypeDescriptor("T"), name, False)

    def test_resolve_field_checks_too(self) -> None:
        with pytest.raises(InvalidArgumentError):
            resolve_field(None, "x")


class TestSuperclassWalk:
    def test_public_field_on_type(self) -> None:
        cls = TypeDescriptor("T", fields=(public("x"),))
        found = get_field(cls, "x")
        assert found is not None
        assert found.declaring_type == "T"
        assert found.accessible is False

    def test_private_field_skipped_without_force(self) -> None:
        cls = TypeDescriptor("T", fields=(private("x"),))
        assert get_field(cls, "x", False) is None

    def test_private_field_with_force(self) -> None:
        cls = TypeDescriptor("T", fields=(private("x"),))
        found = get_field(cls, "x", True)
        assert found is not None
        assert found.visibility is Visibility.PRIVATE
        assert found.accessible is True
        # The descriptor on the type is not mutated.
        assert cls.fields[0].accessible is False

    @pytest.mark.parametrize("visibility", [Visibility.PROTECTED, Visibility.PACKAGE])
    def test_other_non_public_visibilities(self, visibility: Visibility) -> None:
        cls = TypeDescriptor("T", fields=(FieldDescriptor("x", visibility),))
        assert get_field(cls, "x") is None
        assert get_field(cls, "x", True) is not None

    def test_inherited_public_field(self) -> None:
        base = TypeDescriptor("Base", fields=(public("x"),))
        derived = TypeDescriptor("Derived", superclass=base)
        found = get_field(derived, "x")
        assert found is not None
        assert found.declaring_type == "Base"

    def test_most_derived_wins(self) -> None:
        base = TypeDescriptor("Base", fields=(public("x"),))
        derived = TypeDescriptor("Derived", superclass=base, fields=(public("x"),))
        assert get_field(derived, "x").declaring_type == "Derived"  # type: ignore[union-attr]

    def test_hidden_private_continues_to_public_ancestor(self) -> None:
        base = TypeDescriptor("Base", fields=(public("x"),))
        derived = TypeDescriptor("Derived", superclass=base, fields=(private("x"),))
        assert get_field(derived, "x", False).declaring_type == "Base"  # type: ignore[union-attr]
        forced = get_field(derived, "x", True)
        assert forced is not None
        assert forced.declaring_type == "Derived"
        assert forced.accessible is True

    def test_superclass_field_beats_interfaces(self) -> None:
        i1 = TypeDescriptor.interface("I1", fields=[public("x")])
        i2 = TypeDescriptor.interface("I2", fields=[public("x")])
        cls = TypeDescriptor("T", interfaces=(i1, i2), fields=(public("x"),))
        assert get_field(cls, "x").declaring_type == "T"  # type: ignore[union-attr]


class TestInterfaceFallback:
    def test_single_interface_match(self, diamond: dict[str, TypeDescriptor]) -> None:
        found = get_field(diamond["Derived"], "y")
        assert found is not None
        assert found.declaring_type == "IB"

    def test_field_on_parent_interface_counted_once(self) -> None:
        # ID extends IB; only IB declares y, so y is not ambiguous.
        ib = TypeDescriptor.interface("IB", fields=[public("y")])
        i_d = TypeDescriptor.interface("ID", extends=[ib])
        cls = TypeDescriptor("T", interfaces=(i_d, ib))
        assert get_field(cls, "y").declaring_type == "IB"  # type: ignore[union-attr]

    def test_interfaces_of_whole_hierarchy_searched(self) -> None:
        iface = TypeDescriptor.interface("I", fields=[public("z")])
        base = TypeDescriptor("Base", interfaces=(iface,))
        derived = TypeDescriptor("Derived", superclass=base)
        assert get_field(derived, "z").declaring_type == "I"  # type: ignore[union-attr]

    @pytest.mark.parametrize("force_access", [False, True])
    def test_ambiguous_raises(self, force_access: bool) -> None:
        i1 = TypeDescriptor.interface("I1", fields=[public("y")])
        i2 = TypeDescriptor.interface("I2", fields=[public("y")])
        cls = TypeDescriptor("T", interfaces=(i1, i2))
        with pytest.raises(AmbiguousMemberError) as exc_info:
            get_field(cls, "y", force_access)
        err = exc_info.value
        assert err.field_name == "y"
        assert err.type_name == "T"
        assert [c.declaring_type for c in err.candidates] == ["I1", "I2"]
        assert "ambiguous relative to T" in str(err)
        assert isinstance(err, InvalidArgumentError)

    def test_private_superclass_field_then_ambiguous(self) -> None:
        i1 = TypeDescriptor.interface("I1", fields=[public("y")])
        i2 = TypeDescriptor.interface("I2", fields=[public("y")])
        cls = TypeDescriptor("T", interfaces=(i1, i2), fields=(private("y"),))
        with pytest.raises(AmbiguousMemberError):
            get_field(cls, "y", False)
        assert get_field(cls, "y", True).declaring_type == "T"  # type: ignore[union-attr]

    def test_missing_field_returns_none(self, diamond: dict[str, TypeDescriptor]) -> None:
        assert get_field(diamond["Derived"], "nope", True) is None


class TestResolveField:
    def test_found(self, diamond: dict[str, TypeDescriptor]) -> None:
        lookup = resolve_field(diamond["Derived"], "shared")
        assert lookup.status is LookupStatus.FOUND
        assert lookup
        assert lookup.field is not None and lookup.field.declaring_type == "Base"

    def test_not_found(self, diamond: dict[str, TypeDescriptor]) -> None:
        lookup = resolve_field(diamond["Derived"], "x")
        assert lookup.status is LookupStatus.NOT_FOUND
        assert not lookup
        assert lookup.field is None

    def test_ambiguous_reported_not_raised(self) -> None:
        i1 = TypeDescriptor.interface("I1", fields=[public("y")])
        i2 = TypeDescriptor.interface("I2", fields=[public("y")])
        lookup = resolve_field(TypeDescriptor("T", interfaces=(i1, i2)), "y")
        assert lookup.is_ambiguous
        assert lookup.field is None
        assert len(lookup.candidates) == 2
