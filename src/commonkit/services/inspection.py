"""InspectService — interface enumeration and field lookup on Python classes."""

from __future__ import annotations

from typing import Any

from commonkit.domain.descriptors import FieldDescriptor, TypeDescriptor
from commonkit.errors import AmbiguousMemberError, CommonKitError
from commonkit.introspection import describe_class, load_class
from commonkit.services.base import BaseService
from commonkit.services.result import ServiceError, ServiceResult
from commonkit.utils.class_utils import get_all_interfaces
from commonkit.utils.field_utils import resolve_field


def _field_dict(field: FieldDescriptor) -> dict[str, Any]:
    return {
        "name": field.name,
        "visibility": field.visibility.value,
        "declaring_type": field.declaring_type,
        "accessible": field.accessible,
    }


class InspectService(BaseService):
    """Loads ``module:Class`` targets and runs the hierarchy helpers on them."""

    def _describe(self, target: str) -> TypeDescriptor:
        return describe_class(load_class(target))

    def interfaces(self, target: str) -> ServiceResult:
        """List every interface of *target*, in discovery order."""
        op = "all_interfaces"
        try:
            descriptor = self._describe(target)
        except CommonKitError as exc:
            return self._failure(op, exc, detail={"target": target})

        found = get_all_interfaces(descriptor) or []
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "type": descriptor.name,
                "count": len(found),
                "items": [{"name": iface.name, "kind": iface.kind.value} for iface in found],
            },
        )

    def field(
        self,
        target: str,
        field_name: str,
        *,
        force_access: bool | None = None,
    ) -> ServiceResult:
        """Resolve *field_name* on *target*.

        *force_access* falls back to the ``[inspect]`` config default.
        """
        op = "get_field"
        if force_access is None:
            force_access = bool(self._settings and self._settings.inspect.force_access)
        try:
            descriptor = self._describe(target)
            lookup = resolve_field(descriptor, field_name, force_access)
        except CommonKitError as exc:
            return self._failure(op, exc, detail={"target": target, "field": field_name})

        if lookup.is_ambiguous:
            exc = AmbiguousMemberError(
                f"Reference to field {field_name} is ambiguous relative to {descriptor.name}",
                field_name=field_name,
                type_name=descriptor.name,
                candidates=lookup.candidates,
            )
            return self._failure(
                op,
                exc,
                detail={"candidates": [c.declaring_type for c in lookup.candidates]},
            )
        if lookup.field is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="NOT_FOUND",
                    message=f"No field {field_name} on {descriptor.name}",
                    hint=None if force_access else "Non-public fields need --force-access",
                ),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "type": descriptor.name,
                "force_access": force_access,
                **_field_dict(lookup.field),
            },
        )
