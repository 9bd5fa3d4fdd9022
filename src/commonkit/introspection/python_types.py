"""Python classes as :class:`TypeDescriptor` metadata.

Mapping rules:

* A ``typing.Protocol`` class is an interface; its protocol bases are the
  interfaces it extends.
* For any other class, the first base that is not a protocol (and not
  ``object``) is the superclass, and protocol bases are its interfaces in
  declaration order.
* Declared fields are the class's own annotations plus data attributes
  assigned in its body (and ``__slots__`` entries), in definition order.
  Methods, properties, nested classes and dunders are not fields.
* Visibility follows naming: ``__name`` (mangled) is private, ``_name`` is
  protected, anything else is public.  Protocols only expose public fields.

Descriptors are memoized per call so an interface reached through several
paths maps to one descriptor object.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import Any, Generic, Protocol

from commonkit.domain.descriptors import FieldDescriptor, TypeDescriptor
from commonkit.domain.types import TypeKind, Visibility
from commonkit.errors import TypeLoadError
from commonkit.utils.validate import is_true

logger = logging.getLogger(__name__)

# Bookkeeping attributes typing/abc store in class bodies.
_INTERNAL_ATTRS = frozenset({"_is_protocol", "_is_runtime_protocol", "_abc_impl"})
_ROOT_BASES = (object, Protocol, Generic)


def is_protocol(cls: type) -> bool:
    """Return True if *cls* is a ``typing.Protocol`` class (not an implementation)."""
    if cls in _ROOT_BASES:
        return False
    return bool(cls.__dict__.get("_is_protocol", False))


def describe_class(cls: type) -> TypeDescriptor:
    """Describe *cls* and its whole hierarchy as a :class:`TypeDescriptor`."""
    is_true(inspect.isclass(cls), "Expected a class, got %r", cls)
    return _describe(cls, {})


def _describe(cls: type, memo: dict[type, TypeDescriptor]) -> TypeDescriptor:
    cached = memo.get(cls)
    if cached is not None:
        return cached

    interface = is_protocol(cls)
    bases = [b for b in cls.__bases__ if b not in _ROOT_BASES]
    interfaces = tuple(_describe(b, memo) for b in bases if is_protocol(b))

    superclass: TypeDescriptor | None = None
    if not interface:
        parent = next((b for b in bases if not is_protocol(b)), None)
        if parent is not None:
            superclass = _describe(parent, memo)

    fields = tuple(
        f for f in _declared_fields(cls) if not interface or f.is_public
    )
    descriptor = TypeDescriptor(
        name=_qualified_name(cls),
        kind=TypeKind.INTERFACE if interface else TypeKind.CLASS,
        superclass=superclass,
        interfaces=interfaces,
        fields=fields,
    )
    memo[cls] = descriptor
    logger.debug(
        "Described %s %s with %d field(s)", descriptor.kind.value, descriptor.name, len(fields)
    )
    return descriptor


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _declared_fields(cls: type) -> list[FieldDescriptor]:
    # Keys are demangled so a private slot and its member descriptor collapse.
    names: dict[str, None] = {}
    for name in inspect.get_annotations(cls):
        names[_demangle(cls, name)] = None
    for name in _slot_names(cls):
        names[_demangle(cls, name)] = None
    for name, value in vars(cls).items():
        if name in _INTERNAL_ATTRS or not _is_data_attribute(value):
            continue
        names.setdefault(_demangle(cls, name), None)

    return [
        FieldDescriptor(
            name=name,
            visibility=visibility_of(name),
            declaring_type=_qualified_name(cls),
        )
        for name in names
        if not _is_dunder(name) and name not in _INTERNAL_ATTRS
    ]


def _slot_names(cls: type) -> tuple[str, ...]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        return (slots,)
    return tuple(slots)


def _is_data_attribute(value: Any) -> bool:
    if isinstance(value, (type, classmethod, staticmethod, property)):
        return False
    if inspect.ismemberdescriptor(value):
        return True
    return not (inspect.isroutine(value) or inspect.isdatadescriptor(value))


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _demangle(cls: type, name: str) -> str:
    prefix = f"_{cls.__name__.lstrip('_')}__"
    if name.startswith(prefix) and not name.endswith("__"):
        return "__" + name[len(prefix) :]
    return name


def visibility_of(name: str) -> Visibility:
    """Map a Python attribute name to a :class:`Visibility`."""
    if name.startswith("__") and not name.endswith("__"):
        return Visibility.PRIVATE
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def load_class(target: str) -> type:
    """Import ``package.module:Outer.Inner`` and return the class.

    Raises:
        TypeLoadError: If the module cannot be imported, the attribute path
            does not exist, or it does not name a class.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise TypeLoadError(
            f"Invalid target {target!r}",
            hint="Use the form package.module:ClassName",
        )
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise TypeLoadError(f"Cannot import module {module_name}: {exc}") from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise TypeLoadError(f"{target} not found: no attribute {part!r}") from exc

    if not inspect.isclass(obj):
        raise TypeLoadError(f"{target} is not a class")
    return obj
