"""Descriptor-backed records and property reflection helpers.

Usage:
    record = Record()
    define_property(record, "size", DataDescriptor(3, writable=False))
    define_property(record, "area", AccessorDescriptor(get=lambda r: r.size**2))

    record.area          # 9, evaluated on read
    record.size = 4      # ReadOnlyPropertyError

The reflection helpers (`own_keys`, `get_own_descriptor`, `define_property`)
work on any object: Records report their descriptor table, other objects report
their instance `__dict__` and populated `__slots__` as plain data descriptors.
"""

from __future__ import annotations

import inspect
from collections.abc import Hashable, Iterator, Mapping
from dataclasses import replace
from reprlib import recursive_repr
from typing import Any, Self

from classdefaults.core.descriptor.models import (
    AccessorDescriptor,
    DataDescriptor,
    Descriptor,
    PropertyDefinitionError,
    ReadOnlyPropertyError,
    is_locked,
)

_TABLE = "_properties"


def _table(record: Record) -> dict[Hashable, Descriptor]:
    return object.__getattribute__(record, _TABLE)


def _read(owner: Any, key: Hashable, descriptor: Descriptor) -> Any:
    if isinstance(descriptor, DataDescriptor):
        return descriptor.value
    if descriptor.get is None:
        raise AttributeError(f"property {key!r} of {type(owner).__name__!r} object has no getter")
    return descriptor.get(owner)


def _reserved(owner: Record, key: Hashable) -> AttributeError:
    return AttributeError(
        f"{key!r} is reserved for the property table of {type(owner).__name__!r} objects"
    )


def _assign(owner: Record, key: Hashable, value: Any) -> None:
    if key == _TABLE:
        raise _reserved(owner, key)
    table = _table(owner)
    descriptor = table.get(key)

    if descriptor is None:
        # Class-level data descriptors (property setters, slots) take the write
        if isinstance(key, str) and hasattr(
            inspect.getattr_static(type(owner), key, None), "__set__"
        ):
            object.__setattr__(owner, key, value)
        else:
            table[key] = DataDescriptor(value)
        return

    if isinstance(descriptor, AccessorDescriptor):
        if descriptor.set is None:
            raise ReadOnlyPropertyError(
                f"property {key!r} of {type(owner).__name__!r} object has no setter"
            )
        descriptor.set(owner, value)
        return

    if not descriptor.writable:
        raise ReadOnlyPropertyError(
            f"property {key!r} of {type(owner).__name__!r} object is read-only"
        )
    table[key] = replace(descriptor, value=value)


def _remove(owner: Record, key: Hashable) -> None:
    descriptor = _table(owner)[key]
    if not descriptor.configurable:
        raise ReadOnlyPropertyError(
            f"property {key!r} of {type(owner).__name__!r} object is not configurable"
        )
    del _table(owner)[key]


class Record:
    """Object whose own properties are stored as descriptors.

    Own properties shadow class attributes, accessors are evaluated on read,
    and writes honour `writable`, setters and class-level data descriptors.
    String keys are reached as attributes, any other hashable key through item
    access (`record[key]`). Iteration yields the enumerable own keys.

    The name `_properties` is reserved for the table itself.

    Gotcha: attributes written through a class-level data descriptor (a class
    `property` setter, a slot) are not own properties and are not cloned.
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> Self:
        parent_new = super().__new__
        if parent_new is object.__new__:
            instance = parent_new(cls)
        else:
            instance = parent_new(cls, *args, **kwargs)
        object.__setattr__(instance, _TABLE, {})
        return instance

    def __getattribute__(self, name: str) -> Any:
        descriptor = _table(self).get(name)
        if descriptor is None:
            return object.__getattribute__(self, name)
        return _read(self, name, descriptor)

    def __setattr__(self, name: str, value: Any) -> None:
        _assign(self, name, value)

    def __delattr__(self, name: str) -> None:
        if name == _TABLE:
            raise _reserved(self, name)
        if name in _table(self):
            _remove(self, name)
        else:
            object.__delattr__(self, name)

    def __getitem__(self, key: Hashable) -> Any:
        descriptor = _table(self).get(key)
        if descriptor is None:
            raise KeyError(key)
        return _read(self, key, descriptor)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        _assign(self, key, value)

    def __delitem__(self, key: Hashable) -> None:
        if key not in _table(self):
            raise KeyError(key)
        _remove(self, key)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(enumerable_keys(self))

    @recursive_repr()
    def __repr__(self) -> str:
        parts = []
        for key, descriptor in _table(self).items():
            if not descriptor.enumerable:
                continue
            if isinstance(descriptor, AccessorDescriptor):
                if descriptor.get and descriptor.set:
                    shown = "[Getter/Setter]"
                else:
                    shown = "[Getter]" if descriptor.get else "[Setter]"
            else:
                shown = repr(descriptor.value)
            label = key if isinstance(key, str) and key.isidentifier() else f"[{key!r}]"
            parts.append(f"{label}={shown}")
        return f"{type(self).__name__}({', '.join(parts)})"


def _namespace(obj: Any) -> dict[str, Any] | None:
    try:
        return vars(obj)
    except TypeError:
        return None


def _slot_names(cls: type) -> list[str]:
    """Collect slot attribute names declared along the MRO, with private names mangled."""
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return names


def _slot_value(obj: Any, name: str) -> tuple[bool, Any]:
    try:
        return True, object.__getattribute__(obj, name)
    except AttributeError:
        return False, None


def own_keys(obj: Any) -> list[Hashable]:
    """List every own property key, enumerable or not, in declaration order.

    Args:
        obj: Any object.

    Returns:
        Descriptor table keys for Records; instance `__dict__` keys followed by
        populated slot names for other objects.
    """
    if isinstance(obj, Record):
        return list(_table(obj))

    namespace = _namespace(obj)
    keys: list[Hashable] = list(namespace) if namespace is not None else []
    for name in _slot_names(type(obj)):
        if name not in keys and _slot_value(obj, name)[0]:
            keys.append(name)
    return keys


def get_own_descriptor(obj: Any, key: Hashable) -> Descriptor | None:
    """Return the descriptor of an own property, or None if absent.

    Non-Record attributes are reported as writable, enumerable, configurable
    data descriptors.
    """
    if isinstance(obj, Record):
        return _table(obj).get(key)
    if not isinstance(key, str):
        return None

    namespace = _namespace(obj)
    if namespace is not None and key in namespace:
        return DataDescriptor(namespace[key])
    if key in _slot_names(type(obj)):
        present, value = _slot_value(obj, key)
        return DataDescriptor(value) if present else None
    return None


def enumerable_keys(obj: Any) -> list[Hashable]:
    """List own property keys whose descriptor is enumerable."""
    keys = []
    for key in own_keys(obj):
        descriptor = get_own_descriptor(obj, key)
        if descriptor is not None and descriptor.enumerable:
            keys.append(key)
    return keys


def has_locked_property(obj: Any, key: Hashable) -> bool:
    """Check whether `obj` holds `key` as a non-writable or non-configurable property."""
    return is_locked(get_own_descriptor(obj, key))


def define_property(obj: Any, key: Hashable, descriptor: Descriptor) -> None:
    """Define an own property from a descriptor, flags included.

    Args:
        obj: Target object.
        key: Property key. Non-string keys require a Record.
        descriptor: Descriptor to install.

    Raises:
        PropertyDefinitionError: If the existing property is not configurable
            or `key` is the reserved `_properties` name of a Record,
            or if `obj` is not a Record and the descriptor is anything other
            than a plain data descriptor with a string key.
    """
    if isinstance(obj, Record):
        if key == _TABLE:
            raise PropertyDefinitionError(f"{key!r} is reserved on {type(obj).__name__!r} objects")
        table = _table(obj)
        existing = table.get(key)
        if existing is not None and not existing.configurable:
            raise PropertyDefinitionError(
                f"cannot redefine property {key!r} of {type(obj).__name__!r} object"
            )
        table[key] = descriptor
        return

    if not (isinstance(descriptor, DataDescriptor) and descriptor.is_default):
        raise PropertyDefinitionError(
            f"{type(obj).__name__!r} objects only hold plain attributes, "
            f"cannot define {key!r} from {descriptor!r}"
        )
    if not isinstance(key, str):
        raise PropertyDefinitionError(
            f"{type(obj).__name__!r} objects only hold string keys, got {key!r}"
        )
    object.__setattr__(obj, key, descriptor.value)


def as_descriptor(value: Any) -> Descriptor:
    """Interpret a declared default as a descriptor.

    Descriptors pass through, `property` objects become accessors sharing their
    functions, and anything else becomes a plain data descriptor.
    """
    if isinstance(value, DataDescriptor | AccessorDescriptor):
        return value
    if isinstance(value, property):
        return AccessorDescriptor.from_property(value)
    return DataDescriptor(value)


def descriptors_of(source: Mapping[Hashable, Any] | Any) -> dict[Hashable, Descriptor]:
    """Read a defaults declaration as a flat mapping of descriptors.

    Args:
        source: A mapping of declared defaults, or any object whose own
            properties are the defaults (typically a Record).

    Returns:
        Descriptors keyed by property name, in declaration order.
    """
    if isinstance(source, Mapping):
        return {key: as_descriptor(value) for key, value in source.items()}

    descriptors: dict[Hashable, Descriptor] = {}
    for key in own_keys(source):
        descriptor = get_own_descriptor(source, key)
        if descriptor is not None:
            descriptors[key] = descriptor
    return descriptors
