"""Structural deep clone and structural equality.

Usage:
    original = {"a": {"b": {}}}
    original["a"]["b"]["a"] = original["a"]

    copy = clone(original)
    assert copy["a"]["b"]["a"] is copy["a"]      # cycle kept inside the clone
    assert copy["a"]["b"]["a"] is not original["a"]
    assert deep_equal(copy, original)

Own properties are copied as descriptors, so accessors stay accessors and
their functions are shared, never invoked.
"""

from __future__ import annotations

import re
import warnings
import weakref
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from classdefaults.config import CloneSettings, get_settings
from classdefaults.core.clone.models import CloneRegistry, Kind
from classdefaults.core.clone.operations import classify, construct, rebuild_tuple
from classdefaults.core.descriptor import (
    AccessorDescriptor,
    DataDescriptor,
    define_property,
    enumerable_keys,
    get_own_descriptor,
    has_locked_property,
    own_keys,
)
from classdefaults.core.types import Cloned


def clone[T](value: T, *, settings: CloneSettings | None = None) -> Cloned[T]:
    """Return a structurally independent deep copy of `value`.

    Args:
        value: Any value. Primitives and functions come back unchanged.
        settings: Overrides for the process default settings.

    Returns:
        A copy deep-equal to `value` that shares no mutable composite with it.

    Raises:
        Whatever a composite's class raises when called with no arguments.
    """
    settings = settings or get_settings()
    if classify(value).is_shared:
        return value

    registry = CloneRegistry(preserve_shared=settings.preserve_shared_references)
    try:
        return _clone(value, registry, settings)
    finally:
        registry.clear()


def _clone(value: Any, registry: CloneRegistry, settings: CloneSettings) -> Any:
    kind = classify(value)
    if kind.is_shared:
        return value

    existing = registry.find(value)
    if existing is not None:
        return existing

    if kind is Kind.TUPLE:
        return _clone_tuple(value, registry, settings)

    copy = construct(value)
    registry.register(value, copy)

    if kind is Kind.MAPPING:
        for key, item in value.items():
            copy[key] = _clone(item, registry, settings)
    elif kind is Kind.SEQUENCE:
        for item in value:
            copy.append(_clone(item, registry, settings))

    _copy_own_properties(
        value, copy, registry, settings, keep_derived=kind is Kind.RECONSTRUCTED
    )

    registry.release(value)
    return copy


def _clone_tuple(value: tuple[Any, ...], registry: CloneRegistry, settings: CloneSettings) -> Any:
    registry.hold(value)
    items = [_clone(item, registry, settings) for item in value]

    # A cycle through this tuple may have rebuilt it already
    copy = registry.find(value)
    if copy is None:
        copy = rebuild_tuple(value, items)
        registry.register(value, copy)
        _copy_own_properties(value, copy, registry, settings)

    registry.release(value)
    return copy


def _copy_own_properties(
    source: Any,
    copy: Any,
    registry: CloneRegistry,
    settings: CloneSettings,
    keep_derived: bool = False,
) -> None:
    """Copy every own property of `source` onto `copy` as a descriptor.

    With `keep_derived`, any key the copy constructor already produced is kept,
    since it holds internal state re-derived for the copy (e.g. the `data` and
    `_remove` attributes of weak containers).
    """
    for key in own_keys(source):
        descriptor = get_own_descriptor(source, key)
        if descriptor is None:
            continue
        if keep_derived and get_own_descriptor(copy, key) is not None:
            continue
        if has_locked_property(copy, key):
            if settings.warn_on_locked_skip:
                warnings.warn(
                    f"clone() kept the locked property {key!r} already defined "
                    f"on the new {type(copy).__name__} instance.",
                    stacklevel=2,
                )
            continue

        if isinstance(descriptor, DataDescriptor):
            descriptor = replace(descriptor, value=_clone(descriptor.value, registry, settings))
        define_property(copy, key, descriptor)


def deep_equal(a: Any, b: Any) -> bool:
    """Compare two values by recursive structure.

    Composites are equal when they have the same class, equal contents and the
    same enumerable own properties, with data values compared recursively and
    accessors compared by function identity. Reconstructing kinds (sets, dates,
    patterns, weak containers) compare by their own equality. Cycles are handled.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if the values are structurally equal.
    """
    return _equal(a, b, set())


def _equal(a: Any, b: Any, seen: set[tuple[int, int]]) -> bool:
    if a is b:
        return True

    kind = classify(a)
    if kind.is_shared:
        return type(a) is type(b) and a == b
    if type(a) is not type(b):
        return False

    pair = (id(a), id(b))
    if pair in seen:
        return True
    seen.add(pair)

    if kind is Kind.RECONSTRUCTED:
        # Attributes of reconstructed kinds are internal state, not structure
        return _reconstructed_equal(a, b)
    if kind is Kind.MAPPING:
        if a.keys() != b.keys():
            return False
        if not all(_equal(a[key], b[key], seen) for key in a):
            return False
    elif kind in (Kind.SEQUENCE, Kind.TUPLE):
        if len(a) != len(b):
            return False
        if not all(_equal(x, y, seen) for x, y in zip(a, b, strict=True)):
            return False

    keys = enumerable_keys(a)
    if set(keys) != set(enumerable_keys(b)):
        return False

    for key in keys:
        left = get_own_descriptor(a, key)
        right = get_own_descriptor(b, key)
        if type(left) is not type(right):
            return False
        if isinstance(left, AccessorDescriptor) and isinstance(right, AccessorDescriptor):
            if left.get is not right.get or left.set is not right.set:
                return False
        elif isinstance(left, DataDescriptor) and isinstance(right, DataDescriptor):
            if not _equal(left.value, right.value, seen):
                return False
    return True


def _reconstructed_equal(a: Any, b: Any) -> bool:
    if isinstance(a, re.Pattern):
        return (a.pattern, a.flags) == (b.pattern, b.flags)
    if isinstance(a, Mapping):
        return dict(a.items()) == dict(b.items())
    if isinstance(a, weakref.WeakSet):
        return set(a) == set(b)
    return bool(a == b)
