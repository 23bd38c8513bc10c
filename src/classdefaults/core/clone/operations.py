"""Pure functions for classifying values and constructing their copies.

Reconstruction is a closed dispatch: a lookup table from type identity to a
construction function, searched along the value's MRO. Anything not in the
table falls back to calling its class with no arguments.
"""

from __future__ import annotations

import array
import copy
import datetime
import functools
import re
import types
import weakref
from collections import defaultdict, deque
from collections.abc import Callable, Mapping, MutableMapping, MutableSequence
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, TypeVar
from uuid import UUID

from classdefaults.core.clone.models import Kind

S = TypeVar("S")

PRIMITIVE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    type(Ellipsis),
    type(NotImplemented),
    range,
    slice,
    Decimal,
    Fraction,
    UUID,
    Enum,
)
"""Immutable values copied by value and never tracked."""

REFERENCE_TYPES: tuple[type, ...] = (
    type,
    types.FunctionType,
    types.MethodType,
    types.BuiltinFunctionType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ModuleType,
    types.CodeType,
    functools.partial,
    property,
    classmethod,
    staticmethod,
    weakref.ref,
)
"""Values shared by reference: functions and other code-like objects."""


# Reconstructing strategies


def reconstruct_by_reduce(value: S) -> S:
    """Rebuild an immutable value through its reduce protocol (dates, times)."""
    return copy.copy(value)


def reconstruct_pattern(pattern: re.Pattern[Any]) -> re.Pattern[Any]:
    """Recompile a pattern from its source and flags.

    Note: the `re` module caches compiled patterns, so the result may be the
    very same object for patterns compiled earlier.
    """
    return re.compile(pattern.pattern, pattern.flags)


def reconstruct_from_seed(value: S) -> S:
    """Call the value's copy constructor with the original as seed.

    Members are shared, not cloned.
    """
    return type(value)(value)  # type: ignore[call-arg]


def reconstruct_array(value: array.array[Any]) -> array.array[Any]:
    """Copy a typed array, keeping its typecode."""
    return type(value)(value.typecode, value)


RECONSTRUCTORS: dict[type, Callable[[Any], Any]] = {
    datetime.datetime: reconstruct_by_reduce,
    datetime.date: reconstruct_by_reduce,
    datetime.time: reconstruct_by_reduce,
    datetime.timedelta: reconstruct_by_reduce,
    datetime.timezone: reconstruct_by_reduce,
    re.Pattern: reconstruct_pattern,
    set: reconstruct_from_seed,
    frozenset: reconstruct_from_seed,
    bytearray: reconstruct_from_seed,
    array.array: reconstruct_array,
    weakref.WeakSet: reconstruct_from_seed,
    weakref.WeakKeyDictionary: reconstruct_from_seed,
    weakref.WeakValueDictionary: reconstruct_from_seed,
}
"""Reconstructing kinds and the copy constructor used for each."""


# Generic (zero-arg) construction


def blank_deque(value: deque[Any]) -> deque[Any]:
    """Empty deque of the same class, keeping `maxlen`."""
    return type(value)(maxlen=value.maxlen)


def blank_defaultdict(value: defaultdict[Any, Any]) -> defaultdict[Any, Any]:
    """Empty defaultdict of the same class, keeping `default_factory`."""
    return type(value)(value.default_factory)


BLANK_FACTORIES: dict[type, Callable[[Any], Any]] = {
    deque: blank_deque,
    defaultdict: blank_defaultdict,
}
"""Generic kinds whose bare zero-arg constructor would lose part of their shape."""


def find_strategy(table: Mapping[type, S], cls: type) -> S | None:
    """Look up a strategy for `cls`, walking its MRO.

    Args:
        table: Strategy table keyed by type.
        cls: Class of the value being cloned.

    Returns:
        The strategy registered for the nearest class in the MRO, or None.
    """
    for klass in cls.__mro__:
        strategy = table.get(klass)
        if strategy is not None:
            return strategy
    return None


def classify(value: Any) -> Kind:
    """Determine how the clone engine treats `value`."""
    if isinstance(value, PRIMITIVE_TYPES):
        return Kind.PRIMITIVE
    if isinstance(value, REFERENCE_TYPES):
        return Kind.REFERENCE
    if find_strategy(RECONSTRUCTORS, type(value)) is not None:
        return Kind.RECONSTRUCTED
    if isinstance(value, tuple):
        return Kind.TUPLE
    if isinstance(value, MutableMapping):
        return Kind.MAPPING
    if isinstance(value, MutableSequence):
        return Kind.SEQUENCE
    return Kind.OBJECT


def construct(value: Any) -> Any:
    """Build the initial copy of a non-tuple composite, before contents are filled in.

    Args:
        value: Original composite.

    Returns:
        A reconstructed copy for reconstructing kinds, otherwise an empty
        instance of the same class.

    Raises:
        Whatever the class raises when called with no arguments.
    """
    reconstructor = find_strategy(RECONSTRUCTORS, type(value))
    if reconstructor is not None:
        return reconstructor(value)

    factory = find_strategy(BLANK_FACTORIES, type(value))
    if factory is not None:
        return factory(value)
    return type(value)()


def rebuild_tuple(value: tuple[Any, ...], items: list[Any]) -> tuple[Any, ...]:
    """Build a tuple of the same class from already cloned items.

    Named tuples take their items positionally.
    """
    cls = type(value)
    if hasattr(cls, "_fields"):
        return cls(*items)
    return cls(items)
