"""Descriptor models: property descriptors and the errors raised when enforcing them.

A descriptor is the full specification of one own property. Clone and merge
operations copy descriptors rather than values so accessors stay live and the
enumerable/writable/configurable flags survive.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class ReadOnlyPropertyError(AttributeError):
    """Raised when writing or deleting a property its descriptor does not allow."""


class PropertyDefinitionError(TypeError):
    """Raised when a descriptor cannot be defined on its target object."""


@dataclass(slots=True, frozen=True)
class DataDescriptor:
    """A stored value with mutability flags."""

    value: Any = None
    writable: bool = True
    enumerable: bool = True
    configurable: bool = True

    @property
    def is_default(self) -> bool:
        """True when all flags are set, i.e. a plain attribute can express it."""
        return self.writable and self.enumerable and self.configurable


@dataclass(slots=True, frozen=True)
class AccessorDescriptor:
    """A getter/setter pair with mutability flags.

    `get` is called as `get(owner)` and `set` as `set(owner, value)`. Either may
    be None. The functions are shared by reference whenever the descriptor is
    copied and are never invoked by clone or merge.
    """

    get: Callable[[Any], Any] | None = None
    set: Callable[[Any, Any], None] | None = None
    enumerable: bool = True
    configurable: bool = True

    @classmethod
    def from_property(cls, prop: property) -> AccessorDescriptor:
        """Build an accessor from a `property` object, sharing its functions."""
        return cls(get=prop.fget, set=prop.fset)


Descriptor = DataDescriptor | AccessorDescriptor
"""Either kind of property descriptor."""


def is_locked(descriptor: Descriptor | None) -> bool:
    """Check whether a descriptor must not be overwritten.

    Args:
        descriptor: Descriptor to inspect, or None for an absent property.

    Returns:
        True if the descriptor is non-configurable, or a non-writable data descriptor.
    """
    if descriptor is None:
        return False
    if not descriptor.configurable:
        return True
    return isinstance(descriptor, DataDescriptor) and not descriptor.writable
