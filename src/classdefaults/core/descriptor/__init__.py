"""Descriptor functionality: models, descriptor-backed records, and reflection helpers."""

from classdefaults.core.descriptor.core import (
    Record,
    as_descriptor,
    define_property,
    descriptors_of,
    enumerable_keys,
    get_own_descriptor,
    has_locked_property,
    own_keys,
)
from classdefaults.core.descriptor.models import (
    AccessorDescriptor,
    DataDescriptor,
    Descriptor,
    PropertyDefinitionError,
    ReadOnlyPropertyError,
    is_locked,
)

__all__ = [
    # Models
    "Descriptor",
    "DataDescriptor",
    "AccessorDescriptor",
    "ReadOnlyPropertyError",
    "PropertyDefinitionError",
    "is_locked",
    # Core
    "Record",
    "own_keys",
    "enumerable_keys",
    "get_own_descriptor",
    "has_locked_property",
    "define_property",
    "as_descriptor",
    "descriptors_of",
]
