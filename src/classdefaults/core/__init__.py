"""Core functionalities: descriptors, records, and the deep clone.

Architecture Note:
    core/ contains the building blocks with no knowledge of layers or classes.
    The clone registry is the only mutable state and lives for one clone() call.
    For defaults composition, see layers/.
"""

from classdefaults.core.clone import (
    CloneRegistry,
    Kind,
    classify,
    clone,
    deep_equal,
)
from classdefaults.core.descriptor import (
    AccessorDescriptor,
    DataDescriptor,
    Descriptor,
    PropertyDefinitionError,
    ReadOnlyPropertyError,
    Record,
    as_descriptor,
    define_property,
    descriptors_of,
    enumerable_keys,
    get_own_descriptor,
    has_locked_property,
    is_locked,
    own_keys,
)
from classdefaults.core.types import Cloned

__all__ = [
    # Types
    "Cloned",
    # Descriptor
    "Descriptor",
    "DataDescriptor",
    "AccessorDescriptor",
    "ReadOnlyPropertyError",
    "PropertyDefinitionError",
    "Record",
    "own_keys",
    "enumerable_keys",
    "get_own_descriptor",
    "has_locked_property",
    "is_locked",
    "define_property",
    "as_descriptor",
    "descriptors_of",
    # Clone
    "Kind",
    "CloneRegistry",
    "classify",
    "clone",
    "deep_equal",
]
