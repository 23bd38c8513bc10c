"""classdefaults: deep cloning and layered default properties for classes.

Usage:
    from classdefaults import Defaults, clone

    class Person(Defaults.defaults({"name": "Joe", "pets": []})):
        @property
        def greeting(self):
            return f"Hi, {self.name}"

    class Trainer(Person, defaults={"name": "Ash", "badges": []}):
        pass

    a, b = Trainer(), Trainer()
    a.badges.append("Boulder")
    assert b.badges == []          # each instance owns a clone of the defaults

    graph = {"items": [1, 2, 3]}
    graph["self"] = graph
    copy = clone(graph)            # copy["self"] is copy
"""

__version__ = "0.1.0"

# Core primitives
from classdefaults.core import (
    AccessorDescriptor,
    Cloned,
    CloneRegistry,
    DataDescriptor,
    Descriptor,
    Kind,
    PropertyDefinitionError,
    ReadOnlyPropertyError,
    Record,
    classify,
    clone,
    deep_equal,
    define_property,
    enumerable_keys,
    get_own_descriptor,
    own_keys,
)

# Configuration
from classdefaults.config import CloneSettings, get_settings

# Layers
from classdefaults.layers import (
    Defaults,
    Layer,
    compose_defaults,
    merged_defaults,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Cloned",
    "Descriptor",
    "DataDescriptor",
    "AccessorDescriptor",
    "Record",
    "ReadOnlyPropertyError",
    "PropertyDefinitionError",
    "own_keys",
    "enumerable_keys",
    "get_own_descriptor",
    "define_property",
    "Kind",
    "CloneRegistry",
    "classify",
    "clone",
    "deep_equal",
    # Layers
    "Layer",
    "merged_defaults",
    "compose_defaults",
    "Defaults",
    # Configuration
    "CloneSettings",
    "get_settings",
]
