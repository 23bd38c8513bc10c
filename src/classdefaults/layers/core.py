"""Merging layered defaults and attaching them to instances.

Usage:
    base = Layer({"foo": 0, "bar": 0, "biz": 0})
    leaf = base.derive({"foo": 1, "bar": 1}).derive({"foo": 2})

    merged_defaults(leaf)          # foo=2, bar=1, biz=0 as descriptors
    compose_defaults(record, leaf) # defines them on `record`
"""

from __future__ import annotations

import warnings
from collections.abc import Hashable
from typing import Any

from classdefaults.config import CloneSettings, get_settings
from classdefaults.core.clone import clone
from classdefaults.core.descriptor import (
    Descriptor,
    define_property,
    descriptors_of,
    has_locked_property,
)
from classdefaults.layers.models import Layer


def merged_defaults(
    layer: Layer | None, *, settings: CloneSettings | None = None
) -> dict[Hashable, Descriptor]:
    """Fold a layer chain, base first, into one flat mapping of descriptors.

    Each layer's declared defaults are cloned before their descriptors are
    taken, and a key declared by a later layer replaces the earlier descriptor
    outright (no merge of nested values).

    Args:
        layer: Most derived layer of the chain, or None for no defaults.
        settings: Overrides for the process default settings.

    Returns:
        A fresh mapping from key to descriptor.
    """
    merged: dict[Hashable, Descriptor] = {}
    if layer is None:
        return merged

    for node in layer.chain():
        declared = clone(node.declared, settings=settings)
        merged.update(descriptors_of(declared))
    return merged


def compose_defaults(
    instance: Any, layer: Layer | None, *, settings: CloneSettings | None = None
) -> None:
    """Attach the merged defaults of `layer` to `instance` as own properties.

    Keys the instance already holds as non-writable or non-configurable are
    left alone.

    Args:
        instance: Object under construction. Accessor defaults and
            non-default flags require a Record.
        layer: Most derived layer of the chain, or None for no defaults.
        settings: Overrides for the process default settings.

    Raises:
        PropertyDefinitionError: If `instance` cannot hold a merged descriptor.
    """
    settings = settings or get_settings()
    for key, descriptor in merged_defaults(layer, settings=settings).items():
        if has_locked_property(instance, key):
            if settings.warn_on_locked_skip:
                warnings.warn(
                    f"Default {key!r} skipped: {type(instance).__name__} "
                    f"already holds it as a locked property.",
                    stacklevel=2,
                )
            continue
        define_property(instance, key, descriptor)
