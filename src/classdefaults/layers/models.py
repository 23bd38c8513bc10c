"""Layer models: one link of a defaults derivation chain."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, eq=False)
class Layer:
    """A set of declared defaults plus a reference to the layer it derives from.

    The declaration is held by reference and never snapshotted: it is cloned
    each time the chain is merged, so later edits to the declared object reach
    instances built afterwards and never those built before.
    """

    declared: Mapping[Hashable, Any] | Any = field(default_factory=dict)
    """Mapping of default values (or a Record whose own properties are the defaults)."""

    parent: Layer | None = None
    """Layer this one overrides. None for a root layer."""

    owner: str = ""
    """Qualified name of the class that declared the layer, for diagnostics."""

    def chain(self) -> list[Layer]:
        """Return the layers from the root down to this one."""
        layers: list[Layer] = []
        node: Layer | None = self
        while node is not None:
            layers.append(node)
            node = node.parent
        layers.reverse()
        return layers

    def derive(self, declared: Mapping[Hashable, Any] | Any, owner: str = "") -> Layer:
        """Create a child layer that overrides this one."""
        return Layer(declared, parent=self, owner=owner)
