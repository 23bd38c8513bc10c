"""Clone models: value kinds and the per-call clone registry."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any


class Kind(Enum):
    """How the clone engine treats a value."""

    PRIMITIVE = auto()  # Immutable value, returned as-is
    REFERENCE = auto()  # Function, class, module: shared by reference
    RECONSTRUCTED = auto()  # Rebuilt by its copy constructor, members shared
    MAPPING = auto()  # Zero-arg construct, values cloned
    SEQUENCE = auto()  # Zero-arg construct, items cloned in order
    TUPLE = auto()  # Rebuilt from cloned items
    OBJECT = auto()  # Zero-arg construct, own properties cloned

    @property
    def is_shared(self) -> bool:
        """True for kinds that are returned without copying."""
        return self in (Kind.PRIMITIVE, Kind.REFERENCE)


class CloneRegistry:
    """Identity map from original composites to their clones.

    Scoped to a single top-level clone() call and passed explicitly through the
    recursion, so re-entrant clone() calls never see each other's entries.
    Entries keep the original alive next to its clone so `id()` values cannot
    be recycled mid-traversal.

    With `preserve_shared` the entries live until the call ends and an object
    reached through several references maps to one copy. Without it, entries
    are released once their subtree is done and only ancestors (cycles) are
    resolved, keeping the registry as small as the recursion depth.
    """

    def __init__(self, preserve_shared: bool = True) -> None:
        """Initialize an empty registry."""
        self._entries: dict[int, tuple[Any, Any]] = {}
        self._holds: dict[int, int] = {}
        self._preserve_shared = preserve_shared

    def find(self, original: Any) -> Any | None:
        """Return the clone registered for `original`, or None."""
        entry = self._entries.get(id(original))
        return None if entry is None else entry[1]

    def register(self, original: Any, copy: Any) -> None:
        """Record `copy` as the (possibly in-progress) clone of `original`."""
        self._entries[id(original)] = (original, copy)

    def hold(self, original: Any) -> None:
        """Mark `original` as visited before its clone exists.

        Tuples are registered only after their items are cloned, so a cycle
        through a tuple can rebuild it in a nested visit. Each hold defers the
        release of that nested registration until the matching `release()`.
        """
        key = id(original)
        self._holds[key] = self._holds.get(key, 0) + 1

    def release(self, original: Any) -> None:
        """Mark the subtree of `original` as finished.

        The entry is dropped (unless shared references are preserved) once
        every visit holding `original` has been released.
        """
        key = id(original)
        held = self._holds.get(key, 0)
        if held > 1:
            self._holds[key] = held - 1
            return
        self._holds.pop(key, None)
        if not self._preserve_shared:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
        self._holds.clear()

    def __contains__(self, original: Any) -> bool:
        return id(original) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
