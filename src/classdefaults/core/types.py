"""Core type definitions for classdefaults."""

type Cloned[T] = T
"""Type alias indicating a value is an independent deep copy.

When you see `Cloned[T]` in a return type, mutating the returned value (or
anything reachable from it, functions aside) never affects the value it was
cloned from.
"""
