"""Layered defaults: layer chains, merging, and the Defaults base class."""

from classdefaults.layers.classes import Defaults
from classdefaults.layers.core import compose_defaults, merged_defaults
from classdefaults.layers.models import Layer

__all__ = [
    # Models
    "Layer",
    # Core
    "merged_defaults",
    "compose_defaults",
    # Classes
    "Defaults",
]
