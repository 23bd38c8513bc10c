"""Clone functionality: kinds, registry, reconstruction table, and the deep clone."""

from classdefaults.core.clone.core import clone, deep_equal
from classdefaults.core.clone.models import CloneRegistry, Kind
from classdefaults.core.clone.operations import (
    BLANK_FACTORIES,
    RECONSTRUCTORS,
    classify,
    construct,
)

__all__ = [
    # Models
    "Kind",
    "CloneRegistry",
    # Operations
    "RECONSTRUCTORS",
    "BLANK_FACTORIES",
    "classify",
    "construct",
    # Core
    "clone",
    "deep_equal",
]
