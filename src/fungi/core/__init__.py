"""Shared type aliases and configuration."""

from fungi.core.config import Settings
from fungi.core.types import Index, IndexedCallback, Predicate, Reducer, Step, Transform

__all__ = [
    "Settings",
    "Index",
    "Step",
    "IndexedCallback",
    "Transform",
    "Predicate",
    "Reducer",
]
