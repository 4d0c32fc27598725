"""Reusable type definitions for fungi callbacks.

This module provides type aliases that describe the callables accepted by the
combinators in :mod:`fungi.functional.sequence`, so signatures stay short and
consistent across the package.

Type Aliases:
    Index: A non-negative position within a sequence.
    Step: A zero-argument callable returning ``None`` or an error value.
    IndexedCallback: ``(index, item)`` callable returning ``None`` or an error.
    Transform: ``(index, item)`` callable producing a new value.
    Predicate: ``(index, item)`` callable producing a truth value.
    Reducer: ``(index, acc, item)`` callable producing the next accumulator,
        parameterised as ``Reducer[Acc, Item]``.
"""

from typing import Annotated, Any, Callable, Optional, TypeVar

import annotated_types as at

__all__ = [
    "Index",
    "Step",
    "IndexedCallback",
    "Transform",
    "Predicate",
    "Reducer",
]

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

# Position within a sequence, counted from zero
Index = Annotated[int, at.Ge(0)]

Step = Callable[[], Optional[E]]

IndexedCallback = Callable[[Index, T], Optional[E]]

Transform = Callable[[Index, T], U]

# Results are read by truthiness, so anything goes
Predicate = Callable[[Index, T], Any]

Reducer = Callable[[Index, U, T], U]
