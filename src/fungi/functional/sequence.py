"""Indexed combinators over ordered sequences.

This module provides the sequential higher-order functions at the heart of
fungi. Every combinator walks its input once, from index 0 to ``len - 1``,
and hands each callback the position alongside the element. Inputs are never
mutated; collection-producing combinators always return a new ``list``.

Combinators fall into two groups:
    - **Fallible**: :func:`process` and :func:`iterate` treat any non-``None``
      value returned by a step or callback as an error, stop immediately and
      hand that value back unchanged.
    - **Total**: :func:`map_`, :func:`filter_`, :func:`reduce`, :func:`find`,
      :func:`every` and :func:`some` have no error channel. Exceptions raised
      by callbacks propagate to the caller as-is.

Examples:
    >>> from fungi.functional.sequence import filter_, find, every, some
    >>>
    >>> numbers = [1, 2, 3, 4]
    >>> is_even = lambda i, x: x % 2 == 0
    >>> filter_(numbers, is_even)
    [2, 4]
    >>> find(numbers, is_even)
    (2, True)
    >>> every(numbers, is_even), some(numbers, is_even)
    (False, True)
"""

import typing as tp

from fungi.core.types import (
    IndexedCallback,
    Predicate,
    Reducer,
    Step,
    Transform,
)
from fungi.logger.logger import logger

__all__ = [
    "process",
    "iterate",
    "map_",
    "transform",
    "filter_",
    "reduce",
    "find",
    "every",
    "some",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
E = tp.TypeVar("E")


def process(*steps: Step[E]) -> tp.Optional[E]:
    """Run zero-argument steps in order and stop at the first error.

    Args:
        *steps: Callables taking no arguments. Each returns ``None`` on
            success or an error value on failure.

    Returns:
        The first non-``None`` value returned by a step, or ``None`` if every
        step succeeded. Steps after a failing one are never called.
    """
    for step in steps:
        err = step()
        if err is not None:
            return err
    return None


def iterate(
    sequence: tp.Sequence[T], callback: IndexedCallback[T, E]
) -> tp.Optional[E]:
    """Call ``callback(i, item)`` for each element, stopping at the first error.

    Args:
        sequence: Ordered elements to visit.
        callback: Receives the index and element; returns ``None`` to
            continue or an error value to stop.

    Returns:
        The first error returned by ``callback``, or ``None`` if the whole
        sequence was visited.
    """
    for i, item in enumerate(sequence):
        err = callback(i, item)
        if err is not None:
            return err
    return None


def map_(sequence: tp.Sequence[T], transform: Transform[T, U]) -> tp.List[U]:
    """Build a new list where element ``i`` is ``transform(i, sequence[i])``.

    The result always has the same length as ``sequence``.
    """
    return [transform(i, item) for i, item in enumerate(sequence)]


# Same function under its descriptive name
transform = map_


def filter_(sequence: tp.Sequence[T], predicate: Predicate[T]) -> tp.List[T]:
    """Keep the elements for which ``predicate(i, item)`` holds.

    Order is preserved. No match (or an empty input) gives an empty list.
    """
    return [item for i, item in enumerate(sequence) if predicate(i, item)]


def reduce(
    sequence: tp.Sequence[T], initial: U, reducer: Reducer[U, T]
) -> U:
    """Fold ``sequence`` from left to right into a single value.

    Args:
        sequence: Ordered elements to fold.
        initial: Starting accumulator, returned as-is for an empty input.
        reducer: Called as ``reducer(i, acc, item)``; its result becomes the
            next accumulator.

    Returns:
        The final accumulator.
    """
    acc = initial
    for i, item in enumerate(sequence):
        acc = reducer(i, acc, item)
    return acc


def find(
    sequence: tp.Sequence[T],
    predicate: Predicate[T],
    default: tp.Optional[T] = None,
) -> tp.Tuple[tp.Optional[T], bool]:
    """Return the first element matching ``predicate`` with a found flag.

    Scanning stops at the first match.

    Args:
        sequence: Ordered elements to search.
        predicate: Receives the index and element.
        default: Value returned in place of an element when nothing matches.

    Returns:
        ``(item, True)`` for the first match, otherwise ``(default, False)``.
    """
    for i, item in enumerate(sequence):
        if predicate(i, item):
            logger.debug("find matched at index %d", i)
            return item, True
    return default, False


def every(sequence: tp.Sequence[T], predicate: Predicate[T]) -> bool:
    """Check that ``predicate`` holds for all elements.

    Stops at the first element that fails. An empty sequence gives ``True``.
    """
    for i, item in enumerate(sequence):
        if not predicate(i, item):
            logger.debug("every failed at index %d", i)
            return False
    return True


def some(sequence: tp.Sequence[T], predicate: Predicate[T]) -> bool:
    """Check that ``predicate`` holds for at least one element.

    Stops at the first match. An empty sequence gives ``False``.
    """
    for i, item in enumerate(sequence):
        if predicate(i, item):
            logger.debug("some matched at index %d", i)
            return True
    return False
