"""fungi: indexed higher-order functions over ordered sequences."""

from fungi.functional.sequence import (
    every,
    filter_,
    find,
    iterate,
    map_,
    process,
    reduce,
    some,
    transform,
)

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

__version__ = "0.1.0"
