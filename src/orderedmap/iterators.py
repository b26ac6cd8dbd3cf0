"""
orderedmap Iterator Support.

This module provides the order-preserving helper functions that
Collection builds its combinators on. Every helper consumes its
iterable exactly once, in iteration order, and returns plain lists
or tuples so callers can decide which container type to build.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Mapping
from functools import cmp_to_key
from itertools import islice
from typing import (
    Any,
    TypeVar,
)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


# =============================================================================
# Slicing Methods
# =============================================================================


def iter_take(iterable: Iterable[T], n: int) -> list[T]:
    """
    Take the first n elements.

    Example:
        iter_take([1, 2, 3, 4, 5], 3) -> [1, 2, 3]
    """
    if n <= 0:
        return []
    return list(islice(iterable, n))


def iter_take_last(iterable: Iterable[T], n: int) -> list[T]:
    """
    Take the last n elements, keeping their original order.

    Example:
        iter_take_last([1, 2, 3, 4, 5], 2) -> [4, 5]
    """
    if n <= 0:
        return []
    return list(deque(iterable, maxlen=n))


# =============================================================================
# Access Methods
# =============================================================================


def iter_find(iterable: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    """
    Find the first element that satisfies the predicate.

    Example:
        iter_find([1, 2, 3, 4], lambda x: x > 2) -> 3
    """
    for item in iterable:
        if predicate(item):
            return item
    return None


# =============================================================================
# Grouping Methods
# =============================================================================


def iter_partition(
    iterable: Iterable[T], predicate: Callable[[T], bool]
) -> tuple[list[T], list[T]]:
    """
    Partition elements into two lists based on a predicate.

    Returns (true_elements, false_elements).

    Example:
        iter_partition([1, 2, 3, 4], lambda x: x % 2 == 0) -> ([2, 4], [1, 3])
    """
    true_list: list[T] = []
    false_list: list[T] = []
    for item in iterable:
        if predicate(item):
            true_list.append(item)
        else:
            false_list.append(item)
    return (true_list, false_list)


# =============================================================================
# Ordering Methods
# =============================================================================


def iter_sorted_by_cmp(iterable: Iterable[T], compare: Callable[[T, T], Any]) -> list[T]:
    """
    Return a stably sorted list using a three-way comparator.

    The comparator returns a negative number when its first argument
    sorts first, zero for ties and a positive number otherwise. Ties
    keep their original relative order.

    Example:
        iter_sorted_by_cmp([3, 1, 2], lambda a, b: a - b) -> [1, 2, 3]
    """
    return sorted(iterable, key=cmp_to_key(compare))


# =============================================================================
# Combination Methods
# =============================================================================


def iter_merge_items(mappings: Iterable[Mapping[K, V]]) -> list[tuple[K, V]]:
    """
    Merge mappings left to right into one list of (key, value) pairs.

    A key seen again takes the later value but keeps its first position,
    the same way dict.update behaves.

    Example:
        iter_merge_items([{"a": 1, "b": 2}, {"a": 3}]) -> [("a", 3), ("b", 2)]
    """
    merged: dict[K, V] = {}
    for mapping in mappings:
        merged.update(mapping.items())
    return list(merged.items())
