"""
orderedmap Collection.

Collection is an insertion-ordered mapping with functional combinators
(map, filter, find, reduce, sort, partition, set operations, sampling and
positional access) layered on top of the standard mutable mapping
protocol.

Callbacks receive ``(value, key, collection)``. Reducers receive
``(accumulator, value, key, collection)`` and comparators receive
``(first_value, second_value, first_key, second_key, collection)``.
Queries that find nothing return None.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import (
    Callable,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    MutableMapping,
    ValuesView,
)
from typing import Any, Self, TypeVar

import numpy as np

from orderedmap import sampling
from orderedmap.iterators import (
    iter_find,
    iter_merge_items,
    iter_partition,
    iter_sorted_by_cmp,
    iter_take,
    iter_take_last,
)
from orderedmap.utils.errors import InvalidArgumentError

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

logger = logging.getLogger("orderedmap")

# Marks reduce() calls made without an initial accumulator
_NO_INITIAL: Any = object()


def _values_equal(a: Any, b: Any) -> bool:
    """
    Compare two stored values, collapsing array comparisons to one bool.

    Lists, tuples and mappings are compared element by element so arrays
    nested inside them never reach a bare truth test.
    """
    if a is b:
        return True
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if len(a) != len(b):
            return False
        return all(key in b and _values_equal(value, b[key]) for key, value in a.items())
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if isinstance(a, list) != isinstance(b, list) or len(a) != len(b):
            return False
        return all(_values_equal(x, y) for x, y in zip(a, b, strict=True))
    return bool(a == b)


def _as_amount(amount: Any) -> int:
    """Coerce an amount argument to int, rejecting bools and non-integers."""
    if isinstance(amount, bool):
        raise InvalidArgumentError("Amount must be an integer", "amount", amount)
    try:
        return operator.index(amount)
    except TypeError:
        raise InvalidArgumentError("Amount must be an integer", "amount", amount) from None


class Collection(MutableMapping[K, V]):
    """
    Insertion-ordered mapping with functional combinators.

    Setting an existing key replaces its value in place; the key keeps its
    position. Every operation that builds a new collection does so through
    ``_create_empty()``, so subclasses get instances of their own type back.

    Example:
        >>> c = Collection([("a", 1), ("b", 2), ("c", 3)])
        >>> c.filter(lambda v, *_: v > 1).key_array()
        ['b', 'c']
        >>> c.first_value(-2)
        [2, 3]
    """

    def __init__(self, entries: Mapping[K, V] | Iterable[tuple[K, V]] | None = None) -> None:
        self._data: dict[K, V] = {}
        if entries is not None:
            self.update(entries)

    # =========================================================================
    # Species
    # =========================================================================

    @classmethod
    def species(cls) -> type[Collection]:
        """Return the class derived collections are instantiated from."""
        return cls

    def _create_empty(self) -> Self:
        """
        Create a blank collection of this collection's species.

        Subclasses whose constructor needs extra arguments override this.
        """
        return self.species()()

    def _derive(self, entries: Iterable[tuple[Any, Any]]) -> Self:
        result = self._create_empty()
        for key, value in entries:
            result[key] = value
        return result

    # =========================================================================
    # Mapping Protocol
    # =========================================================================

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._data[key] = value

    def __delitem__(self, key: K) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __reversed__(self) -> Iterator[K]:
        return reversed(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.equals(other)

    def __copy__(self) -> Self:
        return self.clone()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __str__(self) -> str:
        return f"{type(self).__name__} ({len(self._data)})"

    def keys(self) -> KeysView[K]:
        return self._data.keys()

    def values(self) -> ValuesView[V]:
        return self._data.values()

    def items(self) -> ItemsView[K, V]:
        return self._data.items()

    # =========================================================================
    # Base Operations
    # =========================================================================

    def set(self, key: K, value: V) -> Self:
        """Insert or replace an entry and return this collection."""
        self[key] = value
        return self

    def get(self, key: K, default: Any = None) -> V | None:
        """Return the value stored under key, or default (None) if absent."""
        return self._data.get(key, default)

    def has(self, key: K) -> bool:
        """Return True if key is present."""
        return key in self

    def delete(self, key: K) -> bool:
        """Remove key and report whether it was present."""
        if key not in self:
            return False
        del self[key]
        return True

    def clear(self) -> None:
        """Remove every entry."""
        self._data.clear()

    @property
    def size(self) -> int:
        """Number of entries currently stored."""
        return len(self._data)

    # =========================================================================
    # Transformation
    # =========================================================================

    def map(self, fn: Callable[[V, K, Self], T]) -> list[T]:
        """
        Apply fn to every entry and return the results as a list.

        Example:
            Collection({"a": 1, "b": 2}).map(lambda v, *_: v * 2) -> [2, 4]
        """
        return [fn(value, key, self) for key, value in self._data.items()]

    def map_values(self, fn: Callable[[V, K, Self], T]) -> Collection[K, T]:
        """
        Return a collection with the same keys and each value replaced by fn's result.

        Example:
            Collection({"a": 1}).map_values(lambda v, *_: v + 1) -> Collection({"a": 2})
        """
        return self._derive((key, fn(value, key, self)) for key, value in self._data.items())

    def flat_map(self, fn: Callable[[V, K, Self], Mapping[Any, Any]]) -> Collection[Any, Any]:
        """
        Merge the mappings fn produces for each entry into one collection.

        Later keys overwrite earlier ones but keep their first position.

        Raises:
            InvalidArgumentError: If fn returns something other than a mapping
        """
        produced = self.map(fn)
        for result in produced:
            if not isinstance(result, Mapping):
                raise InvalidArgumentError(
                    "flat_map callback must return a mapping", "result", result
                )
        return self._derive(iter_merge_items(produced))

    def filter(self, fn: Callable[[V, K, Self], bool]) -> Self:
        """Return a collection of the entries fn accepts."""
        return self._derive(
            (key, value) for key, value in self._data.items() if fn(value, key, self)
        )

    def partition(self, fn: Callable[[V, K, Self], bool]) -> tuple[Self, Self]:
        """
        Split entries into (passed, failed) collections.

        Example:
            Collection({"a": 1, "b": 2}).partition(lambda v, *_: v > 1)
                -> (Collection({"b": 2}), Collection({"a": 1}))
        """
        passed, failed = iter_partition(
            self._data.items(), lambda item: fn(item[1], item[0], self)
        )
        return (self._derive(passed), self._derive(failed))

    # =========================================================================
    # Search and Predicates
    # =========================================================================

    def find(self, fn: Callable[[V, K, Self], bool]) -> tuple[K, V] | None:
        """Return the first (key, value) entry fn accepts, or None."""
        return iter_find(self._data.items(), lambda item: fn(item[1], item[0], self))

    def find_key(self, fn: Callable[[V, K, Self], bool]) -> K | None:
        """Return the key of the first entry fn accepts, or None."""
        entry = self.find(fn)
        return None if entry is None else entry[0]

    def find_value(self, fn: Callable[[V, K, Self], bool]) -> V | None:
        """Return the value of the first entry fn accepts, or None."""
        entry = self.find(fn)
        return None if entry is None else entry[1]

    def any(self, fn: Callable[[V, K, Self], bool]) -> bool:
        """Return True as soon as fn accepts an entry."""
        return any(fn(value, key, self) for key, value in self._data.items())

    some = any

    def every(self, fn: Callable[[V, K, Self], bool]) -> bool:
        """Return False as soon as fn rejects an entry."""
        return all(fn(value, key, self) for key, value in self._data.items())

    def reduce(self, fn: Callable[[Any, V, K, Self], Any], initial: Any = _NO_INITIAL) -> Any:
        """
        Fold entries left to right into a single accumulator.

        Without an initial value the first entry's value seeds the
        accumulator and folding starts at the second entry. Reducing an
        empty collection without an initial value returns None.

        Example:
            Collection({"a": 1, "b": 2, "c": 3}).reduce(lambda acc, v, *_: acc + v) -> 6
        """
        entries = iter(self._data.items())
        if initial is _NO_INITIAL:
            first = next(entries, None)
            if first is None:
                return None
            accumulator = first[1]
        else:
            accumulator = initial
        for key, value in entries:
            accumulator = fn(accumulator, value, key, self)
        return accumulator

    # =========================================================================
    # Comparison and Set Operations
    # =========================================================================

    def equals(self, other: Mapping[K, V]) -> bool:
        """
        Return True if other holds exactly the same keys with equal values.

        Order is not compared. NumPy array values are compared element-wise.
        """
        if self is other:
            return True
        if len(self._data) != len(other):
            return False
        for key, value in self._data.items():
            if key not in other or not _values_equal(value, other[key]):
                return False
        return True

    def difference(self, other: Mapping[K, V]) -> Self:
        """
        Return the entries whose key is in exactly one of the two mappings.

        Entries only in this collection come first, followed by entries only
        in other, each side keeping its own order.
        """
        only_self = [(key, value) for key, value in self._data.items() if key not in other]
        only_other = [(key, other[key]) for key in other if key not in self._data]
        return self._derive(only_self + only_other)

    def intersect(self, other: Mapping[K, V]) -> Self:
        """Return the keys present in both, in this collection's order, with other's values."""
        return self._derive((key, other[key]) for key in self._data if key in other)

    def concat(self, *others: Mapping[K, V]) -> Self:
        """
        Merge this collection with others, left to right.

        A duplicate key takes the later value but keeps its earliest position.
        """
        return self._derive(iter_merge_items([self._data, *others]))

    # =========================================================================
    # Ordering
    # =========================================================================

    def _sorted_items(
        self, fn: Callable[[V, V, K, K, Self], Any]
    ) -> list[tuple[K, V]]:
        return iter_sorted_by_cmp(
            self._data.items(), lambda a, b: fn(a[1], b[1], a[0], b[0], self)
        )

    def sort(self, fn: Callable[[V, V, K, K, Self], Any]) -> Self:
        """
        Reorder this collection in place with a three-way comparator.

        The sort is stable: entries the comparator ties keep their order.
        Entries are removed and re-inserted through ``__delitem__`` and
        ``__setitem__``, so subclasses overriding them see the reorder.
        """
        entries = self._sorted_items(fn)
        for key, _ in entries:
            del self[key]
        for key, value in entries:
            self[key] = value
        logger.debug(f"Sorted {len(entries)} entries in place")
        return self

    def sorted(self, fn: Callable[[V, V, K, K, Self], Any]) -> Self:
        """Return a sorted copy, leaving this collection untouched."""
        return self._derive(self._sorted_items(fn))

    # =========================================================================
    # Mutation and Side Effects
    # =========================================================================

    def sweep(self, fn: Callable[[V, K, Self], bool]) -> int:
        """
        Delete every entry fn accepts and return how many were removed.

        Keys are snapshotted first; entries fn itself removes are skipped.
        """
        removed = 0
        for key in list(self._data):
            if key not in self._data:
                continue
            if fn(self._data[key], key, self):
                del self[key]
                removed += 1
        logger.debug(f"Swept {removed} entries, {len(self._data)} remain")
        return removed

    def each(self, fn: Callable[[V, K, Self], Any]) -> Self:
        """Call fn once per entry and return this collection."""
        for key in list(self._data):
            if key in self._data:
                fn(self._data[key], key, self)
        return self

    def tap(self, fn: Callable[[Self], Any]) -> Self:
        """Call fn with the whole collection and return it unchanged."""
        fn(self)
        return self

    def clone(self) -> Self:
        """Return an independent shallow copy of the same species."""
        return self._derive(self._data.items())

    # =========================================================================
    # Materialization
    # =========================================================================

    def array(self) -> list[tuple[K, V]]:
        """Return every (key, value) entry in order."""
        return list(self._data.items())

    def key_array(self) -> list[K]:
        """Return every key in order."""
        return list(self._data)

    def value_array(self) -> list[V]:
        """Return every value in order."""
        return list(self._data.values())

    # =========================================================================
    # Positional Access
    # =========================================================================

    def _boundary(self, view: Any, amount: Any, from_start: bool) -> Any:
        if amount is None:
            if not self._data:
                return None
            return next(iter(view)) if from_start else next(reversed(view))
        amount = _as_amount(amount)
        if amount < 0:
            from_start, amount = not from_start, -amount
        return iter_take(view, amount) if from_start else iter_take_last(view, amount)

    def first(self, amount: int | None = None) -> tuple[K, V] | list[tuple[K, V]] | None:
        """
        Return the first entry, or a list of the first ``amount`` entries.

        A negative amount takes that many entries from the end instead.

        Example:
            Collection({"a": 1, "b": 2, "c": 3}).first(-2) -> [("b", 2), ("c", 3)]
        """
        return self._boundary(self._data.items(), amount, from_start=True)

    def first_key(self, amount: int | None = None) -> K | list[K] | None:
        """Return the first key, or up to ``amount`` keys from the start."""
        return self._boundary(self._data.keys(), amount, from_start=True)

    def first_value(self, amount: int | None = None) -> V | list[V] | None:
        """Return the first value, or up to ``amount`` values from the start."""
        return self._boundary(self._data.values(), amount, from_start=True)

    def last(self, amount: int | None = None) -> tuple[K, V] | list[tuple[K, V]] | None:
        """
        Return the last entry, or a list of the last ``amount`` entries.

        The list keeps the collection's order. A negative amount takes that
        many entries from the start instead.
        """
        return self._boundary(self._data.items(), amount, from_start=False)

    def last_key(self, amount: int | None = None) -> K | list[K] | None:
        """Return the last key, or up to ``amount`` keys from the end."""
        return self._boundary(self._data.keys(), amount, from_start=False)

    def last_value(self, amount: int | None = None) -> V | list[V] | None:
        """Return the last value, or up to ``amount`` values from the end."""
        return self._boundary(self._data.values(), amount, from_start=False)

    # =========================================================================
    # Random Sampling
    # =========================================================================

    def _draw(self, view: Any, amount: Any, unique: bool) -> Any:
        pool = list(view)
        if amount is None:
            return sampling.random_choice(pool)
        amount = _as_amount(amount)
        if amount < 0:
            raise InvalidArgumentError("Amount must not be negative", "amount", amount)
        if unique:
            return sampling.random_sample(pool, amount)
        return sampling.random_choices(pool, amount)

    def random(
        self, amount: int | None = None, *, unique: bool = False
    ) -> tuple[K, V] | list[tuple[K, V]] | None:
        """
        Return a random entry, or a list of ``amount`` random entries.

        Draws are independent, so the same entry may appear more than once.
        Pass ``unique=True`` to draw without replacement; the result is then
        clipped to the collection's size.

        Raises:
            InvalidArgumentError: If amount is negative
        """
        return self._draw(self._data.items(), amount, unique)

    def random_key(self, amount: int | None = None, *, unique: bool = False) -> K | list[K] | None:
        """Return a random key, or ``amount`` keys drawn with replacement."""
        return self._draw(self._data.keys(), amount, unique)

    def random_value(
        self, amount: int | None = None, *, unique: bool = False
    ) -> V | list[V] | None:
        """Return a random value, or ``amount`` values drawn with replacement."""
        return self._draw(self._data.values(), amount, unique)


# Alias matching the container's generic name
OrderedMap = Collection
