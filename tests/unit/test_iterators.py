"""
Unit tests for orderedmap iterator helper functions.

Tests the helper functions directly, independent of Collection,
to ensure they behave correctly.
"""

from orderedmap.iterators import (
    # Access
    iter_find,
    # Combination
    iter_merge_items,
    # Grouping
    iter_partition,
    # Ordering
    iter_sorted_by_cmp,
    # Slicing
    iter_take,
    iter_take_last,
)


class TestSlicingMethods:
    """Tests for slicing iterator methods."""

    def test_take(self):
        """Test take functionality."""
        assert iter_take([1, 2, 3, 4, 5], 3) == [1, 2, 3]

    def test_take_more_than_available(self):
        """Test take with n > length."""
        assert iter_take([1, 2], 5) == [1, 2]

    def test_take_zero_or_negative(self):
        """Test take with n <= 0."""
        assert iter_take([1, 2, 3], 0) == []
        assert iter_take([1, 2, 3], -1) == []

    def test_take_consumes_lazily(self):
        """Test take stops pulling after n elements."""
        pulled = []

        def source():
            for i in range(10):
                pulled.append(i)
                yield i

        assert iter_take(source(), 2) == [0, 1]
        assert pulled == [0, 1]

    def test_take_last(self):
        """Test take_last keeps original order."""
        assert iter_take_last([1, 2, 3, 4, 5], 2) == [4, 5]

    def test_take_last_more_than_available(self):
        """Test take_last with n > length."""
        assert iter_take_last([1, 2], 5) == [1, 2]

    def test_take_last_zero(self):
        """Test take_last with n == 0."""
        assert iter_take_last([1, 2, 3], 0) == []


class TestAccessMethods:
    """Tests for access iterator methods."""

    def test_find(self):
        """Test find functionality."""
        assert iter_find([1, 2, 3, 4], lambda x: x > 2) == 3

    def test_find_not_found(self):
        """Test find when no match."""
        assert iter_find([1, 2, 3], lambda x: x > 10) is None


class TestGroupingMethods:
    """Tests for grouping iterator methods."""

    def test_partition(self):
        """Test partition functionality."""
        trues, falses = iter_partition([1, 2, 3, 4, 5], lambda x: x % 2 == 0)
        assert trues == [2, 4]
        assert falses == [1, 3, 5]

    def test_partition_empty(self):
        """Test partition on empty input."""
        assert iter_partition([], lambda x: True) == ([], [])


class TestOrderingMethods:
    """Tests for ordering iterator methods."""

    def test_sorted_by_cmp(self):
        """Test sorted_by_cmp ascending."""
        assert iter_sorted_by_cmp([3, 1, 2], lambda a, b: a - b) == [1, 2, 3]

    def test_sorted_by_cmp_descending(self):
        """Test sorted_by_cmp with a reversed comparator."""
        assert iter_sorted_by_cmp([3, 1, 2], lambda a, b: b - a) == [3, 2, 1]

    def test_sorted_by_cmp_stable(self):
        """Test ties keep their original order."""
        items = [("a", 1), ("b", 0), ("c", 1), ("d", 0)]
        result = iter_sorted_by_cmp(items, lambda x, y: x[1] - y[1])
        assert result == [("b", 0), ("d", 0), ("a", 1), ("c", 1)]


class TestCombinationMethods:
    """Tests for combination iterator methods."""

    def test_merge_items(self):
        """Test merge_items overwrites values but keeps first position."""
        result = iter_merge_items([{"a": 1, "b": 2}, {"a": 3, "c": 4}])
        assert result == [("a", 3), ("b", 2), ("c", 4)]

    def test_merge_items_empty(self):
        """Test merge_items with no mappings."""
        assert iter_merge_items([]) == []
