"""
Unit tests for the orderedmap sampling module.
"""

import logging
import random

from orderedmap.sampling import (
    get_rng,
    random_choice,
    random_choices,
    random_sample,
    set_seed,
)


class TestGenerator:
    """Tests for the shared generator."""

    def test_get_rng(self):
        """Test the shared generator is a random.Random."""
        assert isinstance(get_rng(), random.Random)

    def test_set_seed_reproducible(self, seeded):
        """Test seeding makes draws repeatable."""
        first = random_choices([1, 2, 3, 4], 10)
        set_seed(1234)
        assert random_choices([1, 2, 3, 4], 10) == first

    def test_set_seed_logs(self, caplog):
        """Test seeding is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="orderedmap"):
            set_seed(7)
        assert "seed set to 7" in caplog.text
        set_seed(None)


class TestDraws:
    """Tests for the draw functions."""

    def test_choice(self):
        """Test choice returns a member."""
        assert random_choice(["a", "b"]) in {"a", "b"}

    def test_choice_empty(self):
        """Test choice on an empty sequence returns None."""
        assert random_choice([]) is None

    def test_choices_with_replacement(self):
        """Test choices may return more elements than the sequence holds."""
        assert random_choices(["x"], 4) == ["x", "x", "x", "x"]

    def test_choices_empty(self):
        """Test choices on an empty sequence."""
        assert random_choices([], 3) == []

    def test_sample_unique(self):
        """Test sample never repeats an element."""
        result = random_sample([1, 2, 3, 4, 5], 3)
        assert len(result) == 3
        assert len(set(result)) == 3

    def test_sample_clipped(self, caplog):
        """Test sample is clipped to the sequence length."""
        with caplog.at_level(logging.DEBUG, logger="orderedmap"):
            result = random_sample([1, 2, 3], 10)
        assert sorted(result) == [1, 2, 3]
        assert "clipped from 10 to 3" in caplog.text
