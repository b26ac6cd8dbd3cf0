"""
orderedmap Sampling Module.

Random draws used by Collection.random, random_key and random_value.
"""

from __future__ import annotations

import logging
import random as _random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

logger = logging.getLogger("orderedmap")

# Global random generator
_rng = _random.Random()


def set_seed(seed: int | None) -> None:
    """Set random seed for reproducibility (None reseeds from system entropy)."""
    logger.debug(f"Sampling seed set to {seed}")
    _rng.seed(seed)


def get_rng() -> _random.Random:
    """Return the generator shared by every collection."""
    return _rng


def random_choice(seq: Sequence[T]) -> T | None:
    """Return one random element, or None if the sequence is empty."""
    if not seq:
        return None
    return _rng.choice(seq)


def random_choices(seq: Sequence[T], k: int) -> list[T]:
    """Return k random elements with replacement ([] if seq is empty)."""
    if not seq:
        return []
    return _rng.choices(seq, k=k)


def random_sample(seq: Sequence[T], k: int) -> list[T]:
    """
    Return up to k unique random elements without replacement.

    Unlike random.sample, asking for more elements than seq holds is not
    an error: the draw is clipped to len(seq).
    """
    count = min(k, len(seq))
    if count < k:
        logger.debug(f"Unique sample clipped from {k} to {count} elements")
    return _rng.sample(list(seq), count)
