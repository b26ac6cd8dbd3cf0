"""
Pytest configuration and shared fixtures for orderedmap tests.
"""

import pytest

from orderedmap import Collection, set_seed


@pytest.fixture
def collection_factory():
    """Factory fixture for creating collections from keyword entries."""

    def _create_collection(**entries) -> Collection:
        return Collection(entries)

    return _create_collection


@pytest.fixture
def numbers() -> Collection[str, int]:
    """The collection {"0": 0, "1": 1, "2": 2, "3": 3, "4": 4}."""
    collection: Collection[str, int] = Collection()
    for i in range(5):
        collection.set(str(i), i)
    return collection


@pytest.fixture
def empty() -> Collection:
    """An empty collection."""
    return Collection()


@pytest.fixture
def seeded():
    """Seed the shared sampling generator for reproducible draws."""
    set_seed(1234)
    yield
    set_seed(None)
