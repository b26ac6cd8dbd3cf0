"""
orderedmap - An insertion-ordered mapping with functional combinators.

Collection extends the standard mutable mapping protocol with map, filter,
find, reduce, sort, partition, set operations, random sampling and
positional access, while preserving insertion order and the concrete
subclass of the receiver across every derivation.
"""

from orderedmap.collection import Collection, OrderedMap
from orderedmap.sampling import set_seed
from orderedmap.utils.errors import InvalidArgumentError, OrderedMapError

__version__ = "0.1.0"
__all__ = [
    "Collection",
    "OrderedMap",
    "set_seed",
    "OrderedMapError",
    "InvalidArgumentError",
]
