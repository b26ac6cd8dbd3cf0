"""
orderedmap Utilities Package.

Common utilities for error handling.
"""

from orderedmap.utils.errors import (
    InvalidArgumentError,
    OrderedMapError,
)

__all__ = [
    # Errors
    "OrderedMapError",
    "InvalidArgumentError",
]
