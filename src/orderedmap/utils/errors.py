"""
Error types for orderedmap collections.
"""

from typing import Any, Optional


class OrderedMapError(Exception):
    """Base exception for all orderedmap errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class InvalidArgumentError(OrderedMapError, ValueError):
    """
    Raised when an argument falls outside the domain a method accepts.

    This error is raised when:
    - A sampling amount is negative
    - An amount is not an integer
    - A flat_map callback produces something other than a mapping

    Lookups that find nothing never raise this; they return None.
    """

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Any = None,
    ) -> None:
        """
        Initialize the error.

        Args:
            message: Error message
            argument: Name of the offending parameter
            value: The rejected value
        """
        self.argument = argument
        self.value = value
        super().__init__(message)

    def _format_message(self) -> str:
        if self.argument is None:
            return self.message
        return f"{self.message} (got {self.argument}={self.value!r})"
