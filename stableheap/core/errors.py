"""Error hierarchy for the queue library.

Empty reads are not errors (they return ``ABSENT``); the classes below cover
values that cannot be ordered and bad configuration.
"""
from __future__ import annotations


class CoreError(Exception):
    """Base class for all custom exceptions in the library."""


class OrderingError(CoreError, TypeError):
    """Raised when the default comparator meets values it cannot order.

    The error is only raised when two values are actually compared, never at
    insertion time. ``comparator_supplied`` is always ``False`` here: a caller
    supplied comparator raises its own exceptions.
    """

    def __init__(self, left: object, right: object) -> None:
        self.left_type = type(left).__name__
        self.right_type = type(right).__name__
        self.comparator_supplied = False
        super().__init__(
            "No comparator provided for element type; unsupported type for default "
            f"ordering: {self.left_type!r} vs {self.right_type!r}. Provide a comparator."
        )


class ConfigurationError(CoreError):
    """Raised when configuration files are missing or invalid."""
