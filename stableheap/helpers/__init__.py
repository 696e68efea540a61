"""Stateless helper functions independent of the queue."""
from .mappings import exclude_key, pluck_deep, remove_none

__all__ = ["exclude_key", "pluck_deep", "remove_none"]
