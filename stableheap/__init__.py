"""Stable binary-heap priority queue.

The package is split into small subpackages (core, queue, config, telemetry,
helpers). ``PriorityQueue`` and the ``ABSENT`` marker are re-exported here so
callers rarely need to reach into the submodules.
"""

from .core.comparators import default_comparator, key_comparator, reverse_comparator
from .core.enums import ABSENT, Absent, SortOrder
from .core.errors import ConfigurationError, CoreError, OrderingError
from .queue.priority_queue import PriorityQueue

__all__ = [
    "ABSENT",
    "Absent",
    "ConfigurationError",
    "CoreError",
    "OrderingError",
    "PriorityQueue",
    "SortOrder",
    "default_comparator",
    "key_comparator",
    "reverse_comparator",
]
