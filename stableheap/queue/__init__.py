"""Priority queue data structure."""
from .priority_queue import PriorityQueue

__all__ = ["PriorityQueue"]
