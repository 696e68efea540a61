"""Enumerations shared across the library."""
from __future__ import annotations

from enum import Enum


class Absent(Enum):
    """Marker returned by ``peek``/``dequeue`` when the queue is empty.

    A dedicated enum member cannot collide with a stored value, so ``None``,
    ``0`` and ``""`` are all legitimate queue elements.
    """

    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT


class SortOrder(str, Enum):
    """Direction in which a configured queue releases elements."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
