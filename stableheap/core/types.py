"""Shared type aliases for the queue and comparator contracts."""
from __future__ import annotations

from typing import Callable, TypeAlias, TypeVar, Union

from .enums import Absent

T = TypeVar("T")

Comparator: TypeAlias = Callable[[T, T], int]
Maybe: TypeAlias = Union[T, Absent]
