"""Small stateless helpers for dictionaries and nested lookups.

None of these touch the queue; they are convenience functions commonly used
to shape the items callers enqueue.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Hashable


def exclude_key(data: Mapping[Hashable, Any], key: Hashable) -> Dict[Hashable, Any]:
    """Return a copy of ``data`` without ``key`` (missing keys are fine)."""

    return {k: v for k, v in data.items() if k != key}


def remove_none(data: Mapping[Hashable, Any]) -> Dict[Hashable, Any]:
    """Return a copy of ``data`` without entries whose value is ``None``."""

    return {k: v for k, v in data.items() if v is not None}


def pluck_deep(path: str) -> Callable[[Any], Any]:
    """Build a getter that follows a dotted ``path``.

    Each segment uses item access on mappings and attribute access on other
    objects, so ``pluck_deep("owner.name")`` works for dicts and dataclasses.
    A missing segment raises ``KeyError`` or ``AttributeError``.
    """

    segments = path.split(".")

    def _pluck(obj: Any) -> Any:
        current = obj
        for segment in segments:
            if isinstance(current, Mapping):
                current = current[segment]
            else:
                current = getattr(current, segment)
        return current

    return _pluck


__all__ = ["exclude_key", "pluck_deep", "remove_none"]
