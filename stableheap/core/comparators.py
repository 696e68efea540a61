"""Comparator functions used to order queue elements.

A comparator takes two values and returns a negative number, zero or a
positive number. ``default_comparator`` is installed when a queue is built
without one; the other helpers derive new comparators from existing ones.
"""
from __future__ import annotations

import locale
import logging
from decimal import Decimal
from numbers import Real
from typing import Any, Callable

from .errors import ConfigurationError, OrderingError
from .types import Comparator

logger = logging.getLogger("stableheap.comparators")


def _is_number(value: Any) -> bool:
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return value != value


def default_comparator(a: Any, b: Any) -> int:
    """Order numbers by magnitude and strings by the active collation.

    Mixed or unsupported categories raise :class:`OrderingError`. NaN compares
    equal to everything, so ties fall back to insertion order.
    """

    if _is_number(a) and _is_number(b):
        if _is_nan(a) or _is_nan(b):
            return 0
        return (a > b) - (a < b)
    if isinstance(a, str) and isinstance(b, str):
        return locale.strcoll(a, b)
    error = OrderingError(a, b)
    logger.warning(
        "Default comparator cannot order values",
        extra={"left_type": error.left_type, "right_type": error.right_type},
    )
    raise error


def reverse_comparator(comparator: Comparator) -> Comparator:
    """Return a comparator that orders in the opposite direction."""

    def _reversed(a: Any, b: Any) -> int:
        return -comparator(a, b)

    _reversed.__wrapped__ = comparator  # type: ignore[attr-defined]
    return _reversed


def key_comparator(
    key: Callable[[Any], Any],
    comparator: Comparator = default_comparator,
) -> Comparator:
    """Compare ``key(a)`` against ``key(b)`` with ``comparator``."""

    def _by_key(a: Any, b: Any) -> int:
        return comparator(key(a), key(b))

    return _by_key


def configure_collation(locale_name: str | None) -> str:
    """Set the process LC_COLLATE used for text ordering.

    ``None`` keeps the current setting. Returns the effective locale name.
    """

    try:
        if locale_name is None:
            return locale.setlocale(locale.LC_COLLATE)
        effective = locale.setlocale(locale.LC_COLLATE, locale_name)
    except locale.Error as exc:
        raise ConfigurationError(f"Unsupported collation locale: {locale_name}") from exc
    logger.debug("Collation configured", extra={"collation_locale": effective})
    return effective


__all__ = [
    "configure_collation",
    "default_comparator",
    "key_comparator",
    "reverse_comparator",
]
