"""YAML loader and queue factory for the config subsystem."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Optional

import yaml

from stableheap.core.comparators import configure_collation, default_comparator, reverse_comparator
from stableheap.core.enums import SortOrder
from stableheap.core.errors import ConfigurationError
from stableheap.core.types import Comparator, T
from stableheap.queue.priority_queue import PriorityQueue

from .models import QueueConfig


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def load_queue_config(path: Path | str) -> QueueConfig:
    """Load a queue YAML file (``order``, ``collation_locale``, ``telemetry``)."""

    data = _read_yaml(Path(path))
    return QueueConfig.model_validate(data)


def build_queue(
    config: QueueConfig,
    comparator: Optional[Comparator] = None,
    initial: Optional[Iterable[T]] = None,
) -> PriorityQueue[T]:
    """Create a queue honoring ``config``.

    The collation locale is applied before any element is enqueued, and the
    comparator (default or supplied) is reversed for descending order.
    """

    configure_collation(config.collation_locale)
    effective = comparator if comparator is not None else default_comparator
    if config.order is SortOrder.DESCENDING:
        effective = reverse_comparator(effective)
    return PriorityQueue(effective, initial)
