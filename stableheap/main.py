"""Demo entry point: drain a queue of prioritized names.

Run with ``python -m stableheap``. Set ``STABLEHEAP_CONFIG`` to a YAML file to
change the order, collation or log level.
"""
from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from stableheap.config.loader import build_queue, load_queue_config
from stableheap.config.models import QueueConfig
from stableheap.core.enums import ABSENT
from stableheap.core.types import Maybe
from stableheap.queue.priority_queue import PriorityQueue
from stableheap.telemetry import configure_logging

DEMO_ITEMS: Tuple[Tuple[str, int], ...] = (
    ("Joe", 1),
    ("Anne", 1),
    ("Lucius", 1),
    ("June", 0),
    ("Mina", 1),
    ("Lucene", 1),
    ("Carmen", 2),
    ("Mike", 0),
    ("Lisana", 3),
    ("Henry", 1),
    ("Luna", 2),
    ("James", 0),
)


@dataclass(slots=True, frozen=True)
class Item:
    name: str
    priority: int


def by_priority(one: Item, other: Item) -> int:
    return one.priority - other.priority


def demo_items(items: Sequence[Tuple[str, int]] = DEMO_ITEMS) -> List[Item]:
    return [Item(name=name, priority=priority) for name, priority in items]


def drain(queue: PriorityQueue[Item]) -> List[Item]:
    """Dequeue until the queue reports ``ABSENT``."""

    drained: List[Item] = []
    while (item := queue.dequeue()) is not ABSENT:
        drained.append(item)
    return drained


def _load_config() -> QueueConfig:
    env_path = os.environ.get("STABLEHEAP_CONFIG")
    if env_path:
        return load_queue_config(Path(env_path))
    return QueueConfig()


def main() -> None:
    config = _load_config()
    log_dir = Path(config.telemetry.log_dir) if config.telemetry.log_dir else None
    logger = configure_logging(log_dir=log_dir, level=config.telemetry.log_level)
    logger.info("Running priority queue demo", extra={"order": config.order.value})

    queue: PriorityQueue[Item] = build_queue(config, by_priority, demo_items())
    print("Dequeued in priority order")
    for item in drain(queue):
        print(item)

    last: Maybe[Item] = queue.peek()
    print(f"Peek on empty queue: {last!r}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - top-level safety
        print(f"Fatal error: {exc}", file=sys.stderr)
        raise
