from __future__ import annotations

from typing import Callable, List

import pytest

from stableheap.main import DEMO_ITEMS, Item, by_priority
from stableheap.queue.priority_queue import PriorityQueue


@pytest.fixture
def scenario_items() -> List[Item]:
    return [Item(name=name, priority=priority) for name, priority in DEMO_ITEMS]


@pytest.fixture
def item_queue(scenario_items: List[Item]) -> PriorityQueue[Item]:
    queue: PriorityQueue[Item] = PriorityQueue(by_priority)
    for item in scenario_items:
        queue.enqueue(item)
    return queue


@pytest.fixture
def heap_property_checker() -> Callable[[PriorityQueue], None]:
    """Assert every parent orders before or equal to its children."""

    def _check(queue: PriorityQueue) -> None:
        heap = queue._heap
        for index in range(1, len(heap)):
            parent = (index - 1) // 2
            assert queue._compare(heap[parent], heap[index]) <= 0, (
                f"heap property violated at index {index}"
            )

    return _check


class RecordingComparator:
    """Comparator that counts calls and can be switched to fail."""

    def __init__(self) -> None:
        self.calls = 0
        self.fail = False

    def __call__(self, a: int, b: int) -> int:
        self.calls += 1
        if self.fail:
            raise RuntimeError("comparison refused")
        return a - b


@pytest.fixture
def recording_comparator() -> RecordingComparator:
    return RecordingComparator()
