"""Binary-heap priority queue with stable tie-breaking.

Elements are stored as ``_Entry`` pairs of ``(value, id)`` where ``id`` is a
per-queue insertion counter. Two entries are ordered by the active comparator
first and by ``id`` when the comparator reports a tie, so values that compare
equal are released in FIFO order.

The heap lives in a flat list: for index ``i`` the parent is ``(i - 1) // 2``
and the children are ``2 * i + 1`` and ``2 * i + 2``.

The queue owns no lock and performs no I/O. Concurrent mutation from several
threads must be synchronized by the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, List, Optional

from stableheap.core.comparators import default_comparator
from stableheap.core.enums import ABSENT
from stableheap.core.types import Comparator, Maybe, T

logger = logging.getLogger("stableheap.queue")


@dataclass(slots=True)
class _Entry(Generic[T]):
    value: T
    id: int


class PriorityQueue(Generic[T]):
    """Min-priority queue ordered by a replaceable comparator.

    ``peek`` and ``dequeue`` return :data:`~stableheap.core.enums.ABSENT` on an
    empty queue instead of raising, so a drain loop reads::

        while (item := queue.dequeue()) is not ABSENT:
            handle(item)

    Comparison failures (including :class:`OrderingError` from the default
    comparator) propagate out of whichever operation triggered them.
    """

    def __init__(
        self,
        comparator: Optional[Comparator] = None,
        initial: Optional[Iterable[T]] = None,
    ) -> None:
        self._heap: List[_Entry[T]] = []
        self._comparator: Comparator = comparator if comparator is not None else default_comparator
        self._seq = 0
        if initial is not None:
            for value in initial:
                self.enqueue(value)
            logger.debug("Queue seeded from iterable", extra={"queue_size": len(self._heap)})

    @classmethod
    def from_iterable(
        cls,
        iterable: Iterable[T],
        comparator: Optional[Comparator] = None,
    ) -> "PriorityQueue[T]":
        """Build a queue by enqueueing ``iterable`` in iteration order."""

        return cls(comparator, iterable)

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def peek(self) -> Maybe[T]:
        """Return the minimal element without removing it, or ``ABSENT``."""

        if not self._heap:
            return ABSENT
        return self._heap[0].value

    def to_array(self) -> List[T]:
        """Return a copy of the stored values in heap order (not sorted)."""

        return [entry.value for entry in self._heap]

    def to_sorted_array(self) -> List[T]:
        """Return all values in dequeue order without mutating the queue.

        Entries are cloned with their original ids, so ties resolve exactly as
        they would when draining this queue.
        """

        snapshot: PriorityQueue[T] = PriorityQueue(self._comparator)
        snapshot._heap = [_Entry(entry.value, entry.id) for entry in self._heap]
        snapshot._seq = self._seq
        snapshot._heapify()
        result: List[T] = []
        while snapshot._heap:
            result.append(snapshot._pop_root())
        logger.debug("Sorted snapshot built", extra={"queue_size": len(result)})
        return result

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def enqueue(self, value: T) -> None:
        entry = _Entry(value, self._seq)
        self._seq += 1
        self._heap.append(entry)
        self._sift_up(len(self._heap) - 1)

    def dequeue(self) -> Maybe[T]:
        """Remove and return the minimal element, or ``ABSENT`` if empty."""

        if not self._heap:
            return ABSENT
        return self._pop_root()

    def clear(self) -> None:
        """Drop every element and restart the insertion counter at zero."""

        dropped = len(self._heap)
        self._heap.clear()
        self._seq = 0
        logger.debug("Queue cleared", extra={"dropped": dropped})

    def set_comparator(self, comparator: Comparator) -> None:
        """Install ``comparator`` and rebuild the heap under it."""

        self._comparator = comparator
        self._heapify()
        logger.debug("Comparator replaced", extra={"queue_size": len(self._heap)})

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_sorted_array())

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._heap)})"

    # ------------------------------------------------------------------
    # Heap internals
    # ------------------------------------------------------------------
    def _compare(self, a: _Entry[T], b: _Entry[T]) -> int:
        result = self._comparator(a.value, b.value)
        if result != 0:
            return result
        return a.id - b.id

    def _pop_root(self) -> T:
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top.value

    def _heapify(self) -> None:
        for index in range(len(self._heap) // 2 - 1, -1, -1):
            self._sift_down(index)

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(heap[index], heap[parent]) >= 0:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and self._compare(heap[left], heap[smallest]) < 0:
                smallest = left
            if right < size and self._compare(heap[right], heap[smallest]) < 0:
                smallest = right
            if smallest == index:
                break
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest


__all__ = ["PriorityQueue"]
