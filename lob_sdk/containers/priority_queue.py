"""Generic binary-heap priority queue with an injected priority ordering.

The queue stores (item, priority) entries in a flat list kept as a binary
heap by ``heapq``. Each entry orders itself through the comparator given to
the queue at construction, so the same heap code serves min-queues,
max-queues or any other ordering over numeric priorities.

Heap invariant, for every index i > 0:
    compare(priority[i], priority[(i - 1) // 2]) >= 0

Entries with equal priorities come out in no particular order.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Comparator = Callable[[float, float], float]


def ascending(a: float, b: float) -> float:
    """Default ordering: lowest priority value comes out first."""
    return a - b


def descending(a: float, b: float) -> float:
    """Highest priority value comes out first."""
    return b - a


@dataclass(eq=False)
class QueueEntry(Generic[T]):
    """An item waiting in the queue together with its priority."""

    item: T
    priority: float
    compare: Comparator = field(default=ascending, repr=False)

    def __lt__(self, other: QueueEntry[T]) -> bool:
        """Define ordering for the heap through the queue's comparator."""
        return self.compare(self.priority, other.priority) < 0


class PriorityQueue(Generic[T]):
    """Binary min-heap under an arbitrary priority comparator.

    The comparator maps two priorities to a signed number: negative when the
    first should come out before the second. It is fixed for the lifetime of
    the queue.

    Not thread-safe; guard a shared queue with an external lock.
    """

    def __init__(self, compare: Comparator = ascending):
        self._compare = compare
        self._items: list[QueueEntry[T]] = []

    @property
    def compare(self) -> Comparator:
        """The ordering function given at construction."""
        return self._compare

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, item: T, priority: float) -> None:
        """Add ``item`` with ``priority``. O(log n)."""
        heapq.heappush(self._items, QueueEntry(item, priority, self._compare))

    def dequeue(self) -> Optional[T]:
        """Remove and return the item that compares first.

        Returns:
            The root item, or None if the queue is empty
        """
        if not self._items:
            return None
        return heapq.heappop(self._items).item

    def peek(self) -> Optional[T]:
        """Return the item that would be dequeued next without removing it."""
        return self._items[0].item if self._items else None

    def peek_priority(self) -> Optional[float]:
        return self._items[0].priority if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()
