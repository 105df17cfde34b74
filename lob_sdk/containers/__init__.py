"""Generic containers."""

from .priority_queue import PriorityQueue, QueueEntry, Comparator, ascending, descending

__all__ = [
    "PriorityQueue",
    "QueueEntry",
    "Comparator",
    "ascending",
    "descending",
]
