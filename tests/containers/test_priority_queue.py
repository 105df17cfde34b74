"""
Unit tests for the PriorityQueue.

Tests ordering under the default and custom comparators, the empty-queue
behavior and the heap invariant after mixed operations.
"""

import random

from lob_sdk.containers.priority_queue import PriorityQueue, QueueEntry, ascending, descending


def assert_heap_invariant(queue: PriorityQueue) -> None:
    """Every entry must not compare before its parent."""
    items = queue._items
    for index in range(1, len(items)):
        parent = (index - 1) // 2
        assert queue.compare(items[index].priority, items[parent].priority) >= 0


def drain(queue: PriorityQueue) -> list:
    result = []
    while not queue.is_empty():
        result.append(queue.dequeue())
    return result


class TestQueueEntry:
    """Test QueueEntry ordering."""

    def test_entry_ordering_uses_comparator(self):
        low = QueueEntry("low", 1)
        high = QueueEntry("high", 5)

        assert low < high
        assert not high < low

    def test_entry_ordering_with_descending(self):
        low = QueueEntry("low", 1, descending)
        high = QueueEntry("high", 5, descending)

        assert high < low


class TestPriorityQueue:
    """Test PriorityQueue functionality."""

    def test_dequeue_order(self, empty_queue):
        """Test that the lowest priority comes out first by default."""
        empty_queue.enqueue("A", 5)
        empty_queue.enqueue("B", 1)
        empty_queue.enqueue("C", 3)

        assert empty_queue.dequeue() == "B"
        assert empty_queue.dequeue() == "C"
        assert empty_queue.dequeue() == "A"

    def test_empty_queue_returns_none(self, empty_queue):
        """Test that an empty queue reports absence instead of failing."""
        assert empty_queue.dequeue() is None
        assert empty_queue.peek() is None
        assert empty_queue.peek_priority() is None
        assert empty_queue.is_empty()
        assert empty_queue.size() == 0

    def test_peek_does_not_remove(self, empty_queue):
        empty_queue.enqueue("A", 2)
        empty_queue.enqueue("B", 1)

        assert empty_queue.peek() == "B"
        assert empty_queue.peek_priority() == 1
        assert empty_queue.size() == 2

    def test_single_item(self, empty_queue):
        empty_queue.enqueue("only", 7)

        assert empty_queue.dequeue() == "only"
        assert empty_queue.is_empty()

    def test_size_and_clear(self, empty_queue):
        for i in range(5):
            empty_queue.enqueue(i, i)

        assert empty_queue.size() == 5
        assert len(empty_queue) == 5

        empty_queue.clear()
        assert empty_queue.is_empty()
        assert empty_queue.dequeue() is None

    def test_default_comparator(self, empty_queue):
        assert empty_queue.compare is ascending

    def test_descending_comparator(self):
        """Test a max-queue built from an injected comparator."""
        queue = PriorityQueue(descending)
        for item, priority in [("A", 5), ("B", 1), ("C", 3)]:
            queue.enqueue(item, priority)

        assert drain(queue) == ["A", "C", "B"]

    def test_custom_comparator_lambda(self):
        """Test ordering by distance from a target priority."""
        queue = PriorityQueue(lambda a, b: abs(a - 10) - abs(b - 10))
        for priority in [0, 9, 15, 30, 10]:
            queue.enqueue(priority, priority)

        assert drain(queue) == [10, 9, 15, 0, 30]

    def test_exhaustive_dequeue_is_sorted(self):
        """Test that draining yields non-decreasing priorities."""
        rng = random.Random(1234)
        queue = PriorityQueue()
        priorities = [rng.uniform(-100, 100) for _ in range(500)]
        for priority in priorities:
            queue.enqueue(priority, priority)

        assert drain(queue) == sorted(priorities)

    def test_duplicate_priorities(self, empty_queue):
        """Test that equal priorities all come out, in any order."""
        for item in ["a", "b", "c"]:
            empty_queue.enqueue(item, 1)
        empty_queue.enqueue("first", 0)

        assert empty_queue.dequeue() == "first"
        assert sorted(drain(empty_queue)) == ["a", "b", "c"]

    def test_heap_invariant_after_mixed_operations(self):
        """Test the heap property after interleaved enqueues and dequeues."""
        rng = random.Random(99)
        queue = PriorityQueue()
        for _ in range(1000):
            if rng.random() < 0.6:
                queue.enqueue(object(), rng.randint(0, 50))
            else:
                queue.dequeue()
            assert_heap_invariant(queue)

    def test_items_can_be_any_type(self, empty_queue):
        payload = {"order": "move"}
        empty_queue.enqueue(payload, 1.5)

        assert empty_queue.dequeue() is payload
