"""A multiple-producer, single-consumer FIFO queue."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class QueueEmpty(Exception):
    """Raised when dequeuing from an empty queue."""


class MpscQueue(Generic[T]):
    """FIFO queue that may be fed from many threads and drained by one.

    ``enqueue`` is safe to call concurrently from any number of threads;
    ``dequeue`` and ``empty`` are meant to be used by a single consumer.
    """

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Put an item at the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front of the queue.

        Raises QueueEmpty if there is nothing to take.
        """
        try:
            return self._items.popleft()
        except IndexError:
            raise QueueEmpty("queue is empty") from None

    def empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)