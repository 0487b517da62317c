"""A bounded first-in, first-out queue built on the linked list."""

from __future__ import annotations

from typing import Any, Iterator

from nodekit.linked_list import LinkedList

MAX_QUEUE = 20


class QueueFullError(OverflowError):
    """Raised when enqueuing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class Queue:
    """A FIFO queue holding at most ``capacity`` elements."""

    def __init__(self, capacity: int = MAX_QUEUE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items = LinkedList()

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._items.is_empty()

    def is_full(self) -> bool:
        """Return True when the queue has reached its capacity."""
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"

    def __str__(self) -> str:
        if self.is_empty():
            return "Queue is empty"
        return str(self._items)

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.insert_last(data)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items.delete_first()