"""A last-in, first-out stack built on the linked list."""

from __future__ import annotations

from typing import Any, Iterator

from nodekit.linked_list import EmptyListError, LinkedList


class StackEmptyError(EmptyListError):
    """Raised when popping from an empty stack."""


class Stack:
    """A LIFO stack whose top is the head of a linked list."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return self._items.is_empty()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(top_first={list(self)!r})"

    def __str__(self) -> str:
        if self.is_empty():
            return "Stack is empty"
        return str(self._items)

    def push(self, data: Any) -> None:
        """Place ``data`` on top of the stack."""
        self._items.insert_first(data)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.delete_first()