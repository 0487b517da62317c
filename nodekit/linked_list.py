"""A singly linked list of values with positional and value-based editing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One cell of a linked list."""

    data: Any
    next: Optional["Node"] = field(default=None, repr=False)


class LinkedListError(Exception):
    """Base class for linked list errors."""


class EmptyListError(LinkedListError, IndexError):
    """Raised when an operation needs a non-empty list."""


class NodeNotFoundError(LinkedListError, ValueError):
    """Raised when a node with the requested data, or its neighbour, is missing."""


class InvalidPositionError(LinkedListError, IndexError):
    """Raised when a 1-based position is outside the list."""


class LinkedList:
    """A singly linked list addressed by value or by 1-based position."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items or ():
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def is_empty(self) -> bool:
        """Return True when the list holds no nodes."""
        return self.head is None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self))

    def __contains__(self, data: Any) -> bool:
        return self.find_node(data) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __str__(self) -> str:
        if self.is_empty():
            return "list empty"
        return "->".join(f"[{data}]" for data in self)

    def format_reverse(self) -> str:
        """Render the list from last to first, ending with NULL."""
        if self.is_empty():
            return "list empty"
        return "".join(f"[{data}]->" for data in reversed(self)) + "NULL"

    def find_node(self, data: Any) -> Optional[Node]:
        """Return the first node holding ``data``, or None."""
        return next((node for node in self._nodes() if node.data == data), None)

    def find_previous(self, node: Optional[Node]) -> Optional[Node]:
        """Return the node directly before ``node``, or None if there is none."""
        if node is None:
            return None
        return next((n for n in self._nodes() if n.next is node), None)

    def clear(self) -> None:
        """Remove every node."""
        node = self.head
        while node is not None:
            node.next, node = None, node.next
        self.head = None

    def _require_nonempty(self) -> None:
        if self.is_empty():
            raise EmptyListError("list is empty")

    def _require_node(self, data: Any) -> Node:
        node = self.find_node(data)
        if node is None:
            raise NodeNotFoundError(f"node with data {data} not found")
        return node

    def _check_position(self, position: int) -> None:
        if position < 1 or position > len(self):
            raise InvalidPositionError(f"invalid position {position}")

    def insert_first(self, data: Any) -> None:
        """Insert ``data`` at the front."""
        self.head = Node(data, self.head)

    def insert_last(self, data: Any) -> None:
        """Append ``data`` at the end."""
        if self.head is None:
            self.head = Node(data)
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = Node(data)

    def insert_after(self, prev_data: Any, data: Any) -> None:
        """Insert ``data`` right after the first node holding ``prev_data``."""
        prev = self._require_node(prev_data)
        prev.next = Node(data, prev.next)

    def insert_before(self, next_data: Any, data: Any) -> None:
        """Insert ``data`` right before the first node holding ``next_data``."""
        target = self._require_node(next_data)
        prev = self.find_previous(target)
        if prev is None:
            self.head = Node(data, target)
        else:
            prev.next = Node(data, target)

    def insert_at(self, position: int, data: Any) -> None:
        """Insert ``data`` so that it occupies 1-based ``position``.

        The position must refer to an existing node.
        """
        self._check_position(position)
        if position == 1:
            self.insert_first(data)
            return
        prev = self.head
        for _ in range(position - 2):
            prev = prev.next
        prev.next = Node(data, prev.next)

    def delete_first(self) -> Any:
        """Remove the first node and return its data."""
        self._require_nonempty()
        node = self.head
        self.head = node.next
        node.next = None
        return node.data

    def delete_last(self) -> Any:
        """Remove the last node and return its data."""
        self._require_nonempty()
        prev: Optional[Node] = None
        node = self.head
        while node.next is not None:
            prev, node = node, node.next
        if prev is None:
            self.head = None
        else:
            prev.next = None
        return node.data

    def delete_after(self, prev_data: Any) -> Any:
        """Remove the node following the one holding ``prev_data``; return its data."""
        self._require_nonempty()
        prev = self._require_node(prev_data)
        victim = prev.next
        if victim is None:
            raise NodeNotFoundError(f"node with data {prev_data} is the last node")
        prev.next = victim.next
        victim.next = None
        return victim.data

    def delete_before(self, next_data: Any) -> Any:
        """Remove the node preceding the one holding ``next_data``; return its data."""
        self._require_nonempty()
        target = self._require_node(next_data)
        victim = self.find_previous(target)
        if victim is None:
            raise NodeNotFoundError(f"node with data {next_data} is the first node")
        before = self.find_previous(victim)
        if before is None:
            self.head = target
        else:
            before.next = target
        victim.next = None
        return victim.data

    def delete_value(self, data: Any) -> Any:
        """Remove the first node holding ``data`` and return that data."""
        self._require_nonempty()
        node = self._require_node(data)
        prev = self.find_previous(node)
        if prev is None:
            self.head = node.next
        else:
            prev.next = node.next
        node.next = None
        return node.data

    def delete_at(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its data."""
        self._require_nonempty()
        self._check_position(position)
        if position == 1:
            return self.delete_first()
        prev = self.head
        for _ in range(position - 2):
            prev = prev.next
        node = prev.next
        prev.next = node.next
        node.next = None
        return node.data