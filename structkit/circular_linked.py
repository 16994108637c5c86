"""Circular singly linked list whose last node links back to the first."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from structkit.singly_linked import Node

__all__ = ["CircularLinkedList"]


class CircularLinkedList:
    """A ring of nodes; the last node's link points at the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    @property
    def head(self) -> Optional[Node]:
        """The first node of the ring, or None when empty."""
        return None if self._tail is None else self._tail.next

    def _link_new(self, value: Any) -> Node:
        node = Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node.data
            if node is self._tail:
                return
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add a value as the new last node."""
        self._tail = self._link_new(value)

    def insert_beginning(self, value: Any) -> None:
        """Add a value as the new first node."""
        self._link_new(value)

    def insert_end(self, value: Any) -> None:
        """Add a value as the new last node."""
        self.append(value)

    def delete_beginning(self) -> Any:
        """Remove the first node and return its value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        first = self._tail.next
        if first is self._tail:
            self._tail = None
        else:
            self._tail.next = first.next
        self._size -= 1
        return first.data

    def delete_end(self) -> Any:
        """Remove the last node and return its value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        last = self._tail
        if last.next is last:
            self._tail = None
        else:
            previous = last.next
            while previous.next is not last:
                previous = previous.next
            previous.next = last.next
            self._tail = previous
        self._size -= 1
        return last.data

    def display(self) -> str:
        """Render the values, each preceded by a tab and a space."""
        return "".join(f"\t {value}" for value in self)