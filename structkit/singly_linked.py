"""Singly linked list of integer-like values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

__all__ = ["Node", "SinglyLinkedList", "build_until_sentinel"]


@dataclass(eq=False)
class Node:
    """A self-referential list cell holding one value and a link to the next cell."""

    data: Any
    next: Optional["Node"] = None


class SinglyLinkedList:
    """A list of nodes linked in one direction from a head node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _find(self, target: Any) -> Node:
        for node in self._nodes():
            if node.data == target:
                return node
        raise ValueError(f"{target!r} is not in the list")

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add a value after the last node."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_beginning(self, value: Any) -> None:
        """Put a value in front of the current head."""
        self.head = Node(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def insert_end(self, value: Any) -> None:
        """Put a value after the last node."""
        self.append(value)

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert a value right after the first node holding ``target``."""
        anchor = self._find(target)
        anchor.next = Node(value, anchor.next)
        if anchor is self._tail:
            self._tail = anchor.next
        self._size += 1

    def delete_beginning(self) -> Any:
        """Remove the head node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        removed = self.head
        self.head = removed.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        return removed.data

    def delete_end(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        previous: Optional[Node] = None
        node = self.head
        while node.next is not None:
            previous, node = node, node.next
        if previous is None:
            self.head = None
        else:
            previous.next = None
        self._tail = previous
        self._size -= 1
        return node.data

    def delete_after(self, target: Any) -> Any:
        """Remove the node following the first node holding ``target``; return its value."""
        anchor = self._find(target)
        removed = anchor.next
        if removed is None:
            raise IndexError(f"no node follows {target!r}")
        anchor.next = removed.next
        if removed is self._tail:
            self._tail = anchor
        self._size -= 1
        return removed.data

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[Node] = None
        node = self.head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = previous
            previous, node = node, following
        self.head = previous

    def search(self, value: Any) -> Optional[Node]:
        """Return the first node holding ``value``, or None when there is none."""
        return next((node for node in self._nodes() if node.data == value), None)

    def sort(self) -> None:
        """Sort the values ascending by exchanging data between nodes."""
        for outer in self._nodes():
            inner = outer.next
            while inner is not None:
                if outer.data > inner.data:
                    outer.data, inner.data = inner.data, outer.data
                inner = inner.next

    def display(self) -> str:
        """Render the values as a tab-separated line."""
        return "".join(f"{value}\t " for value in self)


def build_until_sentinel(values: Iterable[Any], sentinel: Any = -1) -> SinglyLinkedList:
    """Build a list from ``values``, stopping at the first ``sentinel``."""
    result = SinglyLinkedList()
    for value in values:
        if value == sentinel:
            break
        result.append(value)
    return result