"""Doubly linked list with links in both directions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

__all__ = ["DoublyLinkedList"]


@dataclass(eq=False)
class _Cell:
    data: Any
    prev: Optional["_Cell"] = field(default=None, repr=False)
    next: Optional["_Cell"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A list whose nodes link to both their predecessor and successor."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Cell] = None
        self._tail: Optional[_Cell] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _cells(self) -> Iterator[_Cell]:
        cell = self._head
        while cell is not None:
            yield cell
            cell = cell.next

    def _find(self, target: Any) -> _Cell:
        for cell in self._cells():
            if cell.data == target:
                return cell
        raise ValueError(f"{target!r} is not in the list")

    def _unlink(self, cell: _Cell) -> Any:
        if cell.prev is None:
            self._head = cell.next
        else:
            cell.prev.next = cell.next
        if cell.next is None:
            self._tail = cell.prev
        else:
            cell.next.prev = cell.prev
        cell.prev = cell.next = None
        self._size -= 1
        return cell.data

    def __iter__(self) -> Iterator[Any]:
        return (cell.data for cell in self._cells())

    def __reversed__(self) -> Iterator[Any]:
        cell = self._tail
        while cell is not None:
            yield cell.data
            cell = cell.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add a value after the last node."""
        cell = _Cell(value, prev=self._tail)
        if self._tail is None:
            self._head = cell
        else:
            self._tail.next = cell
        self._tail = cell
        self._size += 1

    def insert_beginning(self, value: Any) -> None:
        """Put a value in front of the current first node."""
        cell = _Cell(value, next=self._head)
        if self._head is None:
            self._tail = cell
        else:
            self._head.prev = cell
        self._head = cell
        self._size += 1

    def insert_end(self, value: Any) -> None:
        """Put a value after the last node."""
        self.append(value)

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert a value right after the first node holding ``target``."""
        anchor = self._find(target)
        cell = _Cell(value, prev=anchor, next=anchor.next)
        if anchor.next is None:
            self._tail = cell
        else:
            anchor.next.prev = cell
        anchor.next = cell
        self._size += 1

    def delete_beginning(self) -> Any:
        """Remove the first node and return its value."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._head)

    def delete_end(self) -> Any:
        """Remove the last node and return its value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._tail)

    def delete_after(self, target: Any) -> Any:
        """Remove the node following the first node holding ``target``; return its value."""
        anchor = self._find(target)
        if anchor.next is None:
            raise IndexError(f"no node follows {target!r}")
        return self._unlink(anchor.next)

    def display(self) -> str:
        """Render the values, each followed by a tab."""
        return "".join(f"{value}\t" for value in self)