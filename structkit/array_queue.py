"""Bounded queue over a fixed number of slots that are used once each."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator

__all__ = ["QueueOverflowError", "QueueUnderflowError", "ArrayQueue"]

DEFAULT_CAPACITY = 10


class QueueOverflowError(OverflowError):
    """Raised when a value is added to a queue whose last slot is used."""


class QueueUnderflowError(IndexError):
    """Raised when a value is taken from or read off an empty queue."""


class ArrayQueue:
    """A linear (non-wrapping) queue of fixed capacity.

    Each enqueue uses the next slot; slots freed at the front are only
    reclaimed once the queue has been emptied completely.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._consumed = 0

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r}, capacity={self.capacity})"

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        if self.is_full():
            raise QueueOverflowError("queue overflow")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueUnderflowError("queue underflow")
        value = self._items.popleft()
        if self._items:
            self._consumed += 1
        else:
            self._consumed = 0
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if not self._items:
            raise QueueUnderflowError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        """Whether the queue holds no values."""
        return not self._items

    def is_full(self) -> bool:
        """Whether the last slot has been used."""
        return self._consumed + len(self._items) >= self.capacity

    def display(self) -> str:
        """Render the values front to rear, one per line."""
        if not self._items:
            return "\n queue is empty"
        return "".join(f"\n{value} \t" for value in self._items)