"""Insertion sort and selection sort over sequences of comparable values."""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence

__all__ = ["insertion_sort", "selection_sort", "smallest_index"]


def insertion_sort(values: Iterable[Any]) -> List[Any]:
    """Return the values in ascending order, sorted by insertion."""
    result: List[Any] = []
    for value in values:
        position = len(result)
        while position > 0 and value < result[position - 1]:
            position -= 1
        result.insert(position, value)
    return result


def smallest_index(values: Sequence[Any], start: int) -> int:
    """Return the index of the first smallest value at or after ``start``."""
    if not 0 <= start < len(values):
        raise IndexError("start is out of range")
    return min(range(start, len(values)), key=values.__getitem__)


def selection_sort(values: Iterable[Any]) -> List[Any]:
    """Return the values in ascending order, sorted by selection."""
    result = list(values)
    for position in range(len(result)):
        chosen = smallest_index(result, position)
        result[position], result[chosen] = result[chosen], result[position]
    return result