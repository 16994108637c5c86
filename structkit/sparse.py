"""Sparse matrices stored as row-major lists of non-zero entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Sequence, Tuple, TypeVar, Union

__all__ = ["SparseEntry", "SparseMatrix"]

_T = TypeVar("_T")


@dataclass(frozen=True)
class SparseEntry:
    """A non-zero value at a given row and column."""

    row: int
    column: int
    value: int


def _position(entry: SparseEntry) -> Tuple[int, int]:
    return entry.row, entry.column


def _merge(
    left: Iterable[_T],
    right: Iterable[_T],
    key: Callable[[_T], Any],
    combine: Callable[[_T, _T], _T],
) -> Iterator[_T]:
    """Merge two ordered sequences, combining items whose keys are equal."""
    left_it, right_it = iter(left), iter(right)
    a = next(left_it, None)
    b = next(right_it, None)
    while a is not None and b is not None:
        key_a, key_b = key(a), key(b)
        if key_a == key_b:
            yield combine(a, b)
            a = next(left_it, None)
            b = next(right_it, None)
        elif key_a < key_b:
            yield a
            a = next(left_it, None)
        else:
            yield b
            b = next(right_it, None)
    if a is not None:
        yield a
        yield from left_it
    if b is not None:
        yield b
        yield from right_it


class SparseMatrix:
    """A ``rows`` by ``columns`` matrix holding only its listed entries."""

    def __init__(
        self,
        rows: int,
        columns: int,
        entries: Iterable[Union[SparseEntry, Tuple[int, int, int]]] = (),
    ) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.columns = columns
        self._entries: List[SparseEntry] = []
        for item in entries:
            entry = item if isinstance(item, SparseEntry) else SparseEntry(*item)
            if not (0 <= entry.row < rows and 0 <= entry.column < columns):
                raise ValueError(
                    f"entry at ({entry.row}, {entry.column}) lies outside a "
                    f"{rows}x{columns} matrix"
                )
            self._entries.append(entry)

    def __iter__(self) -> Iterator[SparseEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return (self.rows, self.columns, self._entries) == (
            other.rows,
            other.columns,
            other._entries,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.rows}, {self.columns}, "
            f"{[(e.row, e.column, e.value) for e in self._entries]!r})"
        )

    @classmethod
    def from_dense(cls, matrix: Sequence[Sequence[int]]) -> "SparseMatrix":
        """Collect the non-zero values of a dense matrix in row-major order."""
        rows = len(matrix)
        columns = len(matrix[0]) if rows else 0
        if any(len(row) != columns for row in matrix):
            raise ValueError("all rows must have the same length")
        entries = (
            SparseEntry(r, c, value)
            for r, row in enumerate(matrix)
            for c, value in enumerate(row)
            if value != 0
        )
        return cls(rows, columns, entries)

    def add(self, other: "SparseMatrix") -> "SparseMatrix":
        """Add two matrices of the same shape whose entries are in row-major order."""
        if (self.rows, self.columns) != (other.rows, other.columns):
            raise ValueError("matrices must have the same shape")
        merged = _merge(
            self._entries,
            other._entries,
            key=_position,
            combine=lambda a, b: SparseEntry(a.row, a.column, a.value + b.value),
        )
        return SparseMatrix(self.rows, self.columns, merged)

    def to_dense(self) -> List[List[int]]:
        """Expand to a full list of rows, with zeros where no entry is held."""
        dense = [[0] * self.columns for _ in range(self.rows)]
        for entry in self._entries:
            dense[entry.row][entry.column] = entry.value
        return dense

    def display(self) -> str:
        """Render the row positions, column positions and values on three lines."""
        rows = "".join(f"{e.row} " for e in self._entries)
        columns = "".join(f"{e.column} " for e in self._entries)
        values = "".join(f"{e.value} " for e in self._entries)
        return f"row   : {rows}\ncolumn: {columns}\nvalues: {values}"

    def display_matrix(self) -> str:
        """Render the dense form, one row per line."""
        return "".join(
            "".join(f"{value}  " for value in row) + "\n " for row in self.to_dense()
        )