# structkit

Small, readable implementations of classic data structures and algorithms,
plus a few numbered text menus for trying some of them out.

## Modules

- `structkit.singly_linked`
  - `Node`: a cell with `data` and a `next` link.
  - `SinglyLinkedList(values=())`: iterable, sized. `append`, `insert_beginning`,
    `insert_end`, `insert_after(target, value)`, `delete_beginning`, `delete_end`,
    `delete_after(target)` (the delete methods return the removed value),
    `reverse()` in place, `search(value)` returning the first matching `Node` or
    `None`, `sort()` ascending in place, and `display()` returning the values as
    a tab-separated string.
  - `build_until_sentinel(values, sentinel=-1)`: builds a list from `values`,
    stopping at the first sentinel.
- `structkit.doubly_linked`
  - `DoublyLinkedList(values=())`: iterable forwards and with `reversed()`.
    Same insert and delete methods as the singly linked list (without search,
    reverse or sort), plus `display()`.
- `structkit.circular_linked`
  - `CircularLinkedList(values=())`: a ring whose last node links back to the
    first; `head` gives the first node. `append`, `insert_beginning`,
    `insert_end`, `delete_beginning`, `delete_end`, `display()`.
- `structkit.array_queue`
  - `ArrayQueue(capacity=10)`: a linear, non-wrapping queue. `enqueue`,
    `dequeue`, `peek`, `is_empty`, `is_full`, `display()`. Slots freed at the
    front are only reused once the queue has been emptied completely, so a queue
    can report full while holding fewer than `capacity` values.
  - `QueueOverflowError` (an `OverflowError`) is raised by `enqueue` on a full
    queue; `QueueUnderflowError` (an `IndexError`) by `dequeue` and `peek` on an
    empty one.
- `structkit.sorting`
  - `insertion_sort(values)` and `selection_sort(values)` return new sorted lists.
  - `smallest_index(values, start)` returns the index of the first smallest value
    at or after `start`.
- `structkit.polynomial`
  - `Term(coeff, expo)` and `Polynomial(terms=())`, where terms may be `Term`s
    or `(coeff, exponent)` pairs and keep the order they were given in.
  - `add(other)` merges two polynomials whose terms run from highest to lowest
    exponent; `multiply(other)` returns every product, ordered by descending
    exponent, without summing like terms; `combine_like_terms()` sums adjacent
    terms that share an exponent. `display()` renders one `coeff x^ expo` per line.
- `structkit.sparse`
  - `SparseEntry(row, column, value)` and `SparseMatrix(rows, columns, entries=())`.
  - `SparseMatrix.from_dense(matrix)` collects non-zero values in row-major order;
    `add(other)` adds two matrices of the same shape; `to_dense()` expands back
    to a list of rows; `display()` shows row positions, column positions and
    values on three lines; `display_matrix()` shows the dense form.

Deleting from an empty list raises `IndexError`; naming a value that is not in
a list raises `ValueError`; deleting after the last node raises `IndexError`.

## Installation

```
pip install .
```

## Usage

```python
from structkit.singly_linked import SinglyLinkedList
from structkit.polynomial import Polynomial, Term
from structkit.sparse import SparseMatrix

items = SinglyLinkedList([3, 1, 2])
items.sort()
print(list(items))            # [1, 2, 3]

p = Polynomial([Term(2, 2), Term(1, 0)])
q = Polynomial([Term(3, 1)])
print(list(p.add(q)))         # [Term(coeff=2, expo=2), Term(coeff=3, expo=1), Term(coeff=1, expo=0)]

m = SparseMatrix.from_dense([[0, 0, 1, 2], [3, 0, 0, 0], [0, 4, 5, 0], [0, 6, 0, 0]])
print(m.display())
# row   : 0 0 1 2 2 3
# column: 2 3 0 1 2 1
# values: 1 2 3 4 5 6
print(m.add(m).to_dense())
```

## Interactive menus

The `structkit` command reads numbered options and integers from standard
input and writes to standard output:

```
structkit [list|queue|polynomial|sparse]
```

- `list` (the default): create a singly linked list (enter values, `-1` to
  end), display it, and delete the first node, the last node or the node after
  a given value.
- `queue`: insert, delete, peek, test for empty or full, and display a ten-slot
  `ArrayQueue`.
- `polynomial`: enter two polynomials, multiply them, combine like terms of the
  product and display each.
- `sparse`: give the row and column size, enter two dense matrices, add them
  and display the sum as entries and as a matrix.

Each menu ends on its exit option or at the end of input. The command exits
with status 1 if it reads something that is not an integer.

## What it does not do

There are no menus for the doubly linked list, the circular list, the sorts,
polynomial addition, or list insertion, reversal, search and sorting; use those
from Python. Nothing is saved between runs.

## Tests

```
pip install .[test]
pytest
```