"""Interactive numbered menus over the queue, polynomial, sparse matrix and list types."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, Iterator, List, Optional, Sequence, TextIO

from structkit.array_queue import ArrayQueue, QueueOverflowError, QueueUnderflowError
from structkit.polynomial import Polynomial, Term
from structkit.singly_linked import SinglyLinkedList, build_until_sentinel
from structkit.sparse import SparseMatrix

__all__ = [
    "run_queue_menu",
    "run_polynomial_menu",
    "run_sparse_menu",
    "run_list_menu",
    "main",
]

QUEUE_MENU = (
    "\n\n **** MAIN MENU ****"
    "\n 1. Insert an element into queue"
    "\n 2. Delete an element from queue"
    "\n 3. Peek value of queue"
    "\n 4. Is queue empty"
    "\n 5. Is queue full"
    "\n 6. Display the queue"
    "\n 7. EXIT"
    "\n Enter your option: "
)

POLYNOMIAL_MENU = (
    "\n******* MAIN MENU *******"
    "\n 1. Enter the first polynomial"
    "\n 2. Display the first polynomial"
    "\n 3. Enter the second polynomial"
    "\n 4. Display the second polynomial"
    "\n 5. multiply the polynomials"
    "\n 6. Display the multiplication result"
    "\n 7. Add the coefficients of same exponents"
    "\n 8. Display the final result"
    "\n 9. EXIT"
    "\n\n Enter your option : "
)

SPARSE_MENU = (
    "\n\n***MAIN MENU***"
    "\nenter 1 : To enter matrix 1 elements."
    " \nenter 2 : To display matrix 1 linkedlist."
    "\nenter  3: To enter matrix 2 elements."
    " \nenter 4 : To display matrix 2 linkedlist."
    "\n enter 5 : To add the sparse matrices."
    "\nenter 6 : To display Addition Matrix."
    "\nenter 7 : EXIT."
    "\nenter the option :"
)

LIST_MENU = (
    "\n\n *****MAIN MENU *****"
    "\n 1: Create a list"
    "\n 2: Display the list"
    "\n 3: Delete a node at begining of the list"
    "\n 4: Delete a node at end of the list"
    "\n 5: Delete a node after a perticular node in list"
    "\n 6: Exit"
    "\nenter your option: "
)


class _Reader:
    """Reads whitespace-separated integers from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = (tok for line in stream for tok in line.split())

    def integer(self) -> int:
        token = next(self._tokens, None)
        if token is None:
            raise EOFError("input exhausted")
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def _run_menu(
    reader: _Reader,
    stdout: TextIO,
    banner: str,
    actions: Dict[int, Callable[[], None]],
    exit_option: int,
) -> None:
    try:
        while True:
            stdout.write(banner)
            option = reader.integer()
            if option == exit_option:
                return
            action = actions.get(option)
            if action is not None:
                action()
    except EOFError:
        return


def run_queue_menu(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Drive an array queue of ten slots from numbered menu choices."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    reader = _Reader(stdin)
    queue = ArrayQueue()

    def insert() -> None:
        stdout.write("\n enter the number to be inserted in the queue: ")
        value = reader.integer()
        try:
            queue.enqueue(value)
        except QueueOverflowError:
            stdout.write("\n Overflow")

    def delete() -> None:
        try:
            stdout.write(f"\n the number deleted is : {queue.dequeue()}")
        except QueueUnderflowError:
            stdout.write("\n underflow")

    def peek() -> None:
        try:
            stdout.write(f"\n the first value in queue is : {queue.peek()}")
        except QueueUnderflowError:
            stdout.write("\n queue is empty")

    def empty() -> None:
        stdout.write("\n the queue is empty" if queue.is_empty() else "\n the queue is not empty")

    def full() -> None:
        stdout.write("\n the queue is Full" if queue.is_full() else "\n the queue is not Full")

    def display() -> None:
        stdout.write(queue.display())

    _run_menu(
        reader,
        stdout,
        QUEUE_MENU,
        {1: insert, 2: delete, 3: peek, 4: empty, 5: full, 6: display},
        exit_option=7,
    )


def _read_terms(reader: _Reader, stdout: TextIO) -> List[Term]:
    stdout.write("\n enter the number of terms of the polynomial: ")
    count = reader.integer()
    terms: List[Term] = []
    for _ in range(count):
        stdout.write("\n Enter the coefficient number : ")
        coeff = reader.integer()
        stdout.write("\t Enter its exponent : ")
        expo = reader.integer()
        terms.append(Term(coeff, expo))
    return terms


def run_polynomial_menu(
    stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> None:
    """Enter two polynomials, multiply them and combine like terms from a menu."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    reader = _Reader(stdin)
    polys: Dict[str, Polynomial] = {
        "first": Polynomial(),
        "second": Polynomial(),
        "product": Polynomial(),
        "final": Polynomial(),
    }

    def enter(name: str) -> Callable[[], None]:
        def action() -> None:
            polys[name] = Polynomial([*polys[name], *_read_terms(reader, stdout)])

        return action

    def show(name: str) -> Callable[[], None]:
        return lambda: stdout.write(polys[name].display())

    def multiply() -> None:
        polys["product"] = polys["first"].multiply(polys["second"])

    def combine() -> None:
        polys["final"] = polys["product"].combine_like_terms()

    _run_menu(
        reader,
        stdout,
        POLYNOMIAL_MENU,
        {
            1: enter("first"),
            2: show("first"),
            3: enter("second"),
            4: show("second"),
            5: multiply,
            6: show("product"),
            7: combine,
            8: show("final"),
        },
        exit_option=9,
    )


def run_sparse_menu(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Enter two sparse matrices of a chosen shape and add them from a menu."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    reader = _Reader(stdin)
    stdout.write("enter the row size and column size: ")
    try:
        rows = reader.integer()
        columns = reader.integer()
    except EOFError:
        return
    matrices: Dict[str, SparseMatrix] = {
        name: SparseMatrix(rows, columns) for name in ("first", "second", "sum")
    }

    def enter(name: str, label: str) -> Callable[[], None]:
        def action() -> None:
            stdout.write(f"enter the matrix {label} elements: ")
            dense = [[reader.integer() for _ in range(columns)] for _ in range(rows)]
            matrices[name] = SparseMatrix.from_dense(dense) if rows else SparseMatrix(
                rows, columns
            )
            stdout.write("\n linked list is created")

        return action

    def show(name: str) -> Callable[[], None]:
        return lambda: stdout.write(matrices[name].display())

    def add() -> None:
        matrices["sum"] = matrices["first"].add(matrices["second"])

    def show_sum() -> None:
        stdout.write("\n Addition result in linked lists: \n")
        stdout.write(matrices["sum"].display())
        stdout.write("\n Addition result in matix: \n ")
        stdout.write(matrices["sum"].display_matrix())

    _run_menu(
        reader,
        stdout,
        SPARSE_MENU,
        {
            1: enter("first", "1"),
            2: show("first"),
            3: enter("second", "2"),
            4: show("second"),
            5: add,
            6: show_sum,
        },
        exit_option=7,
    )


def run_list_menu(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Create a singly linked list and delete nodes from it through a menu."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    reader = _Reader(stdin)
    linked = SinglyLinkedList()

    def entries() -> Iterator[int]:
        stdout.write("\n enter the data or -1 to end: ")
        while True:
            value = reader.integer()
            yield value
            if value != -1:
                stdout.write("\n enter the data: ")

    def create() -> None:
        for value in build_until_sentinel(entries(), -1):
            linked.append(value)
        stdout.write("\n linked list is created")

    def display() -> None:
        stdout.write(linked.display())

    def delete_first() -> None:
        try:
            linked.delete_beginning()
        except IndexError as exc:
            stdout.write(f"\n {exc}")
        else:
            stdout.write("\n first node successfully deleted")

    def delete_last() -> None:
        try:
            linked.delete_end()
        except IndexError as exc:
            stdout.write(f"\n {exc}")
        else:
            stdout.write("\n Last node successfully deleted")

    def delete_following() -> None:
        stdout.write("\n Enter the value after which the node has to deleted : ")
        target = reader.integer()
        try:
            linked.delete_after(target)
        except (IndexError, ValueError) as exc:
            stdout.write(f"\n {exc}")
        else:
            stdout.write("\n Node successfully deleted")

    _run_menu(
        reader,
        stdout,
        LIST_MENU,
        {1: create, 2: display, 3: delete_first, 4: delete_last, 5: delete_following},
        exit_option=6,
    )


_MENUS: Dict[str, Callable[[Optional[TextIO], Optional[TextIO]], None]] = {
    "queue": run_queue_menu,
    "polynomial": run_polynomial_menu,
    "sparse": run_sparse_menu,
    "list": run_list_menu,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen menu on standard input and output; return an exit status."""
    parser = argparse.ArgumentParser(
        prog="structkit", description="Menu-driven data structure operations."
    )
    parser.add_argument(
        "menu", nargs="?", default="list", choices=sorted(_MENUS), help="menu to run"
    )
    args = parser.parse_args(argv)
    try:
        _MENUS[args.menu](sys.stdin, sys.stdout)
    except ValueError as exc:
        print(f"structkit: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())