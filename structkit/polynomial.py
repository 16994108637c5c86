"""Polynomials held as ordered lists of (coefficient, exponent) terms."""

from __future__ import annotations

from bisect import insort
from dataclasses import dataclass
from itertools import groupby
from typing import Any, Callable, Iterable, Iterator, List, Tuple, TypeVar, Union

__all__ = ["Term", "Polynomial"]

_T = TypeVar("_T")


@dataclass(frozen=True)
class Term:
    """One term of a polynomial: ``coeff * x ** expo``."""

    coeff: int
    expo: int


def _descending(term: Term) -> int:
    return -term.expo


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


class Polynomial:
    """A polynomial whose terms are kept in the order they were given."""

    def __init__(self, terms: Iterable[Union[Term, Tuple[int, int]]] = ()) -> None:
        self._terms: List[Term] = [
            term if isinstance(term, Term) else Term(*term) for term in terms
        ]

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __repr__(self) -> str:
        pairs = [(term.coeff, term.expo) for term in self._terms]
        return f"{type(self).__name__}({pairs!r})"

    def add(self, other: "Polynomial") -> "Polynomial":
        """Add two polynomials whose terms run from highest to lowest exponent."""
        return Polynomial(
            _merge(
                self._terms,
                other._terms,
                key=_descending,
                combine=lambda p, q: Term(p.coeff + q.coeff, p.expo),
            )
        )

    def multiply(self, other: "Polynomial") -> "Polynomial":
        """Multiply term by term, keeping the products ordered by descending exponent.

        Products with the same exponent are left as separate terms;
        :meth:`combine_like_terms` sums them.
        """
        result: List[Term] = []
        for p in self._terms:
            for q in other._terms:
                insort(result, Term(p.coeff * q.coeff, p.expo + q.expo), key=_descending)
        return Polynomial(result)

    def combine_like_terms(self) -> "Polynomial":
        """Sum adjacent terms that share an exponent, ordered by descending exponent."""
        result: List[Term] = []
        for expo, group in groupby(self._terms, key=lambda term: term.expo):
            total = sum(term.coeff for term in group)
            insort(result, Term(total, expo), key=_descending)
        return Polynomial(result)

    def display(self) -> str:
        """Render each term on its own line as ``<coeff> x^ <expo>``."""
        return "".join(f"\n{term.coeff} x^ {term.expo}\t" for term in self._terms)