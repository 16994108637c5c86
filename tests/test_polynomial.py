import pytest

from structkit.polynomial import Polynomial, Term


def evaluate(poly, x):
    return sum(term.coeff * x**term.expo for term in poly)


P = Polynomial([(5, 3), (2, 1), (7, 0)])
Q = Polynomial([(3, 3), (4, 2), (1, 0)])


def test_construction_keeps_order_and_length():
    poly = Polynomial([Term(1, 0), (2, 5)])
    assert list(poly) == [Term(1, 0), Term(2, 5)]
    assert len(poly) == 2


def test_empty_polynomial():
    assert len(Polynomial()) == 0
    assert Polynomial().display() == ""


def test_display_format():
    assert Polynomial([(3, 2)]).display() == "\n3 x^ 2\t"


def test_add_merges_equal_exponents():
    result = P.add(Q)
    assert [t.expo for t in result] == [3, 2, 1, 0]
    assert Term(8, 3) in list(result)


@pytest.mark.parametrize("x", [-2, 0, 1, 3])
def test_add_matches_evaluation(x):
    assert evaluate(P.add(Q), x) == evaluate(P, x) + evaluate(Q, x)


def test_add_with_empty():
    assert P.add(Polynomial()) == P
    assert Polynomial().add(Q) == Q


def test_add_does_not_modify_operands():
    before = list(P)
    P.add(Q)
    assert list(P) == before


def test_multiply_orders_descending():
    exponents = [t.expo for t in P.multiply(Q)]
    assert exponents == sorted(exponents, reverse=True)
    assert len(P.multiply(Q)) == len(P) * len(Q)


def test_multiply_keeps_products_in_insertion_order_for_equal_exponents():
    product = Polynomial([(1, 1), (2, 0)]).multiply(Polynomial([(3, 1), (5, 0)]))
    assert list(product) == [Term(3, 2), Term(5, 1), Term(6, 1), Term(10, 0)]


@pytest.mark.parametrize("x", [-3, -1, 0, 2, 5])
def test_multiply_then_combine_matches_evaluation(x):
    combined = P.multiply(Q).combine_like_terms()
    assert evaluate(combined, x) == evaluate(P, x) * evaluate(Q, x)


def test_combine_like_terms_gives_unique_descending_exponents():
    combined = P.multiply(Q).combine_like_terms()
    exponents = [t.expo for t in combined]
    assert exponents == sorted(set(exponents), reverse=True)


def test_combine_like_terms_sums_runs():
    poly = Polynomial([(1, 2), (2, 2), (4, 2), (3, 0)])
    assert list(poly.combine_like_terms()) == [Term(7, 2), Term(3, 0)]


def test_combine_like_terms_on_empty():
    assert len(Polynomial().combine_like_terms()) == 0