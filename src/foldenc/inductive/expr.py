"""Arithmetic expressions: integer literals, negation and sums."""

from __future__ import annotations

from foldenc.kernel.fold import Fold
from foldenc.kernel.match import Match, extractor
from foldenc.kernel.signature import Algebra, Shape, REC, VALUE, declare


def _expr() -> tuple[Algebra, Shape, Shape, Shape]:
    expr_alg, lit_shape, neg_shape, add_shape = declare(
        "Expr",
        lit=(VALUE,),  # i : int
        neg=(REC,),  # e : Expr
        add=(REC, REC),  # lhs : Expr, rhs : Expr
    )
    return expr_alg, lit_shape, neg_shape, add_shape  # type: ignore[return-value]


Expr, LitShape, NegShape, AddShape = _expr()


def lit(i: int) -> Fold:
    return LitShape(i)


def neg(e: Fold) -> Fold:
    return NegShape(e)


def add(lhs: Fold, rhs: Fold) -> Fold:
    return AddShape(lhs, rhs)


# Match smart constructors. ``neg``/``add`` take matches of the sub-expressions.
def match_lit(i: int) -> Match:
    return LitShape.match(i)


def match_neg(m: Match) -> Match:
    return NegShape.match(m)


def match_add(lhs: Match, rhs: Match) -> Match:
    return AddShape.match(lhs, rhs)


_as_lit = extractor(LitShape)
_as_neg = extractor(NegShape)
_as_add = extractor(AddShape)


def as_lit(e: Fold) -> int | None:
    found = _as_lit(e)
    return None if found is None else found[0]


def as_neg(e: Fold) -> Fold | None:
    found = _as_neg(e)
    return None if found is None else found[0]


def as_add(e: Fold) -> tuple[Fold, Fold] | None:
    found = _as_add(e)
    return None if found is None else (found[0], found[1])


# (1+(-2)) and (-(-2))
SAMPLE_SUM = add(lit(1), neg(lit(2)))
SAMPLE_DOUBLE_NEG = neg(neg(lit(2)))
