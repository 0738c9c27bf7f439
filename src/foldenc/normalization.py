"""Shape-conditioned rewrites of fold-encoded arithmetic expressions.

These functions need to look at the shape of a sub-expression before deciding
how to recurse, so they go through ``classify`` (or the extractors built on it)
instead of a single fold.
"""

from __future__ import annotations

from foldenc.inductive.expr import add, as_add, as_lit, as_neg, neg
from foldenc.kernel.fold import Fold
from foldenc.kernel.match import classify


def write_by_match(e: Fold) -> str:
    """Same output as :func:`foldenc.eval.write`, recursing explicitly."""

    return classify(e)(
        lambda i: f"{i}",
        lambda e1: f"(-{write_by_match(e1)})",
        lambda e1, e2: f"({write_by_match(e1)}+{write_by_match(e2)})",
    )


def push_neg_by_match(e: Fold) -> Fold:
    """Push negations down to the literals, cancelling double negations.

    Every call inspects at most two levels and recurses on strictly smaller
    expressions, so the recursion depth is bounded by the size of ``e``.
    """

    return classify(e)(
        lambda _: e,
        lambda e1: classify(e1)(
            lambda _: e,
            lambda e2: push_neg_by_match(e2),
            lambda e2, e3: add(push_neg_by_match(neg(e2)), push_neg_by_match(neg(e3))),
        ),
        lambda e1, e2: add(push_neg_by_match(e1), push_neg_by_match(e2)),
    )


def push_neg(e: Fold) -> Fold:
    """:func:`push_neg_by_match` written against the extractors."""

    if (inner := as_neg(e)) is not None:
        if as_lit(inner) is not None:
            return e
        if (e1 := as_neg(inner)) is not None:
            return push_neg(e1)
        if (pair := as_add(inner)) is not None:
            e1, e2 = pair
            return add(push_neg(neg(e1)), push_neg(neg(e2)))
    if (pair := as_add(e)) is not None:
        e1, e2 = pair
        return add(push_neg(e1), push_neg(e2))
    return e
