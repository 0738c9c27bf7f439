"""Tagged abstract syntax tree for arithmetic expressions.

This is the conventional representation the fold encoding is compared
against. The fold side only ever passes ``Lit``, ``Neg`` and ``Add`` as
handlers; it never looks inside a node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeAlias, TypeVar

from foldenc.kernel.fold import Fold


@dataclass(frozen=True)
class Lit:
    """Integer literal.

    Args:
        value: The literal's integer value.
    """

    value: int


@dataclass(frozen=True)
class Neg:
    """Negation of ``expr``."""

    expr: Term


@dataclass(frozen=True)
class Add:
    """Sum of ``lhs`` and ``rhs``."""

    lhs: Term
    rhs: Term


Term: TypeAlias = Lit | Neg | Add

R = TypeVar("R")


def to_ast(e: Fold) -> Term:
    """Materialize a fold-encoded expression as a tagged tree."""
    return e(Lit, Neg, Add)


def fold_ast(
    term: Term,
    lit: Callable[[int], R],
    neg: Callable[[R], R],
    add: Callable[[R, R], R],
) -> R:
    """Structural recursion over the tagged tree."""

    match term:
        case Lit(i):
            return lit(i)
        case Neg(e):
            return neg(fold_ast(e, lit, neg, add))
        case Add(l, r):
            return add(fold_ast(l, lit, neg, add), fold_ast(r, lit, neg, add))
    raise TypeError(f"Unexpected term in fold_ast:\n  term = {term!r}")


def from_ast(term: Term) -> Fold:
    """Rebuild a fold-encoded expression from a tagged tree."""
    from foldenc.inductive.expr import add, lit, neg

    return fold_ast(term, lit, neg, add)
