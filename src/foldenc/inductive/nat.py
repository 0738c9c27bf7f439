"""Peano naturals as folds, including the predecessor via deconstruction."""

from __future__ import annotations

from foldenc.kernel.fold import Fold
from foldenc.kernel.match import classify
from foldenc.kernel.signature import REC, declare

Nat, ZeroShape, SuccShape = declare("Nat", zero=(), succ=(REC,))


def Zero() -> Fold:
    return ZeroShape()


def Succ(n: Fold) -> Fold:
    return SuccShape(n)


def numeral(value: int) -> Fold:
    """Return the fold representing the natural number ``value``."""

    if value < 0:
        raise ValueError(f"Naturals must be non-negative, got {value}")
    n = Zero()
    for _ in range(value):
        n = Succ(n)
    return n


def to_int(n: Fold) -> int:
    return n(lambda: 0, lambda k: k + 1)


def add(lhs: Fold, rhs: Fold) -> Fold:
    """
    add a b = fold a with zero := b, succ := Succ

    Rules:
      add Zero b = b
      add (Succ a) b = Succ (add a b)
    """

    return lhs(lambda: rhs, Succ)


def pred(n: Fold) -> Fold | None:
    """Predecessor: ``None`` for zero, ``k`` for ``Succ k``.

    Not expressible as a single fold over ``n`` without rebuilding, so it goes
    through ``classify``.
    """

    return classify(n)(lambda: None, lambda k: k)
