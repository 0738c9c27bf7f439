"""Cons lists as folds."""

from __future__ import annotations

from typing import Any, Iterable

from foldenc.kernel.fold import Fold
from foldenc.kernel.match import extractor
from foldenc.kernel.signature import REC, VALUE, declare

List, NilShape, ConsShape = declare("List", nil=(), cons=(VALUE, REC))


def Nil() -> Fold:
    return NilShape()


def Cons(head: Any, tail: Fold) -> Fold:
    return ConsShape(head, tail)


def from_iterable(items: Iterable[Any]) -> Fold:
    xs = Nil()
    for item in reversed(list(items)):
        xs = Cons(item, xs)
    return xs


def to_list(xs: Fold) -> list[Any]:
    return xs(lambda: [], lambda head, rest: [head, *rest])


def length(xs: Fold) -> int:
    return xs(lambda: 0, lambda _, n: n + 1)


def append(xs: Fold, ys: Fold) -> Fold:
    return xs(lambda: ys, Cons)


_as_cons = extractor(ConsShape)


def uncons(xs: Fold) -> tuple[Any, Fold] | None:
    """Split off the head, or ``None`` for the empty list."""
    found = _as_cons(xs)
    return None if found is None else (found[0], found[1])
