"""Compositional interpreters for fold-encoded arithmetic expressions.

Each interpreter is a single instantiation of the expression; handlers see the
already-computed results of sub-expressions and never recurse themselves.
"""

from __future__ import annotations

from foldenc.kernel.fold import Fold


def evaluate(e: Fold) -> int:
    return e(
        lambda i: i,
        lambda v: -v,
        lambda l, r: l + r,
    )


def write(e: Fold) -> str:
    """Fully parenthesized rendering, e.g. ``(1+(-2))``."""

    return e(
        lambda i: f"{i}",
        lambda s: f"(-{s})",
        lambda l, r: f"({l}+{r})",
    )


def size(e: Fold) -> int:
    """Number of shapes in ``e``."""
    return e(lambda _: 1, lambda n: n + 1, lambda l, r: l + r + 1)


def depth(e: Fold) -> int:
    return e(lambda _: 1, lambda d: d + 1, lambda l, r: max(l, r) + 1)
