"""Pretty-printing with minimal parentheses."""

from __future__ import annotations

from foldenc.kernel.fold import Fold

ATOM_PREC = 3
NEG_PREC = 2
ADD_PREC = 1


def _maybe_paren(
    text: str, child_prec: int, parent_prec: int, *, allow_equal: bool
) -> str:
    if child_prec < parent_prec or (child_prec == parent_prec and not allow_equal):
        return f"({text})"
    return text


def _fmt_lit(i: int) -> tuple[str, int]:
    return f"{i}", ATOM_PREC


def _fmt_neg(sub: tuple[str, int]) -> tuple[str, int]:
    text, prec = sub
    return f"-{_maybe_paren(text, prec, NEG_PREC, allow_equal=True)}", NEG_PREC


def _fmt_add(lhs: tuple[str, int], rhs: tuple[str, int]) -> tuple[str, int]:
    lhs_disp = _maybe_paren(*lhs, ADD_PREC, allow_equal=True)
    rhs_disp = _maybe_paren(*rhs, ADD_PREC, allow_equal=False)
    return f"{lhs_disp} + {rhs_disp}", ADD_PREC


def pretty(e: Fold) -> str:
    """Return a human-friendly string for ``e``, e.g. ``1 + -2``."""
    return e(_fmt_lit, _fmt_neg, _fmt_add)[0]
