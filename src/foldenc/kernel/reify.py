"""A generic tagged representation used to observe folds.

``reify`` instantiates a fold against :class:`Node` constructors. Nodes keep
the shape name and every component, which makes them discriminating enough to
decide extensional equality of folds of any algebra.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from foldenc.kernel.fold import Fold
from foldenc.kernel.signature import Algebra, REC


@dataclass(frozen=True)
class Node:
    """Shape name plus components; recursive components are nodes."""

    shape: str
    args: tuple[Any, ...] = ()

    def __str__(self) -> str:
        if not self.args:
            return self.shape
        parts = [str(a) if isinstance(a, Node) else repr(a) for a in self.args]
        return f"{self.shape}({', '.join(parts)})"


def reify(fold: Fold) -> Node:
    return fold(*(_node_ctor(s.name) for s in fold.algebra.shapes))


def _node_ctor(name: str):
    def mk(*args: Any) -> Node:
        return Node(name, args)

    return mk


def reflect(node: Node, algebra: Algebra) -> Fold:
    """Rebuild a fold of ``algebra`` from ``node`` by structural recursion."""

    shape = algebra.shape(node.shape)
    shape.check_arity(node.args)
    args = tuple(
        reflect(a, algebra) if f is REC else a
        for a, f in zip(node.args, shape.fields, strict=True)
    )
    return shape(*args)


def equivalent(lhs: Fold, rhs: Fold) -> bool:
    """Extensional equality: both folds reify to the same node tree."""
    return lhs.algebra == rhs.algebra and reify(lhs) == reify(rhs)
