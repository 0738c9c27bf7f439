"""Fold-encoded (Boehm-Berarducci) values.

A :class:`Fold` carries no tag and no fields. The only thing it can do is be
*instantiated*: given one handler per shape of its algebra it threads those
handlers through every recursive occurrence and returns whatever the handler
of its outermost shape returns. Recursive fields are therefore seen by a
handler as already-reduced results, never as further folds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence, TypeAlias

from foldenc.kernel.signature import Algebra, Shape, REC

Handler: TypeAlias = Callable[..., Any]
Runner: TypeAlias = Callable[[tuple[Handler, ...]], Any]


def resolve_handlers(
    algebra: Algebra, handlers: Sequence[Handler], named: Mapping[str, Handler]
) -> tuple[Handler, ...]:
    """Order ``handlers`` (positional) and ``named`` (by shape name) by shape index."""

    if handlers and named:
        raise TypeError(
            "Handlers must be given either positionally or by shape name:\n"
            f"  algebra = {algebra.name}\n"
            f"  positional = {len(handlers)}\n"
            f"  named = {sorted(named)}"
        )
    if named:
        unknown = sorted(set(named) - {s.name for s in algebra.shapes})
        missing = [s.name for s in algebra.shapes if s.name not in named]
        if unknown or missing:
            raise TypeError(
                "Handler names do not match shapes:\n"
                f"  algebra = {algebra.name}\n"
                f"  unknown = {unknown}\n"
                f"  missing = {missing}"
            )
        handlers = tuple(named[s.name] for s in algebra.shapes)
    if len(handlers) != algebra.arity:
        raise TypeError(
            "Handler count mismatch:\n"
            f"  algebra = {algebra.name}\n"
            f"  expected = {algebra.arity}\n"
            f"  found = {len(handlers)}"
        )
    for s, h in zip(algebra.shapes, handlers, strict=True):
        if not callable(h):
            raise TypeError(
                "Handler is not callable:\n"
                f"  shape = {algebra.name}.{s.name}\n"
                f"  handler = {h!r}"
            )
    return tuple(handlers)


@dataclass(frozen=True, eq=False)
class Fold:
    """A value of ``algebra`` represented purely by its fold.

    Two folds compare equal when they are extensionally equal, i.e. when they
    reify to the same structure. Hashing likewise goes through reification, so
    it requires hashable payloads.
    """

    algebra: Algebra
    _run: Runner = field(repr=False)

    def __call__(self, *handlers: Handler, **named: Handler) -> Any:
        """Instantiate the fold with one handler per shape."""
        return self._run(resolve_handlers(self.algebra, handlers, named))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fold):
            return NotImplemented
        from foldenc.kernel.reify import equivalent

        return equivalent(self, other)

    def __hash__(self) -> int:
        from foldenc.kernel.reify import reify

        return hash(reify(self))

    def __repr__(self) -> str:
        from foldenc.kernel.reify import reify

        return f"Fold[{self.algebra.name}]({reify(self)})"


def check_recursive_args(shape: Shape, args: tuple[Any, ...], kind: type) -> None:
    for j in shape.rps:
        arg = args[j]
        if not isinstance(arg, kind) or arg.algebra != shape.algebra:
            raise TypeError(
                f"Recursive field expects a {kind.__name__} of the same algebra:\n"
                f"  shape = {shape.algebra.name}.{shape.name}\n"
                f"  position = {j}\n"
                f"  found = {arg!r}"
            )


def build(shape: Shape, args: tuple[Any, ...]) -> Fold:
    """Smart constructor: the fold of ``shape`` applied to ``args``.

    Instantiation first instantiates every recursive argument with the same
    handlers, then hands the reduced results (and the untouched payloads) to
    the handler of ``shape``.
    """

    shape.check_arity(args)
    check_recursive_args(shape, args, Fold)
    idx = shape.index
    rec = tuple(f is REC for f in shape.fields)

    def run(handlers: tuple[Handler, ...]) -> Any:
        return handlers[idx](
            *(a._run(handlers) if r else a for a, r in zip(args, rec, strict=True))
        )

    return Fold(shape.algebra, run)


def rebuild(fold: Fold) -> Fold:
    """Instantiate ``fold`` with its own algebra's smart constructors."""
    return fold(*fold.algebra.constructors)
