"""One-level deconstruction of folds.

A :class:`Match` has the same handler layout as a :class:`~foldenc.kernel.fold.Fold`
of the same algebra, but it is not recursive: handlers for recursive fields
receive the raw sub-folds instead of reduced results. ``classify`` turns any
fold into its match using nothing but a fold instantiation, which is what
makes shape-conditioned recursion possible over values that are only
functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from foldenc.kernel.fold import Fold, Handler, resolve_handlers, check_recursive_args
from foldenc.kernel.signature import Shape, Algebra, REC


@dataclass(frozen=True, eq=False)
class Match:
    """Which shape a value has, together with its immediate components."""

    algebra: Algebra
    _run: Callable[[tuple[Handler, ...]], Any] = field(repr=False)

    def __call__(self, *handlers: Handler, **named: Handler) -> Any:
        return self._run(resolve_handlers(self.algebra, handlers, named))

    @staticmethod
    def of(shape: Shape, *components: Any) -> Match:
        """A match of ``shape`` whose recursive components are already folds."""

        shape.check_arity(components)
        check_recursive_args(shape, components, Fold)
        idx = shape.index
        return Match(shape.algebra, lambda handlers: handlers[idx](*components))

    def __repr__(self) -> str:
        return f"Match[{self.algebra.name}]({self.reconstruct()!r})"

    def reconstruct(self) -> Fold:
        """Instantiate with the algebra's smart constructors."""
        return self(*self.algebra.constructors)


def build_match(shape: Shape, args: tuple[Any, ...]) -> Match:
    """Match smart constructor: recursive arguments are matches of sub-values.

    The sub-matches are turned back into folds before being stored, so the
    handler of ``shape`` is eventually handed genuine folds.
    """

    shape.check_arity(args)
    check_recursive_args(shape, args, Match)
    components = tuple(
        a.reconstruct() if f is REC else a
        for a, f in zip(args, shape.fields, strict=True)
    )
    return Match.of(shape, *components)


def classify(fold: Fold) -> Match:
    """Expose one level of ``fold``'s structure."""
    return fold(*fold.algebra.match_constructors)


def extractor(shape: Shape) -> Callable[[Fold], tuple[Any, ...] | None]:
    """Return a function giving the components of a fold of ``shape``, else ``None``.

    A shape without fields yields ``()`` on success, so callers must test the
    result against ``None`` rather than for truthiness.
    """

    def miss(*_: Any) -> None:
        return None

    def hit(*components: Any) -> tuple[Any, ...]:
        return components

    handlers = tuple(hit if s == shape else miss for s in shape.algebra.shapes)

    def extract(fold: Fold) -> tuple[Any, ...] | None:
        if fold.algebra != shape.algebra:
            raise TypeError(
                "Extractor applied to a fold of another algebra:\n"
                f"  shape = {shape.algebra.name}.{shape.name}\n"
                f"  found algebra = {fold.algebra.name}"
            )
        return classify(fold)(*handlers)

    extract.__name__ = f"as_{shape.name}"
    return extract


def shape_of(fold: Fold) -> Shape:
    """The outermost shape of ``fold``."""
    return fold(*(lambda *_, s=s: s for s in fold.algebra.shapes))
