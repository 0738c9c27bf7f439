"""Declarations of algebraic types as ordered lists of constructor shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from foldenc.kernel.fold import Fold
    from foldenc.kernel.match import Match


class Field(Enum):
    """Kind of a single constructor field."""

    VALUE = "value"  # opaque payload, passed through untouched
    REC = "rec"  # recursive occurrence of the enclosing algebra


VALUE = Field.VALUE
REC = Field.REC


@dataclass(frozen=True, kw_only=True, eq=False)
class Algebra:
    """An algebraic type given by its constructor shapes.

    ``shapes`` is assigned once after the shapes themselves have been declared,
    because every shape refers back to its algebra.
    """

    name: str
    shapes: tuple[Shape, ...] = field(repr=False, compare=False, default=())

    @property
    def arity(self) -> int:
        return len(self.shapes)

    def shape(self, name: str) -> Shape:
        for s in self.shapes:
            if s.name == name:
                return s
        raise TypeError(
            "Unknown shape:\n"
            f"  algebra = {self.name}\n"
            f"  name = {name}\n"
            f"  known = {[s.name for s in self.shapes]}"
        )

    @property
    def constructors(self) -> tuple[Shape, ...]:
        """Handler tuple that rebuilds a ``Fold`` when supplied to an instantiation."""
        return self.shapes

    @cached_property
    def match_constructors(self) -> tuple[Any, ...]:
        """Handler tuple that builds a ``Match`` when supplied to an instantiation."""
        return tuple(s.match for s in self.shapes)


@dataclass(frozen=True, kw_only=True)
class Shape:
    """A single constructor case of an :class:`Algebra`."""

    name: str
    algebra: Algebra = field(repr=False)
    fields: tuple[Field, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.fields)

    @cached_property
    def index(self) -> int:
        for idx, s in enumerate(self.algebra.shapes):
            if s == self:
                return idx
        raise TypeError("Shape does not belong to its algebra")

    @cached_property
    def rps(self) -> tuple[int, ...]:
        """Positions of the recursive fields."""
        return tuple(j for j, f in enumerate(self.fields) if f is REC)

    def __call__(self, *args: Any) -> Fold:
        from foldenc.kernel.fold import build

        return build(self, args)

    def match(self, *args: Any) -> Match:
        from foldenc.kernel.match import build_match

        return build_match(self, args)

    def check_arity(self, args: tuple[Any, ...]) -> None:
        if len(args) != self.arity:
            raise TypeError(
                "Constructor arity mismatch:\n"
                f"  shape = {self.algebra.name}.{self.name}\n"
                f"  expected arity = {self.arity}\n"
                f"  found arity = {len(args)}"
            )


def declare(name: str, /, **shapes: tuple[Field, ...]) -> tuple[Any, ...]:
    """Declare an algebra and its shapes in one go.

    Returns the algebra followed by its shapes, in keyword order::

        Nat, Zero, Succ = declare("Nat", zero=(), succ=(REC,))
    """

    algebra = Algebra(name=name)
    declared = tuple(
        Shape(name=shape_name, algebra=algebra, fields=tuple(fields))
        for shape_name, fields in shapes.items()
    )
    object.__setattr__(algebra, "shapes", declared)
    return (algebra, *declared)
