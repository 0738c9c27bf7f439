"""Fold-encoded algebraic data with one-level deconstruction."""

from foldenc.kernel.fold import Fold, build, rebuild, resolve_handlers
from foldenc.kernel.match import Match, build_match, classify, extractor, shape_of
from foldenc.kernel.reify import Node, equivalent, reflect, reify
from foldenc.kernel.signature import REC, VALUE, Algebra, Field, Shape, declare

__all__ = [
    "Algebra",
    "Field",
    "Fold",
    "Match",
    "Node",
    "REC",
    "Shape",
    "VALUE",
    "build",
    "build_match",
    "classify",
    "declare",
    "equivalent",
    "extractor",
    "rebuild",
    "reflect",
    "reify",
    "resolve_handlers",
    "shape_of",
]
