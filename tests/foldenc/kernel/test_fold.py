import pytest

from foldenc.inductive.expr import Expr, SAMPLE_SUM, add, lit, neg
from foldenc.kernel.fold import Fold, rebuild
from foldenc.kernel.signature import REC, VALUE, declare

Tree, Leaf, Node = declare("Tree", leaf=(VALUE,), node=(REC, VALUE, REC))


def _sum_tree(t: Fold) -> int:
    return t(lambda x: x, lambda l, label, r: l + label + r)


def test_instantiate_with_positional_handlers() -> None:
    t = Node(Leaf(1), 10, Node(Leaf(2), 20, Leaf(3)))
    assert _sum_tree(t) == 36


def test_instantiate_with_named_handlers() -> None:
    t = Node(Leaf(1), 10, Leaf(2))
    labels = t(leaf=lambda _: [], node=lambda l, label, r: [*l, label, *r])
    assert labels == [10]


def test_handlers_receive_reduced_results() -> None:
    seen: list[object] = []

    def on_neg(sub: object) -> str:
        seen.append(sub)
        return f"neg {sub}"

    result = neg(lit(3))(lambda i: f"lit {i}", on_neg, lambda l, r: "add")
    assert result == "neg lit 3"
    assert seen == ["lit 3"]


def test_instantiation_is_reentrant() -> None:
    e = add(lit(1), neg(lit(2)))
    first = e(lambda i: i, lambda v: -v, lambda l, r: l + r)
    second = e(str, lambda s: f"-{s}", lambda l, r: f"{l}+{r}")
    third = e(lambda i: i, lambda v: -v, lambda l, r: l + r)
    assert (first, second, third) == (-1, "1+-2", -1)


def test_shared_subexpression() -> None:
    two = lit(2)
    e = add(two, neg(two))
    assert e(lambda i: i, lambda v: -v, lambda l, r: l + r) == 0


def test_handler_count_mismatch() -> None:
    with pytest.raises(TypeError, match="Handler count mismatch"):
        SAMPLE_SUM(lambda i: i, lambda v: -v)


def test_mixed_positional_and_named_handlers() -> None:
    with pytest.raises(TypeError, match="either positionally or by shape name"):
        SAMPLE_SUM(lambda i: i, neg=lambda v: -v, add=lambda l, r: l + r)


def test_unknown_and_missing_handler_names() -> None:
    with pytest.raises(TypeError, match="Handler names do not match shapes"):
        SAMPLE_SUM(lit=str, negate=str, add=str)


def test_non_callable_handler() -> None:
    with pytest.raises(TypeError, match="Handler is not callable"):
        SAMPLE_SUM(str, str, 3)


def test_constructor_arity_mismatch() -> None:
    with pytest.raises(TypeError, match="Constructor arity mismatch"):
        Node(Leaf(1), 2)


def test_recursive_field_rejects_foreign_values() -> None:
    with pytest.raises(TypeError, match="Recursive field expects a Fold"):
        Node(1, 2, Leaf(3))
    with pytest.raises(TypeError, match="Recursive field expects a Fold"):
        Node(lit(1), 2, Leaf(3))


def test_rebuild_with_own_constructors_is_equivalent() -> None:
    rebuilt = rebuild(SAMPLE_SUM)
    assert rebuilt is not SAMPLE_SUM
    assert rebuilt == SAMPLE_SUM
    assert rebuilt.algebra is Expr


def test_equality_is_extensional() -> None:
    assert add(lit(1), neg(lit(2))) == add(lit(1), neg(lit(2)))
    assert add(lit(1), neg(lit(2))) != add(neg(lit(2)), lit(1))
    assert lit(1) != Leaf(1)
    assert hash(add(lit(1), lit(2))) == hash(add(lit(1), lit(2)))


def test_repr_shows_structure() -> None:
    assert repr(SAMPLE_SUM) == "Fold[Expr](add(lit(1), neg(lit(2))))"
    assert repr(Leaf("a")) == "Fold[Tree](leaf('a'))"
