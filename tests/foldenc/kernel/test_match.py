import pytest

from foldenc.eval import write
from foldenc.inductive.expr import (
    AddShape,
    Expr,
    LitShape,
    NegShape,
    SAMPLE_DOUBLE_NEG,
    SAMPLE_SUM,
    add,
    lit,
    match_add,
    match_lit,
    match_neg,
    neg,
)
from foldenc.inductive.nat import Succ, SuccShape, Zero, ZeroShape
from foldenc.kernel.fold import Fold
from foldenc.kernel.match import Match, classify, extractor, shape_of

EXPRS = (
    lit(0),
    lit(-7),
    neg(lit(1)),
    SAMPLE_SUM,
    SAMPLE_DOUBLE_NEG,
    add(add(lit(1), lit(2)), neg(add(lit(3), neg(lit(4))))),
)


def _which(m: Match) -> int:
    return m(lambda _: 1, lambda _: 2, lambda _l, _r: 3)


def test_literal_matches() -> None:
    lit_m = Match.of(LitShape, 1)
    neg_m = Match.of(NegShape, lit(1))
    add_m = Match.of(AddShape, lit(1), lit(2))

    assert (_which(lit_m), _which(neg_m), _which(add_m)) == (1, 2, 3)

    assert write(lit_m(lit, neg, add)) == "1"
    assert write(neg_m(lit, neg, add)) == "(-1)"
    assert write(add_m(lit, neg, add)) == "(1+2)"


def test_literal_match_requires_folds_in_recursive_slots() -> None:
    with pytest.raises(TypeError, match="Recursive field expects a Fold"):
        Match.of(NegShape, 1)


def test_match_smart_constructors_reconstruct_sub_folds() -> None:
    m = match_neg(match_add(match_lit(1), match_neg(match_lit(2))))
    sub = m(lambda _: None, lambda e: e, lambda _l, _r: None)
    assert isinstance(sub, Fold)
    assert sub == SAMPLE_SUM


def test_match_constructors_reject_folds() -> None:
    with pytest.raises(TypeError, match="Recursive field expects a Match"):
        NegShape.match(lit(1))


def test_classify_exposes_raw_sub_values() -> None:
    lhs, rhs = classify(SAMPLE_SUM)(
        lambda _: None, lambda _: None, lambda l, r: (l, r)
    )
    assert lhs == lit(1)
    assert rhs == neg(lit(2))


@pytest.mark.parametrize("e", EXPRS)
def test_classify_then_reconstruct_is_identity(e: Fold) -> None:
    assert classify(e)(lit, neg, add) == e
    assert classify(e).reconstruct() == e


@pytest.mark.parametrize("e", EXPRS)
def test_exactly_one_extractor_matches(e: Fold) -> None:
    hits = [
        extractor(shape)(e) is not None for shape in (LitShape, NegShape, AddShape)
    ]
    assert hits.count(True) == 1


def test_extractor_components() -> None:
    assert extractor(LitShape)(lit(4)) == (4,)
    assert extractor(NegShape)(lit(4)) is None
    assert extractor(AddShape)(SAMPLE_SUM) == (lit(1), neg(lit(2)))


def test_extractor_on_zero_field_shape_returns_empty_tuple() -> None:
    assert extractor(ZeroShape)(Zero()) == ()
    assert extractor(ZeroShape)(Succ(Zero())) is None
    assert extractor(SuccShape)(Succ(Zero())) == (Zero(),)


def test_extractor_rejects_other_algebra() -> None:
    with pytest.raises(TypeError, match="another algebra"):
        extractor(LitShape)(Zero())


def test_shape_of() -> None:
    assert shape_of(SAMPLE_SUM) is AddShape
    assert shape_of(SAMPLE_DOUBLE_NEG) is NegShape
    assert shape_of(Zero()) is ZeroShape
    assert shape_of(lit(3)).algebra is Expr
