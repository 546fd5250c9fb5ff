import pytest

from boxlayout.layout import DEFAULT_WEIGHT, LayoutContext, Measure, Prop
from boxlayout.layout.nodes import And, Eq, Ge, Gt, Le, Lt, Not, Or, Select


def _pair():
    ctx = LayoutContext()
    return ctx, Measure.new_unbound(ctx), Measure.new_unbound(ctx)


def test_comparisons_produce_default_weight():
    _, a, b = _pair()

    props = [a.prop_eq(b), a.prop_lt(b), a.prop_le(b), a.prop_gt(b), a.prop_ge(b)]

    assert [type(p.variant) for p in props] == [Eq, Lt, Le, Gt, Ge]
    assert all(p.weight == DEFAULT_WEIGHT == 10 for p in props)


def test_with_weight_keeps_identity():
    _, a, b = _pair()
    prop = a.prop_eq(b)

    heavy = prop.with_weight(100)

    assert heavy.key == prop.key
    assert heavy.weight == 100
    assert prop.weight == DEFAULT_WEIGHT


@pytest.mark.parametrize("weight", [-1, 0, 1.5, True])
def test_with_weight_rejects_invalid_weights(weight):
    _, a, b = _pair()
    with pytest.raises(ValueError):
        a.prop_eq(b).with_weight(weight)


def test_connectives_reset_weight():
    _, a, b = _pair()
    p = a.prop_lt(b).with_weight(1)
    q = a.prop_gt(b).with_weight(50)

    both = p & q
    either = p | q
    negated = ~p

    assert isinstance(both.variant, And)
    assert isinstance(either.variant, Or)
    assert isinstance(negated.variant, Not)
    assert negated.variant.inner == p
    assert {both.weight, either.weight, negated.weight} == {DEFAULT_WEIGHT}


def test_named_connectives_match_operators():
    _, a, b = _pair()
    p, q = a.prop_le(b), a.prop_ge(b)

    assert isinstance(p.and_(q).variant, And)
    assert isinstance(p.or_(q).variant, Or)
    assert isinstance(p.not_().variant, Not)


def test_select_builds_measure():
    ctx, a, b = _pair()
    cond = a.prop_gt(b)

    picked = cond.select(a, b)

    assert isinstance(picked, Measure)
    assert isinstance(picked.variant, Select)
    assert picked.variant.cond == cond


def test_connective_rejects_non_prop():
    _, a, b = _pair()
    with pytest.raises(TypeError):
        a.prop_eq(b) & a


def test_connective_rejects_other_context():
    _, a, b = _pair()
    _, c, d = _pair()
    with pytest.raises(ValueError):
        a.prop_eq(b) | c.prop_eq(d)


def test_prop_handles_are_hashable():
    _, a, b = _pair()
    prop = a.prop_eq(b)

    assert len({prop, prop, prop.with_weight(3)}) == 2
    assert isinstance(prop, Prop)
