from fractions import Fraction

import pytest
import z3

from boxlayout.layout import LayoutContext, Measure, Z3BuildContext


def test_translating_same_node_twice_hits_cache():
    ctx = LayoutContext()
    a = Measure.new_unbound(ctx)
    b = Measure.new_unbound(ctx)
    total = a + b
    prop = total.prop_eq(b)

    build_ctx = Z3BuildContext()
    first = build_ctx.build_prop(prop)
    assert build_ctx.created == 4

    second = build_ctx.build_prop(prop)
    build_ctx.build_measure(total)
    build_ctx.build_measure(a)
    assert build_ctx.created == 4
    assert first.eq(second)


def test_reweighted_prop_shares_translation():
    ctx = LayoutContext()
    prop = Measure.new_unbound(ctx).prop_ge(0.0)

    build_ctx = Z3BuildContext()
    build_ctx.build_prop(prop)
    created = build_ctx.created
    build_ctx.build_prop(prop.with_weight(99))

    assert build_ctx.created == created


def test_shared_subexpressions_are_translated_once():
    ctx = LayoutContext()
    node = Measure.new_unbound(ctx) + Measure.new_unbound(ctx)
    for _ in range(60):
        node = node + node

    build_ctx = Z3BuildContext()
    build_ctx.build_measure(node)

    assert build_ctx.created == 3 + 60


def test_structurally_equal_nodes_are_distinct():
    ctx = LayoutContext()
    first = Measure.new_unbound(ctx)
    second = Measure.new_unbound(ctx)

    build_ctx = Z3BuildContext()
    x = build_ctx.build_measure(first)
    y = build_ctx.build_measure(second)

    assert build_ctx.created == 2
    assert not x.eq(y)


def test_deep_min_chain_does_not_recurse():
    ctx = LayoutContext()
    low = Measure.new_unbound(ctx)
    other = Measure.new_unbound(ctx)
    for _ in range(3000):
        low = low.min(other)

    build_ctx = Z3BuildContext()
    expr = build_ctx.build_measure(low)

    assert build_ctx.created == 2 + 2 * 3000
    assert z3.is_app_of(expr, z3.Z3_OP_ITE)


def test_constant_translates_to_exact_rational():
    ctx = LayoutContext()

    build_ctx = Z3BuildContext()
    expr = build_ctx.build_measure(Measure.new_const(ctx, 0.125))

    assert z3.is_rational_value(expr)
    assert expr.as_fraction() == Fraction(1, 8)


def test_node_kinds_map_to_native_operations():
    ctx = LayoutContext()
    a = Measure.new_unbound(ctx)
    b = Measure.new_unbound(ctx)
    build_ctx = Z3BuildContext()

    assert z3.is_add(build_ctx.build_measure(a + b))
    assert z3.is_sub(build_ctx.build_measure(a - b))
    assert z3.is_mul(build_ctx.build_measure(a * b))
    assert z3.is_div(build_ctx.build_measure(a / b))
    assert z3.is_eq(build_ctx.build_prop(a.prop_eq(b)))
    assert z3.is_lt(build_ctx.build_prop(a.prop_lt(b)))
    assert z3.is_le(build_ctx.build_prop(a.prop_le(b)))
    assert z3.is_gt(build_ctx.build_prop(a.prop_gt(b)))
    assert z3.is_ge(build_ctx.build_prop(a.prop_ge(b)))
    assert z3.is_and(build_ctx.build_prop(a.prop_lt(b) & b.prop_lt(a)))
    assert z3.is_or(build_ctx.build_prop(a.prop_lt(b) | b.prop_lt(a)))
    assert z3.is_not(build_ctx.build_prop(~a.prop_lt(b)))
    assert z3.is_real(build_ctx.build_measure(a))
    assert build_ctx.build_measure(a).decl().name().startswith("measure_")


def test_measure_and_prop_delegate_to_build_context():
    ctx = LayoutContext()
    a = Measure.new_unbound(ctx)
    build_ctx = Z3BuildContext()

    assert a.build_z3(build_ctx).eq(build_ctx.build_measure(a))
    prop = a.prop_ge(1.0)
    assert prop.build_z3(build_ctx).eq(build_ctx.build_prop(prop))


def test_build_context_rejects_foreign_layout_context():
    build_ctx = Z3BuildContext()
    build_ctx.build_measure(Measure.new_unbound(LayoutContext()))

    with pytest.raises(ValueError):
        build_ctx.build_measure(Measure.new_unbound(LayoutContext()))
