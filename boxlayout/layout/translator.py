"""Translation of measure/proposition graphs into z3 expressions."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple, Union

import z3

from .context import LayoutContext
from .measure import Measure
from .nodes import (
    Add,
    And,
    Const,
    Div,
    Eq,
    Ge,
    Gt,
    Le,
    Lt,
    Mul,
    Not,
    Or,
    Select,
    Sub,
    Unbound,
)
from .prop import Prop

logger = logging.getLogger(__name__)

Handle = Union[Measure, Prop]


def _children(node) -> List[Handle]:
    if isinstance(node, (Unbound, Const)):
        return []
    if isinstance(node, Select):
        return [node.cond, node.left, node.right]
    if isinstance(node, Not):
        return [node.inner]
    return [node.left, node.right]


class Z3BuildContext:
    """Memoizes z3 expressions per node key for one solver session.

    Every distinct node is constructed exactly once; ``created`` counts those
    constructions. All handles translated through one build context must come
    from the same :class:`LayoutContext`.
    """

    def __init__(self, z3_ctx: Optional[z3.Context] = None) -> None:
        self.z3_ctx = z3_ctx if z3_ctx is not None else z3.Context()
        self.measure_cache: Dict[int, z3.ArithRef] = {}
        self.prop_cache: Dict[int, z3.BoolRef] = {}
        self.created = 0
        self._layout_ctx: Optional[LayoutContext] = None

    def build_measure(self, measure: Measure) -> z3.ArithRef:
        cached = self.measure_cache.get(measure.key)
        if cached is None:
            self._build(measure)
            cached = self.measure_cache[measure.key]
        return cached

    def build_prop(self, prop: Prop) -> z3.BoolRef:
        cached = self.prop_cache.get(prop.key)
        if cached is None:
            self._build(prop)
            cached = self.prop_cache[prop.key]
        return cached

    # ------------------------------------------------------------------

    def _cache_for(self, handle: Handle) -> Dict[int, z3.ExprRef]:
        return self.prop_cache if isinstance(handle, Prop) else self.measure_cache  # type: ignore[return-value]

    def _bind(self, handle: Handle) -> None:
        if self._layout_ctx is None:
            self._layout_ctx = handle.ctx
        elif handle.ctx is not self._layout_ctx:
            raise ValueError("a build context cannot mix nodes from different layout contexts")

    def _build(self, root: Handle) -> None:
        self._bind(root)
        # post-order walk with an explicit stack; min/max folds nest deeply
        stack: List[Tuple[Handle, bool]] = [(root, False)]
        while stack:
            handle, expanded = stack.pop()
            cache = self._cache_for(handle)
            if handle.key in cache:
                continue
            node = handle.variant
            if not expanded:
                stack.append((handle, True))
                for child in reversed(_children(node)):
                    if child.key not in self._cache_for(child):
                        stack.append((child, False))
                continue
            cache[handle.key] = self._construct(node)
            self.created += 1
            logger.debug("translated node %d (%s)", handle.key, type(node).__name__)

    def _construct(self, node) -> z3.ExprRef:
        ctx = self.z3_ctx
        m = self.measure_cache
        p = self.prop_cache
        if isinstance(node, Unbound):
            return z3.FreshReal("measure_", ctx=ctx)
        if isinstance(node, Const):
            return z3.RealVal(f"{node.num}/{node.den}", ctx)
        if isinstance(node, Add):
            return m[node.left.key] + m[node.right.key]
        if isinstance(node, Sub):
            return m[node.left.key] - m[node.right.key]
        if isinstance(node, Mul):
            return m[node.left.key] * m[node.right.key]
        if isinstance(node, Div):
            return m[node.left.key] / m[node.right.key]
        if isinstance(node, Select):
            return z3.If(p[node.cond.key], m[node.left.key], m[node.right.key], ctx)
        if isinstance(node, Eq):
            return m[node.left.key] == m[node.right.key]
        if isinstance(node, Lt):
            return m[node.left.key] < m[node.right.key]
        if isinstance(node, Le):
            return m[node.left.key] <= m[node.right.key]
        if isinstance(node, Gt):
            return m[node.left.key] > m[node.right.key]
        if isinstance(node, Ge):
            return m[node.left.key] >= m[node.right.key]
        if isinstance(node, Or):
            return z3.Or(p[node.left.key], p[node.right.key])
        if isinstance(node, And):
            return z3.And(p[node.left.key], p[node.right.key])
        if isinstance(node, Not):
            return z3.Not(p[node.inner.key], ctx)
        raise TypeError(f"unknown expression node {node!r}")


__all__ = ["Z3BuildContext"]
