"""Human readable rendering of measures and propositions."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Union

from .context import small_const_key
from .nodes import Add, And, Const, Div, Eq, Ge, Gt, Le, Lt, Mul, Not, Or, Select, Sub, Unbound

if TYPE_CHECKING:  # pragma: no cover
    from .measure import Measure
    from .prop import Prop

    Handle = Union[Measure, Prop]

_ZERO_KEY = small_const_key(0)

_MEASURE_OPS = {Add: "+", Sub: "-", Mul: "*", Div: "/"}
_COMPARISON_OPS = {Eq: "==", Lt: "<", Le: "<=", Gt: ">", Ge: ">="}


def format_const(num: int, den: int) -> str:
    return f"{num / den:g}"


def _pieces(handle: "Handle") -> List[Union[str, "Handle"]]:
    """Split one node into literal text and the child handles it embeds."""

    node = handle.variant
    if isinstance(node, Unbound):
        return [f"<m{handle.key}>"]
    if isinstance(node, Const):
        return [format_const(node.num, node.den)]
    if isinstance(node, (Add, Sub)) and node.right.key == _ZERO_KEY:
        # offsets of "+0" come from the pooled zero and print as the bare operand
        return [node.left]
    if isinstance(node, Select):
        cond = node.cond.variant
        if isinstance(cond, (Lt, Gt)) and cond.left == node.left and cond.right == node.right:
            name = "min" if isinstance(cond, Lt) else "max"
            return [f"({name} ", node.left, " ", node.right, ")"]
        return ["(select (", node.cond, ") ", node.left, " ", node.right, ")"]
    if isinstance(node, Not):
        return ["not (", node.inner, ")"]
    if isinstance(node, Or):
        return ["(", node.left, ") or (", node.right, ")"]
    if isinstance(node, And):
        return ["(", node.left, ") and (", node.right, ")"]
    if type(node) in _COMPARISON_OPS:
        return [node.left, f" {_COMPARISON_OPS[type(node)]} ", node.right]
    return ["(", node.left, f" {_MEASURE_OPS[type(node)]} ", node.right, ")"]


def _render(root: "Handle") -> str:
    # group folds over thousands of rectangles nest deeper than the recursion limit
    out: List[str] = []
    stack: List[Union[str, "Handle"]] = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        else:
            stack.extend(reversed(_pieces(item)))
    return "".join(out)


def format_measure(measure: "Measure") -> str:
    return _render(measure)


def format_prop(prop: "Prop") -> str:
    return _render(prop)
