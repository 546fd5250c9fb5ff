"""Arena that owns every expression node of a layout session."""

from __future__ import annotations

from typing import List, Union

from .nodes import SMALL_MEASURE_CONSTS, MeasureVariant, PropVariant


Node = Union[MeasureVariant, PropVariant]


class LayoutContext:
    """Growable node store; a node's key is its index and serves as its identity.

    Keys below zero address the shared small-constant pool.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def alloc(self, node: Node) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def node(self, key: int) -> Node:
        if key < 0:
            return SMALL_MEASURE_CONSTS[~key]
        return self._nodes[key]

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"LayoutContext(nodes={len(self._nodes)})"


def small_const_key(value: int) -> int:
    """Return the pool key of the integer constant ``value`` (0..15)."""

    if not 0 <= value < len(SMALL_MEASURE_CONSTS):
        raise ValueError(f"{value} is outside the small constant pool")
    return ~value


def is_small_const_key(key: int) -> bool:
    return key < 0
