"""Immutable expression nodes stored in a :class:`~boxlayout.layout.context.LayoutContext` arena."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .measure import Measure
    from .prop import Prop


class MeasureVariant:
    """Base class of real-valued expression nodes."""

    __slots__ = ()


class PropVariant:
    """Base class of boolean expression nodes."""

    __slots__ = ()


@dataclass(frozen=True, eq=False)
class Unbound(MeasureVariant):
    pass


@dataclass(frozen=True, eq=False)
class Const(MeasureVariant):
    num: int
    den: int


@dataclass(frozen=True, eq=False)
class Add(MeasureVariant):
    left: "Measure"
    right: "Measure"


@dataclass(frozen=True, eq=False)
class Sub(MeasureVariant):
    left: "Measure"
    right: "Measure"


@dataclass(frozen=True, eq=False)
class Mul(MeasureVariant):
    left: "Measure"
    right: "Measure"


@dataclass(frozen=True, eq=False)
class Div(MeasureVariant):
    left: "Measure"
    right: "Measure"


@dataclass(frozen=True, eq=False)
class Select(MeasureVariant):
    cond: "Prop"
    left: "Measure"
    right: "Measure"


@dataclass(frozen=True, eq=False)
class Eq(PropVariant):
    left: "Measure"
    right: "Measure"


@dataclass(frozen=True, eq=False)
class Lt(PropVariant):
    left: "Measure"
    right: "Measure"


@dataclass(frozen=True, eq=False)
class Le(PropVariant):
    left: "Measure"
    right: "Measure"


@dataclass(frozen=True, eq=False)
class Gt(PropVariant):
    left: "Measure"
    right: "Measure"


@dataclass(frozen=True, eq=False)
class Ge(PropVariant):
    left: "Measure"
    right: "Measure"


@dataclass(frozen=True, eq=False)
class Or(PropVariant):
    left: "Prop"
    right: "Prop"


@dataclass(frozen=True, eq=False)
class And(PropVariant):
    left: "Prop"
    right: "Prop"


@dataclass(frozen=True, eq=False)
class Not(PropVariant):
    inner: "Prop"


# Shared across every context; addressed by negative keys (``~value``).
SMALL_MEASURE_CONSTS = tuple(Const(value, 1) for value in range(16))

MEASURE_BINARY_NODES = (Add, Sub, Mul, Div)
COMPARISON_NODES = (Eq, Lt, Le, Gt, Ge)
CONNECTIVE_NODES = (Or, And)


__all__ = [
    "MeasureVariant",
    "PropVariant",
    "Unbound",
    "Const",
    "Add",
    "Sub",
    "Mul",
    "Div",
    "Select",
    "Eq",
    "Lt",
    "Le",
    "Gt",
    "Ge",
    "Or",
    "And",
    "Not",
    "SMALL_MEASURE_CONSTS",
    "MEASURE_BINARY_NODES",
    "COMPARISON_NODES",
    "CONNECTIVE_NODES",
]
