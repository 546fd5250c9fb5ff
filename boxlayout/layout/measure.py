"""Real-valued measurements of layout objects."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction
from typing import Optional, Union

from .context import LayoutContext, small_const_key
from .nodes import (
    SMALL_MEASURE_CONSTS,
    Add,
    Const,
    Div,
    Eq,
    Ge,
    Gt,
    Le,
    Lt,
    MeasureVariant,
    Mul,
    Sub,
    Unbound,
)
from .printer import format_measure
from .prop import Prop

# Floats whose exact binary value already has a denominator this small are kept as-is.
MAX_EXACT_DENOMINATOR = 100
CONST_QUANTUM = Decimal("0.01")
_INT32_LIMIT = 2**31


class MeasureError(ValueError):
    """Base class for errors raised while building measures."""


class BadConstError(MeasureError):
    """Raised when a literal cannot be stored as a small exact fraction."""

    def __init__(self, value: object, reason: str = "not representable as a small fraction"):
        super().__init__(f"bad const {value!r}: {reason}")
        self.value = value


def const_fraction(value: numbers.Real) -> Fraction:
    """Convert ``value`` to the exact fraction stored in a constant node.

    Values whose exact rational has a denominator of at most
    :data:`MAX_EXACT_DENOMINATOR` are kept exactly; anything else is rounded
    half-up to two decimal digits first.
    """

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise BadConstError(value, "not a real number")
    if not isinstance(value, numbers.Rational):
        # numpy floating scalars and other Real types
        value = float(value)
    if isinstance(value, float) and not math.isfinite(value):
        raise BadConstError(value, "not finite")
    exact = Fraction(value)
    if exact.denominator > MAX_EXACT_DENOMINATOR:
        rounded = Decimal(repr(float(value))).quantize(CONST_QUANTUM, rounding=ROUND_HALF_UP)
        exact = Fraction(rounded)
    if abs(exact.numerator) >= _INT32_LIMIT:
        raise BadConstError(value, "numerator does not fit 32 bits")
    return exact


Operand = Union["Measure", numbers.Real]


@dataclass(frozen=True, repr=False)
class Measure:
    """A real-number measurement of a property of an object.

    ``key`` addresses the immutable node in ``ctx``; two handles compare equal
    only when they refer to the same node.
    """

    ctx: LayoutContext
    key: int

    # ------------------------------------------------------------------
    # Constructors

    @classmethod
    def zero(cls, ctx: LayoutContext) -> "Measure":
        return cls(ctx, small_const_key(0))

    @classmethod
    def new_unbound(cls, ctx: LayoutContext) -> "Measure":
        return cls(ctx, ctx.alloc(Unbound()))

    @classmethod
    def new_const(cls, ctx: LayoutContext, value: numbers.Real) -> "Measure":
        frac = const_fraction(value)
        if frac.denominator == 1 and 0 <= frac.numerator < len(SMALL_MEASURE_CONSTS):
            return cls(ctx, small_const_key(frac.numerator))
        return cls(ctx, ctx.alloc(Const(frac.numerator, frac.denominator)))

    # ------------------------------------------------------------------
    # Inspection

    @property
    def variant(self) -> MeasureVariant:
        return self.ctx.node(self.key)  # type: ignore[return-value]

    def is_unbound(self) -> bool:
        return isinstance(self.variant, Unbound)

    def is_const(self) -> bool:
        return isinstance(self.variant, Const)

    def const_value(self) -> Optional[Fraction]:
        node = self.variant
        if isinstance(node, Const):
            return Fraction(node.num, node.den)
        return None

    def build_z3(self, build_ctx):
        """Translate into a z3 real expression through ``build_ctx``'s cache."""

        return build_ctx.build_measure(self)

    # ------------------------------------------------------------------
    # Node construction helpers

    def _coerce(self, other: Operand) -> "Measure":
        if isinstance(other, Measure):
            if other.ctx is not self.ctx:
                raise ValueError("cannot combine measures from different layout contexts")
            return other
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return Measure.new_const(self.ctx, other)
        raise TypeError(f"unsupported measure operand {other!r}")

    def _measure(self, node: MeasureVariant) -> "Measure":
        return Measure(self.ctx, self.ctx.alloc(node))

    def _prop(self, node) -> Prop:
        return Prop(self.ctx, self.ctx.alloc(node))

    # ------------------------------------------------------------------
    # Propositions

    def prop_eq(self, that: Operand) -> Prop:
        return self._prop(Eq(self, self._coerce(that)))

    def prop_lt(self, that: Operand) -> Prop:
        return self._prop(Lt(self, self._coerce(that)))

    def prop_le(self, that: Operand) -> Prop:
        return self._prop(Le(self, self._coerce(that)))

    def prop_gt(self, that: Operand) -> Prop:
        return self._prop(Gt(self, self._coerce(that)))

    def prop_ge(self, that: Operand) -> Prop:
        return self._prop(Ge(self, self._coerce(that)))

    def min(self, that: Operand) -> "Measure":
        that = self._coerce(that)
        return self.prop_lt(that).select(self, that)

    def max(self, that: Operand) -> "Measure":
        that = self._coerce(that)
        return self.prop_gt(that).select(self, that)

    # ------------------------------------------------------------------
    # Arithmetic

    def __add__(self, other: Operand) -> "Measure":
        return self._measure(Add(self, self._coerce(other)))

    def __radd__(self, other: numbers.Real) -> "Measure":
        return self._measure(Add(self._coerce(other), self))

    def __sub__(self, other: Operand) -> "Measure":
        return self._measure(Sub(self, self._coerce(other)))

    def __rsub__(self, other: numbers.Real) -> "Measure":
        return self._measure(Sub(self._coerce(other), self))

    def __mul__(self, other: Operand) -> "Measure":
        return self._measure(Mul(self, self._coerce(other)))

    def __rmul__(self, other: numbers.Real) -> "Measure":
        return self._measure(Mul(self._coerce(other), self))

    def __truediv__(self, other: Operand) -> "Measure":
        return self._measure(Div(self, self._coerce(other)))

    def __rtruediv__(self, other: numbers.Real) -> "Measure":
        return self._measure(Div(self._coerce(other), self))

    # ------------------------------------------------------------------
    # Formatting

    def __str__(self) -> str:
        return format_measure(self)

    def __repr__(self) -> str:
        return f"Measure({self})"


__all__ = [
    "BadConstError",
    "CONST_QUANTUM",
    "MAX_EXACT_DENOMINATOR",
    "Measure",
    "MeasureError",
    "const_fraction",
]
