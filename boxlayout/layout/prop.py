"""Propositions over measurements or other propositions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .context import LayoutContext
from .nodes import And, Not, Or, PropVariant, Select
from .printer import format_prop

if TYPE_CHECKING:  # pragma: no cover
    from .measure import Measure

DEFAULT_WEIGHT = 10


@dataclass(frozen=True, repr=False)
class Prop:
    """A weighted boolean constraint.

    ``weight`` is the relaxation cost handed to the solver; it is not part of
    the node identity, so :meth:`with_weight` keeps the translation cache key.
    Connectives always produce a proposition with :data:`DEFAULT_WEIGHT`.
    """

    ctx: LayoutContext
    key: int
    weight: int = DEFAULT_WEIGHT

    @property
    def variant(self) -> PropVariant:
        return self.ctx.node(self.key)  # type: ignore[return-value]

    def with_weight(self, weight: int) -> "Prop":
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 1:
            raise ValueError(f"weight must be a positive integer, got {weight!r}")
        return replace(self, weight=weight)

    def select(self, left: "Measure", right: "Measure") -> "Measure":
        from .measure import Measure

        for operand in (left, right):
            if operand.ctx is not self.ctx:
                raise ValueError("cannot combine measures from different layout contexts")
        return Measure(self.ctx, self.ctx.alloc(Select(self, left, right)))

    def build_z3(self, build_ctx):
        """Translate into a z3 boolean expression through ``build_ctx``'s cache."""

        return build_ctx.build_prop(self)

    def _combine(self, node: PropVariant) -> "Prop":
        return Prop(self.ctx, self.ctx.alloc(node))

    def _check(self, that: "Prop") -> "Prop":
        if not isinstance(that, Prop):
            raise TypeError(f"unsupported proposition operand {that!r}")
        if that.ctx is not self.ctx:
            raise ValueError("cannot combine propositions from different layout contexts")
        return that

    def and_(self, that: "Prop") -> "Prop":
        return self._combine(And(self, self._check(that)))

    def or_(self, that: "Prop") -> "Prop":
        return self._combine(Or(self, self._check(that)))

    def not_(self) -> "Prop":
        return self._combine(Not(self))

    __and__ = and_
    __or__ = or_
    __invert__ = not_

    def __str__(self) -> str:
        return format_prop(self)

    def __repr__(self) -> str:
        return f"Prop[{self.weight}]({self})"


__all__ = ["DEFAULT_WEIGHT", "Prop"]
