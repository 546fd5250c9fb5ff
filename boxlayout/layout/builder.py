"""Collects widgets and constraints and solves them with ``z3.Optimize``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Optional

import numpy as np
import z3

from ..logging_utils import debug_log_call
from .config import SolverOptions, get_solver_options
from .context import LayoutContext
from .prop import Prop
from .translator import Z3BuildContext
from .widget import RawWidget

logger = logging.getLogger(__name__)

BuildState = Literal["collecting", "solving", "solved", "failed"]


class LayoutUnsatError(RuntimeError):
    """Raised by :meth:`LayoutBuilder.build` when no layout can be derived."""


class LayoutUnsat(LayoutUnsatError):
    def __init__(self) -> None:
        super().__init__("provided constraints cannot be satisfied")


class LayoutUnknown(LayoutUnsatError):
    def __init__(self, reason: str = "") -> None:
        message = "failed to derive a layout under provided constraints"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.reason = reason


@dataclass
class BuildReport:
    satisfied_constraints: List[Prop] = field(default_factory=list)
    unsatisfied_constraints: List[Prop] = field(default_factory=list)

    @property
    def is_fully_satisfied(self) -> bool:
        return not self.unsatisfied_constraints

    def __repr__(self) -> str:
        return (
            f"BuildReport(satisfied={len(self.satisfied_constraints)}, "
            f"unsatisfied={len(self.unsatisfied_constraints)})"
        )


def _real_to_float(value: z3.ExprRef) -> float:
    if z3.is_rational_value(value):
        return value.numerator_as_long() / value.denominator_as_long()
    if z3.is_algebraic_value(value):
        approx = value.approx(20)
        return approx.numerator_as_long() / approx.denominator_as_long()
    raise AssertionError(f"check returned sat but model does not provide a value for a measure: {value}")


def _bool_value(value: z3.ExprRef) -> bool:
    if z3.is_true(value):
        return True
    if z3.is_false(value):
        return False
    raise AssertionError(f"check returned sat but model does not provide a value for a prop: {value}")


class LayoutBuilder:
    """Accumulates widgets and free-standing constraints for one layout session.

    A builder is consumed by :meth:`build`; it cannot collect or solve again
    afterwards.
    """

    def __init__(self, layout_ctx: LayoutContext) -> None:
        self._layout_ctx = layout_ctx
        self._widgets: List[RawWidget] = []
        self._constraints: List[Prop] = []
        self._state: BuildState = "collecting"

    @property
    def ctx(self) -> LayoutContext:
        return self._layout_ctx

    @property
    def state(self) -> BuildState:
        return self._state

    def _ensure_collecting(self) -> None:
        if self._state != "collecting":
            raise RuntimeError(f"layout builder already consumed (state={self._state})")

    def push_widget(self, widget: RawWidget) -> None:
        self._ensure_collecting()
        if not isinstance(widget, RawWidget):
            raise TypeError(f"expected a RawWidget, got {type(widget).__name__}")
        self._widgets.append(widget)

    def push_constraint(self, prop: Prop) -> None:
        self._ensure_collecting()
        if not isinstance(prop, Prop):
            raise TypeError(f"expected a Prop, got {type(prop).__name__}")
        if prop.ctx is not self._layout_ctx:
            raise ValueError("constraint belongs to a different layout context")
        self._constraints.append(prop)

    @debug_log_call(logger, name="LayoutBuilder.build")
    def build(self, options: Optional[SolverOptions] = None) -> BuildReport:
        self._ensure_collecting()
        self._state = "solving"
        try:
            report = self._solve(options if options is not None else get_solver_options())
        except BaseException:
            self._state = "failed"
            raise
        self._state = "solved"
        return report

    def _solve(self, options: SolverOptions) -> BuildReport:
        build_ctx = Z3BuildContext()
        opt = z3.Optimize(ctx=build_ctx.z3_ctx)
        params = options.solver_params()
        if params:
            opt.set(**params)

        widgets, self._widgets = self._widgets, []
        explicit, self._constraints = self._constraints, []
        constraints = [c for w in widgets for c in w.constraints()]
        constraints.extend(explicit)
        logger.info(
            "Building layout: %d widgets, %d constraints (%d explicit)",
            len(widgets),
            len(constraints),
            len(explicit),
        )

        for c in constraints:
            opt.add_soft(build_ctx.build_prop(c), c.weight)
        logger.debug("Translated %d distinct nodes", build_ctx.created)

        result = opt.check()
        logger.info("Solver finished with result: %s", result)
        if result == z3.unsat:
            raise LayoutUnsat()
        if result != z3.sat:
            raise LayoutUnknown(opt.reason_unknown())

        model = opt.model()
        for widget in widgets:
            values = np.array(
                [
                    _real_to_float(model.eval(build_ctx.build_measure(m), model_completion=True))
                    for m in widget.measures()
                ],
                dtype=np.float64,
            )
            widget.paint(values)

        report = BuildReport()
        for c in constraints:
            if _bool_value(model.eval(build_ctx.build_prop(c), model_completion=True)):
                report.satisfied_constraints.append(c)
            else:
                report.unsatisfied_constraints.append(c)

        logger.info(
            "Layout solved: %d satisfied, %d unsatisfied",
            len(report.satisfied_constraints),
            len(report.unsatisfied_constraints),
        )
        return report


__all__ = [
    "BuildReport",
    "LayoutBuilder",
    "LayoutUnknown",
    "LayoutUnsat",
    "LayoutUnsatError",
]
