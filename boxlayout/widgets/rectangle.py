"""Axis-aligned rectangle widget and group alignment helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Callable, List, Sequence

from ..layout.context import LayoutContext
from ..layout.measure import Measure
from ..layout.prop import Prop
from ..layout.widget import RawWidget

logger = logging.getLogger(__name__)


class RectangleError(ValueError):
    """Base class for rectangle helper errors."""


class EmptyGroupError(RectangleError):
    def __init__(self, helper: str) -> None:
        super().__init__(f"empty group passed to {helper}")
        self.helper = helper


@dataclass(frozen=True)
class Point:
    x: Measure
    y: Measure


@dataclass(frozen=True)
class RectangleMetrics:
    """Resolved geometry handed to a rectangle painter."""

    left: float
    right: float
    top: float
    bottom: float
    width: float
    height: float


RectanglePainter = Callable[[RectangleMetrics], None]


@dataclass(frozen=True)
class RectangleMeasures:
    left: Measure
    right: Measure
    top: Measure
    bottom: Measure
    width: Measure
    height: Measure

    # ------------------------------------------------------------------
    # Group helpers

    @staticmethod
    def _require(group: Sequence["RectangleMeasures"], helper: str) -> None:
        if not group:
            raise EmptyGroupError(helper)

    @staticmethod
    def group_center(group: Sequence["RectangleMeasures"]) -> Point:
        """Center of the bounding box of ``group``."""

        RectangleMeasures._require(group, "group_center")
        left = RectangleMeasures.group_leftmost(group)
        right = RectangleMeasures.group_rightmost(group)
        top = RectangleMeasures.group_topmost(group)
        bottom = RectangleMeasures.group_bottommost(group)
        return Point(x=(left + right) / 2.0, y=(top + bottom) / 2.0)

    @staticmethod
    def group_leftmost(group: Sequence["RectangleMeasures"]) -> Measure:
        RectangleMeasures._require(group, "group_leftmost")
        return reduce(Measure.min, (r.left for r in group))

    @staticmethod
    def group_rightmost(group: Sequence["RectangleMeasures"]) -> Measure:
        RectangleMeasures._require(group, "group_rightmost")
        return reduce(Measure.max, (r.right for r in group))

    @staticmethod
    def group_topmost(group: Sequence["RectangleMeasures"]) -> Measure:
        RectangleMeasures._require(group, "group_topmost")
        return reduce(Measure.min, (r.top for r in group))

    @staticmethod
    def group_bottommost(group: Sequence["RectangleMeasures"]) -> Measure:
        RectangleMeasures._require(group, "group_bottommost")
        return reduce(Measure.max, (r.bottom for r in group))

    def center(self) -> Point:
        return RectangleMeasures.group_center([self])

    # ------------------------------------------------------------------
    # Edge alignment

    def within(self, that: "RectangleMeasures") -> Prop:
        return (
            self.left_to(that.right, 0.0)
            & self.right_to(that.left, 0.0)
            & self.top_to(that.bottom, 0.0)
            & self.bottom_to(that.top, 0.0)
        )

    def left_to(self, that: Measure, distance: float) -> Prop:
        """This rectangle sits ``distance`` to the left of ``that``."""

        return self.right.prop_eq(that - distance)

    def right_to(self, that: Measure, distance: float) -> Prop:
        """This rectangle sits ``distance`` to the right of ``that``."""

        return self.left.prop_eq(that + distance)

    def top_to(self, that: Measure, distance: float) -> Prop:
        return self.bottom.prop_eq(that - distance)

    def bottom_to(self, that: Measure, distance: float) -> Prop:
        return self.top.prop_eq(that + distance)


class Rectangle(RawWidget):
    def __init__(
        self,
        left: Measure,
        right: Measure,
        top: Measure,
        bottom: Measure,
        width: Measure,
        height: Measure,
        painter: RectanglePainter,
    ) -> None:
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom
        self.width = width
        self.height = height
        self.painter = painter

    @classmethod
    def unbound(cls, ctx: LayoutContext, painter: RectanglePainter) -> "Rectangle":
        return cls(
            left=Measure.new_unbound(ctx),
            right=Measure.new_unbound(ctx),
            top=Measure.new_unbound(ctx),
            bottom=Measure.new_unbound(ctx),
            width=Measure.new_unbound(ctx),
            height=Measure.new_unbound(ctx),
            painter=painter,
        )

    @classmethod
    def square(cls, ctx: LayoutContext, painter: RectanglePainter) -> "Rectangle":
        side = Measure.new_unbound(ctx)
        return cls(
            left=Measure.new_unbound(ctx),
            right=Measure.new_unbound(ctx),
            top=Measure.new_unbound(ctx),
            bottom=Measure.new_unbound(ctx),
            width=side,
            height=side,
            painter=painter,
        )

    @classmethod
    def with_width_and_height(
        cls, ctx: LayoutContext, width: float, height: float, painter: RectanglePainter
    ) -> "Rectangle":
        return cls(
            left=Measure.new_unbound(ctx),
            right=Measure.new_unbound(ctx),
            top=Measure.new_unbound(ctx),
            bottom=Measure.new_unbound(ctx),
            width=Measure.new_const(ctx, width),
            height=Measure.new_const(ctx, height),
            painter=painter,
        )

    @classmethod
    def row_spacer(cls, ctx: LayoutContext, flex_unit: Measure) -> "Rectangle":
        """Invisible filler whose width is the shared ``flex_unit``."""

        def log_metrics(metrics: RectangleMetrics) -> None:
            logger.debug("row_spacer metrics: %s", metrics)

        return cls(
            left=Measure.new_unbound(ctx),
            right=Measure.new_unbound(ctx),
            top=Measure.new_unbound(ctx),
            bottom=Measure.new_unbound(ctx),
            width=flex_unit,
            height=Measure.new_unbound(ctx),
            painter=log_metrics,
        )

    def measure_set(self) -> RectangleMeasures:
        return RectangleMeasures(
            left=self.left,
            right=self.right,
            top=self.top,
            bottom=self.bottom,
            width=self.width,
            height=self.height,
        )

    def measures(self) -> List[Measure]:
        return [self.left, self.right, self.top, self.bottom, self.width, self.height]

    def constraints(self) -> List[Prop]:
        return [
            (self.left + self.width).prop_eq(self.right),
            (self.top + self.height).prop_eq(self.bottom),
            self.top.prop_ge(Measure.zero(self.top.ctx)),
            self.left.prop_ge(Measure.zero(self.left.ctx)),
            self.width.prop_ge(0.0),
            self.height.prop_ge(0.0),
        ]

    def paint(self, values: Sequence[float]) -> None:
        left, right, top, bottom, width, height = (float(v) for v in values)
        self.painter(
            RectangleMetrics(left=left, right=right, top=top, bottom=bottom, width=width, height=height)
        )

    def __repr__(self) -> str:
        return (
            f"Rectangle(left={self.left}, right={self.right}, top={self.top}, "
            f"bottom={self.bottom}, width={self.width}, height={self.height})"
        )


__all__ = [
    "EmptyGroupError",
    "Point",
    "Rectangle",
    "RectangleError",
    "RectangleMeasures",
    "RectangleMetrics",
    "RectanglePainter",
]
