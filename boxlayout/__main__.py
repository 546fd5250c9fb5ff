import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from boxlayout import (
    LayoutBuilder,
    LayoutContext,
    LayoutUnsatError,
    Measure,
    Rectangle,
    RectangleMetrics,
    SolverOptions,
)

logger = logging.getLogger(__name__)

Painted = List[Tuple[str, RectangleMetrics]]


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _recorder(painted: Painted, name: str) -> Callable[[RectangleMetrics], None]:
    def paint(metrics: RectangleMetrics) -> None:
        painted.append((name, metrics))

    return paint


def _nested_demo(builder: LayoutBuilder, count: int, painted: Painted) -> None:
    ctx = builder.ctx
    frame = (
        Measure.new_const(ctx, 0.0),
        Measure.new_const(ctx, 1000.0),
        Measure.new_const(ctx, 0.0),
        Measure.new_const(ctx, 1000.0),
    )
    for idx in range(count):
        rect = Rectangle.unbound(ctx, _recorder(painted, f"nested[{idx}]"))
        builder.push_constraint(rect.left.prop_gt(frame[0]))
        builder.push_constraint(rect.right.prop_lt(frame[1]))
        builder.push_constraint(rect.top.prop_gt(frame[2]))
        builder.push_constraint(rect.bottom.prop_lt(frame[3]))
        builder.push_constraint(rect.width.prop_gt(3.0))
        builder.push_constraint(rect.height.prop_gt(3.0))
        frame = (rect.left, rect.right, rect.top, rect.bottom)
        builder.push_widget(rect)


def _row_demo(builder: LayoutBuilder, count: int, painted: Painted) -> None:
    ctx = builder.ctx
    flex = Measure.new_unbound(ctx)
    cursor = Measure.zero(ctx)
    boxes = []
    for idx in range(count):
        spacer = Rectangle.row_spacer(ctx, flex)
        builder.push_constraint(spacer.left.prop_eq(cursor))
        builder.push_constraint(spacer.top.prop_eq(0.0))
        box = Rectangle.with_width_and_height(ctx, 10.0, 5.0, _recorder(painted, f"box[{idx}]"))
        builder.push_constraint(box.measure_set().right_to(spacer.right, 0.0))
        builder.push_constraint(box.top.prop_eq(0.0))
        cursor = box.right
        boxes.append(box)
        builder.push_widget(spacer)
    closing = Rectangle.row_spacer(ctx, flex)
    builder.push_constraint(closing.left.prop_eq(cursor))
    builder.push_constraint(closing.right.prop_eq(100.0))
    builder.push_constraint(closing.top.prop_eq(0.0))
    builder.push_widget(closing)
    for box in boxes:
        builder.push_widget(box)


def _conflict_demo(builder: LayoutBuilder, count: int, painted: Painted) -> None:
    ctx = builder.ctx
    rect = Rectangle.with_width_and_height(ctx, 5.0, 10.0, _recorder(painted, "conflict"))
    builder.push_constraint(rect.top.prop_eq(0.0))
    builder.push_constraint(rect.bottom.prop_eq(1.0).with_weight(20))
    builder.push_widget(rect)


DEMOS: Dict[str, Callable[[LayoutBuilder, int, Painted], None]] = {
    "nested": _nested_demo,
    "row": _row_demo,
    "conflict": _conflict_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Solve demo box layouts")
    parser.add_argument("demo", choices=sorted(DEMOS), help="Demo layout to solve")
    parser.add_argument(
        "--count",
        type=int,
        default=5,
        help="Number of rectangles in the demo (default: 5)",
    )
    parser.add_argument(
        "--timeout-ms",
        type=int,
        help="Solver timeout in milliseconds",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    if args.count < 1:
        parser.error("--count must be at least 1")

    ctx = LayoutContext()
    builder = LayoutBuilder(ctx)
    painted: Painted = []
    DEMOS[args.demo](builder, args.count, painted)
    logger.info("Demo %s registered %d arena nodes", args.demo, len(ctx))

    try:
        report = builder.build(SolverOptions(timeout_ms=args.timeout_ms))
    except LayoutUnsatError as exc:
        logger.error("Layout failed: %s", exc)
        print(f"Layout failed: {exc}")
        raise SystemExit(1)

    print("Rectangles:")
    for name, m in painted:
        print(
            f"  {name}: left={m.left:.3f} right={m.right:.3f} top={m.top:.3f} "
            f"bottom={m.bottom:.3f} width={m.width:.3f} height={m.height:.3f}"
        )
    print(f"Satisfied constraints: {len(report.satisfied_constraints)}")
    print("Unsatisfied constraints:")
    if report.unsatisfied_constraints:
        for prop in report.unsatisfied_constraints:
            print(f"  - {prop}")
    else:
        print("  (none)")


if __name__ == "__main__":
    main(sys.argv[1:])
