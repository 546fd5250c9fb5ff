"""Example: an over-constrained rectangle degrades to a partial report."""

from boxlayout import LayoutBuilder, LayoutContext, Measure, Rectangle


def main() -> None:
    ctx = LayoutContext()
    builder = LayoutBuilder(ctx)

    rect = Rectangle.with_width_and_height(ctx, 5.0, 10.0, lambda metrics: print("painted", metrics))
    rect.top = Measure.new_const(ctx, 0.0)
    rect.bottom = Measure.new_const(ctx, 1.0)
    builder.push_widget(rect)

    report = builder.build()
    print(f"Satisfied ({len(report.satisfied_constraints)}):")
    for prop in report.satisfied_constraints:
        print(f"  {prop}")
    print(f"Unsatisfied ({len(report.unsatisfied_constraints)}):")
    for prop in report.unsatisfied_constraints:
        print(f"  {prop}")


if __name__ == "__main__":
    main()
