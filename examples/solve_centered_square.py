"""Example: center a square inside a fixed frame and print the resolved geometry."""

from boxlayout import LayoutBuilder, LayoutContext, Rectangle, RectangleMetrics


def main() -> None:
    ctx = LayoutContext()
    builder = LayoutBuilder(ctx)
    resolved = {}

    def record(name: str):
        def paint(metrics: RectangleMetrics) -> None:
            resolved[name] = metrics

        return paint

    frame = Rectangle.with_width_and_height(ctx, 120.0, 80.0, record("frame"))
    square = Rectangle.square(ctx, record("square"))

    frame_measures = frame.measure_set()
    square_measures = square.measure_set()
    frame_center = frame_measures.center()
    square_center = square_measures.center()

    builder.push_constraint(frame.left.prop_eq(0.0))
    builder.push_constraint(frame.top.prop_eq(0.0))
    builder.push_constraint(square_center.x.prop_eq(frame_center.x))
    builder.push_constraint(square_center.y.prop_eq(frame_center.y))
    builder.push_constraint(square.width.prop_eq(frame.height - 20.0))
    builder.push_widget(frame)
    builder.push_widget(square)

    report = builder.build()
    for name, m in resolved.items():
        print(f"{name}: left={m.left:g} top={m.top:g} width={m.width:g} height={m.height:g}")
    print("Unsatisfied:", [str(p) for p in report.unsatisfied_constraints])


if __name__ == "__main__":
    main()
