"""Widgets that take part in a layout."""

from .rectangle import (
    EmptyGroupError,
    Point,
    Rectangle,
    RectangleError,
    RectangleMeasures,
    RectangleMetrics,
    RectanglePainter,
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
