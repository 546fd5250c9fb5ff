from .layout import (
    DEFAULT_WEIGHT,
    BadConstError,
    BuildReport,
    LayoutBuilder,
    LayoutContext,
    LayoutUnknown,
    LayoutUnsat,
    LayoutUnsatError,
    Measure,
    MeasureError,
    Prop,
    RawWidget,
    SolverOptions,
    Z3BuildContext,
    format_measure,
    format_prop,
    get_solver_options,
    set_solver_options,
)
from .widgets import (
    EmptyGroupError,
    Point,
    Rectangle,
    RectangleError,
    RectangleMeasures,
    RectangleMetrics,
)

__all__ = [
    'DEFAULT_WEIGHT',
    'BadConstError',
    'BuildReport',
    'LayoutBuilder',
    'LayoutContext',
    'LayoutUnknown',
    'LayoutUnsat',
    'LayoutUnsatError',
    'Measure',
    'MeasureError',
    'Prop',
    'RawWidget',
    'SolverOptions',
    'Z3BuildContext',
    'format_measure',
    'format_prop',
    'get_solver_options',
    'set_solver_options',
    'EmptyGroupError',
    'Point',
    'Rectangle',
    'RectangleError',
    'RectangleMeasures',
    'RectangleMetrics',
]
