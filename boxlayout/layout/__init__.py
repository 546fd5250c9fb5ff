"""Constraint modeling, translation and solving."""

from .builder import BuildReport, LayoutBuilder, LayoutUnknown, LayoutUnsat, LayoutUnsatError
from .config import SolverOptions, get_solver_options, set_solver_options
from .context import LayoutContext
from .measure import BadConstError, Measure, MeasureError
from .printer import format_measure, format_prop
from .prop import DEFAULT_WEIGHT, Prop
from .translator import Z3BuildContext
from .widget import RawWidget

__all__ = [
    "BadConstError",
    "BuildReport",
    "DEFAULT_WEIGHT",
    "LayoutBuilder",
    "LayoutContext",
    "LayoutUnknown",
    "LayoutUnsat",
    "LayoutUnsatError",
    "Measure",
    "MeasureError",
    "Prop",
    "RawWidget",
    "SolverOptions",
    "Z3BuildContext",
    "format_measure",
    "format_prop",
    "get_solver_options",
    "set_solver_options",
]
