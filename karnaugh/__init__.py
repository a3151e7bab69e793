"""Convenience exports for the Karnaugh map minimizer."""

from .errors import (
    InvalidRowError,
    KarnaughError,
    TruthTableError,
    UnsupportedVariableCount,
)
from .geometry import SHAPES, GroupRect, Point
from .grid import AxisAssignment, Cell, KMap, axis_order, split_variables
from .kmap_engine import (
    all_rects,
    check_group,
    enumerate_groups,
    filter_groups,
    get_filtered_groups,
)
from .logic import (
    Literal,
    Minimization,
    evaluate_formula,
    formula_to_sympy,
    get_formula,
    get_formula_string,
    minimize,
    render_formula,
    verify_formula,
)
from .truth_table import TruthTable, load_truth_table, parse_truth_table

__version__ = "0.1.0"

__all__ = [
    "AxisAssignment",
    "Cell",
    "GroupRect",
    "InvalidRowError",
    "KMap",
    "KarnaughError",
    "Literal",
    "Minimization",
    "Point",
    "SHAPES",
    "TruthTable",
    "TruthTableError",
    "UnsupportedVariableCount",
    "all_rects",
    "axis_order",
    "check_group",
    "enumerate_groups",
    "evaluate_formula",
    "filter_groups",
    "formula_to_sympy",
    "get_filtered_groups",
    "get_formula",
    "get_formula_string",
    "load_truth_table",
    "minimize",
    "parse_truth_table",
    "render_formula",
    "split_variables",
    "verify_formula",
]
