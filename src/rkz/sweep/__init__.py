"""Range expansion and Z-factor grids."""

from .grid import CellError, ResultGrid, evaluate, evaluate_grid, reference_bar
from .ranges import Range, expand, parse_range

__all__ = [
    "CellError",
    "Range",
    "ResultGrid",
    "evaluate",
    "evaluate_grid",
    "expand",
    "parse_range",
    "reference_bar",
]
