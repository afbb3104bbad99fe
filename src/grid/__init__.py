"""Grid model for the word grid solver."""

from .models import EMPTY, Grid, Position, GridWord, GridSolution, ValidationError
from .grid import (
    build_grid,
    normalize_case,
    collapse_and_gravitate,
    render_grid,
    neighbors,
    iter_positions,
)
from .parsing import parse_grid, parse_grid_or_raise, extract_grid_content

__all__ = [
    # Models
    "EMPTY",
    "Grid",
    "Position",
    "GridWord",
    "GridSolution",
    "ValidationError",
    # Grid utilities
    "build_grid",
    "normalize_case",
    "collapse_and_gravitate",
    "render_grid",
    "neighbors",
    "iter_positions",
    # Parsing
    "parse_grid",
    "parse_grid_or_raise",
    "extract_grid_content",
]
