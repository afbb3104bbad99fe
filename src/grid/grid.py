"""Grid building, gravity and rendering utilities."""

from typing import AbstractSet, Iterable, List, Optional, Sequence, Union

from .models import EMPTY, Grid, Position


# Offsets visited when growing a word, as (dx, dy)
NEIGHBOR_OFFSETS = (
    (-1, 0),   # W
    (0, -1),   # N
    (-1, -1),  # NW
    (1, 0),    # E
    (0, 1),    # S
    (1, 1),    # SE
    (1, -1),   # NE
    (-1, 1),   # SW
)


def build_grid(rows: Union[Sequence[str], Sequence[Sequence[str]]]) -> Grid:
    """
    Build an immutable grid from rows of cells.

    Rows may be strings or sequences of single characters. Raises ValueError
    if the grid is missing, has no rows or columns, is jagged, or contains a
    cell that is not a single character.
    """
    if rows is None:
        raise ValueError("Grid is required")
    if isinstance(rows, str):
        raise ValueError("Grid must be a sequence of rows, not a single string")

    grid = tuple(tuple(row) for row in rows)

    if not grid or not grid[0]:
        raise ValueError("Grid must have at least one row and one column")

    width = len(grid[0])
    for y, row in enumerate(grid):
        if len(row) != width:
            raise ValueError(f"Row {y} has {len(row)} cells, expected {width}")
        for x, cell in enumerate(row):
            if not isinstance(cell, str) or len(cell) != 1:
                raise ValueError(f"Cell {Position(x, y)} must be a single character, got {cell!r}")
            if len(cell.lower()) != 1:
                # Lower-casing must not change the number of letters
                raise ValueError(f"Cell {Position(x, y)} {cell!r} does not lower-case to a single character")

    return grid


def grid_width(grid: Grid) -> int:
    return len(grid[0]) if grid else 0


def in_bounds(grid: Grid, position: Position) -> bool:
    return 0 <= position.y < len(grid) and 0 <= position.x < grid_width(grid)


def cell_at(grid: Grid, position: Position) -> str:
    return grid[position.y][position.x]


def neighbors(position: Position) -> List[Position]:
    """The 8 cells around ``position``, which may lie off the grid."""
    return [Position(position.x + dx, position.y + dy) for dx, dy in NEIGHBOR_OFFSETS]


def iter_positions(grid: Grid) -> Iterable[Position]:
    """Every cell of the grid in row-major order."""
    for y in range(len(grid)):
        for x in range(grid_width(grid)):
            yield Position(x, y)


def normalize_case(grid: Grid) -> Grid:
    """Return a lower-cased copy of the grid."""
    return tuple(tuple(cell.lower() for cell in row) for row in grid)


def collapse_and_gravitate(grid: Grid, positions: AbstractSet[Position]) -> Grid:
    """
    Clear ``positions`` and let the remaining letters fall.

    Each column is compacted independently towards the bottom row, keeping
    the letters in their original top-to-bottom order. Cells vacated at the
    top of a column become EMPTY. Neither argument is modified.
    """
    height = len(grid)
    width = grid_width(grid)
    columns = []

    for x in range(width):
        letters = [
            grid[y][x] for y in range(height)
            if grid[y][x] != EMPTY and Position(x, y) not in positions
        ]
        columns.append([EMPTY] * (height - len(letters)) + letters)

    return tuple(tuple(columns[x][y] for x in range(width)) for y in range(height))


def render_grid(grid: Grid, highlight: Optional[AbstractSet[Position]] = None) -> str:
    """Render the grid to a string, '.' for empty cells and highlighted letters upper-cased."""
    if not grid:
        return ""

    highlight = highlight or frozenset()
    lines = []
    for y, row in enumerate(grid):
        line = ""
        for x, cell in enumerate(row):
            if cell == EMPTY:
                line += "."
            elif Position(x, y) in highlight:
                line += cell.upper()
            else:
                line += cell
        lines.append(line)

    return "\n".join(lines)
