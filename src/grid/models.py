"""Data models for grids, discovered words and solutions."""

from typing import FrozenSet, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator


# Sentinel for a cell with no letter in it
EMPTY = " "

# Rows of single-character cells, indexed grid[y][x]
Grid = Tuple[Tuple[str, ...], ...]


class Position(NamedTuple):
    """A cell in the grid, as (column, row)."""
    x: int
    y: int


class ValidationError(BaseModel):
    """A single problem found while parsing a text grid."""
    code: str
    message: str
    line: Optional[int] = None


class GridWord(BaseModel):
    """
    A word discovered in a grid.

    ``positions`` holds one cell per letter, in the coordinate space of
    ``grid``, the grid the word was found in. Cell order is not recorded.
    """
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1)
    positions: FrozenSet[Position]
    grid: Grid

    @model_validator(mode="after")
    def _one_position_per_letter(self) -> "GridWord":
        if len(self.word) != len(self.positions):
            raise ValueError(
                f"'{self.word}' has {len(self.word)} letters but occupies "
                f"{len(self.positions)} positions"
            )
        return self

    @field_serializer("positions")
    def _serialize_positions(self, positions: FrozenSet[Position]) -> List[List[int]]:
        return [[p.x, p.y] for p in sorted(positions, key=lambda p: (p.y, p.x))]

    @field_serializer("grid")
    def _serialize_grid(self, grid: Grid) -> List[str]:
        return ["".join(row) for row in grid]

    def collapsed_grid(self) -> Grid:
        """Return the grid left behind once this word is removed and letters fall."""
        from .grid import collapse_and_gravitate

        return collapse_and_gravitate(self.grid, self.positions)


class GridSolution(BaseModel):
    """An ordered sequence of words that together satisfy a length plan."""
    words: List[GridWord] = Field(default_factory=list)

    @property
    def lengths(self) -> List[int]:
        """Word lengths in discovery order."""
        return [len(w.word) for w in self.words]

    @property
    def text(self) -> str:
        return " -> ".join(w.word for w in self.words)

    def prepend(self, word: GridWord) -> "GridSolution":
        """Return a new solution with ``word`` found before the current ones."""
        return GridSolution(words=[word, *self.words])

    def key(self) -> Tuple[Tuple[str, FrozenSet[Position]], ...]:
        """Identity of the solution as its sequence of (word, positions) steps."""
        return tuple((w.word, w.positions) for w in self.words)
