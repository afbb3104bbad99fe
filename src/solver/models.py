"""
Pydantic models for the solver layer.

This module contains the configuration and result models used by the search
engine and the command line. The search itself lives in solver.py.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, PositiveInt, field_validator

from ..grid.models import GridSolution


class SolverConfig(BaseModel):
    """Configuration for a solver run."""
    unique: bool = False  # Drop repeated (word, positions) sequences
    max_workers: int = Field(default=1, ge=1)
    time_limit: Optional[float] = Field(default=None, gt=0)  # seconds


class PuzzleConfig(BaseModel):
    """A puzzle to solve, as loaded from a YAML file."""
    grid: str
    lengths: List[PositiveInt] = Field(..., min_length=1)
    dictionary: Optional[str] = None
    min_word_length: int = Field(default=1, ge=1)
    solver: SolverConfig = Field(default_factory=SolverConfig)

    @field_validator("grid", mode="before")
    @classmethod
    def _join_rows(cls, value: Union[str, List[str]]) -> str:
        """Accept the grid as a list of row strings or as one multiline string."""
        if isinstance(value, list):
            return "\n".join(str(row) for row in value)
        return value


class SolveResult(BaseModel):
    """Result of a complete solver run."""
    grid: List[str] = Field(default_factory=list)
    lengths: List[int] = Field(default_factory=list)
    config: SolverConfig = Field(default_factory=SolverConfig)
    solutions: List[GridSolution] = Field(default_factory=list)
    solution_count: int = 0
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
