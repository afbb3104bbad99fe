"""Search engine for word grid puzzles."""

from .models import SolverConfig, PuzzleConfig, SolveResult
from .solver import WordGridSolver, SearchBudgetExceeded, find_solutions, unique_solutions

__all__ = [
    "SolverConfig",
    "PuzzleConfig",
    "SolveResult",
    "WordGridSolver",
    "SearchBudgetExceeded",
    "find_solutions",
    "unique_solutions",
]
