"""
Search engine for word grid puzzles.

Finds every ordered sequence of dictionary words, with lengths given in
advance, that can be traced through a grid of letters. Words are found one at
a time: once a word is complete its letters are removed from the grid and the
letters above fall down before the next word is searched for, so later words
may only become reachable after earlier ones are cleared.

Branch state (grid, used positions, length plan) is held in tuples and
frozensets, so sibling branches never share anything mutable and can be
evaluated in any order or concurrently.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from ..dictionary import Dictionary
from ..grid.models import EMPTY, Grid, GridSolution, GridWord, Position
from ..grid.grid import build_grid, cell_at, in_bounds, iter_positions, neighbors, normalize_case
from .models import SolverConfig

logger = logging.getLogger("wordgrid.solver")

LengthPlan = Tuple[int, ...]


class SearchBudgetExceeded(RuntimeError):
    """Raised when a search runs past its configured time limit."""


class WordGridSolver:
    """
    Enumerates all solutions of a word grid puzzle.

    Attributes:
        dictionary: Word and prefix lookups guiding the search
        config: Solver configuration
    """

    def __init__(self, dictionary: Dictionary, config: Optional[SolverConfig] = None):
        if dictionary is None:
            raise ValueError("Dictionary is required")
        self.dictionary = dictionary
        self.config = config or SolverConfig()

    def find_solutions(
        self,
        grid: Sequence[Sequence[str]],
        lengths: Optional[Iterable[int]],
    ) -> List[GridSolution]:
        """
        Find every sequence of words satisfying ``lengths`` in order.

        Args:
            grid: Rows of the grid, as strings or sequences of characters.
                Case is ignored.
            lengths: The lengths of the words to find, in the order they must
                be found. Some words may only become reachable once earlier
                ones are removed from the grid.

        Returns:
            All solutions found, duplicates included unless the solver is
            configured with ``unique``. Empty when ``lengths`` is empty or
            the puzzle has no solution.

        Raises:
            ValueError: If the grid is missing, empty or not rectangular, or
                a length is not a positive integer.
            SearchBudgetExceeded: If the configured time limit is reached.
        """
        checked_grid = build_grid(grid)
        plan = _length_plan(lengths)

        if not plan:
            return []

        started = time.perf_counter()
        deadline = None
        if self.config.time_limit is not None:
            deadline = time.monotonic() + self.config.time_limit

        solutions = self._search_grid(
            normalize_case(checked_grid), plan, deadline, self.config.max_workers
        )

        if self.config.unique:
            solutions = unique_solutions(solutions)

        logger.info(
            "plan=%s solutions=%d elapsed=%.1fms",
            list(plan), len(solutions), (time.perf_counter() - started) * 1000,
        )
        return solutions

    def _search_grid(
        self,
        grid: Grid,
        plan: LengthPlan,
        deadline: Optional[float],
        max_workers: int = 1,
    ) -> List[GridSolution]:
        """Start a word from every cell in row-major order and gather the solutions."""
        starts = list(iter_positions(grid))

        def search_from(start: Position) -> List[GridSolution]:
            return self._find_word(grid, start, "", frozenset(), plan, deadline)

        solutions: List[GridSolution] = []

        if max_workers > 1:
            # map() yields in submission order, so results match the serial order
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                for found in executor.map(search_from, starts):
                    solutions.extend(found)
        else:
            for start in starts:
                solutions.extend(search_from(start))

        return solutions

    def _find_word(
        self,
        grid: Grid,
        position: Position,
        word: str,
        used: FrozenSet[Position],
        plan: LengthPlan,
        deadline: Optional[float],
    ) -> List[GridSolution]:
        """
        Grow ``word`` with the letter at ``position``.

        Once the word reaches the required length it is checked against the
        dictionary and, if valid, the search moves on to the next word.
        Shorter words are extended through every neighbouring cell as long as
        they remain a dictionary prefix.
        """
        if deadline is not None and time.monotonic() > deadline:
            raise SearchBudgetExceeded(f"Search exceeded {self.config.time_limit}s time limit")

        if not in_bounds(grid, position) or position in used:
            return []

        letter = cell_at(grid, position)
        if letter == EMPTY:
            return []

        new_word = word + letter
        required = plan[0]

        if len(new_word) == required:
            if not self.dictionary.is_word(new_word):
                return []
            return self._complete_word(grid, position, used, plan, new_word, deadline)

        assert len(new_word) < required, f"'{new_word}' grew past required length {required}"

        if not self.dictionary.is_prefix(new_word):
            return []

        return self._extend_word(grid, position, used, plan, new_word, deadline)

    def _extend_word(
        self,
        grid: Grid,
        position: Position,
        used: FrozenSet[Position],
        plan: LengthPlan,
        word: str,
        deadline: Optional[float],
    ) -> List[GridSolution]:
        """Fan the search out to the 8 cells around ``position``."""
        now_used = used | {position}

        solutions: List[GridSolution] = []
        for neighbor in neighbors(position):
            solutions.extend(self._find_word(grid, neighbor, word, now_used, plan, deadline))

        return solutions

    def _complete_word(
        self,
        grid: Grid,
        position: Position,
        used: FrozenSet[Position],
        plan: LengthPlan,
        word: str,
        deadline: Optional[float],
    ) -> List[GridSolution]:
        """
        Record a complete word and search for the rest of the plan.

        If this was the last word the word alone is a solution. Otherwise the
        word is removed from the grid, letters fall, and every solution of
        the remaining plan on the new grid is prefixed with this word. A word
        that leads nowhere is dropped.
        """
        found = GridWord(word=word, positions=used | {position}, grid=grid)
        remaining = plan[1:]

        if not remaining:
            return [GridSolution(words=[found])]

        logger.debug("word=%s remaining=%s", word, list(remaining))

        next_solutions = self._search_grid(found.collapsed_grid(), remaining, deadline)
        return [solution.prepend(found) for solution in next_solutions]


def _length_plan(lengths: Optional[Iterable[int]]) -> LengthPlan:
    """Validate word lengths into an immutable plan."""
    if lengths is None:
        return ()

    plan = tuple(lengths)
    for length in plan:
        if isinstance(length, bool) or not isinstance(length, int) or length < 1:
            raise ValueError(f"Word lengths must be positive integers, got {length!r}")

    return plan


def unique_solutions(solutions: Iterable[GridSolution]) -> List[GridSolution]:
    """Drop solutions whose (word, positions) steps repeat an earlier one."""
    seen = set()
    result: List[GridSolution] = []

    for solution in solutions:
        key = solution.key()
        if key in seen:
            continue
        seen.add(key)
        result.append(solution)

    return result


def find_solutions(
    grid: Sequence[Sequence[str]],
    lengths: Optional[Iterable[int]],
    dictionary: Dictionary,
    config: Optional[SolverConfig] = None,
) -> List[GridSolution]:
    """Find every solution of a puzzle. See WordGridSolver.find_solutions."""
    return WordGridSolver(dictionary, config).find_solutions(grid, lengths)
