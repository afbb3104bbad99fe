"""
Main entry point for solving word grid puzzles.

Usage:
    python -m src.main puzzle.yaml
    python -m src.main puzzle.yaml --dictionary words.txt --output results/run1.json --verbose
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .dictionary import load_dictionary
from .grid import parse_grid_or_raise, render_grid
from .solver import PuzzleConfig, SearchBudgetExceeded, SolveResult, SolverConfig, WordGridSolver


def load_config(config_path: str) -> PuzzleConfig:
    """Load a puzzle from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Puzzle file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return PuzzleConfig(**(data or {}))


def save_result(result: SolveResult, path: str | Path) -> None:
    """Save the solve result to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(result.model_dump(), f, indent=2, default=str)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find every solution of a word grid puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example puzzle.yaml:
  grid:
    - bxe
    - tyr
  lengths: [2, 3]
  dictionary: words.txt
  solver:
    unique: false
    max_workers: 1
        """
    )
    parser.add_argument(
        "puzzle",
        help="Path to YAML puzzle file"
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Path to word list, one word per line (overrides the puzzle file)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON (default: results/solve_<timestamp>.json)"
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        help="Drop repeated solutions"
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of threads searching starting cells"
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        help="Give up after this many seconds"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the grid for every step of every solution"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        puzzle = load_config(args.puzzle)
    except Exception as e:
        print(f"Error loading puzzle: {e}", file=sys.stderr)
        return 1

    # Command line flags win over the puzzle file
    overrides = {}
    if args.unique:
        overrides["unique"] = True
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    if args.time_limit is not None:
        overrides["time_limit"] = args.time_limit

    try:
        solver_config = SolverConfig(**{**puzzle.solver.model_dump(), **overrides})
    except ValidationError as e:
        print(f"Error in solver options: {e}", file=sys.stderr)
        return 1

    dictionary_path = args.dictionary or puzzle.dictionary
    if not dictionary_path:
        print("Error: dictionary required (in the puzzle file or --dictionary)", file=sys.stderr)
        return 1

    try:
        dictionary = load_dictionary(dictionary_path, min_length=puzzle.min_word_length)
    except OSError as e:
        print(f"Error loading dictionary {dictionary_path}: {e}", file=sys.stderr)
        return 1

    try:
        grid = parse_grid_or_raise(puzzle.grid)
    except ValueError as e:
        print(f"Error in grid: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"solve_{timestamp}.json"

    if args.verbose:
        print(f"Puzzle: {args.puzzle}")
        print(f"Dictionary: {dictionary_path} ({len(dictionary)} words)")
        print(f"Lengths: {puzzle.lengths}")
        print(render_grid(grid))
        print()

    started_at = datetime.now()
    try:
        solutions = WordGridSolver(dictionary, solver_config).find_solutions(grid, puzzle.lengths)
    except SearchBudgetExceeded as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    ended_at = datetime.now()

    result = SolveResult(
        grid=["".join(row) for row in grid],
        lengths=puzzle.lengths,
        config=solver_config,
        solutions=solutions,
        solution_count=len(solutions),
        started_at=started_at.isoformat(),
        ended_at=ended_at.isoformat(),
        duration_seconds=(ended_at - started_at).total_seconds(),
    )
    save_result(result, output_path)

    if args.verbose:
        print(f"Results saved to: {output_path}")

    # Print summary
    print()
    print("=== Solutions ===")
    for i, solution in enumerate(solutions, start=1):
        print(f"{i}. {solution.text}")
        if args.show:
            for step in solution.words:
                print(render_grid(step.grid, highlight=step.positions))
                print()
    print(f"Total solutions: {result.solution_count}")
    print(f"Duration: {result.duration_seconds:.2f}s")

    return 0


if __name__ == "__main__":
    sys.exit(main())
