"""Run driver for edge-matching puzzles."""

import sys
from datetime import datetime
from functools import partial
from pathlib import Path
from pprint import pprint
from typing import TextIO

from edgematch.board import BoardState
from edgematch.puzzle_config import PuzzleConfig
from edgematch.render import BoardFormatter, format_board
from edgematch.solver.config import config as solver_config
from edgematch.solver.search import SolveStats, solve
from edgematch.util import TIMESTAMP_FMT, int_comma, time_str


def default_formatter(puzzle_config: PuzzleConfig) -> BoardFormatter:
    """Board formatter honoring the `show_labels` setting."""
    if solver_config.show_labels:
        return partial(format_board, labels=puzzle_config.edge_label)
    return format_board


def run(
    config: PuzzleConfig, *, formatter: BoardFormatter | None = None
) -> BoardState | None:
    """Run the solver on the given puzzle.

    Args:
        config (PuzzleConfig): The puzzle to solve.
        formatter (BoardFormatter | None): Renders the solved board.  Defaults to
            `format_board`, with color labels if `show_labels` is set.

    Returns:
        The solved board, or None if the puzzle has no solution.
    """
    print(f"config: {config}")
    print(f"colors: {list(config.colors)}")
    print(f"        {list(range(len(config.colors)))}")

    logfile = Path(solver_config.log_dir) / f"{config.name}.log"
    print(f"Log file: {logfile}")
    logfile.parent.mkdir(parents=True, exist_ok=True)

    if formatter is None:
        formatter = default_formatter(config)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            solution = solve_one(config, formatter=formatter, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)

    if solution is None:
        print("No solution found.")
    else:
        print(f"Found a solution: {solution}")
        print(formatter(solution, config.pieces))
    print()
    return solution


def solve_one(
    puzzle_config: PuzzleConfig, *, formatter: BoardFormatter, logf: TextIO
) -> BoardState | None:
    """Solve one puzzle, logging the run to `logf`.

    Args:
        puzzle_config (PuzzleConfig): The puzzle to solve.
        formatter (BoardFormatter): Renders the solved board for the log.
        logf: File object to log the solving process.
    """
    print(f"Selected puzzle: {puzzle_config.name}", file=logf, flush=True)
    print(str(puzzle_config), file=logf, flush=True)
    print("", file=logf, flush=True)
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)

    stats = SolveStats()
    start_time_str = datetime.fromtimestamp(stats.start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)

    solution = solve(puzzle_config.pieces, stats=stats)

    if solution is None:
        print("No solution found.", file=logf, flush=True)
    else:
        print("Solution found!", file=logf, flush=True)
        print(f"Placement: {solution.placement}", file=logf, flush=True)
        print(f"Orientation: {solution.orientation}", file=logf, flush=True)
        print("", file=logf, flush=True)
        print(formatter(solution, puzzle_config.pieces), file=logf, flush=True)
        print("", file=logf, flush=True)

    print(f"States examined: {int_comma(stats.states_examined)}", file=logf, flush=True)
    print(f"States pushed: {int_comma(stats.states_pushed)}", file=logf, flush=True)
    print(f"Deepest frontier: {stats.max_depth_reached}", file=logf, flush=True)
    print(f"Time taken: {time_str(stats.elapsed)}", file=logf, flush=True)
    return solution
