"""Edge-Matching Tile Puzzle Solver.

Places nine square pieces into a 3x3 grid, rotating them as needed, so that
every pair of touching edges has the same color and opposite head/tail
polarity.  Uses depth-first backtracking over partial boards.
"""

from sys import argv, exit

from .puzzle_config import load_config
from .solver import solver


def main() -> None:
    """Main entry point for the edge-matching solver."""
    # Expect a single argument: path to the piece file
    if len(argv) != 2:
        print("Usage: python -m edgematch <path_to_piece_file>")
        exit(1)
    try:
        config = load_config(argv[1])
    except (FileNotFoundError, ValueError) as e:
        print(f"Could not load pieces: {e}")
        exit(1)

    if solver.run(config) is None:
        exit(1)
