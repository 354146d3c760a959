"""Edge-matching constraint for (partial) boards."""

from enum import IntEnum
from typing import NamedTuple

from edgematch.board import BoardState
from edgematch.piece import PieceSet, Position, edge, mates, rotate


class Direction(IntEnum):
    """Orientation of a neighbor pair."""

    VERTICAL = 0
    HORIZONTAL = 1


class Adjacency(NamedTuple):
    """Two neighboring cells sharing an interior edge.

    For horizontal pairs `first` is the left cell, for vertical pairs the top one.
    """

    first: int
    second: int
    direction: Direction
    min_depth: int
    """Frontier value from which both cells are filled."""


ADJACENCY: tuple[Adjacency, ...] = (
    Adjacency(0, 1, Direction.HORIZONTAL, 2),
    Adjacency(1, 2, Direction.HORIZONTAL, 3),
    Adjacency(3, 4, Direction.HORIZONTAL, 5),
    Adjacency(4, 5, Direction.HORIZONTAL, 6),
    Adjacency(6, 7, Direction.HORIZONTAL, 8),
    Adjacency(7, 8, Direction.HORIZONTAL, 9),
    Adjacency(0, 3, Direction.VERTICAL, 4),
    Adjacency(1, 4, Direction.VERTICAL, 5),
    Adjacency(2, 5, Direction.VERTICAL, 6),
    Adjacency(3, 6, Direction.VERTICAL, 7),
    Adjacency(4, 7, Direction.VERTICAL, 8),
    Adjacency(5, 8, Direction.VERTICAL, 9),
)
"""All twelve interior edges of the 3x3 grid."""

# (outward edge of the first cell, inward edge of the second cell) per direction
TOUCHING_EDGES: dict[Direction, tuple[Position, Position]] = {
    Direction.HORIZONTAL: (Position.RIGHT, Position.LEFT),
    Direction.VERTICAL: (Position.BOTTOM, Position.TOP),
}


def legal(state: BoardState, pieces: PieceSet) -> bool:
    """Check every interior edge between two filled cells.

    Pairs that reach past the frontier are skipped, so this can be called on
    partial boards after each placement.

    Args:
        state: The board to check.
        pieces: The puzzle's piece set.

    Returns:
        False as soon as one pair of touching edges does not mate, else True.
    """
    frontier = state.frontier
    for first, second, direction, min_depth in ADJACENCY:
        if frontier < min_depth:
            continue
        outward, inward = TOUCHING_EDGES[direction]
        p1 = rotate(pieces[state.placement[first]], state.orientation[first])
        p2 = rotate(pieces[state.placement[second]], state.orientation[second])
        if not mates(edge(p1, outward), edge(p2, inward)):
            return False
    return True
