"""Board state for the 3x3 edge-matching puzzle."""

from typing import NamedTuple

GRID_SIZE = 3
N_CELLS = GRID_SIZE * GRID_SIZE

EMPTY = 0xFF
"""Placement value of a cell with no piece."""


class BoardState(NamedTuple):
    """Immutable snapshot of a (possibly partial) board.

    Cells are indexed 0-8 in row-major order::

        | 0 1 2 |
        | 3 4 5 |
        | 6 7 8 |

    Cells are always filled in index order, so the filled cells form a prefix and
    the first empty cell (the frontier) is the only one that can be filled next.
    """

    placement: tuple[int, ...]
    """Piece index in each cell, or `EMPTY`."""

    orientation: tuple[int, ...]
    """Quarter turns (0-3) applied to the piece in each cell; 0 for empty cells."""

    @classmethod
    def empty(cls) -> "BoardState":
        """A board with no pieces placed."""
        return cls((EMPTY,) * N_CELLS, (0,) * N_CELLS)

    @property
    def frontier(self) -> int:
        """Index of the first empty cell, or `N_CELLS` when the board is full."""
        for idx, piece_idx in enumerate(self.placement):
            if piece_idx == EMPTY:
                return idx
        return N_CELLS

    @property
    def complete(self) -> bool:
        """Whether every cell holds a piece."""
        return self.frontier == N_CELLS

    def used_pieces(self) -> set[int]:
        """Indices of the pieces currently on the board."""
        return {piece_idx for piece_idx in self.placement if piece_idx != EMPTY}

    def extend(self, piece_idx: int, orientation: int) -> "BoardState":
        """Return a new state with `piece_idx` placed in the frontier cell.

        Raises:
            ValueError: If the board is already complete.
        """
        open_idx = self.frontier
        if open_idx == N_CELLS:
            raise ValueError("Cannot extend a complete board.")
        placement = list(self.placement)
        orientations = list(self.orientation)
        placement[open_idx] = piece_idx
        orientations[open_idx] = orientation
        return BoardState(tuple(placement), tuple(orientations))
