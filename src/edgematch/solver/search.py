"""Depth-first search over board states."""

from dataclasses import dataclass, field
from time import time

from bitarray.util import zeros

from edgematch.board import EMPTY, N_CELLS, BoardState
from edgematch.piece import N_EDGES, PieceSet
from edgematch.solver.constraints import legal


@dataclass
class SolveStats:
    """Statistics collected during a search."""

    states_examined: int = 0
    """Number of states popped from the stack."""

    states_pushed: int = 0
    """Number of legal successors pushed onto the stack."""

    max_depth_reached: int = 0
    """Largest frontier value of any examined state."""

    start_time: float = field(default_factory=time)
    """Timestamp when the search started."""

    end_time: float | None = None
    """Timestamp when the search finished."""

    @property
    def elapsed(self) -> float:
        """Seconds spent searching (so far, if still running)."""
        return (self.end_time or time()) - self.start_time


def successors(state: BoardState) -> list[BoardState]:
    """All states that fill the frontier cell of `state` with an unused piece.

    Pieces are tried in index order and orientations in 0-3 order.  No legality
    check is made here.
    """
    if state.complete:
        return []
    used = zeros(N_CELLS)
    for piece_idx in state.placement:
        if piece_idx != EMPTY:
            used[piece_idx] = 1
    return [
        state.extend(piece_idx, orientation)
        for piece_idx in used.search(0)
        for orientation in range(N_EDGES)
    ]


def solve(pieces: PieceSet, *, stats: SolveStats | None = None) -> BoardState | None:
    """Find the first complete, legal board for the given pieces.

    States are expanded from an explicit stack, so for a given piece set the
    search always returns the same board.

    Args:
        pieces: The nine encoded pieces.
        stats: Optional statistics object, updated in place.

    Returns:
        The solved board, or None once every reachable state has been explored.
    """
    if stats is None:
        stats = SolveStats()
    visited: set[BoardState] = set()
    stack: list[BoardState] = [BoardState.empty()]

    try:
        while stack:
            state = stack.pop()
            stats.states_examined += 1
            stats.max_depth_reached = max(stats.max_depth_reached, state.frontier)
            if state.complete:
                return state
            visited.add(state)
            for neighbor in successors(state):
                if neighbor in visited or not legal(neighbor, pieces):
                    continue
                stack.append(neighbor)
                stats.states_pushed += 1
        return None
    finally:
        stats.end_time = time()
