"""Text rendering of boards."""

from collections.abc import Callable
from typing import TypeAlias

import numpy as np

from edgematch.board import EMPTY, GRID_SIZE, BoardState
from edgematch.piece import PieceSet, Position, edge, rotate

BoardFormatter: TypeAlias = Callable[[BoardState, PieceSet], str]
"""Callable turning a board and its pieces into display text."""

EdgeLabeler: TypeAlias = Callable[[int], str]

EMPTY_CELL = "|      |"


def hex_label(edge_byte: int) -> str:
    """Two-digit hex form of an edge byte."""
    return f"{edge_byte:02X}"


def format_cell(piece_idx: int, oriented_piece: int, labels: EdgeLabeler) -> tuple[str, str, str]:
    """Render one filled cell as three lines::

        |  TT  |
        |LL 4RR|
        |  BB  |
    """
    top = labels(edge(oriented_piece, Position.TOP))
    right = labels(edge(oriented_piece, Position.RIGHT))
    bottom = labels(edge(oriented_piece, Position.BOTTOM))
    left = labels(edge(oriented_piece, Position.LEFT))
    return (
        f"|  {top}  |",
        f"|{left} {piece_idx}{right}|",
        f"|  {bottom}  |",
    )


def format_board(
    state: BoardState, pieces: PieceSet, *, labels: EdgeLabeler | None = None
) -> str:
    """Render a board, each piece rotated to its placed orientation.

    Args:
        state: The board to render.  Empty cells are drawn blank.
        pieces: The puzzle's piece set.
        labels: Maps an edge byte to a two-character label.  Defaults to hex.

    Returns:
        The board as text, one blank line between grid rows.
    """
    labels = labels or hex_label
    placement = np.array(state.placement).reshape(GRID_SIZE, GRID_SIZE)
    orientation = np.array(state.orientation).reshape(GRID_SIZE, GRID_SIZE)

    rows = []
    for row in range(GRID_SIZE):
        lines = ["", "", ""]
        for col in range(GRID_SIZE):
            piece_idx = int(placement[row, col])
            if piece_idx == EMPTY:
                cell = (EMPTY_CELL,) * 3
            else:
                oriented = rotate(pieces[piece_idx], int(orientation[row, col]))
                cell = format_cell(piece_idx, oriented, labels)
            for i, text in enumerate(cell):
                lines[i] += text
        rows.append("\n".join(lines))
    return "\n\n".join(rows)
