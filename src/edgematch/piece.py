"""Bit-packed piece encoding.

A piece is a 32-bit integer holding four edge bytes.  Byte `i` is the edge at
position `i`, listed clockwise from the top::

    |  00  |      0
    |03  01|    3   1
    |  02  |      2

Within an edge byte, bit 0 is the polarity (0 = tail, 1 = head) and the color
index is stored above it, shifted left by `COLOR_SHIFT` bits.
"""

from enum import IntEnum
from typing import TypeAlias

Piece: TypeAlias = int
"""Four edge bytes packed into one integer."""

PieceSet: TypeAlias = tuple[Piece, ...]
"""The nine pieces of a puzzle, indexed 0-8."""

COLOR_SHIFT = 4
"""Bit offset of the color index inside an edge byte (leaves room for 16 colors)."""

MAX_COLORS = 1 << (8 - COLOR_SHIFT)
"""Number of distinct colors that fit in an edge byte."""

N_EDGES = 4
EDGE_BITS = 8
EDGE_MASK = 0xFF
PIECE_BITS = N_EDGES * EDGE_BITS
PIECE_MASK = (1 << PIECE_BITS) - 1


class Position(IntEnum):
    """Logical edge positions, clockwise from the top."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


class Polarity(IntEnum):
    """Head/tail marker of an edge."""

    TAIL = 0
    HEAD = 1


def encode_edge(color: int, polarity: Polarity | int) -> int:
    """Pack a color index and polarity into an edge byte."""
    if not 0 <= color < MAX_COLORS:
        raise ValueError(f"Color index {color} out of range (max {MAX_COLORS - 1}).")
    return (color << COLOR_SHIFT) | (int(polarity) & 1)


def edge_color(edge_byte: int) -> int:
    """Color index of an edge byte."""
    return edge_byte >> COLOR_SHIFT


def edge_polarity(edge_byte: int) -> Polarity:
    """Polarity of an edge byte."""
    return Polarity(edge_byte & 1)


def encode_piece(edges: tuple[int, int, int, int] | list[int]) -> Piece:
    """Pack four edge bytes, in position order, into a piece."""
    if len(edges) != N_EDGES:
        raise ValueError(f"A piece has {N_EDGES} edges, got {len(edges)}.")
    piece = 0
    for position, edge_byte in enumerate(edges):
        piece |= (edge_byte & EDGE_MASK) << (position * EDGE_BITS)
    return piece


def decode_piece(piece: Piece) -> tuple[int, int, int, int]:
    """Unpack a piece into its four edge bytes, in position order."""
    return (
        edge(piece, Position.TOP),
        edge(piece, Position.RIGHT),
        edge(piece, Position.BOTTOM),
        edge(piece, Position.LEFT),
    )


def rotate(piece: Piece, k: int) -> Piece:
    """Rotate a piece clockwise by `k` quarter turns.

    This is a rotate-left of the 32-bit value by `8 * k` bits: every edge byte
    moves one position toward the high end per turn and the top byte wraps
    around to the bottom.

    Args:
        piece: The encoded piece.
        k: Number of quarter turns, 0-3.

    Returns:
        The encoding of the rotated piece.  The input is not modified.
    """
    if not 0 <= k < N_EDGES:
        raise ValueError(f"Orientation must be in 0..{N_EDGES - 1}, got {k}.")
    n = EDGE_BITS * k
    return ((piece << n) | (piece >> ((PIECE_BITS - n) % PIECE_BITS))) & PIECE_MASK


def edge(piece: Piece, position: int) -> int:
    """Extract the edge byte at `position` (see `Position`) of an oriented piece."""
    if not 0 <= position < N_EDGES:
        raise ValueError(f"Edge position must be in 0..{N_EDGES - 1}, got {position}.")
    return (piece >> (position * EDGE_BITS)) & EDGE_MASK


def mates(a: int, b: int) -> bool:
    """Whether two touching edge bytes fit: same color, opposite polarity."""
    # Flipping the polarity bit of one edge must give the other
    return (a ^ 1) == b
