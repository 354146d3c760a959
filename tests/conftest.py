"""Shared fixtures for the edge-matching solver tests."""

import random

import pytest

from edgematch.board import N_CELLS
from edgematch.piece import Polarity, encode_edge, encode_piece, rotate
from edgematch.solver.constraints import ADJACENCY, TOUCHING_EDGES

HEAD = Polarity.HEAD
TAIL = Polarity.TAIL


def make_scrambled_puzzle(seed: int, n_colors: int = 4) -> tuple[int, ...]:
    """Build a solvable piece set, then rotate and shuffle its pieces."""
    rng = random.Random(seed)
    edges = [
        [encode_edge(rng.randrange(n_colors), rng.randrange(2)) for _ in range(4)]
        for _ in range(N_CELLS)
    ]
    # Make every interior edge of the solved layout mate
    for first, second, direction, _ in ADJACENCY:
        outward, inward = TOUCHING_EDGES[direction]
        edges[second][inward] = edges[first][outward] ^ 1

    pieces = [rotate(encode_piece(e), rng.randrange(4)) for e in edges]
    rng.shuffle(pieces)
    return tuple(pieces)


@pytest.fixture
def alternating_pieces() -> tuple[int, ...]:
    """Nine copies of one color with head, tail, head, tail going clockwise."""
    edge_bytes = [encode_edge(0, HEAD), encode_edge(0, TAIL)] * 2
    return (encode_piece(edge_bytes),) * N_CELLS


@pytest.fixture
def disjoint_color_pieces() -> tuple[int, ...]:
    """Each piece has its own color on all four edges, so nothing can touch."""
    return tuple(encode_piece([encode_edge(i, HEAD)] * 4) for i in range(N_CELLS))


@pytest.fixture
def scrambled_pieces() -> tuple[int, ...]:
    return make_scrambled_puzzle(seed=7)
