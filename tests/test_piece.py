"""Tests for the piece codec."""

import pytest

from edgematch.piece import (
    Polarity,
    Position,
    decode_piece,
    edge,
    edge_color,
    edge_polarity,
    encode_edge,
    encode_piece,
    mates,
    rotate,
)

SAMPLE_PIECES = [0x00000000, 0x44332211, 0xFFDDBBAA, 0x04030201, 0x00010001]


def test_encode_edge_layout():
    assert encode_edge(0, Polarity.TAIL) == 0x00
    assert encode_edge(0, Polarity.HEAD) == 0x01
    assert encode_edge(3, Polarity.HEAD) == 0x31
    assert encode_edge(15, Polarity.TAIL) == 0xF0


def test_encode_edge_rejects_large_color():
    with pytest.raises(ValueError):
        encode_edge(16, Polarity.HEAD)


def test_edge_fields():
    edge_byte = encode_edge(5, Polarity.HEAD)
    assert edge_color(edge_byte) == 5
    assert edge_polarity(edge_byte) == Polarity.HEAD


def test_encode_decode_piece():
    piece = encode_piece([0x11, 0x22, 0x33, 0x44])
    assert piece == 0x44332211
    assert decode_piece(piece) == (0x11, 0x22, 0x33, 0x44)
    assert edge(piece, Position.TOP) == 0x11
    assert edge(piece, Position.LEFT) == 0x44


def test_encode_piece_needs_four_edges():
    with pytest.raises(ValueError):
        encode_piece([0x11, 0x22, 0x33])


def test_rotate_moves_edges_clockwise():
    piece = encode_piece([0x11, 0x22, 0x33, 0x44])
    assert rotate(piece, 1) == encode_piece([0x44, 0x11, 0x22, 0x33])
    assert rotate(piece, 2) == encode_piece([0x33, 0x44, 0x11, 0x22])
    assert rotate(piece, 3) == encode_piece([0x22, 0x33, 0x44, 0x11])


@pytest.mark.parametrize("piece", SAMPLE_PIECES)
def test_rotate_identity(piece):
    assert rotate(piece, 0) == piece


@pytest.mark.parametrize("piece", SAMPLE_PIECES)
@pytest.mark.parametrize("a", range(4))
@pytest.mark.parametrize("b", range(4))
def test_rotate_composes(piece, a, b):
    assert rotate(rotate(piece, a), b) == rotate(piece, (a + b) % 4)


def test_rotate_stays_32_bit():
    assert rotate(0xFFDDBBAA, 1) == 0xDDBBAAFF


@pytest.mark.parametrize("k", [-1, 4])
def test_rotate_rejects_bad_orientation(k):
    with pytest.raises(ValueError):
        rotate(0x44332211, k)


def test_mates():
    assert mates(encode_edge(2, Polarity.HEAD), encode_edge(2, Polarity.TAIL))
    assert mates(encode_edge(2, Polarity.TAIL), encode_edge(2, Polarity.HEAD))
    assert not mates(encode_edge(2, Polarity.HEAD), encode_edge(2, Polarity.HEAD))
    assert not mates(encode_edge(2, Polarity.HEAD), encode_edge(3, Polarity.TAIL))
