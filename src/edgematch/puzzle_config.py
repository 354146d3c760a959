"""Loader for piece definition files.

A piece file lists the color labels on its first line, then one piece per line::

    A B C D
    AH BT CT DH
    ...

Each piece line holds four tokens in clockwise order starting at the top edge.  A
token is a color label followed by `H` (head) or `T` (tail).  Blank lines and
lines starting with `#` are ignored.
"""

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from edgematch.board import N_CELLS
from edgematch.piece import (
    MAX_COLORS,
    N_EDGES,
    PieceSet,
    Polarity,
    decode_piece,
    edge_color,
    edge_polarity,
    encode_edge,
    encode_piece,
)
from edgematch.solver.config import config as solver_config

POLARITY_MARKERS = {"H": Polarity.HEAD, "T": Polarity.TAIL}


@dataclass
class PuzzleConfig:
    """A puzzle: color labels plus the nine encoded pieces."""

    name: str
    """Puzzle name, taken from the piece file name."""

    colors: tuple[str, ...]
    """Color labels; a label's position is its color index."""

    pieces: PieceSet
    """The nine encoded pieces, indexed 0-8."""

    def __post_init__(self) -> None:
        """Validate the colors and pieces."""
        if len(set(self.colors)) != len(self.colors):
            raise ValueError(f"Duplicate color labels: {' '.join(self.colors)}")
        if len(self.colors) > MAX_COLORS:
            raise ValueError(f"At most {MAX_COLORS} colors are supported, got {len(self.colors)}.")
        if len(self.pieces) != N_CELLS:
            raise ValueError(f"Expected {N_CELLS} pieces, got {len(self.pieces)}.")
        for idx, piece in enumerate(self.pieces):
            for edge_byte in decode_piece(piece):
                if edge_color(edge_byte) >= len(self.colors):
                    raise ValueError(f"Piece {idx} uses an undefined color index.")

    def __str__(self) -> str:
        """Return a string representation of the PuzzleConfig."""
        lines = [f"{self.name}: {len(self.colors)} colors ({' '.join(self.colors)})"]
        for idx, piece in enumerate(self.pieces):
            edges = " ".join(self.edge_label(e) for e in decode_piece(piece))
            lines.append(f"  {idx}: {piece:08X}  {edges}")
        return "\n".join(lines)

    def edge_label(self, edge_byte: int) -> str:
        """Map an edge byte back to its file token, e.g. `AH`."""
        marker = "H" if edge_polarity(edge_byte) == Polarity.HEAD else "T"
        return f"{self.colors[edge_color(edge_byte)]}{marker}"

    def to_dict(self) -> dict:
        """Return a dictionary representation of the PuzzleConfig."""
        return {
            "name": self.name,
            "colors": list(self.colors),
            "pieces": list(self.pieces),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PuzzleConfig":
        """Create a PuzzleConfig instance from a dictionary representation."""
        return cls(
            name=data["name"],
            colors=tuple(data["colors"]),
            pieces=tuple(data["pieces"]),
        )


def parse_colors(line: str) -> tuple[str, ...]:
    """Parse the color line: the first character of each token is a label."""
    colors = tuple(token[0] for token in line.split())
    if not colors:
        raise ValueError("No colors given on the first line.")
    return colors


def parse_piece(line: str, colors: tuple[str, ...], *, line_no: int) -> int:
    """Parse one piece line into an encoded piece.

    Args:
        line: The piece line, four tokens such as `AH`.
        colors: Color labels from the first line of the file.
        line_no: Line number, for error messages.
    """
    tokens = line.split()
    if len(tokens) != N_EDGES:
        raise ValueError(f"Line {line_no}: expected {N_EDGES} edges, got {len(tokens)}.")

    edges = []
    for token in tokens:
        label, marker = token[0], token[1:].upper()
        try:
            color = colors.index(label)
        except ValueError:
            raise ValueError(f"Line {line_no}: color '{label}' not found.") from None
        if marker not in POLARITY_MARKERS:
            raise ValueError(f"Line {line_no}: head/tail not found in '{token}'.")
        edges.append(encode_edge(color, POLARITY_MARKERS[marker]))
    return encode_piece(edges)


def load_config(config_path: PathLike | str) -> PuzzleConfig:
    """Load a piece definition file.

    Args:
        config_path: Path to the piece file.

    Returns:
        The validated puzzle.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is malformed.
    """
    path = Path(config_path).resolve()
    if not path.is_file():
        raise FileNotFoundError(f"Piece file not found: {path}")
    print(f"Loading pieces from {path}")

    colors: tuple[str, ...] | None = None
    pieces: list[int] = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, raw_line in enumerate(f, start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if colors is None:
                colors = parse_colors(line)
                continue
            piece = parse_piece(line, colors, line_no=line_no)
            if solver_config.print_boards:
                print(f"  piece {len(pieces)}: {piece:08X}")
            pieces.append(piece)

    if colors is None:
        raise ValueError(f"Piece file is empty: {path}")

    return PuzzleConfig(name=path.stem, colors=colors, pieces=tuple(pieces))
