"""Reading boards from text and files."""

from __future__ import annotations

import math
from collections.abc import Sequence
from pathlib import Path

from tilesearch.models.board import BoardState

DEFAULT_BLANK = "_"


class BoardFormatError(ValueError):
    """Raised when board text does not describe a valid permutation."""


def _tokenize(text: str, size: int | None) -> list[str]:
    tokens = text.split()
    if size is not None and len(tokens) == size * size:
        return tokens
    if size is None and len(tokens) > 1 and math.isqrt(len(tokens)) ** 2 == len(tokens):
        return tokens
    # Compact form: one character per tile, e.g. "_13 826 457".
    return [ch for ch in text if not ch.isspace()]


def validate_cells(size: int, cells: Sequence[int]) -> None:
    """Check that *cells* hold every value ``0..size²-1`` exactly once."""
    expected = size * size
    if len(cells) != expected:
        raise BoardFormatError(
            f"Expected {expected} tiles for a {size}×{size} board, got {len(cells)}."
        )
    if 0 not in cells:
        raise BoardFormatError("Board has no blank tile.")
    seen: set[int] = set()
    for v in cells:
        if not 0 <= v < expected:
            raise BoardFormatError(f"Tile {v} is out of range 0..{expected - 1}.")
        if v in seen:
            raise BoardFormatError(f"Tile {v} appears more than once.")
        seen.add(v)


def parse_board(
    text: str, size: int | None = None, blank: str = DEFAULT_BLANK
) -> BoardState:
    """Parse a row-major board description.

    Tiles may be whitespace separated (``"1 2 3 4 5 6 7 8 _"``) or, for
    boards whose tiles are single digits, written back to back
    (``"123\\n456\\n78_"``).  *blank* marks the empty cell.  When *size*
    is omitted it is inferred from the number of tiles.
    """
    tokens = _tokenize(text, size)
    if size is None:
        size = math.isqrt(len(tokens))
        if size < 2 or size * size != len(tokens):
            raise BoardFormatError(
                f"Cannot arrange {len(tokens)} tiles into a square board."
            )

    cells: list[int] = []
    for token in tokens:
        if token == blank:
            cells.append(0)
            continue
        try:
            cells.append(int(token))
        except ValueError:
            raise BoardFormatError(f"Unrecognised tile {token!r}.") from None

    validate_cells(size, cells)
    return BoardState(size=size, cells=tuple(cells))


def load_board(
    filepath: Path, size: int | None = None, blank: str = DEFAULT_BLANK
) -> BoardState:
    """Read a board from *filepath* (see :func:`parse_board`)."""
    return parse_board(Path(filepath).read_text(), size=size, blank=blank)
