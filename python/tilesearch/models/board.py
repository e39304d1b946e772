"""Board model for the sliding-tile search engine."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Where the *tile* next to the blank moves.

    ``UP`` slides the tile below the blank upward, so the blank itself
    shifts one row down.  The other three follow the same rule.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def inverse(self) -> Direction:
        return _INVERSE[self]


_INVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Order in which children are generated during expansion.
EXPANSION_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.LEFT,
    Direction.DOWN,
    Direction.RIGHT,
)


@dataclass(frozen=True, eq=False)
class BoardState:
    """An N×N arrangement of tiles stored row-major; 0 is the blank.

    The values always form a permutation of ``0..N²-1``, so the last
    cell is implied by the others.  Equality and hashing only look at
    the first ``N²-1`` cells.
    """

    size: int
    cells: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int]) -> BoardState:
        """Create a board from a flat row-major tile list.

        Example::

            BoardState.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        cells = tuple(flat)
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        if len(cells) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(cells)}."
            )
        if sorted(cells) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}, "
                f"got {list(cells)}."
            )
        return cls(size=size, cells=cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> BoardState:
        """Create a board from a list of rows, e.g. ``[[1, 2], [3, 0]]``."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Every row must have as many cells as there are rows.")
        return cls.from_flat(size, [v for row in rows for v in row])

    @classmethod
    def solved(cls, size: int) -> BoardState:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return cls.from_flat(size, [*range(1, size * size), 0])

    # -- equality -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.size == other.size and self.cells[:-1] == other.cells[:-1]

    def __hash__(self) -> int:
        return hash(self.cells[:-1])

    # -- queries --------------------------------------------------------------

    def __getitem__(self, row: int) -> tuple[int, ...]:
        if not 0 <= row < self.size:
            raise IndexError(f"Row {row} out of range for a {self.size}×{self.size} board.")
        return self.cells[row * self.size : (row + 1) * self.size]

    def __iter__(self) -> Iterator[int]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def rows(self) -> list[tuple[int, ...]]:
        return [self[r] for r in range(self.size)]

    def tile(self, row: int, col: int) -> int:
        return self.cells[row * self.size + col]

    def index_of(self, value: int) -> int:
        return self.cells.index(value)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.index_of(0), self.size)

    def positions(self) -> list[int]:
        """Return the flat index of every value: ``positions()[v]``."""
        pos = [0] * len(self.cells)
        for i, v in enumerate(self.cells):
            pos[v] = i
        return pos

    def is_tile_correct(self, row: int, col: int, goal: BoardState) -> bool:
        """Check if the tile at (row, col) sits where *goal* has it."""
        return self.tile(row, col) == goal.tile(row, col)

    # -- parity ---------------------------------------------------------------

    def inversions(self, goal: BoardState) -> int:
        """Count tile pairs whose relative order differs from *goal*.

        The blank is ignored.  Tiles are compared by their goal index,
        so any goal arrangement works, not just the canonical one.
        """
        goal_pos = goal.positions()
        order = [goal_pos[v] for v in self.cells if v != 0]
        inversions = 0
        for i, a in enumerate(order):
            for b in order[i + 1 :]:
                if a > b:
                    inversions += 1
        return inversions

    def is_solvable(self, goal: BoardState) -> bool:
        """Return True if *goal* is reachable from this board.

        - N odd: inversions must be even
        - N even: inversions plus the row distance between the two
          blanks must be even
        """
        if goal.size != self.size:
            raise ValueError(
                f"Cannot compare a {self.size}×{self.size} board with a "
                f"{goal.size}×{goal.size} goal."
            )
        inversions = self.inversions(goal)
        if self.size % 2 == 1:
            return inversions % 2 == 0
        blank_rows = abs(self.blank_pos[0] - goal.blank_pos[0])
        return (inversions + blank_rows) % 2 == 0

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        width = len(str(len(self.cells) - 1))
        lines: list[str] = []
        for row in self.rows:
            lines.append(" ".join(f"{'_' if v == 0 else v:>{width}}" for v in row))
        return "\n".join(lines)
