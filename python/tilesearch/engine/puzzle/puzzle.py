"""The live puzzle: one mutable board and its blank."""

from __future__ import annotations

import random

from tilesearch.models.board import BoardState, Direction

# The offset points to the tile that will slide into the blank.
# UP   → tile at (br+1, bc) moves up    → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_OFFSETS = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class Puzzle:
    """Holds a working copy of a board and slides tiles in place."""

    def __init__(self, state: BoardState) -> None:
        self.size = state.size
        self._cells = list(state.cells)
        self._blank = self._cells.index(0)

    # -- queries --------------------------------------------------------------

    @property
    def state(self) -> BoardState:
        """Snapshot of the current arrangement."""
        return BoardState(size=self.size, cells=tuple(self._cells))

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self._blank, self.size)

    def is_solved(self, goal: BoardState) -> bool:
        return self.state == goal

    def is_valid_move(self, direction: Direction) -> bool:
        return self._target(direction) is not None

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        Returns True if the move was valid.  An invalid move leaves the
        board untouched.
        """
        target = self._target(direction)
        if target is None:
            return False
        self._swap(target)
        return True

    def scramble(self, move_count: int, rng: random.Random | None = None) -> int:
        """Attempt *move_count* uniformly random moves.

        Moves that would leave the board are skipped rather than redrawn,
        so fewer moves may actually be applied.  Returns how many were.
        """
        rng = rng or random.Random()
        directions = list(Direction)
        applied = 0
        for _ in range(move_count):
            if self.move(rng.choice(directions)):
                applied += 1
        return applied

    # -- helpers --------------------------------------------------------------

    def _target(self, direction: Direction) -> int | None:
        try:
            dr, dc = _OFFSETS[Direction(direction)]
        except ValueError:
            raise ValueError(f"Invalid movement command {direction!r}.") from None
        br, bc = divmod(self._blank, self.size)
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return tr * self.size + tc

    def _swap(self, target: int) -> None:
        cells = self._cells
        cells[self._blank], cells[target] = cells[target], cells[self._blank]
        self._blank = target

    def __str__(self) -> str:
        return str(self.state)
