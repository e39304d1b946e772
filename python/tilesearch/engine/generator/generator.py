"""Generates boards to search on."""

from __future__ import annotations

import random

from tilesearch.engine.puzzle import Puzzle
from tilesearch.models.board import BoardState


class BoardGenerator:
    """Creates puzzles by scrambling from the solved state."""

    @staticmethod
    def solved(size: int) -> BoardState:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return BoardState.solved(size)

    @staticmethod
    def scramble(
        board: BoardState, move_count: int, rng: random.Random | None = None
    ) -> BoardState:
        """Return *board* after *move_count* random move attempts.

        Every result is reachable from *board*, and at most
        *move_count* moves away from it.
        """
        puzzle = Puzzle(board)
        puzzle.scramble(move_count, rng)
        return puzzle.state

    @staticmethod
    def generate(size: int, move_count: int, seed: int | None = None) -> BoardState:
        """Return a board *solvable* towards ``solved(size)``."""
        rng = random.Random(seed)
        return BoardGenerator.scramble(BoardGenerator.solved(size), move_count, rng)

    @staticmethod
    def unsolvable(board: BoardState) -> BoardState:
        """Swap the first two non-blank tiles, flipping the board's parity."""
        cells = list(board.cells)
        i, j = [k for k, v in enumerate(cells) if v != 0][:2]
        cells[i], cells[j] = cells[j], cells[i]
        return BoardState(size=board.size, cells=tuple(cells))
