"""Shared boards and helpers for the test suite."""

from __future__ import annotations

import pytest

from tilesearch.engine.puzzle import Puzzle
from tilesearch.models.board import BoardState, Direction

# Four moves from the goal: solved by LEFT, UP, LEFT, UP.
FOUR_MOVE_ROWS = [[0, 1, 3], [4, 2, 5], [7, 8, 6]]
FOUR_MOVE_SOLUTION = [Direction.LEFT, Direction.UP, Direction.LEFT, Direction.UP]

# Compact-format example board, eight inversions.
SAMPLE_ROWS = [[0, 1, 3], [8, 2, 6], [4, 5, 7]]


def replay(board: BoardState, moves: list[Direction]) -> BoardState:
    """Apply *moves* one by one, failing on the first invalid one."""
    puzzle = Puzzle(board)
    for i, direction in enumerate(moves):
        assert puzzle.move(direction), (
            f"Move {i} ({direction.value}) was invalid at blank {puzzle.blank_pos}"
        )
    return puzzle.state


@pytest.fixture
def goal() -> BoardState:
    return BoardState.solved(3)


@pytest.fixture
def four_move() -> BoardState:
    return BoardState.from_rows(FOUR_MOVE_ROWS)


@pytest.fixture
def sample() -> BoardState:
    return BoardState.from_rows(SAMPLE_ROWS)
