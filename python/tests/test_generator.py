"""Board generation."""

from __future__ import annotations

import random

import pytest

from tilesearch.engine.generator import BoardGenerator
from tilesearch.models.board import BoardState


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_generated_boards_are_solvable(size: int) -> None:
    goal = BoardGenerator.solved(size)
    for seed in range(10):
        board = BoardGenerator.generate(size, 50, seed=seed)
        assert board.size == size
        assert board.is_solvable(goal)


def test_generate_is_reproducible() -> None:
    assert (
        BoardGenerator.generate(4, 100, seed=42).cells
        == BoardGenerator.generate(4, 100, seed=42).cells
    )


def test_scramble_leaves_input_alone(goal: BoardState) -> None:
    board = BoardGenerator.scramble(goal, 30, random.Random(5))
    assert goal == BoardState.solved(3)
    assert board.is_solvable(goal)


def test_scramble_towards_custom_goal(four_move: BoardState) -> None:
    board = BoardGenerator.scramble(four_move, 25, random.Random(9))
    assert board.is_solvable(four_move)


@pytest.mark.parametrize("size", [2, 3, 4])
def test_unsolvable_flips_parity(size: int) -> None:
    goal = BoardGenerator.solved(size)
    board = BoardGenerator.unsolvable(goal)
    assert not board.is_solvable(goal)
    assert board.blank_pos == goal.blank_pos
    # Flipping twice restores the original.
    assert BoardGenerator.unsolvable(board) == goal
