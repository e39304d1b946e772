"""Cost calculators."""

from __future__ import annotations

import random

import pytest

from tilesearch.engine.generator import BoardGenerator
from tilesearch.engine.heuristics import (
    CALCULATORS,
    Heuristic,
    greedy_manhattan_distance,
    manhattan_distance,
    manhattan_distance_inversions,
    misplaced_tiles,
    uniform_cost,
)
from tilesearch.engine.solver import Solver
from tilesearch.engine.strategy import BreadthFirstSearch
from tilesearch.models.board import BoardState


def test_all_calculators_are_zero_at_goal(goal: BoardState) -> None:
    for calculator in CALCULATORS.values():
        assert calculator(goal, goal, 0) == 0


def test_known_values(four_move: BoardState, goal: BoardState) -> None:
    # Tiles 1, 2, 5 and 6 are each one step from home.
    assert manhattan_distance(four_move, goal, 0) == 4
    assert manhattan_distance(four_move, goal, 3) == 7
    assert manhattan_distance_inversions(four_move, goal, 0) == 4 + 4 // 2
    assert manhattan_distance_inversions(four_move, goal, 1) == 7
    assert greedy_manhattan_distance(four_move, goal, 0) == 4
    assert greedy_manhattan_distance(four_move, goal, 25) == 4
    assert misplaced_tiles(four_move, goal, 0) == 4
    assert misplaced_tiles(four_move, goal, 2) == 6
    assert uniform_cost(four_move, goal, 5) == 5


def test_blank_is_never_counted(goal: BoardState) -> None:
    # Only the blank and tile 8 differ from the goal.
    board = BoardState.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert manhattan_distance(board, goal, 0) == 1
    assert misplaced_tiles(board, goal, 0) == 1


def test_manhattan_against_custom_goal(four_move: BoardState) -> None:
    assert manhattan_distance(four_move, four_move, 0) == 0
    assert misplaced_tiles(four_move, four_move, 0) == 0


def test_manhattan_on_larger_board() -> None:
    goal = BoardState.solved(4)
    # Swap tiles 1 and 15.
    cells = list(goal.cells)
    cells[0], cells[14] = cells[14], cells[0]
    board = BoardState(size=4, cells=tuple(cells))
    # Tile 15 at (0,0) wants (3,2); tile 1 at (3,2) wants (0,0).
    assert manhattan_distance(board, goal, 0) == 2 * (3 + 2)


@pytest.mark.parametrize("seed", range(6))
def test_manhattan_never_overestimates(seed: int, goal: BoardState) -> None:
    board = BoardGenerator.scramble(goal, 12, random.Random(seed))
    optimal = Solver.solve(board, goal, BreadthFirstSearch())
    assert optimal.solved
    assert manhattan_distance(board, goal, 0) <= len(optimal.path)


def test_registry_covers_every_heuristic() -> None:
    assert set(CALCULATORS) == set(Heuristic)
    assert Heuristic("manhattan-inversions") is Heuristic.manhattan_inversions
