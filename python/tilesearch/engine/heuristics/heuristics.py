"""Cost calculators for cost-guided search.

Every calculator has the signature ``(state, goal, path_cost) -> int``
and ignores the blank tile.
"""

from __future__ import annotations

from enum import StrEnum

from tilesearch.models.board import BoardState
from tilesearch.models.node import CostCalculator


def _manhattan(state: BoardState, goal: BoardState) -> int:
    n = state.size
    goal_pos = goal.positions()
    dist = 0
    for idx, tile in enumerate(state.cells):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = divmod(goal_pos[tile], n)
        dist += abs(r - gr) + abs(c - gc)
    return dist


def uniform_cost(state: BoardState, goal: BoardState, path_cost: int) -> int:
    """Path cost alone; cost-guided search becomes uniform-cost search."""
    return path_cost


def manhattan_distance(state: BoardState, goal: BoardState, path_cost: int) -> int:
    """Admissible and consistent: g + sum of tile grid distances."""
    return _manhattan(state, goal) + path_cost


def manhattan_distance_inversions(
    state: BoardState, goal: BoardState, path_cost: int
) -> int:
    """Manhattan distance plus half the inversion count.  Not admissible."""
    return _manhattan(state, goal) + state.inversions(goal) // 2 + path_cost


def greedy_manhattan_distance(
    state: BoardState, goal: BoardState, path_cost: int
) -> int:
    """Manhattan distance ignoring how far we have already come."""
    return _manhattan(state, goal)


def misplaced_tiles(state: BoardState, goal: BoardState, path_cost: int) -> int:
    misplaced = sum(
        1 for v, g in zip(state.cells, goal.cells) if v != 0 and v != g
    )
    return misplaced + path_cost


# -- registry -----------------------------------------------------------------


class Heuristic(StrEnum):
    uniform = "uniform"
    manhattan = "manhattan"
    manhattan_inversions = "manhattan-inversions"
    greedy = "greedy"
    misplaced = "misplaced"


CALCULATORS: dict[Heuristic, CostCalculator] = {
    Heuristic.uniform: uniform_cost,
    Heuristic.manhattan: manhattan_distance,
    Heuristic.manhattan_inversions: manhattan_distance_inversions,
    Heuristic.greedy: greedy_manhattan_distance,
    Heuristic.misplaced: misplaced_tiles,
}
