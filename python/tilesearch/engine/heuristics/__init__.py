from tilesearch.engine.heuristics.heuristics import (
    CALCULATORS,
    Heuristic,
    greedy_manhattan_distance,
    manhattan_distance,
    manhattan_distance_inversions,
    misplaced_tiles,
    uniform_cost,
)

__all__ = [
    "CALCULATORS",
    "Heuristic",
    "greedy_manhattan_distance",
    "manhattan_distance",
    "manhattan_distance_inversions",
    "misplaced_tiles",
    "uniform_cost",
]
