from tilesearch.engine.solver.solver import (
    INFORMED_HEURISTICS,
    Attempt,
    SearchResult,
    Solver,
    build_plan,
)

__all__ = ["INFORMED_HEURISTICS", "Attempt", "SearchResult", "Solver", "build_plan"]
