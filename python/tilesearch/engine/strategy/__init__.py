from tilesearch.engine.strategy.strategy import (
    Algorithm,
    BidirectionalSearch,
    BreadthFirstSearch,
    CostGuidedSearch,
    DepthFirstSearch,
    DepthLimitedSearch,
    IterativeDeepeningSearch,
    Strategy,
    make_strategy,
)

__all__ = [
    "Algorithm",
    "BidirectionalSearch",
    "BreadthFirstSearch",
    "CostGuidedSearch",
    "DepthFirstSearch",
    "DepthLimitedSearch",
    "IterativeDeepeningSearch",
    "Strategy",
    "make_strategy",
]
