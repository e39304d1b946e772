"""Frontier strategies.

A strategy owns the frontier (generated but unexpanded nodes) and
decides two things: which node is expanded next, and whether a newly
generated node may replace whatever the explored set already holds for
the same board.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque
from enum import StrEnum

from tilesearch.models.node import SearchNode

logger = logging.getLogger(__name__)

DEFAULT_DEPTH_LIMIT = 31  # longest optimal 3×3 solution
DEFAULT_DEPTH_STEP = 10
DEFAULT_MAX_DEPTH = 80  # longest optimal 4×4 solution


class Strategy:
    """Base class; subclasses supply the frontier ordering."""

    name = "Strategy"

    def __init__(self) -> None:
        self.reset()

    # -- frontier -------------------------------------------------------------

    def reset(self) -> None:
        """Drop every queued node so a fresh pass can start."""
        raise NotImplementedError

    def enqueue(self, node: SearchNode) -> None:
        raise NotImplementedError

    def dequeue(self) -> SearchNode:
        """Remove and return the node :meth:`next` would give."""
        raise NotImplementedError

    def next(self) -> SearchNode:
        raise NotImplementedError

    def finished(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        raise NotImplementedError

    # -- policy ---------------------------------------------------------------

    def accept_node(self, node: SearchNode, existing: SearchNode | None) -> bool:
        """Decide whether *node* supersedes *existing* (same board, or None)."""
        return existing is None

    def expand_search(self) -> bool:
        """Relax the bound after a failed pass; True means run again."""
        return False

    def is_complete(self) -> bool:
        """Will a pass find a solution whenever one exists?"""
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BreadthFirstSearch(Strategy):
    name = "Breadth-first"

    def reset(self) -> None:
        self._frontier: deque[SearchNode] = deque()

    def enqueue(self, node: SearchNode) -> None:
        self._frontier.append(node)

    def dequeue(self) -> SearchNode:
        return self._frontier.popleft()

    def next(self) -> SearchNode:
        return self._frontier[0]

    def __len__(self) -> int:
        return len(self._frontier)


class DepthFirstSearch(Strategy):
    name = "Depth-first"

    def reset(self) -> None:
        self._frontier: list[SearchNode] = []

    def enqueue(self, node: SearchNode) -> None:
        self._frontier.append(node)

    def dequeue(self) -> SearchNode:
        return self._frontier.pop()

    def next(self) -> SearchNode:
        return self._frontier[-1]

    def __len__(self) -> int:
        return len(self._frontier)


class DepthLimitedSearch(DepthFirstSearch):
    """Depth-first search that never goes below *limit* moves.

    A board reached again at a shallower depth is re-opened, so every
    board within the limit is eventually seen at its shortest depth.
    """

    name = "Depth-limited"

    def __init__(self, limit: int = DEFAULT_DEPTH_LIMIT) -> None:
        if limit < 0:
            raise ValueError(f"Depth limit must be non-negative, got {limit}.")
        self.limit = limit
        super().__init__()

    def accept_node(self, node: SearchNode, existing: SearchNode | None) -> bool:
        return node.depth <= self.limit and (
            existing is None or existing.depth > node.depth
        )

    def is_complete(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(limit={self.limit})"


class IterativeDeepeningSearch(DepthLimitedSearch):
    """Depth-limited search re-run with a deeper limit after each failure."""

    name = "Iterative-deepening"

    def __init__(
        self,
        limit: int = DEFAULT_DEPTH_STEP,
        step: int = DEFAULT_DEPTH_STEP,
        max_limit: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        if step < 1:
            raise ValueError(f"Depth step must be positive, got {step}.")
        self.step = step
        self.max_limit = max(max_limit, limit)
        super().__init__(limit)

    def expand_search(self) -> bool:
        if self.limit >= self.max_limit:
            logger.info("Depth limit %d reached the cap; giving up", self.limit)
            return False
        self.limit = min(self.limit + self.step, self.max_limit)
        logger.info("Expanding search depth to %d", self.limit)
        return True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(limit={self.limit}, step={self.step}, "
            f"max_limit={self.max_limit})"
        )


class BidirectionalSearch(Strategy):
    """Two breadth-first frontiers, one from the start and one from the goal.

    The frontier methods act on whichever side is :attr:`active`; the
    solver calls :meth:`alternate` after expanding each node.
    """

    name = "Bidirectional"

    def reset(self) -> None:
        self.forward = BreadthFirstSearch()
        self.backward = BreadthFirstSearch()
        self.active: BreadthFirstSearch = self.forward

    @property
    def passive(self) -> BreadthFirstSearch:
        return self.backward if self.active is self.forward else self.forward

    def alternate(self) -> None:
        self.active = self.passive

    def enqueue(self, node: SearchNode) -> None:
        self.active.enqueue(node)

    def dequeue(self) -> SearchNode:
        return self.active.dequeue()

    def next(self) -> SearchNode:
        return self.active.next()

    def finished(self) -> bool:
        # Once either side runs dry its component is fully explored and
        # the two searches can no longer meet.
        return self.forward.finished() or self.backward.finished()

    def accept_node(self, node: SearchNode, existing: SearchNode | None) -> bool:
        return self.active.accept_node(node, existing)

    def __len__(self) -> int:
        return len(self.forward) + len(self.backward)


class CostGuidedSearch(Strategy):
    """Expand the cheapest node first, by the cost the calculator assigned."""

    name = "Cost-guided"

    def reset(self) -> None:
        self._frontier: list[tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()

    def enqueue(self, node: SearchNode) -> None:
        heapq.heappush(self._frontier, (node.cost, next(self._counter), node))

    def dequeue(self) -> SearchNode:
        return heapq.heappop(self._frontier)[2]

    def next(self) -> SearchNode:
        return self._frontier[0][2]

    def __len__(self) -> int:
        return len(self._frontier)

    def accept_node(self, node: SearchNode, existing: SearchNode | None) -> bool:
        # Equal cost only wins when it is also shallower, otherwise a
        # calculator that ignores path cost would cycle forever.
        if existing is None or node.cost < existing.cost:
            return True
        return node.cost == existing.cost and node.depth < existing.depth


# -- registry -----------------------------------------------------------------


class Algorithm(StrEnum):
    bfs = "bfs"
    dfs = "dfs"
    dls = "dls"
    ids = "ids"
    bidir = "bidir"
    best = "best"


def make_strategy(
    algorithm: Algorithm,
    depth_limit: int = DEFAULT_DEPTH_LIMIT,
    depth_step: int = DEFAULT_DEPTH_STEP,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Strategy:
    """Return a fresh strategy instance for *algorithm*."""
    algorithm = Algorithm(algorithm)
    if algorithm is Algorithm.bfs:
        return BreadthFirstSearch()
    if algorithm is Algorithm.dfs:
        return DepthFirstSearch()
    if algorithm is Algorithm.dls:
        return DepthLimitedSearch(depth_limit)
    if algorithm is Algorithm.ids:
        return IterativeDeepeningSearch(depth_step, depth_step, max_depth)
    if algorithm is Algorithm.bidir:
        return BidirectionalSearch()
    return CostGuidedSearch()
