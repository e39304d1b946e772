"""Graph search over board states."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from time import perf_counter

from tilesearch.engine.heuristics import CALCULATORS, Heuristic, manhattan_distance
from tilesearch.engine.puzzle import Puzzle
from tilesearch.engine.strategy import (
    Algorithm,
    BidirectionalSearch,
    CostGuidedSearch,
    Strategy,
    make_strategy,
)
from tilesearch.engine.strategy.strategy import (
    DEFAULT_DEPTH_LIMIT,
    DEFAULT_DEPTH_STEP,
    DEFAULT_MAX_DEPTH,
)
from tilesearch.models.board import EXPANSION_ORDER, BoardState, Direction
from tilesearch.models.node import CostCalculator, SearchNode

logger = logging.getLogger(__name__)

# Heuristics tried by default for cost-guided search.
INFORMED_HEURISTICS: tuple[Heuristic, ...] = (
    Heuristic.manhattan,
    Heuristic.manhattan_inversions,
    Heuristic.greedy,
    Heuristic.misplaced,
)


@dataclass
class SearchResult:
    """Outcome and counters of one :meth:`Solver.solve` call."""

    strategy: str
    solved: bool = False
    node: SearchNode | None = None  # goal node, or the last node expanded
    expanded: int = 0
    created: int = 0
    generated: int = 0
    peak_frontier: int = 0
    attempts: int = 1
    limit: int | None = None
    elapsed: float = 0.0

    @property
    def path(self) -> list[Direction]:
        if not self.solved or self.node is None:
            return []
        return self.node.actions()

    @property
    def depth(self) -> int:
        return self.node.depth if self.node is not None else 0


@dataclass(frozen=True)
class Attempt:
    """One strategy/heuristic combination to run against a board."""

    algorithm: Algorithm
    heuristic: Heuristic = Heuristic.uniform
    depth_limit: int = DEFAULT_DEPTH_LIMIT
    depth_step: int = DEFAULT_DEPTH_STEP
    max_depth: int = DEFAULT_MAX_DEPTH

    @property
    def label(self) -> str:
        if self.algorithm is Algorithm.best:
            return f"{self.algorithm.value}:{self.heuristic.value}"
        return self.algorithm.value

    @property
    def calculator(self) -> CostCalculator:
        return CALCULATORS[self.heuristic]

    def strategy(self) -> Strategy:
        return make_strategy(
            self.algorithm, self.depth_limit, self.depth_step, self.max_depth
        )


def build_plan(
    algorithms: Iterable[Algorithm],
    heuristics: Iterable[Heuristic] = (),
    depth_limit: int = DEFAULT_DEPTH_LIMIT,
    depth_step: int = DEFAULT_DEPTH_STEP,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Attempt]:
    """Expand algorithms into attempts; ``best`` runs once per heuristic."""
    heuristics = tuple(heuristics) or INFORMED_HEURISTICS
    plan: list[Attempt] = []
    for algorithm in algorithms:
        algorithm = Algorithm(algorithm)
        chosen = heuristics if algorithm is Algorithm.best else (Heuristic.uniform,)
        for heuristic in chosen:
            plan.append(
                Attempt(algorithm, Heuristic(heuristic), depth_limit, depth_step, max_depth)
            )
    return plan


class Solver:
    """Search entry points; holds no state between calls."""

    @staticmethod
    def solve(
        start: BoardState,
        goal: BoardState,
        strategy: Strategy,
        calculator: CostCalculator | None = None,
    ) -> SearchResult:
        """Search from *start* to *goal*, re-running while *strategy* asks.

        Each pass starts from a fresh frontier and explored set.
        Counters in the returned result cover every pass.
        """
        began = perf_counter()
        totals = SearchResult(strategy=strategy.name, attempts=0)
        while True:
            result = Solver.search(start, goal, strategy, calculator)
            totals.attempts += 1
            totals.expanded += result.expanded
            totals.created += result.created
            totals.generated += result.generated
            totals.peak_frontier = max(totals.peak_frontier, result.peak_frontier)
            logger.info(
                "%s search complete: %s",
                strategy.name,
                "SUCCESS" if result.solved else "FAILURE",
            )
            logger.info(
                "Nodes expanded: %d, nodes created: %d, depth of terminated search: %d",
                result.expanded,
                result.created,
                result.depth,
            )
            if result.solved or not strategy.expand_search():
                break

        totals.solved = result.solved
        totals.node = result.node
        totals.limit = result.limit
        totals.elapsed = perf_counter() - began
        return totals

    @staticmethod
    def search(
        start: BoardState,
        goal: BoardState,
        strategy: Strategy,
        calculator: CostCalculator | None = None,
    ) -> SearchResult:
        """Run a single pass of *strategy* without any retry."""
        if start.size != goal.size:
            raise ValueError(
                f"Start is {start.size}×{start.size} but goal is "
                f"{goal.size}×{goal.size}."
            )
        strategy.reset()
        if isinstance(strategy, BidirectionalSearch):
            return Solver._search_bidirectional(start, goal, strategy)

        root_cost = calculator(start, goal, 0) if calculator is not None else 0
        root = SearchNode.root(start, root_cost)
        explored: dict[BoardState, SearchNode] = {start: root}
        strategy.enqueue(root)
        result = SearchResult(
            strategy=strategy.name,
            node=root,
            created=1,
            limit=getattr(strategy, "limit", None),
        )

        while not strategy.finished():
            result.peak_frontier = max(result.peak_frontier, len(strategy))
            current = strategy.dequeue()
            if explored.get(current.state) is not current:
                continue  # superseded while it was queued
            result.node = current

            if current.state == goal:
                result.solved = True
                break

            result.expanded += 1
            puzzle = Puzzle(current.state)
            for direction in EXPANSION_ORDER:
                if not puzzle.is_valid_move(direction):
                    continue
                child = current.child(direction, goal, calculator)
                result.generated += 1
                if strategy.accept_node(child, explored.get(child.state)):
                    explored[child.state] = child
                    strategy.enqueue(child)
                    result.created += 1

        return result

    @staticmethod
    def _search_bidirectional(
        start: BoardState, goal: BoardState, strategy: BidirectionalSearch
    ) -> SearchResult:
        forward_seen = {start: SearchNode.root(start)}
        backward_seen = {goal: SearchNode.root(goal)}
        strategy.forward.enqueue(forward_seen[start])
        strategy.backward.enqueue(backward_seen[goal])
        result = SearchResult(
            strategy=strategy.name, node=forward_seen[start], created=2
        )
        if start == goal:
            result.solved = True
            return result

        while not strategy.finished():
            result.peak_frontier = max(result.peak_frontier, len(strategy))
            is_forward = strategy.active is strategy.forward
            seen, other = (
                (forward_seen, backward_seen) if is_forward else (backward_seen, forward_seen)
            )
            current = strategy.dequeue()
            if is_forward:
                result.node = current

            result.expanded += 1
            puzzle = Puzzle(current.state)
            for direction in EXPANSION_ORDER:
                if not puzzle.is_valid_move(direction):
                    continue
                child = current.child(direction)
                result.generated += 1
                if not strategy.accept_node(child, seen.get(child.state)):
                    continue
                seen[child.state] = child
                strategy.enqueue(child)
                result.created += 1

                meeting = other.get(child.state)
                if meeting is not None:
                    ahead, behind = (child, meeting) if is_forward else (meeting, child)
                    result.node = Solver._join(ahead, behind)
                    result.solved = True
                    return result
            strategy.alternate()

        return result

    @staticmethod
    def _join(ahead: SearchNode, behind: SearchNode) -> SearchNode:
        """Extend the forward chain *ahead* back along the goal-side chain.

        *behind* was reached from the goal; undoing its moves in reverse
        order walks from the meeting board to the goal.
        """
        node = ahead
        for action in reversed(behind.actions()):
            node = node.child(action.inverse)
        return node

    # -- convenience ----------------------------------------------------------

    @staticmethod
    def analyze(
        start: BoardState, goal: BoardState, plan: Iterable[Attempt]
    ) -> Iterator[tuple[Attempt, SearchResult, bool]]:
        """Run every attempt in *plan* and check it against the parity rule.

        Yields ``(attempt, result, parity_ok)``.  A solution for a board the
        parity rule calls unsolvable is always a mismatch; a failure only is
        when the strategy claims to be complete.
        """
        predicted = Solver.is_solvable(start, goal)
        logger.info("Puzzle has solution?: %s", predicted)
        for attempt in plan:
            strategy = attempt.strategy()
            logger.debug("Attempting to solve with %s (%r)", attempt.label, strategy)
            result = Solver.solve(start, goal, strategy, attempt.calculator)
            logger.debug("Time taken: %.1fms", result.elapsed * 1000)
            if result.solved:
                parity_ok = predicted
            else:
                parity_ok = not predicted or not strategy.is_complete()
            if not parity_ok:
                logger.error(
                    "%s disagrees with the parity check (predicted %s, solved %s)",
                    attempt.label,
                    predicted,
                    result.solved,
                )
            yield attempt, result, parity_ok

    @staticmethod
    def is_solvable(board: BoardState, goal: BoardState | None = None) -> bool:
        """Return True if *board* can reach *goal* (default: the solved board)."""
        if goal is None:
            goal = BoardState.solved(board.size)
        return board.is_solvable(goal)

    @staticmethod
    def moves(board: BoardState, goal: BoardState | None = None) -> list[Direction]:
        """Return an optimal move sequence, or ``[]`` if solved / unsolvable."""
        if goal is None:
            goal = BoardState.solved(board.size)
        if board == goal or not board.is_solvable(goal):
            return []
        result = Solver.search(board, goal, CostGuidedSearch(), manhattan_distance)
        return result.path

    @staticmethod
    def hint(board: BoardState, goal: BoardState | None = None) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        moves = Solver.moves(board, goal)
        return moves[0] if moves else None
