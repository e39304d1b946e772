"""Search nodes and solution-path reconstruction."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import NamedTuple

from tilesearch.models.board import BoardState, Direction

# (state, goal, path_cost) -> ordering cost
CostCalculator = Callable[[BoardState, BoardState, int], int]

DEFAULT_TRACE_LIMIT = 100


class Trace(NamedTuple):
    """A bounded slice of a node chain, oldest node first."""

    nodes: list[SearchNode]
    truncated: bool


@dataclass(frozen=True, eq=False)
class SearchNode:
    """One board state in the search tree plus how it was reached.

    Two nodes are equal when their states are equal; depth and cost are
    not part of the comparison.  That is what lets the explored set find
    an earlier node for the same arrangement.
    """

    state: BoardState
    parent: SearchNode | None = field(default=None, repr=False)
    action: Direction | None = None
    path_cost: int = 0
    cost: int = 0
    depth: int = 0

    def __post_init__(self) -> None:
        if self.parent is None:
            if self.action is not None or self.depth != 0:
                raise ValueError("A root node has no action and depth 0.")
            return
        if self.action is None:
            raise ValueError("A child node must record the move that produced it.")
        if self.depth != self.parent.depth + 1:
            raise ValueError(
                f"Child depth {self.depth} does not follow parent depth "
                f"{self.parent.depth}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def root(cls, state: BoardState, cost: int = 0) -> SearchNode:
        return cls(state=state, cost=cost)

    def child(
        self,
        direction: Direction,
        goal: BoardState | None = None,
        calculator: CostCalculator | None = None,
    ) -> SearchNode:
        """Build the node reached by sliding *direction* from this one.

        A throwaway :class:`Puzzle` computes the new arrangement.  Without
        a *calculator* the cost is simply the path cost.
        """
        from tilesearch.engine.puzzle import Puzzle

        puzzle = Puzzle(self.state)
        if not puzzle.move(direction):
            raise ValueError(
                f"Move {Direction(direction).value} is not possible from\n{self.state}"
            )
        state = puzzle.state
        path_cost = self.path_cost + 1
        if calculator is None:
            cost = path_cost
        else:
            cost = calculator(state, goal if goal is not None else state, path_cost)
        return SearchNode(
            state=state,
            parent=self,
            action=Direction(direction),
            path_cost=path_cost,
            cost=cost,
            depth=self.depth + 1,
        )

    # -- equality -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchNode):
            return NotImplemented
        return self.state == other.state

    def __hash__(self) -> int:
        return hash(self.state)

    # -- path walking ---------------------------------------------------------

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def ancestors(self) -> Iterator[SearchNode]:
        """Yield this node, then its parent, and so on up to the root."""
        node: SearchNode | None = self
        while node is not None:
            yield node
            node = node.parent

    def actions(self) -> list[Direction]:
        """Return every move from the root to this node, in order."""
        moves = [n.action for n in self.ancestors() if n.action is not None]
        moves.reverse()
        return moves

    def trace(self, limit: int | None = DEFAULT_TRACE_LIMIT) -> Trace:
        """Return at most *limit* steps leading to this node.

        When the chain is longer than *limit* the oldest steps are
        dropped, the root is left out, and ``truncated`` is set.
        """
        nodes: list[SearchNode] = []
        for node in self.ancestors():
            if limit is not None and len(nodes) > limit:
                nodes.reverse()
                return Trace(nodes=nodes[1:], truncated=True)
            nodes.append(node)
        nodes.reverse()
        return Trace(nodes=nodes, truncated=False)
