"""Frontier ordering and acceptance policies."""

from __future__ import annotations

import pytest

from tilesearch.engine.strategy import (
    Algorithm,
    BidirectionalSearch,
    BreadthFirstSearch,
    CostGuidedSearch,
    DepthFirstSearch,
    DepthLimitedSearch,
    IterativeDeepeningSearch,
    make_strategy,
)
from tilesearch.models.board import BoardState, Direction
from tilesearch.models.node import SearchNode


# -- helpers ------------------------------------------------------------------


def _node(depth: int = 0, cost: int = 0) -> SearchNode:
    """A node at *depth* with an arbitrary *cost*; the board is irrelevant."""
    goal = BoardState.solved(3)
    node = SearchNode.root(goal)
    for _ in range(depth):
        node = SearchNode(
            state=goal,
            parent=node,
            action=Direction.UP,
            depth=node.depth + 1,
        )
    return SearchNode(
        state=goal, parent=node.parent, action=node.action, cost=cost, depth=depth
    )


def _drain(strategy) -> list[SearchNode]:
    out = []
    while not strategy.finished():
        out.append(strategy.dequeue())
    return out


# -- ordering -----------------------------------------------------------------


def test_breadth_first_is_fifo() -> None:
    nodes = [_node(), _node(), _node()]
    strategy = BreadthFirstSearch()
    for n in nodes:
        strategy.enqueue(n)
    assert strategy.next() is nodes[0]
    assert len(strategy) == 3
    assert [id(n) for n in _drain(strategy)] == [id(n) for n in nodes]


def test_depth_first_is_lifo() -> None:
    nodes = [_node(), _node(), _node()]
    strategy = DepthFirstSearch()
    for n in nodes:
        strategy.enqueue(n)
    assert strategy.next() is nodes[-1]
    assert [id(n) for n in _drain(strategy)] == [id(n) for n in reversed(nodes)]


def test_cost_guided_orders_by_cost_then_insertion() -> None:
    a, b, c, d = _node(cost=5), _node(cost=2), _node(cost=5), _node(cost=1)
    strategy = CostGuidedSearch()
    for n in (a, b, c, d):
        strategy.enqueue(n)
    assert strategy.next() is d
    assert [id(n) for n in _drain(strategy)] == [id(d), id(b), id(a), id(c)]


def test_next_does_not_remove() -> None:
    strategy = BreadthFirstSearch()
    strategy.enqueue(_node())
    strategy.next()
    assert not strategy.finished()


def test_reset_empties_frontier() -> None:
    for strategy in (BreadthFirstSearch(), DepthFirstSearch(), CostGuidedSearch()):
        strategy.enqueue(_node())
        strategy.reset()
        assert strategy.finished()
        assert len(strategy) == 0


# -- acceptance ---------------------------------------------------------------


@pytest.mark.parametrize("cls", [BreadthFirstSearch, DepthFirstSearch])
def test_uninformed_accepts_first_visit_only(cls) -> None:
    strategy = cls()
    assert strategy.accept_node(_node(3), None)
    assert not strategy.accept_node(_node(1), _node(3))
    assert strategy.is_complete()
    assert not strategy.expand_search()


def test_depth_limited_acceptance() -> None:
    strategy = DepthLimitedSearch(limit=4)
    assert strategy.accept_node(_node(4), None)
    assert not strategy.accept_node(_node(5), None)
    assert strategy.accept_node(_node(2), _node(3))
    assert not strategy.accept_node(_node(3), _node(3))
    assert not strategy.accept_node(_node(4), _node(3))
    assert not strategy.is_complete()
    assert not strategy.expand_search()
    assert strategy.limit == 4


def test_depth_limited_rejects_negative_limit() -> None:
    with pytest.raises(ValueError):
        DepthLimitedSearch(limit=-1)


def test_cost_guided_acceptance() -> None:
    strategy = CostGuidedSearch()
    assert strategy.accept_node(_node(3, cost=9), None)
    assert strategy.accept_node(_node(5, cost=6), _node(2, cost=7))
    assert strategy.accept_node(_node(2, cost=7), _node(4, cost=7))
    assert not strategy.accept_node(_node(4, cost=7), _node(4, cost=7))
    assert not strategy.accept_node(_node(1, cost=8), _node(4, cost=7))


# -- iterative deepening ------------------------------------------------------


def test_iterative_deepening_grows_until_cap() -> None:
    strategy = IterativeDeepeningSearch(limit=10, step=10, max_limit=25)
    assert strategy.expand_search()
    assert strategy.limit == 20
    assert strategy.expand_search()
    assert strategy.limit == 25
    assert not strategy.expand_search()
    assert strategy.limit == 25


def test_iterative_deepening_uses_depth_limited_test() -> None:
    strategy = IterativeDeepeningSearch(limit=2, step=1)
    assert not strategy.accept_node(_node(3), None)
    strategy.expand_search()
    assert strategy.accept_node(_node(3), None)


def test_iterative_deepening_rejects_zero_step() -> None:
    with pytest.raises(ValueError):
        IterativeDeepeningSearch(step=0)


# -- bidirectional ------------------------------------------------------------


def test_bidirectional_alternates_sides() -> None:
    strategy = BidirectionalSearch()
    assert strategy.active is strategy.forward
    assert strategy.passive is strategy.backward

    fwd, bwd = _node(), _node()
    strategy.enqueue(fwd)
    strategy.alternate()
    assert strategy.active is strategy.backward
    strategy.enqueue(bwd)

    assert len(strategy) == 2
    assert strategy.next() is bwd
    strategy.alternate()
    assert strategy.dequeue() is fwd


def test_bidirectional_finishes_when_either_side_empties() -> None:
    strategy = BidirectionalSearch()
    assert strategy.finished()
    strategy.enqueue(_node())
    assert strategy.finished()
    strategy.alternate()
    strategy.enqueue(_node())
    assert not strategy.finished()


def test_bidirectional_accepts_first_visit_per_side() -> None:
    strategy = BidirectionalSearch()
    assert strategy.accept_node(_node(2), None)
    assert not strategy.accept_node(_node(1), _node(2))


# -- registry -----------------------------------------------------------------


@pytest.mark.parametrize(
    "algorithm, cls",
    [
        (Algorithm.bfs, BreadthFirstSearch),
        (Algorithm.dfs, DepthFirstSearch),
        (Algorithm.dls, DepthLimitedSearch),
        (Algorithm.ids, IterativeDeepeningSearch),
        (Algorithm.bidir, BidirectionalSearch),
        (Algorithm.best, CostGuidedSearch),
    ],
)
def test_make_strategy(algorithm: Algorithm, cls: type) -> None:
    assert type(make_strategy(algorithm)) is cls


def test_make_strategy_passes_limits() -> None:
    dls = make_strategy(Algorithm.dls, depth_limit=7)
    assert dls.limit == 7
    ids = make_strategy("ids", depth_step=3, max_depth=9)
    assert (ids.limit, ids.step, ids.max_limit) == (3, 3, 9)


def test_make_strategy_returns_fresh_instances() -> None:
    assert make_strategy(Algorithm.bfs) is not make_strategy(Algorithm.bfs)
