#!/usr/bin/env python3
"""Sliding-tile puzzle search.

Usage::

    python main.py board.txt                    # every strategy, Rich output
    python main.py board.txt -a bfs -a bidir    # chosen strategies only
    python main.py -a best -H manhattan --scramble 20 --seed 7
    python main.py board.txt -f vanilla -v      # plain output, INFO logging
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import List, Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tilesearch.engine.generator import BoardGenerator  # noqa: E402
from tilesearch.engine.heuristics import Heuristic  # noqa: E402
from tilesearch.engine.solver import build_plan  # noqa: E402
from tilesearch.engine.strategy import Algorithm  # noqa: E402
from tilesearch.engine.strategy.strategy import (  # noqa: E402
    DEFAULT_DEPTH_LIMIT,
    DEFAULT_DEPTH_STEP,
    DEFAULT_MAX_DEPTH,
)
from tilesearch.models.board import BoardState  # noqa: E402
from tilesearch.models.loader import DEFAULT_BLANK, load_board  # noqa: E402
from tilesearch.models.node import DEFAULT_TRACE_LIMIT  # noqa: E402

# dls is left out by default: it is incomplete below the true depth.
DEFAULT_ALGORITHMS = [Algorithm.bfs, Algorithm.ids, Algorithm.bidir, Algorithm.best]


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "tileview.cli.vanilla.app",
    Frontend.rich: "tileview.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbosity: int, frontend: Frontend) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    if frontend is Frontend.rich:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(show_path=False)],
            force=True,
        )
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            force=True,
        )


def _load_boards(
    board_file: Optional[Path],
    goal_file: Optional[Path],
    size: Optional[int],
    blank: str,
    scramble: int,
    seed: Optional[int],
) -> tuple[BoardState, BoardState]:
    """Return ``(start, goal)`` from files, or a scramble of the goal."""
    start = None
    if board_file is not None:
        start = load_board(board_file, size=size, blank=blank)
        size = size or start.size

    if goal_file is not None:
        goal = load_board(goal_file, size=size, blank=blank)
    else:
        goal = BoardState.solved(size or 3)

    if start is None:
        if scramble <= 0:
            raise ValueError("Give a board file or --scramble N.")
        start = BoardGenerator.scramble(goal, scramble, random.Random(seed))

    if start.size != goal.size:
        raise ValueError(
            f"Board is {start.size}×{start.size} but goal is {goal.size}×{goal.size}."
        )
    return start, goal


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    board_file: Optional[Path] = typer.Argument(
        None,
        help="Board to solve: N² tiles in row-major order.",
    ),
    goal_file: Optional[Path] = typer.Option(
        None, "-g", "--goal",
        help="Goal board. Defaults to 1..N²-1 with the blank last.",
    ),
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=2, max=8,
        help="Board width (2-8). Inferred from the board file, else 3.",
    ),
    blank: str = typer.Option(
        DEFAULT_BLANK, "--blank",
        help="Marker for the blank tile in board files.",
    ),
    algorithms: Optional[List[Algorithm]] = typer.Option(
        None, "-a", "--algorithm",
        help="Strategy to run; repeat for several. Default: bfs, ids, bidir, best.",
    ),
    heuristics: Optional[List[Heuristic]] = typer.Option(
        None, "-H", "--heuristic",
        help="Cost calculator for 'best'; repeat for several. Default: all informed ones.",
    ),
    scramble: int = typer.Option(
        0, "--scramble",
        min=0,
        help="Scramble the goal by this many random moves instead of reading a board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    unsolvable: bool = typer.Option(
        False, "--unsolvable",
        help="Swap two tiles first so the board cannot be solved.",
    ),
    depth_limit: int = typer.Option(
        DEFAULT_DEPTH_LIMIT, "--depth-limit",
        min=0,
        help="Limit for depth-limited search.",
    ),
    depth_step: int = typer.Option(
        DEFAULT_DEPTH_STEP, "--depth-step",
        min=1,
        help="Start limit and increment for iterative deepening.",
    ),
    max_depth: int = typer.Option(
        DEFAULT_MAX_DEPTH, "--max-depth",
        min=1,
        help="Iterative deepening gives up past this limit.",
    ),
    trace_limit: int = typer.Option(
        DEFAULT_TRACE_LIMIT, "--trace",
        min=0,
        help="Show at most this many steps of each solution.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Output style.",
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose",
        count=True,
        help="Log search progress (-vv for debug).",
    ),
) -> None:
    """Solve a sliding-tile puzzle with several search strategies."""
    _configure_logging(verbose, frontend)

    try:
        start, goal = _load_boards(board_file, goal_file, size, blank, scramble, seed)
        if unsolvable:
            start = BoardGenerator.unsolvable(start)
    except (OSError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    plan = build_plan(
        algorithms or DEFAULT_ALGORITHMS,
        heuristics or (),
        depth_limit,
        depth_step,
        max_depth,
    )

    mod = importlib.import_module(_RUNNERS[frontend])
    if not mod.run(start, goal, plan, trace_limit=trace_limit):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
