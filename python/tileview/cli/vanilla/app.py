"""Plain terminal frontend: print and ANSI colour codes only.

Shows the boards, one result line per attempt, and the solution trace.
"""

from __future__ import annotations

from collections.abc import Iterable

from tilesearch.engine.solver import Attempt, SearchResult, Solver
from tilesearch.models.board import BoardState
from tilesearch.models.node import DEFAULT_TRACE_LIMIT, SearchNode

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.2f}s"


# -- board rendering ----------------------------------------------------------


def render_board(board: BoardState, goal: BoardState | None = None) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif goal is not None and board.is_tile_correct(r, c, goal):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def render_trace(node: SearchNode, goal: BoardState, limit: int | None) -> str:
    """Return the path to *node* as numbered moves with the board after each."""
    trace = node.trace(limit)
    lines: list[str] = []
    if trace.truncated:
        lines.append(f"{_Y}Truncated trace route:{_R}")
    else:
        lines.append(f"{_C}Path taken to solve:{_R}")
    for step in trace.nodes:
        if step.action is None:
            continue
        lines.append(f"  {step.depth}: {_Y}{step.action.value.upper()}{_R}")
        lines.append(render_board(step.state, goal))
    return "\n".join(lines)


def _result_line(attempt: Attempt, result: SearchResult, parity_ok: bool) -> str:
    outcome = f"{_G}SUCCESS{_R}" if result.solved else f"{_Y}FAILURE{_R}"
    line = (
        f"  {attempt.label:<28} {outcome}  depth {result.depth:>4}  "
        f"expanded {result.expanded:>7}  created {result.created:>7}  "
        f"{_DIM}{_format_time(result.elapsed)}{_R}"
    )
    if result.attempts > 1:
        line += f"  {_DIM}({result.attempts} passes, limit {result.limit}){_R}"
    if not parity_ok:
        line += f"  {_RED}parity mismatch{_R}"
    return line


# -- public entry point -------------------------------------------------------


def run(
    start: BoardState,
    goal: BoardState,
    plan: Iterable[Attempt],
    trace_limit: int | None = DEFAULT_TRACE_LIMIT,
    show_trace: bool = True,
) -> bool:
    """Solve *start* with every attempt in *plan* and print the results.

    Returns False if any attempt disagreed with the parity check.
    """
    solvable = Solver.is_solvable(start, goal)
    print()
    print(f"  {_C}=== Start ({start.size}×{start.size}) ==={_R}")
    print(render_board(start, goal))
    print(f"  {_C}=== Goal ==={_R}")
    print(render_board(goal, goal))
    print()
    verdict = f"{_G}yes{_R}" if solvable else f"{_Y}no{_R}"
    print(f"  Puzzle has solution?: {verdict}")
    print()

    all_ok = True
    for attempt, result, parity_ok in Solver.analyze(start, goal, plan):
        all_ok = all_ok and parity_ok
        print(_result_line(attempt, result, parity_ok))
        if show_trace and result.solved and result.node is not None:
            print(render_trace(result.node, goal, trace_limit))
            print()

    return all_ok
