"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output and shows the same
information as the vanilla CLI: both boards, a results table, and the
solution trace of every successful attempt.
"""

from __future__ import annotations

from collections.abc import Iterable

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilesearch.engine.solver import Attempt, SearchResult, Solver
from tilesearch.models.board import BoardState
from tilesearch.models.node import DEFAULT_TRACE_LIMIT, SearchNode

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.2f}s"


# -- board rendering ----------------------------------------------------------


def render_board(board: BoardState, goal: BoardState | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif goal is not None and board.is_tile_correct(r, c, goal):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_trace(node: SearchNode, goal: BoardState, limit: int | None) -> Panel:
    """Return the path to *node* as a panel of small boards."""
    trace = node.trace(limit)
    steps: list[Group] = []
    for step in trace.nodes:
        if step.action is None:
            continue
        label = Text()
        label.append(f"{step.depth}: ", style="dim")
        label.append(step.action.value.upper(), style="bold yellow")
        steps.append(Group(label, render_board(step.state, goal)))

    if trace.truncated:
        title = "[bold yellow]Truncated trace route[/bold yellow]"
    else:
        title = "[bold cyan]Path taken to solve[/bold cyan]"
    body = Columns(steps) if steps else Text("  Already solved.", style="dim")
    return Panel(body, title=title, border_style="dim", padding=(0, 1))


def _results_table() -> Table:
    table = Table(
        title="Search results",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("Strategy", style="bold")
    table.add_column("Outcome")
    table.add_column("Depth", justify="right", style="yellow")
    table.add_column("Expanded", justify="right")
    table.add_column("Created", justify="right")
    table.add_column("Passes", justify="right", style="dim")
    table.add_column("Time", justify="right", style="dim")
    table.add_column("Parity")
    return table


def _add_result(table: Table, attempt: Attempt, result: SearchResult, parity_ok: bool) -> None:
    outcome = "[bold green]SUCCESS[/bold green]" if result.solved else "[yellow]FAILURE[/yellow]"
    passes = str(result.attempts)
    if result.limit is not None:
        passes += f" (≤{result.limit})"
    table.add_row(
        attempt.label,
        outcome,
        str(result.depth),
        f"{result.expanded:,}",
        f"{result.created:,}",
        passes,
        _format_time(result.elapsed),
        "[green]ok[/green]" if parity_ok else "[bold red]mismatch[/bold red]",
    )


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
    size = start.size
    solvable = Solver.is_solvable(start, goal)

    boards = Columns(
        [
            Panel(
                Align.center(render_board(start, goal)),
                title=f"[bold cyan]Start  {size}×{size}[/bold cyan]",
                border_style="bright_blue",
            ),
            Panel(
                Align.center(render_board(goal, goal)),
                title="[bold green]Goal[/bold green]",
                border_style="green",
            ),
        ]
    )
    verdict = Text("  Puzzle has solution?: ", style="dim")
    verdict.append("yes" if solvable else "no", style="bold green" if solvable else "bold yellow")

    console.print()
    console.print(boards)
    console.print(verdict)
    console.print()

    table = _results_table()
    traces: list[Panel] = []
    all_ok = True
    with console.status("[cyan]Searching…[/cyan]"):
        for attempt, result, parity_ok in Solver.analyze(start, goal, plan):
            all_ok = all_ok and parity_ok
            _add_result(table, attempt, result, parity_ok)
            if show_trace and result.solved and result.node is not None:
                panel = render_trace(result.node, goal, trace_limit)
                panel.subtitle = f"[dim]{attempt.label}[/dim]"
                traces.append(panel)

    console.print(table)
    for panel in traces:
        console.print(panel)

    return all_ok
