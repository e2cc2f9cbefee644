"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while reporting the same
solution as the vanilla CLI, plus the direction of every slide.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.gamesolver import Solver
from npuzzle.models.board import Board, Direction

console = Console()

_ARROWS: dict[Direction, str] = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
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

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_step(index: int, board: Board, direction: Direction | None) -> Panel:
    if direction is None:
        title = "start"
    else:
        title = f"{index}. {_ARROWS[direction]} {direction.value}"
    return Panel(
        Align.center(_render_board(board)),
        title=f"[cyan]{title}[/cyan]",
        border_style="green" if board.is_goal() else "dim",
        padding=(0, 1),
    )


# -- screens ------------------------------------------------------------------


def _draw_unsolvable(board: Board) -> None:
    size = board.size
    panel = Panel(
        Group(
            Align.center(_render_board(board)),
            Align.center(Text("\nNo solution possible", style="bold red")),
        ),
        title=f"[bold red]Sliding Puzzle  {size}×{size}[/bold red]",
        border_style="red",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_solution(solver: Solver) -> None:
    boards = solver.solution() or []
    directions = solver.directions() or []
    size = solver.initial.size

    stats = Text()
    stats.append("  Minimum number of moves = ", style="dim")
    stats.append(str(solver.moves()), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(solver.expanded), style="bold yellow")

    steps = [_render_step(0, boards[0], None)]
    for i, (board, direction) in enumerate(zip(boards[1:], directions), 1):
        steps.append(_render_step(i, board, direction))

    path = Text("  ")
    path.append(
        " ".join(_ARROWS[d] for d in directions) or "already solved",
        style="bold cyan",
    )

    panel = Panel(
        Group(Columns(steps), Text(""), path),
        title=f"[bold green]Sliding Puzzle  {size}×{size}[/bold green]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(stats)
    console.print(panel)


# -- public entry point -------------------------------------------------------


def run(board: Board, track_visited: bool = True) -> None:
    """Solve *board* and print the report with Rich."""
    with console.status("[cyan]Solving…[/cyan]"):
        solver = Solver(board, track_visited=track_visited)

    if solver.is_solvable():
        _draw_solution(solver)
    else:
        _draw_unsolvable(board)
