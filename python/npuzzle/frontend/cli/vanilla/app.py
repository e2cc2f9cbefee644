"""Vanilla terminal frontend — no third-party dependencies.

Prints the classic plain-text report: either ``No solution possible`` or
the move count followed by every board of the solution.
"""

from __future__ import annotations

from npuzzle.engine.gamesolver import Solver
from npuzzle.models.board import Board


def _render_report(solver: Solver) -> str:
    if not solver.is_solvable():
        return "No solution possible\n"

    lines = [f"Minimum number of moves = {solver.moves()}"]
    for board in solver.solution() or []:
        lines.append(str(board))
    return "\n".join(lines) + "\n"


# -- public entry point -------------------------------------------------------


def run(board: Board, track_visited: bool = True) -> None:
    """Solve *board* and print the report to stdout."""
    solver = Solver(board, track_visited=track_visited)
    print(_render_report(solver), end="")
