"""Sliding puzzle solver command line.

Usage::

    npuzzle puzzle04.txt            # solve a puzzle file, plain output
    npuzzle -f rich puzzle04.txt    # Rich terminal output
    npuzzle < puzzle04.txt          # read the puzzle from stdin
    npuzzle -r -s 3 --seed 7        # solve a random 3×3 board
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gameloader import BoardLoader
from npuzzle.models.board import Board
from npuzzle.models.errors import PuzzleError

logger = logging.getLogger("npuzzle")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _read_board(
    path: Optional[Path],
    random_board: bool,
    size: int,
    shuffles: Optional[int],
    seed: Optional[int],
) -> Board:
    if random_board:
        board = GameGenerator.generate(size, shuffles=shuffles, seed=seed)
        logger.debug("Generated board:\n%s", board)
        return board
    if path is None:
        return BoardLoader.parse(sys.stdin.read())
    return BoardLoader.load(path)


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="Puzzle file: n followed by n*n tiles. Omit to read stdin.",
        dir_okay=False,
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the solution.",
    ),
    random_board: bool = typer.Option(
        False, "-r", "--random",
        help="Solve a randomly scrambled board instead of reading one.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=8,
        help="Grid size for --random (2-8).",
    ),
    shuffles: Optional[int] = typer.Option(
        None, "--shuffles",
        min=0,
        help="Random slides applied by --random (default size*size*100).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --random.",
    ),
    track_visited: bool = typer.Option(
        True, "--track-visited/--no-track-visited",
        help="Skip boards already expanded by the search.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Find a shortest solution for a sliding puzzle."""
    _configure_logging(verbose)

    try:
        board = _read_board(path, random_board, size, shuffles, seed)
    except PuzzleError as exc:
        _fail(str(exc))
    except OSError as exc:
        _fail(f"cannot read {path}: {exc.strerror or exc}")

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(board, track_visited=track_visited)


if __name__ == "__main__":
    app()
