"""Reads puzzles from the whitespace-delimited text format.

The first token is the dimension ``n``; it is followed by ``n * n``
integers giving the tiles in row-major order, e.g.::

    3
     0  1  3
     4  2  5
     7  8  6
"""

from __future__ import annotations

from pathlib import Path

from npuzzle.models.board import Board
from npuzzle.models.errors import InvalidBoardError


class BoardLoader:
    """Stateless loader — all methods are static."""

    @staticmethod
    def parse(text: str) -> Board:
        tokens = text.split()
        if not tokens:
            raise InvalidBoardError("Puzzle input is empty.")

        try:
            values = [int(tok) for tok in tokens]
        except ValueError as exc:
            raise InvalidBoardError(f"Puzzle input is not numeric: {exc}") from exc

        size, flat = values[0], values[1:]
        if size < 2:
            raise InvalidBoardError(f"Board dimension must be at least 2, got {size}.")
        return Board.from_flat(size, flat)

    @staticmethod
    def load(path: Path) -> Board:
        return BoardLoader.parse(Path(path).read_text(encoding="utf-8"))
