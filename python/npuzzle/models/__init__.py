from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import InvalidArgumentError, InvalidBoardError, PuzzleError

__all__ = [
    "Board",
    "Direction",
    "InvalidArgumentError",
    "InvalidBoardError",
    "PuzzleError",
]
