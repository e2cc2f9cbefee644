"""Errors raised at the boundaries of the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all npuzzle errors."""


class InvalidBoardError(PuzzleError, ValueError):
    """Tile data does not describe a valid n×n sliding puzzle."""


class InvalidArgumentError(PuzzleError, ValueError):
    """A solver was asked to work on something that is not a board."""
