"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from npuzzle.models.board import Board


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        flat = list(range(1, size * size)) + [0]
        return Board.from_flat(size, flat)

    @staticmethod
    def scramble(board: Board, shuffles: int, rng: random.Random) -> Board:
        """Return *board* after *shuffles* random slides.

        A slide never immediately undoes the previous one unless it is the
        only move available.
        """
        previous: Board | None = None
        for _ in range(shuffles):
            neighbors = board.neighbors()
            if previous in neighbors and len(neighbors) > 1:
                neighbors.remove(previous)
            previous, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int, shuffles: int | None = None, seed: int | None = None
    ) -> Board:
        """Return a random *solvable* board of the given size."""
        if shuffles is None:
            shuffles = size * size * 100
        rng = random.Random(seed)
        board = GameGenerator.scramble(GameGenerator.solved(size), shuffles, rng)

        # Ensure the board is not already solved
        if shuffles > 0 and board.is_goal():
            board = rng.choice(board.neighbors())
        return board
