"""Sliding puzzle solver.

A* search ordered by ``moves + manhattan``.  Unsolvable boards are detected
by racing a second search on the board's twin: exactly one of a board and
its twin can reach the goal, so whichever search gets there first decides
the outcome.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass

from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

NO_PREDECESSOR = -1


@dataclass(slots=True)
class SearchNode:
    """A board plus the path that reached it.

    ``previous`` is an index into the owning frontier's arena, or
    ``NO_PREDECESSOR`` for a root node.
    """

    board: Board
    moves: int
    previous: int
    manhattan: int

    @property
    def priority(self) -> int:
        return self.moves + self.manhattan


class _Frontier:
    """One side of the race: a priority queue over an arena of nodes."""

    def __init__(self, root: Board, track_visited: bool) -> None:
        self.nodes: list[SearchNode] = []
        self.expanded = 0
        self._heap: list[tuple[int, int, int]] = []
        self._counter = itertools.count()
        self._visited: set[Board] | None = set() if track_visited else None
        self._push(root, moves=0, previous=NO_PREDECESSOR)

    @property
    def exhausted(self) -> bool:
        return not self._heap

    def step(self) -> SearchNode | None:
        """Pop the best node; return it if it is the goal, else expand it."""
        if not self._heap:
            return None

        _, _, index = heapq.heappop(self._heap)
        node = self.nodes[index]
        if node.board.is_goal():
            return node

        if self._visited is not None:
            if node.board in self._visited:
                return None
            self._visited.add(node.board)

        # Never step straight back to the board we just came from.
        back = (
            self.nodes[node.previous].board
            if node.previous != NO_PREDECESSOR
            else None
        )
        for neighbor in node.board.neighbors():
            if neighbor != back:
                self._push(neighbor, moves=node.moves + 1, previous=index)
        self.expanded += 1
        return None

    def path_to(self, node: SearchNode) -> list[Board]:
        """Boards from the root to *node*, inclusive."""
        boards = [node.board]
        while node.previous != NO_PREDECESSOR:
            node = self.nodes[node.previous]
            boards.append(node.board)
        boards.reverse()
        return boards

    def _push(self, board: Board, moves: int, previous: int) -> None:
        node = SearchNode(
            board=board,
            moves=moves,
            previous=previous,
            manhattan=board.manhattan(),
        )
        self.nodes.append(node)
        heapq.heappush(
            self._heap,
            (node.priority, next(self._counter), len(self.nodes) - 1),
        )


class Solver:
    """Finds a shortest solution for a board, or proves there is none.

    The whole search runs inside the constructor; afterwards the results
    are available through :meth:`is_solvable`, :meth:`moves`,
    :meth:`solution` and :meth:`directions`.

    With ``track_visited`` each side also skips boards it has already
    expanded.  That only affects running time: the Manhattan distance is
    consistent, so the first expansion of a board is always along a
    shortest path.
    """

    def __init__(self, initial: Board, *, track_visited: bool = True) -> None:
        if initial is None:
            raise InvalidArgumentError("Solver needs an initial board, got None.")
        if not isinstance(initial, Board):
            raise InvalidArgumentError(
                f"Solver needs a Board, got {type(initial).__name__}."
            )

        self.initial = initial
        self.expanded = 0
        self._solution: list[Board] | None = None

        logger.debug(
            "Solving %d×%d board (manhattan=%d, hamming=%d)",
            initial.size,
            initial.size,
            initial.manhattan(),
            initial.hamming(),
        )
        self._solvable = self._search(track_visited)

        if self._solvable:
            logger.info(
                "Solved in %d moves after %d expansions",
                self.moves(),
                self.expanded,
            )
        else:
            logger.info(
                "Board is unsolvable (decided after %d expansions)",
                self.expanded,
            )

    # -- search ---------------------------------------------------------------

    def _search(self, track_visited: bool) -> bool:
        main = _Frontier(self.initial, track_visited)
        shadow = _Frontier(self.initial.twin(), track_visited)

        try:
            while True:
                goal = main.step()
                if goal is not None:
                    self._solution = main.path_to(goal)
                    return True
                if main.exhausted:
                    # Every board reachable from the initial one was expanded.
                    return False
                if shadow.step() is not None:
                    return False
        finally:
            self.expanded = main.expanded + shadow.expanded

    # -- results --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._solvable

    def moves(self) -> int:
        """Minimum number of slides to solve the board; -1 if unsolvable."""
        if self._solution is None:
            return -1
        return len(self._solution) - 1

    def solution(self) -> list[Board] | None:
        """Boards of a shortest solution, initial to goal inclusive."""
        if self._solution is None:
            return None
        return list(self._solution)

    def directions(self) -> list[Direction] | None:
        """Slides of a shortest solution, in order."""
        if self._solution is None:
            return None
        moves: list[Direction] = []
        for before, after in zip(self._solution, self._solution[1:]):
            direction = before.direction_to(after)
            assert direction is not None
            moves.append(direction)
        return moves

    # -- convenience ----------------------------------------------------------

    @staticmethod
    def solve(board: Board) -> list[Direction]:
        """Return a move sequence that solves *board*, or ``[]`` if unsolvable."""
        return Solver(board).directions() or []

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(board)
        return moves[0] if moves else None
