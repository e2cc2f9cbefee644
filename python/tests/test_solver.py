"""Solver test suite — verdicts and move counts against a BFS oracle.

Boards are JSON fixtures under ``<project_root>/fixtures/``.  Every test
is hard-killed by ``pytest-timeout`` (configured in ``pyproject.toml``).
When the solver reports a solution, the boards are replayed slide by slide
to check it really is a path to the goal.
"""

from __future__ import annotations

import itertools

import pytest
from conftest import flatten, load_fixture

from npuzzle.engine.gamesolver import SearchNode, Solver
from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import InvalidArgumentError

_BOARDS_3x3 = load_fixture("3x3.json")

# Boards shallow enough to solve without the visited set.
_SHALLOW = {
    "solved",
    "blank-left-2",
    "blank-up-2",
    "puzzle04",
    "walk-8",
    "unsolvable-top-pair",
    "unsolvable-blank-corner",
}


def _ids(board_data: dict) -> str:
    return board_data["id"]


# -- helpers ------------------------------------------------------------------


def _board_from_data(data: dict) -> Board:
    """Reconstruct a ``Board`` from its JSON representation."""
    board = Board(data["tiles"])
    assert board.size == data["size"]
    return board


def _assert_solution(board: Board, solver: Solver) -> None:
    """Check the solution is a chain of legal slides from *board* to goal."""
    boards = solver.solution()
    directions = solver.directions()

    assert isinstance(boards, list)
    assert isinstance(directions, list)
    assert boards[0] == board
    assert boards[-1].is_goal()
    assert len(boards) - 1 == solver.moves()
    assert len(directions) == solver.moves()

    current = board
    for i, direction in enumerate(directions):
        assert isinstance(direction, Direction)
        current = current.slide(direction)
        assert current is not None, f"Move {i} ({direction.value}) was invalid"
        assert current == boards[i + 1]
        assert current in boards[i].neighbors()


def _assert_matches_oracle(board: Board, distances: dict, **kwargs) -> Solver:
    solver = Solver(board, **kwargs)
    expected = distances.get(flatten(board.tiles))

    if expected is None:
        assert not solver.is_solvable()
        assert solver.moves() == -1
        assert solver.solution() is None
        assert solver.directions() is None
    else:
        assert solver.is_solvable()
        assert solver.moves() == expected
        _assert_solution(board, solver)
    return solver


# -- concrete scenarios -------------------------------------------------------


def test_already_solved() -> None:
    board = Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    solver = Solver(board)
    assert solver.is_solvable()
    assert solver.moves() == 0
    assert solver.solution() == [board]
    assert solver.directions() == []


def test_goal_with_last_pair_swapped_is_unsolvable() -> None:
    solver = Solver(Board([[1, 2, 3], [4, 5, 6], [8, 7, 0]]))
    assert not solver.is_solvable()
    assert solver.moves() == -1
    assert solver.solution() is None


def test_puzzle04(distances_3x3: dict) -> None:
    board = Board([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    solver = _assert_matches_oracle(board, distances_3x3)
    assert solver.moves() == 4
    assert solver.directions() == [
        Direction.LEFT,
        Direction.UP,
        Direction.LEFT,
        Direction.UP,
    ]


def test_4x4_short_scramble() -> None:
    board = Board(
        [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 12, 0], [13, 14, 11, 15]]
    )
    solver = Solver(board)
    assert solver.moves() == 3
    _assert_solution(board, solver)


def test_4x4_unsolvable() -> None:
    # Twin of the short scramble above.
    board = Board(
        [[2, 1, 3, 4], [5, 6, 7, 8], [9, 10, 12, 0], [13, 14, 11, 15]]
    )
    assert not Solver(board).is_solvable()


# -- fixtures -----------------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS_3x3, ids=_ids)
def test_solve_3x3(board_data: dict, distances_3x3: dict) -> None:
    _assert_matches_oracle(_board_from_data(board_data), distances_3x3)


@pytest.mark.parametrize(
    "board_data",
    [b for b in _BOARDS_3x3 if b["id"] in _SHALLOW],
    ids=_ids,
)
def test_solve_3x3_lookback_only(board_data: dict, distances_3x3: dict) -> None:
    _assert_matches_oracle(
        _board_from_data(board_data), distances_3x3, track_visited=False
    )


@pytest.mark.parametrize("seed", range(5))
def test_solve_random_3x3(seed: int, distances_3x3: dict) -> None:
    board = GameGenerator.generate(3, shuffles=20, seed=seed)
    _assert_matches_oracle(board, distances_3x3)


# -- exhaustive 2×2 -----------------------------------------------------------


_ALL_2x2 = [Board.from_flat(2, p) for p in itertools.permutations(range(4))]


@pytest.mark.parametrize("track_visited", [True, False])
def test_every_2x2_board(track_visited: bool, distances_2x2: dict) -> None:
    for board in _ALL_2x2:
        _assert_matches_oracle(board, distances_2x2, track_visited=track_visited)


def test_exactly_one_of_board_and_twin_is_solvable(
    distances_2x2: dict, distances_3x3: dict
) -> None:
    boards = _ALL_2x2 + [_board_from_data(b) for b in _BOARDS_3x3]
    for board in boards:
        distances = distances_2x2 if board.size == 2 else distances_3x3
        solvable = flatten(board.tiles) in distances
        twin_solvable = flatten(board.twin().tiles) in distances
        assert solvable != twin_solvable
        assert Solver(board).is_solvable() == solvable


# -- bookkeeping --------------------------------------------------------------


def test_solution_is_a_copy() -> None:
    solver = Solver(Board([[1, 2, 3], [4, 5, 6], [7, 0, 8]]))
    solver.solution().clear()
    assert len(solver.solution()) == 2


def test_expanded_is_counted() -> None:
    assert Solver(Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]])).expanded == 0
    assert Solver(Board([[0, 1, 3], [4, 2, 5], [7, 8, 6]])).expanded > 0


def test_search_node_priority() -> None:
    board = Board([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    node = SearchNode(board=board, moves=3, previous=-1, manhattan=board.manhattan())
    assert node.priority == 7


# -- static helpers -----------------------------------------------------------


def test_solve_returns_directions() -> None:
    board = Board([[1, 2, 3], [4, 5, 6], [0, 7, 8]])
    assert Solver.solve(board) == [Direction.LEFT, Direction.LEFT]
    assert Solver.hint(board) is Direction.LEFT


def test_solve_and_hint_on_terminal_boards() -> None:
    solved = Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    unsolvable = Board([[2, 1, 3], [4, 5, 6], [0, 7, 8]])
    assert Solver.solve(solved) == []
    assert Solver.hint(solved) is None
    assert Solver.solve(unsolvable) == []
    assert Solver.hint(unsolvable) is None


# -- argument errors ----------------------------------------------------------


@pytest.mark.parametrize(
    "initial",
    [None, [[1, 2], [3, 0]], "1 2 3 0"],
    ids=["none", "list", "string"],
)
def test_rejects_non_board(initial) -> None:
    with pytest.raises(InvalidArgumentError):
        Solver(initial)
