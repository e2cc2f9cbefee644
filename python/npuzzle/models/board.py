"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.models.errors import InvalidBoardError


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# The offset points to the tile that slides into the blank.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of an n×n sliding puzzle.

    ``tiles`` may be any sequence of row sequences; it is copied into a
    tuple of tuples on construction.  0 represents the blank.  The goal
    places tile ``v`` at row-major position ``v - 1`` with the blank last.
    """

    tiles: tuple[tuple[int, ...], ...]
    size: int = field(init=False)
    blank_pos: tuple[int, int] = field(init=False, compare=False)

    def __post_init__(self) -> None:
        tiles = _copy_tiles(self.tiles)
        size = len(tiles)
        if size < 2:
            raise InvalidBoardError(
                f"A board needs at least 2 rows, got {size}."
            )
        for r, row in enumerate(tiles):
            if len(row) != size:
                raise InvalidBoardError(
                    f"Row {r} has {len(row)} tiles, expected {size} "
                    f"for a {size}×{size} board."
                )
            for v in row:
                if not isinstance(v, int) or isinstance(v, bool):
                    raise InvalidBoardError(f"Tile {v!r} is not an integer.")

        flat = [v for row in tiles for v in row]
        if sorted(flat) != list(range(size * size)):
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )

        blank = flat.index(0)
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "blank_pos", divmod(blank, size))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls([flat[r * size : (r + 1) * size] for r in range(size)])

    @classmethod
    def _trusted(
        cls, rows: list[list[int]], blank_pos: tuple[int, int]
    ) -> Board:
        """Wrap rows already known to be valid, skipping validation."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "tiles", tuple(tuple(row) for row in rows))
        object.__setattr__(obj, "size", len(rows))
        object.__setattr__(obj, "blank_pos", blank_pos)
        return obj

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def hamming(self) -> int:
        """Number of tiles out of their goal position."""
        n = self.size
        return sum(
            1
            for i in range(n * n - 1)
            if self.tiles[i // n][i % n] != i + 1
        )

    def manhattan(self) -> int:
        """Sum of grid distances from every tile to its goal cell."""
        n = self.size
        dist = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                goal_row, goal_col = divmod(val - 1, n)
                dist += abs(r - goal_row) + abs(c - goal_col)
        return dist

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return True
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    # -- transformations ------------------------------------------------------

    def slide(self, direction: Direction) -> Board | None:
        """Slide the tile next to the blank in *direction*.

        Returns the resulting board, or ``None`` when no tile sits on that
        side of the blank.
        """
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None

        return self._swapped((br, bc), (tr, tc), blank_pos=(tr, tc))

    def neighbors(self) -> list[Board]:
        """All boards reachable with a single slide."""
        boards: list[Board] = []
        for direction in Direction:
            board = self.slide(direction)
            if board is not None:
                boards.append(board)
        return boards

    def direction_to(self, other: Board) -> Direction | None:
        """Return the slide that turns this board into *other*, if any."""
        if other.size != self.size:
            return None
        br, bc = self.blank_pos
        for direction, (dr, dc) in _OFFSETS.items():
            if (br + dr, bc + dc) == other.blank_pos:
                return direction if self.slide(direction) == other else None
        return None

    def twin(self) -> Board:
        """A board obtained by exchanging two non-blank tiles.

        Swaps (0, 0) and (0, 1) unless one of them is the blank, in which
        case (1, 0) and (1, 1) are swapped instead.
        """
        if self.tiles[0][0] != 0 and self.tiles[0][1] != 0:
            a, b = (0, 0), (0, 1)
        else:
            a, b = (1, 0), (1, 1)
        return self._swapped(a, b, blank_pos=self.blank_pos)

    # -- helpers --------------------------------------------------------------

    def _swapped(
        self,
        a: tuple[int, int],
        b: tuple[int, int],
        blank_pos: tuple[int, int],
    ) -> Board:
        rows = [list(row) for row in self.tiles]
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        return Board._trusted(rows, blank_pos)

    def __str__(self) -> str:
        width = max(2, len(str(self.size * self.size - 1)))
        lines = [str(self.size)]
        for row in self.tiles:
            lines.append("".join(f"{val:>{width}} " for val in row))
        return "\n".join(lines) + "\n"


def _copy_tiles(tiles: object) -> tuple[tuple[int, ...], ...]:
    if isinstance(tiles, (str, bytes)) or not isinstance(tiles, Sequence):
        raise InvalidBoardError(
            f"Tiles must be a sequence of rows, got {type(tiles).__name__}."
        )
    rows: list[tuple[int, ...]] = []
    for row in tiles:
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise InvalidBoardError(
                f"Each row must be a sequence of tiles, got {type(row).__name__}."
            )
        rows.append(tuple(row))
    return tuple(rows)
