"""Shared fixtures: JSON boards and an independent breadth-first oracle."""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


def load_fixture(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def flatten(tiles) -> tuple[int, ...]:
    return tuple(v for row in tiles for v in row)


def bfs_distances(size: int) -> dict[tuple[int, ...], int]:
    """Slide distance from the goal to every reachable flat state.

    Works on plain tuples so it shares no code with ``Board``.
    """
    goal = tuple(range(1, size * size)) + (0,)
    dist = {goal: 0}
    queue = deque([goal])
    while queue:
        state = queue.popleft()
        z = state.index(0)
        r, c = divmod(z, size)
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < size and 0 <= nc < size:
                j = nr * size + nc
                nxt = list(state)
                nxt[z], nxt[j] = nxt[j], nxt[z]
                key = tuple(nxt)
                if key not in dist:
                    dist[key] = dist[state] + 1
                    queue.append(key)
    return dist


@pytest.fixture(scope="session")
def distances_2x2() -> dict[tuple[int, ...], int]:
    return bfs_distances(2)


@pytest.fixture(scope="session")
def distances_3x3() -> dict[tuple[int, ...], int]:
    return bfs_distances(3)
