"""Walks over rectangular grids."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum


class _Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


_SEARCH_ORDER = (_Direction.UP, _Direction.DOWN, _Direction.LEFT, _Direction.RIGHT)
_MAX_TURNS = 2


def has_path_with_two_turns(grid: Sequence[str]) -> bool:
    """True if 'S' reaches 'T' avoiding '*' cells with a search bounded by two turns.

    Each search branch carries its own copy of the visited cells, and cells
    marked by earlier directions of a branch stay marked for later ones.
    """
    rows = list(grid)
    if not rows or any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid must be a non-empty rectangle")
    height, width = len(rows), len(rows[0])

    def locate(mark: str) -> tuple[int, int]:
        for r, row in enumerate(rows):
            c = row.find(mark)
            if c != -1:
                return r, c
        raise ValueError(f"grid has no {mark!r} cell")

    start = locate("S")
    target = locate("T")

    stack: list[tuple[tuple[int, int], _Direction | None, int, frozenset]] = [
        (start, None, -1, frozenset())
    ]
    while stack:
        cell, last, turns, visited = stack.pop()
        if cell == target:
            return True
        if turns > _MAX_TURNS:
            continue
        marked = set(visited)
        r, c = cell
        for direction in _SEARCH_ORDER:
            dr, dc = direction.value
            nr, nc = r + dr, c + dc
            if not (0 <= nr < height and 0 <= nc < width):
                continue
            if rows[nr][nc] == "*" or (nr, nc) in marked:
                continue
            marked.add((nr, nc))
            step_turns = turns + (direction is not last)
            stack.append(((nr, nc), direction, step_turns, frozenset(marked)))
    return False


# heading -> (direction of the straight run, direction of the turning step, next heading)
_SPIRAL = {
    _Direction.RIGHT: (_Direction.RIGHT, _Direction.DOWN, _Direction.DOWN),
    _Direction.DOWN: (_Direction.DOWN, _Direction.LEFT, _Direction.LEFT),
    _Direction.LEFT: (_Direction.LEFT, _Direction.UP, _Direction.UP),
    _Direction.UP: (_Direction.UP, _Direction.RIGHT, _Direction.UP),
}


def doll_can_walk(n: int, m: int, obstacles: Iterable[Sequence[int]]) -> bool:
    """True if a doll walking a clockwise spiral from (1, 1) covers every free cell.

    ``obstacles`` holds 1-based (row, column) cells of an ``n`` by ``m`` field.
    After an upward run the doll steps right only while its column is below
    ``n`` and then keeps heading up.
    """
    blocked: set[tuple[int, int]] = set()
    count = 0
    for row, column in obstacles:
        if not (1 <= row <= n and 1 <= column <= m):
            raise ValueError("obstacle outside the field")
        blocked.add((row - 1, column - 1))
        count += 1
    total = n * m - count
    blocked.add((0, 0))

    def free(x: int, y: int) -> bool:
        return 0 <= x < n and 0 <= y < m and (x, y) not in blocked

    x = y = 0
    seen = 1
    heading = _Direction.RIGHT
    while seen != total:
        run, turn, following = _SPIRAL[heading]
        while free(x + run.value[0], y + run.value[1]):
            x += run.value[0]
            y += run.value[1]
            blocked.add((x, y))
            seen += 1
        if seen == total:
            return True
        tx, ty = x + turn.value[0], y + turn.value[1]
        if heading is _Direction.UP and ty >= n:
            return False
        if not free(tx, ty):
            return False
        x, y = tx, ty
        blocked.add((x, y))
        seen += 1
        heading = following
    return True