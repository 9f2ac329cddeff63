"""Escape searches: outrunning fire and climbing out of dungeons."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Cell = tuple[int, int]

WALL = "#"

_STEPS_2D = ((0, 1), (1, 0), (0, -1), (-1, 0))
_STEPS_3D = ((0, 0, 1), (0, 1, 0), (0, 0, -1), (0, -1, 0), (1, 0, 0), (-1, 0, 0))


def _shape(rows: Sequence[str]) -> tuple[int, int]:
    if not rows or not rows[0]:
        raise ValueError("the board must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows of the board must have the same length")
    return len(rows), len(rows[0])


def _open_neighbours(board: Sequence[str], cell: Cell, rows: int, cols: int):
    r, c = cell
    for dr, dc in _STEPS_2D:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols and board[nr][nc] != WALL:
            yield nr, nc


def _flood(board: Sequence[str], sources: list[Cell], rows: int, cols: int) -> dict[Cell, int]:
    """Minute at which the fire reaches each open cell."""
    times = dict.fromkeys(sources, 0)
    queue = deque(sources)
    while queue:
        cell = queue.popleft()
        for nxt in _open_neighbours(board, cell, rows, cols):
            if nxt not in times:
                times[nxt] = times[cell] + 1
                queue.append(nxt)
    return times


def _escape(board: Sequence[str], person: str, fire: str) -> int | None:
    rows, cols = _shape(board)
    starts: list[Cell] = []
    fires: list[Cell] = []
    for r, row in enumerate(board):
        for c, ch in enumerate(row):
            if ch == person:
                starts.append((r, c))
            elif ch == fire:
                fires.append((r, c))
    if len(starts) != 1:
        raise ValueError(f"the board must hold exactly one {person!r}")
    start = starts[0]

    def on_edge(cell: Cell) -> bool:
        r, c = cell
        return r in (0, rows - 1) or c in (0, cols - 1)

    if on_edge(start):
        return 1

    burn_time = _flood(board, fires, rows, cols)
    reached = {start: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for nxt in _open_neighbours(board, cell, rows, cols):
            if nxt in reached:
                continue
            minute = reached[cell] + 1
            reached[nxt] = minute
            burn = burn_time.get(nxt)
            if burn is not None and minute >= burn:
                continue
            if on_edge(nxt):
                return minute + 1
            queue.append(nxt)
    return None


def fire_escape(board: Sequence[str]) -> int | None:
    """Minutes for J to leave the maze ahead of the fires F, or None if impossible.

    '#' cells are walls; leaving from an edge cell takes one more minute.
    """
    return _escape(board, "J", "F")


def building_fire_escape(board: Sequence[str]) -> int | None:
    """Seconds for '@' to leave the building ahead of the fires '*', or None."""
    return _escape(board, "@", "*")


def dungeon_escape(levels: Sequence[Sequence[str]]) -> int | None:
    """Minutes from S to the nearest E in a stack of levels, or None if trapped.

    Moves go one cell north, south, east, west, up or down; '#' is rock.
    """
    if not levels:
        raise ValueError("the dungeon must have at least one level")
    if len({_shape(level) for level in levels}) > 1:
        raise ValueError("all levels must have the same shape")
    cells = {
        (z, r, c): ch
        for z, level in enumerate(levels)
        for r, row in enumerate(level)
        for c, ch in enumerate(row)
    }
    starts = [cell for cell, ch in cells.items() if ch == "S"]
    if len(starts) != 1:
        raise ValueError("the dungeon must hold exactly one 'S'")

    dist = {starts[0]: 0}
    queue = deque(starts)
    while queue:
        cur = queue.popleft()
        for step in _STEPS_3D:
            nxt = tuple(a + b for a, b in zip(cur, step))
            ch = cells.get(nxt, WALL)
            if ch == WALL or nxt in dist:
                continue
            dist[nxt] = dist[cur] + 1
            if ch == "E":
                return dist[nxt]
            queue.append(nxt)
    return None