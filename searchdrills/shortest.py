"""Shortest-path searches by breadth-first search."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar

Node = TypeVar("Node", bound=Hashable)

_STEPS_2D = ((0, 1), (1, 0), (0, -1), (-1, 0))
_STEPS_3D = ((0, 0, 1), (0, 1, 0), (0, 0, -1), (0, -1, 0), (1, 0, 0), (-1, 0, 0))
_KNIGHT_STEPS = ((1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2))

SEEK_LIMIT = 100_000


def _bfs(
    starts: Iterable[Node],
    neighbours: Callable[[Node], Iterable[Node]],
    goal: Node | None = None,
) -> dict[Node, int]:
    """Return step counts from the nearest start; stop early once goal is reached."""
    dist = dict.fromkeys(starts, 0)
    queue = deque(dist)
    while queue and (goal is None or goal not in dist):
        cur = queue.popleft()
        for nxt in neighbours(cur):
            if nxt not in dist:
                dist[nxt] = dist[cur] + 1
                queue.append(nxt)
    return dist


def _check_rows(rows: Sequence[Sequence]) -> tuple[int, int]:
    if not rows or not rows[0]:
        raise ValueError("the grid must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows of the grid must have the same length")
    return len(rows), len(rows[0])


def maze_distance(board: Sequence[str]) -> int | None:
    """Cells passed from the top-left to the bottom-right corner, both counted.

    '0' cells are walls. Returns None when the corner cannot be reached.
    """
    rows, cols = _check_rows(board)

    def neighbours(cell: tuple[int, int]):
        r, c = cell
        for dr, dc in _STEPS_2D:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and board[nr][nc] != "0":
                yield nr, nc

    target = (rows - 1, cols - 1)
    dist = _bfs([(0, 0)], neighbours, target)
    return dist[target] + 1 if target in dist else None


def _ripening_days(cells: dict[tuple[int, ...], int], steps) -> int:
    for value in cells.values():
        if value not in (-1, 0, 1):
            raise ValueError(f"invalid tomato cell {value!r}; expected -1, 0 or 1")

    def neighbours(cell):
        for step in steps:
            nxt = tuple(a + b for a, b in zip(cell, step))
            if cells.get(nxt) == 0:
                yield nxt

    dist = _bfs([cell for cell, value in cells.items() if value == 1], neighbours)
    if any(value == 0 and cell not in dist for cell, value in cells.items()):
        return -1
    return max(dist.values(), default=0)


def tomato_days(grid: Sequence[Sequence[int]]) -> int:
    """Days until every tomato ripens, or -1 if some never can.

    Cells hold 1 (ripe), 0 (unripe) or -1 (empty).
    """
    _check_rows(grid)
    cells = {(r, c): v for r, row in enumerate(grid) for c, v in enumerate(row)}
    return _ripening_days(cells, _STEPS_2D)


def tomato_days_3d(boxes: Sequence[Sequence[Sequence[int]]]) -> int:
    """Like tomato_days, for a stack of boxes where ripening also spreads up and down."""
    if not boxes:
        raise ValueError("the stack must not be empty")
    shapes = {_check_rows(layer) for layer in boxes}
    if len(shapes) > 1:
        raise ValueError("all boxes must have the same shape")
    cells = {
        (h, r, c): v
        for h, layer in enumerate(boxes)
        for r, row in enumerate(layer)
        for c, v in enumerate(row)
    }
    return _ripening_days(cells, _STEPS_3D)


def hide_and_seek(start: int, target: int) -> int:
    """Fewest seconds to walk (x-1, x+1) or teleport (2x) from start to target."""
    for position in (start, target):
        if not 0 <= position <= SEEK_LIMIT:
            raise ValueError(f"position {position} outside 0..{SEEK_LIMIT}")

    def neighbours(cur: int):
        return (n for n in (cur - 1, cur + 1, 2 * cur) if 0 <= n <= SEEK_LIMIT)

    return _bfs([start], neighbours, target)[target]


def elevator_presses(
    floors: int, start: int, goal: int, up: int, down: int
) -> int | None:
    """Fewest button presses to reach goal; None means the stairs must be used."""

    def neighbours(cur: int):
        return (n for n in (cur + up, cur - down) if 1 <= n <= floors)

    return _bfs([start], neighbours, goal).get(goal)


def knight_moves(
    size: int, start: tuple[int, int], target: tuple[int, int]
) -> int:
    """Fewest knight moves between two squares of a size x size board."""
    for square in (start, target):
        if not all(0 <= coord < size for coord in square):
            raise ValueError(f"square {square} is not on a {size}x{size} board")
    start, target = tuple(start), tuple(target)

    def neighbours(cell: tuple[int, int]):
        x, y = cell
        for dx, dy in _KNIGHT_STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size:
                yield nx, ny

    dist = _bfs([start], neighbours, target)
    if target not in dist:
        raise ValueError(f"a knight cannot reach {target} from {start}")
    return dist[target]