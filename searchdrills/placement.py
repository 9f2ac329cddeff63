"""Placement searches on small grids: culture media and a seven-member team."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from enum import Enum, auto
from itertools import combinations

Cell = tuple[int, int]

LAKE = 0
LAND = 1
FERTILE = 2

TEAM_SIZE = 7
MIN_SOM_MEMBERS = 4

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


class Medium(Enum):
    """What occupies a cell while the culture media spread."""

    GREEN = auto()
    RED = auto()
    FLOWER = auto()


def _shape(rows: Sequence[Sequence]) -> tuple[int, int]:
    if not rows or not rows[0]:
        raise ValueError("the board must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows of the board must have the same length")
    return len(rows), len(rows[0])


def _neighbours(cell: Cell, rows: int, cols: int):
    r, c = cell
    for dr, dc in _STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _bloom(
    board: Sequence[Sequence[int]],
    rows: int,
    cols: int,
    greens: Sequence[Cell],
    reds: Sequence[Cell],
) -> int:
    """Spread both media at once and count the flowers that appear."""
    state: dict[Cell, tuple[int, Medium]] = {}
    for cell in greens:
        state[cell] = (0, Medium.GREEN)
    for cell in reds:
        state[cell] = (0, Medium.RED)
    queue = deque(state)
    flowers = 0
    while queue:
        cur = queue.popleft()
        time, medium = state[cur]
        if medium is Medium.FLOWER:
            continue
        for nxt in _neighbours(cur, rows, cols):
            r, c = nxt
            if board[r][c] == LAKE:
                continue
            if nxt not in state:
                state[nxt] = (time + 1, medium)
                queue.append(nxt)
                continue
            other_time, other = state[nxt]
            if other is not Medium.FLOWER and other is not medium and other_time == time + 1:
                state[nxt] = (other_time, Medium.FLOWER)
                flowers += 1
    return flowers


def garden_flowers(board: Sequence[Sequence[int]], green: int, red: int) -> int:
    """Most flowers obtainable by placing green and red media on fertile cells.

    Cells hold 0 (lake), 1 (land) or 2 (land that can take a medium). Media
    spread one cell per minute over land; a flower blooms where green and red
    arrive in the same minute, and it stops spreading there.
    """
    rows, cols = _shape(board)
    candidates: list[Cell] = []
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value not in (LAKE, LAND, FERTILE):
                raise ValueError(f"invalid garden cell {value!r}; expected 0, 1 or 2")
            if value == FERTILE:
                candidates.append((r, c))
    if green < 0 or red < 0:
        raise ValueError("the numbers of media must be non-negative")
    if green + red > len(candidates):
        raise ValueError(
            f"{green + red} media do not fit on {len(candidates)} fertile cells"
        )

    best = 0
    for greens in combinations(candidates, green):
        taken = set(greens)
        rest = [cell for cell in candidates if cell not in taken]
        for reds in combinations(rest, red):
            best = max(best, _bloom(board, rows, cols, greens, reds))
    return best


def seven_princesses(board: Sequence[str]) -> int:
    """Count groups of seven adjacent students with at least four from 'S'.

    The board holds 'S' and 'Y' students; a group must be 4-connected.
    """
    rows, cols = _shape(board)
    for row in board:
        for ch in row:
            if ch not in "SY":
                raise ValueError(f"invalid student {ch!r}; expected 'S' or 'Y'")
    max_y = TEAM_SIZE - MIN_SOM_MEMBERS

    def y_count(group: frozenset[Cell]) -> int:
        return sum(board[r][c] == "Y" for r, c in group)

    level = {
        frozenset([(r, c)])
        for r in range(rows)
        for c in range(cols)
        if board[r][c] == "S" or max_y >= 1
    }
    for _ in range(TEAM_SIZE - 1):
        grown: set[frozenset[Cell]] = set()
        for group in level:
            for cell in group:
                for nxt in _neighbours(cell, rows, cols):
                    if nxt in group:
                        continue
                    bigger = group | {nxt}
                    if bigger not in grown and y_count(bigger) <= max_y:
                        grown.add(bigger)
        level = grown
    return len(level)