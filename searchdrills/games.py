"""Small game simulations: falling puyos, 2048 and trucks on a bridge."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import chain

EMPTY = "."
POP_SIZE = 4
GAME_2048_MOVES = 5

Board = tuple[tuple[int, ...], ...]

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _drop(grid: list[list[str]]) -> None:
    """Let every puyo fall to the bottom of its column."""
    rows = len(grid)
    for c in range(len(grid[0])):
        pieces = [grid[r][c] for r in range(rows) if grid[r][c] != EMPTY]
        column = [EMPTY] * (rows - len(pieces)) + pieces
        for r, ch in enumerate(column):
            grid[r][c] = ch


def _groups(grid: list[list[str]]):
    """Yield every 4-connected group of same-coloured puyos."""
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    for r in range(rows):
        for c in range(cols):
            colour = grid[r][c]
            if colour == EMPTY or (r, c) in seen:
                continue
            seen.add((r, c))
            queue = deque([(r, c)])
            group = []
            while queue:
                cr, cc = queue.popleft()
                group.append((cr, cc))
                for dr, dc in _STEPS:
                    nr, nc = cr + dr, cc + dc
                    if not (0 <= nr < rows and 0 <= nc < cols):
                        continue
                    if (nr, nc) in seen or grid[nr][nc] != colour:
                        continue
                    seen.add((nr, nc))
                    queue.append((nr, nc))
            yield group


def puyo_chains(board: Sequence[str]) -> int:
    """Number of chain rounds in which some group of four or more pops.

    Rows are given top to bottom; '.' is empty and any other letter a colour.
    """
    if not board or not board[0]:
        raise ValueError("the board must not be empty")
    if any(len(row) != len(board[0]) for row in board):
        raise ValueError("all rows of the board must have the same length")
    grid = [list(row) for row in board]
    chains = 0
    while True:
        _drop(grid)
        popping = [g for g in _groups(grid) if len(g) >= POP_SIZE]
        if not popping:
            return chains
        for r, c in chain.from_iterable(popping):
            grid[r][c] = EMPTY
        chains += 1


def _slide_row(row: Iterable[int]) -> tuple[int, ...]:
    """Slide a row to the left, merging each equal pair once."""
    tiles = [v for v in row if v]
    out: list[int] = []
    just_merged = False
    for value in tiles:
        if out and out[-1] == value and not just_merged:
            out[-1] *= 2
            just_merged = True
        else:
            out.append(value)
            just_merged = False
    size = len(tiles) + (len(list(row)) if False else 0)
    return tuple(out)


def _slide_left(board: Board) -> Board:
    width = len(board)
    return tuple(
        merged + (0,) * (width - len(merged))
        for merged in (_slide_row(row) for row in board)
    )


def _transpose(board: Board) -> Board:
    return tuple(zip(*board))


def _mirror(board: Board) -> Board:
    return tuple(row[::-1] for row in board)


def _moves(board: Board) -> Iterable[Board]:
    yield _slide_left(board)
    yield _mirror(_slide_left(_mirror(board)))
    turned = _transpose(board)
    yield _transpose(_slide_left(turned))
    yield _transpose(_mirror(_slide_left(_mirror(turned))))


def game_2048_max(board: Sequence[Sequence[int]]) -> int:
    """Largest tile reachable on a square 2048 board within five moves."""
    n = len(board)
    if n == 0 or any(len(row) != n for row in board):
        raise ValueError("the board must be a non-empty square")
    frontier = {tuple(tuple(row) for row in board)}
    for _ in range(GAME_2048_MOVES):
        frontier = {after for state in frontier for after in _moves(state)}
    return max(value for state in frontier for row in state for value in row)


def truck_crossing_time(bridge_length: int, max_load: int, trucks: Sequence[int]) -> int:
    """Time until every truck, in order, has crossed the bridge.

    A truck needs bridge_length units of time to cross, and the trucks on the
    bridge may weigh max_load in total.
    """
    if bridge_length < 1:
        raise ValueError("the bridge must be at least one unit long")
    if not trucks:
        raise ValueError("there must be at least one truck")
    if any(weight > max_load for weight in trucks):
        raise ValueError("a truck is heavier than the bridge can hold")
    waiting = deque(trucks)
    on_bridge: deque[list[int]] = deque()
    time = 0
    while waiting:
        for truck in on_bridge:
            truck[1] += 1
        while on_bridge and on_bridge[0][1] >= bridge_length:
            on_bridge.popleft()
        load = sum(weight for weight, _ in on_bridge)
        if waiting[0] <= max_load - load:
            on_bridge.append([waiting.popleft(), 0])
        time += 1
    return time + bridge_length