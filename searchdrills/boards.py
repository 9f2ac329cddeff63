"""Board simulations: tetrominoes, lab walls, a cleaning robot, CCTV, stickers, snake."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from itertools import combinations, product

Cell = tuple[int, int]
Shape = frozenset[Cell]

NORTH, EAST, SOUTH, WEST = range(4)

# Indexed by NORTH, EAST, SOUTH, WEST.
_COMPASS = ((-1, 0), (0, 1), (1, 0), (0, -1))

# Camera directions in turning order: south, east, north, west.
_CCTV_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))
CAMERA_VIEWS = {
    1: (0,),
    2: (0, 2),
    3: (0, 1),
    4: (0, 1, 2),
    5: (0, 1, 2, 3),
}
CCTV_WALL = 6

LAB_EMPTY, LAB_WALL, LAB_VIRUS = 0, 1, 2
NEW_WALLS = 3

ROOM_DIRTY, ROOM_WALL = 0, 1

_FREE_TETROMINOES = (
    ((0, 0), (0, 1), (0, 2), (0, 3)),
    ((0, 0), (0, 1), (1, 0), (1, 1)),
    ((0, 0), (1, 0), (2, 0), (2, 1)),
    ((0, 0), (0, 1), (1, 1), (1, 2)),
    ((0, 0), (0, 1), (0, 2), (1, 1)),
)


def _normalise(cells: Iterable[Cell]) -> Shape:
    cells = list(cells)
    top = min(r for r, _ in cells)
    left = min(c for _, c in cells)
    return frozenset((r - top, c - left) for r, c in cells)


def _orientations(cells: Sequence[Cell]) -> set[Shape]:
    """Every rotation and reflection of a shape, normalised to the origin."""
    shapes: set[Shape] = set()
    current = tuple(cells)
    for _ in range(4):
        current = tuple((c, -r) for r, c in current)
        shapes.add(_normalise(current))
        shapes.add(_normalise((r, -c) for r, c in current))
    return shapes


TETROMINOES: frozenset[Shape] = frozenset(
    shape for base in _FREE_TETROMINOES for shape in _orientations(base)
)


def _shape(rows: Sequence[Sequence]) -> tuple[int, int]:
    if not rows or not rows[0]:
        raise ValueError("the board must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows of the board must have the same length")
    return len(rows), len(rows[0])


def _check_values(board: Sequence[Sequence[int]], allowed: Iterable[int]) -> None:
    allowed = set(allowed)
    for row in board:
        for value in row:
            if value not in allowed:
                raise ValueError(f"invalid cell {value!r}; expected one of {sorted(allowed)}")


def _neighbours(cell: Cell, rows: int, cols: int) -> Iterator[Cell]:
    r, c = cell
    for dr, dc in _COMPASS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def tetromino_max(board: Sequence[Sequence[int]]) -> int:
    """Largest sum of the cells covered by one tetromino placed on the board."""
    rows, cols = _shape(board)
    best = 0
    for shape in TETROMINOES:
        height = max(r for r, _ in shape) + 1
        width = max(c for _, c in shape) + 1
        for top in range(rows - height + 1):
            for left in range(cols - width + 1):
                best = max(best, sum(board[top + r][left + c] for r, c in shape))
    return best


def laboratory_safe_area(board: Sequence[Sequence[int]]) -> int:
    """Largest safe area left after building three walls before the virus spreads.

    Cells hold 0 (empty), 1 (wall) or 2 (virus).
    """
    rows, cols = _shape(board)
    _check_values(board, (LAB_EMPTY, LAB_WALL, LAB_VIRUS))
    empty = [(r, c) for r in range(rows) for c in range(cols) if board[r][c] == LAB_EMPTY]
    viruses = [(r, c) for r in range(rows) for c in range(cols) if board[r][c] == LAB_VIRUS]
    if len(empty) < NEW_WALLS:
        raise ValueError(f"need at least {NEW_WALLS} empty cells for the walls")

    best = 0
    for walls in combinations(empty, NEW_WALLS):
        blocked = set(walls)
        infected = set(viruses)
        queue = deque(viruses)
        while queue:
            cur = queue.popleft()
            for nxt in _neighbours(cur, rows, cols):
                r, c = nxt
                if board[r][c] != LAB_EMPTY or nxt in blocked or nxt in infected:
                    continue
                infected.add(nxt)
                queue.append(nxt)
        best = max(best, len(empty) - NEW_WALLS - (len(infected) - len(viruses)))
    return best


def robot_cleaner(
    board: Sequence[Sequence[int]], row: int, col: int, direction: int
) -> int:
    """Number of cells a robot cleans before it must stop.

    Cells hold 0 (dirty) or 1 (wall); direction is 0 north, 1 east, 2 south, 3 west.
    """
    rows, cols = _shape(board)
    _check_values(board, (ROOM_DIRTY, ROOM_WALL))
    if direction not in range(4):
        raise ValueError(f"direction must be 0..3, got {direction}")
    if not (0 <= row < rows and 0 <= col < cols):
        raise ValueError(f"start ({row}, {col}) lies outside the room")
    if board[row][col] == ROOM_WALL:
        raise ValueError("the robot cannot start on a wall")

    cleaned = {(row, col)}

    def dirty(cell: Cell) -> bool:
        r, c = cell
        return (
            0 <= r < rows
            and 0 <= c < cols
            and board[r][c] == ROOM_DIRTY
            and cell not in cleaned
        )

    r, c, d = row, col, direction
    while True:
        if any(dirty(cell) for cell in _neighbours((r, c), rows, cols)):
            while True:
                d = (d + 3) % 4
                dr, dc = _COMPASS[d]
                if dirty((r + dr, c + dc)):
                    break
            r, c = r + dr, c + dc
            cleaned.add((r, c))
            continue
        dr, dc = _COMPASS[d]
        br, bc = r - dr, c - dc
        if not (0 <= br < rows and 0 <= bc < cols) or board[br][bc] == ROOM_WALL:
            return len(cleaned)
        r, c = br, bc
        cleaned.add((r, c))


def _sight(
    board: Sequence[Sequence[int]], cell: Cell, direction: int, rows: int, cols: int
) -> Iterator[Cell]:
    dr, dc = _CCTV_STEPS[direction % 4]
    r, c = cell
    while True:
        r, c = r + dr, c + dc
        if not (0 <= r < rows and 0 <= c < cols) or board[r][c] == CCTV_WALL:
            return
        yield r, c


def cctv_blind_spots(board: Sequence[Sequence[int]]) -> int:
    """Smallest number of unwatched empty cells over all camera turns.

    Cells hold 0 (empty), 1..5 (camera types) or 6 (wall); cameras see through
    other cameras but not through walls.
    """
    rows, cols = _shape(board)
    _check_values(board, range(CCTV_WALL + 1))
    empty = {(r, c) for r in range(rows) for c in range(cols) if board[r][c] == 0}

    options: list[list[frozenset[Cell]]] = []
    for r in range(rows):
        for c in range(cols):
            kind = board[r][c]
            if kind not in CAMERA_VIEWS:
                continue
            views = {
                frozenset(
                    cell
                    for offset in CAMERA_VIEWS[kind]
                    for cell in _sight(board, (r, c), turn + offset, rows, cols)
                )
                for turn in range(4)
            }
            options.append(list(views))

    best = len(empty)
    for choice in product(*options):
        watched = set().union(*choice)
        best = min(best, len(empty - watched))
    return best


def _rotate(sticker: tuple[tuple[int, ...], ...]) -> tuple[tuple[int, ...], ...]:
    """Turn a sticker 90 degrees clockwise."""
    return tuple(zip(*reversed(sticker)))


def stickers_coverage(
    rows: int, cols: int, stickers: Iterable[Sequence[Sequence[int]]]
) -> int:
    """Cells covered after sticking each sticker at its first free spot.

    Each sticker is tried at every spot in row-major order, then turned
    clockwise and tried again, up to four orientations; if none fits it is
    thrown away.
    """
    if rows < 1 or cols < 1:
        raise ValueError("the notebook must have at least one row and one column")
    covered: set[Cell] = set()
    for sticker in stickers:
        _shape(sticker)
        _check_values(sticker, (0, 1))
        shape = tuple(tuple(row) for row in sticker)
        for _ in range(4):
            height, width = len(shape), len(shape[0])
            cells = [
                (r, c) for r, line in enumerate(shape) for c, v in enumerate(line) if v == 1
            ]
            spot = next(
                (
                    (x, y)
                    for x in range(rows - height + 1)
                    for y in range(cols - width + 1)
                    if not any((x + r, y + c) in covered for r, c in cells)
                ),
                None,
            )
            if spot is not None:
                x, y = spot
                covered.update((x + r, y + c) for r, c in cells)
                break
            shape = _rotate(shape)
    return len(covered)


def snake_game(
    size: int, apples: Iterable[tuple[int, int]], turns: Iterable[tuple[int, str]]
) -> int:
    """Second at which the snake hits a wall or itself.

    The snake starts at (1, 1) heading east on a size x size board (1-based).
    Each turn (t, 'L' or 'D') turns it left or right after second t.
    """
    if size < 1:
        raise ValueError("the board must be at least 1 x 1")
    food: set[Cell] = set()
    for r, c in apples:
        if not (1 <= r <= size and 1 <= c <= size):
            raise ValueError(f"apple at ({r}, {c}) lies outside the board")
        food.add((r, c))
    pending: deque[tuple[int, str]] = deque()
    for time, side in turns:
        if side not in ("L", "D"):
            raise ValueError(f"invalid turn {side!r}; expected 'L' or 'D'")
        pending.append((time, side))

    body: deque[Cell] = deque([(1, 1)])
    occupied = {(1, 1)}
    heading = EAST
    seconds = 0
    while True:
        head = body[0]
        food.discard(head)
        seconds += 1
        dr, dc = _COMPASS[heading]
        nxt = (head[0] + dr, head[1] + dc)
        if not (1 <= nxt[0] <= size and 1 <= nxt[1] <= size) or nxt in occupied:
            return seconds
        if nxt not in food:
            occupied.discard(body.pop())
        if pending and pending[0][0] == seconds:
            _, side = pending.popleft()
            heading = (heading + (3 if side == "L" else 1)) % 4
        body.appendleft(nxt)
        occupied.add(nxt)