"""Counting connected regions on rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence

Cell = tuple[int, int]

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _width(rows: Sequence[Sequence]) -> int:
    """Return the common row length, raising ValueError for ragged grids."""
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise ValueError("all rows of the grid must have the same length")
    return widths.pop() if widths else 0


def _cells(rows: Sequence[Sequence]) -> Iterator[tuple[Cell, object]]:
    _width(rows)
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            yield (r, c), value


def _regions(labels: Mapping[Cell, Hashable]) -> Iterator[list[Cell]]:
    """Yield each 4-connected region of cells that share the same label."""
    seen: set[Cell] = set()
    for start, label in labels.items():
        if start in seen:
            continue
        seen.add(start)
        queue = deque([start])
        region: list[Cell] = []
        while queue:
            cell = queue.popleft()
            region.append(cell)
            r, c = cell
            for dr, dc in _STEPS:
                nxt = (r + dr, c + dc)
                if nxt in seen or labels.get(nxt, _MISSING) != label:
                    continue
                seen.add(nxt)
                queue.append(nxt)
        yield region


_MISSING = object()


def _region_sizes(labels: Mapping[Cell, Hashable]) -> list[int]:
    return [len(region) for region in _regions(labels)]


def _filled(cells: Iterable[Cell]) -> dict[Cell, bool]:
    return dict.fromkeys(cells, True)


def count_color_regions(board: Sequence[str]) -> tuple[int, int]:
    """Count colour regions as seen normally and by a red-green colour-blind viewer.

    The board holds the letters R, G and B. The colour-blind viewer cannot tell
    R from G, so only B stays apart.
    """
    cells = dict(_cells(board))
    normal = sum(1 for _ in _regions(cells))
    blind = sum(1 for _ in _regions({cell: ch == "B" for cell, ch in cells.items()}))
    return normal, blind


def count_cabbage_worms(
    width: int, height: int, positions: Iterable[tuple[int, int]]
) -> int:
    """Count groups of adjacent cabbages; positions are (x, y) = (column, row)."""
    cells: list[Cell] = []
    for x, y in positions:
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"cabbage at ({x}, {y}) lies outside the field")
        cells.append((y, x))
    return len(_region_sizes(_filled(sorted(cells))))


def picture_stats(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return the number of pictures (non-zero regions) and the largest one's area."""
    sizes = _region_sizes(_filled(cell for cell, value in _cells(grid) if value != 0))
    return len(sizes), max(sizes, default=0)


def max_safe_regions(heights: Sequence[Sequence[int]]) -> int:
    """Return the largest number of dry regions over every flood level tried."""
    cells = dict(_cells(heights))
    top = max(cells.values(), default=0)
    best = 0
    for level in range(top - 1, -1, -1):
        dry = _filled(cell for cell, height in cells.items() if height > level)
        best = max(best, len(_region_sizes(dry)))
    return best


def rectangle_free_areas(
    rows: int, cols: int, rectangles: Iterable[tuple[int, int, int, int]]
) -> list[int]:
    """Return, sorted, the areas of the regions left uncovered by the rectangles.

    Each rectangle is (x1, y1, x2, y2): its lower-left and upper-right corners,
    with x counting columns and y counting rows.
    """
    covered: set[Cell] = set()
    for x1, y1, x2, y2 in rectangles:
        if not (0 <= x1 <= x2 <= cols and 0 <= y1 <= y2 <= rows):
            raise ValueError(f"rectangle {(x1, y1, x2, y2)} does not fit the paper")
        covered.update((a, b) for a in range(y1, y2) for b in range(x1, x2))
    free = _filled(
        (r, c) for r in range(rows) for c in range(cols) if (r, c) not in covered
    )
    return sorted(_region_sizes(free))


def housing_complexes(board: Sequence[str]) -> list[int]:
    """Return, sorted, the number of houses in each complex ('1' cells)."""
    houses = _filled(cell for cell, ch in _cells(board) if ch != "0")
    return sorted(_region_sizes(houses))