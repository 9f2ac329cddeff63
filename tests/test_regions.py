import pytest

from searchdrills.regions import (
    count_cabbage_worms,
    count_color_regions,
    housing_complexes,
    max_safe_regions,
    picture_stats,
    rectangle_free_areas,
)

COLOR_EXAMPLE = ["RRRBB", "GGBBB", "BBBRR", "BBRRR", "RRRRR"]

HEIGHT_EXAMPLE = [
    [6, 8, 2, 6, 2],
    [3, 2, 3, 4, 6],
    [6, 7, 3, 3, 2],
    [7, 2, 5, 3, 6],
    [8, 9, 5, 2, 7],
]

HOUSES = ["0110100", "0110101", "1110101", "0000111", "0100000", "0111110", "0111000"]


def _grid_from(width, height, positions):
    marked = set(positions)
    return [[1 if (x, y) in marked else 0 for x in range(width)] for y in range(height)]


def test_color_regions_example():
    assert count_color_regions(COLOR_EXAMPLE) == (4, 3)


def test_color_blind_never_sees_more_regions():
    for board in (COLOR_EXAMPLE, ["RG", "GR"], ["BBB", "RGB", "GGR"]):
        normal, blind = count_color_regions(board)
        assert blind <= normal


def test_color_blind_matches_merged_colours():
    merged = [row.replace("G", "R") for row in COLOR_EXAMPLE]
    assert count_color_regions(COLOR_EXAMPLE)[1] == count_color_regions(merged)[0]


def test_color_regions_unchanged_by_swapping_red_and_green():
    table = str.maketrans("RG", "GR")
    swapped = [row.translate(table) for row in COLOR_EXAMPLE]
    assert count_color_regions(swapped) == count_color_regions(COLOR_EXAMPLE)


def test_color_regions_ragged_board():
    with pytest.raises(ValueError):
        count_color_regions(["RG", "R"])


def test_cabbage_matches_picture_count():
    positions = [(0, 0), (1, 0), (4, 2), (4, 3), (2, 4), (0, 4)]
    grid = _grid_from(5, 5, positions)
    assert count_cabbage_worms(5, 5, positions) == picture_stats(grid)[0]


def test_cabbage_count_invariant_under_transpose():
    positions = [(0, 0), (1, 0), (3, 1), (3, 2), (5, 0), (0, 2)]
    flipped = [(y, x) for x, y in positions]
    assert count_cabbage_worms(6, 3, positions) == count_cabbage_worms(3, 6, flipped)


def test_cabbage_empty_field():
    assert count_cabbage_worms(3, 3, []) == picture_stats([[0] * 3] * 3)[0]


def test_cabbage_outside_field():
    with pytest.raises(ValueError):
        count_cabbage_worms(3, 3, [(3, 0)])


def test_picture_stats_full_grid():
    full = [[1] * 4 for _ in range(3)]
    assert picture_stats(full) == (1, len(full) * len(full[0]))


def test_picture_stats_bounded_by_painted_cells():
    grid = [[1, 1, 0, 1, 0], [0, 1, 0, 0, 0], [1, 0, 1, 1, 0], [0, 0, 1, 1, 1]]
    total = sum(map(sum, grid))
    count, area = picture_stats(grid)
    assert count <= total
    assert area <= total
    assert count * area >= total


def test_picture_stats_isolated_cells():
    grid = [[1, 0, 1], [0, 1, 0], [1, 0, 1]]
    count, _ = picture_stats(grid)
    assert count == sum(map(sum, grid))


def test_max_safe_regions_example():
    assert max_safe_regions(HEIGHT_EXAMPLE) == 5


def test_max_safe_regions_shift_invariant():
    raised = [[h + 3 for h in row] for row in HEIGHT_EXAMPLE]
    assert max_safe_regions(raised) == max_safe_regions(HEIGHT_EXAMPLE)


def test_max_safe_regions_transpose_invariant():
    transposed = [list(col) for col in zip(*HEIGHT_EXAMPLE)]
    assert max_safe_regions(transposed) == max_safe_regions(HEIGHT_EXAMPLE)


def test_rectangle_free_areas_sum_of_uncovered():
    rows, cols = 6, 8
    rectangles = [(0, 0, 2, 3), (4, 2, 8, 4), (2, 5, 3, 6)]
    covered = sum((x2 - x1) * (y2 - y1) for x1, y1, x2, y2 in rectangles)
    areas = rectangle_free_areas(rows, cols, rectangles)
    assert sum(areas) == rows * cols - covered
    assert areas == sorted(areas)


def test_rectangle_free_areas_without_rectangles():
    assert rectangle_free_areas(4, 7, []) == [4 * 7]


def test_rectangle_out_of_range():
    with pytest.raises(ValueError):
        rectangle_free_areas(3, 3, [(0, 0, 4, 1)])


def test_housing_agrees_with_picture_stats():
    sizes = housing_complexes(HOUSES)
    grid = [[int(ch) for ch in row] for row in HOUSES]
    count, area = picture_stats(grid)
    assert len(sizes) == count
    assert max(sizes) == area
    assert sum(sizes) == sum(row.count("1") for row in HOUSES)
    assert sizes == sorted(sizes)