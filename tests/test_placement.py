import pytest

from searchdrills.placement import garden_flowers, seven_princesses

EXAMPLE = [
    "YYYYY",
    "SYSYS",
    "YYYYY",
    "YSYYS",
    "YYYYY",
]


def test_seven_princesses_example():
    assert seven_princesses(EXAMPLE) == 2


def test_seven_princesses_all_y_has_no_group():
    assert seven_princesses(["YYYYY"] * 5) == 0


def test_seven_princesses_more_s_never_fewer_groups():
    base = seven_princesses(EXAMPLE)
    changed = list(EXAMPLE)
    changed[2] = "SSYYY"
    assert seven_princesses(changed) >= base
    assert seven_princesses(["SSSSS"] * 5) >= seven_princesses(changed)


def test_seven_princesses_transpose_invariant():
    transposed = ["".join(col) for col in zip(*EXAMPLE)]
    assert seven_princesses(transposed) == seven_princesses(EXAMPLE)


def test_seven_princesses_rejects_bad_cells():
    with pytest.raises(ValueError):
        seven_princesses(["SSSSX"] * 5)


def test_seven_princesses_rejects_ragged():
    with pytest.raises(ValueError):
        seven_princesses(["SSSSS", "SSS"])


def test_garden_meeting_in_the_middle():
    assert garden_flowers([[2, 1, 2]], 1, 1) == 1


def test_garden_lake_blocks_meeting():
    assert garden_flowers([[2, 0, 2]], 1, 1) == 0


def test_garden_colour_swap_symmetry():
    board = [
        [2, 1, 1, 2],
        [1, 0, 1, 1],
        [2, 1, 1, 2],
    ]
    assert garden_flowers(board, 1, 2) == garden_flowers(board, 2, 1)


def test_garden_no_red_means_no_flowers():
    board = [[2, 1, 2], [1, 1, 1], [2, 1, 2]]
    assert garden_flowers(board, 3, 0) == 0


def test_garden_more_candidates_never_worse():
    small = [[2, 1, 2, 1, 1]]
    large = [[2, 1, 2, 1, 2]]
    assert garden_flowers(large, 1, 1) >= garden_flowers(small, 1, 1)


def test_garden_too_many_media():
    with pytest.raises(ValueError):
        garden_flowers([[2, 1, 2]], 2, 1)


def test_garden_invalid_cell():
    with pytest.raises(ValueError):
        garden_flowers([[2, 3, 2]], 1, 1)