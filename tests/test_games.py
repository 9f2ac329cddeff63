import pytest

from searchdrills.games import game_2048_max, puyo_chains, truck_crossing_time

PUYO_EXAMPLE = [
    "......",
    "......",
    "......",
    "......",
    "......",
    "......",
    "......",
    "......",
    ".Y....",
    ".YG...",
    "RRYG..",
    "RRYGG.",
]


def test_puyo_example():
    assert puyo_chains(PUYO_EXAMPLE) == 3


def test_puyo_small_group_does_not_pop():
    board = ["......"] * 9 + ["R.....", "R.....", "R....."]
    assert puyo_chains(board) == 0


def test_puyo_floating_pieces_fall_before_popping():
    floating = ["......"] * 8 + ["GGGG..", "......", "......", "......"]
    grounded = ["......"] * 11 + ["GGGG.."]
    assert puyo_chains(floating) == puyo_chains(grounded)
    assert puyo_chains(grounded) > puyo_chains(["......"] * 12)


def test_puyo_rejects_ragged():
    with pytest.raises(ValueError):
        puyo_chains(["......", "..."])


def test_2048_example():
    assert game_2048_max([[2, 2, 2], [4, 4, 4], [8, 8, 8]]) == 16


def test_2048_single_tile_stays():
    board = [[0, 0], [0, 8]]
    assert game_2048_max(board) == max(max(row) for row in board)


def test_2048_never_below_start_and_stays_power_of_two():
    board = [[2, 0, 4, 2], [0, 2, 2, 0], [8, 0, 0, 8], [2, 4, 8, 16]]
    best = game_2048_max(board)
    assert best >= max(max(row) for row in board)
    assert best & (best - 1) == 0


def test_2048_rejects_non_square():
    with pytest.raises(ValueError):
        game_2048_max([[2, 2, 2], [2, 2, 2]])


def test_trucks_example():
    assert truck_crossing_time(2, 10, [7, 4, 5, 6]) == 8


def test_trucks_longer_bridge_is_never_faster():
    trucks = [7, 4, 5, 6, 3, 9]
    times = [truck_crossing_time(w, 10, trucks) for w in range(1, 8)]
    assert times == sorted(times)


def test_trucks_more_load_is_never_slower():
    trucks = [7, 4, 5, 6, 3, 9]
    times = [truck_crossing_time(3, load, trucks) for load in range(9, 40)]
    assert times == sorted(times, reverse=True)


def test_trucks_rejects_overweight():
    with pytest.raises(ValueError):
        truck_crossing_time(2, 5, [3, 6])


def test_trucks_rejects_empty():
    with pytest.raises(ValueError):
        truck_crossing_time(2, 5, [])