from collections import Counter

import pytest

from searchdrills.recursion import (
    BAR,
    CLOSING,
    INTRO,
    QUESTION,
    count_paper_binary,
    count_paper_ternary,
    hanoi_moves,
    mod_pow,
    recursion_chatbot,
)


def _play(n, moves):
    pegs = {1: list(range(n, 0, -1)), 2: [], 3: []}
    for src, dst in moves:
        disc = pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disc
        pegs[dst].append(disc)
    return pegs


def test_hanoi_three_discs_example():
    assert hanoi_moves(3) == [(1, 3), (1, 2), (3, 2), (1, 3), (2, 1), (2, 3), (1, 3)]


@pytest.mark.parametrize("n", [1, 2, 4, 6])
def test_hanoi_moves_are_legal_and_finish(n):
    pegs = _play(n, hanoi_moves(n))
    assert pegs[3] == list(range(n, 0, -1))
    assert pegs[1] == [] and pegs[2] == []


def test_hanoi_move_count_doubles_plus_one():
    for n in range(1, 8):
        assert len(hanoi_moves(n + 1)) == 2 * len(hanoi_moves(n)) + 1


def test_hanoi_rejects_zero():
    with pytest.raises(ValueError):
        hanoi_moves(0)


def test_mod_pow_example():
    assert mod_pow(10, 11, 12) == 4


def test_mod_pow_exponent_sum_rule():
    a, m = 123456, 1000007
    for b1, b2 in [(3, 5), (17, 1), (1000, 2345)]:
        assert mod_pow(a, b1 + b2, m) == mod_pow(a, b1, m) * mod_pow(a, b2, m) % m


def test_mod_pow_first_power_is_remainder():
    assert mod_pow(2147483647, 1, 1000) == 2147483647 % 1000


def test_mod_pow_rejects_bad_modulus():
    with pytest.raises(ValueError):
        mod_pow(2, 3, 0)


def test_chatbot_structure():
    depth = 2
    lines = recursion_chatbot(depth).splitlines()
    assert lines[0] == INTRO
    assert lines[-1] == CLOSING
    assert sum(line.endswith(QUESTION) for line in lines) == depth + 1
    assert sum(line.endswith(CLOSING) for line in lines) == depth + 1
    assert lines[1] == QUESTION
    assert any(line.startswith(BAR * depth + '"') for line in lines)


def test_chatbot_nesting_grows():
    assert recursion_chatbot(1) in recursion_chatbot(1)
    assert len(recursion_chatbot(3).splitlines()) > len(recursion_chatbot(2).splitlines())


def test_chatbot_rejects_negative():
    with pytest.raises(ValueError):
        recursion_chatbot(-1)


def test_ternary_uniform_paper():
    assert count_paper_ternary([[1] * 9 for _ in range(9)]) == (0, 0, 1)


def test_ternary_mixed_small_paper_counts_cells():
    board = [[-1, 0, 1], [1, 1, 0], [-1, -1, -1]]
    counts = Counter(v for row in board for v in row)
    assert count_paper_ternary(board) == (counts[-1], counts[0], counts[1])


def test_ternary_uniform_blocks():
    blocks = [[-1, 0, 1], [0, 0, 1], [1, -1, 0]]
    board = [[blocks[r // 3][c // 3] for c in range(9)] for r in range(9)]
    counts = Counter(v for row in blocks for v in row)
    assert count_paper_ternary(board) == (counts[-1], counts[0], counts[1])


def test_ternary_rejects_wrong_size():
    with pytest.raises(ValueError):
        count_paper_ternary([[0, 1], [1, 0]])


def test_binary_mixed_small_paper_counts_cells():
    board = [[0, 1], [1, 1]]
    counts = Counter(v for row in board for v in row)
    assert count_paper_binary(board) == (counts[0], counts[1])


def test_binary_uniform_blocks():
    blocks = [[0, 1], [1, 1]]
    board = [[blocks[r // 2][c // 2] for c in range(4)] for r in range(4)]
    counts = Counter(v for row in blocks for v in row)
    assert count_paper_binary(board) == (counts[0], counts[1])


def test_binary_rejects_non_power_of_two():
    with pytest.raises(ValueError):
        count_paper_binary([[0] * 3 for _ in range(3)])


def test_binary_rejects_bad_values():
    with pytest.raises(ValueError):
        count_paper_binary([[0, 2], [1, 1]])