"""Puzzle searches: operator insertion, team splits, slopes, gears and chicken shops."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

WHEEL_COUNT = 4
WHEEL_TEETH = 8
RIGHT_CONTACT = 2
LEFT_CONTACT = 6
NORTH_POLE = "0"
SOUTH_POLE = "1"

CHICKEN_EMPTY, CHICKEN_HOUSE, CHICKEN_SHOP = 0, 1, 2

OPERATORS = ("+", "-", "*", "/")


def _shape(rows: Sequence[Sequence]) -> tuple[int, int]:
    if not rows or not rows[0]:
        raise ValueError("the board must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows of the board must have the same length")
    return len(rows), len(rows[0])


def _square(board: Sequence[Sequence[int]]) -> int:
    rows, cols = _shape(board)
    if rows != cols:
        raise ValueError("the board must be square")
    return rows


def _divide(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _apply(op: str, a: int, b: int) -> int:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    return _divide(a, b)


def operator_insertion(numbers: Sequence[int], counts: Sequence[int]) -> tuple[int, int]:
    """Largest and smallest results of putting the operators between the numbers.

    counts gives how many +, -, * and / there are; they are applied left to
    right with no precedence, and division truncates toward zero.
    """
    if not numbers:
        raise ValueError("need at least one number")
    if len(counts) != len(OPERATORS):
        raise ValueError(f"need {len(OPERATORS)} operator counts, got {len(counts)}")
    if any(count < 0 for count in counts):
        raise ValueError("operator counts must be non-negative")
    if sum(counts) != len(numbers) - 1:
        raise ValueError(
            f"{len(numbers)} numbers need {len(numbers) - 1} operators, got {sum(counts)}"
        )

    remaining = list(counts)
    results: set[int] = set()

    def search(position: int, value: int) -> None:
        if position == len(numbers):
            results.add(value)
            return
        for index, op in enumerate(OPERATORS):
            if not remaining[index]:
                continue
            remaining[index] -= 1
            search(position + 1, _apply(op, value, numbers[position]))
            remaining[index] += 1

    search(1, numbers[0])
    return max(results), min(results)


def team_split(board: Sequence[Sequence[int]]) -> int:
    """Smallest difference in strength between two equal halves of the players.

    board[i][j] is the bonus a team gets when players i and j are both on it.
    """
    n = _square(board)
    if n % 2:
        raise ValueError(f"the number of players must be even, got {n}")

    def strength(team: Iterable[int]) -> int:
        members = list(team)
        return sum(board[i][j] for i in members for j in members if i != j)

    players = range(n)
    best: int | None = None
    for team in combinations(players, n // 2):
        chosen = set(team)
        other = [p for p in players if p not in chosen]
        diff = abs(strength(team) - strength(other))
        best = diff if best is None else min(best, diff)
    return best if best is not None else 0


def _passable(line: Sequence[int], length: int) -> bool:
    """Whether a line can be walked, laying ramps of the given length."""
    n = len(line)
    idx = 0
    flat = 1
    while idx < n - 1:
        here, ahead = line[idx], line[idx + 1]
        if abs(here - ahead) > 1:
            return False
        if here == ahead:
            idx += 1
            flat += 1
        elif here < ahead:
            if flat < length:
                return False
            flat = 1
            idx += 1
        else:
            if idx + length >= n:
                return False
            if any(line[i] != line[i + 1] for i in range(idx + 1, idx + length)):
                return False
            idx += length
            flat = 0
    return True


def count_slopes(board: Sequence[Sequence[int]], length: int) -> int:
    """Number of rows and columns that can be walked using ramps of the given length."""
    _square(board)
    if length < 1:
        raise ValueError(f"ramp length must be positive, got {length}")
    lines = [list(row) for row in board] + [list(col) for col in zip(*board)]
    return sum(_passable(line, length) for line in lines)


def _turn(wheel: str, direction: int) -> str:
    if direction == 1:
        return wheel[-1] + wheel[:-1]
    if direction == -1:
        return wheel[1:] + wheel[0]
    return wheel


def gear_score(wheels: Sequence[str], commands: Iterable[tuple[int, int]]) -> int:
    """Score of four gears after the turning commands.

    Each wheel lists its eight teeth clockwise from the top, '0' for N and '1'
    for S. A command (wheel, direction) turns wheel 1..4 clockwise (1) or
    counterclockwise (-1); neighbours whose touching teeth differ turn the
    other way. Wheel i adds 2**i to the score when its top tooth is S.
    """
    if len(wheels) != WHEEL_COUNT:
        raise ValueError(f"need {WHEEL_COUNT} wheels, got {len(wheels)}")
    for wheel in wheels:
        if len(wheel) != WHEEL_TEETH or set(wheel) - {NORTH_POLE, SOUTH_POLE}:
            raise ValueError(f"invalid wheel {wheel!r}")
    state = list(wheels)

    for number, direction in commands:
        if not 1 <= number <= WHEEL_COUNT:
            raise ValueError(f"wheel number must be 1..{WHEEL_COUNT}, got {number}")
        if direction not in (1, -1):
            raise ValueError(f"direction must be 1 or -1, got {direction}")
        turns = [0] * WHEEL_COUNT
        start = number - 1
        turns[start] = direction

        idx = start
        while idx > 0 and state[idx][LEFT_CONTACT] != state[idx - 1][RIGHT_CONTACT]:
            turns[idx - 1] = -turns[idx]
            idx -= 1
        idx = start
        while (
            idx < WHEEL_COUNT - 1
            and state[idx][RIGHT_CONTACT] != state[idx + 1][LEFT_CONTACT]
        ):
            turns[idx + 1] = -turns[idx]
            idx += 1

        state = [_turn(wheel, turn) for wheel, turn in zip(state, turns)]

    return sum(2**i for i, wheel in enumerate(state) if wheel[0] == SOUTH_POLE)


def chicken_distance(board: Sequence[Sequence[int]], keep: int) -> int:
    """Smallest city chicken distance after closing all but `keep` shops.

    Cells hold 0 (empty), 1 (house) or 2 (chicken shop). A house's distance is
    the Manhattan distance to its nearest open shop; the city's is their sum.
    """
    _square(board)
    houses: list[tuple[int, int]] = []
    shops: list[tuple[int, int]] = []
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value == CHICKEN_HOUSE:
                houses.append((r, c))
            elif value == CHICKEN_SHOP:
                shops.append((r, c))
            elif value != CHICKEN_EMPTY:
                raise ValueError(f"invalid cell {value!r}; expected 0, 1 or 2")
    if keep < 1:
        raise ValueError(f"must keep at least one shop, got {keep}")
    if keep > len(shops):
        raise ValueError(f"cannot keep {keep} of {len(shops)} shops")

    return min(
        sum(
            min(abs(sr - hr) + abs(sc - hc) for sr, sc in open_shops)
            for hr, hc in houses
        )
        for open_shops in combinations(shops, keep)
    )