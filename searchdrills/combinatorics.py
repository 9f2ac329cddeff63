"""Small combinatorial searches: subset sums, passwords, lotto sets, queens."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations

VOWELS = frozenset("aeiou")
LOTTO_SIZE = 6


def count_subset_sums(numbers: Iterable[int], target: int) -> int:
    """Count the non-empty subsets (by position) whose elements sum to target."""
    sums = Counter({0: 1})
    for x in numbers:
        sums.update(Counter({total + x: ways for total, ways in sums.items()}))
    empty = 1 if target == 0 else 0
    return sums[target] - empty


def passwords(length: int, letters: Iterable[str]) -> list[str]:
    """Sorted-letter passwords with at least one vowel and two consonants."""
    if length < 0:
        raise ValueError(f"password length must be non-negative, got {length}")
    result = []
    for combo in combinations(sorted(letters), length):
        vowels = sum(ch in VOWELS for ch in combo)
        if vowels >= 1 and length - vowels >= 2:
            result.append("".join(combo))
    return result


def lotto_sets(numbers: Sequence[int]) -> list[tuple[int, ...]]:
    """Every choice of six of the numbers, kept in the order they were given."""
    if len(numbers) < LOTTO_SIZE:
        raise ValueError(f"need at least {LOTTO_SIZE} numbers, got {len(numbers)}")
    return list(combinations(numbers, LOTTO_SIZE))


def n_queens(n: int) -> int:
    """Number of ways to place n non-attacking queens on an n x n board."""
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    columns: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if col in columns or row + col in rising or row - col in falling:
                continue
            columns.add(col)
            rising.add(row + col)
            falling.add(row - col)
            total += place(row + 1)
            columns.discard(col)
            rising.discard(row + col)
            falling.discard(row - col)
        return total

    return place(0)