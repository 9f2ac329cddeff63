"""Enumerating sequences of length m drawn from a pool of numbers.

Every function returns the sequences as tuples, in ascending lexicographic order.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations, combinations_with_replacement, permutations, product

Seq = tuple[int, ...]


def _check_length(m: int) -> None:
    if m < 0:
        raise ValueError(f"sequence length must be non-negative, got {m}")


def _first_n(n: int) -> range:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return range(1, n + 1)


def permutations_n_m(n: int, m: int) -> list[Seq]:
    """Sequences of m distinct numbers from 1..n."""
    _check_length(m)
    return list(permutations(_first_n(n), m))


def combinations_n_m(n: int, m: int) -> list[Seq]:
    """Strictly increasing sequences of m numbers from 1..n."""
    _check_length(m)
    return list(combinations(_first_n(n), m))


def products_n_m(n: int, m: int) -> list[Seq]:
    """All sequences of m numbers from 1..n, repeats allowed."""
    _check_length(m)
    return list(product(_first_n(n), repeat=m))


def multisets_n_m(n: int, m: int) -> list[Seq]:
    """Non-decreasing sequences of m numbers from 1..n."""
    _check_length(m)
    return list(combinations_with_replacement(_first_n(n), m))


def permutations_of(numbers: Iterable[int], m: int) -> list[Seq]:
    """Sequences of m numbers taken from distinct positions of numbers."""
    _check_length(m)
    return list(permutations(sorted(numbers), m))


def products_of(numbers: Iterable[int], m: int) -> list[Seq]:
    """All sequences of m numbers from numbers, repeats allowed."""
    _check_length(m)
    return list(product(sorted(numbers), repeat=m))


def multisets_of(numbers: Iterable[int], m: int) -> list[Seq]:
    """Non-decreasing sequences of m numbers from numbers, repeats allowed."""
    _check_length(m)
    return list(combinations_with_replacement(sorted(numbers), m))


def distinct_permutations_of(numbers: Iterable[int], m: int) -> list[Seq]:
    """Like permutations_of, with each resulting sequence listed once."""
    _check_length(m)
    return list(dict.fromkeys(permutations(sorted(numbers), m)))


def distinct_combinations_of(numbers: Iterable[int], m: int) -> list[Seq]:
    """Non-decreasing sequences using each position at most once, listed once."""
    _check_length(m)
    return list(dict.fromkeys(combinations(sorted(numbers), m)))


def distinct_products_of(numbers: Iterable[int], m: int) -> list[Seq]:
    """All sequences of m values from numbers, repeats allowed, listed once."""
    _check_length(m)
    return list(product(sorted(set(numbers)), repeat=m))


def distinct_multisets_of(numbers: Iterable[int], m: int) -> list[Seq]:
    """Non-decreasing sequences of m values from numbers, listed once."""
    _check_length(m)
    return list(combinations_with_replacement(sorted(set(numbers)), m))