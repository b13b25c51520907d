"""Backtracking exercises: subset sums, ordered selections and N queens."""

from collections.abc import Iterable
from itertools import combinations, permutations

__all__ = ["count_subset_sums", "ordered_selections", "count_n_queens"]


def count_subset_sums(values: Iterable[int], target: int) -> int:
    """Count the non-empty subsets of ``values`` (by position) whose sum is ``target``."""
    items = list(values)
    return sum(
        1
        for size in range(1, len(items) + 1)
        for chosen in combinations(items, size)
        if sum(chosen) == target
    )


def ordered_selections(n: int, m: int) -> list[tuple[int, ...]]:
    """Return every sequence of ``m`` distinct numbers from 1..n in lexicographic order."""
    if n < 0 or m < 0:
        raise ValueError(f"n and m must not be negative, got n={n}, m={m}")
    return list(permutations(range(1, n + 1), m))


def count_n_queens(n: int) -> int:
    """Count the ways to place ``n`` non-attacking queens on an n by n board."""
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if col in columns or row + col in diagonals or row - col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(row - col)
            total += place(row + 1)
            columns.remove(col)
            diagonals.remove(row + col)
            anti_diagonals.remove(row - col)
        return total

    return place(0)