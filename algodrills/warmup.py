"""Small warm-up exercises on integers and integer sequences."""

from collections.abc import Iterable
from math import isqrt

__all__ = [
    "sum_multiples_of_3_or_5",
    "has_pair_summing_to_100",
    "is_perfect_square",
    "largest_power_of_two",
]


def sum_multiples_of_3_or_5(n: int) -> int:
    """Return the sum of every integer in 1..n divisible by 3 or by 5."""
    return sum(i for i in range(1, n + 1) if i % 3 == 0 or i % 5 == 0)


def has_pair_summing_to_100(values: Iterable[int]) -> bool:
    """Tell whether two different elements of ``values`` add up to 100."""
    seen: set[int] = set()
    for value in values:
        if 100 - value in seen:
            return True
        seen.add(value)
    return False


def is_perfect_square(n: int) -> bool:
    """Tell whether ``n`` is the square of a positive integer."""
    if n < 1:
        return False
    root = isqrt(n)
    return root * root == n


def largest_power_of_two(n: int) -> int:
    """Return the largest power of two not above ``n`` (1 when ``n`` < 2)."""
    if n < 2:
        return 1
    return 1 << (n.bit_length() - 1)