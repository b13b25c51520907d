"""Dynamic-programming exercises on sequences and integers."""

from collections.abc import Iterable, Sequence

__all__ = [
    "min_paint_cost",
    "range_sums",
    "tiling_count",
    "min_steps_to_one",
    "steps_to_one_path",
    "max_stair_score",
    "max_stair_score_by_skips",
    "count_sums_of_123",
]

_TILING_MODULUS = 10_007


def min_paint_cost(costs: Iterable[Sequence[int]]) -> int:
    """Return the cheapest way to paint a row of houses red, green or blue
    so that neighbouring houses differ in colour.

    Each element of ``costs`` holds the (red, green, blue) prices of one house.
    """
    best: tuple[int, int, int] | None = None
    for house in costs:
        if len(house) != 3:
            raise ValueError(f"each house needs exactly three prices, got {house!r}")
        red, green, blue = house
        if best is None:
            best = (red, green, blue)
        else:
            r, g, b = best
            best = (min(g, b) + red, min(r, b) + green, min(r, g) + blue)
    if best is None:
        raise ValueError("need at least one house")
    return min(best)


def range_sums(
    values: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer each 1-based inclusive ``(i, j)`` query with the sum of values i..j."""
    prefix = [0]
    for value in values:
        prefix.append(prefix[-1] + value)
    count = len(prefix) - 1
    answers: list[int] = []
    for start, end in queries:
        if not 1 <= start <= end <= count:
            raise ValueError(f"query ({start}, {end}) outside 1..{count}")
        answers.append(prefix[end] - prefix[start - 1])
    return answers


def tiling_count(n: int) -> int:
    """Return the number of ways to tile a 2 by ``n`` board with 1x2 and 2x1
    tiles, modulo 10007."""
    if n < 1:
        raise ValueError(f"board length must be positive, got {n}")
    previous, current = 1, 2
    if n == 1:
        return previous
    for _ in range(n - 2):
        previous, current = current, (previous + current) % _TILING_MODULUS
    return current


def _steps_table(n: int) -> tuple[list[int], list[int]]:
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    steps = [0] * (n + 1)
    came_from = [0] * (n + 1)
    for i in range(2, n + 1):
        steps[i] = steps[i - 1] + 1
        came_from[i] = i - 1
        if i % 2 == 0 and steps[i] > steps[i // 2] + 1:
            steps[i] = steps[i // 2] + 1
            came_from[i] = i // 2
        if i % 3 == 0 and steps[i] > steps[i // 3] + 1:
            steps[i] = steps[i // 3] + 1
            came_from[i] = i // 3
    return steps, came_from


def min_steps_to_one(n: int) -> int:
    """Return the fewest operations (subtract 1, halve, divide by 3) taking ``n`` to 1."""
    steps, _ = _steps_table(n)
    return steps[n]


def steps_to_one_path(n: int) -> list[int]:
    """Return the numbers visited on a shortest way from ``n`` down to 1, both included."""
    _, came_from = _steps_table(n)
    path = [n]
    while path[-1] != 1:
        path.append(came_from[path[-1]])
    return path


def max_stair_score(scores: Sequence[int]) -> int:
    """Return the best total when climbing stairs one or two at a time, never
    stepping on three in a row, and ending on the last stair."""
    n = len(scores)
    if n == 0:
        raise ValueError("need at least one stair")
    if n == 1:
        return scores[0]
    # (best ending here after a jump, best ending here after a single step)
    two_back = (scores[0], 0)
    one_back = (scores[1], scores[0] + scores[1])
    for score in scores[2:]:
        current = (max(two_back) + score, one_back[0] + score)
        two_back, one_back = one_back, current
    return max(one_back)


def max_stair_score_by_skips(scores: Sequence[int]) -> int:
    """Same answer as :func:`max_stair_score`, found by minimising the total
    of the stairs left out."""
    n = len(scores)
    if n == 0:
        raise ValueError("need at least one stair")
    total = sum(scores)
    if n <= 2:
        return total
    skipped = [0, *scores[:3]]
    for i in range(4, n):
        skipped.append(min(skipped[i - 2], skipped[i - 3]) + scores[i - 1])
    return total - min(skipped[n - 1], skipped[n - 2])


def count_sums_of_123(n: int) -> int:
    """Return the number of ordered ways to write ``n`` as a sum of 1, 2 and 3."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    ways = [1, 2, 4]
    while len(ways) < n:
        ways.append(ways[-1] + ways[-2] + ways[-3])
    return ways[n - 1]