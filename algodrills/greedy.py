"""Greedy exercises: rope loads, coin change and meeting-room scheduling."""

from collections.abc import Iterable

__all__ = ["max_rope_load", "min_coin_count", "max_meetings"]


def max_rope_load(limits: Iterable[int]) -> int:
    """Return the heaviest load that some selection of ropes can lift together.

    A load shared by k ropes puts an equal part on each, so it is limited by
    k times the weakest rope chosen. Returns 0 when there are no ropes.
    """
    strongest_first = sorted(limits, reverse=True)
    return max(
        (limit * count for count, limit in enumerate(strongest_first, start=1)),
        default=0,
    )


def min_coin_count(coins: Iterable[int], amount: int) -> int:
    """Return how many coins the greedy method pays ``amount`` with, taking
    the largest coin first.

    Any part of ``amount`` that no coin can pay is left unpaid.
    """
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    values = sorted(coins, reverse=True)
    if any(value <= 0 for value in values):
        raise ValueError("coin values must be positive")
    count = 0
    for value in values:
        used, amount = divmod(amount, value)
        count += used
    return count


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Return the most ``(start, end)`` meetings one room can hold without overlap.

    A meeting may start at the moment the previous one ends.
    """
    now = 0
    held = 0
    for end, start in sorted((end, start) for start, end in meetings):
        if start < now:
            continue
        held += 1
        now = end
    return held