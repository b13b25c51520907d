"""Sorting algorithms: merge, quick, counting and radix sort, plus a mode finder."""

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "merge_sorted",
    "merge_sort",
    "quick_sort",
    "most_frequent",
    "counting_sort",
    "radix_sort",
]

_END = object()
_COUNT_LIMIT = 1_000_000


def merge_sorted(left: Iterable[Any], right: Iterable[Any]) -> list[Any]:
    """Merge two sorted sequences; on ties the element from ``left`` comes first."""
    result: list[Any] = []
    left_it, right_it = iter(left), iter(right)
    a = next(left_it, _END)
    b = next(right_it, _END)
    while a is not _END and b is not _END:
        if a <= b:
            result.append(a)
            a = next(left_it, _END)
        else:
            result.append(b)
            b = next(right_it, _END)
    if a is not _END:
        result.append(a)
        result.extend(left_it)
    if b is not _END:
        result.append(b)
        result.extend(right_it)
    return result


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a stably sorted list of ``values`` using merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return merge_sorted(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list of ``values`` using quick sort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items))]
    while pending:
        start, end = pending.pop()
        if end <= start + 1:
            continue
        pivot = items[start]
        low, high = start + 1, end - 1
        while True:
            while low <= high and items[low] <= pivot:
                low += 1
            while low <= high and items[high] >= pivot:
                high -= 1
            if low > high:
                break
            items[low], items[high] = items[high], items[low]
        items[start], items[high] = items[high], items[start]
        pending.append((start, high))
        pending.append((high + 1, end))
    return items


def most_frequent(values: Iterable[int]) -> int:
    """Return the most frequent value; among equally frequent ones, the smallest."""
    counts = Counter(values)
    if not counts:
        raise ValueError("most_frequent() of an empty sequence")
    return min(counts, key=lambda value: (-counts[value], value))


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort integers between -1,000,000 and 1,000,000 by counting occurrences."""
    items = list(values)
    for value in items:
        if not -_COUNT_LIMIT <= value <= _COUNT_LIMIT:
            raise ValueError(f"{value} outside -{_COUNT_LIMIT}..{_COUNT_LIMIT}")
    if not items:
        return []
    counts = Counter(items)
    return [
        value
        for value in range(min(items), max(items) + 1)
        for _ in range(counts[value])
    ]


def radix_sort(values: Sequence[int] | Iterable[int], digits: int = 3) -> list[int]:
    """Sort non-negative integers of at most ``digits`` decimal digits, least
    significant digit first."""
    if digits < 1:
        raise ValueError(f"digits must be positive, got {digits}")
    items = list(values)
    limit = 10**digits
    for value in items:
        if not 0 <= value < limit:
            raise ValueError(f"{value} is not a non-negative number of at most {digits} digits")
    for place in range(digits):
        divisor = 10**place
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[value // divisor % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
    return items