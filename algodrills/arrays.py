"""Letter frequencies and position-based insertion and removal in lists."""

from string import ascii_lowercase
from typing import TypeVar

__all__ = ["letter_counts", "insert_at", "erase_at"]

T = TypeVar("T")


def letter_counts(word: str) -> list[int]:
    """Return how often each letter from 'a' to 'z' occurs in ``word``.

    Characters other than lower-case ASCII letters are not counted.
    """
    counts = dict.fromkeys(ascii_lowercase, 0)
    for char in word:
        if char in counts:
            counts[char] += 1
    return list(counts.values())


def insert_at(items: list[T], index: int, value: T) -> None:
    """Insert ``value`` into ``items`` at ``index``, shifting later elements right.

    ``index`` may be anything from 0 to ``len(items)``.
    """
    if not 0 <= index <= len(items):
        raise IndexError(f"insert position {index} out of range 0..{len(items)}")
    items.insert(index, value)


def erase_at(items: list[T], index: int) -> T:
    """Remove and return the element of ``items`` at ``index``."""
    if not 0 <= index < len(items):
        raise IndexError(f"erase position {index} out of range 0..{len(items) - 1}")
    return items.pop(index)