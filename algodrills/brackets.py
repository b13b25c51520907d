"""Checking round and square brackets for balance."""

from collections.abc import Iterable

__all__ = ["is_balanced", "check_lines"]

_OPENERS = "(["
_MATCHING = {")": "(", "]": "["}


def is_balanced(line: str) -> bool:
    """Tell whether the round and square brackets in ``line`` are balanced.

    Every other character is ignored.
    """
    stack: list[str] = []
    for char in line:
        if char in _OPENERS:
            stack.append(char)
        elif char in _MATCHING:
            if not stack or stack.pop() != _MATCHING[char]:
                return False
    return not stack


def check_lines(lines: Iterable[str]) -> list[str]:
    """Answer ``"yes"`` or ``"no"`` for each line up to a line holding only ``"."``."""
    answers: list[str] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == ".":
            break
        answers.append("yes" if is_balanced(line) else "no")
    return answers