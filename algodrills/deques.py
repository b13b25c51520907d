"""A double-ended queue and an interpreter for deque commands."""

from collections import deque
from collections.abc import Iterable

__all__ = ["ArrayDeque", "run_deque_commands"]


class ArrayDeque:
    """Double-ended queue of integers."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def push_front(self, value: int) -> None:
        """Add ``value`` at the front."""
        self._items.appendleft(value)

    def push_back(self, value: int) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def pop_front(self) -> int:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.popleft()

    def pop_back(self) -> int:
        """Remove and return the back value."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.pop()

    def front(self) -> int:
        """Return the front value."""
        if not self._items:
            raise IndexError("front of an empty deque")
        return self._items[0]

    def back(self) -> int:
        """Return the back value."""
        if not self._items:
            raise IndexError("back of an empty deque")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


def run_deque_commands(commands: Iterable[str]) -> list[int]:
    """Run ``push_front X``, ``push_back X``, ``pop_front``, ``pop_back``,
    ``size``, ``empty``, ``front`` and ``back`` commands.

    Returns every printed value: pops, ``front`` and ``back`` give -1 on an
    empty deque, ``empty`` gives 1 or 0.
    """
    dq = ArrayDeque()
    output: list[int] = []
    for command in commands:
        parts = command.split()
        if not parts:
            raise ValueError("empty deque command")
        op, args = parts[0], parts[1:]
        if op in ("push_front", "push_back"):
            if len(args) != 1:
                raise ValueError(f"malformed push command: {command!r}")
            value = int(args[0])
            if op == "push_front":
                dq.push_front(value)
            else:
                dq.push_back(value)
        elif op == "pop_front":
            output.append(dq.pop_front() if dq else -1)
        elif op == "pop_back":
            output.append(dq.pop_back() if dq else -1)
        elif op == "size":
            output.append(len(dq))
        elif op == "empty":
            output.append(int(not dq))
        elif op == "front":
            output.append(dq.front() if dq else -1)
        elif op == "back":
            output.append(dq.back() if dq else -1)
        else:
            raise ValueError(f"unknown deque command: {command!r}")
    return output