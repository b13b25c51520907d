"""A first-in, first-out queue and an interpreter for queue commands."""

from collections import deque
from collections.abc import Iterable

__all__ = ["ArrayQueue", "run_queue_commands"]


class ArrayQueue:
    """First-in, first-out queue of integers."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def push(self, value: int) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def front(self) -> int:
        """Return the front value."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def back(self) -> int:
        """Return the back value."""
        if not self._items:
            raise IndexError("back of an empty queue")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


def run_queue_commands(commands: Iterable[str]) -> list[int]:
    """Run ``push X``, ``pop``, ``size``, ``empty``, ``front`` and ``back``.

    Returns every printed value: ``pop``, ``front`` and ``back`` give -1 on an
    empty queue, ``empty`` gives 1 or 0.
    """
    queue = ArrayQueue()
    output: list[int] = []
    for command in commands:
        parts = command.split()
        if not parts:
            raise ValueError("empty queue command")
        op, args = parts[0], parts[1:]
        if op == "push":
            if len(args) != 1:
                raise ValueError(f"malformed push command: {command!r}")
            queue.push(int(args[0]))
        elif op == "pop":
            output.append(queue.pop() if queue else -1)
        elif op == "size":
            output.append(len(queue))
        elif op == "empty":
            output.append(int(not queue))
        elif op == "front":
            output.append(queue.front() if queue else -1)
        elif op == "back":
            output.append(queue.back() if queue else -1)
        else:
            raise ValueError(f"unknown queue command: {command!r}")
    return output