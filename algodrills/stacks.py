"""A list-backed stack and an interpreter for stack commands."""

from collections.abc import Iterable

__all__ = ["ArrayStack", "run_stack_commands"]


class ArrayStack:
    """Last-in, first-out stack of integers."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


def run_stack_commands(commands: Iterable[str]) -> list[int]:
    """Run ``push X``, ``pop``, ``size``, ``empty`` and ``top`` commands.

    Returns the value printed by every command that prints one: ``pop`` and
    ``top`` give -1 on an empty stack, ``empty`` gives 1 or 0.
    """
    stack = ArrayStack()
    output: list[int] = []
    for command in commands:
        parts = command.split()
        if not parts:
            raise ValueError("empty stack command")
        op, args = parts[0], parts[1:]
        if op == "push":
            if len(args) != 1:
                raise ValueError(f"malformed push command: {command!r}")
            stack.push(int(args[0]))
        elif op == "pop":
            output.append(stack.pop() if stack else -1)
        elif op == "size":
            output.append(len(stack))
        elif op == "empty":
            output.append(int(not stack))
        elif op == "top":
            output.append(stack.top() if stack else -1)
        else:
            raise ValueError(f"unknown stack command: {command!r}")
    return output