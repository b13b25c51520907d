"""A doubly linked list stored in parallel arrays, and a cursor text editor on it."""

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["ArrayLinkedList", "edit_text"]

_HEAD = 0


class ArrayLinkedList:
    """Doubly linked list whose nodes are identified by integer addresses.

    Address 0 is a dummy head node that holds no value. Each inserted node
    gets the next unused address, starting at 1; addresses are never reused.
    """

    def __init__(self) -> None:
        self._values: list[Any] = [None]
        self._prev: list[int | None] = [None]
        self._next: list[int | None] = [None]
        self._alive: list[bool] = [True]

    def _check(self, address: int) -> None:
        if not 0 <= address < len(self._values):
            raise IndexError(f"no node at address {address}")
        if not self._alive[address]:
            raise ValueError(f"node at address {address} has been erased")

    def insert(self, address: int, value: Any) -> int:
        """Insert ``value`` right after the node at ``address``; return its address."""
        self._check(address)
        new = len(self._values)
        following = self._next[address]
        self._values.append(value)
        self._prev.append(address)
        self._next.append(following)
        self._alive.append(True)
        if following is not None:
            self._prev[following] = new
        self._next[address] = new
        return new

    def erase(self, address: int) -> None:
        """Unlink the node at ``address``."""
        if address == _HEAD:
            raise ValueError("the head node cannot be erased")
        self._check(address)
        before = self._prev[address]
        after = self._next[address]
        self._next[before] = after
        if after is not None:
            self._prev[after] = before
        self._alive[address] = False

    def prev(self, address: int) -> int | None:
        """Return the address before ``address``, or None at the head."""
        self._check(address)
        return self._prev[address]

    def next(self, address: int) -> int | None:
        """Return the address after ``address``, or None at the end."""
        self._check(address)
        return self._next[address]

    def __iter__(self) -> Iterator[Any]:
        current = self._next[_HEAD]
        while current is not None:
            yield self._values[current]
            current = self._next[current]


def edit_text(initial: str, commands: Iterable[str]) -> str:
    """Apply cursor editor commands to ``initial`` and return the final text.

    The cursor starts after the last character. Commands are ``"L"`` (move
    left), ``"D"`` (move right), ``"B"`` (delete the character left of the
    cursor) and ``"P x"`` (insert ``x`` left of the cursor).
    """
    text = ArrayLinkedList()
    cursor = _HEAD
    for char in initial:
        cursor = text.insert(cursor, char)

    for command in commands:
        parts = command.split()
        if not parts:
            raise ValueError("empty editor command")
        op = parts[0]
        if op == "P":
            if len(parts) != 2:
                raise ValueError(f"malformed insert command: {command!r}")
            cursor = text.insert(cursor, parts[1])
        elif op == "L":
            before = text.prev(cursor)
            if before is not None:
                cursor = before
        elif op == "D":
            after = text.next(cursor)
            if after is not None:
                cursor = after
        elif op == "B":
            if cursor != _HEAD:
                before = text.prev(cursor)
                text.erase(cursor)
                cursor = before
        else:
            raise ValueError(f"unknown editor command: {command!r}")

    return "".join(text)