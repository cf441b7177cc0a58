"""Static linked list: nodes live in a fixed array and link by cursor."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

MAXSIZE = 10

_HEAD = 0
_END = -1
_FREE = -2


class StaticLinkedList:
    """Linked list whose nodes are slots of a fixed array.

    Slot 0 is the head; a cursor of -1 ends the chain and -2 marks a free slot.
    """

    def __init__(self, capacity: int = MAXSIZE) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self.capacity = capacity
        self._data: list[Any] = [None] * capacity
        self._next: list[int] = [_FREE] * capacity
        self._next[_HEAD] = _END

    def _cursors(self) -> Iterator[int]:
        cursor = self._next[_HEAD]
        while cursor != _END:
            yield cursor
            cursor = self._next[cursor]

    def _walk(self, steps: int) -> int | None:
        """Return the slot reached after ``steps`` links from the head."""
        cursor = _HEAD
        for _ in range(steps):
            cursor = self._next[cursor]
            if cursor == _END:
                return None
        return cursor

    def locate(self, e: Any) -> int | None:
        """Return the slot index holding ``e``, or None if absent."""
        return next((c for c in self._cursors() if self._data[c] == e), None)

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` as the ``i``-th element (1-based)."""
        if not 1 <= i <= self.capacity - 1:
            raise IndexError(f"position {i} is out of range")
        free = next(
            (j for j in range(1, self.capacity) if self._next[j] == _FREE), None
        )
        if free is None:
            raise OverflowError("no free slot left")
        prev = self._walk(i - 1)
        if prev is None:
            raise IndexError(f"position {i} is out of range")
        self._data[free] = e
        self._next[free] = self._next[prev]
        self._next[prev] = free

    def delete(self, i: int) -> Any:
        """Remove and return the ``i``-th element (1-based)."""
        if i < 1:
            raise IndexError(f"position {i} is out of range")
        prev = self._walk(i - 1)
        if prev is None or self._next[prev] == _END:
            raise IndexError(f"position {i} is out of range")
        target = self._next[prev]
        self._next[prev] = self._next[target]
        self._next[target] = _FREE
        value, self._data[target] = self._data[target], None
        return value

    def __iter__(self) -> Iterator[Any]:
        return (self._data[c] for c in self._cursors())

    def __len__(self) -> int:
        return sum(1 for _ in self._cursors())

    def __repr__(self) -> str:
        return f"StaticLinkedList({list(self)!r})"