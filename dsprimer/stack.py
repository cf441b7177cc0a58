"""Bounded sequential stack and a two-ended shared stack."""

from __future__ import annotations

from typing import Any

MAXSIZE = 100


class SeqStack:
    """LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = MAXSIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def push(self, x: Any) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SeqStack({self._items!r}, capacity={self.capacity})"


class SharedStack:
    """Two stacks sharing one array: stack 0 grows up, stack 1 grows down."""

    def __init__(self, capacity: int = MAXSIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data: list[Any] = [None] * capacity
        self._top0 = -1
        self._top1 = capacity

    @staticmethod
    def _check(which: int) -> None:
        if which not in (0, 1):
            raise ValueError(f"stack number must be 0 or 1, not {which!r}")

    def is_empty(self) -> bool:
        """Return True if both stacks are empty."""
        return self._top0 == -1 and self._top1 == self.capacity

    def push(self, x: Any, which: int) -> None:
        self._check(which)
        if self._top0 + 1 == self._top1:
            raise OverflowError("shared stack is full")
        if which == 0:
            self._top0 += 1
            self._data[self._top0] = x
        else:
            self._top1 -= 1
            self._data[self._top1] = x

    def pop(self, which: int) -> Any:
        """Remove and return the top element of stack ``which``."""
        value = self.top(which)
        if which == 0:
            self._data[self._top0] = None
            self._top0 -= 1
        else:
            self._data[self._top1] = None
            self._top1 += 1
        return value

    def top(self, which: int) -> Any:
        """Return the top element of stack ``which`` without removing it."""
        self._check(which)
        if which == 0:
            if self._top0 == -1:
                raise IndexError("stack 0 is empty")
            return self._data[self._top0]
        if self._top1 == self.capacity:
            raise IndexError("stack 1 is empty")
        return self._data[self._top1]

    def __repr__(self) -> str:
        return f"SharedStack(capacity={self.capacity})"