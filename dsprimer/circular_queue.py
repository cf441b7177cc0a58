"""Circular array queue that leaves one slot unused to tell full from empty."""

from __future__ import annotations

from typing import Any

MAXSIZE = 10


class CircularQueue:
    """FIFO queue over a fixed ring buffer holding ``capacity - 1`` items."""

    def __init__(self, capacity: int = MAXSIZE) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self.capacity = capacity
        self._data: list[Any] = [None] * capacity
        self._front = 0
        self._rear = 0

    def is_empty(self) -> bool:
        return self._front == self._rear

    def enqueue(self, x: Any) -> None:
        """Append ``x`` at the rear."""
        if (self._rear + 1) % self.capacity == self._front:
            raise OverflowError("queue is full")
        self._data[self._rear] = x
        self._rear = (self._rear + 1) % self.capacity

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        value = self.head()
        self._data[self._front] = None
        self._front = (self._front + 1) % self.capacity
        return value

    def head(self) -> Any:
        """Return the front element without removing it."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._data[self._front]

    def __len__(self) -> int:
        return (self._rear - self._front) % self.capacity

    def __repr__(self) -> str:
        return f"CircularQueue(len={len(self)}, capacity={self.capacity})"