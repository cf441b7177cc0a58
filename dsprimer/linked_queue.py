"""Linked queue with a head node and a rear pointer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsprimer.linked_list import Node


class LinkedQueue:
    """Unbounded FIFO queue of linked nodes."""

    def __init__(self) -> None:
        self._front = Node()
        self._rear = self._front

    def is_empty(self) -> bool:
        return self._front is self._rear

    def enqueue(self, x: Any) -> None:
        """Append ``x`` at the rear."""
        node = Node(x)
        self._rear.next = node
        self._rear = node

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        first = self._front.next
        if first is None:
            raise IndexError("queue is empty")
        self._front.next = first.next
        if self._rear is first:
            self._rear = self._front
        return first.data

    def __iter__(self) -> Iterator[Any]:
        node = self._front.next
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"