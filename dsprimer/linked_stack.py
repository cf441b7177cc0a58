"""Linked stack: the top of the stack is the first node."""

from __future__ import annotations

from typing import Any

from dsprimer.linked_list import Node


class LinkedStack:
    """Unbounded LIFO stack of linked nodes."""

    def __init__(self) -> None:
        self._top: Node | None = None

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, e: Any) -> None:
        self._top = Node(e, self._top)

    def pop(self) -> Any:
        """Remove and return the top element."""
        node = self._top
        if node is None:
            raise IndexError("stack is empty")
        self._top = node.next
        return node.data

    def top(self) -> Any:
        """Return the top element without removing it."""
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.data

    def __len__(self) -> int:
        count = 0
        node = self._top
        while node is not None:
            count += 1
            node = node.next
        return count

    def __repr__(self) -> str:
        return f"LinkedStack(len={len(self)})"