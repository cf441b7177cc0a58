"""Doubly linked list with a head node whose predecessor is always None."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DNode:
    """A node linked to both its predecessor and its successor."""

    data: Any = None
    prior: DNode | None = field(default=None, repr=False)
    next: DNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """Doubly linked list addressed through its nodes; ``head`` holds no data."""

    def __init__(self) -> None:
        self.head = DNode()

    def is_empty(self) -> bool:
        return self.head.next is None

    def insert_after(self, node: DNode | None, new: DNode | None) -> DNode:
        """Link ``new`` right after ``node`` and return it."""
        if node is None or new is None:
            raise ValueError("both nodes are required")
        new.next = node.next
        if node.next is not None:
            node.next.prior = new
        new.prior = node
        node.next = new
        return new

    def insert_before(self, node: DNode | None, new: DNode | None) -> DNode:
        """Link ``new`` right before ``node`` and return it."""
        if node is None or new is None:
            raise ValueError("both nodes are required")
        if node.prior is None:
            raise ValueError("node has no predecessor")
        new.prior = node.prior
        node.prior.next = new
        new.next = node
        node.prior = new
        return new

    def delete_after(self, node: DNode | None) -> Any:
        """Unlink the successor of ``node`` and return its value."""
        if node is None:
            raise ValueError("node is required")
        target = node.next
        if target is None:
            raise IndexError("node has no successor")
        node.next = target.next
        if target.next is not None:
            target.next.prior = node
        target.prior = target.next = None
        return target.data

    def delete_before(self, node: DNode | None) -> Any:
        """Unlink the predecessor of ``node`` and return its value."""
        if node is None:
            raise ValueError("node is required")
        target = node.prior
        if target is None or target is self.head:
            raise IndexError("node has no data predecessor")
        node.prior = target.prior
        if target.prior is not None:
            target.prior.next = node
        target.prior = target.next = None
        return target.data

    def clear(self) -> None:
        """Remove every data node, leaving the list empty."""
        while self.head.next is not None:
            self.delete_after(self.head)

    def __iter__(self) -> Iterator[Any]:
        node = self.head.next
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"