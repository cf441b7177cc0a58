"""Circular singly and doubly linked lists built around a head node."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsprimer.doubly_list import DNode
from dsprimer.linked_list import Node, insert_after as _link_after


class CircularSinglyList:
    """Singly linked ring whose last node points back at the head."""

    def __init__(self) -> None:
        self.head = Node()
        self.head.next = self.head

    def is_empty(self) -> bool:
        return self.head.next is self.head

    def is_tail(self, node: Node) -> bool:
        """Return True if ``node`` is the last node before the head."""
        return node.next is self.head

    def insert_after(self, node: Node | None, value: Any) -> Node:
        """Link a new node holding ``value`` after ``node`` and return it."""
        return _link_after(node, value)

    def __iter__(self) -> Iterator[Any]:
        node = self.head.next
        while node is not self.head:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"CircularSinglyList({list(self)!r})"


class CircularDoublyList:
    """Doubly linked ring whose head links to itself when empty."""

    def __init__(self) -> None:
        self.head = DNode()
        self.head.prior = self.head
        self.head.next = self.head

    def is_empty(self) -> bool:
        return self.head.next is self.head

    def is_tail(self, node: DNode) -> bool:
        """Return True if ``node`` is the last node before the head."""
        return node.next is self.head

    def insert_after(self, node: DNode | None, value: Any) -> DNode:
        """Link a new node holding ``value`` after ``node`` and return it."""
        if node is None:
            raise ValueError("node is required")
        new = DNode(value)
        new.next = node.next
        node.next.prior = new
        new.prior = node
        node.next = new
        return new

    def delete_after(self, node: DNode | None) -> Any:
        """Unlink the data node following ``node`` and return its value."""
        if node is None:
            raise ValueError("node is required")
        target = node.next
        if target is self.head or target is node:
            raise IndexError("no data node follows")
        node.next = target.next
        target.next.prior = node
        target.prior = target.next = None
        return target.data

    def __iter__(self) -> Iterator[Any]:
        node = self.head.next
        while node is not self.head:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"CircularDoublyList({list(self)!r})"