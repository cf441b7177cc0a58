"""Singly linked list with a head node, plus node-level helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A list node: a value and a link to the next node."""

    data: Any = None
    next: Node | None = None


def insert_after(node: Node | None, e: Any) -> Node:
    """Link a new node holding ``e`` right after ``node`` and return it."""
    if node is None:
        raise ValueError("cannot insert after a missing node")
    new = Node(e, node.next)
    node.next = new
    return new


def insert_before(node: Node | None, e: Any) -> None:
    """Put ``e`` before ``node`` by copying ``node``'s value forward."""
    if node is None:
        raise ValueError("cannot insert before a missing node")
    node.next = Node(node.data, node.next)
    node.data = e


def delete_node(node: Node | None) -> None:
    """Remove ``node`` by pulling its successor's value into it.

    The last node of a list cannot be removed this way.
    """
    if node is None or node.next is None:
        raise ValueError("cannot delete a missing or last node")
    successor = node.next
    node.data = successor.data
    node.next = successor.next


class LinkedList:
    """Singly linked list whose positions are 1-based; position 0 is the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head = Node()
        tail = self.head
        for value in values:
            tail = insert_after(tail, value)

    @classmethod
    def from_head_insertion(cls, values: Iterable[Any]) -> LinkedList:
        """Build a list by inserting each value at the front (reverses order)."""
        lst = cls()
        for value in values:
            insert_after(lst.head, value)
        return lst

    @classmethod
    def from_tail_insertion(cls, values: Iterable[Any]) -> LinkedList:
        """Build a list by appending each value at the end."""
        return cls(values)

    def is_empty(self) -> bool:
        return self.head.next is None

    def node_at(self, i: int) -> Node | None:
        """Return the node at position ``i`` (0 is the head), or None."""
        if i < 0:
            return None
        node: Node | None = self.head
        for _ in range(i):
            if node is None:
                break
            node = node.next
        return node

    def locate(self, e: Any) -> Node | None:
        """Return the first node holding ``e``, or None."""
        node = self.head.next
        while node is not None and node.data != e:
            node = node.next
        return node

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` so it becomes the element at position ``i``."""
        prev = self.node_at(i - 1)
        if prev is None:
            raise IndexError(f"position {i} is out of range")
        insert_after(prev, e)

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        prev = self.node_at(i - 1)
        if prev is None or prev.next is None:
            raise IndexError(f"position {i} is out of range")
        target = prev.next
        prev.next = target.next
        return target.data

    def _nodes(self) -> Iterator[Node]:
        node = self.head.next
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"