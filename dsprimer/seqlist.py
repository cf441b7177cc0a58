"""Sequential list: a bounded array addressed by 1-based positions."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

INIT_SIZE = 10


class SeqList:
    """List with 1-based positions and a fixed capacity that can be grown."""

    def __init__(self, capacity: int = INIT_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def increase_size(self, extra: int) -> None:
        """Grow the capacity by ``extra`` slots, keeping the stored items."""
        if extra < 0:
            raise ValueError("extra must not be negative")
        self.capacity += extra

    def insert(self, i: int, e: Any) -> None:
        """Insert ``e`` so that it becomes the element at position ``i``."""
        if not 1 <= i <= len(self._items) + 1:
            raise IndexError(f"position {i} is out of range")
        if len(self._items) >= self.capacity:
            raise OverflowError("list is full")
        self._items.insert(i - 1, e)

    def delete(self, i: int) -> Any:
        """Remove and return the element at position ``i``."""
        self._check_position(i)
        return self._items.pop(i - 1)

    def locate(self, e: Any) -> int | None:
        """Return the 1-based position of the first ``e``, or None if absent."""
        try:
            return self._items.index(e) + 1
        except ValueError:
            return None

    def get(self, i: int) -> Any:
        """Return the element at position ``i``."""
        self._check_position(i)
        return self._items[i - 1]

    def is_empty(self) -> bool:
        return not self._items

    def _check_position(self, i: int) -> None:
        if not 1 <= i <= len(self._items):
            raise IndexError(f"position {i} is out of range")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SeqList({self._items!r}, capacity={self.capacity})"


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small list, print it, then delete its second element."""
    seq = SeqList()
    for position, value in enumerate((20, 30, 40), start=1):
        seq.insert(position, value)
    for position, value in enumerate(seq, start=1):
        print(f"第{position}个值:{value} ")
    try:
        removed = seq.delete(2)
    except IndexError:
        print("位序i不合法,删除失败")
    else:
        print(f"被删除的值:{removed}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())