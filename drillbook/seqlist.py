"""A sequence list addressed by 1-based positions."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, Optional


class SeqList:
    """Ordered values with 1-based positional insert, erase, find and modify."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SeqList({self._items!r})"

    def _check(self, position: int) -> None:
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range 1..{len(self._items)}")

    def push_back(self, value: Any) -> None:
        self._items.append(value)

    def pop_back(self) -> None:
        """Drop the last value; does nothing on an empty list."""
        if self._items:
            self._items.pop()

    def push_front(self, value: Any) -> None:
        self._items.insert(0, value)

    def pop_front(self) -> None:
        if not self._items:
            raise IndexError("pop from empty list")
        del self._items[0]

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        self._check(position)
        self._items.insert(position - 1, value)

    def erase(self, position: int) -> None:
        self._check(position)
        del self._items[position - 1]

    def find(self, value: Any) -> Optional[int]:
        """1-based position of the first occurrence of ``value``, or None."""
        for position, item in enumerate(self._items, 1):
            if item == value:
                return position
        return None

    def modify(self, position: int, value: Any) -> None:
        self._check(position)
        self._items[position - 1] = value

    def format(self) -> str:
        return "".join(f"{item}   " for item in self._items)


def main(argv: Optional[list] = None) -> int:
    """Run the sequence-list demonstration."""
    seq = SeqList()
    for value in (5, 4, 3, 2, 1, 0):
        seq.push_back(value)
    print(seq.format())
    seq.pop_back()
    seq.pop_back()
    print(seq.format())
    seq.push_front(666)
    print(seq.format())
    seq.insert(2, 999)
    print(seq.format())
    seq.pop_front()
    print(seq.format())
    seq.erase(2)
    print(seq.format())
    for value in (1, 2, 3):
        position = seq.find(value)
        print(-1 if position is None else position)
    seq.modify(3, 111)
    print(seq.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())