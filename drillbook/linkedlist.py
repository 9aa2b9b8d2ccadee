"""A list with head insertion, positional deletion and middle/kth lookups."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, Optional


class LinkedList:
    """Ordered values supporting head/tail insertion and 1-based deletion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({self._items!r})"

    def insert_head(self, value: Any) -> None:
        self._items.insert(0, value)

    def insert_tail(self, value: Any) -> None:
        self._items.append(value)

    def kth_from_end(self, k: int) -> Optional[Any]:
        """Value of the k-th element counted from the end (1 is the last), or None."""
        if not 1 <= k <= len(self._items):
            return None
        return self._items[-k]

    def delete(self, k: int) -> Any:
        """Remove and return the element at 1-based position ``k``."""
        if not 1 <= k <= len(self._items):
            raise IndexError(f"no node at position {k}")
        return self._items.pop(k - 1)

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._items.reverse()

    def middle(self) -> Optional[Any]:
        """Middle value; with an even length the second of the two middles."""
        if not self._items:
            return None
        return self._items[len(self._items) // 2]

    def format(self) -> str:
        return "".join(f"{value}\t" for value in self._items)


def main(argv: Optional[list] = None) -> int:
    """Run the linked-list demonstration."""
    values = LinkedList()
    for value in range(1, 9):
        values.insert_head(value)
    print(values.format())
    print(values.middle())
    print(values.kth_from_end(4))
    try:
        values.delete(4)
    except IndexError:
        print("未找到你想删除的节点！")
    else:
        print("删除成功！")
    print(values.format())
    values.reverse()
    print(values.format())
    values.reverse()
    print(values.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())