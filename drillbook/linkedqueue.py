"""A FIFO queue of values."""

from __future__ import annotations

import sys
from collections import deque
from typing import Any, Iterable, Iterator, Optional


class LinkedQueue:
    """First-in first-out queue: push at the back, pop from the front."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise IndexError("back of empty queue")
        return self._items[-1]

    def format(self) -> str:
        return "front -> " + "".join(f"{item} -> " for item in self._items)


def main(argv: Optional[list] = None) -> int:
    """Fill a queue with 1..6 and print it."""
    queue = LinkedQueue()
    for value in range(1, 7):
        queue.push(value)
    print(queue.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())