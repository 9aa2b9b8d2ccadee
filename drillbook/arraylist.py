"""An array-backed list addressed by 0-based positions."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class ArrayList:
    """Ordered values with 0-based insert and erase and 1-based find."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r})"

    def push_back(self, value: Any) -> None:
        self._items.append(value)

    def push_front(self, value: Any) -> None:
        self._items.insert(0, value)

    def pop_front(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty list")
        return self._items.pop(0)

    def pop_back(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty list")
        return self._items.pop()

    def find(self, value: Any) -> Optional[int]:
        """1-based position of the first occurrence of ``value``, or None."""
        for position, item in enumerate(self._items, 1):
            if item == value:
                return position
        return None

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` at 0-based ``position`` (0 through the length)."""
        if not 0 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range 0..{len(self._items)}")
        self._items.insert(position, value)

    def erase(self, position: int) -> Any:
        """Remove and return the value at 0-based ``position``."""
        if not 0 <= position < len(self._items):
            raise IndexError(f"position {position} out of range")
        return self._items.pop(position)

    def format(self) -> str:
        return "".join(f"{item} " for item in self._items)