"""A singly linked list of nodes."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class SListNode:
    """A list node holding a value and a link to the next node."""

    data: Any
    next: Optional["SListNode"] = None


class SList:
    """Singly linked list with head and after-node operations."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[SListNode] = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[SListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def push_back(self, value: Any) -> None:
        node = SListNode(value)
        if self.head is None:
            self.head = node
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node

    def push_front(self, value: Any) -> None:
        self.head = SListNode(value, self.head)

    def pop_back(self) -> None:
        """Remove the last node; does nothing on an empty list."""
        if self.head is None:
            return
        if self.head.next is None:
            self.head = None
            return
        prev = self.head
        while prev.next.next is not None:
            prev = prev.next
        prev.next = None

    def pop_front(self) -> None:
        """Remove the first node; does nothing on an empty list."""
        if self.head is not None:
            self.head = self.head.next

    def find(self, value: Any) -> Optional[SListNode]:
        """First node whose data equals ``value``, or None."""
        return next((node for node in self._nodes() if node.data == value), None)

    def insert_after(self, node: SListNode, value: Any) -> SListNode:
        """Link a new node holding ``value`` right after ``node`` and return it."""
        node.next = SListNode(value, node.next)
        return node.next

    def erase_after(self, node: SListNode) -> None:
        """Unlink the node after ``node``, if there is one."""
        if node.next is not None:
            node.next = node.next.next

    def clear(self) -> None:
        self.head = None


def find_kth_to_tail(head: Optional[SListNode], k: int) -> Optional[SListNode]:
    """The k-th node counted from the end (1 is the last), or None."""
    fast = head
    for _ in range(k):
        if fast is None:
            return None
        fast = fast.next
    slow = head
    while fast is not None:
        fast = fast.next
        slow = slow.next
    return slow


def main(argv: Optional[list] = None) -> int:
    """Run the linked-list demonstrations."""
    first = SList([1, 2, 3, 4])
    print(first)
    first.push_front(0)
    print(first)
    for _ in range(6):
        first.pop_back()
    print(first)

    second = SList([1, 2, 3, 4])
    found = second.find(3)
    if found is not None:
        second.insert_after(found, 30)
    print(second)
    for _ in range(4):
        second.pop_front()
    print(second)

    kth = find_kth_to_tail(SList([1, 2, 3, 4, 5]).head, 10)
    print("NULL" if kth is None else kth.data)
    return 0


if __name__ == "__main__":
    sys.exit(main())