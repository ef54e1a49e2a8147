"""Singly linked list usable as a stack and as a queue."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    item: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list with O(1) push, pop, enqueue and append."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        """True if the list holds no item."""
        return self._head is None

    def peek_head(self) -> Any:
        """Return the first item without removing it."""
        if self._head is None:
            raise IndexError("peek into empty list")
        return self._head.item

    def peek_tail(self) -> Any:
        """Return the last item without removing it."""
        if self._tail is None:
            raise IndexError("peek into empty list")
        return self._tail.item

    def push(self, item: Any) -> None:
        """Add ``item`` at the front of the list."""
        node = _Node(item, self._head)
        if self._head is None:
            self._tail = node
        self._head = node
        self._len += 1

    def pop(self) -> Any:
        """Remove and return the first item."""
        head = self._head
        if head is None:
            raise IndexError("pop from empty list")
        self._head = head.next
        if self._head is None:
            self._tail = None
        self._len -= 1
        return head.item

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the end of the list."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._len += 1

    def dequeue(self) -> Any:
        """Remove and return the first item."""
        return self.pop()

    def append(self, other: LinkedList) -> None:
        """Move every node of ``other`` to the end of this list, emptying ``other``."""
        if other._head is not None:
            if self._tail is None:
                self._head = other._head
            else:
                self._tail.next = other._head
            self._tail = other._tail
        self._len += other._len
        other._head = other._tail = None
        other._len = 0

    def extend(self, items: Iterable[Any]) -> None:
        """Enqueue every item of ``items`` in order."""
        for item in items:
            self.enqueue(item)