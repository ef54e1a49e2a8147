"""Binary min-heaps ordered by a key function."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


class MinHeap:
    """Binary min-heap with iterative sifting."""

    def __init__(self, key: Callable[[Any], Any], items: Iterable[Any] = ()) -> None:
        self._key = key
        self._v: list[Any] = list(items)
        for pos in reversed(range(len(self._v) // 2)):
            self.down_heap(pos)

    def __len__(self) -> int:
        return len(self._v)

    def push(self, item: Any) -> None:
        """Add ``item`` to the heap."""
        self._v.append(item)
        self.up_heap(len(self._v) - 1)

    def pop(self) -> Any:
        """Remove and return the item with the smallest key."""
        if not self._v:
            raise IndexError("pop from empty heap")
        last = self._v.pop()
        if not self._v:
            return last
        popped, self._v[0] = self._v[0], last
        self.down_heap(0)
        return popped

    def peek(self) -> Any:
        """Return the item with the smallest key without removing it."""
        if not self._v:
            raise IndexError("peek into empty heap")
        return self._v[0]

    def down_heap(self, pos: int) -> None:
        """Move the item at ``pos`` down until the heap property holds."""
        v, key = self._v, self._key
        current = pos
        while current < len(v) // 2:
            child = 2 * current + 1
            if child + 1 < len(v) and key(v[child]) > key(v[child + 1]):
                child += 1
            if key(v[current]) > key(v[child]):
                v[current], v[child] = v[child], v[current]
                current = child
            else:
                break

    def up_heap(self, pos: int) -> None:
        """Move the item at ``pos`` up until the heap property holds."""
        v, key = self._v, self._key
        current = pos
        while 0 < current < len(v):
            parent = (current - 1) // 2
            if key(v[parent]) > key(v[current]):
                v[current], v[parent] = v[parent], v[current]
                current = parent
            else:
                break


class BHeapSet:
    """Binary min-heap with recursive sifting."""

    def __init__(self, key: Callable[[Any], Any], items: Iterable[Any] = ()) -> None:
        self._key = key
        self._v: list[Any] = list(items)
        self.heapify()

    def __len__(self) -> int:
        return len(self._v)

    def push(self, item: Any) -> None:
        """Add ``item`` to the heap."""
        self._v.append(item)
        self.up_heap(len(self._v) - 1)

    def pop(self) -> Any:
        """Remove and return the item with the smallest key."""
        n = len(self._v)
        if n == 0:
            raise IndexError("pop from empty heap")
        self._v[0], self._v[n - 1] = self._v[n - 1], self._v[0]
        popped = self._v.pop()
        if n > 1:
            self.down_heap(0)
        return popped

    def peek(self) -> Any:
        """Return the item with the smallest key without removing it."""
        if not self._v:
            raise IndexError("peek into empty heap")
        return self._v[0]

    def heapify(self) -> None:
        """Restore the heap property over the whole array."""
        for pos in reversed(range(len(self._v) // 2)):
            self.down_heap(pos)

    def down_heap(self, pos: int) -> None:
        """Restore the heap property in the subtree rooted at ``pos``."""
        v, key = self._v, self._key
        for child in (2 * pos + 1, 2 * pos + 2):
            if child < len(v) and key(v[pos]) > key(v[child]):
                v[pos], v[child] = v[child], v[pos]
                self.down_heap(child)

    def up_heap(self, pos: int) -> None:
        """Move the item at ``pos`` towards the root while it is smaller."""
        if pos != 0:
            parent = (pos - 1) // 2
            if self._key(self._v[parent]) > self._key(self._v[pos]):
                self._v[pos], self._v[parent] = self._v[parent], self._v[pos]
                self.up_heap(parent)