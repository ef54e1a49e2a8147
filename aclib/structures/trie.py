"""Trie (prefix tree) over sequences of hashable elements."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from itertools import chain
from typing import Any


class TrieTree:
    """Prefix tree storing keys as paths of elements."""

    def __init__(self) -> None:
        self._root: dict[Hashable, Any] = {}
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"TrieTree(len={self._len}, root={self._root!r})"

    def _descend(self, key: Iterable[Hashable]) -> tuple[dict, Iterator[Hashable] | None]:
        """Follow ``key`` as far as possible; return the node and the unmatched rest."""
        node = self._root
        it = iter(key)
        for k in it:
            child = node.get(k)
            if child is None:
                return node, chain([k], it)
            node = child
        return node, None

    def insert(self, key: Iterable[Hashable]) -> bool:
        """Insert ``key``; return False if its whole path already exists."""
        node, rest = self._descend(key)
        if rest is None:
            return False
        for k in rest:
            node = node.setdefault(k, {})
        self._len += 1
        return True

    def contains(self, key: Iterable[Hashable]) -> bool:
        """True if ``key`` ends exactly at a leaf of the trie."""
        node, rest = self._descend(key)
        return not node and rest is None

    def __contains__(self, key: Iterable[Hashable]) -> bool:
        return self.contains(key)