"""Disjoint-set forests."""

from __future__ import annotations


class SimpleUnionFind:
    """Union-find without path compression or balancing."""

    def __init__(self, n: int) -> None:
        self.parents: list[int] = list(range(n))

    def union(self, primary: int, standby: int) -> int:
        """Attach the tree of ``standby`` under the root of ``primary``; return that root."""
        primary_root = self.find(primary)
        standby_root = self.find(standby)
        self.parents[standby_root] = primary_root
        return primary_root

    def find(self, x: int) -> int:
        """Root of ``x``."""
        while self.parents[x] != x:
            x = self.parents[x]
        return x


class UnionFind:
    """Union-find with path compression and component sizes."""

    def __init__(self, n: int) -> None:
        self.parents: list[int] = list(range(n))
        self._size = [1] * n

    def union(self, primary: int, standby: int) -> bool:
        """Merge two trees under the root of ``primary``; False if already joined."""
        primary_root = self.find(primary)
        standby_root = self.find(standby)
        if primary_root == standby_root:
            return False
        self.parents[standby_root] = primary_root
        self._size[primary_root] += self._size[standby_root]
        return True

    def find(self, x: int) -> int:
        """Root of ``x``, compressing the path on the way."""
        root = self.root(x)
        while self.parents[x] != root:
            self.parents[x], x = root, self.parents[x]
        return root

    def connected_components(self) -> dict[int, list[int]]:
        """Map each root to the members of its component, in ascending order."""
        components: dict[int, list[int]] = {}
        for i in range(len(self.parents)):
            components.setdefault(self.find(i), []).append(i)
        return components

    def root(self, x: int) -> int:
        """Root of ``x`` without changing the forest."""
        while self.parents[x] != x:
            x = self.parents[x]
        return x

    def equiv(self, x: int, y: int) -> bool:
        """True if ``x`` and ``y`` are in the same component."""
        return self.root(x) == self.root(y)

    def size(self, x: int) -> int:
        """Number of members in the component of ``x``."""
        return self._size[self.root(x)]


class MergeTechnique:
    """Union-find that keeps each component's members, merging smaller into larger."""

    def __init__(self, n: int) -> None:
        self.parents: list[int] = list(range(n))
        self._members: dict[int, set[int]] = {i: {i} for i in range(n)}

    def union(self, a: int, b: int) -> bool:
        """Merge the groups of ``a`` and ``b``; False if already joined."""
        a_root, b_root = self.find(a), self.find(b)
        if a_root == b_root:
            return False
        if self.size(a_root) <= self.size(b_root):
            small, large = a_root, b_root
        else:
            small, large = b_root, a_root
        self.parents[small] = large
        self._members[large] |= self._members.pop(small)
        return True

    def find(self, x: int) -> int:
        """Root of ``x``, compressing the path on the way."""
        root = x
        while self.parents[root] != root:
            root = self.parents[root]
        while self.parents[x] != root:
            self.parents[x], x = root, self.parents[x]
        return root

    def same_group(self, x: int) -> set[int]:
        """Members of the group of ``x``."""
        return self._members[self.find(x)]

    def size(self, x: int) -> int:
        """Number of members in the group of ``x``."""
        return len(self.same_group(x))