"""Disjoint sets over ``1..n`` with path compression and union by size."""

from __future__ import annotations


class UnionFind:
    """A union-find structure over the elements ``1..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("element count must be non-negative")
        self._n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def _check(self, x: int) -> None:
        if not 1 <= x <= self._n:
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the root of ``x``'s set, compressing the path to it."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, s1: int, s2: int) -> None:
        """Merge the sets of ``s1`` and ``s2``; the larger set's root wins ties go to ``s1``."""
        r1 = self.find(s1)
        r2 = self.find(s2)
        if r1 == r2:
            return
        if self._size[r1] >= self._size[r2]:
            self._size[r1] += self._size[r2]
            self._parent[r2] = r1
        else:
            self._size[r2] += self._size[r1]
            self._parent[r1] = r2

    def same_component(self, s1: int, s2: int) -> bool:
        return self.find(s1) == self.find(s2)

    def size_of(self, x: int) -> int:
        """Return the number of elements in ``x``'s set."""
        return self._size[self.find(x)]

    def __len__(self) -> int:
        return self._n