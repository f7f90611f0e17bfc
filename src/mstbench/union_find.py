"""Union-Find data structure with path compression and union by rank."""

from __future__ import annotations

import numpy as np

from .result import OperationCounter


class UnionFind:
    """Disjoint sets over ``range(size)`` that report their work to a counter.

    ``find`` charges one comparison per visited node (root included) and one
    assignment per non-root node it re-points at the root. ``union`` charges
    the root equality test and one to two comparisons plus one to two
    assignments for the rank decision.
    """

    def __init__(self, size: int, counter: OperationCounter | None = None) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.parent = np.arange(size, dtype=np.int64)
        self.rank = np.zeros(size, dtype=np.int64)
        self.counter = counter if counter is not None else OperationCounter()

    def __len__(self) -> int:
        return int(self.parent.size)

    def find(self, x: int) -> int:
        parent = self.parent
        path: list[int] = []
        root = int(x)
        while parent[root] != root:
            path.append(root)
            root = int(parent[root])
        for node in path:
            parent[node] = root
        self.counter.comparisons += len(path) + 1
        self.counter.assignments += len(path)
        return root

    def union(self, a: int, b: int) -> bool:
        ra = self.find(a)
        rb = self.find(b)
        counter = self.counter
        counter.comparisons += 1
        if ra == rb:
            return False
        rank = self.rank
        parent = self.parent
        counter.comparisons += 1
        if rank[ra] < rank[rb]:
            counter.assignments += 1
            parent[ra] = rb
        elif rank[ra] > rank[rb]:
            counter.comparisons += 1
            counter.assignments += 1
            parent[rb] = ra
        else:
            counter.comparisons += 1
            counter.assignments += 2
            parent[rb] = ra
            rank[ra] += 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)


__all__ = ["UnionFind"]
