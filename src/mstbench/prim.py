from __future__ import annotations

import heapq
import itertools
import time

from .graph import Edge, Graph
from .result import MSTResult, OperationCounter, build_result

ALGORITHM_NAME = "Prim's Algorithm"


class _FrontierEntry:
    """Heap entry ordered by (weight, push sequence); counts every comparison."""

    __slots__ = ("weight", "seq", "edge", "counter")

    def __init__(self, edge: Edge, seq: int, counter: OperationCounter) -> None:
        self.weight = edge.weight
        self.seq = seq
        self.edge = edge
        self.counter = counter

    def __lt__(self, other: _FrontierEntry) -> bool:
        self.counter.comparisons += 1
        if self.weight != other.weight:
            return self.weight < other.weight
        return self.seq < other.seq


class PrimMST:
    """Prim's algorithm rooted at vertex 0 with a binary-heap frontier."""

    name = ALGORITHM_NAME

    def find_mst(self, graph: Graph) -> MSTResult:
        start = time.perf_counter()
        counter = OperationCounter()
        n = graph.vertex_count
        mst_edges: list[Edge] = []
        total_cost = 0
        if n == 0:
            return build_result(self.name, mst_edges, total_cost, time.perf_counter() - start, counter, n)

        in_mst = [False] * n
        frontier: list[_FrontierEntry] = []
        seq = itertools.count()

        def push(edge: Edge) -> None:
            heapq.heappush(frontier, _FrontierEntry(edge, next(seq), counter))
            counter.structure_ops += 1

        in_mst[0] = True
        counter.assignments += 1
        for edge in graph.adjacent_edges(0):
            push(edge)

        while frontier and len(mst_edges) < n - 1:
            edge = heapq.heappop(frontier).edge
            counter.structure_ops += 1

            u, v = edge.source, edge.destination
            counter.comparisons += 1
            if in_mst[u] and in_mst[v]:
                continue

            mst_edges.append(edge)
            total_cost += edge.weight
            counter.assignments += 2

            new_vertex = v if in_mst[u] else u
            in_mst[new_vertex] = True
            counter.assignments += 1

            for adjacent in graph.adjacent_edges(new_vertex):
                counter.comparisons += 1
                if not in_mst[adjacent.destination]:
                    push(adjacent)

        elapsed = time.perf_counter() - start
        return build_result(self.name, mst_edges, total_cost, elapsed, counter, n)
