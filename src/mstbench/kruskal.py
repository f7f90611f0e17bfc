from __future__ import annotations

import math
import time

import numpy as np

from .graph import Edge, Graph
from .result import MSTResult, OperationCounter, build_result
from .union_find import UnionFind

ALGORITHM_NAME = "Kruskal's Algorithm"


def sort_comparison_estimate(n_edges: int) -> int:
    """Analytic ``n ln n`` stand-in for the comparisons made by the edge sort."""
    if n_edges <= 0:
        return 0
    return int(n_edges * math.log(n_edges))


def sort_edges(edges: list[Edge]) -> list[Edge]:
    if not edges:
        return []
    weights = np.fromiter((edge.weight for edge in edges), count=len(edges), dtype=np.int64)
    order = np.argsort(weights, kind="stable")
    return [edges[i] for i in order.tolist()]


class KruskalMST:
    """Kruskal's algorithm over a stable weight ordering of the inserted edges."""

    name = ALGORITHM_NAME

    def find_mst(self, graph: Graph) -> MSTResult:
        start = time.perf_counter()
        counter = OperationCounter()
        n = graph.vertex_count
        edges = sort_edges(graph.edges())
        counter.comparisons += sort_comparison_estimate(len(edges))

        uf = UnionFind(n, counter)
        counter.assignments += n

        mst_edges: list[Edge] = []
        total_cost = 0
        for edge in edges:
            counter.comparisons += 1
            if len(mst_edges) == n - 1:
                break

            root_u = uf.find(edge.source)
            root_v = uf.find(edge.destination)
            counter.structure_ops += 2

            counter.comparisons += 1
            if root_u != root_v:
                mst_edges.append(edge)
                total_cost += edge.weight
                uf.union(root_u, root_v)
                counter.assignments += 3
                counter.structure_ops += 1

        elapsed = time.perf_counter() - start
        return build_result(self.name, mst_edges, total_cost, elapsed, counter, n)
