"""Fixed sample graphs and a seeded generator of random connected inputs."""

from __future__ import annotations

from typing import Any

import numpy as np

from .graph import Graph

DEMO_EDGES = [
    (0, 1, 4),
    (0, 2, 2),
    (1, 2, 1),
    (1, 3, 5),
    (2, 3, 8),
    (2, 4, 10),
    (3, 4, 2),
    (3, 5, 6),
    (4, 5, 3),
]


def graph_from_edges(n_vertices: int, edges: list[tuple[int, int, int]]) -> Graph:
    graph = Graph(n_vertices)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    return graph


def demo_graph() -> Graph:
    return graph_from_edges(6, DEMO_EDGES)


def medium_graph() -> Graph:
    graph = Graph(12)
    for i in range(11):
        graph.add_edge(i, i + 1, (i * 2 + 1) % 10 + 1)
    for u, v, w in [(0, 5, 4), (3, 8, 3), (6, 11, 5), (2, 9, 2), (4, 10, 6), (1, 7, 7)]:
        graph.add_edge(u, v, w)
    return graph


def large_graph() -> Graph:
    graph = Graph(20)
    for i in range(20):
        for j in range(i + 1, min(i + 5, 20)):
            graph.add_edge(i, j, (i + j) % 10 + 1)
    return graph


def dense_graph(seed: int | None = 0, n_vertices: int = 15, keep: float = 0.8) -> Graph:
    rng = np.random.default_rng(seed)
    graph = Graph(n_vertices)
    for i in range(n_vertices):
        for j in range(i + 1, n_vertices):
            if rng.random() < keep:
                graph.add_edge(i, j, int(rng.integers(1, 21)))
    return graph


def named_samples(seed: int | None = 0) -> list[tuple[str, Graph]]:
    return [
        ("Small Graph (6 vertices)", demo_graph()),
        ("Medium Graph (12 vertices)", medium_graph()),
        ("Large Graph (20 vertices)", large_graph()),
        ("Dense Graph (15 vertices)", dense_graph(seed)),
    ]


def random_graph_description(
    graph_id: int,
    n_vertices: int,
    density: float = 0.3,
    *,
    max_weight: int = 100,
    seed: int | None = None,
) -> dict[str, Any]:
    """Random connected graph as an input-document entry.

    A random spanning tree guarantees connectivity; extra distinct pairs are
    then drawn until the requested edge density is reached.
    """
    if n_vertices < 1:
        raise ValueError("n_vertices must be >= 1")
    if not 0.0 <= density <= 1.0:
        raise ValueError("density must lie in [0, 1]")
    rng = np.random.default_rng(seed)
    names = [f"V{i}" for i in range(n_vertices)]
    order = rng.permutation(n_vertices)
    pairs: set[tuple[int, int]] = set()
    for k in range(1, n_vertices):
        a = int(order[k])
        b = int(order[rng.integers(0, k)])
        pairs.add((min(a, b), max(a, b)))
    max_pairs = n_vertices * (n_vertices - 1) // 2
    target = min(max_pairs, max(len(pairs), int(round(density * max_pairs))))
    while len(pairs) < target:
        a, b = (int(x) for x in rng.choice(n_vertices, size=2, replace=False))
        pairs.add((min(a, b), max(a, b)))
    edges = [
        {"from": names[a], "to": names[b], "weight": int(rng.integers(1, max_weight + 1))}
        for a, b in sorted(pairs)
    ]
    return {"id": graph_id, "nodes": names, "edges": edges}
