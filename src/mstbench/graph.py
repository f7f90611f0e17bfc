"""Weighted undirected graph stored as adjacency lists."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

UNKNOWN_NODE = "Unknown"


class InvalidVertexError(ValueError):
    """An edge or lookup references a vertex outside ``[0, vertex_count)``."""


class InvalidWeightError(ValueError):
    """A negative edge weight was supplied."""


class UnknownNodeError(KeyError):
    """A graph description references a node name that was never declared."""


@dataclass(frozen=True)
class Edge:
    source: int
    destination: int
    weight: int

    def __post_init__(self) -> None:
        if self.source < 0 or self.destination < 0:
            raise InvalidVertexError("Vertex index must be non-negative")
        if self.weight < 0:
            raise InvalidWeightError("Edge weight must be non-negative")

    # Ordering looks at the weight only, equality at all three fields.
    def __lt__(self, other: Edge) -> bool:
        return self.weight < other.weight

    def __le__(self, other: Edge) -> bool:
        return self.weight <= other.weight

    def __gt__(self, other: Edge) -> bool:
        return self.weight > other.weight

    def __ge__(self, other: Edge) -> bool:
        return self.weight >= other.weight

    def other_vertex(self, vertex: int) -> int:
        if vertex == self.source:
            return self.destination
        if vertex == self.destination:
            return self.source
        raise ValueError(f"Vertex {vertex} is not incident to {self}")

    def is_incident_to(self, vertex: int) -> bool:
        return vertex == self.source or vertex == self.destination

    def reversed(self) -> Edge:
        return Edge(self.destination, self.source, self.weight)

    def __str__(self) -> str:
        return f"Edge{{{self.source}-{self.destination}, weight={self.weight}}}"


class Graph:
    """Append-only adjacency-list graph.

    Every insertion is stored once in the edge list and twice in the
    adjacency buckets (``u -> v`` in ``u``'s bucket and ``v -> u`` in
    ``v``'s bucket). Accessors hand out copies so that several algorithm
    runs can share one graph.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must be non-negative")
        self._vertex_count = int(vertex_count)
        self._edges: list[Edge] = []
        self._adjacency: list[list[Edge]] = [[] for _ in range(self._vertex_count)]

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._vertex_count:
            raise InvalidVertexError(
                f"Invalid vertex index {vertex} for a graph with {self._vertex_count} vertices"
            )

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        try:
            source = operator.index(source)
            destination = operator.index(destination)
        except TypeError:
            raise InvalidVertexError(
                f"Vertex indices must be integers, got {source!r} and {destination!r}"
            ) from None
        try:
            weight = operator.index(weight)
        except TypeError:
            raise InvalidWeightError(f"Edge weight must be an integer, got {weight!r}") from None
        self._check_vertex(source)
        self._check_vertex(destination)
        if weight < 0:
            raise InvalidWeightError(f"Edge weight must be non-negative, got {weight}")
        # Nothing is stored until both directions have been built.
        forward = Edge(source, destination, weight)
        backward = Edge(destination, source, weight)
        source_bucket = self._adjacency[source]
        destination_bucket = self._adjacency[destination]
        self._edges.append(forward)
        source_bucket.append(forward)
        destination_bucket.append(backward)

    def adjacent_edges(self, vertex: int) -> list[Edge]:
        self._check_vertex(vertex)
        return list(self._adjacency[vertex])

    def adjacent_vertices(self, vertex: int) -> list[int]:
        return [edge.other_vertex(vertex) for edge in self.adjacent_edges(vertex)]

    def edges(self) -> list[Edge]:
        return list(self._edges)

    def total_weight(self) -> int:
        return sum(edge.weight for edge in self._edges)

    def is_connected(self) -> bool:
        n = self._vertex_count
        if n == 0:
            return True
        visited = [False] * n
        visited[0] = True
        stack = [0]
        count = 1
        while stack:
            vertex = stack.pop()
            for edge in self._adjacency[vertex]:
                neighbor = edge.destination
                if not visited[neighbor]:
                    visited[neighbor] = True
                    count += 1
                    stack.append(neighbor)
        return count == n

    @classmethod
    def from_description(
        cls,
        nodes: Sequence[str],
        edges: Iterable[Mapping[str, object]],
    ) -> Graph:
        """Build a graph from named nodes and ``{"from", "to", "weight"}`` edges."""
        index = {name: i for i, name in enumerate(nodes)}
        graph = cls(len(nodes))
        for edge in edges:
            endpoints = (edge["from"], edge["to"])
            for name in endpoints:
                if name not in index:
                    raise UnknownNodeError(f"Edge references undefined node {name!r}")
            graph.add_edge(index[endpoints[0]], index[endpoints[1]], int(edge["weight"]))
        return graph

    def __repr__(self) -> str:
        return f"Graph(V={self._vertex_count}, E={len(self._edges)})"


def node_name(index: int, names: Sequence[str]) -> str:
    if 0 <= index < len(names):
        return names[index]
    return UNKNOWN_NODE
