"""Reading graph descriptions and writing comparison results as JSON."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

from .graph import Graph, node_name
from .result import MSTResult


@dataclass
class GraphData:
    graph_id: int
    node_names: list[str]
    graph: Graph


@dataclass
class AlgorithmRecord:
    mst_edges: list[tuple[str, str, int]] = field(default_factory=list)
    total_cost: int = 0
    operations_count: int = 0
    execution_time_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "mst_edges": [{"from": u, "to": v, "weight": w} for u, v, w in self.mst_edges],
            "total_cost": self.total_cost,
            "operations_count": self.operations_count,
            "execution_time_ms": self.execution_time_ms,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AlgorithmRecord:
        return cls(
            mst_edges=[(e["from"], e["to"], int(e["weight"])) for e in data.get("mst_edges", [])],
            total_cost=int(data["total_cost"]),
            operations_count=int(data["operations_count"]),
            execution_time_ms=float(data["execution_time_ms"]),
        )


@dataclass
class ComparisonRecord:
    graph_id: int
    vertices: int
    edges: int
    prim: AlgorithmRecord
    kruskal: AlgorithmRecord

    def to_dict(self) -> dict[str, Any]:
        return {
            "graph_id": self.graph_id,
            "input_stats": {"vertices": self.vertices, "edges": self.edges},
            "prim": self.prim.to_dict(),
            "kruskal": self.kruskal.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ComparisonRecord:
        stats = data["input_stats"]
        return cls(
            graph_id=int(data["graph_id"]),
            vertices=int(stats["vertices"]),
            edges=int(stats["edges"]),
            prim=AlgorithmRecord.from_dict(data["prim"]),
            kruskal=AlgorithmRecord.from_dict(data["kruskal"]),
        )


def parse_graphs(document: dict[str, Any]) -> list[GraphData]:
    graphs = document.get("graphs")
    if graphs is None:
        raise ValueError("input document has no 'graphs' list")
    out: list[GraphData] = []
    for entry in graphs:
        nodes = [str(name) for name in entry.get("nodes", [])]
        graph = Graph.from_description(nodes, entry.get("edges", []))
        out.append(GraphData(int(entry["id"]), nodes, graph))
    return out


def read_input(path: str | os.PathLike[str]) -> list[GraphData]:
    with open(path, encoding="utf-8") as fh:
        return parse_graphs(json.load(fh))


def to_algorithm_record(result: MSTResult, node_names: Sequence[str]) -> AlgorithmRecord:
    return AlgorithmRecord(
        mst_edges=[
            (node_name(e.source, node_names), node_name(e.destination, node_names), e.weight)
            for e in result.mst_edges
        ],
        total_cost=result.total_cost,
        operations_count=result.operations_count,
        execution_time_ms=round(result.execution_time_ms, 3),
    )


def to_comparison_record(
    graph_id: int,
    node_names: Sequence[str],
    prim: MSTResult,
    kruskal: MSTResult,
    edge_count: int,
) -> ComparisonRecord:
    return ComparisonRecord(
        graph_id=graph_id,
        vertices=prim.vertex_count,
        edges=edge_count,
        prim=to_algorithm_record(prim, node_names),
        kruskal=to_algorithm_record(kruskal, node_names),
    )


def write_output(path: str | os.PathLike[str], records: Iterable[ComparisonRecord]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    document = {"results": [record.to_dict() for record in records]}
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(document, fh, indent=2)
        fh.write("\n")
    return path


def read_output(path: str | os.PathLike[str]) -> list[ComparisonRecord]:
    with open(path, encoding="utf-8") as fh:
        document = json.load(fh)
    return [ComparisonRecord.from_dict(item) for item in document.get("results", [])]


def write_input(path: str | os.PathLike[str], graphs: Iterable[dict[str, Any]]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        json.dump({"graphs": list(graphs)}, fh, indent=2)
        fh.write("\n")
    return path
