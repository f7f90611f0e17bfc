from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .graph import Edge


@dataclass
class OperationCounter:
    """Work counters owned by a single ``find_mst`` invocation."""

    comparisons: int = 0
    assignments: int = 0
    structure_ops: int = 0

    @property
    def total(self) -> int:
        return self.comparisons + self.assignments + self.structure_ops

    def snapshot(self) -> CounterSnapshot:
        return CounterSnapshot(self.comparisons, self.assignments, self.structure_ops)


@dataclass(frozen=True)
class CounterSnapshot:
    """Read-only copy of an ``OperationCounter`` taken when a run finishes."""

    comparisons: int = 0
    assignments: int = 0
    structure_ops: int = 0

    @property
    def total(self) -> int:
        return self.comparisons + self.assignments + self.structure_ops


@dataclass(frozen=True)
class MSTResult:
    algorithm_name: str
    mst_edges: tuple[Edge, ...]
    total_cost: int
    execution_time_ms: float
    operations_count: int
    vertex_count: int
    counters: CounterSnapshot = field(default_factory=CounterSnapshot, compare=False, repr=False)

    def __post_init__(self) -> None:
        # Freeze whatever sequence was handed in.
        object.__setattr__(self, "mst_edges", tuple(self.mst_edges))

    @property
    def mst_edge_count(self) -> int:
        return len(self.mst_edges)

    def has_correct_edge_count(self) -> bool:
        return len(self.mst_edges) == self.vertex_count - 1

    def is_valid_mst(self) -> bool:
        return self.has_correct_edge_count() and self.total_cost >= 0

    def weights(self) -> list[int]:
        return sorted(edge.weight for edge in self.mst_edges)

    def __str__(self) -> str:
        return (
            f"{self.algorithm_name}: Cost={self.total_cost}, Time={self.execution_time_ms:.3f}ms, "
            f"Operations={self.operations_count}, Edges={len(self.mst_edges)}/{self.vertex_count - 1}"
        )

    def detailed_report(self) -> str:
        lines = [
            f"{self.algorithm_name} Analysis:",
            f"  Total Cost: {self.total_cost}",
            f"  Execution Time: {self.execution_time_ms:.3f} ms",
            f"  Operations Count: {self.operations_count}",
            f"  MST Edges: {len(self.mst_edges)}/{self.vertex_count - 1}",
            f"  Valid MST: {str(self.is_valid_mst()).lower()}",
            "  Selected Edges:",
        ]
        lines.extend(f"    {edge}" for edge in self.mst_edges)
        return "\n".join(lines) + "\n"


def build_result(
    algorithm_name: str,
    mst_edges: Sequence[Edge],
    total_cost: int,
    elapsed_s: float,
    counter: OperationCounter,
    vertex_count: int,
) -> MSTResult:
    return MSTResult(
        algorithm_name=algorithm_name,
        mst_edges=tuple(mst_edges),
        total_cost=int(total_cost),
        execution_time_ms=max(0.0, elapsed_s * 1000.0),
        operations_count=counter.total,
        vertex_count=vertex_count,
        counters=counter.snapshot(),
    )
