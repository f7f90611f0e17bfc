"""Prim's and Kruskal's minimum spanning trees with comparable work counters."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS = {
    "Edge": "graph",
    "Graph": "graph",
    "InvalidVertexError": "graph",
    "InvalidWeightError": "graph",
    "UnknownNodeError": "graph",
    "UnionFind": "union_find",
    "OperationCounter": "result",
    "CounterSnapshot": "result",
    "MSTResult": "result",
    "PrimMST": "prim",
    "KruskalMST": "kruskal",
    "compare_algorithms": "core",
    "run_pipeline": "core",
}

__all__ = sorted(_EXPORTS)
__version__ = "0.1.0"


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in _EXPORTS:
        module = import_module(f"mstbench.{_EXPORTS[name]}")
        return getattr(module, name)
    raise AttributeError(f"module 'mstbench' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
