from __future__ import annotations

import os
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from .graph import Graph
from .result import MSTResult


def circular_layout(n_vertices: int, radius: float = 1.0) -> np.ndarray:
    """Vertex ``i`` at angle ``2*pi*i/n``; a lone vertex sits at the origin."""
    if n_vertices <= 0:
        return np.zeros((0, 2), dtype=np.float64)
    if n_vertices == 1:
        return np.zeros((1, 2), dtype=np.float64)
    angles = 2.0 * np.pi * np.arange(n_vertices, dtype=np.float64) / n_vertices
    return radius * np.column_stack((np.cos(angles), np.sin(angles)))


def _undirected_pairs(result: MSTResult | None) -> set[tuple[int, int]]:
    if result is None:
        return set()
    return {(min(e.source, e.destination), max(e.source, e.destination)) for e in result.mst_edges}


def render_graph(
    graph: Graph,
    path: str | os.PathLike[str],
    *,
    mst: MSTResult | None = None,
    node_names: list[str] | None = None,
    show_weights: bool = True,
    figsize: tuple[float, float] = (8.0, 6.0),
    dpi: int = 100,
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pos = circular_layout(graph.vertex_count)
    highlighted = _undirected_pairs(mst)

    fig, ax = plt.subplots(figsize=figsize, dpi=dpi)
    try:
        for edge in graph.edges():
            (x0, y0), (x1, y1) = pos[edge.source], pos[edge.destination]
            key = (min(edge.source, edge.destination), max(edge.source, edge.destination))
            in_tree = key in highlighted
            ax.plot(
                [x0, x1],
                [y0, y1],
                color="green" if in_tree else "lightgrey",
                linewidth=2.5 if in_tree else 1.5,
                zorder=2 if in_tree else 1,
            )
            if show_weights:
                ax.text((x0 + x1) / 2, (y0 + y1) / 2, str(edge.weight), color="blue", fontsize=8, zorder=4)
        if graph.vertex_count:
            ax.scatter(pos[:, 0], pos[:, 1], s=300, color="red", zorder=3)
        for i, (x, y) in enumerate(pos):
            label = node_names[i] if node_names is not None and i < len(node_names) else str(i)
            ax.text(x, y, label, color="white", fontsize=8, ha="center", va="center", zorder=5)
        ax.set_title(
            f"Graph | Vertices: {graph.vertex_count} | Edges: {graph.edge_count} | "
            f"Connected: {str(graph.is_connected()).lower()}\nTotal Weight: {graph.total_weight()}",
            loc="left",
            fontsize=10,
        )
        ax.set_aspect("equal")
        ax.margins(0.1)
        ax.axis("off")
        fig.savefig(path, format="png")
    finally:
        plt.close(fig)
    return path
