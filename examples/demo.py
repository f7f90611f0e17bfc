"""Small demonstration comparing Prim's and Kruskal's algorithms."""

from __future__ import annotations

import pathlib

from mstbench import KruskalMST, PrimMST
from mstbench.analysis import format_summary
from mstbench.core import process_graphs
from mstbench.jsonio import parse_graphs
from mstbench.samples import demo_graph, random_graph_description


def make_dataset(seed: int = 0) -> dict:
    sizes = [8, 25, 60, 150, 400]
    return {
        "graphs": [
            random_graph_description(i + 1, n, density=0.15, seed=seed + i)
            for i, n in enumerate(sizes)
        ]
    }


def main() -> None:
    graph = demo_graph()
    prim = PrimMST().find_mst(graph)
    kruskal = KruskalMST().find_mst(graph)
    print(prim)
    print(kruskal)

    records = process_graphs(parse_graphs(make_dataset()))
    print(format_summary(records))

    # Drawing needs matplotlib; skip quietly when it is missing.
    try:
        from mstbench.visualize import render_graph
    except ImportError:
        return
    out = pathlib.Path(__file__).resolve().parent / "graph_demo.png"
    render_graph(graph, out, mst=prim)
    print(f"Graph visualization saved: {out}")


if __name__ == "__main__":
    main()
