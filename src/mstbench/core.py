from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from joblib import Parallel, delayed

from .analysis import format_summary, generate_csv_reports
from .graph import Graph
from .jsonio import ComparisonRecord, GraphData, read_input, to_comparison_record, write_output
from .kruskal import KruskalMST
from .prim import PrimMST
from .result import MSTResult

N_CPU = max(1, os.cpu_count() or 1)


def default_output_dir() -> Path:
    root = os.environ.get("MSTBENCH_OUTPUT_DIR")
    if root is None:
        return Path.cwd() / "results"
    return Path(root)


def compare_algorithms(graph: Graph) -> tuple[MSTResult, MSTResult]:
    return PrimMST().find_mst(graph), KruskalMST().find_mst(graph)


def analyze_graph(graph: Graph, name: str, verbose: bool = True) -> tuple[MSTResult, MSTResult] | None:
    def say(*args: object) -> None:
        if verbose:
            print(*args)

    rule = "=" * 60
    say(f"\n{rule}\nANALYZING: {name}\n{rule}")
    say("Graph Properties:")
    say(f"  Vertices: {graph.vertex_count}")
    say(f"  Edges: {graph.edge_count}")
    connected = graph.is_connected()
    say(f"  Connected: {str(connected).lower()}")
    if not connected:
        say(" Cannot compute MST - Graph is disconnected!")
        return None

    prim, kruskal = compare_algorithms(graph)
    say("\nRESULTS:")
    say(prim)
    say(kruskal)

    costs_match = prim.total_cost == kruskal.total_cost
    say("\nVALIDATION:")
    say(f"  MST costs match: {str(costs_match).lower()}")
    say(f"  Prim's MST valid: {str(prim.is_valid_mst()).lower()}")
    say(f"  Kruskal's MST valid: {str(kruskal.is_valid_mst()).lower()}")
    say(f"  Correct edge count: {str(prim.has_correct_edge_count()).lower()}")
    if costs_match and prim.is_valid_mst() and kruskal.is_valid_mst():
        say("\n ALL VALIDATIONS PASSED!")
    else:
        say("\n SOME VALIDATIONS FAILED!")

    say("\nPERFORMANCE COMPARISON:")
    say(f"  Time Ratio (Prim/Kruskal): {_ratio(prim.execution_time_ms, kruskal.execution_time_ms)}")
    say(f"  Operations Ratio (Prim/Kruskal): {_ratio(prim.operations_count, kruskal.operations_count)}")
    return prim, kruskal


def _ratio(a: float, b: float) -> str:
    if b == 0:
        return "n/a"
    return f"{a / b:.2f}"


def process_graph(data: GraphData, verbose: bool = False) -> ComparisonRecord | None:
    graph = data.graph
    connected = graph.is_connected()
    if verbose:
        print(f"Graph {data.graph_id}: V={graph.vertex_count}, E={graph.edge_count}, connected={connected}")
    if not connected:
        if verbose:
            print(f"Warning: graph {data.graph_id} is disconnected, skipped.")
        return None
    prim, kruskal = compare_algorithms(graph)
    if verbose:
        print(f"   Prim: cost={prim.total_cost}, time={prim.execution_time_ms:.3f}ms, ops={prim.operations_count}")
        print(
            f"   Kruskal: cost={kruskal.total_cost}, time={kruskal.execution_time_ms:.3f}ms, "
            f"ops={kruskal.operations_count}"
        )
        costs_match = prim.total_cost == kruskal.total_cost
        both_valid = prim.is_valid_mst() and kruskal.is_valid_mst()
        print(f"   Validation: costsMatch={str(costs_match).lower()}, bothValid={str(both_valid).lower()}")
    return to_comparison_record(data.graph_id, data.node_names, prim, kruskal, graph.edge_count)


def process_graphs(
    graphs: Sequence[GraphData],
    n_jobs: int = 1,
    verbose: bool = False,
) -> list[ComparisonRecord]:
    """Compare both algorithms on every connected graph, in input order.

    ``n_jobs`` fans out across graphs only; each MST run stays single threaded.
    """
    if n_jobs == 1:
        outputs = []
        for i, data in enumerate(graphs, start=1):
            if verbose:
                print(f"[{i}/{len(graphs)}] Processing Graph ID: {data.graph_id}")
            outputs.append(process_graph(data, verbose=verbose))
    else:
        jobs = N_CPU if n_jobs < 1 else n_jobs
        outputs = Parallel(n_jobs=jobs, prefer="processes")(delayed(process_graph)(data) for data in graphs)
    return [record for record in outputs if record is not None]


def run_pipeline(
    input_path: str | os.PathLike[str],
    output_dir: str | os.PathLike[str] | None = None,
    *,
    n_jobs: int = 1,
    write_csv: bool = True,
    verbose: bool = False,
) -> list[ComparisonRecord]:
    output_dir = Path(output_dir) if output_dir is not None else default_output_dir()
    graphs = read_input(input_path)
    if verbose:
        print(f"Found {len(graphs)} graphs to process")
    records = process_graphs(graphs, n_jobs=n_jobs, verbose=verbose)
    output_file = write_output(output_dir / "output.json", records)
    if verbose:
        print(f"Results written to: {output_file}")
        print(format_summary(records))
    if write_csv:
        generate_csv_reports(records, output_dir, verbose=verbose)
    return records
