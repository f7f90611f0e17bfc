from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .analysis import format_summary, generate_csv_reports
from .core import N_CPU, analyze_graph, compare_algorithms, default_output_dir, run_pipeline
from .jsonio import read_input, read_output, write_input
from .samples import demo_graph, named_samples, random_graph_description


def _cmd_run(args: argparse.Namespace) -> int:
    run_pipeline(
        args.input,
        args.output_dir,
        n_jobs=args.jobs,
        write_csv=not args.no_csv,
        verbose=not args.quiet,
    )
    return 0


def _cmd_demo(args: argparse.Namespace) -> int:
    graph = demo_graph()
    print("DEMO GRAPH")
    print(f"  Vertices: {graph.vertex_count}")
    print(f"  Edges: {graph.edge_count}")
    print(f"  Connected: {str(graph.is_connected()).lower()}")
    print(f"  Adjacent vertices of 2: {graph.adjacent_vertices(2)}")
    prim, kruskal = compare_algorithms(graph)
    print(prim.detailed_report())
    print(kruskal.detailed_report())
    if args.image is not None:
        try:
            from .visualize import render_graph

            render_graph(graph, args.image, mst=prim)
            print(f"Graph visualization saved: {args.image}")
        except (ImportError, OSError) as exc:
            print(f"Warning: graph visualization skipped: {exc}")
    if args.samples:
        for name, sample in named_samples(args.seed):
            analyze_graph(sample, name)
    return 0


def _cmd_report(args: argparse.Namespace) -> int:
    records = read_output(args.results)
    output_dir = args.output_dir or Path(args.results).parent
    print(format_summary(records))
    generate_csv_reports(records, output_dir, verbose=True)
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    sizes = args.sizes
    graphs = [
        random_graph_description(
            i + 1,
            n,
            args.density,
            max_weight=args.max_weight,
            seed=None if args.seed is None else args.seed + i,
        )
        for i, n in enumerate(sizes)
    ]
    path = write_input(args.output, graphs)
    print(f"Wrote {len(graphs)} graphs to {path}")
    return 0


def _cmd_draw(args: argparse.Namespace) -> int:
    from .visualize import render_graph

    graphs = {data.graph_id: data for data in read_input(args.input)}
    if args.graph_id not in graphs:
        print(f"Graph id {args.graph_id} not found in {args.input}", file=sys.stderr)
        return 1
    data = graphs[args.graph_id]
    mst = compare_algorithms(data.graph)[0] if args.highlight_mst else None
    path = render_graph(data.graph, args.output, mst=mst, node_names=data.node_names)
    print(f"Graph visualization saved: {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mstbench", description="Compare Prim's and Kruskal's MST algorithms.")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="process every graph of an input document")
    run.add_argument("input", type=Path)
    run.add_argument("--output-dir", type=Path, default=None, help=f"default: {default_output_dir()}")
    run.add_argument("--jobs", type=int, default=1, help=f"parallel workers across graphs (<1 means {N_CPU})")
    run.add_argument("--no-csv", action="store_true")
    run.add_argument("--quiet", action="store_true")
    run.set_defaults(func=_cmd_run)

    demo = sub.add_parser("demo", help="run both algorithms on the built-in demo graph")
    demo.add_argument("--image", type=Path, default=None)
    demo.add_argument("--samples", action="store_true", help="also analyse the larger sample graphs")
    demo.add_argument("--seed", type=int, default=0)
    demo.set_defaults(func=_cmd_demo)

    report = sub.add_parser("report", help="summarise an output.json and write the CSV reports")
    report.add_argument("results", type=Path)
    report.add_argument("--output-dir", type=Path, default=None)
    report.set_defaults(func=_cmd_report)

    generate = sub.add_parser("generate", help="write an input document of random connected graphs")
    generate.add_argument("output", type=Path)
    generate.add_argument("--sizes", type=int, nargs="+", default=[5, 10, 20, 50])
    generate.add_argument("--density", type=float, default=0.3)
    generate.add_argument("--max-weight", type=int, default=100)
    generate.add_argument("--seed", type=int, default=None)
    generate.set_defaults(func=_cmd_generate)

    draw = sub.add_parser("draw", help="render one input graph as a PNG")
    draw.add_argument("input", type=Path)
    draw.add_argument("graph_id", type=int)
    draw.add_argument("output", type=Path)
    draw.add_argument("--highlight-mst", action="store_true")
    draw.set_defaults(func=_cmd_draw)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (OSError, ValueError, KeyError) as exc:
        # str() of a KeyError quotes its message.
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        print(f"Error: {message}", file=sys.stderr)
        return 1


__all__ = ["build_parser", "main"]
