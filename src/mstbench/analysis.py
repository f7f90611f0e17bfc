from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import numpy as np
import pandas as pd

from .jsonio import ComparisonRecord

SIZE_CATEGORIES = ("Small", "Medium", "Large", "Extra Large")
DENSITY_CATEGORIES = (
    "Very Sparse (<0.1)",
    "Sparse (0.1-0.3)",
    "Medium (0.3-0.6)",
    "Dense (>0.6)",
)
DETAIL_COLUMNS = [
    "GraphID",
    "Vertices",
    "Edges",
    "PrimCost",
    "PrimTimeMS",
    "PrimOperations",
    "KruskalCost",
    "KruskalTimeMS",
    "KruskalOperations",
    "CostMatch",
    "TimeDifferenceMS",
    "OperationsDifference",
    "PrimFaster",
    "KruskalFaster",
    "GraphSize",
    "EdgeDensity",
]
SUMMARY_COLUMNS = [
    "Category",
    "GraphCount",
    "AvgVertices",
    "AvgEdges",
    "AvgPrimTimeMS",
    "AvgKruskalTimeMS",
    "AvgPrimOps",
    "AvgKruskalOps",
    "PrimFasterCount",
    "KruskalFasterCount",
    "PrimWinRate",
]


def size_category(vertices: int) -> str:
    if vertices <= 30:
        return "Small"
    if vertices <= 300:
        return "Medium"
    if vertices <= 1000:
        return "Large"
    return "Extra Large"


def edge_density(vertices: int, edges: int) -> float:
    if vertices <= 1:
        return 0.0
    return edges / (vertices * (vertices - 1) / 2.0)


def density_category(density: float) -> str:
    if density < 0.1:
        return DENSITY_CATEGORIES[0]
    if density < 0.3:
        return DENSITY_CATEGORIES[1]
    if density < 0.6:
        return DENSITY_CATEGORIES[2]
    return DENSITY_CATEGORIES[3]


def records_to_frame(records: Sequence[ComparisonRecord]) -> pd.DataFrame:
    rows = []
    for r in records:
        prim_time = r.prim.execution_time_ms
        kruskal_time = r.kruskal.execution_time_ms
        rows.append(
            {
                "GraphID": r.graph_id,
                "Vertices": r.vertices,
                "Edges": r.edges,
                "PrimCost": r.prim.total_cost,
                "PrimTimeMS": round(prim_time, 3),
                "PrimOperations": r.prim.operations_count,
                "KruskalCost": r.kruskal.total_cost,
                "KruskalTimeMS": round(kruskal_time, 3),
                "KruskalOperations": r.kruskal.operations_count,
                "CostMatch": r.prim.total_cost == r.kruskal.total_cost,
                "TimeDifferenceMS": round(prim_time - kruskal_time, 3),
                "OperationsDifference": r.prim.operations_count - r.kruskal.operations_count,
                "PrimFaster": prim_time < kruskal_time,
                "KruskalFaster": kruskal_time < prim_time,
                "GraphSize": size_category(r.vertices),
                "EdgeDensity": round(edge_density(r.vertices, r.edges), 4),
            }
        )
    return pd.DataFrame(rows, columns=DETAIL_COLUMNS)


def _win_rate(wins: int, count: int) -> float:
    return 100.0 * wins / count if count else 0.0


def category_summary(frame: pd.DataFrame, label: str) -> dict[str, object]:
    count = int(len(frame))
    prim_wins = int(frame["PrimFaster"].sum())
    # Ties count against Prim in the CSV summaries.
    kruskal_wins = count - prim_wins
    return {
        "Category": label,
        "GraphCount": count,
        "AvgVertices": round(float(frame["Vertices"].mean()), 1) if count else 0.0,
        "AvgEdges": round(float(frame["Edges"].mean()), 1) if count else 0.0,
        "AvgPrimTimeMS": round(float(frame["PrimTimeMS"].mean()), 3) if count else 0.0,
        "AvgKruskalTimeMS": round(float(frame["KruskalTimeMS"].mean()), 3) if count else 0.0,
        "AvgPrimOps": round(float(frame["PrimOperations"].mean()), 1) if count else 0.0,
        "AvgKruskalOps": round(float(frame["KruskalOperations"].mean()), 1) if count else 0.0,
        "PrimFasterCount": prim_wins,
        "KruskalFasterCount": kruskal_wins,
        "PrimWinRate": f"{_win_rate(prim_wins, count):.1f}%",
    }


def size_summary(frame: pd.DataFrame) -> pd.DataFrame:
    rows = [
        category_summary(frame[frame["GraphSize"] == name], name)
        for name in SIZE_CATEGORIES
        if (frame["GraphSize"] == name).any()
    ]
    summary = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    return summary.rename(columns={"Category": "SizeCategory"})


def _raw_density(frame: pd.DataFrame) -> pd.Series:
    return pd.Series(
        [edge_density(int(v), int(e)) for v, e in zip(frame["Vertices"], frame["Edges"])],
        index=frame.index,
        dtype=np.float64,
    )


def density_summary(frame: pd.DataFrame) -> pd.DataFrame:
    density = _raw_density(frame)
    categories = density.map(density_category)
    rows = []
    for name in DENSITY_CATEGORIES:
        group = frame[categories == name]
        if group.empty:
            continue
        count = int(len(group))
        prim_wins = int(group["PrimFaster"].sum())
        advantage = group["KruskalTimeMS"] - group["PrimTimeMS"]
        rows.append(
            {
                "DensityCategory": name,
                "GraphCount": count,
                "AvgDensity": round(float(density[categories == name].mean()), 3),
                "PrimWinRate": f"{_win_rate(prim_wins, count):.1f}%",
                "AvgTimeAdvantageMS": round(float(advantage.mean()), 3),
            }
        )
    return pd.DataFrame(
        rows,
        columns=["DensityCategory", "GraphCount", "AvgDensity", "PrimWinRate", "AvgTimeAdvantageMS"],
    )


def algorithm_comparison(frame: pd.DataFrame) -> pd.DataFrame:
    count = int(len(frame))
    avg_prim_time = float(frame["PrimTimeMS"].mean()) if count else 0.0
    avg_kruskal_time = float(frame["KruskalTimeMS"].mean()) if count else 0.0
    avg_prim_ops = float(frame["PrimOperations"].mean()) if count else 0.0
    avg_kruskal_ops = float(frame["KruskalOperations"].mean()) if count else 0.0
    prim_rate = _win_rate(int(frame["PrimFaster"].sum()), count)
    kruskal_rate = 100.0 - prim_rate if count else 0.0
    return pd.DataFrame(
        [
            {
                "Metric": "Average Time (ms)",
                "Prim": f"{avg_prim_time:.3f}",
                "Kruskal": f"{avg_kruskal_time:.3f}",
                "Advantage": "Prim" if avg_prim_time < avg_kruskal_time else "Kruskal",
            },
            {
                "Metric": "Average Operations",
                "Prim": f"{avg_prim_ops:.1f}",
                "Kruskal": f"{avg_kruskal_ops:.1f}",
                "Advantage": "Prim" if avg_prim_ops < avg_kruskal_ops else "Kruskal",
            },
            {
                "Metric": "Win Rate",
                "Prim": f"{prim_rate:.1f}%",
                "Kruskal": f"{kruskal_rate:.1f}%",
                "Advantage": "Prim" if prim_rate > 50.0 else "Kruskal",
            },
        ]
    )


def chart_frame(frame: pd.DataFrame) -> pd.DataFrame:
    columns = ["Vertices", "PrimTimeMS", "KruskalTimeMS", "PrimOperations", "KruskalOperations", "EdgeDensity"]
    chart = frame[columns].sort_values("Vertices", kind="stable")
    return chart.rename(columns={"Vertices": "GraphSize"}).reset_index(drop=True)


def write_detailed_csv(frame: pd.DataFrame, path: str | os.PathLike[str]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(path, index=False)
    return path


def write_summary_csv(frame: pd.DataFrame, path: str | os.PathLike[str]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    overall = pd.DataFrame([category_summary(frame, "Overall")], columns=SUMMARY_COLUMNS)
    sections = [
        ("Overall Performance:", overall),
        ("Performance by Graph Size:", size_summary(frame)),
        ("Performance by Edge Density:", density_summary(frame)),
        ("Algorithm Comparison:", algorithm_comparison(frame)),
    ]
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write("SUMMARY STATISTICS\n==================\n\n")
        for title, table in sections:
            fh.write(title + "\n")
            table.to_csv(fh, index=False)
            fh.write("\n")
    return path


def write_chart_csv(frame: pd.DataFrame, path: str | os.PathLike[str]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    chart_frame(frame).to_csv(path, index=False)
    return path


def generate_csv_reports(
    records: Sequence[ComparisonRecord],
    output_dir: str | os.PathLike[str],
    *,
    verbose: bool = False,
) -> dict[str, Path]:
    output_dir = Path(output_dir)
    frame = records_to_frame(records)
    paths = {
        "detailed": write_detailed_csv(frame, output_dir / "results_analysis.csv"),
        "summary": write_summary_csv(frame, output_dir / "summary_statistics.csv"),
        "chart": write_chart_csv(frame, output_dir / "chart_data.csv"),
    }
    if verbose:
        for name, path in paths.items():
            print(f"[CSV] {name}: {path}")
    return paths


def format_summary(records: Sequence[ComparisonRecord]) -> str:
    """Console report: overall averages and wins, then per-size and per-density breakdowns."""
    if not records:
        return "No graphs processed"
    frame = records_to_frame(records)
    n = len(frame)
    prim_time = np.asarray(frame["PrimTimeMS"], dtype=np.float64)
    kruskal_time = np.asarray(frame["KruskalTimeMS"], dtype=np.float64)
    prim_wins = int(frame["PrimFaster"].sum())
    kruskal_wins = int(frame["KruskalFaster"].sum())
    avg_prim = float(prim_time.mean())
    avg_kruskal = float(kruskal_time.mean())
    rule = "=" * 60
    lines = [
        rule,
        "PROCESSING SUMMARY",
        rule,
        f"Total graphs processed: {n}",
        f"Average Prim time: {avg_prim:.3f}ms",
        f"Average Kruskal time: {avg_kruskal:.3f}ms",
        f"Total Prim operations: {int(frame['PrimOperations'].sum())}",
        f"Total Kruskal operations: {int(frame['KruskalOperations'].sum())}",
        f"Prim wins: {prim_wins} ({_win_rate(prim_wins, n):.1f}%)",
        f"Kruskal wins: {kruskal_wins} ({_win_rate(kruskal_wins, n):.1f}%)",
    ]
    if avg_prim < avg_kruskal:
        lines.append("Prim was faster overall")
    elif avg_prim > avg_kruskal:
        lines.append("Kruskal was faster overall")
    else:
        lines.append("Both algorithms performed similarly")

    lines += ["", "=" * 70, "PERFORMANCE BY GRAPH SIZE", "=" * 70]
    for row in size_summary(frame).to_dict("records"):
        lines.append(
            f"{row['SizeCategory']:<15}: Prim {row['AvgPrimTimeMS']:.3f}ms ({int(row['AvgPrimOps'])} ops) "
            f"vs Kruskal {row['AvgKruskalTimeMS']:.3f}ms ({int(row['AvgKruskalOps'])} ops)"
        )
        lines.append(
            f"{'':<15}  Wins: Prim {row['PrimFasterCount']}/{row['GraphCount']} ({row['PrimWinRate']}) "
            f"vs Kruskal {row['KruskalFasterCount']}/{row['GraphCount']}"
        )

    lines += ["", "=" * 70, "PERFORMANCE BY GRAPH DENSITY", "=" * 70]
    for row in density_summary(frame).to_dict("records"):
        lines.append(
            f"{row['DensityCategory']:<20}: {row['GraphCount']:2d} graphs, density: {row['AvgDensity']:.3f}, "
            f"Prim win rate: {row['PrimWinRate']}, avg advantage: {row['AvgTimeAdvantageMS']:.3f}ms"
        )
    return "\n".join(lines)
