import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import pandas as pd
import pytest

from mstbench.analysis import (
    DETAIL_COLUMNS,
    algorithm_comparison,
    chart_frame,
    density_category,
    density_summary,
    edge_density,
    format_summary,
    generate_csv_reports,
    records_to_frame,
    size_category,
    size_summary,
)
from mstbench.jsonio import AlgorithmRecord, ComparisonRecord


def _record(graph_id, vertices, edges, prim_ms, kruskal_ms, prim_ops=100, kruskal_ops=120, cost=10):
    return ComparisonRecord(
        graph_id=graph_id,
        vertices=vertices,
        edges=edges,
        prim=AlgorithmRecord([], cost, prim_ops, prim_ms),
        kruskal=AlgorithmRecord([], cost, kruskal_ops, kruskal_ms),
    )


RECORDS = [
    _record(1, 10, 40, 0.5, 1.0),
    _record(2, 400, 800, 3.0, 2.0, prim_ops=5000, kruskal_ops=4000),
    _record(3, 20, 25, 1.0, 1.0),
    _record(4, 1500, 3000, 9.0, 12.0),
]


@pytest.mark.parametrize(
    "vertices,expected",
    [(5, "Small"), (30, "Small"), (31, "Medium"), (300, "Medium"), (1000, "Large"), (1001, "Extra Large")],
)
def test_size_category(vertices, expected):
    assert size_category(vertices) == expected


def test_edge_density():
    assert edge_density(1, 0) == 0.0
    assert edge_density(4, 6) == pytest.approx(1.0)
    assert edge_density(10, 9) == pytest.approx(0.2)


@pytest.mark.parametrize(
    "density,expected",
    [(0.05, "Very Sparse (<0.1)"), (0.1, "Sparse (0.1-0.3)"), (0.3, "Medium (0.3-0.6)"), (0.6, "Dense (>0.6)")],
)
def test_density_category(density, expected):
    assert density_category(density) == expected


def test_records_to_frame():
    frame = records_to_frame(RECORDS)
    assert list(frame.columns) == DETAIL_COLUMNS
    first = frame.iloc[0]
    assert bool(first["PrimFaster"]) and not bool(first["KruskalFaster"])
    assert first["TimeDifferenceMS"] == pytest.approx(-0.5)
    assert first["OperationsDifference"] == -20
    assert first["EdgeDensity"] == pytest.approx(0.8889)
    tie = frame.iloc[2]
    assert not bool(tie["PrimFaster"]) and not bool(tie["KruskalFaster"])
    assert frame["CostMatch"].all()


def test_size_and_density_summaries():
    frame = records_to_frame(RECORDS)
    sizes = size_summary(frame)
    assert sizes["SizeCategory"].tolist() == ["Small", "Large", "Extra Large"]
    small = sizes.iloc[0]
    assert small["GraphCount"] == 2
    assert small["PrimFasterCount"] == 1
    assert small["PrimWinRate"] == "50.0%"
    densities = density_summary(frame)
    assert densities["GraphCount"].sum() == 4


def test_csv_summaries_count_ties_for_kruskal():
    frame = records_to_frame(RECORDS)
    small = size_summary(frame).iloc[0]
    assert small["KruskalFasterCount"] == 1
    win_rate = algorithm_comparison(frame).set_index("Metric").loc["Win Rate"]
    assert win_rate["Prim"] == "50.0%"
    assert win_rate["Kruskal"] == "50.0%"
    assert win_rate["Advantage"] == "Kruskal"


def test_density_bucket_uses_unrounded_density():
    # 4484 / 44850 = 0.099978 rounds to 0.1 in the EdgeDensity column.
    frame = records_to_frame([_record(1, 300, 4484, 1.0, 2.0)])
    assert frame["EdgeDensity"].iloc[0] == pytest.approx(0.1)
    densities = density_summary(frame)
    assert densities["DensityCategory"].tolist() == ["Very Sparse (<0.1)"]
    assert densities["AvgDensity"].iloc[0] == pytest.approx(0.1)


def test_chart_sorted_by_size():
    chart = chart_frame(records_to_frame(RECORDS))
    assert chart["GraphSize"].tolist() == [10, 20, 400, 1500]


def test_generate_csv_reports(tmp_path):
    paths = generate_csv_reports(RECORDS, tmp_path)
    detailed = pd.read_csv(paths["detailed"])
    assert detailed["GraphID"].tolist() == [1, 2, 3, 4]
    summary = paths["summary"].read_text(encoding="utf-8")
    assert summary.startswith("SUMMARY STATISTICS")
    for title in (
        "Overall Performance:",
        "Performance by Graph Size:",
        "Performance by Edge Density:",
        "Algorithm Comparison:",
    ):
        assert title in summary
    assert "Overall,4," in summary
    chart = pd.read_csv(paths["chart"])
    assert list(chart.columns)[0] == "GraphSize"


def test_format_summary():
    text = format_summary(RECORDS)
    assert "Total graphs processed: 4" in text
    assert "Prim wins: 2 (50.0%)" in text
    assert "Kruskal wins: 1 (25.0%)" in text
    assert "Prim was faster overall" in text
    assert format_summary([]) == "No graphs processed"
