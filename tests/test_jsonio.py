import json
import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import pytest

from mstbench.core import compare_algorithms
from mstbench.graph import InvalidWeightError, UnknownNodeError
from mstbench.jsonio import (
    ComparisonRecord,
    parse_graphs,
    read_input,
    read_output,
    to_comparison_record,
    write_output,
)

DOCUMENT = {
    "graphs": [
        {
            "id": 1,
            "nodes": ["A", "B", "C", "D"],
            "edges": [
                {"from": "A", "to": "B", "weight": 1},
                {"from": "B", "to": "C", "weight": 2},
                {"from": "C", "to": "D", "weight": 3},
                {"from": "A", "to": "D", "weight": 10},
            ],
        },
        {"id": 2, "nodes": ["X"], "edges": []},
    ]
}


def test_read_input(tmp_path):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
    graphs = read_input(path)
    assert [g.graph_id for g in graphs] == [1, 2]
    assert graphs[0].node_names == ["A", "B", "C", "D"]
    assert graphs[0].graph.edge_count == 4
    assert graphs[1].graph.vertex_count == 1


def test_parse_rejects_unknown_nodes_and_bad_weights():
    bad_node = {"graphs": [{"id": 1, "nodes": ["A"], "edges": [{"from": "A", "to": "B", "weight": 1}]}]}
    with pytest.raises(UnknownNodeError):
        parse_graphs(bad_node)
    bad_weight = {"graphs": [{"id": 1, "nodes": ["A", "B"], "edges": [{"from": "A", "to": "B", "weight": -4}]}]}
    with pytest.raises(InvalidWeightError):
        parse_graphs(bad_weight)
    with pytest.raises(ValueError):
        parse_graphs({})


def test_comparison_record_maps_names():
    data = parse_graphs(DOCUMENT)[0]
    prim, kruskal = compare_algorithms(data.graph)
    record = to_comparison_record(data.graph_id, data.node_names, prim, kruskal, data.graph.edge_count)
    assert record.vertices == 4
    assert record.edges == 4
    assert record.prim.total_cost == record.kruskal.total_cost == 6
    assert record.prim.mst_edges == [("A", "B", 1), ("B", "C", 2), ("C", "D", 3)]
    assert record.prim.execution_time_ms == round(prim.execution_time_ms, 3)

    payload = record.to_dict()
    assert payload["input_stats"] == {"vertices": 4, "edges": 4}
    assert payload["kruskal"]["mst_edges"][0] == {"from": "A", "to": "B", "weight": 1}


def test_unknown_vertex_name_in_output():
    data = parse_graphs(DOCUMENT)[0]
    prim, kruskal = compare_algorithms(data.graph)
    record = to_comparison_record(1, ["A", "B"], prim, kruskal, 4)
    assert ("B", "Unknown", 2) in record.prim.mst_edges


def test_output_file(tmp_path):
    data = parse_graphs(DOCUMENT)[0]
    prim, kruskal = compare_algorithms(data.graph)
    record = to_comparison_record(1, data.node_names, prim, kruskal, 4)
    path = write_output(tmp_path / "out" / "output.json", [record])
    document = json.loads(path.read_text(encoding="utf-8"))
    assert list(document) == ["results"]
    assert document["results"][0]["graph_id"] == 1
    assert read_output(path) == [ComparisonRecord.from_dict(document["results"][0])]
