import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import numpy as np
import pytest

pytest.importorskip("matplotlib")

from mstbench.graph import Graph
from mstbench.prim import PrimMST
from mstbench.samples import demo_graph
from mstbench.visualize import circular_layout, render_graph

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_circular_layout():
    assert circular_layout(0).shape == (0, 2)
    np.testing.assert_allclose(circular_layout(1), [[0.0, 0.0]])
    pos = circular_layout(4)
    np.testing.assert_allclose(pos, [[1, 0], [0, 1], [-1, 0], [0, -1]], atol=1e-12)
    np.testing.assert_allclose(np.hypot(pos[:, 0], pos[:, 1]), 1.0)


def test_render_graph_writes_png(tmp_path):
    graph = demo_graph()
    path = render_graph(graph, tmp_path / "img" / "demo.png", mst=PrimMST().find_mst(graph))
    assert path.exists()
    assert path.read_bytes()[:8] == PNG_MAGIC


def test_render_single_vertex(tmp_path):
    path = render_graph(Graph(1), tmp_path / "single.png", node_names=["only"])
    assert path.read_bytes()[:8] == PNG_MAGIC
