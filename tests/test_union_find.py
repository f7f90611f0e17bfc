import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import numpy as np
import pytest

from mstbench.result import OperationCounter
from mstbench.union_find import UnionFind


def test_union_merges_components():
    uf = UnionFind(5)
    assert uf.union(0, 1)
    assert uf.union(3, 4)
    assert not uf.union(1, 0)
    assert uf.connected(0, 1)
    assert uf.connected(3, 4)
    assert not uf.connected(1, 3)
    assert uf.find(2) == 2
    assert len(uf) == 5


def test_counters_follow_rank_branches():
    counter = OperationCounter()
    uf = UnionFind(4, counter)

    uf.find(0)
    assert (counter.comparisons, counter.assignments) == (1, 0)

    uf.union(0, 1)  # equal ranks
    assert (counter.comparisons, counter.assignments) == (6, 2)
    uf.union(2, 3)
    assert (counter.comparisons, counter.assignments) == (11, 4)
    assert uf.rank.tolist() == [1, 0, 1, 0]

    uf.union(1, 3)  # one compression step on each side, then equal ranks
    assert (counter.comparisons, counter.assignments) == (18, 8)
    assert uf.rank[0] == 2

    uf.find(3)  # 3 -> 2 -> 0
    assert (counter.comparisons, counter.assignments) == (21, 10)
    assert uf.parent[3] == 0
    assert counter.structure_ops == 0


def test_union_under_higher_rank_root():
    counter = OperationCounter()
    uf = UnionFind(3, counter)
    uf.union(0, 1)
    before = (counter.comparisons, counter.assignments)
    uf.union(2, 0)  # rank[2] < rank[0]
    assert uf.parent[2] == 0
    assert (counter.comparisons - before[0], counter.assignments - before[1]) == (4, 1)
    before = (counter.comparisons, counter.assignments)
    assert not uf.union(0, 2)  # find(2) re-points 2 at its root
    assert (counter.comparisons - before[0], counter.assignments - before[1]) == (4, 1)


def test_find_compresses_long_chains_iteratively():
    n = 100_000
    uf = UnionFind(n)
    uf.parent[1:] = np.arange(n - 1)
    assert uf.find(n - 1) == 0
    np.testing.assert_array_equal(uf.parent, np.zeros(n, dtype=np.int64))


def test_negative_size():
    with pytest.raises(ValueError):
        UnionFind(-1)
