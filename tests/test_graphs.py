import pytest

from algoshelf.graphs import DirectedGraph, UndirectedGraph

UNDIRECTED_EDGES = [
    (0, 1), (1, 2), (1, 7), (2, 3), (3, 4), (3, 5),
    (3, 7), (4, 5), (5, 6), (6, 7), (6, 8), (7, 8),
]
DIRECTED_EDGES = [
    (0, 1), (0, 5), (1, 2), (2, 4), (2, 6), (3, 2), (6, 5), (5, 8), (7, 5),
]


@pytest.fixture
def ugraph():
    g = UndirectedGraph(9)
    for src, dest in UNDIRECTED_EDGES:
        g.add_edge(src, dest)
    return g


@pytest.fixture
def digraph():
    g = DirectedGraph(9)
    for src, dest in DIRECTED_EDGES:
        g.add_edge(src, dest)
    return g


def test_undirected_dfs_order(ugraph):
    assert ugraph.dfs() == [0, 1, 2, 3, 4, 5, 6, 7, 8]


def test_undirected_dfs_reaches_all_once(ugraph):
    for start in range(9):
        order = ugraph.dfs(start)
        assert order[0] == start
        assert sorted(order) == list(range(9))


def test_undirected_neighbors_symmetric(ugraph):
    for src, dest in UNDIRECTED_EDGES:
        assert dest in ugraph.neighbors(src)
        assert src in ugraph.neighbors(dest)


def test_undirected_neighbors_order(ugraph):
    assert ugraph.neighbors(1) == [0, 2, 7]


def test_undirected_edge_count(ugraph):
    assert ugraph.edge_count() == len(UNDIRECTED_EDGES)


def test_undirected_disconnected_dfs():
    g = UndirectedGraph(4)
    g.add_edge(0, 1)
    g.add_edge(2, 3)
    assert sorted(g.dfs(0)) == [0, 1]
    assert sorted(g.dfs(3)) == [2, 3]


@pytest.mark.parametrize("src, dest", [(1, 1), (-1, 2), (0, 9), (9, 0)])
def test_undirected_bad_edges(src, dest):
    g = UndirectedGraph(9)
    with pytest.raises(ValueError):
        g.add_edge(src, dest)


def test_undirected_bad_start(ugraph):
    with pytest.raises(ValueError):
        ugraph.dfs(9)


def test_directed_dfs_edges(digraph):
    assert digraph.dfs_edges() == [(0, 1), (1, 2), (2, 4), (2, 6), (6, 5), (5, 8)]


def test_directed_dfs_edges_are_real_edges(digraph):
    edges = digraph.dfs_edges()
    for src, dest in edges:
        assert dest in digraph.targets(src)
    destinations = [dest for _, dest in edges]
    assert len(destinations) == len(set(destinations))


def test_directed_targets_one_way(digraph):
    assert digraph.targets(0) == [1, 5]
    assert 0 not in digraph.targets(1)


def test_directed_edge_count(digraph):
    assert digraph.edge_count() == len(DIRECTED_EDGES)


@pytest.mark.parametrize("src, dest", [(3, 3), (-1, 0), (0, 9)])
def test_directed_bad_edges(src, dest):
    g = DirectedGraph(9)
    with pytest.raises(ValueError):
        g.add_edge(src, dest)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        DirectedGraph(-1)