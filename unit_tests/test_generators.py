from pyskiena.generators import chain_graph, complete_graph, grid_graph, random_graph


def test_random_graph_is_reproducible():
    a = random_graph(10, 30, seed=3)
    b = random_graph(10, 30, seed=3)
    assert list(a.edges()) == list(b.edges())
    assert a.edge_count() == 30
    assert all(0.0 <= w < 10.0 for _, _, w in a.edges())


def test_random_graph_empty():
    g = random_graph(0, 5)
    assert g.vertex_count() == 0
    assert g.edge_count() == 0


def test_chain_graph():
    g = chain_graph(4)
    assert list(g.edges()) == [(0, 1, 1.0), (1, 2, 1.0), (2, 3, 1.0)]
    assert chain_graph(1).edge_count() == 0


def test_grid_graph():
    g = grid_graph(2, 3)
    assert g.vertex_count() == 6
    assert g.edge_count() == 7
    assert not g.directed
    assert sorted(v for v, _ in g.neighbors(4)) == [1, 3, 5]


def test_complete_graph():
    assert complete_graph(5).edge_count() == 10
    assert complete_graph(5, directed=True).edge_count() == 20
