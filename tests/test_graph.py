import pytest

from dsakit.graph import AdjacencyListGraph

EDGES = [(0, 1), (0, 2), (1, 3), (1, 4)]


@pytest.fixture
def graph():
    g = AdjacencyListGraph(5)
    for src, des in EDGES:
        g.add_edge(src, des)
    return g


def _is_edge(graph, a, b):
    return b in graph.neighbours(a)


def test_neighbours_most_recent_first(graph):
    added_to_one = [b if a == 1 else a for a, b in EDGES if 1 in (a, b)]
    assert graph.neighbours(1) == list(reversed(added_to_one))


def test_edges_are_symmetric(graph):
    for src, des in EDGES:
        assert _is_edge(graph, src, des)
        assert _is_edge(graph, des, src)


def test_bfs_worked_example(graph):
    assert graph.bfs(0) == [0, 2, 1, 4, 3]


@pytest.mark.parametrize("method", ["bfs", "dfs", "dfs_recursive"])
def test_traversal_covers_component_once(graph, method):
    order = getattr(graph, method)(3)
    assert order[0] == 3
    assert sorted(order) == list(range(5))
    assert len(set(order)) == len(order)


@pytest.mark.parametrize("method", ["dfs", "dfs_recursive", "bfs"])
def test_each_visited_vertex_reached_from_earlier(graph, method):
    order = getattr(graph, method)(0)
    for i, vertex in enumerate(order[1:], start=1):
        assert any(_is_edge(graph, earlier, vertex) for earlier in order[:i])


def test_dfs_recursive_goes_deep_first(graph):
    order = graph.dfs_recursive(0)
    first_neighbour = graph.neighbours(0)[0]
    assert order[1] == first_neighbour


def test_bfs_distances_non_decreasing():
    g = AdjacencyListGraph(6)
    for a, b in [(0, 1), (1, 2), (2, 3), (3, 4), (0, 5)]:
        g.add_edge(a, b)
    order = g.bfs(0)
    dist = {0: 0}
    for v in order:
        for w in g.neighbours(v):
            dist.setdefault(w, dist[v] + 1)
    assert [dist[v] for v in order] == sorted(dist[v] for v in order)


def test_disconnected_vertices_not_visited():
    g = AdjacencyListGraph(4)
    g.add_edge(0, 1)
    assert sorted(g.bfs(0)) == [0, 1]
    assert g.dfs(2) == [2]
    assert g.dfs_recursive(3) == [3]


@pytest.mark.parametrize("src,des", [(1, 1), (0, 5), (7, 0), (-1, 2)])
def test_add_edge_rejects_invalid(src, des):
    g = AdjacencyListGraph(5)
    with pytest.raises(ValueError):
        g.add_edge(src, des)


def test_traversal_rejects_invalid_start(graph):
    with pytest.raises(ValueError):
        graph.bfs(5)
    with pytest.raises(ValueError):
        graph.dfs(9)


def test_format_lines(graph):
    lines = graph.format().splitlines()
    assert len(lines) == 5
    assert lines[2] == "2|  0  ->"
    assert lines[1].count("->") == len(graph.neighbours(1))