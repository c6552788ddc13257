import pytest

from structkit.graph import Graph, InvalidEdgeError


def _sample():
    graph = Graph(5)
    for origin, destination in [(0, 1), (0, 2), (1, 3)]:
        graph.add_edge(origin, destination)
    return graph


def test_new_graph_has_no_edges():
    graph = Graph(3)
    assert all(cell == 0 for row in graph.adjacency_matrix() for cell in row)
    assert graph.adjacency_list() == [[], [], []]


def test_matrix_is_symmetric():
    matrix = _sample().adjacency_matrix()
    size = len(matrix)
    assert all(matrix[i][j] == matrix[j][i] for i in range(size) for j in range(size))
    assert matrix[0][1] == 1
    assert matrix[3][1] == 1


def test_matrix_copy_is_independent():
    graph = _sample()
    matrix = graph.adjacency_matrix()
    matrix[0][4] = 1
    assert graph.adjacency_matrix()[0][4] == 0


def test_adjacency_list_newest_first():
    graph = _sample()
    lists = graph.adjacency_list()
    assert lists[0] == [2, 1]
    assert lists[4] == []


@pytest.mark.parametrize("edge", [(0, 5), (-1, 0), (5, 5), (2, -3)])
def test_invalid_edge(edge):
    graph = Graph(5)
    with pytest.raises(InvalidEdgeError):
        graph.add_edge(*edge)
    assert graph.adjacency_list() == [[]] * 5


def test_bfs_and_dfs_orders():
    graph = _sample()
    assert graph.bfs(0) == [0, 1, 2, 3]
    assert graph.dfs(0) == [0, 1, 3, 2]


def test_traversals_reach_same_component():
    graph = _sample()
    for start in range(4):
        assert sorted(graph.bfs(start)) == sorted(graph.dfs(start))
        assert graph.bfs(start)[0] == start
        assert graph.dfs(start)[0] == start


def test_isolated_vertex():
    graph = _sample()
    assert graph.bfs(4) == [4]
    assert graph.dfs(4) == [4]


def test_reachable():
    graph = _sample()
    assert graph.reachable(3, 2) is True
    assert graph.reachable(0, 4) is False
    assert graph.reachable(4, 4) is True


def test_start_out_of_range():
    graph = Graph(2)
    with pytest.raises(IndexError):
        graph.bfs(2)
    with pytest.raises(IndexError):
        graph.dfs(-1)


def test_vertex_count_limits():
    with pytest.raises(ValueError):
        Graph(101)
    with pytest.raises(ValueError):
        Graph(-1)


def test_format_matrix():
    graph = Graph(2)
    graph.add_edge(0, 1)
    assert graph.format_matrix() == "Adjacency Matrix:\n0 1\n1 0"


def test_format_list():
    graph = Graph(3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    assert graph.format_list() == (
        "Adjacency List:\n"
        "Vertex 0: 2 -> 1 -> NULL\n"
        "Vertex 1: 0 -> NULL\n"
        "Vertex 2: 0 -> NULL"
    )