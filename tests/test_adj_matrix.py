import pytest

from dsalgo.adj_matrix import AdjacencyMatrix


def test_undirected_edges_are_mirrored():
    graph = AdjacencyMatrix(3, False, [(0, 1, 2.0)])
    assert graph.has_edge(0, 1)
    assert graph.has_edge(1, 0)
    assert not graph.has_edge(0, 2)
    assert graph.edge_count == 1


def test_directed_edges_are_one_way():
    graph = AdjacencyMatrix(3, True)
    graph.add_edge(0, 2, 1)
    assert graph.has_edge(0, 2)
    assert not graph.has_edge(2, 0)
    assert graph.edge_count == 1


def test_duplicate_edge_rejected():
    graph = AdjacencyMatrix(2, False)
    graph.add_edge(0, 1, 1)
    with pytest.raises(ValueError):
        graph.add_edge(1, 0, 3)
    assert graph.edge_count == 1


def test_out_of_range_vertex():
    graph = AdjacencyMatrix(2, True)
    with pytest.raises(IndexError):
        graph.add_edge(0, 5, 1)
    with pytest.raises(IndexError):
        graph.has_edge(-1, 0)


def test_description_format():
    graph = AdjacencyMatrix(2, False, [(0, 1, 2.5)])
    assert str(graph) == (
        "Vertex: 0\nConnected vertices: 1(2.5) \n"
        "Vertex: 1\nConnected vertices: 0(2.5) \n"
    )


def test_node_count():
    assert AdjacencyMatrix(4, True).node_count == 4