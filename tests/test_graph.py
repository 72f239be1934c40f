import io

import pytest

from fieldsim.geometry import VEdge, VPoint
from fieldsim.graph import Graph, distance

A = VPoint(0.0, 0.0, 0)
B = VPoint(3.0, 4.0, 1)
C = VPoint(6.0, 0.0, 2)
D = VPoint(20.0, 0.0, 3)


def make_edge(start, end):
    edge = VEdge(start, VPoint(0.0, 0.0), VPoint(1.0, 1.0))
    edge.end = end
    return edge


@pytest.fixture
def graph():
    return Graph([make_edge(A, B), make_edge(B, C), make_edge(A, D), make_edge(D, C)])


def test_distance_of_three_four_five():
    assert distance((0.0, 0.0), (3.0, 4.0)) == 5.0


def test_vertices_are_sorted_unique_ids(graph):
    assert graph.vertices == [0, 1, 2, 3]


def test_edge_weights_match_point_distance(graph):
    for weight, (a, b) in graph.edges:
        assert weight == pytest.approx(distance(graph.vertex_by_id(a), graph.vertex_by_id(b)))


def test_edge_weights_use_truncated_coordinates():
    g = Graph([make_edge(VPoint(0.0, 0.0, 0), VPoint(0.9, 0.0, 1))])
    assert g.edges[0][0] == 0.0


def test_first_point_seen_keeps_its_id():
    first = VPoint(1.0, 1.0, 5)
    other = VPoint(9.0, 9.0, 5)
    g = Graph([make_edge(first, B), make_edge(other, C)])
    assert g.vertex_by_id(5) == (first.x, first.y)


def test_edge_without_end_is_rejected():
    with pytest.raises(ValueError):
        Graph([VEdge(A, VPoint(0.0, 0.0), VPoint(1.0, 1.0))])


def test_vertex_by_id(graph):
    assert graph.vertex_by_id(1) == (B.x, B.y)
    with pytest.raises(KeyError):
        graph.vertex_by_id(42)


def test_nearest_vertex(graph):
    assert graph.nearest_vertex(D.x - 1.0, D.y + 1.0) == D.id
    assert graph.nearest_vertex(B.x, B.y) == B.id


def test_nearest_vertex_of_empty_graph_raises():
    with pytest.raises(ValueError):
        Graph([]).nearest_vertex(0.0, 0.0)


def test_shortest_path_avoids_long_detour(graph):
    assert graph.shortest_path(A.id, C.id) == [C.id, B.id, A.id]


def test_shortest_path_is_a_chain_of_edges(graph):
    path = graph.shortest_path(D.id, B.id)
    assert path[0] == B.id and path[-1] == D.id
    pairs = {frozenset(p) for _, p in graph.edges}
    for a, b in zip(path, path[1:]):
        assert frozenset((a, b)) in pairs


def test_shortest_path_to_itself(graph):
    assert graph.shortest_path(B.id, B.id) == [B.id]


def test_unreachable_end_raises():
    g = Graph([make_edge(A, B), make_edge(C, D)])
    with pytest.raises(ValueError):
        g.shortest_path(A.id, D.id)


def test_unknown_start_raises(graph):
    with pytest.raises(KeyError):
        graph.shortest_path(99, A.id)


def test_path_endpoints_choose_exact_vertices(graph):
    result = graph.path_endpoints((A.id, D.id), (C.id, D.id), A.x, A.y, C.x, C.y)
    assert result == (A.id, C.id)


def test_path_endpoints_pick_from_given_pairs(graph):
    start_pair, end_pair = (B.id, D.id), (A.id, C.id)
    s, e = graph.path_endpoints(start_pair, end_pair, 10.0, 1.0, 2.0, -1.0)
    assert s in start_pair
    assert e in end_pair


def test_display_format():
    g = Graph([make_edge(A, B)])
    out = io.StringIO()
    g.display(out)
    assert out.getvalue() == "Vertices : 0 1 \nEdges : 0 1 - 5\n"