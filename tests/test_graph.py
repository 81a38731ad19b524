import pytest

from graaf.edge import WeightedEdge, get_weight
from graaf.graph import DirectedGraph, Graph, GraphType, UndirectedGraph

GRAPH_TYPES = [GraphType.DIRECTED, GraphType.UNDIRECTED]


class _Weighted(WeightedEdge):
    def __init__(self, weight=1):
        self.weight = weight

    def get_weight(self):
        return self.weight


class _Unweighted:
    def __init__(self, val=0):
        self.val = val


def _build(graph_type, values, edges=()):
    """Graph with one vertex per value and edges given as index triples."""
    graph = Graph(graph_type)
    ids = [graph.add_vertex(value) for value in values]
    for lhs, rhs, edge in edges:
        graph.add_edge(ids[lhs], ids[rhs], edge)
    return graph, ids


def _counts(graph):
    return graph.vertex_count(), graph.edge_count()


def _present(graph, vertex_ids):
    return [graph.has_vertex(vertex_id) for vertex_id in vertex_ids]


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_vertex_count(graph_type):
    graph = Graph(graph_type)
    assert graph.vertex_count() == 0

    steps = [(10, None), (20, None), (30, 2)]
    for expected_count, (value, requested) in enumerate(steps, start=1):
        if requested is None:
            vertex_id = graph.add_vertex(value)
        else:
            vertex_id = graph.add_vertex(value, requested)
            assert vertex_id == requested
        assert graph.vertex_count() == expected_count
        assert graph.has_vertex(vertex_id)
        assert graph.get_vertex(vertex_id) == value


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_auto_id_skips_taken_ids(graph_type):
    graph = Graph(graph_type)
    added = [
        graph.add_vertex(10),
        graph.add_vertex(20),
        graph.add_vertex(30, 2),
        graph.add_vertex(40),
    ]
    assert added == [0, 1, 2, 3]


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_remove_vertex(graph_type):
    graph, (v1, v2, v3) = _build(
        graph_type, (10, 20, 30), [(0, 1, 100), (0, 2, 200)]
    )
    assert _counts(graph) == (3, 2)

    graph.remove_vertex(v1)
    assert _counts(graph) == (2, 0)
    assert _present(graph, (v1, v2, v3)) == [False, True, True]

    graph.remove_vertex(v2)
    assert _counts(graph) == (1, 0)
    assert _present(graph, (v1, v2, v3)) == [False, False, True]
    assert not graph.has_edge(v1, v2)
    assert not graph.has_edge(v2, v3)

    invalid = v1 + v3 + 1
    graph.remove_vertex(invalid)
    assert _counts(graph) == (1, 0)
    assert _present(graph, (invalid, v1, v3)) == [False, False, True]
    assert not graph.has_edge(v1, invalid)
    assert not graph.has_edge(invalid, v3)


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_remove_vertex_clears_incoming_edges(graph_type):
    graph, (a, b) = _build(graph_type, (1, 2), [(0, 1, 5)])
    graph.remove_vertex(b)
    assert graph.edge_count() == 0
    assert graph.get_neighbors(a) == set()


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_remove_edge(graph_type):
    graph, (a, b) = _build(graph_type, (10, 20), [(0, 1, 100)])
    assert graph.edge_count() == 1
    assert graph.has_edge(a, b)

    graph.remove_edge(a, b)
    assert _counts(graph) == (2, 0)
    assert not graph.has_edge(a, b)
    assert _present(graph, (a, b)) == [True, True]


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_remove_edge_from_vertex_without_edges(graph_type):
    graph, (a, b) = _build(graph_type, (1, 2))
    with pytest.raises(KeyError):
        graph.remove_edge(a, b)


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_add_edge_missing_vertex(graph_type):
    graph, (existing,) = _build(graph_type, (10,))
    missing = graph.vertex_count() + 1
    with pytest.raises(ValueError) as info:
        graph.add_edge(existing, missing, 100)
    assert str(info.value) == (
        f"Vertices with ID [{existing}] and [{missing}] not found in graph."
    )
    assert not graph.has_edge(existing, missing)


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_vertex_errors(graph_type):
    graph, (v1, v2) = _build(graph_type, (1, 20))
    missing = graph.vertex_count() + 1

    with pytest.raises(ValueError) as info:
        graph.get_vertex(missing)
    assert str(info.value) == f"Vertex with ID [{missing}] not found in graph."
    assert _present(graph, (v1, missing, v2)) == [True, False, True]
    assert graph.get_vertex(v2) == 20

    with pytest.raises(ValueError) as info:
        graph.add_vertex(50, v1)
    assert str(info.value) == f"Vertex already exists at ID [{v1}]"
    assert graph.get_vertex(v1) == 1


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_get_edge_non_existing(graph_type):
    graph, (v1, _) = _build(graph_type, (1, 2))
    missing = graph.vertex_count() + 1
    with pytest.raises(ValueError) as info:
        graph.get_edge(v1, missing)
    assert str(info.value) == f"No edge found between vertices [{v1}] -> [{missing}]."


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_getters(graph_type):
    graph, (v1, v2) = _build(graph_type, (1, 2), [(0, 1, 100)])
    assert [graph.get_vertex(v1), graph.get_vertex(v2)] == [1, 2]
    assert get_weight(graph.get_edge(v1, v2)) == 100
    assert graph.get_edge((v1, v2)) == 100


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
@pytest.mark.parametrize(
    "edge, read, expected",
    [
        (_Weighted(3), get_weight, 3),
        (_Weighted(3.0), get_weight, 3.0),
        (_Weighted(), get_weight, 1),
        (_Unweighted(42), lambda edge: edge.val, 42),
    ],
)
def test_edge_values(graph_type, edge, read, expected):
    graph, (a, b) = _build(graph_type, (10, 20), [(0, 1, edge)])
    assert graph.has_edge(a, b)
    assert read(graph.get_edge(a, b)) == expected


def test_directed_edges_have_direction():
    graph = DirectedGraph()
    a, b = graph.add_vertex(1), graph.add_vertex(2)
    graph.add_edge(a, b, 7)
    assert (graph.is_directed(), graph.is_undirected()) == (True, False)
    assert (graph.has_edge(a, b), graph.has_edge(b, a)) == (True, False)
    assert (graph.get_neighbors(a), graph.get_neighbors(b)) == ({b}, set())
    assert dict(graph.edges()) == {(a, b): 7}


def test_undirected_edges_are_symmetric():
    graph = UndirectedGraph()
    a, b = graph.add_vertex(1), graph.add_vertex(2)
    graph.add_edge(b, a, 7)
    assert (graph.is_directed(), graph.is_undirected()) == (False, True)
    assert (graph.has_edge(a, b), graph.has_edge(b, a)) == (True, True)
    assert graph.get_edge(a, b) == 7
    assert (graph.get_neighbors(a), graph.get_neighbors(b)) == ({b}, {a})
    assert dict(graph.edges()) == {(a, b): 7}


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_existing_edge_keeps_its_value(graph_type):
    graph, (a, b) = _build(graph_type, (1, 2), [(0, 1, 1), (0, 1, 99)])
    assert graph.get_edge(a, b) == 1
    assert graph.edge_count() == 1


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_neighbors_are_a_copy(graph_type):
    graph, (a, b) = _build(graph_type, (1, 2), [(0, 1, 1)])
    graph.get_neighbors(a).clear()
    assert graph.get_neighbors(a) == {b}


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
def test_vertices_view_is_read_only(graph_type):
    graph, (a,) = _build(graph_type, ("x",))
    assert dict(graph.vertices()) == {a: "x"}
    with pytest.raises(TypeError):
        graph.vertices()[5] = "y"


def test_graph_type_argument():
    graph = Graph(GraphType.UNDIRECTED)
    assert graph.is_undirected()
    assert graph.graph_type is GraphType.UNDIRECTED
    assert DirectedGraph().graph_type is GraphType.DIRECTED