"""Minimum spanning trees and forests of undirected graphs."""

from __future__ import annotations

from graaf.edge import get_weight
from graaf.graph import Graph

__all__ = ["kruskal_minimum_spanning_tree", "prim_minimum_spanning_tree"]

EdgeId = tuple[int, int]


def _require_undirected(graph: Graph) -> None:
    if not graph.is_undirected():
        raise TypeError("A minimum spanning tree requires an undirected graph.")


class _DisjointSets:
    """Union by rank with path compression."""

    def __init__(self, elements) -> None:
        self._parent = {element: element for element in elements}
        self._rank = dict.fromkeys(self._parent, 0)

    def find(self, element: int) -> int:
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def merge(self, lhs: int, rhs: int) -> None:
        lhs, rhs = self.find(lhs), self.find(rhs)
        if lhs == rhs:
            return
        if self._rank[lhs] < self._rank[rhs]:
            lhs, rhs = rhs, lhs
        self._parent[rhs] = lhs
        if self._rank[lhs] == self._rank[rhs]:
            self._rank[lhs] += 1


def kruskal_minimum_spanning_tree(graph: Graph) -> list[EdgeId]:
    """Return the edges of a minimum spanning tree using Kruskal's algorithm.

    For a disconnected graph the edges of a minimum spanning forest are
    returned. Edges of equal weight are taken in order of their vertex ids.
    """
    _require_undirected(graph)

    sets = _DisjointSets(graph.vertices())
    edges_to_process = sorted(
        (get_weight(edge), lhs, rhs) for (lhs, rhs), edge in graph.edges().items()
    )
    target = graph.vertex_count() - 1

    mst_edges: list[EdgeId] = []
    for _, lhs, rhs in edges_to_process:
        if sets.find(lhs) != sets.find(rhs):
            mst_edges.append((lhs, rhs))
            sets.merge(lhs, rhs)
        if len(mst_edges) == target:
            break
    return mst_edges


def _candidate_edges(graph: Graph, fringe: set[int]) -> list[EdgeId]:
    return [
        (fringe_vertex, neighbor)
        for fringe_vertex in sorted(fringe)
        for neighbor in sorted(graph.get_neighbors(fringe_vertex))
        if neighbor not in fringe
    ]


def prim_minimum_spanning_tree(graph: Graph, start_vertex: int) -> list[EdgeId] | None:
    """Return the edges of a minimum spanning tree using Prim's algorithm.

    Each edge is given as (vertex in the tree, newly added vertex). Returns
    None when the graph is not connected.
    """
    _require_undirected(graph)

    edges_in_mst: list[EdgeId] = []
    fringe = {start_vertex}

    while len(fringe) < graph.vertex_count():
        candidates = _candidate_edges(graph, fringe)
        if not candidates:
            return None
        mst_edge = min(candidates, key=lambda edge_id: get_weight(graph.get_edge(edge_id)))
        edges_in_mst.append(mst_edge)
        fringe.add(mst_edge[1])

    return edges_in_mst