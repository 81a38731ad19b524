"""Directed and undirected graphs with integer vertex ids."""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Any, Mapping

__all__ = ["GraphType", "Graph", "DirectedGraph", "UndirectedGraph"]

VertexId = int
EdgeId = tuple[int, int]


class GraphType(enum.Enum):
    """Whether edges have a direction."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


def _sorted_pair(lhs: VertexId, rhs: VertexId) -> EdgeId:
    return (lhs, rhs) if lhs < rhs else (rhs, lhs)


class Graph:
    """A graph storing arbitrary vertex and edge values keyed by ids."""

    def __init__(self, graph_type: GraphType) -> None:
        self._graph_type = GraphType(graph_type)
        self._adjacency: dict[VertexId, set[VertexId]] = {}
        self._vertices: dict[VertexId, Any] = {}
        self._edges: dict[EdgeId, Any] = {}
        self._vertex_id_supplier = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={len(self._vertices)}, "
            f"edges={len(self._edges)})"
        )

    @property
    def graph_type(self) -> GraphType:
        return self._graph_type

    def is_directed(self) -> bool:
        return self._graph_type is GraphType.DIRECTED

    def is_undirected(self) -> bool:
        return self._graph_type is GraphType.UNDIRECTED

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return len(self._edges)

    def vertices(self) -> Mapping[VertexId, Any]:
        """Read-only mapping from vertex id to vertex value."""
        return MappingProxyType(self._vertices)

    def edges(self) -> Mapping[EdgeId, Any]:
        """Read-only mapping from edge id to edge value.

        Undirected edges are keyed by the sorted pair of vertex ids.
        """
        return MappingProxyType(self._edges)

    def _edge_key(self, lhs: VertexId, rhs: VertexId) -> EdgeId:
        if self.is_directed():
            return (lhs, rhs)
        return _sorted_pair(lhs, rhs)

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return vertex_id in self._vertices

    def has_edge(self, vertex_id_lhs: VertexId, vertex_id_rhs: VertexId) -> bool:
        return self._edge_key(vertex_id_lhs, vertex_id_rhs) in self._edges

    def get_vertex(self, vertex_id: VertexId) -> Any:
        if not self.has_vertex(vertex_id):
            raise ValueError(f"Vertex with ID [{vertex_id}] not found in graph.")
        return self._vertices[vertex_id]

    def get_edge(self, vertex_id_lhs: Any, vertex_id_rhs: VertexId | None = None) -> Any:
        """Return the edge between two vertices.

        Either two vertex ids or a single edge id pair may be given.
        """
        if vertex_id_rhs is None:
            vertex_id_lhs, vertex_id_rhs = vertex_id_lhs
        if not self.has_edge(vertex_id_lhs, vertex_id_rhs):
            raise ValueError(
                f"No edge found between vertices [{vertex_id_lhs}] -> "
                f"[{vertex_id_rhs}]."
            )
        return self._edges[self._edge_key(vertex_id_lhs, vertex_id_rhs)]

    def get_neighbors(self, vertex_id: VertexId) -> set[VertexId]:
        return set(self._adjacency.get(vertex_id, ()))

    def add_vertex(self, vertex: Any, vertex_id: VertexId | None = None) -> VertexId:
        """Add a vertex, at the given id or at the next free one."""
        if vertex_id is None:
            while self.has_vertex(self._vertex_id_supplier):
                self._vertex_id_supplier += 1
            vertex_id = self._vertex_id_supplier
        elif self.has_vertex(vertex_id):
            raise ValueError(f"Vertex already exists at ID [{vertex_id}]")
        self._vertices[vertex_id] = vertex
        return vertex_id

    def remove_vertex(self, vertex_id: VertexId) -> None:
        """Remove a vertex and every edge touching it; unknown ids are ignored."""
        for target in self._adjacency.pop(vertex_id, set()):
            self._edges.pop((vertex_id, target), None)
        self._vertices.pop(vertex_id, None)
        for source, neighbors in self._adjacency.items():
            neighbors.discard(vertex_id)
            self._edges.pop((source, vertex_id), None)

    def add_edge(self, vertex_id_lhs: VertexId, vertex_id_rhs: VertexId, edge: Any) -> None:
        """Connect two existing vertices; an existing edge keeps its value."""
        if not (self.has_vertex(vertex_id_lhs) and self.has_vertex(vertex_id_rhs)):
            raise ValueError(
                f"Vertices with ID [{vertex_id_lhs}] and [{vertex_id_rhs}] "
                "not found in graph."
            )
        self._adjacency.setdefault(vertex_id_lhs, set()).add(vertex_id_rhs)
        if self.is_undirected():
            self._adjacency.setdefault(vertex_id_rhs, set()).add(vertex_id_lhs)
        self._edges.setdefault(self._edge_key(vertex_id_lhs, vertex_id_rhs), edge)

    def remove_edge(self, vertex_id_lhs: VertexId, vertex_id_rhs: VertexId) -> None:
        """Remove the edge between two vertices.

        Raises KeyError if a vertex has never had an outgoing edge.
        """
        self._adjacency[vertex_id_lhs].discard(vertex_id_rhs)
        if self.is_undirected():
            self._adjacency[vertex_id_rhs].discard(vertex_id_lhs)
        self._edges.pop(self._edge_key(vertex_id_lhs, vertex_id_rhs), None)


class DirectedGraph(Graph):
    """A graph whose edges go from one vertex to another."""

    def __init__(self) -> None:
        super().__init__(GraphType.DIRECTED)


class UndirectedGraph(Graph):
    """A graph whose edges connect two vertices both ways."""

    def __init__(self) -> None:
        super().__init__(GraphType.UNDIRECTED)