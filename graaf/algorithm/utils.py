"""Helpers that derive new graphs from existing ones."""

from __future__ import annotations

from graaf.graph import DirectedGraph, Graph

__all__ = ["get_transposed_graph"]


def get_transposed_graph(graph: Graph) -> DirectedGraph:
    """Return a directed graph with every edge of ``graph`` reversed.

    Vertices keep their ids and values. Only vertices that take part in at
    least one edge are carried over.
    """
    if not graph.is_directed():
        raise TypeError("Only directed graphs can be transposed.")

    transposed = DirectedGraph()
    for (vertex_id_lhs, vertex_id_rhs), edge in graph.edges().items():
        for vertex_id in (vertex_id_lhs, vertex_id_rhs):
            if not transposed.has_vertex(vertex_id):
                transposed.add_vertex(graph.get_vertex(vertex_id), vertex_id)
        transposed.add_edge(vertex_id_rhs, vertex_id_lhs, edge)
    return transposed