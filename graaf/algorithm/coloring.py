"""Greedy vertex coloring."""

from __future__ import annotations

from graaf.graph import Graph

__all__ = ["greedy_graph_coloring"]


def greedy_graph_coloring(graph: Graph) -> dict[int, int]:
    """Assign a color to every vertex so neighbours tend to differ.

    Vertices are visited from the highest id to the lowest. Each vertex gets
    one more than the highest color among its already colored neighbours, or
    color 0 if none is colored yet. The result is heuristic, not optimal.
    """
    coloring: dict[int, int] = {}
    for vertex_id in sorted(graph.vertices(), reverse=True):
        neighbor_colors = [
            coloring[neighbor]
            for neighbor in graph.get_neighbors(vertex_id)
            if neighbor in coloring
        ]
        coloring[vertex_id] = max(neighbor_colors) + 1 if neighbor_colors else 0
    return coloring