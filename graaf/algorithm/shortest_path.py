"""Single-source and all-pairs shortest paths on weighted graphs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from graaf.edge import get_weight
from graaf.graph import Graph

__all__ = ["GraphPath", "bellman_ford_shortest_paths", "floyd_warshall_shortest_paths"]

INFINITY = math.inf


@dataclass
class GraphPath:
    """A path through a graph as a list of vertex ids and its total weight."""

    vertices: list[int] = field(default_factory=list)
    total_weight: Any = 0


def bellman_ford_shortest_paths(graph: Graph, start_vertex: int) -> dict[int, GraphPath]:
    """Return the shortest path from ``start_vertex`` to every vertex.

    Uses the Bellman-Ford algorithm, so negative edge weights are allowed.
    Every vertex of the graph has an entry; a vertex that cannot be reached
    has a path holding only itself and an infinite total weight. Edges are
    relaxed in the direction in which they are stored, which for undirected
    graphs is from the lower vertex id to the higher.

    Raises ValueError if a negative cycle is reachable.
    """
    paths = {
        vertex_id: GraphPath([vertex_id], INFINITY) for vertex_id in graph.vertices()
    }
    paths[start_vertex] = GraphPath([start_vertex], 0)

    edges = [
        (source, target, get_weight(edge))
        for (source, target), edge in graph.edges().items()
    ]

    def found_shorter_path(source: int, target: int, weight: Any) -> bool:
        via = paths[source].total_weight
        return via != INFINITY and via + weight < paths[target].total_weight

    for _ in range(1, graph.vertex_count()):
        for source, target, weight in edges:
            if found_shorter_path(source, target, weight):
                paths[target] = GraphPath(
                    [*paths[source].vertices, target],
                    paths[source].total_weight + weight,
                )

    if any(found_shorter_path(*edge) for edge in edges):
        raise ValueError("Negative cycle detected in the graph.")
    return paths


def floyd_warshall_shortest_paths(graph: Graph) -> list[list[Any]]:
    """Return the matrix of shortest distances between all pairs of vertices.

    Vertex ids are expected to be ``0 .. vertex_count() - 1``; entry
    ``[i][j]`` is the distance from vertex ``i`` to vertex ``j``, or
    ``math.inf`` when there is no path. Negative weights are allowed, negative
    cycles are not.
    """
    count = graph.vertex_count()
    distances: list[list[Any]] = [[INFINITY] * count for _ in range(count)]

    for vertex, row in enumerate(distances):
        row[vertex] = 0

    for source, row in enumerate(distances):
        for target in graph.get_neighbors(source):
            row[target] = min(row[target], get_weight(graph.get_edge(source, target)))

    for through, through_row in enumerate(distances):
        for row in distances:
            to_through = row[through]
            if to_through >= INFINITY:
                continue
            for end, from_through in enumerate(through_row):
                if from_through < INFINITY:
                    row[end] = min(row[end], to_through + from_through)

    return distances