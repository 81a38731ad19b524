"""Maximal clique enumeration."""

from __future__ import annotations

from graaf.graph import Graph

__all__ = ["bron_kerbosch"]


def _expand(
    clique: list[int],
    candidates: set[int],
    excluded: set[int],
    graph: Graph,
    cliques: list[list[int]],
) -> None:
    if not candidates and not excluded:
        cliques.append(list(clique))
        return

    pivot = max(
        sorted(candidates | excluded),
        key=lambda vertex_id: len(graph.get_neighbors(vertex_id)),
    )

    for vertex in sorted(candidates - graph.get_neighbors(pivot)):
        neighbors = graph.get_neighbors(vertex)
        clique.append(vertex)
        _expand(clique, candidates & neighbors, excluded & neighbors, graph, cliques)
        clique.pop()
        candidates.discard(vertex)
        excluded.add(vertex)


def bron_kerbosch(graph: Graph) -> list[list[int]]:
    """Return every maximal clique of an undirected graph.

    Uses the Bron-Kerbosch algorithm with pivoting. Each clique is a list of
    vertex ids.
    """
    if not graph.is_undirected():
        raise TypeError("Clique detection requires an undirected graph.")

    cliques: list[list[int]] = []
    _expand([], set(graph.vertices()), set(), graph, cliques)
    return cliques