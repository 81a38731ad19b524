# graaf

A small, dependency-free graph library. It offers directed and undirected
graphs holding arbitrary vertex and edge values, together with a handful of
classic graph algorithms: transposition, maximal cliques, greedy colouring,
minimum spanning trees and shortest paths.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs

`graaf.graph` provides `Graph`, built with a `GraphType` (`DIRECTED` or
`UNDIRECTED`), and the two shorthands `DirectedGraph` and `UndirectedGraph`.

```python
from graaf.graph import DirectedGraph, UndirectedGraph

graph = UndirectedGraph()
a = graph.add_vertex("a")       # 0
b = graph.add_vertex("b")       # 1
c = graph.add_vertex("c", 10)   # pick the vertex id yourself

graph.add_edge(a, b, 3)
graph.add_edge(b, c, 5)

graph.vertex_count()        # 3
graph.edge_count()          # 2
graph.has_edge(b, a)        # True for an undirected graph
graph.get_edge(a, b)        # 3
graph.get_edge((a, b))      # the same edge, looked up by its id pair
graph.get_neighbors(b)      # {0, 10}
graph.is_undirected()       # True
graph.graph_type            # GraphType.UNDIRECTED
```

* Without an explicit id, `add_vertex` hands out the lowest free id counting
  upward from the last one it gave.
* `vertices()` and `edges()` return read-only mappings from id to value.
  Undirected edges are keyed by the sorted pair of vertex ids.
* `add_edge` on a pair that is already connected keeps the existing value.
* `remove_vertex` removes the vertex and every edge touching it; an unknown id
  is ignored.
* `remove_edge` removes one edge; it raises `KeyError` if a vertex involved has
  never had an edge added from it.
* `get_vertex` and `get_edge` for a missing vertex or edge, `add_vertex` at a
  taken id, and `add_edge` between unknown vertices raise `ValueError`.

## Edge weights

Algorithms read an edge's weight with `graaf.edge.get_weight`:

* a real number is its own weight;
* an instance of `graaf.edge.WeightedEdge` supplies its weight through its
  `get_weight()` method;
* anything else has unit weight `1`.

```python
from graaf.edge import WeightedEdge, get_weight

class Road(WeightedEdge):
    def __init__(self, km):
        self.km = km

    def get_weight(self):
        return self.km

get_weight(Road(12))   # 12
get_weight(7.5)        # 7.5
get_weight("label")    # 1
```

## Algorithms

```python
from graaf.algorithm.utils import get_transposed_graph
from graaf.algorithm.clique_detection import bron_kerbosch
from graaf.algorithm.coloring import greedy_graph_coloring
from graaf.algorithm.minimum_spanning_tree import (
    kruskal_minimum_spanning_tree,
    prim_minimum_spanning_tree,
)
from graaf.algorithm.shortest_path import (
    GraphPath,
    bellman_ford_shortest_paths,
    floyd_warshall_shortest_paths,
)
```

* `get_transposed_graph(graph)` – a new `DirectedGraph` with every edge
  reversed. Vertices keep their ids and values, but only vertices that take
  part in at least one edge are carried over. Raises `TypeError` for an
  undirected graph.
* `bron_kerbosch(graph)` – every maximal clique of an undirected graph, each as
  a list of vertex ids (Bron–Kerbosch with pivoting). Raises `TypeError` for a
  directed graph.
* `greedy_graph_coloring(graph)` – a dict from vertex id to colour. Vertices
  are visited from the highest id to the lowest; each gets one more than the
  highest colour among its already coloured neighbours, or `0`. In an
  undirected graph adjacent vertices always differ; the colouring is not
  guaranteed to be minimal.
* `kruskal_minimum_spanning_tree(graph)` – the edge ids of a minimum spanning
  tree, or of a minimum spanning forest if the graph is disconnected. Edges of
  equal weight are taken in order of their vertex ids.
* `prim_minimum_spanning_tree(graph, start_vertex)` – the edges of a minimum
  spanning tree grown from `start_vertex`, each as
  `(vertex already in the tree, newly added vertex)`, or `None` if the graph is
  not connected.
  Both spanning-tree functions raise `TypeError` for a directed graph.
* `bellman_ford_shortest_paths(graph, start_vertex)` – a dict from every vertex
  id to a `GraphPath` (a dataclass with `vertices` and `total_weight`).
  Unreachable vertices get a path holding only themselves and a total weight of
  `math.inf`. Negative weights are allowed; a reachable negative cycle raises
  `ValueError("Negative cycle detected in the graph.")`. In an undirected graph
  each edge is relaxed only from its lower vertex id to its higher one.
* `floyd_warshall_shortest_paths(graph)` – a list-of-lists matrix where entry
  `[i][j]` is the shortest distance from vertex `i` to vertex `j`, or
  `math.inf` when there is no path. Vertex ids are expected to be
  `0 .. vertex_count() - 1`. Negative weights are allowed, negative cycles are
  not.

```python
from graaf.graph import DirectedGraph
from graaf.algorithm.shortest_path import bellman_ford_shortest_paths

graph = DirectedGraph()
v1, v2, v3 = (graph.add_vertex(value) for value in (10, 20, 30))
graph.add_edge(v1, v2, 1)
graph.add_edge(v2, v3, 1)
graph.add_edge(v1, v3, 3)

bellman_ford_shortest_paths(graph, v1)[v3]
# GraphPath(vertices=[0, 1, 2], total_weight=2)
```

## What the package does not do

graaf is a library only: it has no command-line tool, does not read or write
graph files, and keeps graphs in memory. It does not offer graph traversal
(breadth- or depth-first search), Dijkstra or A* search, cycle detection or
topological sorting.