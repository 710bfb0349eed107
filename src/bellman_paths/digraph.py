from __future__ import annotations

from typing import List

from .graph import Edge, ShortestPaths, Vertex, _check_vertex, _check_vertex_count, _check_weight, shortest_paths


class Digraph:
    """Ordered edge list over vertices ``0 .. vertex_count - 1``.

    - Vertices: positional ints, nothing else is stored for them
    - Edges: kept in insertion order; parallel edges and self-loops are kept
      as separate entries and each one is relaxed on its own.
    """

    def __init__(self, vertex_count: int):
        self.vertex_count = _check_vertex_count(vertex_count)
        self._edges: List[Edge] = []

    def add_edge(self, u: Vertex, v: Vertex, weight: int = 0) -> None:
        _check_vertex(u, self.vertex_count, "u")
        _check_vertex(v, self.vertex_count, "v")
        _check_weight(weight, "weight")
        self._edges.append(Edge(u, v, weight))

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def shortest_paths(self, source: Vertex) -> ShortestPaths:
        return shortest_paths(self.vertex_count, self._edges, source)
