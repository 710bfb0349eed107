from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from .errors import InvalidArgumentError


Vertex = int
Distance = Union[int, float]

# Python ints never overflow, so the sentinel is only ever compared, never summed.
UNREACHABLE: float = float("inf")


@dataclass(frozen=True)
class Edge:
    u: Vertex
    v: Vertex
    w: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.u, self.v, self.w))


EdgeLike = Union[Edge, Tuple[int, int, int], Sequence[int]]


@dataclass
class ShortestPaths:
    """Result of one engine run.

    When ``has_negative_cycle`` is true the distances only reflect V-1 rounds
    of relaxation and must not be read as shortest-path answers.
    """

    distances: List[Distance]
    has_negative_cycle: bool

    def __iter__(self):
        return iter((self.distances, self.has_negative_cycle))


def is_reachable(distance: Distance) -> bool:
    return distance != UNREACHABLE


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_vertex_count(vertex_count: object) -> int:
    if not _is_int(vertex_count) or vertex_count < 1:
        raise InvalidArgumentError(f"vertex_count must be an int >= 1, got {vertex_count!r}")
    return vertex_count


def _check_vertex(value: object, vertex_count: int, what: str) -> int:
    if not _is_int(value):
        raise InvalidArgumentError(f"{what} must be an int, got {value!r}")
    if not 0 <= value < vertex_count:
        raise InvalidArgumentError(f"{what} {value} out of range [0, {vertex_count})")
    return value


def _check_weight(value: object, what: str) -> int:
    if not _is_int(value):
        raise InvalidArgumentError(f"{what} must be an int, got {value!r}")
    return value


def _normalize_edges(edges: Iterable[EdgeLike], vertex_count: int) -> List[Tuple[int, int, int]]:
    normalized: List[Tuple[int, int, int]] = []
    for i, edge in enumerate(edges):
        try:
            u, v, w = edge
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"edge #{i} must be a (u, v, w) triple, got {edge!r}") from None
        _check_vertex(u, vertex_count, f"edge #{i} tail")
        _check_vertex(v, vertex_count, f"edge #{i} head")
        _check_weight(w, f"edge #{i} weight")
        normalized.append((u, v, w))
    return normalized


def shortest_paths(vertex_count: int, edges: Iterable[EdgeLike], source: Vertex) -> ShortestPaths:
    """Bellman-Ford single-source shortest paths with negative cycle detection.

    Edges are relaxed in the given order, V-1 times, updating distances in
    place so later edges of a round see earlier updates. One more pass then
    looks for an edge that still relaxes, which means a negative cycle is
    reachable from ``source``.

    Returns ``ShortestPaths(distances, has_negative_cycle)``; it also unpacks
    as a pair. Unreachable vertices hold ``UNREACHABLE``.
    """
    _check_vertex_count(vertex_count)
    _check_vertex(source, vertex_count, "source")
    edges_list = _normalize_edges(edges, vertex_count)

    dist: List[Distance] = [UNREACHABLE] * vertex_count
    dist[source] = 0

    for _ in range(vertex_count - 1):
        for u, v, w in edges_list:
            if dist[u] != UNREACHABLE and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w

    for u, v, w in edges_list:
        if dist[u] != UNREACHABLE and dist[u] + w < dist[v]:
            return ShortestPaths(dist, True)
    return ShortestPaths(dist, False)
