from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .errors import InvalidArgumentError
from .graph import ShortestPaths, shortest_paths


@dataclass
class Problem:
    vertex_count: int
    source: int = 0
    edges: List[Tuple[int, int, int]] = field(default_factory=list)

    def solve(self) -> ShortestPaths:
        return shortest_paths(self.vertex_count, self.edges, self.source)


def _edge_from_json(item: Any, index: int) -> Tuple[int, int, int]:
    if isinstance(item, dict):
        u = item.get("u", item.get("src"))
        v = item.get("v", item.get("dst"))
        w = item.get("w", item.get("weight"))
        if u is None or v is None or w is None:
            raise InvalidArgumentError(f"edge #{index} needs keys u, v, w")
        return u, v, w
    if isinstance(item, list) and len(item) == 3:
        u, v, w = item
        return u, v, w
    raise InvalidArgumentError(f"edge #{index} must be [u, v, w] or an object, got {item!r}")


def problem_from_dict(data: Dict[str, Any]) -> Problem:
    """Build a Problem from a decoded JSON document.

    Expected shape::

        {"vertices": 5, "source": 0, "edges": [[0, 1, -1], {"u": 0, "v": 2, "w": 4}]}

    ``source`` defaults to 0. Vertex ranges and weight types are checked by the
    engine when the problem is solved.
    """
    if not isinstance(data, dict):
        raise InvalidArgumentError("problem must be a JSON object")
    vertices = data.get("vertices")
    if isinstance(vertices, bool) or not isinstance(vertices, int) or vertices < 1:
        raise InvalidArgumentError("vertices must be an int >= 1")
    source = data.get("source", 0)
    raw_edges = data.get("edges", [])
    if not isinstance(raw_edges, list):
        raise InvalidArgumentError("edges must be a list")
    edges = [_edge_from_json(item, i) for i, item in enumerate(raw_edges)]
    return Problem(vertices, source, edges)


def load_problem(path: str) -> Problem:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidArgumentError(f"{path}: invalid JSON: {exc}") from exc
    return problem_from_dict(data)
