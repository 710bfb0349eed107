from __future__ import annotations

from typing import List, Optional, Sequence

from .graph import Distance, ShortestPaths, is_reachable


INF_TOKEN = "INF"
NEGATIVE_CYCLE_LINE = "Negative cycle detected!"


def distances_to_json(distances: Sequence[Distance]) -> List[Optional[int]]:
    """Replace the unreachable sentinel with None so the list is valid JSON."""
    return [d if is_reachable(d) else None for d in distances]


def format_report(result: ShortestPaths, source: int) -> str:
    if result.has_negative_cycle:
        return NEGATIVE_CYCLE_LINE
    lines = [f"Shortest distances from source {source}:"]
    for i, d in enumerate(result.distances):
        lines.append(f"Vertex {i}: {d if is_reachable(d) else INF_TOKEN}")
    return "\n".join(lines)
