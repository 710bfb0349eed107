from __future__ import annotations

import argparse
import sys
from typing import List, Tuple

from .errors import InvalidArgumentError
from .graph import ShortestPaths
from .logger import log_event
from .problem import Problem, load_problem
from .report import distances_to_json, format_report


EXIT_OK = 0
EXIT_NEGATIVE_CYCLE = 1
EXIT_INVALID = 2

SAMPLE = Problem(
    vertex_count=5,
    source=0,
    edges=[(0, 1, -1), (0, 2, 4), (1, 2, 3), (1, 3, 2), (1, 4, 2), (3, 2, 5), (3, 1, 1), (4, 3, -3)],
)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bellman-paths", description="Single-source shortest paths with negative cycle detection")
    sub = p.add_subparsers(dest="cmd", required=True)

    solve = sub.add_parser("solve", help="Solve a graph given on the command line")
    solve.add_argument("--vertices", type=int, required=True, help="Number of vertices V; vertices are 0..V-1")
    solve.add_argument("--source", type=int, default=0, help="Source vertex (default 0)")
    solve.add_argument("--edges", nargs="*", default=[], help="Edges of form u:v:weight, e.g., 0:1:-1 1:2:3")

    from_json = sub.add_parser("solve-json", help="Solve a graph read from a JSON file")
    from_json.add_argument("path", help="Path to JSON problem file")

    sub.add_parser("sample", help="Solve the built-in five-vertex sample graph")

    return p


def parse_edges(edge_specs: List[str]) -> List[Tuple[int, int, int]]:
    edges = []
    for spec in edge_specs:
        try:
            u, v, w = spec.split(":")
            edges.append((int(u), int(v), int(w)))
        except ValueError:
            raise InvalidArgumentError(f"Invalid edge spec '{spec}'. Expected u:v:weight") from None
    return edges


def _run(problem: Problem) -> int:
    try:
        res: ShortestPaths = problem.solve()
    except InvalidArgumentError as exc:
        log_event("error", action="solve", error=str(exc))
        return EXIT_INVALID
    log_event(
        "solve",
        vertices=problem.vertex_count,
        edges=len(problem.edges),
        source=problem.source,
        has_negative_cycle=res.has_negative_cycle,
        distances=None if res.has_negative_cycle else distances_to_json(res.distances),
    )
    print(format_report(res, problem.source))
    return EXIT_NEGATIVE_CYCLE if res.has_negative_cycle else EXIT_OK


def cmd_solve(args: argparse.Namespace) -> int:
    try:
        edges = parse_edges(args.edges)
    except InvalidArgumentError as exc:
        log_event("error", action="parse_edges", error=str(exc))
        return EXIT_INVALID
    return _run(Problem(args.vertices, args.source, edges))


def cmd_solve_json(args: argparse.Namespace) -> int:
    try:
        problem = load_problem(args.path)
    except (InvalidArgumentError, OSError) as exc:
        log_event("error", action="load_problem", path=args.path, error=str(exc))
        return EXIT_INVALID
    return _run(problem)


def main(argv: List[str] | None = None) -> int:
    p = build_arg_parser()
    args = p.parse_args(argv)
    if args.cmd == "solve":
        return cmd_solve(args)
    if args.cmd == "solve-json":
        return cmd_solve_json(args)
    if args.cmd == "sample":
        return _run(SAMPLE)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
