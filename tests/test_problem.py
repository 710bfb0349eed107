import json
from pathlib import Path

import pytest

from bellman_paths.errors import InvalidArgumentError
from bellman_paths.graph import UNREACHABLE
from bellman_paths.problem import Problem, load_problem, problem_from_dict


def test_load_problem_and_solve(tmp_path: Path):
    doc = {
        "vertices": 4,
        "source": 0,
        "edges": [[0, 1, 1], {"u": 1, "v": 2, "w": -2}, {"src": 2, "dst": 0, "weight": 5}],
    }
    p = tmp_path / "g.json"
    p.write_text(json.dumps(doc))
    problem = load_problem(str(p))
    assert problem == Problem(4, 0, [(0, 1, 1), (1, 2, -2), (2, 0, 5)])
    res = problem.solve()
    assert not res.has_negative_cycle
    assert res.distances == [0, 1, -1, UNREACHABLE]


def test_source_defaults_to_zero():
    assert problem_from_dict({"vertices": 2}).source == 0


@pytest.mark.parametrize(
    "doc",
    [
        [],
        {},
        {"vertices": 0},
        {"vertices": "3"},
        {"vertices": 3, "edges": {"u": 0}},
        {"vertices": 3, "edges": [[0, 1]]},
        {"vertices": 3, "edges": [{"u": 0, "v": 1}]},
    ],
)
def test_malformed_documents(doc):
    with pytest.raises(InvalidArgumentError):
        problem_from_dict(doc)


def test_out_of_range_edge_fails_on_solve():
    problem = problem_from_dict({"vertices": 2, "edges": [[0, 2, 1]]})
    with pytest.raises(InvalidArgumentError):
        problem.solve()


def test_invalid_json(tmp_path: Path):
    p = tmp_path / "bad.json"
    p.write_text("{not json")
    with pytest.raises(InvalidArgumentError):
        load_problem(str(p))


def test_non_utf8_file(tmp_path: Path):
    p = tmp_path / "latin1.json"
    p.write_bytes(b'{"vertices": 2, "edges": [], "x": "\xff\xfe"}')
    with pytest.raises(InvalidArgumentError):
        load_problem(str(p))
