from fastapi.testclient import TestClient

from bellman_paths.api import app

client = TestClient(app)


def test_shortest_paths_endpoint():
    payload = {
        "vertices": 4,
        "source": 0,
        "edges": [{"u": 0, "v": 1, "w": 1}, {"u": 1, "v": 2, "w": -3}],
    }
    r = client.post("/api/shortest-paths", json=payload)
    assert r.status_code == 200
    assert r.json() == {"has_negative_cycle": False, "distances": [0, 1, -2, None]}
    assert "X-Request-Id" in r.headers


def test_negative_cycle_hides_distances():
    payload = {"vertices": 2, "edges": [{"u": 0, "v": 1, "w": 1}, {"u": 1, "v": 0, "w": -2}]}
    r = client.post("/api/shortest-paths", json=payload)
    assert r.status_code == 200
    assert r.json() == {"has_negative_cycle": True, "distances": None}


def test_out_of_range_vertex_is_400():
    r = client.post("/api/shortest-paths", json={"vertices": 2, "edges": [{"u": 0, "v": 3, "w": 1}]})
    assert r.status_code == 400


def test_health_and_status():
    assert client.get("/health").json() == {"status": "ok"}
    client.post("/api/shortest-paths", json={"vertices": 1})
    info = client.get("/api/status").json()
    assert info["status"] == "ok"
    assert info["last_result"]["vertices"] == 1


def test_vertex_count_is_capped(monkeypatch):
    from bellman_paths import api

    monkeypatch.setattr(api, "MAX_VERTICES", 10)
    r = client.post("/api/shortest-paths", json={"vertices": 11})
    assert r.status_code == 400
    assert client.post("/api/shortest-paths", json={"vertices": 10}).status_code == 200
