from __future__ import annotations

import os
import platform
import uuid
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel, StrictInt

from .errors import InvalidArgumentError
from .graph import shortest_paths
from .logger import log_event
from .report import distances_to_json


APP_VERSION = "0.1.0"
RUN_ID = os.environ.get("BFP_RUN_ID", str(uuid.uuid4()))
# upper bound on `vertices` per request
MAX_VERTICES = int(os.environ.get("BFP_MAX_VERTICES", "100000"))
app = FastAPI(title="Bellman Paths API", version=APP_VERSION)

# Summary of the last solved request, shown by /api/status
LAST_RESULT: Dict[str, Any] | None = None


class EdgeIn(BaseModel):
    u: StrictInt
    v: StrictInt
    w: StrictInt


class ShortestPathsRequest(BaseModel):
    vertices: StrictInt
    source: StrictInt = 0
    edges: List[EdgeIn] = []


class ShortestPathsResponse(BaseModel):
    has_negative_cycle: bool
    # None when a negative cycle was found; unreachable vertices are None
    distances: Optional[List[Optional[int]]]


@app.post("/api/shortest-paths", response_model=ShortestPathsResponse)
def api_shortest_paths(payload: ShortestPathsRequest):
    if payload.vertices > MAX_VERTICES:
        log_event("api_error", action="shortest_paths", error="too many vertices", vertices=payload.vertices)
        raise HTTPException(status_code=400, detail=f"vertices must be <= {MAX_VERTICES}")
    try:
        res = shortest_paths(payload.vertices, [(e.u, e.v, e.w) for e in payload.edges], payload.source)
    except InvalidArgumentError as exc:
        log_event("api_error", action="shortest_paths", error=str(exc))
        raise HTTPException(status_code=400, detail=str(exc))

    distances = None if res.has_negative_cycle else distances_to_json(res.distances)
    log_event("api_shortest_paths", vertices=payload.vertices, edges=len(payload.edges),
              source=payload.source, has_negative_cycle=res.has_negative_cycle)
    global LAST_RESULT
    LAST_RESULT = {
        "vertices": payload.vertices,
        "edges": len(payload.edges),
        "source": payload.source,
        "has_negative_cycle": res.has_negative_cycle,
    }
    return ShortestPathsResponse(has_negative_cycle=res.has_negative_cycle, distances=distances)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    req_id = str(uuid.uuid4())
    body = await request.body()
    log_event("http_request", method=request.method, path=request.url.path, body_len=len(body), request_id=req_id, run_id=RUN_ID)
    response = await call_next(request)
    response.headers["X-Request-Id"] = req_id
    response.headers["X-Run-Id"] = RUN_ID
    log_event("http_response", path=request.url.path, status=response.status_code, request_id=req_id, run_id=RUN_ID)
    return response


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/status")
def status():
    info: Dict[str, Any] = {
        "status": "ok",
        "version": APP_VERSION,
        "run_id": RUN_ID,
        "python": platform.python_version(),
    }
    if LAST_RESULT is not None:
        info["last_result"] = LAST_RESULT
    return info
