"""
Tarjan Trace Visualizer: Trace API Server
=========================================

Serves low-link traces to playback clients.
A trace is computed once per graph and then only read, by index.

Endpoints:
- GET  /health
- POST /api/v1/traces                      -> trace an explicit graph
- POST /api/v1/traces/random               -> generate a graph and trace it
- GET  /api/v1/traces/{trace_id}           -> summary + final answer
- GET  /api/v1/traces/{trace_id}/steps     -> page of snapshots
- GET  /api/v1/traces/{trace_id}/steps/{i} -> one snapshot
- GET  /api/v1/traces/{trace_id}/verify    -> oracle comparison

Usage:
    uvicorn tarjanviz.api.server:app --reload
"""
import os
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..contracts.base import InvalidGraph, TraceNotFound
from ..engine import TraceBackend, BackendConfig, StepOutOfRange
from ..ingestion.generator import GenerationConfig
from ..storage import StoreConfig
from .mapper import map_record_to_summary, map_step_to_dto, map_steps_page


logger = logging.getLogger(__name__)

# =============================================================================
# INFRASTRUCTURE SETUP
# =============================================================================

backend_instance: Optional[TraceBackend] = None


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def config_from_env() -> BackendConfig:
    """Backend configuration with environment overrides."""
    return BackendConfig(
        generation=GenerationConfig(seed=_env_int("TARJANVIZ_SEED", None)),
        store=StoreConfig(max_stored_traces=_env_int("TARJANVIZ_MAX_TRACES", 32)),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize the trace backend on startup."""
    global backend_instance

    config = config_from_env()
    logger.info("initializing trace backend (max traces %d)", config.store.max_stored_traces)
    backend_instance = TraceBackend(config)

    yield

    logger.info("shutting down trace backend")
    backend_instance = None


app = FastAPI(
    title="Tarjan Trace Visualizer API",
    version="0.1.0",
    description="Step-by-step low-link traces: articulation points, bridges, biconnected components",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


def _backend() -> TraceBackend:
    if not backend_instance:
        raise HTTPException(status_code=503, detail="Backend not initialized")
    return backend_instance


# =============================================================================
# REQUEST MODELS
# =============================================================================

class GraphRequest(BaseModel):
    node_count: int
    edges: List[List[int]] = Field(default_factory=list)


class RandomGraphRequest(BaseModel):
    nodes: Optional[int] = None
    edges: Optional[int] = None
    seed: Optional[int] = None


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/health")
async def health_check():
    """System status."""
    backend = _backend()
    return {"status": "online", "stored_traces": len(backend.trace_ids())}


@app.post("/api/v1/traces", status_code=201)
async def create_trace(request: GraphRequest):
    """Trace an explicit graph. Invalid graphs are rejected with 422."""
    backend = _backend()
    try:
        record = backend.trace_graph(request.node_count, request.edges)
    except InvalidGraph as e:
        raise HTTPException(status_code=422, detail=e.error.to_dict())
    return map_record_to_summary(record)


@app.post("/api/v1/traces/random", status_code=201)
async def create_random_trace(request: RandomGraphRequest):
    """Generate a graph (bounded by configuration) and trace it."""
    backend = _backend()
    try:
        record = backend.trace_random(request.nodes, request.edges, request.seed)
    except InvalidGraph as e:
        raise HTTPException(status_code=422, detail=e.error.to_dict())
    return map_record_to_summary(record)


@app.get("/api/v1/traces/{trace_id}")
async def get_trace(trace_id: str):
    backend = _backend()
    try:
        record = backend.get_trace(trace_id)
    except TraceNotFound as e:
        raise HTTPException(status_code=404, detail=e.error.to_dict())
    return map_record_to_summary(record)


@app.get("/api/v1/traces/{trace_id}/steps")
async def get_steps(
    trace_id: str,
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000)
):
    """Page of snapshots in trace order."""
    backend = _backend()
    try:
        record = backend.get_trace(trace_id)
        snapshots = backend.get_steps(trace_id, offset, limit)
    except TraceNotFound as e:
        raise HTTPException(status_code=404, detail=e.error.to_dict())
    return map_steps_page(trace_id, offset, snapshots, len(record.steps))


@app.get("/api/v1/traces/{trace_id}/steps/{index}")
async def get_step(trace_id: str, index: int):
    """One snapshot; random access for scrubbing."""
    backend = _backend()
    try:
        snapshot = backend.get_step(trace_id, index)
    except (TraceNotFound, StepOutOfRange) as e:
        raise HTTPException(status_code=404, detail=e.error.to_dict())
    return map_step_to_dto(trace_id, index, snapshot)


@app.get("/api/v1/traces/{trace_id}/verify")
async def verify_trace(trace_id: str):
    """Compare the final snapshot with the brute-force oracle."""
    backend = _backend()
    try:
        report = backend.verify_trace(trace_id)
    except TraceNotFound as e:
        raise HTTPException(status_code=404, detail=e.error.to_dict())
    return {"trace_id": trace_id, **report.to_dict()}
