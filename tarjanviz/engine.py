"""
Engine Orchestration Module

This module provides the unified interface for turning graphs into
stored, replayable traces while keeping the layers separate.

DESIGN PRINCIPLES:
==================
1. Layers communicate ONLY through contracts
2. Every graph (explicit or generated) gets a brand-new run
3. Stored traces are frozen; readers address them by id and index
4. No shared mutable state between runs
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .contracts.base import Error, ErrorCode, InvalidGraph
from .contracts.trace import Snapshot
from .core.graph import Graph
from .core.tarjan import TarjanEngine
from .core.topology import TopologyOracle, VerificationReport
from .ingestion.generator import GenerationConfig, generate_graph
from .storage import StoreConfig, TraceRecord, TraceStore


class StepOutOfRange(IndexError):
    """Requested step index is outside a stored trace."""

    def __init__(self, trace_id: str, index: int, length: int):
        super().__init__(f"step {index} outside [0, {length}) for trace {trace_id}")
        self.error = Error(
            code=ErrorCode.STEP_OUT_OF_RANGE,
            message=str(self),
            context=(("trace_id", trace_id), ("index", str(index)), ("length", str(length)))
        )


@dataclass
class BackendConfig:
    """
    Unified configuration for the trace backend.

    Explicit graphs obey the same node and edge limits as generated ones
    (``generation.max_nodes`` / ``generation.max_edges``).
    """
    generation: GenerationConfig = None
    store: StoreConfig = None

    def __post_init__(self):
        self.generation = self.generation or GenerationConfig()
        self.store = self.store or StoreConfig()


def _check_size(node_count: object, edges: Sequence[object], config: GenerationConfig) -> None:
    # Non-integer counts are left to Graph.construct to reject.
    if isinstance(node_count, int) and not isinstance(node_count, bool) and node_count > config.max_nodes:
        raise InvalidGraph(Error(
            code=ErrorCode.GRAPH_TOO_LARGE,
            message=f"node_count must be <= {config.max_nodes}, got {node_count}",
            context=(("node_count", str(node_count)),)
        ))
    if len(edges) > config.max_edges:
        raise InvalidGraph(Error(
            code=ErrorCode.GRAPH_TOO_LARGE,
            message=f"at most {config.max_edges} edges allowed, got {len(edges)}",
            context=(("edges", str(len(edges))),)
        ))


class TraceBackend:
    """
    Unified backend for the low-link visualizer.

    LAYER FLOW:
    ===========
    1. Ingestion: node count + edges (or generator) -> Graph
    2. Core: Graph -> frozen StepSequence
    3. Storage: TraceRecord keyed by the sequence head hash
    4. Readers: step lookups by (trace_id, index)
    """

    def __init__(self, config: Optional[BackendConfig] = None):
        self._config = config or BackendConfig()
        self._engine = TarjanEngine()
        self._store = TraceStore(self._config.store)

    @property
    def config(self) -> BackendConfig:
        return self._config

    # =========================================================================
    # TRACE CREATION
    # =========================================================================

    def trace_graph(self, node_count: int, edges: Sequence[object]) -> TraceRecord:
        """Validate an explicit graph (size first) and trace it."""
        _check_size(node_count, edges, self._config.generation)
        graph = Graph.construct(node_count, edges)
        return self._record(graph)

    def trace_random(
        self,
        nodes: Optional[int] = None,
        edges: Optional[int] = None,
        seed: Optional[int] = None
    ) -> TraceRecord:
        """Generate a graph and trace it."""
        generated = generate_graph(nodes, edges, seed, self._config.generation)
        return self._record(
            generated.graph,
            requested_edges=generated.requested_edges,
            seed=generated.seed
        )

    def _record(
        self,
        graph: Graph,
        requested_edges: Optional[int] = None,
        seed: Optional[int] = None
    ) -> TraceRecord:
        steps = self._engine.run(graph)
        record = TraceRecord(
            trace_id=TraceRecord.trace_id_for(steps, graph, requested_edges, seed),
            graph=graph,
            steps=steps,
            requested_edges=requested_edges,
            seed=seed,
        )
        return self._store.put(record)

    # =========================================================================
    # READ INTERFACE
    # =========================================================================

    def get_trace(self, trace_id: str) -> TraceRecord:
        return self._store.get(trace_id)

    def get_step(self, trace_id: str, index: int) -> Snapshot:
        steps = self._store.get(trace_id).steps
        if not 0 <= index < len(steps):
            raise StepOutOfRange(trace_id, index, len(steps))
        return steps.at(index)

    def get_steps(self, trace_id: str, offset: int = 0, limit: int = 100) -> List[Snapshot]:
        steps = self._store.get(trace_id).steps
        return steps[max(offset, 0):max(offset, 0) + max(limit, 0)]

    def verify_trace(self, trace_id: str) -> VerificationReport:
        """Check a stored trace against the brute-force oracle."""
        record = self._store.get(trace_id)
        return TopologyOracle(record.graph).verify(record.steps)

    def trace_ids(self) -> List[str]:
        return self._store.trace_ids()
