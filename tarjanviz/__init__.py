"""
Tarjan Trace Visualizer Backend

This package computes articulation points, bridges and biconnected
components of an undirected graph with the discovery-time / low-link DFS,
and records every state transition as an immutable snapshot so clients can
scrub through the run in either direction.

LAYER STRUCTURE:
================

1. CONTRACTS (contracts/)
   - Immutable shared types: Snapshot, tagged events, errors, edge keys

2. CORE ENGINE (core/)
   - Responsibility: Graph validation, low-link DFS, brute-force oracle
   - Allowed inputs: node count + edge list
   - Outputs: Graph, StepSequence, BiconnectivityResult
   - MUST NOT: Keep state between runs, render, lay out

3. TRACE LAYER (temporal/)
   - Responsibility: Snapshot capture, append-only step sequence
   - Outputs: frozen StepSequence with a hash chain
   - MUST NOT: Alias live algorithm state

4. INGESTION (ingestion/)
   - Responsibility: Random graph generation

5. STORAGE (storage/) and API (api/)
   - Responsibility: Keep finished traces by id, serve them read-only

CONSTRAINTS ENFORCED:
=====================
- Immutability-first: snapshots and sequences never change once recorded
- Deterministic: same graph and edge order -> identical trace
- Explicit errors: every failure carries an ErrorCode
- Full recomputation: a new graph is a new run, never a patch
"""

from .contracts import (
    InvalidGraph, SequenceFrozen, TraceNotFound, ErrorCode, Error,
    EventType, Snapshot, canonical_edge,
)
from .core import (
    Graph, TarjanEngine, BiconnectivityResult, run_trace,
    TopologyOracle, VerificationReport,
)
from .temporal import StepSequence, TraceRecorder
from .ingestion import GenerationConfig, GeneratedGraph, generate_graph
from .engine import TraceBackend, BackendConfig, StepOutOfRange

__version__ = "0.1.0"

__all__ = [
    'InvalidGraph', 'SequenceFrozen', 'TraceNotFound', 'ErrorCode', 'Error',
    'EventType', 'Snapshot', 'canonical_edge',
    'Graph', 'TarjanEngine', 'BiconnectivityResult', 'run_trace',
    'TopologyOracle', 'VerificationReport',
    'StepSequence', 'TraceRecorder',
    'GenerationConfig', 'GeneratedGraph', 'generate_graph',
    'TraceBackend', 'BackendConfig', 'StepOutOfRange',
]
