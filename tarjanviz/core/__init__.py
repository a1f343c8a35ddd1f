"""
Core Low-Link Engine

RESPONSIBILITY: Graph validation, DFS low-link computation, oracle checks
ALLOWED INPUTS: node count + edge list
OUTPUTS: Graph, StepSequence, BiconnectivityResult (all immutable)

WHAT THIS LAYER MUST NOT DO:
============================
- Lay out, colour or render anything
- Keep state between runs
- Patch a trace when the graph changes (a new graph is a new run)
"""

from .graph import Graph, build_adjacency
from .state import AlgorithmState, UNVISITED
from .tarjan import TarjanEngine, BiconnectivityResult, run_trace
from .topology import TopologyOracle, GraphMetrics, VerificationReport

__all__ = [
    'Graph', 'build_adjacency',
    'AlgorithmState', 'UNVISITED',
    'TarjanEngine', 'BiconnectivityResult', 'run_trace',
    'TopologyOracle', 'GraphMetrics', 'VerificationReport',
]
