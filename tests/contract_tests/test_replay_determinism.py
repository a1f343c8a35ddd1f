"""
Deterministic Replay Test
Same graph, same edge order -> identical step sequence.

Verified at two levels:
- Full equality of every snapshot
- Head hash of the step chain (what the trace id is derived from)
"""

from hypothesis import given, settings

from tarjanviz.core.graph import Graph
from tarjanviz.core.tarjan import TarjanEngine
from tarjanviz.engine import TraceBackend

from .test_invariants import graphs


def test_golden_replay_determinism():
    """Two engines, two graph objects, one trace."""
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3), (1, 6)]
    a = TarjanEngine().run(Graph.construct(7, edges))
    b = TarjanEngine().run(Graph.construct(7, list(edges)))

    assert a == b
    assert a.head_hash == b.head_hash


def test_engine_reuse_keeps_no_state():
    engine = TarjanEngine()
    g = Graph.construct(4, [(0, 1), (1, 2), (2, 3)])
    first = engine.run(g)
    engine.run(Graph.construct(3, [(0, 1), (1, 2), (2, 0)]))
    assert engine.run(g) == first


def test_backend_trace_id_stable_across_instances():
    edges = [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)]
    assert TraceBackend().trace_graph(4, edges).trace_id == TraceBackend().trace_graph(4, edges).trace_id


def test_random_trace_replays_from_seed():
    a = TraceBackend().trace_random(15, 25, seed=2024)
    b = TraceBackend().trace_random(15, 25, seed=2024)
    assert a.graph == b.graph
    assert a.steps == b.steps


@settings(max_examples=50, deadline=None)
@given(graphs())
def test_replay_property(graph):
    assert TarjanEngine().run(graph).head_hash == TarjanEngine().run(graph).head_hash
