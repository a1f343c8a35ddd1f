"""
Tarjan Low-Link Engine
======================

Discovery-time / low-link DFS that finds articulation points, bridges and
biconnected components, recording a snapshot after every state change.

TRAVERSAL:
==========
Iterative DFS over an explicit frame stack. A frame holds the node, its
neighbor cursor, whether it is the DFS root, its child count and the child
currently being explored. "Return from child" is the moment a frame finds
its ``child`` slot set while on top of the stack. Depth is bounded only by
memory, never by the interpreter's recursion limit.

RULES (u = frame node, v = neighbor):
=====================================
- tree edge:  parent[v] = u, push (u, v), descend
- on return:  low[u] = min(low[u], low[v])
    - low[v] >= disc[u], u not root -> u is an articulation point
    - low[v] >= disc[u]             -> pop one BCC down to (u, v)
    - low[v] >  disc[u]             -> (u, v) is a bridge
- back edge:  v visited, v != parent[u], disc[v] < disc[u]
              push (u, v), low[u] = min(low[u], disc[v])
- root with more than one child   -> root articulation
- after each root, leftover pending edges are drained into one BCC

At the root low[v] >= disc[root] always holds, so each root child closes
its own component and the drain cannot merge two components.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple
import logging

from ..contracts.base import NodeId, Edge
from ..contracts.events import (
    Visit, TreeEdge, PostUpdateLow, Articulation, RootArticulation,
    Bridge, BackEdge, ComponentClosed,
)
from ..temporal.recorder import TraceRecorder, NullRecorder
from ..temporal.sequence import StepSequence
from .graph import Graph
from .state import AlgorithmState


logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    node: NodeId
    is_root: bool
    cursor: int = 0
    children: int = 0
    child: Optional[NodeId] = None


@dataclass(frozen=True)
class BiconnectivityResult:
    """Final answer of a run without the step history."""
    disc: Tuple[int, ...]
    low: Tuple[int, ...]
    articulations: FrozenSet[NodeId]
    bridges: FrozenSet[Edge]
    bccs: Tuple[FrozenSet[Edge], ...]

    def to_dict(self) -> dict:
        return {
            'articulations': sorted(self.articulations),
            'bridges': [list(e) for e in sorted(self.bridges)],
            'bccs': [[list(e) for e in sorted(c)] for c in self.bccs],
        }


class TarjanEngine:
    """
    Runs the low-link DFS over a valid Graph.

    The engine is stateless between runs: every call builds a fresh
    AlgorithmState that nothing else can reach.
    """

    def run(self, graph: Graph) -> StepSequence:
        """Full trace: one frozen StepSequence per call."""
        recorder = TraceRecorder()
        logger.debug("trace run: %d nodes, %d edges", graph.node_count, graph.edge_count)
        self._execute(graph, recorder)
        steps = recorder.finish()
        logger.debug("trace run finished: %d steps, head %s", len(steps), steps.head_hash[:12])
        return steps

    def analyze(self, graph: Graph) -> BiconnectivityResult:
        """Same traversal, no snapshots. For graphs too large to trace."""
        state = self._execute(graph, NullRecorder())
        return BiconnectivityResult(
            disc=tuple(state.disc),
            low=tuple(state.low),
            articulations=frozenset(state.articulations),
            bridges=frozenset(state.bridges),
            bccs=tuple(state.bccs),
        )

    # =========================================================================
    # TRAVERSAL
    # =========================================================================

    def _execute(self, graph: Graph, recorder) -> AlgorithmState:
        state = AlgorithmState(node_count=graph.node_count)
        for root in graph.nodes:
            if not state.is_unvisited(root):
                continue
            self._traverse_from(graph, state, root, recorder)
            if state.pending_edges:
                component = state.drain_component()
                recorder.capture(state, root, ComponentClosed(root, component))
        return state

    def _traverse_from(
        self,
        graph: Graph,
        state: AlgorithmState,
        root: NodeId,
        recorder
    ) -> None:
        state.discover(root)
        recorder.capture(state, root, Visit(root))
        stack: List[_Frame] = [_Frame(node=root, is_root=True)]

        while stack:
            frame = stack[-1]
            u = frame.node

            if frame.child is not None:
                v = frame.child
                frame.child = None
                self._return_from_child(state, frame, v, recorder)
                continue

            neighbors = graph.neighbors(u)
            if frame.cursor >= len(neighbors):
                stack.pop()
                if frame.is_root and frame.children > 1:
                    state.articulations.add(u)
                    recorder.capture(state, u, RootArticulation(u))
                continue

            v = neighbors[frame.cursor]
            frame.cursor += 1

            if state.is_unvisited(v):
                state.parent[v] = u
                state.pending_edges.append((u, v))
                frame.children += 1
                frame.child = v
                recorder.capture(state, u, TreeEdge(u, v))
                state.discover(v)
                recorder.capture(state, v, Visit(v))
                stack.append(_Frame(node=v, is_root=False))
            elif v != state.parent[u] and state.disc[v] < state.disc[u]:
                state.pending_edges.append((u, v))
                state.fold_low(u, state.disc[v])
                recorder.capture(state, u, BackEdge(u, v))

    def _return_from_child(
        self,
        state: AlgorithmState,
        frame: _Frame,
        v: NodeId,
        recorder
    ) -> None:
        u = frame.node
        state.fold_low(u, state.low[v])
        assert state.low[u] <= state.disc[u]
        recorder.capture(state, u, PostUpdateLow(u))

        if state.low[v] >= state.disc[u]:
            if not frame.is_root:
                state.articulations.add(u)
                recorder.capture(state, u, Articulation(u))
            component = state.pop_component(u, v)
            if component:
                recorder.capture(state, u, ComponentClosed(u, component))

        if state.low[v] > state.disc[u]:
            state.add_bridge(u, v)
            recorder.capture(state, u, Bridge(u, v))


def run_trace(graph: Graph) -> StepSequence:
    """Convenience wrapper: TarjanEngine().run(graph)."""
    return TarjanEngine().run(graph)
