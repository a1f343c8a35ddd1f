"""
Topology Oracle
===============

Brute-force structural answers used to check the low-link engine.

Wraps NetworkX and answers every question by the definition rather than
by low-link arithmetic:

- articulation point: removing the node (and its edges) increases the
  number of connected components among the remaining nodes
- bridge: removing the edge increases the number of connected components
- biconnected components: NetworkX's own edge partition

Cost is O(n * (n + m)); meant for small graphs (tests, verification of
API traces), not for production-size inputs.
"""

from __future__ import annotations
from typing import FrozenSet, List, Optional, Set
from dataclasses import dataclass
import logging

import networkx as nx

from ..contracts.base import NodeId, Edge, canonical_edge
from ..contracts.trace import Snapshot
from ..temporal.sequence import StepSequence
from .graph import Graph


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphMetrics:
    """Immutable structural metrics for a graph."""
    node_count: int
    edge_count: int
    density: float
    is_connected: bool
    connected_components_count: int


@dataclass(frozen=True)
class VerificationReport:
    """Differences between a trace's final snapshot and the oracle."""
    missing_articulations: FrozenSet[NodeId] = frozenset()
    extra_articulations: FrozenSet[NodeId] = frozenset()
    missing_bridges: FrozenSet[Edge] = frozenset()
    extra_bridges: FrozenSet[Edge] = frozenset()
    bcc_mismatch: bool = False
    edges_not_partitioned: bool = False

    @property
    def is_consistent(self) -> bool:
        return not (
            self.missing_articulations or self.extra_articulations
            or self.missing_bridges or self.extra_bridges
            or self.bcc_mismatch or self.edges_not_partitioned
        )

    def to_dict(self) -> dict:
        return {
            'is_consistent': self.is_consistent,
            'missing_articulations': sorted(self.missing_articulations),
            'extra_articulations': sorted(self.extra_articulations),
            'missing_bridges': [list(e) for e in sorted(self.missing_bridges)],
            'extra_bridges': [list(e) for e in sorted(self.extra_bridges)],
            'bcc_mismatch': self.bcc_mismatch,
            'edges_not_partitioned': self.edges_not_partitioned,
        }


class TopologyOracle:
    """
    Definition-based answers for one Graph.

    Holds an independent networkx copy; the Graph itself is never touched.
    """

    def __init__(self, graph: Graph):
        self._source = graph
        self._graph = graph.to_networkx()

    def connected_component_count(self, g: Optional[nx.Graph] = None) -> int:
        g = self._graph if g is None else g
        if g.number_of_nodes() == 0:
            return 0
        return nx.number_connected_components(g)

    def brute_force_articulations(self) -> FrozenSet[NodeId]:
        base = self.connected_component_count()
        found: Set[NodeId] = set()
        for node in list(self._graph.nodes):
            g = self._graph.copy()
            g.remove_node(node)
            # Removing an isolated node drops one component; that is not a cut.
            expected = base - 1 if self._graph.degree(node) == 0 else base
            if self.connected_component_count(g) > expected:
                found.add(node)
        return frozenset(found)

    def brute_force_bridges(self) -> FrozenSet[Edge]:
        base = self.connected_component_count()
        found: Set[Edge] = set()
        for u, v in list(self._graph.edges):
            g = self._graph.copy()
            g.remove_edge(u, v)
            if self.connected_component_count(g) > base:
                found.add(canonical_edge(u, v))
        return frozenset(found)

    def biconnected_components(self) -> FrozenSet[FrozenSet[Edge]]:
        return frozenset(
            frozenset(canonical_edge(u, v) for u, v in component)
            for component in nx.biconnected_component_edges(self._graph)
        )

    def compute_metrics(self) -> GraphMetrics:
        g = self._graph
        if g.number_of_nodes() == 0:
            return GraphMetrics(0, 0, 0.0, False, 0)

        return GraphMetrics(
            node_count=g.number_of_nodes(),
            edge_count=g.number_of_edges(),
            density=nx.density(g),
            is_connected=nx.is_connected(g),
            connected_components_count=nx.number_connected_components(g),
        )

    # =========================================================================
    # TRACE VERIFICATION
    # =========================================================================

    def verify_snapshot(self, snapshot: Snapshot) -> VerificationReport:
        """Compare a (final) snapshot with the definitions."""
        articulations = self.brute_force_articulations()
        bridges = self.brute_force_bridges()

        seen: List[Edge] = [e for component in snapshot.bccs for e in component]
        partitioned = (
            len(seen) == len(set(seen))
            and set(seen) == set(self._source.canonical_edges())
        )

        report = VerificationReport(
            missing_articulations=articulations - snapshot.articulations,
            extra_articulations=snapshot.articulations - articulations,
            missing_bridges=bridges - snapshot.bridges,
            extra_bridges=snapshot.bridges - bridges,
            bcc_mismatch=frozenset(snapshot.bccs) != self.biconnected_components(),
            edges_not_partitioned=not partitioned,
        )
        if not report.is_consistent:
            logger.warning("trace disagrees with topology oracle: %s", report.to_dict())
        return report

    def verify(self, steps: StepSequence) -> VerificationReport:
        """Verify a completed trace; an empty trace is trivially consistent."""
        final = steps.final
        if final is None:
            return VerificationReport()
        return self.verify_snapshot(final)

