"""
Trace Snapshot Contract
=======================

One immutable point-in-time copy of the algorithm state.

INVARIANTS:
- Every container is a tuple or frozenset (no live state is aliased)
- Equality is field equality: two snapshots of the same state are equal
- low[v] <= disc[v] for every visited v
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from .base import NodeId, Edge
from .events import TraceEvent, EventType


@dataclass(frozen=True)
class Snapshot:
    """
    Immutable copy of one AlgorithmState plus the event that produced it.

    disc / low use -1 for unvisited nodes; parent uses None for roots and
    unvisited nodes. bridges and bccs hold canonical edges; pending_edges
    holds oriented edges, bottom of the stack first.
    """
    disc: Tuple[int, ...]
    low: Tuple[int, ...]
    parent: Tuple[Optional[NodeId], ...]
    visited: FrozenSet[NodeId]
    articulations: FrozenSet[NodeId]
    bridges: FrozenSet[Edge]
    pending_edges: Tuple[Edge, ...]
    bccs: Tuple[FrozenSet[Edge], ...]
    current_node: Optional[NodeId]
    event: TraceEvent

    @property
    def node_count(self) -> int:
        return len(self.disc)

    @property
    def event_type(self) -> EventType:
        return self.event.event_type

    @property
    def bcc_count(self) -> int:
        return len(self.bccs)

    def is_visited(self, node: NodeId) -> bool:
        return self.disc[node] != -1

    def to_dict(self) -> dict:
        """Plain JSON-ready form; sets are sorted for determinism."""
        return {
            'disc': list(self.disc),
            'low': list(self.low),
            'parent': list(self.parent),
            'visited': sorted(self.visited),
            'articulations': sorted(self.articulations),
            'bridges': [list(e) for e in sorted(self.bridges)],
            'pending_edges': [list(e) for e in self.pending_edges],
            'bccs': [[list(e) for e in sorted(c)] for c in self.bccs],
            'current_node': self.current_node,
            'event': self.event.to_dict(),
        }
