"""
Algorithm State
===============

Mutable working state of ONE engine run.

OWNERSHIP:
- Created fresh by TarjanEngine.run(), never shared across runs
- Only the engine mutates it; the recorder copies out of it
- Discarded once the final snapshot is recorded
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Set

from ..contracts.base import NodeId, Edge, canonical_edge, same_edge


UNVISITED = -1


@dataclass
class AlgorithmState:
    """Discovery / low-link arrays plus the pending-edge stack and results."""
    node_count: int
    disc: List[int] = field(default_factory=list)
    low: List[int] = field(default_factory=list)
    parent: List[Optional[NodeId]] = field(default_factory=list)
    visited: Set[NodeId] = field(default_factory=set)
    articulations: Set[NodeId] = field(default_factory=set)
    bridges: Set[Edge] = field(default_factory=set)
    pending_edges: List[Edge] = field(default_factory=list)
    bccs: List[FrozenSet[Edge]] = field(default_factory=list)
    next_time: int = 0

    def __post_init__(self):
        self.disc = [UNVISITED] * self.node_count
        self.low = [UNVISITED] * self.node_count
        self.parent = [None] * self.node_count

    def is_unvisited(self, node: NodeId) -> bool:
        return self.disc[node] == UNVISITED

    def discover(self, node: NodeId) -> int:
        """Assign the next discovery time to an unvisited node."""
        assert self.disc[node] == UNVISITED, f"node {node} discovered twice"
        t = self.next_time
        self.next_time += 1
        self.disc[node] = t
        self.low[node] = t
        self.visited.add(node)
        return t

    def fold_low(self, node: NodeId, value: int) -> None:
        if value < self.low[node]:
            self.low[node] = value

    def add_bridge(self, u: NodeId, v: NodeId) -> None:
        self.bridges.add(canonical_edge(u, v))

    def pop_component(self, u: NodeId, v: NodeId) -> FrozenSet[Edge]:
        """
        Pop pending edges down to and including u-v (either orientation).

        Appends the popped edges as one BCC and returns it. Returns an
        empty set (and appends nothing) when the stack was already empty.
        """
        component = set()
        while self.pending_edges:
            edge = self.pending_edges.pop()
            component.add(canonical_edge(*edge))
            if same_edge(edge, u, v):
                break
        return self._append_component(component)

    def drain_component(self) -> FrozenSet[Edge]:
        """Pop every pending edge into one final BCC."""
        component = {canonical_edge(*edge) for edge in self.pending_edges}
        self.pending_edges.clear()
        return self._append_component(component)

    def _append_component(self, component: Set[Edge]) -> FrozenSet[Edge]:
        frozen = frozenset(component)
        if frozen:
            self.bccs.append(frozen)
        return frozen
