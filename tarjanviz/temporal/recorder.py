"""
Trace Recorder
==============

Copies AlgorithmState into immutable Snapshots and appends them to the
StepSequence it owns.

BOUNDARY ENFORCEMENT:
=====================
- Receives the live state by reference, stores only COPIES
- NEVER modifies the state it reads
- A later capture can never change an earlier snapshot
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from ..contracts.base import NodeId
from ..contracts.events import TraceEvent
from ..contracts.trace import Snapshot
from .sequence import StepSequence

if TYPE_CHECKING:
    from ..core.state import AlgorithmState


def snapshot_of(
    state: AlgorithmState,
    current_node: Optional[NodeId],
    event: TraceEvent
) -> Snapshot:
    """Structural copy of every state field (tuples / frozensets)."""
    return Snapshot(
        disc=tuple(state.disc),
        low=tuple(state.low),
        parent=tuple(state.parent),
        visited=frozenset(state.visited),
        articulations=frozenset(state.articulations),
        bridges=frozenset(state.bridges),
        pending_edges=tuple(state.pending_edges),
        bccs=tuple(state.bccs),
        current_node=current_node,
        event=event,
    )


class TraceRecorder:
    """Captures snapshots for one run."""

    def __init__(self, sequence: Optional[StepSequence] = None):
        self._sequence = sequence if sequence is not None else StepSequence()

    @property
    def sequence(self) -> StepSequence:
        return self._sequence

    def capture(
        self,
        state: AlgorithmState,
        current_node: Optional[NodeId],
        event: TraceEvent
    ) -> Snapshot:
        snapshot = snapshot_of(state, current_node, event)
        self._sequence.push(snapshot)
        return snapshot

    def finish(self) -> StepSequence:
        """Freeze and hand over the sequence."""
        return self._sequence.freeze()


class NullRecorder:
    """Recorder for result-only runs: keeps nothing."""

    def capture(self, state, current_node, event) -> None:
        return None
