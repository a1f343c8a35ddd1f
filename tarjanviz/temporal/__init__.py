"""
Temporal Trace Layer

Snapshot capture and the append-only, index-addressable step sequence.
Everything this layer hands out is immutable.
"""

from .sequence import StepSequence, SequenceState
from .recorder import TraceRecorder, NullRecorder, snapshot_of

__all__ = [
    'StepSequence', 'SequenceState',
    'TraceRecorder', 'NullRecorder', 'snapshot_of',
]
