"""
Contracts Module

This module defines the explicit data types shared by the engine, the
trace layer and every read-only consumer (playback, frame mapping, API).
No consumer may import implementation details from the engine.

DESIGN PRINCIPLES:
==================
1. All contract types are immutable (frozen dataclasses, tuples, frozensets)
2. All failures are enumerated by an ErrorCode
3. Edges crossing a boundary are canonical (min, max) pairs unless the
   contract says they are oriented
4. Events are tagged variants, never free-form strings
"""

from .base import (
    NodeId, Edge, ErrorCode, Error,
    InvalidGraph, SequenceFrozen, TraceNotFound,
    canonical_edge, same_edge,
)
from .events import (
    EventType, TraceEvent,
    Visit, TreeEdge, PostUpdateLow, Articulation, RootArticulation,
    Bridge, BackEdge, ComponentClosed,
)
from .trace import Snapshot

__all__ = [
    'NodeId', 'Edge', 'ErrorCode', 'Error',
    'InvalidGraph', 'SequenceFrozen', 'TraceNotFound',
    'canonical_edge', 'same_edge',
    'EventType', 'TraceEvent',
    'Visit', 'TreeEdge', 'PostUpdateLow', 'Articulation', 'RootArticulation',
    'Bridge', 'BackEdge', 'ComponentClosed',
    'Snapshot',
]
