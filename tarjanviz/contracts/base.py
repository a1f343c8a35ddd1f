"""
Base Contracts and Shared Types

These are the foundational types used across all layers.
All types here are IMMUTABLE and represent pure data.

BOUNDARY ENFORCEMENT:
=====================
- This module is READ-ONLY from all layers
- Layers may import types but MUST NOT modify this module
- Errors are enumerated; nothing fails with an anonymous message
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple
from enum import Enum, auto


NodeId = int
Edge = Tuple[int, int]


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for deterministic error handling.
    No silent fallbacks - every error state is enumerated.
    """
    # Graph construction errors
    INVALID_NODE_COUNT = auto()
    SELF_LOOP = auto()
    ENDPOINT_OUT_OF_RANGE = auto()
    MALFORMED_EDGE = auto()

    # Generation errors
    GENERATION_BOUNDS = auto()

    # Request limits
    GRAPH_TOO_LARGE = auto()

    # Trace errors
    SEQUENCE_FROZEN = auto()
    TRACE_NOT_FOUND = auto()
    STEP_OUT_OF_RANGE = auto()


@dataclass(frozen=True)
class Error:
    """
    Immutable error representation with full context.
    Errors are data: the exception carries one so callers can serialize it.
    """
    code: ErrorCode
    message: str
    context: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def with_context(self, key: str, value: str) -> Error:
        """Return new Error with additional context (immutable)."""
        return Error(
            code=self.code,
            message=self.message,
            context=self.context + ((key, value),)
        )

    def to_dict(self) -> dict:
        return {
            'code': self.code.name,
            'message': self.message,
            'context': dict(self.context),
        }


class InvalidGraph(ValueError):
    """Raised when a graph (or a generation request) violates its contract."""

    def __init__(self, error: Error):
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> ErrorCode:
        return self.error.code


class SequenceFrozen(RuntimeError):
    """Raised on any attempt to append to a completed StepSequence."""

    def __init__(self, length: int):
        super().__init__(f"StepSequence is frozen at {length} steps")
        self.error = Error(
            code=ErrorCode.SEQUENCE_FROZEN,
            message=str(self),
            context=(("length", str(length)),)
        )


class TraceNotFound(KeyError):
    """Raised by the trace store for an unknown trace id."""

    def __init__(self, trace_id: str):
        super().__init__(trace_id)
        self.trace_id = trace_id
        self.error = Error(
            code=ErrorCode.TRACE_NOT_FOUND,
            message=f"No trace with id {trace_id!r}",
            context=(("trace_id", trace_id),)
        )


# =============================================================================
# EDGE KEYS
# =============================================================================

def canonical_edge(u: NodeId, v: NodeId) -> Edge:
    """Undirected edge key: (min, max)."""
    return (u, v) if u < v else (v, u)


def same_edge(edge: Edge, u: NodeId, v: Optional[NodeId]) -> bool:
    """True if the oriented ``edge`` is the undirected edge u-v."""
    a, b = edge
    return (a == u and b == v) or (a == v and b == u)
