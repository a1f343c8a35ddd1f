"""
Event Descriptions

Responsibility:
Turn tagged trace events into the one-line text of the traversal log.
Formatting lives here only; the engine never produces text.
"""

from __future__ import annotations
from collections import deque
from typing import Deque, Tuple

from tarjanviz.contracts.events import (
    TraceEvent, Visit, TreeEdge, PostUpdateLow, Articulation,
    RootArticulation, Bridge, BackEdge, ComponentClosed,
)


def describe_event(event: TraceEvent) -> str:
    if isinstance(event, Visit):
        return f"Visit {event.node}"
    if isinstance(event, TreeEdge):
        return f"Tree edge {event.u}-{event.v}"
    if isinstance(event, PostUpdateLow):
        return f"Post DFS update low[{event.node}]"
    if isinstance(event, Articulation):
        return f"{event.node} is articulation"
    if isinstance(event, RootArticulation):
        return f"{event.node} is root articulation"
    if isinstance(event, Bridge):
        return f"Bridge {event.u}-{event.v}"
    if isinstance(event, BackEdge):
        return f"Back edge {event.u}-{event.v}"
    if isinstance(event, ComponentClosed):
        noun = "edge" if len(event.edges) == 1 else "edges"
        return f"Component closed at {event.node} ({len(event.edges)} {noun})"
    raise ValueError(f"Unknown event: {event!r}")


class TraversalLog:
    """Bounded, append-only list of event descriptions (oldest dropped)."""

    def __init__(self, capacity: int = 200):
        self._lines: Deque[str] = deque(maxlen=capacity)

    def record(self, event: TraceEvent) -> str:
        line = describe_event(event)
        self._lines.append(line)
        return line

    def clear(self) -> None:
        self._lines.clear()

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
