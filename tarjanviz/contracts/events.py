"""
Trace Event Contracts
=====================

Closed set of structured event tags attached to every Snapshot.

Consumers format, filter or localize events by EventType and fields,
never by parsing text. Every variant is a frozen dataclass so an event
compares and hashes by value.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import ClassVar, FrozenSet
from enum import Enum

from .base import NodeId, Edge


class EventType(Enum):
    """Tag of a recorded state transition."""
    VISIT = "visit"
    TREE_EDGE = "tree_edge"
    POST_UPDATE_LOW = "post_update_low"
    ARTICULATION = "articulation"
    ROOT_ARTICULATION = "root_articulation"
    BRIDGE = "bridge"
    BACK_EDGE = "back_edge"
    COMPONENT_CLOSED = "component_closed"


@dataclass(frozen=True)
class TraceEvent:
    """Base of all event variants."""
    event_type: ClassVar[EventType]

    def to_dict(self) -> dict:
        payload = {'type': self.event_type.value}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, frozenset):
                value = sorted(list(value))
            payload[f.name] = value
        return payload


@dataclass(frozen=True)
class Visit(TraceEvent):
    """Node received its discovery time."""
    event_type: ClassVar[EventType] = EventType.VISIT
    node: NodeId


@dataclass(frozen=True)
class TreeEdge(TraceEvent):
    """DFS is about to descend from u into unvisited v."""
    event_type: ClassVar[EventType] = EventType.TREE_EDGE
    u: NodeId
    v: NodeId


@dataclass(frozen=True)
class PostUpdateLow(TraceEvent):
    """low[node] was folded with a finished child's low value."""
    event_type: ClassVar[EventType] = EventType.POST_UPDATE_LOW
    node: NodeId


@dataclass(frozen=True)
class Articulation(TraceEvent):
    """Non-root node separates a child subtree."""
    event_type: ClassVar[EventType] = EventType.ARTICULATION
    node: NodeId


@dataclass(frozen=True)
class RootArticulation(TraceEvent):
    """DFS root started more than one subtree."""
    event_type: ClassVar[EventType] = EventType.ROOT_ARTICULATION
    node: NodeId


@dataclass(frozen=True)
class Bridge(TraceEvent):
    """Tree edge u-v is a bridge."""
    event_type: ClassVar[EventType] = EventType.BRIDGE
    u: NodeId
    v: NodeId


@dataclass(frozen=True)
class BackEdge(TraceEvent):
    """Non-tree edge from u up to ancestor v."""
    event_type: ClassVar[EventType] = EventType.BACK_EDGE
    u: NodeId
    v: NodeId


@dataclass(frozen=True)
class ComponentClosed(TraceEvent):
    """
    A biconnected component was appended to bccs.

    ``node`` is the node whose check closed it (the DFS root for a
    residual drain); ``edges`` are canonical.
    """
    event_type: ClassVar[EventType] = EventType.COMPONENT_CLOSED
    node: NodeId
    edges: FrozenSet[Edge]
