"""
Presentation Contracts

Responsibility:
Define ViewModel contracts for one rendered frame of a trace.
Strictly decoupled from the engine: a renderer needs nothing else.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class GraphNode:
    """Renderable graph node."""
    node_id: int
    x: float
    y: float
    radius: float
    color: str
    label: str
    is_current: bool


@dataclass(frozen=True)
class GraphEdge:
    """Renderable graph edge (quadratic curve path)."""
    edge_id: str
    source_id: int
    target_id: int
    path: str
    stroke: str
    thickness: float
    is_bridge: bool


@dataclass(frozen=True)
class BccRegion:
    """Soft background tint behind one biconnected component."""
    path: str  # empty when the component has fewer than 3 nodes
    color: str
    node_ids: Tuple[int, ...]


@dataclass(frozen=True)
class TooltipViewModel:
    """disc / low / parent of the hovered node ('-' when unset)."""
    node_id: int
    x: float
    y: float
    disc: str
    low: str
    parent: str


@dataclass(frozen=True)
class StatsViewModel:
    visited: int
    articulation_points: int
    bridges: int
    bcc_count: int


@dataclass(frozen=True)
class FrameViewModel:
    """
    Fully calculated frame.

    DETERMINISTIC:
    Same snapshot + same positions + same hover = identical frame.
    """
    nodes: Tuple[GraphNode, ...]
    edges: Tuple[GraphEdge, ...]
    regions: Tuple[BccRegion, ...]
    stats: StatsViewModel
    tooltip: Optional[TooltipViewModel]
    caption: str
