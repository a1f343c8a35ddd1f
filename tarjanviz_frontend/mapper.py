"""
Snapshot to Frame Mapper

Converts one trace snapshot plus externally owned node positions into a
read-only FrameViewModel.

MAPPING BOUNDARY:
=================
This is the ONLY place where snapshots become view models.

MAPPING RULES:
==============
1. Never mutate the snapshot or the graph
2. Colours and sizes come from FrameStyle, nowhere else
3. BCC tints cover only components discovered up to this snapshot
4. Preserve graph edge order
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import math

from tarjanviz.contracts.base import canonical_edge
from tarjanviz.contracts.trace import Snapshot
from tarjanviz.core.graph import Graph

from .layout import NodePosition
from .presentation.describe import describe_event
from .presentation.viewmodels import (
    GraphNode, GraphEdge, BccRegion, TooltipViewModel, StatsViewModel,
    FrameViewModel,
)


@dataclass(frozen=True)
class FrameStyle:
    articulation_color: str = "#ff6b6b"
    visited_color: str = "#22d3ee"
    unvisited_color: str = "#8b9dbb"
    bridge_color: str = "#ff6b6b"
    edge_stroke: str = "url(#edgeGradient)"
    node_radius: float = 10.0
    current_node_radius: float = 13.0
    edge_width: float = 2.2
    bridge_width: float = 3.5
    edge_bend: float = 0.08
    region_palette: Tuple[str, ...] = ("#22d3ee", "#a78bfa", "#f472b6", "#34d399", "#f59e0b")


def curve_path(a: NodePosition, b: NodePosition, bend: float) -> str:
    """Quadratic Bezier from a to b, control point pushed off the midpoint."""
    dx = b.x - a.x
    dy = b.y - a.y
    cx = (a.x + b.x) / 2 - dy * bend
    cy = (a.y + b.y) / 2 + dx * bend
    return f"M {a.x:.1f} {a.y:.1f} Q {cx:.1f} {cy:.1f} {b.x:.1f} {b.y:.1f}"


def region_path(points: Sequence[NodePosition]) -> str:
    """Closed polygon through points sorted by angle around their centroid."""
    if len(points) < 3:
        return ""
    cx = sum(p.x for p in points) / len(points)
    cy = sum(p.y for p in points) / len(points)
    ordered = sorted(points, key=lambda p: math.atan2(p.y - cy, p.x - cx))
    parts = [
        f"{'M' if i == 0 else 'L'} {p.x:.1f} {p.y:.1f}"
        for i, p in enumerate(ordered)
    ]
    return " ".join(parts) + " Z"


class FrameMapper:
    """
    Maps (graph, snapshot, positions) to a FrameViewModel.

    SINGLE POINT OF CONVERSION:
    ===========================
    Renderers and exporters consume FrameViewModel only.
    """

    def __init__(self, style: Optional[FrameStyle] = None):
        self._style = style or FrameStyle()

    def map_frame(
        self,
        graph: Graph,
        snapshot: Snapshot,
        positions: Sequence[NodePosition],
        hover: Optional[int] = None
    ) -> FrameViewModel:
        if len(positions) != graph.node_count:
            raise ValueError(
                f"expected {graph.node_count} positions, got {len(positions)}"
            )
        return FrameViewModel(
            nodes=tuple(self._map_node(n, snapshot, positions) for n in graph.nodes),
            edges=tuple(self._map_edge(u, v, snapshot, positions) for u, v in graph.edges),
            regions=self._map_regions(snapshot, positions),
            stats=self.map_stats(snapshot),
            tooltip=self._map_tooltip(hover, snapshot, positions),
            caption=describe_event(snapshot.event),
        )

    def node_color(self, node: int, snapshot: Snapshot) -> str:
        if node in snapshot.articulations:
            return self._style.articulation_color
        if node in snapshot.visited:
            return self._style.visited_color
        return self._style.unvisited_color

    def map_stats(self, snapshot: Snapshot) -> StatsViewModel:
        return StatsViewModel(
            visited=len(snapshot.visited),
            articulation_points=len(snapshot.articulations),
            bridges=len(snapshot.bridges),
            bcc_count=snapshot.bcc_count,
        )

    # =========================================================================
    # INTERNAL
    # =========================================================================

    def _map_node(self, node: int, snapshot: Snapshot, positions) -> GraphNode:
        p = positions[node]
        is_current = snapshot.current_node == node
        return GraphNode(
            node_id=node,
            x=p.x,
            y=p.y,
            radius=self._style.current_node_radius if is_current else self._style.node_radius,
            color=self.node_color(node, snapshot),
            label=str(node),
            is_current=is_current,
        )

    def _map_edge(self, u: int, v: int, snapshot: Snapshot, positions) -> GraphEdge:
        is_bridge = canonical_edge(u, v) in snapshot.bridges
        return GraphEdge(
            edge_id=f"e-{u}-{v}",
            source_id=u,
            target_id=v,
            path=curve_path(positions[u], positions[v], self._style.edge_bend),
            stroke=self._style.bridge_color if is_bridge else self._style.edge_stroke,
            thickness=self._style.bridge_width if is_bridge else self._style.edge_width,
            is_bridge=is_bridge,
        )

    def _map_regions(self, snapshot: Snapshot, positions) -> Tuple[BccRegion, ...]:
        palette = self._style.region_palette
        regions = []
        for idx, component in enumerate(snapshot.bccs):
            node_ids = tuple(sorted({n for edge in component for n in edge}))
            regions.append(BccRegion(
                path=region_path([positions[n] for n in node_ids]),
                color=palette[idx % len(palette)],
                node_ids=node_ids,
            ))
        return tuple(regions)

    def _map_tooltip(self, hover: Optional[int], snapshot: Snapshot, positions) -> Optional[TooltipViewModel]:
        if hover is None:
            return None
        visited = snapshot.is_visited(hover)
        parent = snapshot.parent[hover]
        p = positions[hover]
        return TooltipViewModel(
            node_id=hover,
            x=p.x + 14,
            y=p.y - 10,
            disc=str(snapshot.disc[hover]) if visited else "-",
            low=str(snapshot.low[hover]) if visited else "-",
            parent="-" if parent is None else str(parent),
        )
