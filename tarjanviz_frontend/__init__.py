"""
Tarjan Trace Visualizer Frontend Layer

Read-only consumers of a finished trace: node layout, playback controls,
event descriptions and per-frame view models.

BOUNDARY ENFORCEMENT:
=====================
- Reads snapshots by index, never writes to a StepSequence
- Owns node positions; the engine never sees coordinates
- Renders from FrameViewModel only
"""

from .layout import LayoutConfig, NodePosition, circular_layout
from .presentation.describe import describe_event, TraversalLog
from .presentation.viewmodels import (
    GraphNode, GraphEdge, BccRegion, TooltipViewModel, StatsViewModel,
    FrameViewModel,
)
from .interaction.playback import (
    ActionType, InteractionRequest, PlaybackConfig, PlaybackState,
    PlaybackController, apply_action,
)
from .mapper import FrameMapper, FrameStyle

__all__ = [
    'LayoutConfig', 'NodePosition', 'circular_layout',
    'describe_event', 'TraversalLog',
    'GraphNode', 'GraphEdge', 'BccRegion', 'TooltipViewModel',
    'StatsViewModel', 'FrameViewModel',
    'ActionType', 'InteractionRequest', 'PlaybackConfig', 'PlaybackState',
    'PlaybackController', 'apply_action',
    'FrameMapper', 'FrameStyle',
]
