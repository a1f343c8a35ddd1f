"""
Node Layout

Responsibility:
Initial node positions for a freshly generated graph.
Nodes sit on a circle around the viewport centre with a small uniform
jitter so that chords through the centre do not overlap exactly.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass
class LayoutConfig:
    """Viewport and circle parameters."""
    width: float = 1200.0
    height: float = 700.0
    radius_factor: float = 0.35
    jitter: float = 30.0


@dataclass(frozen=True)
class NodePosition:
    x: float
    y: float


def circular_layout(
    node_count: int,
    config: Optional[LayoutConfig] = None,
    seed: Optional[int] = None
) -> Tuple[NodePosition, ...]:
    """Positions indexed by node id; same seed -> same layout."""
    config = config or LayoutConfig()
    if node_count <= 0:
        return ()

    rng = np.random.default_rng(seed)
    cx = config.width / 2
    cy = config.height / 2
    r = min(config.width, config.height) * config.radius_factor

    angles = np.arange(node_count) / node_count * 2 * np.pi
    jitter = (rng.random((node_count, 2)) - 0.5) * config.jitter
    xs = cx + r * np.cos(angles) + jitter[:, 0]
    ys = cy + r * np.sin(angles) + jitter[:, 1]

    return tuple(NodePosition(x=float(x), y=float(y)) for x, y in zip(xs, ys))
