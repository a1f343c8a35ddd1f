"""
Random Graph Generator
======================

Produces simple undirected graphs for the "generate" action.

GUARANTEES:
- No self-loops, no duplicate unordered edges
- Bounded work: at most edges * attempts_factor draws
- Same seed -> same graph
- Under-generation is reported (shortfall), never raised
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Set
import logging
import random

from ..contracts.base import Edge, Error, ErrorCode, InvalidGraph, canonical_edge
from ..core.graph import Graph


logger = logging.getLogger(__name__)


@dataclass
class GenerationConfig:
    """Configuration for random graph generation."""
    default_nodes: int = 8
    default_edges: int = 10
    max_nodes: int = 40
    max_edges: int = 200
    attempts_factor: int = 10
    seed: Optional[int] = None


@dataclass(frozen=True)
class GeneratedGraph:
    """A generated graph plus what was asked for."""
    graph: Graph
    requested_edges: int
    seed: Optional[int]

    @property
    def shortfall(self) -> int:
        return self.requested_edges - self.graph.edge_count


def _check_bounds(nodes: int, edges: int, config: GenerationConfig) -> None:
    if not 1 <= nodes <= config.max_nodes:
        raise InvalidGraph(Error(
            code=ErrorCode.GENERATION_BOUNDS,
            message=f"nodes must be in [1, {config.max_nodes}], got {nodes}",
            context=(("nodes", str(nodes)),)
        ))
    if not 0 <= edges <= config.max_edges:
        raise InvalidGraph(Error(
            code=ErrorCode.GENERATION_BOUNDS,
            message=f"edges must be in [0, {config.max_edges}], got {edges}",
            context=(("edges", str(edges)),)
        ))


def generate_graph(
    nodes: Optional[int] = None,
    edges: Optional[int] = None,
    seed: Optional[int] = None,
    config: Optional[GenerationConfig] = None
) -> GeneratedGraph:
    """
    Draw endpoint pairs uniformly until ``edges`` distinct edges exist or
    the attempt budget runs out.
    """
    config = config or GenerationConfig()
    nodes = config.default_nodes if nodes is None else nodes
    edges = config.default_edges if edges is None else edges
    seed = config.seed if seed is None else seed
    _check_bounds(nodes, edges, config)

    rng = random.Random(seed)
    chosen: List[Edge] = []
    keys: Set[Edge] = set()
    attempts = 0
    budget = edges * config.attempts_factor

    while len(chosen) < edges and attempts < budget:
        attempts += 1
        u = rng.randrange(nodes)
        v = rng.randrange(nodes)
        if u == v:
            continue
        key = canonical_edge(u, v)
        if key in keys:
            continue
        keys.add(key)
        chosen.append(key)

    result = GeneratedGraph(
        graph=Graph.construct(nodes, chosen),
        requested_edges=edges,
        seed=seed,
    )
    if result.shortfall:
        logger.warning(
            "generated %d of %d requested edges on %d nodes after %d attempts",
            result.graph.edge_count, edges, nodes, attempts
        )
    return result
