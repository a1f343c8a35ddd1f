"""
Graph Model
===========

Validated, static undirected graph plus its derived adjacency.

CONSTRUCTION POLICY:
- node_count < 0, self-loops, out-of-range or malformed endpoints -> InvalidGraph
- Duplicate unordered edges are collapsed (first occurrence wins)
- Edge order is preserved; it fixes neighbor order and therefore the DFS
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Sequence, Tuple

import networkx as nx

from ..contracts.base import (
    NodeId, Edge, Error, ErrorCode, InvalidGraph, canonical_edge
)


def _reject(code: ErrorCode, message: str, **context) -> InvalidGraph:
    return InvalidGraph(Error(
        code=code,
        message=message,
        context=tuple((k, str(v)) for k, v in context.items())
    ))


def _as_pair(raw: object, position: int) -> Edge:
    try:
        u, v = raw
    except (TypeError, ValueError):
        raise _reject(
            ErrorCode.MALFORMED_EDGE,
            f"Edge #{position} is not a pair: {raw!r}",
            position=position
        ) from None
    if isinstance(u, bool) or isinstance(v, bool) or not isinstance(u, int) or not isinstance(v, int):
        raise _reject(
            ErrorCode.MALFORMED_EDGE,
            f"Edge #{position} endpoints must be integers: {raw!r}",
            position=position
        )
    return u, v


def build_adjacency(node_count: int, edges: Iterable[Edge]) -> Tuple[Tuple[NodeId, ...], ...]:
    """Each edge contributes to both endpoints, in edge order."""
    adj: List[List[NodeId]] = [[] for _ in range(node_count)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return tuple(tuple(row) for row in adj)


@dataclass(frozen=True)
class Graph:
    """
    Immutable undirected simple graph on nodes 0..node_count-1.

    ``edges`` keeps the input orientation of each first occurrence;
    use ``canonical_edges()`` for (min, max) keys.
    """
    node_count: int
    edges: Tuple[Edge, ...]
    _adjacency: Tuple[Tuple[NodeId, ...], ...] = field(repr=False, compare=False)
    _edge_keys: FrozenSet[Edge] = field(repr=False, compare=False)

    @staticmethod
    def construct(node_count: int, edge_list: Sequence[object] = ()) -> Graph:
        """Validate input and build the graph (see module policy)."""
        if isinstance(node_count, bool) or not isinstance(node_count, int):
            raise _reject(
                ErrorCode.INVALID_NODE_COUNT,
                f"node_count must be an integer, got {node_count!r}"
            )
        if node_count < 0:
            raise _reject(
                ErrorCode.INVALID_NODE_COUNT,
                f"node_count must be >= 0, got {node_count}",
                node_count=node_count
            )

        edges: List[Edge] = []
        seen: Dict[Edge, int] = {}
        for position, raw in enumerate(edge_list):
            u, v = _as_pair(raw, position)
            if u == v:
                raise _reject(
                    ErrorCode.SELF_LOOP,
                    f"Self-loop on node {u} at edge #{position}",
                    node=u, position=position
                )
            for endpoint in (u, v):
                if not 0 <= endpoint < node_count:
                    raise _reject(
                        ErrorCode.ENDPOINT_OUT_OF_RANGE,
                        f"Endpoint {endpoint} outside [0, {node_count}) at edge #{position}",
                        endpoint=endpoint, position=position
                    )
            key = canonical_edge(u, v)
            if key in seen:
                continue
            seen[key] = position
            edges.append((u, v))

        return Graph(
            node_count=node_count,
            edges=tuple(edges),
            _adjacency=build_adjacency(node_count, edges),
            _edge_keys=frozenset(seen),
        )

    @staticmethod
    def empty(node_count: int) -> Graph:
        return Graph.construct(node_count, ())

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def nodes(self) -> range:
        return range(self.node_count)

    def neighbors(self, u: NodeId) -> Tuple[NodeId, ...]:
        """Adjacent nodes of u in edge-list order."""
        return self._adjacency[u]

    def has_edge(self, u: NodeId, v: NodeId) -> bool:
        return canonical_edge(u, v) in self._edge_keys

    def canonical_edges(self) -> FrozenSet[Edge]:
        return self._edge_keys

    def to_networkx(self) -> nx.Graph:
        """Independent networkx copy (nodes 0..n-1, edges in order)."""
        g = nx.Graph()
        g.add_nodes_from(range(self.node_count))
        g.add_edges_from(self.edges)
        return g

    def to_dict(self) -> dict:
        return {
            'node_count': self.node_count,
            'edges': [list(e) for e in self.edges],
        }
