"""
Trace Storage

RESPONSIBILITY: Keep completed traces addressable by id for readers
ALLOWED INPUTS: TraceRecord (graph + frozen StepSequence)
OUTPUTS: TraceRecord lookups

BOUNDARY ENFORCEMENT:
=====================
- Stores only frozen sequences; nothing stored is ever modified
- Bounded: least recently used traces are evicted past capacity
- A trace is replaced wholesale, never patched
"""

from __future__ import annotations
from collections import OrderedDict
from dataclasses import dataclass
from typing import List, Optional
import hashlib
import logging

from ..contracts.base import TraceNotFound
from ..core.graph import Graph
from ..temporal.sequence import StepSequence


logger = logging.getLogger(__name__)

TRACE_ID_LENGTH = 16


@dataclass(frozen=True)
class TraceRecord:
    """A graph and the trace computed from it."""
    trace_id: str
    graph: Graph
    steps: StepSequence
    requested_edges: Optional[int] = None
    seed: Optional[int] = None

    @property
    def shortfall(self) -> int:
        if self.requested_edges is None:
            return 0
        return self.requested_edges - self.graph.edge_count

    @staticmethod
    def trace_id_for(
        steps: StepSequence,
        graph: Graph,
        requested_edges: Optional[int] = None,
        seed: Optional[int] = None
    ) -> str:
        """
        Head hash prefix; an empty trace falls back to the node count.

        Generated graphs also hash their request (edge count, seed), so an
        explicit graph never shares an id with a generated one.
        """
        base = steps.head_hash or f"empty-{graph.node_count}"
        if requested_edges is None and seed is None:
            return base[:TRACE_ID_LENGTH] if steps.head_hash else base
        content = f"{base}|requested={requested_edges}|seed={seed}"
        return hashlib.sha256(content.encode('utf-8')).hexdigest()[:TRACE_ID_LENGTH]


@dataclass
class StoreConfig:
    """Configuration for trace storage."""
    max_stored_traces: int = 32


class TraceStore:
    """In-memory LRU store of completed traces."""

    def __init__(self, config: Optional[StoreConfig] = None):
        self._config = config or StoreConfig()
        self._records: "OrderedDict[str, TraceRecord]" = OrderedDict()

    def put(self, record: TraceRecord) -> TraceRecord:
        if not record.steps.is_frozen:
            raise ValueError(f"trace {record.trace_id} is still being recorded")
        self._records[record.trace_id] = record
        self._records.move_to_end(record.trace_id)
        logger.info("stored trace %s (%d steps)", record.trace_id, len(record.steps))
        while len(self._records) > self._config.max_stored_traces:
            evicted, _ = self._records.popitem(last=False)
            logger.info("evicted trace %s", evicted)
        return record

    def get(self, trace_id: str) -> TraceRecord:
        try:
            record = self._records[trace_id]
        except KeyError:
            raise TraceNotFound(trace_id) from None
        self._records.move_to_end(trace_id)
        return record

    def contains(self, trace_id: str) -> bool:
        return trace_id in self._records

    def trace_ids(self) -> List[str]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
