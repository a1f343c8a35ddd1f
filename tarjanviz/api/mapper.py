"""
API Mapper
==========

Transforms stored traces and snapshots into JSON-ready dicts.
Exposes raw engine state; formatting and styling are the client's job.
"""
from typing import Any, Dict, List

from ..contracts.trace import Snapshot
from ..storage import TraceRecord


def map_record_to_summary(record: TraceRecord) -> Dict[str, Any]:
    """Trace summary: graph, step count and the final answer."""
    final = record.steps.final
    return {
        "trace_id": record.trace_id,
        "head_hash": record.steps.head_hash,
        "step_count": len(record.steps),
        "graph": record.graph.to_dict(),
        "requested_edges": record.requested_edges,
        "shortfall": record.shortfall,
        "seed": record.seed,
        "result": _map_final(final),
    }


def _map_final(final: Snapshot) -> Dict[str, Any]:
    if final is None:
        return {"articulations": [], "bridges": [], "bccs": []}
    return {
        "articulations": sorted(final.articulations),
        "bridges": [list(e) for e in sorted(final.bridges)],
        "bccs": [[list(e) for e in sorted(c)] for c in final.bccs],
    }


def map_step_to_dto(trace_id: str, index: int, snapshot: Snapshot) -> Dict[str, Any]:
    """One snapshot plus its address in the trace."""
    dto = snapshot.to_dict()
    dto["trace_id"] = trace_id
    dto["index"] = index
    return dto


def map_steps_page(trace_id: str, offset: int, snapshots: List[Snapshot], total: int) -> Dict[str, Any]:
    return {
        "trace_id": trace_id,
        "offset": offset,
        "total": total,
        "steps": [
            map_step_to_dto(trace_id, offset + i, snapshot)
            for i, snapshot in enumerate(snapshots)
        ],
    }
