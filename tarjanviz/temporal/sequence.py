"""
Step Sequence
=============

Append-only, then frozen, index-addressable list of Snapshots.

INVARIANTS:
- No updates or deletes - append only, and only until freeze()
- Index 0 is the first recorded snapshot; indices never shift
- Hash chain over every snapshot: same trace -> same head hash

The sequence is the ONLY artifact that outlives an engine run.
Playback, frame mapping and the API read it by index.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional
import hashlib

from ..contracts.base import SequenceFrozen
from ..contracts.trace import Snapshot
from ..domain.serialization import canonical_json


def _chain_hash(previous_hash: str, index: int, snapshot: Snapshot) -> str:
    content = f"{index}|{previous_hash}|{canonical_json(snapshot.to_dict())}"
    return hashlib.sha256(content.encode('utf-8')).hexdigest()


@dataclass(frozen=True)
class SequenceState:
    """
    Immutable summary of a sequence at a point in time.

    Enables determinism checks without comparing every snapshot.
    """
    length: int
    head_hash: str
    is_frozen: bool


class StepSequence:
    """
    Ordered trace of one engine run.

    GUARANTEES:
    ===========
    1. push() is the only write operation and fails once frozen
    2. at(i) is O(1) random access for scrubbing in either direction
    3. Deterministic - same snapshots in same order -> same head_hash
    """

    def __init__(self):
        self._steps: List[Snapshot] = []
        self._hashes: List[str] = []
        self._frozen = False

    # =========================================================================
    # WRITE SIDE (engine run only)
    # =========================================================================

    def push(self, snapshot: Snapshot) -> int:
        """Append a snapshot and return its index."""
        if self._frozen:
            raise SequenceFrozen(len(self._steps))
        index = len(self._steps)
        self._hashes.append(_chain_hash(self.head_hash, index, snapshot))
        self._steps.append(snapshot)
        return index

    def freeze(self) -> StepSequence:
        self._frozen = True
        return self

    # =========================================================================
    # READ SIDE
    # =========================================================================

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def length(self) -> int:
        return len(self._steps)

    @property
    def head_hash(self) -> str:
        return self._hashes[-1] if self._hashes else ""

    @property
    def state(self) -> SequenceState:
        return SequenceState(
            length=len(self._steps),
            head_hash=self.head_hash,
            is_frozen=self._frozen
        )

    @property
    def final(self) -> Optional[Snapshot]:
        """Last snapshot, or None for an empty trace (node_count == 0)."""
        return self._steps[-1] if self._steps else None

    def at(self, index: int) -> Snapshot:
        """Snapshot at a 0-based index; negative indices are rejected."""
        if not 0 <= index < len(self._steps):
            raise IndexError(f"step {index} outside [0, {len(self._steps)})")
        return self._steps[index]

    def hash_at(self, index: int) -> str:
        self.at(index)
        return self._hashes[index]

    def verify_chain(self) -> bool:
        """Recompute every link of the hash chain."""
        previous = ""
        for index, snapshot in enumerate(self._steps):
            expected = _chain_hash(previous, index, snapshot)
            if expected != self._hashes[index]:
                return False
            previous = expected
        return True

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index):
        return self._steps[index]

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(tuple(self._steps))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StepSequence):
            return NotImplemented
        return self._steps == other._steps

    __hash__ = None

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"StepSequence(length={len(self._steps)}, {state}, head={self.head_hash[:12]!r})"
