"""
Step Sequence Tests
===================

Tests verifying the append-only trace container.

INVARIANTS TESTED:
1. Frozen sequences reject appends
2. Random access is bounded to [0, length)
3. Same snapshots in same order -> same head hash
4. The hash chain detects tampering
"""

import pytest

from tarjanviz.contracts.base import ErrorCode, SequenceFrozen
from tarjanviz.core.graph import Graph
from tarjanviz.core.tarjan import TarjanEngine
from tarjanviz.temporal.sequence import StepSequence, SequenceState


@pytest.fixture
def triangle_steps():
    return TarjanEngine().run(Graph.construct(3, [(0, 1), (1, 2), (2, 0)]))


class TestAppendOnly:

    def test_push_returns_index(self, triangle_steps):
        seq = StepSequence()
        assert seq.push(triangle_steps[0]) == 0
        assert seq.push(triangle_steps[1]) == 1
        assert len(seq) == 2
        assert seq.length == 2

    def test_push_after_freeze_fails(self, triangle_steps):
        seq = StepSequence()
        seq.push(triangle_steps[0])
        seq.freeze()

        with pytest.raises(SequenceFrozen) as exc:
            seq.push(triangle_steps[1])
        assert exc.value.error.code == ErrorCode.SEQUENCE_FROZEN
        assert len(seq) == 1

    def test_engine_output_is_frozen(self, triangle_steps):
        assert triangle_steps.is_frozen
        with pytest.raises(SequenceFrozen):
            triangle_steps.push(triangle_steps[0])

    def test_iteration_is_a_copy(self, triangle_steps):
        seen = list(triangle_steps)
        assert len(seen) == len(triangle_steps)
        assert seen[0] is triangle_steps.at(0)


class TestRandomAccess:

    def test_at_bounds(self, triangle_steps):
        last = len(triangle_steps) - 1
        assert triangle_steps.at(last) is triangle_steps.final
        with pytest.raises(IndexError):
            triangle_steps.at(last + 1)
        with pytest.raises(IndexError):
            triangle_steps.at(-1)

    def test_empty_sequence(self):
        seq = StepSequence().freeze()
        assert seq.final is None
        assert seq.head_hash == ""
        with pytest.raises(IndexError):
            seq.at(0)

    def test_scrub_backwards_is_stable(self, triangle_steps):
        forward = [triangle_steps.at(i) for i in range(len(triangle_steps))]
        backward = [triangle_steps.at(i) for i in reversed(range(len(triangle_steps)))]
        assert forward == list(reversed(backward))


class TestHashChain:

    def test_same_graph_same_head(self):
        g = Graph.construct(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
        a = TarjanEngine().run(g)
        b = TarjanEngine().run(g)
        assert a.head_hash == b.head_hash
        assert a.state == b.state

    def test_edge_order_changes_head(self):
        a = TarjanEngine().run(Graph.construct(3, [(0, 1), (0, 2)]))
        b = TarjanEngine().run(Graph.construct(3, [(0, 2), (0, 1)]))
        assert a.head_hash != b.head_hash

    def test_state_summary(self, triangle_steps):
        state = triangle_steps.state
        assert isinstance(state, SequenceState)
        assert state.length == len(triangle_steps)
        assert state.is_frozen
        assert state.head_hash == triangle_steps.hash_at(len(triangle_steps) - 1)

    def test_verify_chain(self, triangle_steps):
        assert triangle_steps.verify_chain()

    def test_verify_chain_detects_tampering(self, triangle_steps):
        triangle_steps._hashes[2] = "0" * 64
        assert not triangle_steps.verify_chain()
