"""
Serialization Tests
===================

Canonical JSON must be byte-stable: it feeds the step hash chain.
"""

import json
from dataclasses import dataclass

from tarjanviz.contracts.events import EventType, ComponentClosed, Visit
from tarjanviz.core.graph import Graph
from tarjanviz.core.tarjan import TarjanEngine
from tarjanviz.domain.serialization import StrictTraceEncoder, canonical_json


@dataclass(frozen=True)
class _Point:
    x: int
    y: int


class TestStrictTraceEncoder:

    def test_enum_uses_value(self):
        assert json.dumps(EventType.BRIDGE, cls=StrictTraceEncoder) == '"bridge"'

    def test_sets_are_sorted(self):
        assert json.loads(json.dumps(frozenset({3, 1, 2}), cls=StrictTraceEncoder)) == [1, 2, 3]

    def test_to_dict_preferred(self):
        encoded = json.loads(json.dumps(Visit(4), cls=StrictTraceEncoder))
        assert encoded == {"type": "visit", "node": 4}

    def test_plain_dataclass(self):
        assert json.loads(json.dumps(_Point(1, 2), cls=StrictTraceEncoder)) == {"x": 1, "y": 2}


class TestCanonicalJson:

    def test_key_order_is_irrelevant(self):
        assert canonical_json({"b": 1, "a": 2}) == canonical_json({"a": 2, "b": 1})
        assert canonical_json({"b": 1, "a": 2}) == '{"a":2,"b":1}'

    def test_component_event_edges_sorted(self):
        event = ComponentClosed(0, frozenset({(2, 3), (0, 1)}))
        assert json.loads(canonical_json(event.to_dict()))["edges"] == [[0, 1], [2, 3]]

    def test_snapshot_round_trips_as_plain_json(self):
        final = TarjanEngine().run(Graph.construct(3, [(0, 1), (1, 2)])).final
        payload = json.loads(canonical_json(final.to_dict()))

        assert payload["articulations"] == [1]
        assert payload["bridges"] == [[0, 1], [1, 2]]
        assert payload["parent"] == [None, 0, 1]
        assert payload["event"] == {"type": "bridge", "u": 0, "v": 1}
