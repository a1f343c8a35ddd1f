import logging

import pytest

from tarjanviz.contracts.base import ErrorCode, InvalidGraph
from tarjanviz.ingestion.generator import GenerationConfig, generate_graph


def test_same_seed_same_graph():
    """Generation is reproducible from its seed."""
    a = generate_graph(12, 20, seed=7)
    b = generate_graph(12, 20, seed=7)
    assert a.graph == b.graph
    assert a.seed == 7


def test_generated_graph_is_simple():
    generated = generate_graph(10, 30, seed=3)
    keys = [tuple(sorted(e)) for e in generated.graph.edges]
    assert len(keys) == len(set(keys))
    assert all(u != v for u, v in generated.graph.edges)
    assert all(0 <= x < 10 for e in generated.graph.edges for x in e)


def test_edges_are_canonical():
    generated = generate_graph(8, 10, seed=11)
    assert all(u < v for u, v in generated.graph.edges)


def test_defaults_from_config():
    generated = generate_graph(seed=1)
    assert generated.graph.node_count == 8
    assert generated.requested_edges == 10


def test_config_seed_used_when_none_given():
    config = GenerationConfig(seed=42)
    assert generate_graph(6, 5, config=config).graph == generate_graph(6, 5, seed=42).graph


def test_shortfall_reported_not_raised(caplog):
    """Two nodes admit one edge; the rest is a shortfall."""
    with caplog.at_level(logging.WARNING, logger="tarjanviz.ingestion.generator"):
        generated = generate_graph(2, 5, seed=0)

    assert generated.graph.edge_count == 1
    assert generated.shortfall == 4
    assert "requested edges" in caplog.text


def test_single_node_never_gets_an_edge():
    generated = generate_graph(1, 3, seed=5)
    assert generated.graph.edge_count == 0
    assert generated.shortfall == 3


def test_zero_edges():
    generated = generate_graph(5, 0, seed=5)
    assert generated.graph.edge_count == 0
    assert generated.shortfall == 0


@pytest.mark.parametrize("nodes,edges", [(0, 1), (41, 1), (5, -1), (5, 201)])
def test_bounds_rejected(nodes, edges):
    with pytest.raises(InvalidGraph) as exc:
        generate_graph(nodes, edges, seed=1)
    assert exc.value.code == ErrorCode.GENERATION_BOUNDS


def test_custom_bounds():
    config = GenerationConfig(max_nodes=100, max_edges=500)
    generated = generate_graph(100, 400, seed=9, config=config)
    assert generated.graph.node_count == 100
    assert generated.graph.edge_count <= 400
