import math

import pytest

from tarjanviz_frontend.layout import LayoutConfig, NodePosition, circular_layout


def test_one_position_per_node():
    assert len(circular_layout(12, seed=0)) == 12


def test_no_nodes():
    assert circular_layout(0) == ()


def test_seeded_layout_is_reproducible():
    assert circular_layout(9, seed=4) == circular_layout(9, seed=4)


@pytest.mark.parametrize("node_count", [1, 5, 40])
def test_positions_stay_near_circle(node_count):
    config = LayoutConfig()
    radius = min(config.width, config.height) * config.radius_factor
    cx, cy = config.width / 2, config.height / 2
    slack = config.jitter / 2 * math.sqrt(2) + 1e-9

    for p in circular_layout(node_count, config, seed=2):
        assert isinstance(p, NodePosition)
        assert abs(math.hypot(p.x - cx, p.y - cy) - radius) <= slack


def test_no_jitter_is_exact_circle():
    config = LayoutConfig(width=200, height=200, radius_factor=0.5, jitter=0.0)
    positions = circular_layout(4, config, seed=0)
    assert positions[0].x == pytest.approx(200.0)
    assert positions[0].y == pytest.approx(100.0)
    assert positions[2].x == pytest.approx(0.0)
