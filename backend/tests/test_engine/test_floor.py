"""Tests for per-floor collection."""

from __future__ import annotations

import scene2geojson.engine.floor as floor_module
from scene2geojson.engine.config import ConversionConfig, EllipsePolicy
from scene2geojson.engine.floor import collect_floor
from tests.conftest import EMPTY_FLOOR, FLOOR_1, LINE_NETWORK, LOBBY, ROOM, parse_node


def test_floor_collects_direct_children(floor_1):
    result = collect_floor(floor_1)
    ids = [f.id for f in result.collection.features]
    assert ids == [
        "Room 101",
        "Lobby",
        "Elevator",
        "Fountain",
        "Stairs A",
        "Stairs A-line-001",
        "Stairs A-shape-002",
    ]
    assert result.floor_id == "1F"
    assert result.notices == []
    assert result.skipped == 0


def test_empty_floor_is_soft():
    result = collect_floor(parse_node(EMPTY_FLOOR))
    assert result.collection.features == []
    assert len(result.notices) == 1
    assert "Roof" in result.notices[0]


def test_unusable_children_are_counted():
    floor = parse_node(
        {
            **EMPTY_FLOOR,
            "children": [LOBBY, {"type": "VECTOR", "name": "Wall", "vectorNetwork": LINE_NETWORK}],
        }
    )
    result = collect_floor(floor)
    assert len(result.collection.features) == 1
    assert result.skipped == 1


def test_floor_height_drives_flip():
    floor = parse_node({**EMPTY_FLOOR, "height": 50, "children": [ROOM]})
    ring = collect_floor(floor).collection.features[0].geometry.coordinates[0]
    assert ring[0] == [5, 45]


def test_failing_child_degrades_to_fewer_features(monkeypatch):
    real = floor_module.synthesize

    def flaky(node, floor_height, offsets=(), config=None):
        if node.name == "Lobby":
            raise RuntimeError("boom")
        return real(node, floor_height, offsets, config)

    monkeypatch.setattr(floor_module, "synthesize", flaky)
    result = collect_floor(parse_node({**EMPTY_FLOOR, "children": [LOBBY, ROOM]}))
    assert [f.id for f in result.collection.features] == ["Room 101"]
    assert result.skipped == 1


def test_config_is_passed_through():
    config = ConversionConfig(ellipse_policy=EllipsePolicy.POINT)
    result = collect_floor(parse_node(FLOOR_1), config)
    fountain = next(f for f in result.collection.features if f.id == "Fountain")
    assert fountain.geometry.type == "Point"
