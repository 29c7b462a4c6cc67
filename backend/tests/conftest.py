"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import TypeAdapter

from scene2geojson.models.scene import SceneNode

_NODE_ADAPTER = TypeAdapter(SceneNode)


def parse_node(data: dict[str, Any]):
    """Validate a host-shaped node dict into its scene model."""
    return _NODE_ADAPTER.validate_python(data)


def square_network(size: float = 10.0) -> dict[str, Any]:
    """Closed square: 4 vertices, 4 segments, one region with one loop."""
    return {
        "vertices": [
            {"x": 0.0, "y": 0.0},
            {"x": size, "y": 0.0},
            {"x": size, "y": size},
            {"x": 0.0, "y": size},
        ],
        "segments": [
            {"start": 0, "end": 1},
            {"start": 1, "end": 2},
            {"start": 2, "end": 3},
            {"start": 3, "end": 0},
        ],
        "regions": [{"windingRule": "NONZERO", "loops": [[0, 1, 2, 3]]}],
    }


# Square room with a square courtyard punched through it
DONUT_NETWORK = {
    "vertices": [
        {"x": 0, "y": 0},
        {"x": 30, "y": 0},
        {"x": 30, "y": 30},
        {"x": 0, "y": 30},
        {"x": 10, "y": 10},
        {"x": 20, "y": 10},
        {"x": 20, "y": 20},
        {"x": 10, "y": 20},
    ],
    "segments": [
        {"start": 0, "end": 1},
        {"start": 1, "end": 2},
        {"start": 2, "end": 3},
        {"start": 3, "end": 0},
        {"start": 4, "end": 5},
        {"start": 5, "end": 6},
        {"start": 6, "end": 7},
        {"start": 7, "end": 4},
    ],
    "regions": [{"windingRule": "EVENODD", "loops": [[0, 1, 2, 3], [4, 5, 6, 7]]}],
}

LINE_NETWORK = {
    "vertices": [{"x": 0, "y": 0}, {"x": 5, "y": 0}],
    "segments": [{"start": 0, "end": 1}],
    "regions": [],
}

OPEN_CHAIN_NETWORK = {
    "vertices": [{"x": 0, "y": 0}, {"x": 5, "y": 0}, {"x": 5, "y": 5}],
    "segments": [{"start": 0, "end": 1}, {"start": 1, "end": 2}],
    "regions": [],
}

ROOM = {
    "type": "VECTOR",
    "name": "Room 101",
    "x": 5,
    "y": 5,
    "width": 10,
    "height": 10,
    "vectorNetwork": square_network(),
}

LOBBY = {
    "type": "RECTANGLE",
    "name": "Lobby",
    "x": 10,
    "y": 20,
    "width": 30,
    "height": 40,
}

ELEVATOR = {"type": "STAR", "name": "Elevator", "x": 60, "y": 10, "width": 8, "height": 8}

FOUNTAIN = {"type": "ELLIPSE", "name": "Fountain", "x": 70, "y": 70, "width": 10, "height": 10}

STAIRS = {
    "type": "FRAME",
    "name": "Stairs A",
    "x": 10,
    "y": 10,
    "width": 20,
    "height": 20,
    "children": [
        {"type": "VECTOR", "name": "Handrail", "x": 2, "y": 3, "vectorNetwork": LINE_NETWORK},
        {"type": "VECTOR", "name": "Landing", "x": 0, "y": 0, "vectorNetwork": square_network(4.0)},
    ],
}

FLOOR_1 = {
    "type": "FRAME",
    "name": "1F",
    "width": 100,
    "height": 100,
    "children": [ROOM, LOBBY, ELEVATOR, FOUNTAIN, STAIRS],
}

FLOOR_2 = {
    "type": "FRAME",
    "name": "2F",
    "width": 100,
    "height": 80,
    "children": [{**ROOM, "name": "Room 201"}],
}

EMPTY_FLOOR = {"type": "FRAME", "name": "Roof", "width": 100, "height": 100, "children": []}

BUILDING = {
    "type": "FRAME",
    "name": "Building",
    "width": 300,
    "height": 300,
    "children": [FLOOR_1, FLOOR_2],
}


@pytest.fixture
def building():
    return parse_node(BUILDING)


@pytest.fixture
def floor_1():
    return parse_node(FLOOR_1)
