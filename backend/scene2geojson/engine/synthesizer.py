"""Shape synthesis — one scene node to zero or more GeoJSON features.

Dispatch by node kind:
  - path:       traced outer ring plus hole rings from the vector network
  - frame/rect: bounding-box ring; "stairs" containers also emit their
                path descendants as auxiliary lines and shapes
  - star:       bounding-box footprint
  - ellipse:    centre point with radius, or tessellated ring

Malformed or under-specified nodes produce no features. Nothing here raises
for bad geometry.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from typing import Any

from scene2geojson.engine.arc import tessellate_arc
from scene2geojson.engine.config import ConversionConfig, EllipsePolicy, IdPolicy
from scene2geojson.engine.coordinates import Offset, ring_to_floor_space, to_floor_space
from scene2geojson.engine.loop_tracer import trace_loop
from scene2geojson.models.geojson import (
    Feature,
    LineStringGeometry,
    PointGeometry,
    PolygonGeometry,
)
from scene2geojson.models.scene import (
    ArcData,
    BaseNode,
    EllipseNode,
    FrameNode,
    PathNode,
    RectangleNode,
    StarNode,
    VectorNetwork,
)
from scene2geojson.utils.geometry import Ring, box_corners, close_ring, orient_rings

logger = logging.getLogger(__name__)

_NAME_PARTS = 3
_FLOOR_RE = re.compile(r"\s*([+-]?\d+)")


def node_properties(node: BaseNode, config: ConversionConfig, shape_type: str) -> dict[str, Any] | None:
    """Identifying properties for ``node``, or None when the name is rejected."""
    props: dict[str, Any] = {"id": node.name, "shapeType": shape_type}
    if config.id_policy is IdPolicy.VERBATIM:
        return props

    parts = [p.strip() for p in node.name.split(",")]
    if len(parts) != _NAME_PARTS:
        logger.debug("Skipping %r: name is not 'facility,category,floor'", node.name)
        return None
    facility, category, floor_str = parts
    # leading integer only: "1F" -> 1, "2.5" -> 2
    match = _FLOOR_RE.match(floor_str)
    if match is None:
        logger.debug("Skipping %r: floor %r does not start with an integer", node.name, floor_str)
        return None
    floor = int(match.group(1))

    props.update(name=facility, category=category, floor=floor, figmaNodeName=node.name)
    return props


def is_stairs(node: BaseNode, config: ConversionConfig) -> bool:
    return config.stairs_marker.lower() in node.name.lower()


def _polygon(rings: list[Ring], properties: dict[str, Any], config: ConversionConfig) -> Feature:
    if config.orient_rings:
        rings = orient_rings(rings)
    return Feature(geometry=PolygonGeometry(coordinates=rings), properties=properties)


def _trace_ring(
    network: VectorNetwork,
    pairs: list[tuple[int, int]],
    chain: Sequence[Offset],
    floor_height: float,
    config: ConversionConfig,
) -> Ring | None:
    trace = trace_loop(pairs)
    if not trace.is_ring(config.min_ring_vertices):
        return None
    n = len(network.vertices)
    if any(i < 0 or i >= n for i in trace.indices):
        return None
    points = [(network.vertices[i].x, network.vertices[i].y) for i in trace.indices]
    return close_ring(ring_to_floor_space(points, chain, floor_height))


def _box_ring(node: BaseNode, chain: Sequence[Offset], floor_height: float) -> Ring:
    corners = box_corners(0.0, 0.0, node.width, node.height)
    return close_ring(ring_to_floor_space(corners, chain, floor_height))


def synthesize_path(
    node: PathNode,
    floor_height: float,
    offsets: Sequence[Offset],
    config: ConversionConfig,
) -> list[Feature]:
    props = node_properties(node, config, "path")
    if props is None:
        return []

    network = node.vector_network
    chain = [*offsets, node.offset]

    outer = _trace_ring(network, network.edge_pairs(), chain, floor_height, config)
    if outer is None:
        logger.debug("Skipping path %r: no closed loop of %d+ vertices", node.name, config.min_ring_vertices)
        return []

    rings = [outer]
    for loop in network.hole_loops():
        hole = _trace_ring(network, network.loop_pairs(loop), chain, floor_height, config)
        if hole is not None:
            rings.append(hole)

    return [_polygon(rings, props, config)]


def synthesize_box(
    node: BaseNode,
    floor_height: float,
    offsets: Sequence[Offset],
    config: ConversionConfig,
    shape_type: str = "rectangle",
) -> list[Feature]:
    props = node_properties(node, config, shape_type)
    if props is None:
        return []
    ring = _box_ring(node, [*offsets, node.offset], floor_height)
    return [_polygon([ring], props, config)]


def synthesize_stairs(
    node: FrameNode | RectangleNode,
    floor_height: float,
    offsets: Sequence[Offset],
    config: ConversionConfig,
) -> list[Feature]:
    """Box ring for the container plus one feature per usable path descendant.

    Auxiliary features share one counter per container, numbered in emission
    order: ``<id>-line-001``, ``<id>-shape-002``, ...
    """
    features = synthesize_box(node, floor_height, offsets, config, shape_type="stairs")
    if not features or not isinstance(node, FrameNode):
        return features

    parent_id = features[0].id
    chain = [*offsets, node.offset]
    seq = 0

    for path, ancestors in node.find_paths():
        network = path.vector_network
        path_chain = chain + [a.offset for a in ancestors] + [path.offset]

        if len(network.vertices) == 2 and len(network.segments) == 1:
            seq += 1
            ends = [(v.x, v.y) for v in network.vertices]
            features.append(
                Feature(
                    geometry=LineStringGeometry(coordinates=ring_to_floor_space(ends, path_chain, floor_height)),
                    properties={"id": f"{parent_id}-line-{seq:03d}", "shapeType": "line", "parentId": parent_id},
                )
            )
        elif len(network.vertices) >= config.min_ring_vertices:
            ring = _trace_ring(network, network.edge_pairs(), path_chain, floor_height, config)
            if ring is None:
                logger.debug("Skipping stairs part %r in %r: no closed loop", path.name, parent_id)
                continue
            seq += 1
            props = {"id": f"{parent_id}-shape-{seq:03d}", "shapeType": "shape", "parentId": parent_id}
            features.append(_polygon([ring], props, config))

    return features


def synthesize_ellipse(
    node: EllipseNode,
    floor_height: float,
    offsets: Sequence[Offset],
    config: ConversionConfig,
) -> list[Feature]:
    props = node_properties(node, config, "ellipse")
    if props is None:
        return []

    rx, ry = node.width / 2, node.height / 2
    chain = [*offsets, node.offset]

    if config.ellipse_policy is EllipsePolicy.POINT:
        props["radius"] = rx
        if ry != rx:
            props["radiusY"] = ry
        center = to_floor_space((rx, ry), chain, floor_height)
        return [Feature(geometry=PointGeometry(coordinates=center), properties=props)]

    arc = node.arc_data or ArcData()
    ring = tessellate_arc(
        (rx, ry),
        (rx, ry),
        start=arc.starting_angle,
        end=arc.ending_angle,
        rotation=math.radians(node.rotation),
        segments=config.arc_segments,
        epsilon=config.full_turn_epsilon,
    )
    props["rotation"] = node.rotation
    return [_polygon([ring_to_floor_space(ring, chain, floor_height)], props, config)]


def synthesize(
    node: BaseNode,
    floor_height: float,
    offsets: Sequence[Offset] = (),
    config: ConversionConfig | None = None,
) -> list[Feature]:
    """Features for ``node``; ``offsets`` are its ancestors' positions below the floor."""
    config = config or ConversionConfig()

    if isinstance(node, PathNode):
        return synthesize_path(node, floor_height, offsets, config)
    if isinstance(node, (FrameNode, RectangleNode)):
        if is_stairs(node, config):
            return synthesize_stairs(node, floor_height, offsets, config)
        return synthesize_box(node, floor_height, offsets, config)
    if isinstance(node, StarNode):
        return synthesize_box(node, floor_height, offsets, config, shape_type="star")
    if isinstance(node, EllipseNode):
        return synthesize_ellipse(node, floor_height, offsets, config)

    logger.debug("Skipping unsupported node %r (%s)", node.name, getattr(node, "type", "?"))
    return []
