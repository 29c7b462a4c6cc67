"""Leaf-node ring helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

from shapely.geometry import Polygon
from shapely.geometry.polygon import orient

Ring = list[list[float]]


def close_ring(points: Sequence[Sequence[float]]) -> Ring:
    """Copy ``points`` and append the first point unless already closed."""
    ring = [list(p) for p in points]
    if ring and ring[0] != ring[-1]:
        ring.append(list(ring[0]))
    return ring


def is_closed_ring(ring: Sequence[Sequence[float]]) -> bool:
    return len(ring) > 0 and list(ring[0]) == list(ring[-1])


def box_corners(x: float, y: float, width: float, height: float) -> list[tuple[float, float]]:
    """Axis-aligned box corners, clockwise in y-down space from the top-left."""
    return [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]


def orient_rings(rings: list[Ring]) -> list[Ring]:
    """Re-wind rings to RFC 7946: exterior counter-clockwise, holes clockwise."""
    if not rings:
        return rings
    polygon = orient(Polygon(rings[0], rings[1:]), sign=1.0)
    oriented = [polygon.exterior] + list(polygon.interiors)
    return [[list(c) for c in ring.coords] for ring in oriented]
