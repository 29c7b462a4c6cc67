"""Arc tessellation — ellipse or elliptical arc to a closed polygon ring.

Rotation is added to the sweep parameter before evaluating sin/cos, so a
rotated ellipse with unequal radii is approximated rather than rotated as a
rigid body. Circles are exact.
"""

from __future__ import annotations

import math

import numpy as np

from scene2geojson.utils.geometry import Ring, close_ring

FULL_TURN = 2 * math.pi
DEFAULT_SEGMENTS = 64


def is_full_turn(start: float, end: float, epsilon: float = 1e-6) -> bool:
    return abs(abs(end - start) - FULL_TURN) <= epsilon


def tessellate_arc(
    center: tuple[float, float],
    radii: tuple[float, float],
    start: float = 0.0,
    end: float = FULL_TURN,
    rotation: float = 0.0,
    segments: int = DEFAULT_SEGMENTS,
    epsilon: float = 1e-6,
) -> Ring:
    """Sample ``segments + 1`` points across the sweep; angles in radians.

    A partial sweep gets the centre appended (pie slice). The returned ring
    is always explicitly closed.
    """
    cx, cy = float(center[0]), float(center[1])
    rx, ry = float(radii[0]), float(radii[1])

    t = np.linspace(start, end, segments + 1) + rotation
    points = np.column_stack([cx + rx * np.cos(t), cy + ry * np.sin(t)]).tolist()

    if is_full_turn(start, end, epsilon):
        # Last sample lands on the first up to rounding; snap it
        points[-1] = list(points[0])
    else:
        points.append([cx, cy])

    return close_ring(points)
