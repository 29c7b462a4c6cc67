"""Conversion configuration — selects between the engine's policies."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class IdPolicy(str, enum.Enum):
    """How a node name becomes a feature identifier."""

    VERBATIM = "verbatim"
    PARSE_NAME = "parse-name"  # "facility,category,floor"


class EllipsePolicy(str, enum.Enum):
    """How ellipse nodes are emitted."""

    POINT = "point"
    POLYGON = "polygon"


@dataclass(frozen=True)
class ConversionConfig:
    """Controls identifier parsing, ellipse output and ring handling."""

    id_policy: IdPolicy = IdPolicy.VERBATIM
    ellipse_policy: EllipsePolicy = EllipsePolicy.POLYGON

    # Arc tessellation resolution (segments per sweep)
    arc_segments: int = 64
    # Sweeps within this many radians of 2*pi count as a full turn
    full_turn_epsilon: float = 1e-6

    # Case-insensitive substring that marks a stairs container
    stairs_marker: str = "stairs"

    # Minimum distinct vertices for a traced ring
    min_ring_vertices: int = 3

    # Re-wind polygon rings to RFC 7946 (exterior CCW, holes CW)
    orient_rings: bool = False
