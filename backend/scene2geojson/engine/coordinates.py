"""Coordinate normalisation — node-local vertex to floor space, y flipped.

The scene's y axis grows downward; map coordinates grow upward. Every emitted
coordinate is flipped against the enclosing floor's height, however deeply
the owning node is nested.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Offset = tuple[float, float]


def to_floor_space(
    vertex: Sequence[float],
    offsets: Iterable[Offset],
    floor_height: float,
) -> list[float]:
    """Compose ``offsets`` onto ``vertex`` and flip y against ``floor_height``.

    ``offsets`` is the chain of local positions from the owning node up to,
    but not including, the floor. Non-finite input propagates unchanged.
    """
    x, y = float(vertex[0]), float(vertex[1])
    for dx, dy in offsets:
        x += dx
        y += dy
    return [x, floor_height - y]


def ring_to_floor_space(
    points: Iterable[Sequence[float]],
    offsets: Sequence[Offset],
    floor_height: float,
) -> list[list[float]]:
    return [to_floor_space(p, offsets, floor_height) for p in points]
