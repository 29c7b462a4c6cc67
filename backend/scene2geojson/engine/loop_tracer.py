"""Loop tracing — ordered vertex sequence from an unordered edge set.

Vector networks store a shape as vertices plus segments with no guaranteed
order or direction. Tracing walks from the first segment, extending the tail
with the first remaining segment that touches it, until nothing connects.

Branching graphs are outside the contract: at a branch point the first
incident segment in input order wins, so the trace depends on segment order.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoopTrace:
    """Result of tracing one loop or open chain."""

    # Vertex indices in traversal order; closing duplicate removed
    indices: list[int] = field(default_factory=list)
    # True when the walk returned to its starting vertex
    closed: bool = False
    # Segments left unconsumed when the walk stopped
    remaining: int = 0

    def is_ring(self, min_vertices: int = 3) -> bool:
        """Usable as a polygon ring: closed with enough distinct vertices."""
        return self.closed and len(self.indices) >= min_vertices


def trace_loop(segments: Sequence[tuple[int, int]]) -> LoopTrace:
    """Trace ``segments`` (vertex-index pairs) into an ordered index list.

    Works on a private copy; ``segments`` is never mutated.
    """
    remaining = list(segments)
    if not remaining:
        return LoopTrace()

    start, end = remaining.pop(0)
    order = [start, end]

    while remaining:
        tail = order[-1]
        found = None
        for i, (a, b) in enumerate(remaining):
            if a == tail:
                found = (i, b)
                break
            if b == tail:
                found = (i, a)
                break
        if found is None:
            break
        i, nxt = found
        del remaining[i]
        order.append(nxt)

    closed = len(order) > 2 and order[-1] == order[0]
    if closed:
        order.pop()

    return LoopTrace(indices=order, closed=closed, remaining=len(remaining))
