"""Scene input model — the host document's node tree.

Nodes arrive as JSON shaped like the design tool's plugin API (camelCase keys,
an upper-case ``type`` tag). The ``type`` tag is folded into a closed set of
node kinds; anything the engine does not understand, or a node whose fields
fail validation, becomes an ``UnsupportedNode`` rather than a validation error.
"""

from __future__ import annotations

import logging
import math
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)

logger = logging.getLogger(__name__)

FRAME_TYPES = ("FRAME", "GROUP", "COMPONENT", "INSTANCE", "SECTION")

_KIND_BY_TYPE: dict[str, str] = {
    "VECTOR": "path",
    "RECTANGLE": "rectangle",
    "STAR": "star",
    "ELLIPSE": "ellipse",
    **{t: "frame" for t in FRAME_TYPES},
}


class _SceneModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Vertex(_SceneModel):
    x: float
    y: float


class Segment(_SceneModel):
    start: int
    end: int


class Region(_SceneModel):
    winding_rule: str = Field(default="NONZERO", alias="windingRule")
    # Each loop is a list of segment indices
    loops: list[list[int]] = Field(default_factory=list)


class VectorNetwork(_SceneModel):
    vertices: list[Vertex] = Field(default_factory=list)
    segments: list[Segment] = Field(default_factory=list)
    regions: list[Region] = Field(default_factory=list)

    def edge_pairs(self) -> list[tuple[int, int]]:
        return [(s.start, s.end) for s in self.segments]

    def loop_pairs(self, loop: list[int]) -> list[tuple[int, int]]:
        """Resolve a region loop's segment indices; unknown indices are dropped."""
        n = len(self.segments)
        return [(self.segments[i].start, self.segments[i].end) for i in loop if 0 <= i < n]

    def hole_loops(self) -> list[list[int]]:
        """Every loop after the first loop of the first region."""
        loops = [loop for region in self.regions for loop in region.loops]
        return loops[1:]


class ArcData(_SceneModel):
    starting_angle: float = Field(default=0.0, alias="startingAngle")
    ending_angle: float = Field(default=2 * math.pi, alias="endingAngle")
    inner_radius: float = Field(default=0.0, alias="innerRadius")


class BaseNode(_SceneModel):
    name: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def offset(self) -> tuple[float, float]:
        return (self.x, self.y)


class PathNode(BaseNode):
    type: Literal["VECTOR"] = "VECTOR"
    vector_network: VectorNetwork = Field(default_factory=VectorNetwork, alias="vectorNetwork")


class FrameNode(BaseNode):
    type: Literal["FRAME", "GROUP", "COMPONENT", "INSTANCE", "SECTION"] = "FRAME"
    children: list[SceneNode] = Field(default_factory=list)

    def find_paths(self) -> list[tuple[PathNode, list[FrameNode]]]:
        """Depth-first search for path descendants.

        Returns (path, ancestors) pairs; ancestors run from this node's direct
        child down to the path's parent, outermost first.
        """
        found: list[tuple[PathNode, list[FrameNode]]] = []

        def walk(node: FrameNode, chain: list[FrameNode]) -> None:
            for child in node.children:
                if isinstance(child, PathNode):
                    found.append((child, chain))
                if isinstance(child, FrameNode):
                    walk(child, chain + [child])

        walk(self, [])
        return found


class RectangleNode(BaseNode):
    type: Literal["RECTANGLE"] = "RECTANGLE"


class StarNode(BaseNode):
    type: Literal["STAR"] = "STAR"


class EllipseNode(BaseNode):
    type: Literal["ELLIPSE"] = "ELLIPSE"
    rotation: float = 0.0  # degrees
    arc_data: ArcData | None = Field(default=None, alias="arcData")


class UnsupportedNode(BaseNode):
    type: str = "UNKNOWN"


def _node_kind(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return _KIND_BY_TYPE.get(kind, "unsupported")


def _unsupported_on_error(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Degrade a node that fails validation to an ``UnsupportedNode``.

    Applied per node, so one malformed descendant does not reject its
    siblings or the enclosing frame.
    """
    try:
        return handler(value)
    except ValidationError as exc:
        tag = value.get("type") if isinstance(value, dict) else None
        name = value.get("name") if isinstance(value, dict) else None
        logger.debug("Treating malformed %r node %r as unsupported: %s", tag, name, exc)
        return UnsupportedNode(
            type=tag if isinstance(tag, str) else "UNKNOWN",
            name=name if isinstance(name, str) else "",
        )


SceneNode = Annotated[
    Union[
        Annotated[PathNode, Tag("path")],
        Annotated[FrameNode, Tag("frame")],
        Annotated[RectangleNode, Tag("rectangle")],
        Annotated[StarNode, Tag("star")],
        Annotated[EllipseNode, Tag("ellipse")],
        Annotated[UnsupportedNode, Tag("unsupported")],
    ],
    Discriminator(_node_kind),
    WrapValidator(_unsupported_on_error),
]

FrameNode.model_rebuild()
