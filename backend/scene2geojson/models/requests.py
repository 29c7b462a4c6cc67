"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from scene2geojson.engine.config import EllipsePolicy, IdPolicy
from scene2geojson.models.scene import SceneNode


class ConvertRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    selection: list[SceneNode] = Field(..., description="Selected top-level nodes")
    id_policy: IdPolicy | None = Field(
        default=None,
        alias="idPolicy",
        description="Override the configured identifier policy",
    )
    ellipse_policy: EllipsePolicy | None = Field(
        default=None,
        alias="ellipsePolicy",
        description="Override the configured ellipse policy",
    )
    orient_rings: bool | None = Field(
        default=None,
        alias="orientRings",
        description="Re-wind rings to RFC 7946 orientation",
    )
