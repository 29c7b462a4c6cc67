"""GeoJSON output model and the messages handed to the sink."""

from __future__ import annotations

import json
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class PolygonGeometry(BaseModel):
    type: Literal["Polygon"] = "Polygon"
    # Outer ring first, then holes; every ring explicitly closed
    coordinates: list[list[list[float]]]


class PointGeometry(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: list[float]


class LineStringGeometry(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: list[list[float]]


Geometry = Annotated[
    Union[PolygonGeometry, PointGeometry, LineStringGeometry],
    Field(discriminator="type"),
]


class Feature(BaseModel):
    type: Literal["Feature"] = "Feature"
    geometry: Geometry
    properties: dict[str, Any] = Field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.properties["id"]


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[Feature] = Field(default_factory=list)


class FloorCollection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    floor_id: str = Field(alias="floorId")
    feature_collection: FeatureCollection = Field(alias="featureCollection")


def serialize_floors(floors: list[FloorCollection]) -> str:
    """Stable JSON for the export payload (same input, same bytes)."""
    payload = [f.model_dump(by_alias=True) for f in floors]
    return json.dumps(payload, indent=2, ensure_ascii=False)


class ErrorMessage(BaseModel):
    type: Literal["error"] = "error"
    message: str


class ExportMessage(BaseModel):
    type: Literal["export-geojson"] = "export-geojson"
    data: str
    filename: str
    notices: list[str] = Field(default_factory=list)


SinkMessage = Annotated[Union[ErrorMessage, ExportMessage], Field(discriminator="type")]
