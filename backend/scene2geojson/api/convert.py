"""POST /api/convert — scene selection to floor GeoJSON."""

from __future__ import annotations

import dataclasses

from fastapi import APIRouter, Depends

from scene2geojson.config import Settings
from scene2geojson.dependencies import get_settings
from scene2geojson.engine.builder import export_selection
from scene2geojson.engine.sink import CollectingSink
from scene2geojson.models.geojson import SinkMessage
from scene2geojson.models.requests import ConvertRequest

router = APIRouter()


@router.post("/convert", response_model=SinkMessage)
async def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)):
    overrides = {
        "id_policy": req.id_policy,
        "ellipse_policy": req.ellipse_policy,
        "orient_rings": req.orient_rings,
    }
    config = dataclasses.replace(
        settings.conversion_config(),
        **{k: v for k, v in overrides.items() if v is not None},
    )

    sink = CollectingSink()
    export_selection(req.selection, sink, config)
    return sink.last
