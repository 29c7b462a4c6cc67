"""Scene-to-GeoJSON conversion engine."""

from scene2geojson.engine.builder import build_export, export_selection
from scene2geojson.engine.config import ConversionConfig, EllipsePolicy, IdPolicy
from scene2geojson.engine.floor import FloorResult, collect_floor
from scene2geojson.engine.synthesizer import synthesize

__all__ = [
    "build_export",
    "export_selection",
    "ConversionConfig",
    "EllipsePolicy",
    "IdPolicy",
    "FloorResult",
    "collect_floor",
    "synthesize",
]
