"""Floor collection — one floor group to one FeatureCollection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from scene2geojson.engine.config import ConversionConfig
from scene2geojson.engine.synthesizer import synthesize
from scene2geojson.models.geojson import FeatureCollection, FloorCollection
from scene2geojson.models.scene import FrameNode

logger = logging.getLogger(__name__)


@dataclass
class FloorResult:
    """Output of one floor: its collection plus soft notices."""

    floor_id: str
    collection: FeatureCollection = field(default_factory=FeatureCollection)
    notices: list[str] = field(default_factory=list)
    skipped: int = 0

    def to_floor_collection(self) -> FloorCollection:
        return FloorCollection(floor_id=self.floor_id, feature_collection=self.collection)


def collect_floor(floor: FrameNode, config: ConversionConfig | None = None) -> FloorResult:
    """Synthesize every direct child of ``floor``; never raises for bad children."""
    config = config or ConversionConfig()
    result = FloorResult(floor_id=floor.name)

    if not floor.children:
        result.notices.append(f"Floor {floor.name!r} has no child objects.")
        logger.info("Floor %r has no children", floor.name)
        return result

    for child in floor.children:
        try:
            features = synthesize(child, floor.height, config=config)
        except Exception as e:
            logger.warning("  %r on floor %r FAILED: %s", child.name, floor.name, e)
            features = []
        if not features:
            result.skipped += 1
        result.collection.features.extend(features)

    logger.debug(
        "Floor %r: %d features from %d children (%d skipped)",
        floor.name,
        len(result.collection.features),
        len(floor.children),
        result.skipped,
    )
    return result
