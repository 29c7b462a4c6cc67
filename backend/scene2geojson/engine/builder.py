"""Collection building — selection to floors to one sink message.

Exactly one message leaves a run: an error when the selection is unusable,
otherwise the serialized floor collections with a filename hint.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Union

from scene2geojson.engine.config import ConversionConfig
from scene2geojson.engine.errors import ConversionError, NoFeaturesError, SelectionError
from scene2geojson.engine.floor import FloorResult, collect_floor
from scene2geojson.engine.sink import MessageSink
from scene2geojson.models.geojson import ErrorMessage, ExportMessage, serialize_floors
from scene2geojson.models.scene import BaseNode, FrameNode

logger = logging.getLogger(__name__)

MSG_SELECT_ONE_FRAME = "Select exactly one frame."
MSG_NO_FLOORS = "The selected frame contains no floor frames."
MSG_NO_FEATURES = "No convertible objects were found on any floor."

FILENAME_SUFFIX = ".geojson"


def find_floors(selection: Sequence[BaseNode]) -> tuple[FrameNode, list[FrameNode]]:
    """Validate the selection and return (root, floor groups)."""
    if len(selection) != 1 or not isinstance(selection[0], FrameNode):
        raise SelectionError(MSG_SELECT_ONE_FRAME)
    root = selection[0]
    floors = [c for c in root.children if isinstance(c, FrameNode)]
    if not floors:
        raise SelectionError(MSG_NO_FLOORS)
    return root, floors


def build_floors(
    selection: Sequence[BaseNode],
    config: ConversionConfig | None = None,
) -> tuple[FrameNode, list[FloorResult]]:
    root, floors = find_floors(selection)
    return root, [collect_floor(f, config) for f in floors]


def build_export(
    selection: Sequence[BaseNode],
    config: ConversionConfig | None = None,
) -> Union[ErrorMessage, ExportMessage]:
    try:
        root, results = build_floors(selection, config)
        collections = [r.to_floor_collection() for r in results if r.collection.features]
        if not collections:
            raise NoFeaturesError(MSG_NO_FEATURES)
    except ConversionError as e:
        logger.info("Conversion rejected: %s", e.message)
        return ErrorMessage(message=e.message)

    notices = [n for r in results for n in r.notices]
    data = serialize_floors(collections)
    logger.info(
        "Converted %r: %d floors, %d features",
        root.name,
        len(collections),
        sum(len(c.feature_collection.features) for c in collections),
    )
    logger.debug("GeoJSON output:\n%s", data)
    return ExportMessage(data=data, filename=f"{root.name}{FILENAME_SUFFIX}", notices=notices)


def export_selection(
    selection: Sequence[BaseNode],
    sink: MessageSink,
    config: ConversionConfig | None = None,
) -> Union[ErrorMessage, ExportMessage]:
    """Convert ``selection`` and post the single resulting message to ``sink``."""
    message = build_export(selection, config)
    sink.post_message(message)
    return message
