"""Message sinks — where the single result of a run is delivered."""

from __future__ import annotations

from typing import Protocol, Union

from scene2geojson.models.geojson import ErrorMessage, ExportMessage


class MessageSink(Protocol):
    def post_message(self, message: Union[ErrorMessage, ExportMessage]) -> None: ...


class CollectingSink:
    """Keeps posted messages in memory; the last one supersedes earlier ones."""

    def __init__(self) -> None:
        self.messages: list[Union[ErrorMessage, ExportMessage]] = []

    def post_message(self, message: Union[ErrorMessage, ExportMessage]) -> None:
        self.messages.append(message)

    @property
    def last(self) -> Union[ErrorMessage, ExportMessage] | None:
        return self.messages[-1] if self.messages else None
