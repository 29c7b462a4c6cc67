"""Exception hierarchy for the conversion engine."""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for conversion failures reported to the sink."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SelectionError(ConversionError):
    """Raised when the selection or its floors have the wrong shape."""


class NoFeaturesError(ConversionError):
    """Raised when floors exist but none of them produced a feature."""
