"""Custom exception hierarchy for metadata normalization."""

from __future__ import annotations


class DcatError(Exception):
    """Base error for the DCAT normalization engine."""


class UnrecognizedSourceError(DcatError, ValueError):
    """Raised when no converter is registered for a source type."""

    def __init__(self, source: object) -> None:
        super().__init__(f"Unrecognized source: {source}")
        self.source = source


class GeometryParseError(DcatError, ValueError):
    """Raised when spatial metadata cannot be turned into GeoJSON."""
