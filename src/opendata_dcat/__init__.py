"""Normalize open data portal metadata into canonical DCAT datasets."""

from .core import (
    DcatError,
    DcatType,
    GeometryParseError,
    Settings,
    SourceType,
    UnrecognizedSourceError,
    configure_logging,
    get_settings,
)
from .dataset import Dataset

__all__ = [
    "Dataset",
    "DcatError",
    "DcatType",
    "GeometryParseError",
    "Settings",
    "SourceType",
    "UnrecognizedSourceError",
    "configure_logging",
    "get_settings",
]
