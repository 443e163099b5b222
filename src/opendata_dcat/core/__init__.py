"""Shared core utilities for the DCAT normalization engine."""

from .config import Settings, get_settings
from .exceptions import DcatError, GeometryParseError, UnrecognizedSourceError
from .logging import configure_logging, get_logger
from .models import (
    DATASET_FIELDS,
    DISTRIBUTION_FIELDS,
    LIST_FIELDS,
    DatasetRecord,
    DcatType,
    DistributionRecord,
    MultiPolygon,
    SourceType,
)

__all__ = [
    "Settings",
    "get_settings",
    "DcatError",
    "GeometryParseError",
    "UnrecognizedSourceError",
    "configure_logging",
    "get_logger",
    "DATASET_FIELDS",
    "DISTRIBUTION_FIELDS",
    "LIST_FIELDS",
    "DatasetRecord",
    "DcatType",
    "DistributionRecord",
    "MultiPolygon",
    "SourceType",
]
