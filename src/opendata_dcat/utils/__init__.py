"""Geometry, date and language helpers shared by the source converters."""

from .dates import from_epoch_seconds, get_date_string, parse_date
from .geometry import bbox_to_geojson, ensure_multi_polygon, wkt_to_geojson
from .language import detect_language

__all__ = [
    "bbox_to_geojson",
    "detect_language",
    "ensure_multi_polygon",
    "from_epoch_seconds",
    "get_date_string",
    "parse_date",
    "wkt_to_geojson",
]
