"""Spatial coverage helpers producing GeoJSON MultiPolygons."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Mapping, Sequence

from shapely import wkt as shapely_wkt
from shapely.errors import ShapelyError
from shapely.geometry import mapping

from opendata_dcat.core.exceptions import GeometryParseError
from opendata_dcat.core.models import MultiPolygon

POLYGON_PREFIX = "POLYGON"


def bbox_to_geojson(points: Sequence[Any] | str | None) -> MultiPolygon | None:
    """Turn a bounding box into a single-polygon MultiPolygon.

    Accepts ``[[minX, minY], [maxX, maxY]]``, a flat sequence of four numbers,
    or a ``"minX,minY,maxX,maxY"`` string.
    """
    if points is None or (isinstance(points, (str, list, tuple)) and len(points) == 0):
        return None
    coords = _flatten_bbox(points)
    ring = [
        [coords[0], coords[1]],
        [coords[0], coords[3]],
        [coords[2], coords[3]],
        [coords[2], coords[1]],
        [coords[0], coords[1]],
    ]
    return {"type": "MultiPolygon", "coordinates": [[ring]]}


def wkt_to_geojson(polygon: str | None) -> MultiPolygon | None:
    """Parse a WKT polygon into a MultiPolygon.

    Returns ``None`` for empty input or text that is not a ``POLYGON``.
    Raises :class:`GeometryParseError` when the text cannot be parsed.
    """
    if not polygon or not isinstance(polygon, str) or not polygon.startswith(POLYGON_PREFIX):
        return None
    try:
        geometry = shapely_wkt.loads(polygon)
    except (ShapelyError, ValueError) as exc:
        raise GeometryParseError(f"Invalid WKT polygon: {polygon[:80]!r}") from exc
    geojson = mapping(geometry)
    return {
        "type": "MultiPolygon",
        "coordinates": [_as_lists(geojson["coordinates"])],
    }


def ensure_multi_polygon(geometry: Mapping[str, Any] | None) -> MultiPolygon | None:
    """Return ``geometry`` as a MultiPolygon, or ``None`` for other geometry types."""
    if not geometry or not isinstance(geometry, Mapping):
        return None
    geometry_type = geometry.get("type")
    if geometry_type != "Polygon" and geometry_type != "MultiPolygon":
        return None
    result = deepcopy(dict(geometry))
    if geometry_type == "Polygon":
        result["type"] = "MultiPolygon"
        result["coordinates"] = [result.get("coordinates")]
    return result


def _flatten_bbox(points: Sequence[Any] | str) -> list[float]:
    if isinstance(points, str):
        values: list[Any] = [part.strip() for part in points.split(",")]
    elif not isinstance(points, Sequence):
        raise GeometryParseError(f"Bounding box must be a sequence or string, got {points!r}")
    elif all(isinstance(item, (list, tuple)) for item in points):
        values = [value for pair in points for value in pair]
    else:
        values = list(points)
    if len(values) < 4:
        raise GeometryParseError(f"Bounding box needs four numbers, got {points!r}")
    try:
        return [_coerce_number(value) for value in values[:4]]
    except (TypeError, ValueError) as exc:
        raise GeometryParseError(f"Bounding box is not numeric: {points!r}") from exc


def _coerce_number(value: Any) -> float | int:
    if isinstance(value, bool):
        raise TypeError("booleans are not coordinates")
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    number = float(text)
    return int(number) if number.is_integer() and "." not in text else number


def _as_lists(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_as_lists(item) for item in value]
    return value
