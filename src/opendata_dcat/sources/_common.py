"""Helpers shared by the per-portal converters."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from opendata_dcat.core.exceptions import GeometryParseError
from opendata_dcat.core.logging import get_logger
from opendata_dcat.core.models import (
    DISTRIBUTION_FIELDS,
    LIST_FIELDS,
    DatasetRecord,
    DcatType,
    DistributionRecord,
    MultiPolygon,
)

LOGGER = get_logger(__name__)

Converter = Callable[[Mapping[str, Any], Mapping[str, Any] | None], DatasetRecord]


def as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def get_path(data: Any, path: str, default: Any = None) -> Any:
    """Follow a dotted path through nested mappings, returning ``default`` on a miss."""
    current = data
    for key in path.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return default if current is None else current


def first_of(*values: Any) -> Any:
    """Return the first truthy value."""
    for value in values:
        if value:
            return value
    return None


def valid_array(value: Any) -> list[Any]:
    """Pass lists through, wrap a lone string, and drop anything else."""
    if isinstance(value, (list, tuple)):
        return list(value)
    if value and isinstance(value, str):
        return [value]
    return []


def compact(values: Iterable[Any]) -> list[Any]:
    """Flatten one level of lists and drop empty entries."""
    result: list[Any] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            result.extend(item for item in value if item)
        elif value:
            result.append(value)
    return result


def pluck(items: Any, *keys: str) -> list[str]:
    """Collect the first present key of each mapping, in order."""
    result: list[str] = []
    for item in items if isinstance(items, (list, tuple)) else []:
        if not isinstance(item, Mapping):
            continue
        value = first_of(*(item.get(key) for key in keys))
        if value:
            result.append(value)
    return result


def build_distribution(
    *,
    title: Any = None,
    description: Any = None,
    access_url: Any = None,
    download_url: Any = None,
    media_type: Any = None,
    file_format: Any = None,
) -> DistributionRecord:
    distribution: DistributionRecord = {
        "@type": DcatType.DISTRIBUTION.value,
        "title": title,
        "accessURL": access_url,
    }
    optional = {
        "description": description,
        "downloadURL": download_url,
        "mediaType": media_type,
        "format": file_format,
    }
    distribution.update({key: value for key, value in optional.items() if value is not None})
    return distribution


def copy_distribution(entry: Mapping[str, Any]) -> DistributionRecord:
    """Copy the DCAT distribution properties of ``entry``, dropping any others."""
    distribution: DistributionRecord = {"@type": DcatType.DISTRIBUTION.value}
    distribution.update({key: entry[key] for key in DISTRIBUTION_FIELDS if entry.get(key) is not None})
    distribution.setdefault("title", first_of(entry.get("format"), entry.get("mediaType")))
    return distribution


def has_resolvable_url(distribution: Any) -> bool:
    if not isinstance(distribution, Mapping):
        return False
    return bool(distribution.get("downloadURL") or distribution.get("accessURL"))


def resolvable_distributions(distributions: Iterable[DistributionRecord]) -> list[DistributionRecord]:
    return [entry for entry in distributions if has_resolvable_url(entry)]


def safe_spatial(
    parse: Callable[[Any], MultiPolygon | None],
    value: Any,
    *,
    source: str,
    identifier: Any = None,
) -> MultiPolygon | None:
    """Run a geometry parser, downgrading parse failures to ``None``."""
    try:
        return parse(value)
    except GeometryParseError as exc:
        LOGGER.warning(
            f"sources.{source}.invalid_spatial",
            identifier=identifier,
            error=str(exc),
        )
        return None


def dataset_record(**fields: Any) -> DatasetRecord:
    """Assemble a canonical record, forcing list fields to lists."""
    record: DatasetRecord = {"@type": DcatType.DATASET.value}
    for key, value in fields.items():
        if key in LIST_FIELDS:
            value = compact([value]) if value else []
        record[key] = value
    record["landingPage"] = record.get("landingPage") or ""
    return record
