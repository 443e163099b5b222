"""DKAN (Project Open Data ``data.json``) converter."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from opendata_dcat.core.models import DatasetRecord, DistributionRecord
from opendata_dcat.utils.dates import get_date_string, parse_date
from opendata_dcat.utils.geometry import wkt_to_geojson

from ._common import (
    as_mapping,
    copy_distribution,
    dataset_record,
    first_of,
    get_path,
    has_resolvable_url,
    safe_spatial,
    valid_array,
)


def convert(meta: Mapping[str, Any], default_values: Mapping[str, Any] | None = None) -> DatasetRecord:
    meta = as_mapping(meta)
    defaults = as_mapping(default_values)
    identifier = meta.get("identifier")

    return dataset_record(
        title=meta.get("title"),
        identifier=identifier,
        issued=_loose_date(meta.get("issued")),
        modified=_loose_date(meta.get("modified")),
        description=meta.get("description"),
        landingPage=first_of(meta.get("landingPage"), defaults.get("landingPage")),
        license=meta.get("license"),
        publisher=first_of(
            get_path(meta, "publisher.name"),
            meta.get("publisher") if isinstance(meta.get("publisher"), str) else None,
            defaults.get("publisher"),
            defaults.get("name"),
        ),
        keyword=valid_array(meta.get("keyword")),
        theme=[],
        language=valid_array(meta.get("language")) or None,
        spatial=safe_spatial(wkt_to_geojson, meta.get("spatial"), source="dkan", identifier=identifier),
        accrualPeriodicity=meta.get("accrualPeriodicity"),
        distribution=_filter_distributions(meta.get("distribution")),
    )


def _loose_date(value: Any) -> datetime | None:
    if not value:
        return None
    return parse_date(get_date_string(value))


def _filter_distributions(entries: Any) -> list[DistributionRecord]:
    if not isinstance(entries, list):
        return []
    return [copy_distribution(entry) for entry in entries if has_resolvable_url(entry)]
