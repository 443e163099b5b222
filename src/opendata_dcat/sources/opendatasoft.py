"""OpenDataSoft (Explore API v2 catalog entry) converter."""

from __future__ import annotations

from typing import Any, Mapping

from opendata_dcat.core.models import DatasetRecord
from opendata_dcat.utils.dates import parse_date
from opendata_dcat.utils.geometry import ensure_multi_polygon

from ._common import as_mapping, dataset_record, first_of, get_path, valid_array

LANDING_PAGE_TEMPLATE = "https://{domain}/explore/dataset/{dataset}/information/"


def convert(meta: Mapping[str, Any], default_values: Mapping[str, Any] | None = None) -> DatasetRecord:
    meta = as_mapping(meta)
    defaults = as_mapping(default_values)
    dataset = as_mapping(meta.get("dataset"))
    attrs = as_mapping(get_path(dataset, "metas.default"))

    landing_page = None
    if attrs.get("source_domain_address") and attrs.get("source_dataset"):
        landing_page = LANDING_PAGE_TEMPLATE.format(
            domain=attrs["source_domain_address"],
            dataset=attrs["source_dataset"],
        )

    return dataset_record(
        title=attrs.get("title"),
        identifier=dataset.get("dataset_id"),
        modified=parse_date(attrs.get("modified")),
        description=attrs.get("description"),
        landingPage=first_of(landing_page, defaults.get("landingPage")),
        license=attrs.get("license"),
        language=valid_array(attrs.get("language")) or None,
        publisher=first_of(attrs.get("publisher"), defaults.get("publisher"), defaults.get("name")),
        keyword=valid_array(attrs.get("keyword")),
        theme=valid_array(attrs.get("theme")),
        spatial=ensure_multi_polygon(get_path(attrs, "geographic_area.geometry")),
        distribution=[],
    )
