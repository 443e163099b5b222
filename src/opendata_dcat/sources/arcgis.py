"""ArcGIS Hub (Open Data v2 API) converter."""

from __future__ import annotations

from typing import Any, Mapping

from opendata_dcat.core.models import DatasetRecord
from opendata_dcat.utils.dates import parse_date
from opendata_dcat.utils.geometry import bbox_to_geojson

from ._common import as_mapping, dataset_record, first_of, get_path, safe_spatial


def convert(meta: Mapping[str, Any], default_values: Mapping[str, Any] | None = None) -> DatasetRecord:
    """Map an ArcGIS Hub dataset (``{"id", "attributes"}`` or flat data.json entry)."""
    meta = as_mapping(meta)
    defaults = as_mapping(default_values)
    attrs = as_mapping(meta.get("attributes")) or meta
    identifier = first_of(meta.get("id"), attrs.get("identifier"))

    extent = get_path(attrs, "extent.coordinates") or attrs.get("spatial")
    distribution = meta.get("distribution") or attrs.get("distribution")

    return dataset_record(
        title=first_of(attrs.get("title"), attrs.get("name")),
        identifier=identifier,
        issued=parse_date(first_of(attrs.get("createdAt"), attrs.get("issued"))),
        modified=parse_date(first_of(attrs.get("updatedAt"), attrs.get("modified"))),
        description=attrs.get("description"),
        landingPage=first_of(attrs.get("landingPage"), defaults.get("landingPage")),
        license=first_of(attrs.get("licenseInfo"), attrs.get("license")),
        publisher=first_of(
            attrs.get("source"),
            attrs.get("owner"),
            get_path(attrs, "publisher.name"),
            attrs.get("publisher") if isinstance(attrs.get("publisher"), str) else None,
            defaults.get("publisher"),
            defaults.get("name"),
        ),
        keyword=first_of(attrs.get("tags"), attrs.get("keyword")),
        theme=[],
        spatial=safe_spatial(bbox_to_geojson, extent, source="arcgis", identifier=identifier),
        distribution=distribution if isinstance(distribution, list) else [],
    )
