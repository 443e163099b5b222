"""GeoNode (``/api/layers`` payload) converter."""

from __future__ import annotations

from typing import Any, Mapping

from opendata_dcat.core.models import DatasetRecord
from opendata_dcat.utils.dates import parse_date
from opendata_dcat.utils.geometry import wkt_to_geojson

from ._common import as_mapping, build_distribution, dataset_record, first_of, safe_spatial


def convert(meta: Mapping[str, Any], default_values: Mapping[str, Any] | None = None) -> DatasetRecord:
    meta = as_mapping(meta)
    defaults = as_mapping(default_values)
    identifier = meta.get("uuid")

    distribution = []
    if meta.get("distribution_description") and meta.get("distribution_url"):
        distribution.append(
            build_distribution(
                title=first_of(meta.get("title"), meta.get("distribution_description")),
                description=meta.get("distribution_description"),
                access_url=meta.get("distribution_url"),
            )
        )

    # GeoNode sites are known to publish broken WKT; keep the rest of the record.
    spatial = safe_spatial(
        wkt_to_geojson,
        meta.get("csw_wkt_geometry"),
        source="geonode",
        identifier=identifier,
    )

    return dataset_record(
        title=meta.get("title"),
        identifier=identifier,
        modified=parse_date(meta.get("date")),
        description=meta.get("abstract"),
        landingPage=first_of(meta.get("distribution_url"), defaults.get("landingPage")),
        publisher=first_of(defaults.get("name"), defaults.get("publisher")),
        keyword=[],
        theme=[meta.get("category__gn_description")],
        spatial=spatial,
        distribution=distribution,
    )
