"""CKAN (``package_show`` payload) converter."""

from __future__ import annotations

from typing import Any, Mapping

from opendata_dcat.core.models import DatasetRecord, DistributionRecord
from opendata_dcat.utils.dates import parse_date

from ._common import (
    as_mapping,
    build_distribution,
    dataset_record,
    first_of,
    get_path,
    pluck,
    resolvable_distributions,
)


def convert(meta: Mapping[str, Any], default_values: Mapping[str, Any] | None = None) -> DatasetRecord:
    meta = as_mapping(meta)
    defaults = as_mapping(default_values)
    # Harvested packages keep the portal's own timestamps under __extras.
    extras = as_mapping(meta.get("__extras"))

    return dataset_record(
        title=meta.get("title"),
        identifier=meta.get("id"),
        issued=parse_date(first_of(extras.get("metadata_created"), meta.get("metadata_created"))),
        modified=parse_date(first_of(extras.get("metadata_modified"), meta.get("metadata_modified"))),
        description=meta.get("notes"),
        landingPage=first_of(meta.get("url"), defaults.get("landingPage")),
        license=meta.get("license_title"),
        publisher=first_of(
            get_path(meta, "organization.title"),
            get_path(meta, "organization.name"),
            defaults.get("publisher"),
            defaults.get("name"),
        ),
        keyword=pluck(meta.get("tags"), "display_name", "name"),
        theme=pluck(meta.get("groups"), "display_name", "name"),
        distribution=_resources_to_distributions(meta.get("resources")),
    )


def _resources_to_distributions(resources: Any) -> list[DistributionRecord]:
    if not isinstance(resources, list):
        return []
    distributions = [
        build_distribution(
            title=first_of(resource.get("title"), resource.get("name"), resource.get("format")),
            description=resource.get("description") or None,
            access_url=resource.get("url"),
            media_type=resource.get("mimetype") or None,
            file_format=resource.get("format") or None,
        )
        for resource in resources
        if isinstance(resource, Mapping)
    ]
    return resolvable_distributions(distributions)
