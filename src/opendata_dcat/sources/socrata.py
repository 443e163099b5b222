"""Socrata (Discovery API catalog entry) converter."""

from __future__ import annotations

from typing import Any, Mapping

from opendata_dcat.core.models import DatasetRecord
from opendata_dcat.utils.dates import parse_date

from ._common import as_mapping, compact, dataset_record, first_of, get_path

OWNER_KEY = "Data-Owner_Owner"
FREQUENCY_KEY = "Refresh-Frequency_Frequency"


def convert(meta: Mapping[str, Any], default_values: Mapping[str, Any] | None = None) -> DatasetRecord:
    meta = as_mapping(meta)
    defaults = as_mapping(default_values)
    resource = as_mapping(meta.get("resource"))
    classification = as_mapping(meta.get("classification"))
    domain_metadata = classification.get("domain_metadata")

    return dataset_record(
        title=resource.get("name"),
        identifier=resource.get("id"),
        issued=parse_date(resource.get("createdAt")),
        modified=parse_date(resource.get("updatedAt")),
        description=resource.get("description"),
        landingPage=first_of(meta.get("permalink"), meta.get("link"), defaults.get("landingPage")),
        license=get_path(meta, "metadata.license"),
        publisher=first_of(
            _domain_value(domain_metadata, OWNER_KEY),
            resource.get("attribution"),
            meta.get("attribution"),
            defaults.get("publisher"),
            defaults.get("name"),
        ),
        accrualPeriodicity=_domain_value(domain_metadata, FREQUENCY_KEY),
        keyword=compact([classification.get("tags"), classification.get("domain_tags")]),
        theme=compact([classification.get("categories"), classification.get("domain_category")]),
        distribution=[],
    )


def _domain_value(entries: Any, key: str) -> Any:
    """Return the value of the first ``{"key", "value"}`` entry labelled ``key``."""
    if not isinstance(entries, list):
        return None
    for entry in entries:
        if isinstance(entry, Mapping) and entry.get("key") == key:
            return entry.get("value")
    return None
