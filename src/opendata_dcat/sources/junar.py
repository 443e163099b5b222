"""Junar (``/api/v2/datasets`` payload) converter."""

from __future__ import annotations

from typing import Any, Mapping

from opendata_dcat.core.models import DatasetRecord
from opendata_dcat.utils.dates import from_epoch_seconds

from ._common import as_mapping, dataset_record, first_of


def convert(meta: Mapping[str, Any], default_values: Mapping[str, Any] | None = None) -> DatasetRecord:
    meta = as_mapping(meta)
    defaults = as_mapping(default_values)

    return dataset_record(
        title=meta.get("title"),
        identifier=meta.get("guid"),
        issued=from_epoch_seconds(meta.get("created_at")),
        modified=from_epoch_seconds(meta.get("modified_at")),
        accrualPeriodicity=meta.get("frequency"),
        description=meta.get("description"),
        landingPage=first_of(meta.get("link"), defaults.get("landingPage")),
        publisher=first_of(defaults.get("publisher"), defaults.get("name")),
        keyword=meta.get("tags"),
        theme=[meta.get("category_name")],
        distribution=[],
    )
