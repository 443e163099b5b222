"""Canonical DCAT record shapes and source identifiers."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, TypedDict

from .exceptions import UnrecognizedSourceError


class DcatType(str, Enum):
    CATALOG = "dcat:Catalog"
    DATASET = "dcat:Dataset"
    DISTRIBUTION = "dcat:Distribution"


class SourceType(str, Enum):
    """Open data portals with a registered converter."""

    ARCGIS = "arcgis"
    CKAN = "ckan"
    DKAN = "dkan"
    GEONODE = "geonode"
    JUNAR = "junar"
    OPENDATASOFT = "opendatasoft"
    SOCRATA = "socrata"

    @classmethod
    def parse(cls, value: str | SourceType) -> SourceType:
        """Resolve a source name case-insensitively."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnrecognizedSourceError(value)
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UnrecognizedSourceError(value) from None


class MultiPolygon(TypedDict):
    type: str
    coordinates: list[Any]


# "@type" is not a valid identifier, hence the functional form.
DistributionRecord = TypedDict(
    "DistributionRecord",
    {
        "@type": str,
        "title": str | None,
        "description": str | None,
        "accessURL": str | None,
        "downloadURL": str | None,
        "mediaType": str | None,
        "format": str | None,
    },
    total=False,
)

DatasetRecord = TypedDict(
    "DatasetRecord",
    {
        "@type": str,
        "title": str | None,
        "description": str | None,
        "issued": datetime | None,
        "modified": datetime | None,
        "language": list[str] | None,
        "publisher": str | None,
        "accrualPeriodicity": str | None,
        "identifier": str | None,
        "landingPage": str,
        "keyword": list[str],
        "theme": list[str],
        "distribution": list[DistributionRecord],
        "license": str | None,
        "spatial": MultiPolygon | str | None,
    },
    total=False,
)

DATASET_FIELDS: tuple[str, ...] = tuple(key for key in DatasetRecord.__annotations__ if key != "@type")
DISTRIBUTION_FIELDS: tuple[str, ...] = tuple(
    key for key in DistributionRecord.__annotations__ if key != "@type"
)
LIST_FIELDS: tuple[str, ...] = ("keyword", "theme", "distribution")
