"""Tests for the Dataset facade: dispatch, merging and copy-on-read."""

from __future__ import annotations

from copy import deepcopy
from datetime import datetime, timezone

import pytest

from opendata_dcat import Dataset, SourceType, UnrecognizedSourceError
from opendata_dcat.sources import CONVERTERS, get_converter

CANONICAL = {
    "@type": "dcat:Dataset",
    "title": "Water mains",
    "description": "Pipe network of the municipal water utility.",
    "issued": datetime(2019, 1, 1, tzinfo=timezone.utc),
    "modified": datetime(2020, 1, 1, tzinfo=timezone.utc),
    "language": ["en"],
    "publisher": "Water Utility",
    "identifier": "water-mains",
    "landingPage": "https://data.example.org/water-mains",
    "keyword": ["water", "pipes"],
    "theme": ["Utilities"],
    "distribution": [
        {
            "@type": "dcat:Distribution",
            "title": "Shapefile",
            "accessURL": "https://data.example.org/water-mains.zip",
        }
    ],
    "license": "CC0-1.0",
    "spatial": {"type": "MultiPolygon", "coordinates": [[[[0, 0], [0, 1], [1, 1], [0, 0]]]]},
}

CKAN_PACKAGE = {
    "id": "ckan-1",
    "title": "Street lights",
    "notes": "Location of street lights maintained by the city.",
    "organization": {"name": "public-works"},
    "tags": [{"display_name": "lighting"}],
    "resources": [{"name": "lights.csv", "format": "CSV", "url": "https://ckan.example.org/lights.csv"}],
}


def test_round_trip_returns_equal_but_independent_copy() -> None:
    dataset = Dataset(deepcopy(CANONICAL), detect_language=False)

    first = dataset.to_dict()
    assert first == CANONICAL

    first["keyword"].append("mutated")
    first["distribution"][0]["title"] = "mutated"
    first["spatial"]["coordinates"].clear()

    second = dataset.to_dict()
    assert second == CANONICAL
    assert second is not first


def test_constructor_copies_input() -> None:
    source = deepcopy(CANONICAL)
    dataset = Dataset(source, detect_language=False)

    source["keyword"].append("late change")

    assert dataset["keyword"] == ["water", "pipes"]


def test_item_access_returns_copies() -> None:
    dataset = Dataset(deepcopy(CANONICAL), detect_language=False)

    theme = dataset["theme"]
    theme.append("Other")

    assert dataset.get("theme") == ["Utilities"]
    assert dataset.get("accrualPeriodicity") is None
    assert "title" in dataset


def test_empty_dataset_has_list_fields() -> None:
    record = Dataset(detect_language=False).to_dict()

    assert record == {"@type": "dcat:Dataset", "keyword": [], "theme": [], "distribution": []}


def test_set_merges_fields_shallowly() -> None:
    dataset = Dataset(deepcopy(CANONICAL), detect_language=False)

    dataset.set({"license": "ODbL-1.0", "keyword": "single", "unknownField": 1})

    record = dataset.to_dict()
    assert record["license"] == "ODbL-1.0"
    assert record["keyword"] == ["single"]
    assert record["title"] == "Water mains"
    assert "unknownField" not in record


def test_set_upgrades_polygon_spatial() -> None:
    dataset = Dataset(detect_language=False)
    dataset.set({"spatial": {"type": "Polygon", "coordinates": [[[0, 0], [0, 1], [1, 1], [0, 0]]]}})

    assert dataset["spatial"]["type"] == "MultiPolygon"


def test_set_detects_language_when_text_changes() -> None:
    dataset = Dataset(detect_language=True)

    dataset.set(
        {
            "title": "Public library branches",
            "description": (
                "Addresses, opening hours and services offered at every branch of the public "
                "library system, including accessibility information for visitors."
            ),
        }
    )

    assert dataset["language"] == ["en"]


def test_set_keeps_explicit_language() -> None:
    dataset = Dataset(detect_language=True)

    dataset.set({"title": "Public library branches", "language": "de"})

    assert dataset["language"] == ["de"]


def test_set_without_text_leaves_language_alone() -> None:
    dataset = Dataset(deepcopy(CANONICAL), detect_language=True)

    dataset.set({"license": "ODbL-1.0"})

    assert dataset["language"] == ["en"]


def test_to_json_serialises_dates() -> None:
    payload = Dataset(deepcopy(CANONICAL), detect_language=False).to_json()

    assert payload["issued"] == "2019-01-01T00:00:00+00:00"
    assert payload["distribution"][0]["accessURL"] == "https://data.example.org/water-mains.zip"


def test_from_source_is_case_insensitive() -> None:
    dataset = Dataset.from_source("CKAN", deepcopy(CKAN_PACKAGE), detect_language=False)

    assert dataset["identifier"] == "ckan-1"
    assert dataset["publisher"] == "public-works"
    assert len(dataset["distribution"]) == 1


def test_from_source_accepts_empty_metadata() -> None:
    dataset = Dataset.from_source("CKAN", {}, detect_language=False)

    assert dataset["keyword"] == []
    assert dataset["distribution"] == []


def test_from_source_forwards_default_values() -> None:
    dataset = Dataset.from_source(
        SourceType.JUNAR,
        {"guid": "J-1", "title": "Budget"},
        {"publisher": "Example City", "landingPage": "https://junar.example.org"},
        detect_language=False,
    )

    assert dataset["publisher"] == "Example City"
    assert dataset["landingPage"] == "https://junar.example.org"


def test_from_source_rejects_unknown_source() -> None:
    with pytest.raises(UnrecognizedSourceError, match="Unrecognized source: bogus"):
        Dataset.from_source("bogus", {})


def test_registry_covers_every_source_type() -> None:
    assert set(CONVERTERS) == set(SourceType)
    assert get_converter(" Socrata ") is CONVERTERS[SourceType.SOCRATA]
    with pytest.raises(ValueError):
        get_converter(None)  # type: ignore[arg-type]


def test_from_source_annotates_language_when_missing() -> None:
    dataset = Dataset.from_source("ckan", deepcopy(CKAN_PACKAGE), detect_language=True)

    language = dataset["language"]
    assert isinstance(language, list)
    assert len(language) == 1
