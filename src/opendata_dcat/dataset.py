"""Public facade holding one canonical DCAT dataset record."""

from __future__ import annotations

from copy import deepcopy
from datetime import date, datetime
from typing import Any, Mapping

from opendata_dcat.core.config import get_settings
from opendata_dcat.core.logging import get_logger
from opendata_dcat.core.models import (
    DATASET_FIELDS,
    LIST_FIELDS,
    DatasetRecord,
    DcatType,
    SourceType,
)
from opendata_dcat.sources.registry import get_converter
from opendata_dcat.utils.geometry import ensure_multi_polygon
from opendata_dcat.utils.language import detect_language

LOGGER = get_logger(__name__)

TEXT_FIELDS: tuple[str, ...] = ("title", "description", "keyword", "theme")


class Dataset:
    """Canonical dataset metadata with copy-on-read access.

    Instances are built with :meth:`from_source` or directly from an already
    canonical record. The held record only changes through :meth:`set`; every
    read hands out an independent deep copy.
    """

    def __init__(self, meta: Mapping[str, Any] | None = None, *, detect_language: bool | None = None) -> None:
        if detect_language is None:
            detect_language = get_settings().detect_language
        self._detect_language = detect_language
        self._record: DatasetRecord = {
            "@type": DcatType.DATASET.value,
            "keyword": [],
            "theme": [],
            "distribution": [],
        }
        if meta:
            self.set(meta)

    @classmethod
    def from_source(
        cls,
        source: str | SourceType,
        meta: Mapping[str, Any],
        default_values: Mapping[str, Any] | None = None,
        *,
        detect_language: bool | None = None,
    ) -> Dataset:
        """Convert portal metadata of type ``source`` into a dataset.

        Raises :class:`~opendata_dcat.core.exceptions.UnrecognizedSourceError`
        when ``source`` names no known portal type.
        """
        converter = get_converter(source)
        record = converter(meta, default_values)
        LOGGER.debug(
            "dataset.converted",
            source=SourceType.parse(source).value,
            identifier=record.get("identifier"),
        )
        return cls(record, detect_language=detect_language)

    def set(self, meta: Mapping[str, Any]) -> None:
        """Merge ``meta`` into the record, re-detecting language when text changed."""
        for key, value in meta.items():
            if key == "@type":
                continue
            if key not in DATASET_FIELDS:
                LOGGER.debug("dataset.unknown_field", field=key)
                continue
            self._record[key] = self._normalize_field(key, deepcopy(value))

        text_changed = any(meta.get(field) for field in TEXT_FIELDS)
        if self._detect_language and text_changed and not meta.get("language"):
            language = detect_language(self._record)
            self._record["language"] = [language] if language else None

    def to_dict(self) -> DatasetRecord:
        """Return a deep copy of the record."""
        return deepcopy(self._record)

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-compatible deep copy, with dates in ISO 8601."""
        return _jsonable(self._record)

    def get(self, key: str, default: Any = None) -> Any:
        return deepcopy(self._record.get(key, default))

    def __getitem__(self, key: str) -> Any:
        return deepcopy(self._record[key])

    def __contains__(self, key: object) -> bool:
        return key in self._record

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return self._record == other._record

    def __repr__(self) -> str:
        return f"Dataset(identifier={self._record.get('identifier')!r}, title={self._record.get('title')!r})"

    @staticmethod
    def _normalize_field(key: str, value: Any) -> Any:
        if key in LIST_FIELDS:
            if isinstance(value, (list, tuple)):
                return list(value)
            return [value] if value else []
        if key == "language" and isinstance(value, str):
            return [value]
        if key == "spatial" and isinstance(value, Mapping):
            return ensure_multi_polygon(value)
        return value


def _jsonable(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value
