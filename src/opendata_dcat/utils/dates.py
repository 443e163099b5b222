"""Date extraction and parsing helpers."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as dateparser

from opendata_dcat.core.logging import get_logger

LOGGER = get_logger(__name__)

# Components missing from a loose date string are taken from here, not from today.
PARSE_DEFAULT = datetime(1, 1, 1)

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
US_DATE_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4}")


def get_date_string(raw: Any) -> str | None:
    """Extract a parseable date substring from a loosely formatted value.

    Strings containing an ISO ``YYYY-MM-DD`` date are returned unchanged;
    otherwise the first ``MM/DD/YYYY`` occurrence is returned. Calendar
    correctness is not checked.
    """
    if not raw or not isinstance(raw, str):
        return None
    if ISO_DATE_PATTERN.search(raw):
        return raw
    match = US_DATE_PATTERN.search(raw)
    if match:
        return raw[match.start() : match.start() + 10]
    return None


def parse_date(value: Any) -> datetime | None:
    """Parse a datetime, date string or epoch-milliseconds value."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return _from_epoch_millis(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return dateparser.parse(text, default=PARSE_DEFAULT)
    except (ValueError, OverflowError) as exc:
        LOGGER.debug("dates.unparseable", value=text, error=str(exc))
        return None


def from_epoch_seconds(value: Any) -> datetime | None:
    """Convert a Unix timestamp in seconds to an aware UTC datetime."""
    if value is None or isinstance(value, bool):
        return None
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        LOGGER.debug("dates.invalid_epoch", value=value)
        return None
    return _from_epoch_millis(seconds * 1000)


def _from_epoch_millis(millis: float) -> datetime | None:
    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        LOGGER.debug("dates.epoch_out_of_range", value=millis, error=str(exc))
        return None
