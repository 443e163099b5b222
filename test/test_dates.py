"""Tests for loose date extraction and parsing."""

from __future__ import annotations

from datetime import datetime, timezone

from opendata_dcat.utils.dates import from_epoch_seconds, get_date_string, parse_date


def test_get_date_string_keeps_iso_values_unchanged() -> None:
    assert get_date_string("2020-05-01T00:00:00Z") == "2020-05-01T00:00:00Z"
    assert get_date_string("updated 2020-05-01") == "updated 2020-05-01"


def test_get_date_string_extracts_us_dates() -> None:
    assert get_date_string("05/01/2020 extra") == "05/01/2020"
    assert get_date_string("Last change: 12/31/2019 10:00") == "12/31/2019"


def test_get_date_string_does_not_check_calendar() -> None:
    assert get_date_string("13/45/2020") == "13/45/2020"


def test_get_date_string_returns_none_without_date() -> None:
    assert get_date_string("not a date") is None
    assert get_date_string("") is None
    assert get_date_string(None) is None


def test_parse_date_handles_strings_and_epoch_millis() -> None:
    assert parse_date("2020-05-01T00:00:00Z") == datetime(2020, 5, 1, tzinfo=timezone.utc)
    assert parse_date("05/01/2020") == datetime(2020, 5, 1)
    assert parse_date(1577836800000) == datetime(2020, 1, 1, tzinfo=timezone.utc)


def test_parse_date_returns_none_for_garbage() -> None:
    assert parse_date("not a date") is None
    assert parse_date(None) is None
    assert parse_date("") is None
    assert parse_date({"nested": True}) is None


def test_from_epoch_seconds() -> None:
    assert from_epoch_seconds(1577836800) == datetime(2020, 1, 1, tzinfo=timezone.utc)
    assert from_epoch_seconds("1577836800") == datetime(2020, 1, 1, tzinfo=timezone.utc)
    assert from_epoch_seconds(None) is None
    assert from_epoch_seconds("soon") is None


def test_parse_date_fills_missing_parts_with_fixed_values() -> None:
    assert parse_date("2018") == datetime(2018, 1, 1)
    assert parse_date("March 2019") == datetime(2019, 3, 1)
