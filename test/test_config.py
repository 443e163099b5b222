"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

from opendata_dcat.core.config import Settings, _load_settings_overrides
from opendata_dcat.core.logging import configure_logging, get_logger


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.detect_language is True
    assert settings.language_seed == 0
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("OPENDATA_DCAT_DETECT_LANGUAGE", "false")
    monkeypatch.setenv("OPENDATA_DCAT_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.detect_language is False
    assert settings.log_level == "DEBUG"


def test_overrides_come_from_dcat_section(tmp_path: Path) -> None:
    config_path = tmp_path / "dcat.toml"
    config_path.write_text(
        '[dcat]\nlog_level = "warning"\nlanguage_seed = 7\nunknown = "ignored"\n',
        encoding="utf-8",
    )

    overrides = _load_settings_overrides(config_path)

    assert overrides == {"log_level": "WARNING", "language_seed": 7}
    assert Settings(**overrides).language_seed == 7


def test_missing_config_file_yields_no_overrides(tmp_path: Path) -> None:
    assert _load_settings_overrides(tmp_path / "absent.toml") == {}


def test_configure_logging_accepts_explicit_level() -> None:
    configure_logging("DEBUG", settings=Settings())

    get_logger("opendata_dcat.test").debug("config.logging_configured", level="DEBUG")
