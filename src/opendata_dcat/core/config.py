"""Application configuration primitives."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_PATH = Path("config/dcat.toml")


class Settings(BaseSettings):
    """Central configuration for the normalization engine."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    detect_language: bool = True
    language_seed: int = Field(default=0, ge=0)

    model_config = SettingsConfigDict(env_prefix="OPENDATA_DCAT_", env_file=(), extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""
    overrides = _load_settings_overrides()
    return Settings(**overrides)


def _load_settings_overrides(config_path: Path = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Load configuration overrides from the TOML config file."""
    if not config_path.exists():
        return {}
    data = _read_toml(config_path)
    section = data.get("dcat")
    if not isinstance(section, dict):
        return {}
    overrides = {key: value for key, value in section.items() if key in Settings.model_fields}
    if "log_level" in overrides and isinstance(overrides["log_level"], str):
        overrides["log_level"] = overrides["log_level"].strip().upper()
    return {key: value for key, value in overrides.items() if value is not None}


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)
