"""Language detection over dataset text fields."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from langdetect.detector_factory import PROFILES_DIRECTORY, DetectorFactory
from langdetect.lang_detect_exception import LangDetectException

from opendata_dcat.core.config import get_settings
from opendata_dcat.core.logging import get_logger

LOGGER = get_logger(__name__)

UNDETERMINED = "und"


def collect_text(dataset: Mapping[str, Any]) -> str:
    """Join title, description, keywords and themes with single spaces."""
    text: list[str] = []
    for field in ("title", "description"):
        value = dataset.get(field)
        if value:
            text.append(str(value))
    for field in ("keyword", "theme"):
        for value in dataset.get(field) or []:
            if value:
                text.append(str(value))
    return " ".join(text)


def detect_language(dataset: Mapping[str, Any], *, seed: int | None = None) -> str | None:
    """Return the most likely language code of the dataset's text, if any.

    The seed is applied to a fresh detector per call; the shared language
    profiles are loaded once and never modified afterwards.
    """
    text = collect_text(dataset)
    if not text:
        return None
    detector = _detector_factory().create()
    detector.seed = get_settings().language_seed if seed is None else seed
    detector.append(text)
    try:
        return detector.detect()
    except LangDetectException as exc:
        LOGGER.debug("language.undetermined", error=str(exc))
        return UNDETERMINED


@lru_cache(maxsize=1)
def _detector_factory() -> DetectorFactory:
    factory = DetectorFactory()
    factory.load_profile(PROFILES_DIRECTORY)
    return factory
