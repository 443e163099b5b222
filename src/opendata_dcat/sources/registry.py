"""Static dispatch table from source type to converter."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from opendata_dcat.core.models import SourceType

from . import arcgis, ckan, dkan, geonode, junar, opendatasoft, socrata
from ._common import Converter

CONVERTERS: Mapping[SourceType, Converter] = MappingProxyType(
    {
        SourceType.ARCGIS: arcgis.convert,
        SourceType.CKAN: ckan.convert,
        SourceType.DKAN: dkan.convert,
        SourceType.GEONODE: geonode.convert,
        SourceType.JUNAR: junar.convert,
        SourceType.OPENDATASOFT: opendatasoft.convert,
        SourceType.SOCRATA: socrata.convert,
    }
)


def get_converter(source: str | SourceType) -> Converter:
    """Return the converter for ``source``; unknown names raise ``UnrecognizedSourceError``."""
    return CONVERTERS[SourceType.parse(source)]
