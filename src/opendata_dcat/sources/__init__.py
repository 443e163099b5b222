"""Per-portal converters mapping raw metadata onto canonical DCAT records."""

from ._common import Converter, valid_array
from .registry import CONVERTERS, get_converter

__all__ = [
    "CONVERTERS",
    "Converter",
    "get_converter",
    "valid_array",
]
