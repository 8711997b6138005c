"""Locale resolution and translation model building."""

from .locale_index import LocaleIndex
from .naming import format_name_id, strip_plural_marker, is_plural_name
from .builder import TranslationModelBuilder, build_translations

__all__ = [
    "LocaleIndex",
    "format_name_id",
    "strip_plural_marker",
    "is_plural_name",
    "TranslationModelBuilder",
    "build_translations",
]
