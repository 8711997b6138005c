"""XLIFF output modules."""

from .xliff_writer import XliffWriter, escape_xml, icu_plural, to_text

__all__ = ["XliffWriter", "escape_xml", "icu_plural", "to_text"]
