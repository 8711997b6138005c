"""
figma2xliff - Figma variables to XLIFF 2.0 converter

Reads the JSON written by the Figma "Export/Import Variables" plugin and
produces one translations_<locale>.xlf file per non-source locale.

Quick start:
    figma2xliff convert -i Localization -o ./i18n
"""

__version__ = "1.0.0"

from .pipeline import ConversionResult, convert_document, run_conversion

__all__ = [
    "ConversionResult",
    "convert_document",
    "run_conversion",
]
