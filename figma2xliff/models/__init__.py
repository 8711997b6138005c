"""Data models for the Figma to XLIFF converter."""

from .variables import ModeId, LocaleCode, VariableRecord, VariablesDocument
from .translation import PluralForms, TranslationEntry, TranslationSet, BuildReport

__all__ = [
    "ModeId",
    "LocaleCode",
    "VariableRecord",
    "VariablesDocument",
    "PluralForms",
    "TranslationEntry",
    "TranslationSet",
    "BuildReport",
]
