"""Data models for the keyed translation model built from variables."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .variables import LocaleCode


def is_present(value: Any) -> bool:
    """Truthiness as the export tooling sees it: None, "", 0, False and NaN are absent."""
    if value is None or value == "":
        return False
    if isinstance(value, (int, float)):
        return value != 0 and value == value
    return True


@dataclass
class PluralForms:
    """Plural values merged into a base entry."""

    source: Any = None
    targets: Dict[LocaleCode, Any] = field(default_factory=dict)


@dataclass
class TranslationEntry:
    """Represents one translation unit, keyed by its derived identifier."""

    id: str
    source: Any = None
    targets: Dict[LocaleCode, Any] = field(default_factory=dict)
    plural: Optional[PluralForms] = None

    def target(self, locale: LocaleCode) -> Any:
        """Get the target value for a locale, or None when absent."""
        return self.targets.get(locale)

    def has_translation(self, locale: LocaleCode) -> bool:
        """Check if this entry has a value for the given locale."""
        return self.targets.get(locale) not in (None, "")

    def has_plural_for(self, locale: LocaleCode) -> bool:
        """Check if a plural form exists for the given locale."""
        return self.plural is not None and is_present(self.plural.targets.get(locale))


class TranslationSet(Mapping[str, TranslationEntry]):
    """Read-only, insertion-ordered mapping of identifier -> entry."""

    def __init__(self, entries: Mapping[str, TranslationEntry]):
        self._entries = dict(entries)

    def __getitem__(self, key: str) -> TranslationEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TranslationSet({list(self._entries)!r})"

    def locales(self) -> List[LocaleCode]:
        """Every target locale that appears in at least one entry, in first-seen order."""
        seen: Dict[LocaleCode, None] = {}
        for entry in self._entries.values():
            for locale in entry.targets:
                seen.setdefault(locale, None)
            if entry.plural:
                for locale in entry.plural.targets:
                    seen.setdefault(locale, None)
        return list(seen)

    def plural_count(self) -> int:
        """Number of entries carrying a plural form."""
        return sum(1 for entry in self._entries.values() if entry.plural is not None)

    def get_untranslated_ids(self, locale: LocaleCode) -> List[str]:
        """Get identifiers that don't have a value for the locale."""
        return [key for key, entry in self._entries.items() if not entry.has_translation(locale)]

    def coverage(self, locale: LocaleCode) -> float:
        """Percentage of entries with a value for the locale (0-100)."""
        if not self._entries:
            return 0.0
        translated = len(self._entries) - len(self.get_untranslated_ids(locale))
        return translated / len(self._entries) * 100


@dataclass
class BuildReport:
    """Counts of data anomalies absorbed while building the model."""

    unknown_mode_values: int = 0
    dropped_plurals: int = 0  # plural record seen before its base
    overwritten_ids: int = 0
    replaced_plurals: int = 0

    @property
    def clean(self) -> bool:
        """Check if nothing was ignored, dropped or replaced."""
        return not (
            self.unknown_mode_values
            or self.dropped_plurals
            or self.overwritten_ids
            or self.replaced_plurals
        )

    def warnings(self) -> List[str]:
        """Human-readable warning lines for non-zero counters."""
        lines = []
        if self.unknown_mode_values:
            lines.append(f"{self.unknown_mode_values} value(s) for unknown modes ignored")
        if self.dropped_plurals:
            lines.append(f"{self.dropped_plurals} plural record(s) dropped (no base entry before them)")
        if self.overwritten_ids:
            lines.append(f"{self.overwritten_ids} entry id(s) overwritten by a later variable")
        if self.replaced_plurals:
            lines.append(f"{self.replaced_plurals} plural form(s) replaced by a later plural record")
        return lines
