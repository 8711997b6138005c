"""Bidirectional mapping between Figma mode IDs and locale codes."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional

from ..models.variables import LocaleCode, ModeId


@dataclass(frozen=True)
class LocaleIndex:
    """
    Resolves mode IDs to locale codes and back.

    Built once per conversion from the document's ``modes`` mapping. When two
    locales share a mode ID the inverse mapping keeps the last one. When the
    source locale is not in ``modes``, ``source_mode_id`` is None and every
    locale is treated as a target.
    """

    locale_to_mode: Mapping[LocaleCode, ModeId]
    mode_to_locale: Mapping[ModeId, LocaleCode]
    source_locale: LocaleCode
    source_mode_id: Optional[ModeId] = None

    @classmethod
    def from_modes(cls, modes: Mapping[LocaleCode, ModeId], source_locale: str) -> "LocaleIndex":
        """
        Build the index from a ``locale -> mode ID`` mapping.

        Args:
            modes: Locale codes mapped to Figma mode IDs, in document order
            source_locale: Locale code whose values become <source>

        Returns:
            LocaleIndex with both directions resolved
        """
        locale_to_mode = dict(modes)
        mode_to_locale = {mode_id: locale for locale, mode_id in locale_to_mode.items()}

        return cls(
            locale_to_mode=MappingProxyType(locale_to_mode),
            mode_to_locale=MappingProxyType(mode_to_locale),
            source_locale=LocaleCode(source_locale),
            source_mode_id=locale_to_mode.get(LocaleCode(source_locale)),
        )

    def locale_for(self, mode_id: ModeId) -> Optional[LocaleCode]:
        """Get the locale code for a mode ID, or None if the mode is unknown."""
        return self.mode_to_locale.get(mode_id)

    def mode_for(self, locale: LocaleCode) -> Optional[ModeId]:
        """Get the mode ID for a locale code, or None if the locale is unknown."""
        return self.locale_to_mode.get(locale)

    def is_source(self, mode_id: ModeId) -> bool:
        """Check if a mode ID holds source-language values."""
        return self.source_mode_id is not None and mode_id == self.source_mode_id

    def target_locales(self) -> List[LocaleCode]:
        """Every locale except the configured source, in document order."""
        return [locale for locale in self.locale_to_mode if locale != self.source_locale]
