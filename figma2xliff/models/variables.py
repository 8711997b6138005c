"""Data models for the Figma variables export."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NewType

# Figma's internal identifier for one language variant, e.g. "1:0"
ModeId = NewType("ModeId", str)

# Human-readable locale tag, e.g. "pt_br"
LocaleCode = NewType("LocaleCode", str)

PLURAL_MARKER = "(plural)"


@dataclass
class VariableRecord:
    """A single variable: hierarchical name plus one value per mode."""

    name: str
    values_by_mode: Dict[ModeId, Any] = field(default_factory=dict)

    @property
    def is_plural(self) -> bool:
        """Check if this record supplies the plural form of another record."""
        from ..localization.naming import is_plural_name

        return is_plural_name(self.name)


@dataclass
class VariablesDocument:
    """Represents a complete variables export."""

    modes: Dict[LocaleCode, ModeId]
    variables: List[VariableRecord]
    skipped_records: int = 0  # records dropped for missing name / valuesByMode
