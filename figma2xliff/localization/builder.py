"""Builds the keyed translation model from flat variable records."""

from typing import Any, Dict, Iterable, Mapping, Tuple

from ..models.translation import BuildReport, PluralForms, TranslationEntry, TranslationSet
from ..models.variables import LocaleCode, ModeId, VariableRecord
from .locale_index import LocaleIndex
from .naming import base_name_id


class TranslationModelBuilder:
    """
    Groups variable values by locale into translation entries.

    Records are processed in input order. A plural record only attaches to a
    base entry that already exists; plural records that precede their base
    are dropped and counted in the report. A repeated identifier replaces the
    earlier entry but keeps its position.
    """

    def __init__(self, index: LocaleIndex):
        self.index = index

    def build(self, variables: Iterable[VariableRecord]) -> Tuple[TranslationSet, BuildReport]:
        """
        Build translation entries for every variable.

        Args:
            variables: Variable records in document order

        Returns:
            Tuple of (read-only TranslationSet, BuildReport)
        """
        entries: Dict[str, TranslationEntry] = {}
        report = BuildReport()

        for record in variables:
            if record.is_plural:
                self._attach_plural(entries, record, report)
            else:
                self._add_entry(entries, record, report)

        return TranslationSet(entries), report

    def _add_entry(
        self,
        entries: Dict[str, TranslationEntry],
        record: VariableRecord,
        report: BuildReport,
    ) -> None:
        entry_id = base_name_id(record.name)
        if entry_id in entries:
            report.overwritten_ids += 1

        entry = TranslationEntry(id=entry_id)
        entry.source, entry.targets = self._distribute(record.values_by_mode, report)
        entries[entry_id] = entry

    def _attach_plural(
        self,
        entries: Dict[str, TranslationEntry],
        record: VariableRecord,
        report: BuildReport,
    ) -> None:
        entry_id = base_name_id(record.name)
        entry = entries.get(entry_id)
        if entry is None:
            report.dropped_plurals += 1
            return

        if entry.plural is not None:
            report.replaced_plurals += 1

        source, targets = self._distribute(record.values_by_mode, report)
        entry.plural = PluralForms(source=source, targets=targets)

    def _distribute(
        self,
        values_by_mode: Mapping[ModeId, Any],
        report: BuildReport,
    ) -> Tuple[Any, Dict[LocaleCode, Any]]:
        """Split mode values into the source value and per-locale targets."""
        source = None
        targets: Dict[LocaleCode, Any] = {}

        for mode_id, value in values_by_mode.items():
            if self.index.is_source(mode_id):
                source = value
                continue

            locale = self.index.locale_for(mode_id)
            if locale is None:
                report.unknown_mode_values += 1
                continue
            targets[locale] = value

        return source, targets


def build_translations(
    variables: Iterable[VariableRecord],
    index: LocaleIndex,
) -> Tuple[TranslationSet, BuildReport]:
    """Convenience wrapper around TranslationModelBuilder.build."""
    return TranslationModelBuilder(index).build(variables)
