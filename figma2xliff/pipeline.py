"""End-to-end conversion from a variables export to XLIFF documents."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from .extraction.variables_parser import VariablesParser
from .export.xliff_writer import XliffWriter
from .localization.builder import TranslationModelBuilder
from .localization.locale_index import LocaleIndex
from .models.translation import BuildReport, TranslationSet
from .models.variables import LocaleCode, VariablesDocument


@dataclass
class ConversionResult:
    """Outcome of converting one variables document."""

    index: LocaleIndex
    translations: TranslationSet
    report: BuildReport
    documents: Dict[LocaleCode, str] = field(default_factory=dict)
    skipped_records: int = 0
    written_files: List[Path] = field(default_factory=list)

    @property
    def warnings(self) -> List[str]:
        """All tolerated anomalies, as human-readable lines."""
        lines = []
        if self.skipped_records:
            lines.append(f"{self.skipped_records} malformed variable record(s) skipped")
        if not self.report.clean:
            lines.extend(self.report.warnings())
        if self.index.source_mode_id is None:
            lines.append(
                f"Source locale '{self.index.source_locale}' not found in modes; "
                "no <source> values will be filled"
            )
        return lines


def convert_document(document: VariablesDocument, source_locale: str) -> ConversionResult:
    """
    Convert a parsed document into one XLIFF document per target locale.

    Args:
        document: Parsed variables export
        source_locale: Locale code whose values become <source>

    Returns:
        ConversionResult with rendered documents keyed by locale
    """
    index = LocaleIndex.from_modes(document.modes, source_locale)
    translations, report = TranslationModelBuilder(index).build(document.variables)

    writer = XliffWriter()
    documents = {
        locale: writer.render(translations, locale) for locale in index.target_locales()
    }

    return ConversionResult(
        index=index,
        translations=translations,
        report=report,
        documents=documents,
        skipped_records=document.skipped_records,
    )


def run_conversion(input_path: str, output_dir: str, source_locale: str) -> ConversionResult:
    """
    Parse an export file and write translations_<locale>.xlf for every target locale.

    Read and parse errors propagate before any file is written.

    Args:
        input_path: Path to the variables .json export
        output_dir: Directory that receives the .xlf files
        source_locale: Locale code whose values become <source>

    Returns:
        ConversionResult including the written file paths
    """
    document = VariablesParser().parse(input_path)
    result = convert_document(document, source_locale)
    return write_documents(result, output_dir)


def write_documents(result: ConversionResult, output_dir: str) -> ConversionResult:
    """Write every rendered document of a conversion to output_dir."""
    writer = XliffWriter()
    for locale in result.documents:
        result.written_files.append(writer.write(result.translations, locale, output_dir))
    return result
