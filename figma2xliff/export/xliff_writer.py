"""Writer for XLIFF 2.0 translation files."""

from pathlib import Path
from typing import Any, List

from ..config import config
from ..models.translation import TranslationEntry, TranslationSet
from ..models.variables import LocaleCode

XLIFF_NAMESPACE = "urn:oasis:names:tc:xliff:document:2.0"

DOCUMENT_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    f'<xliff version="2.0" xmlns="{XLIFF_NAMESPACE}">\n'
    '  <file id="translations" original="generated" datatype="html">\n'
)
DOCUMENT_FOOTER = "  </file>\n</xliff>"

UNIT_TEMPLATE = (
    '    <unit id="{id}" datatype="html">\n'
    "      <segment>\n"
    "        <source>{source}</source>\n"
    "        <target>{target}</target>\n"
    "      </segment>\n"
    "    </unit>\n"
)


def to_text(value: Any) -> str:
    """Coerce a variable value to text; None becomes the empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def escape_xml(value: Any) -> str:
    """Escape the five XML special characters."""
    text = to_text(value)
    # Ampersand first so the other entities are not double-escaped
    text = text.replace("&", "&amp;")
    text = text.replace("<", "&lt;")
    text = text.replace(">", "&gt;")
    text = text.replace('"', "&quot;")
    text = text.replace("'", "&apos;")
    return text


def icu_plural(singular: Any, plural: Any) -> str:
    """Format a singular/plural pair as an ICU plural message."""
    return f"{{VAR_PLURAL, plural, =1 {{{to_text(singular)}}} other {{{to_text(plural)}}} }}"


class XliffWriter:
    """Writer for XLIFF 2.0 files, one per target locale."""

    def render(self, translations: TranslationSet, target_locale: LocaleCode) -> str:
        """
        Render the full XLIFF document for one locale.

        Args:
            translations: Translation model to render
            target_locale: Locale whose values fill <target>

        Returns:
            XLIFF document as a string
        """
        units: List[str] = [
            self._render_unit(entry, target_locale) for entry in translations.values()
        ]
        return DOCUMENT_HEADER + "".join(units) + DOCUMENT_FOOTER

    def write(
        self,
        translations: TranslationSet,
        target_locale: LocaleCode,
        output_dir: str = ".",
    ) -> Path:
        """
        Write the XLIFF document for one locale to disk.

        Args:
            translations: Translation model to render
            target_locale: Locale whose values fill <target>
            output_dir: Directory for translations_<locale>.xlf

        Returns:
            Path of the written file
        """
        path = Path(output_dir) / config.output_filename(target_locale)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(translations, target_locale), encoding="utf-8")
        return path

    def _render_unit(self, entry: TranslationEntry, target_locale: LocaleCode) -> str:
        """Render a single <unit> element."""
        if entry.has_plural_for(target_locale):
            source_text = icu_plural(entry.source, entry.plural.source)
            target_text = icu_plural(entry.target(target_locale), entry.plural.targets[target_locale])
        else:
            source_text = entry.source
            target_text = entry.target(target_locale)

        return UNIT_TEMPLATE.format(
            id=escape_xml(entry.id),
            source=escape_xml(source_text),
            target=escape_xml(target_text),
        )
