"""Tests for the end-to-end conversion."""

import json

import pytest

from figma2xliff.extraction.variables_parser import VariablesParser
from figma2xliff.pipeline import convert_document, run_conversion


def test_convert_document_renders_every_target_locale(export_data):
    document = VariablesParser().parse_string(json.dumps(export_data))

    result = convert_document(document, "en")

    assert list(result.documents) == ["pt_br", "es"]
    assert list(result.translations) == ["buttons_saveChanges", "apple", "legal_termsConditions"]
    assert "{VAR_PLURAL, plural, =1 {Maçã} other {Maçãs} }" in result.documents["pt_br"]
    assert "<target>Manzana</target>" in result.documents["es"]
    assert result.warnings == []


def test_run_conversion_writes_one_file_per_locale(export_file, tmp_path):
    output_dir = tmp_path / "out"

    result = run_conversion(str(export_file), str(output_dir), "en")

    assert sorted(path.name for path in result.written_files) == [
        "translations_es.xlf",
        "translations_pt_br.xlf",
    ]
    assert not (output_dir / "translations_en.xlf").exists()
    for locale, content in result.documents.items():
        assert (output_dir / f"translations_{locale}.xlf").read_text(encoding="utf-8") == content


def test_run_conversion_fails_before_writing(tmp_path):
    bad = tmp_path / "Localization.json"
    bad.write_text("{broken", encoding="utf-8")
    output_dir = tmp_path / "out"

    with pytest.raises(ValueError):
        run_conversion(str(bad), str(output_dir), "en")

    assert not output_dir.exists()


def test_missing_source_locale_targets_every_locale(export_data):
    document = VariablesParser().parse_string(json.dumps(export_data))

    result = convert_document(document, "de")

    assert list(result.documents) == ["en", "pt_br", "es"]
    assert "<source></source>" in result.documents["en"]
    assert any("Source locale 'de' not found" in line for line in result.warnings)


def test_warnings_report_tolerated_anomalies():
    content = json.dumps({
        "modes": {"en": "m_en", "pt_br": "m_pt"},
        "variables": [
            {"name": "Cat/Apple (plural)", "valuesByMode": {"m_en": "Apples"}},
            {"name": "Cat/Apple", "valuesByMode": {"m_en": "Apple", "m_zz": "?"}},
            {"name": "Cat/Broken"},
        ],
    })
    document = VariablesParser().parse_string(content)

    result = convert_document(document, "en")

    assert result.skipped_records == 1
    assert result.report.dropped_plurals == 1
    assert result.report.unknown_mode_values == 1
    assert len(result.warnings) == 3
