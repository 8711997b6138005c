"""Tests for the mode ID / locale code index."""

import pytest

from figma2xliff.localization.locale_index import LocaleIndex


def test_both_directions_resolve(index):
    assert index.locale_for("m_pt") == "pt_br"
    assert index.mode_for("pt_br") == "m_pt"
    assert index.source_mode_id == "m_en"
    assert index.is_source("m_en")
    assert not index.is_source("m_pt")


def test_unknown_lookups_return_none(index):
    assert index.locale_for("m_missing") is None
    assert index.mode_for("de") is None


def test_target_locales_exclude_source_in_document_order():
    index = LocaleIndex.from_modes({"pt_br": "1", "en": "2", "es": "3"}, "en")
    assert index.target_locales() == ["pt_br", "es"]


def test_duplicate_mode_ids_keep_last_locale():
    index = LocaleIndex.from_modes({"en": "m1", "en_us": "m1"}, "en")
    assert index.locale_for("m1") == "en_us"
    assert index.source_mode_id == "m1"


def test_missing_source_locale_makes_every_locale_a_target():
    index = LocaleIndex.from_modes({"pt_br": "m_pt", "es": "m_es"}, "en")
    assert index.source_mode_id is None
    assert not index.is_source("m_pt")
    assert index.target_locales() == ["pt_br", "es"]


def test_index_is_read_only(index):
    with pytest.raises(TypeError):
        index.mode_to_locale["m_new"] = "de"
    with pytest.raises(AttributeError):
        index.source_mode_id = "m_pt"


def test_index_does_not_alias_input_mapping(modes):
    index = LocaleIndex.from_modes(modes, "en")
    modes["de"] = "m_de"
    assert index.mode_for("de") is None
