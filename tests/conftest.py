"""Shared fixtures for the figma2xliff test suite."""

import json

import pytest

from figma2xliff.localization.locale_index import LocaleIndex
from figma2xliff.models.variables import VariableRecord


@pytest.fixture
def modes():
    return {"en": "m_en", "pt_br": "m_pt"}


@pytest.fixture
def index(modes):
    return LocaleIndex.from_modes(modes, "en")


@pytest.fixture
def apple_records():
    """Base record followed by its plural variant."""
    return [
        VariableRecord(name="Cat/Apple", values_by_mode={"m_en": "Apple", "m_pt": "Maçã"}),
        VariableRecord(name="Cat/Apple (plural)", values_by_mode={"m_en": "Apples", "m_pt": "Maçãs"}),
    ]


@pytest.fixture
def export_data():
    return {
        "modes": {"en": "1:0", "pt_br": "1:1", "es": "1:2"},
        "variables": [
            {
                "name": "Common/Buttons/Save Changes",
                "valuesByMode": {"1:0": "Save changes", "1:1": "Salvar alterações", "1:2": "Guardar cambios"},
            },
            {
                "name": "Shop/Apple",
                "valuesByMode": {"1:0": "Apple", "1:1": "Maçã", "1:2": "Manzana"},
            },
            {
                "name": "Shop/Apple (plural)",
                "valuesByMode": {"1:0": "Apples", "1:1": "Maçãs"},
            },
            {
                "name": "Common/Legal/Terms & Conditions",
                "valuesByMode": {"1:0": "Read the <b>terms</b> & \"conditions\"", "1:1": "Leia os 'termos'"},
            },
        ],
    }


@pytest.fixture
def export_file(tmp_path, export_data):
    path = tmp_path / "Localization.json"
    path.write_text(json.dumps(export_data, ensure_ascii=False), encoding="utf-8")
    return path
