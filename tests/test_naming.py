"""Tests for unit identifier derivation."""

import pytest

from figma2xliff.localization.naming import (
    NAME_ID_STAGES,
    base_name_id,
    camel_case_words,
    format_name_id,
    is_plural_name,
    lower_first,
    remove_whitespace,
    strip_plural_marker,
    strip_punctuation,
)


def test_first_segment_is_dropped_and_segments_camel_cased():
    assert format_name_id("Category/Section Title/Field Name") == "sectionTitle_fieldName"


def test_derivation_is_deterministic():
    name = "Common/Buttons/Save Changes"
    assert format_name_id(name) == format_name_id(name) == "buttons_saveChanges"


@pytest.mark.parametrize("name, expected", [
    ("Common/Legal/Terms & Conditions", "legal_termsConditions"),
    ("Group/  Hello World!  /Foo-bar 2", "helloWorld_foobar2"),
    ("Group/ABC Def", "abcDef"),
    ("Group/Already_snake case", "already_snakeCase"),
    ("Group/Maçã Verde", "maVerde"),
    ("NoSlash", ""),
])
def test_format_name_id_examples(name, expected):
    assert format_name_id(name) == expected


def test_plural_marker_stripped_matches_base():
    assert format_name_id(strip_plural_marker("Category/Item (plural)")) == format_name_id("Category/Item")
    assert base_name_id("Category/Item (plural)") == "item"


def test_plural_marker_left_in_place_changes_id():
    assert format_name_id("Category/Item (plural)") == "itemPlural"


def test_is_plural_name():
    assert is_plural_name("Cat/Apple (plural)")
    assert is_plural_name("Cat/(plural) Apple")
    assert not is_plural_name("Cat/Apple plural")


def test_strip_plural_marker_only_removes_trailing_marker():
    assert strip_plural_marker("Cat/Apple   (plural)  ") == "Cat/Apple"
    assert strip_plural_marker("Cat/(plural) Apple") == "Cat/(plural) Apple"


def test_individual_stages():
    assert strip_punctuation("it's a test!") == "its a test"
    assert camel_case_words("save  all changes") == "saveAllChanges"
    assert camel_case_words("step 2") == "step 2"
    assert remove_whitespace("step 2\t3") == "step23"
    assert lower_first("Hello") == "hello"
    assert lower_first("") == ""


def test_stage_order():
    assert [stage.__name__ for stage in NAME_ID_STAGES] == [
        "trim",
        "lower",
        "strip_punctuation",
        "camel_case_words",
        "remove_whitespace",
        "lower_first",
    ]
