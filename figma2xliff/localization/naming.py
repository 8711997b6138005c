"""Derivation of stable unit identifiers from hierarchical variable names.

A name such as ``Category/Section Title/Field Name`` becomes
``sectionTitle_fieldName``: the first path segment is dropped, every other
segment runs through ``NAME_ID_STAGES`` in order, and the results are joined
with ``_``.
"""

import re
from typing import Callable, Tuple

from ..models.variables import PLURAL_MARKER

NAME_SEPARATOR = "/"
ID_SEPARATOR = "_"

# ASCII word characters only; accented letters are dropped like punctuation
PUNCTUATION_PATTERN = re.compile(r"[^A-Za-z0-9_\s]")
CAMEL_CASE_PATTERN = re.compile(r"\s+([a-z])")
WHITESPACE_PATTERN = re.compile(r"\s+")
PLURAL_SUFFIX_PATTERN = re.compile(r"\s*" + re.escape(PLURAL_MARKER) + r"\s*$")


def trim(segment: str) -> str:
    return segment.strip()


def lower(segment: str) -> str:
    return segment.lower()


def strip_punctuation(segment: str) -> str:
    """Remove everything except word characters and whitespace."""
    return PUNCTUATION_PATTERN.sub("", segment)


def camel_case_words(segment: str) -> str:
    """Collapse whitespace before a lower-case letter into that letter upper-cased."""
    return CAMEL_CASE_PATTERN.sub(lambda match: match.group(1).upper(), segment)


def remove_whitespace(segment: str) -> str:
    return WHITESPACE_PATTERN.sub("", segment)


def lower_first(segment: str) -> str:
    return segment[:1].lower() + segment[1:]


NAME_ID_STAGES: Tuple[Callable[[str], str], ...] = (
    trim,
    lower,
    strip_punctuation,
    camel_case_words,
    remove_whitespace,
    lower_first,
)


def format_segment(segment: str) -> str:
    """Run a single name segment through every stage."""
    for stage in NAME_ID_STAGES:
        segment = stage(segment)
    return segment


def format_name_id(name: str) -> str:
    """
    Derive the unit identifier for a variable name.

    Args:
        name: Slash-delimited variable name, e.g. "Common/Buttons/Save Changes"

    Returns:
        Identifier such as "buttons_saveChanges"
    """
    parts = name.split(NAME_SEPARATOR)[1:]
    return ID_SEPARATOR.join(format_segment(part) for part in parts)


def is_plural_name(name: str) -> bool:
    """Check if a variable name carries the plural marker."""
    return PLURAL_MARKER in name


def strip_plural_marker(name: str) -> str:
    """Remove a trailing plural marker and surrounding whitespace."""
    return PLURAL_SUFFIX_PATTERN.sub("", name).strip()


def base_name_id(name: str) -> str:
    """Identifier of the base entry a (possibly plural) name belongs to."""
    if is_plural_name(name):
        return format_name_id(strip_plural_marker(name))
    return format_name_id(name)
