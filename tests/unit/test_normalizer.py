"""Unit tests for unicode and whitespace normalization."""

from __future__ import annotations

import unicodedata

import pytest

from teiplain.text.normalizer import TextNormalizer, normalize


def test_normalize_maps_none_to_empty_string() -> None:
    """Absent input should normalize to an empty string."""

    assert normalize(None) == ""
    assert normalize("") == ""


def test_normalize_collapses_whitespace_and_trims() -> None:
    """Whitespace runs of any kind should collapse to one space."""

    assert normalize("  Lieber \t Karl,\n\n ich  ") == "Lieber Karl, ich"


@pytest.mark.parametrize("space", ["\u00a0", "\u2002", "\u2003", "\u2009"])
def test_normalize_replaces_typographic_spaces(space: str) -> None:
    """No-break, en, em and thin spaces should become ordinary spaces."""

    result = normalize(f"a{space}b{space}{space}c")

    assert result == "a b c"
    assert space not in result


@pytest.mark.parametrize("control", ["\u001b", "\u007f", "\u0080"])
def test_normalize_replaces_control_characters(control: str) -> None:
    """Escape, delete and U+0080 should be treated as spaces."""

    assert normalize(f"Haus{control}tür") == "Haus tür"
    assert normalize(f"{control}Haus{control}") == "Haus"


def test_normalize_composes_combining_sequences() -> None:
    """Decomposed characters should come back in composed form."""

    decomposed = "Mu\u0308ller"

    result = normalize(decomposed)

    assert result == "M\u00fcller"
    assert unicodedata.is_normalized("NFC", result)


@pytest.mark.parametrize(
    "value",
    [
        "  a  b ",
        "\u001b\u007f x \u2009 y\n",
        "Mu\u0308ller\u2003und\u2002Sohn",
        "plain",
    ],
)
def test_normalize_is_idempotent(value: str) -> None:
    """Normalizing twice should equal normalizing once."""

    once = normalize(value)

    assert normalize(once) == once


def test_text_normalizer_delegates_to_function() -> None:
    """The stage object should apply the same normalization."""

    assert TextNormalizer().normalize(" a  b ") == "a b"
