"""Unit tests for teaser truncation."""

from __future__ import annotations

import pytest

from teiplain.models.markup import Element, Text
from teiplain.text.truncation import ELLIPSIS, shorten, shorten_nodes


def test_shorten_cuts_at_last_word_boundary() -> None:
    """Long text should end at the last delimiter within the budget."""

    assert shorten("The quick brown fox", 9) == "The quick …"


def test_shorten_returns_fitting_text_unchanged() -> None:
    """Text within the budget should come back without an ellipsis."""

    assert shorten("short", 100) == "short"
    assert shorten("exact", 5) == "exact"


def test_shorten_normalizes_whitespace_before_measuring() -> None:
    """Whitespace runs should not count against the budget."""

    assert shorten("  short \n\n text ", 10) == "short text"


@pytest.mark.parametrize(
    ("text", "max_length", "expected"),
    [
        ("Hallo, Welt und mehr", 7, "Hallo, …"),
        ("eins;zwei;drei", 10, "eins;zwei …"),
        ("Nord-Süd-Gefälle", 9, "Nord-Süd …"),
        ("Ende. Anfang", 6, "Ende. …"),
    ],
)
def test_shorten_recognizes_punctuation_delimiters(
    text: str, max_length: int, expected: str
) -> None:
    """Punctuation delimiters should count as word boundaries."""

    assert shorten(text, max_length) == expected


def test_shorten_without_delimiter_returns_only_ellipsis() -> None:
    """A budget that falls inside the first word leaves only the ellipsis."""

    assert shorten("Donaudampfschifffahrt", 5) == ELLIPSIS
    assert shorten("Donaudampfschifffahrt", 5) == " …"


def test_shorten_handles_absent_text() -> None:
    """Absent text should behave like an empty string."""

    assert shorten(None, 10) == ""
    assert shorten("", 0) == ""


def test_shorten_rejects_negative_length() -> None:
    """Negative budgets are a caller error."""

    with pytest.raises(ValueError, match="`max_length` must be a non-negative integer."):
        shorten("text", -1)


def test_shorten_nodes_joins_rendered_nodes_with_spaces() -> None:
    """Each node should be rendered and flattened before joining with spaces."""

    nodes = [
        Element("p", {}, (Text("Er sagte "), Element("q", {}, (Text("komm"),)))),
        Element("p", {}, (Text("und ging"), Element("lb"), Text("nach Hause."))),
    ]

    assert shorten_nodes(nodes, 100, "de") == "Er sagte „komm“ und ging nach Hause."
    assert shorten_nodes(nodes, 12, "de") == "Er sagte …"


def test_shorten_nodes_with_no_nodes_is_empty() -> None:
    """An empty node list should produce an empty teaser."""

    assert shorten_nodes([], 10, "en") == ""
