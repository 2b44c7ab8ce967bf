"""Unit tests for name, path and list formatting helpers."""

from __future__ import annotations

import pytest

from teiplain.text.formatting import (
    default_conjunction,
    format_name,
    join_list,
    join_path,
    sanitize,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Goethe, Johann Wolfgang", "Johann Wolfgang Goethe"),
        ("  Marx ,Karl ", "Karl Marx"),
        ("Karl Marx", "Karl Marx"),
        ("Marx, Karl, Dr.", "Marx, Karl, Dr."),
        ("Anonymus,", "Anonymus"),
        (None, ""),
    ],
)
def test_format_name_reorders_single_comma_names(name: str | None, expected: str) -> None:
    """Only names with exactly one comma should be reordered."""

    assert format_name(name) == expected


def test_join_path_uses_single_slashes_and_underscores() -> None:
    """Parts should be joined by one slash with inner whitespace replaced."""

    assert join_path(["Briefe ", "/1850/", "", "an  Engels"]) == "Briefe/1850/an_Engels"
    assert join_path([]) == ""


def test_join_list_uses_localized_conjunction() -> None:
    """The final pair should be joined by the locale's conjunction."""

    assert join_list(["Marx", "Engels", "Heine"], "de") == "Marx, Engels und Heine"
    assert join_list(["Marx", "Engels"], "en") == "Marx and Engels"
    assert join_list(["Marx"], "en") == "Marx"
    assert join_list([], "en") == ""


def test_join_list_accepts_custom_conjunction_lookup() -> None:
    """Callers may supply their own conjunction lookup."""

    assert join_list(["a", "b"], "fr", lambda locale: "et") == "a et b"


def test_default_conjunction_falls_back_to_ampersand() -> None:
    """Unknown locales should use an ampersand."""

    assert default_conjunction("cs") == "&"
    assert default_conjunction(None) == "&"


def test_sanitize_is_a_passthrough() -> None:
    """Sanitizing should leave markup-like text untouched."""

    assert sanitize("<b>Karl & Co</b>") == "<b>Karl & Co</b>"
