"""Locale-aware quotation marks.

Responsibilities:
- Map two-letter locale codes to typographic open/close quotation marks.
- Wrap rendered fragment sequences in double or single quotes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

DOUBLE = "double"
SINGLE = "single"


@dataclass(frozen=True, slots=True)
class QuoteMarks:
    """Open/close marks for both quote styles of one locale."""

    double_open: str
    double_close: str
    single_open: str
    single_close: str

    def pair(self, style: str) -> tuple[str, str]:
        """Return the `(open, close)` marks for `style`."""

        if style == DOUBLE:
            return self.double_open, self.double_close
        if style == SINGLE:
            return self.single_open, self.single_close
        raise ValueError(f"Unsupported quote style `{style}`; use `double` or `single`.")


_DEFAULT_MARKS = QuoteMarks('"', '"', "'", "'")
_LOCALE_MARKS = {
    "de": QuoteMarks("\u201e", "\u201c", "\u201a", "\u2018"),
    "en": QuoteMarks("\u201c", "\u201d", "\u2018", "\u2019"),
}


def quote_marks(locale: str | None) -> QuoteMarks:
    """Return quotation marks for `locale`, falling back to straight quotes."""

    key = (locale or "").strip().lower()
    return _LOCALE_MARKS.get(key, _DEFAULT_MARKS)


def enquote(fragments: Sequence[str], style: str, locale: str | None) -> list[str]:
    """Wrap `fragments` in the locale's quotation marks.

    The result depends on the fragment count: no fragments stay empty, a
    single fragment gets the marks fused onto it, and longer sequences get the
    marks as separate leading and trailing fragments.
    """

    open_mark, close_mark = quote_marks(locale).pair(style)
    if not fragments:
        return []
    if len(fragments) == 1:
        return [f"{open_mark}{fragments[0]}{close_mark}"]
    return [open_mark, *fragments, close_mark]
