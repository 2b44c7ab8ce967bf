"""Small stateless formatting helpers used around rendered text.

Responsibilities:
- Reorder `Surname, Forename` names for display.
- Build slash-joined identifiers and localized enumerations.
"""

from __future__ import annotations

from collections.abc import Callable
import re
from typing import Iterable

_WHITESPACE_RUN_RE = re.compile(r"\s+")
_CONJUNCTIONS = {"de": "und", "en": "and"}


def format_name(name: str | None) -> str:
    """Return `Surname, Forename` as `Forename Surname`.

    Names without exactly one comma are returned trimmed.
    """

    text = (name or "").strip()
    if text.count(",") != 1:
        return text
    surname, forename = (part.strip() for part in text.split(","))
    return " ".join(part for part in (forename, surname) if part)


def join_path(parts: Iterable[str]) -> str:
    """Join non-empty parts with `/`, replacing inner whitespace by `_`."""

    segments = []
    for part in parts:
        segment = part.strip().strip("/").strip()
        if segment:
            segments.append(_WHITESPACE_RUN_RE.sub("_", segment))
    return "/".join(segments)


def default_conjunction(locale: str | None) -> str:
    """Return the list conjunction word for `locale`."""

    return _CONJUNCTIONS.get((locale or "").strip().lower(), "&")


def join_list(
    items: Iterable[str],
    locale: str | None,
    conjunction: Callable[[str | None], str] = default_conjunction,
) -> str:
    """Join `items` as `a, b and c` using the conjunction for `locale`."""

    values = [item for item in items if item]
    if len(values) <= 1:
        return "".join(values)
    head = ", ".join(values[:-1])
    return f"{head} {conjunction(locale)} {values[-1]}"


def sanitize(value: str) -> str:
    """Return `value` unchanged.

    Markup escaping happens upstream; this hook is kept as a pass-through.
    """

    return value
