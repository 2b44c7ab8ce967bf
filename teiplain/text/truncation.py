"""Word-boundary-safe teaser truncation.

Responsibilities:
- Shorten normalized text to a character budget at the last word delimiter.
- Render node lists into one teaser string.
"""

from __future__ import annotations

import re
from typing import Iterable

from ..models.markup import MarkupNode
from .normalizer import normalize
from .renderer import render_text

ELLIPSIS = " …"
_DELIMITER_RE = re.compile(r"[\s.,!?+\-;]")


def shorten(text: str | None, max_length: int) -> str:
    """Return `text` cut back to at most `max_length` characters plus ellipsis.

    Text that fits is returned normalized but otherwise unchanged. Longer text
    is cut before the last delimiter (whitespace or `. , ! ? + - ;`) found in
    the first `max_length + 1` characters, so a delimiter right after the
    limit still counts as a boundary. Without any delimiter only the ellipsis
    is returned.

    Raises:
        ValueError: If `max_length` is negative.
    """

    if max_length < 0:
        raise ValueError("`max_length` must be a non-negative integer.")

    normalized = normalize(text)
    window = normalized[: max_length + 1]
    if len(window) <= max_length:
        return window

    boundaries = [match.start() for match in _DELIMITER_RE.finditer(window)]
    cut = boundaries[-1] if boundaries else 0
    return window[:cut] + ELLIPSIS


def shorten_nodes(nodes: Iterable[MarkupNode], max_length: int, locale: str = "") -> str:
    """Render `nodes`, join them with single spaces, and shorten the result."""

    text = " ".join(render_text(node, locale) for node in nodes)
    return shorten(text, max_length)
