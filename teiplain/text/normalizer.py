"""Unicode and whitespace normalization.

Responsibilities:
- Replace stray control characters and typographic spaces with plain spaces.
- Collapse whitespace runs and apply composed (NFC) unicode normalization.
"""

from __future__ import annotations

import re
import unicodedata

_CONTROL_CHARACTERS_RE = re.compile("[\u001b\u007f\u0080]")
_SPECIAL_SPACES_RE = re.compile("[\u00a0\u2002\u2003\u2009]")
_WHITESPACE_RUN_RE = re.compile(r"\s+")


def normalize(value: str | None) -> str:
    """Return `value` with collapsed whitespace and canonical composition.

    Escape, delete and U+0080 become spaces, as do no-break, en, em and thin
    spaces. Runs of whitespace collapse to one space, the ends are trimmed, and
    the result is NFC normalized. `None` yields an empty string.
    """

    if value is None:
        return ""
    text = _CONTROL_CHARACTERS_RE.sub(" ", value)
    text = _SPECIAL_SPACES_RE.sub(" ", text)
    text = _WHITESPACE_RUN_RE.sub(" ", text).strip()
    return unicodedata.normalize("NFC", text)


class TextNormalizer:
    """Normalize rendered text into canonical plain-text representation."""

    def normalize(self, text: str | None) -> str:
        """Normalize text for deterministic downstream output."""

        return normalize(text)
