"""Text rendering components.

This package turns editorial markup trees into plain text: normalization,
locale-aware quoting, the tree renderer, and teaser truncation.
"""

from .formatting import default_conjunction, format_name, join_list, join_path, sanitize
from .normalizer import TextNormalizer, normalize
from .quotes import DOUBLE, SINGLE, QuoteMarks, enquote, quote_marks
from .renderer import MarkupRenderer, render, render_text
from .truncation import ELLIPSIS, shorten, shorten_nodes

__all__ = [
    "DOUBLE",
    "ELLIPSIS",
    "MarkupRenderer",
    "QuoteMarks",
    "SINGLE",
    "TextNormalizer",
    "default_conjunction",
    "enquote",
    "format_name",
    "join_list",
    "join_path",
    "normalize",
    "quote_marks",
    "render",
    "render_text",
    "sanitize",
    "shorten",
    "shorten_nodes",
]
