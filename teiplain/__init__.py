"""Top-level package for teiplain.

This package renders TEI-style editorial markup trees into plain text with
locale-aware quotation marks, and shortens rendered text into teasers. The
main orchestration entry point is `TeiTextPipeline`.
"""

from .pipeline import RenderedDocument, TeiTextPipeline
from .text import enquote, normalize, render, render_text, shorten, shorten_nodes

__all__ = [
    "RenderedDocument",
    "TeiTextPipeline",
    "__version__",
    "enquote",
    "normalize",
    "render",
    "render_text",
    "shorten",
    "shorten_nodes",
]

__version__ = "0.1.0"
