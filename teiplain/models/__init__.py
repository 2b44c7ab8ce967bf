"""Shared typed data models for teiplain.

This package contains the immutable markup tree consumed by the renderer and
the context value threaded through a render pass.
"""

from .markup import (
    Comment,
    Document,
    Element,
    MarkupNode,
    ProcessingInstruction,
    RenderContext,
    Text,
    iter_elements,
)

__all__ = [
    "Comment",
    "Document",
    "Element",
    "MarkupNode",
    "ProcessingInstruction",
    "RenderContext",
    "Text",
    "iter_elements",
]
