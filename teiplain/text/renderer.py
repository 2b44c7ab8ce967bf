"""Editorial markup to plain-text rendering.

Responsibilities:
- Walk a markup tree and emit its text as an ordered fragment sequence.
- Resolve editorial apparatus: drop deletions and notes, keep the surviving
  branch of substitutions, bracket supplied text, flag uncertain forenames.
- Apply locale-aware quotation marks to quotation elements.

Key functions:
- `render`: fragment generator for one node.
- `render_text`: flattened string for one node.
"""

from __future__ import annotations

from collections.abc import Callable
import re
from typing import Iterator

from ..models.markup import (
    Comment,
    Document,
    Element,
    MarkupNode,
    ProcessingInstruction,
    RenderContext,
    Text,
)
from .quotes import DOUBLE, SINGLE, enquote

_NEWLINE_RUN_RE = re.compile(r"\n+")
_IN_WORD = "inWord"

_ElementHandler = Callable[["MarkupRenderer", Element, RenderContext], Iterator[str]]


class MarkupRenderer:
    """Render markup nodes into plain-text fragments.

    Element kinds are dispatched by local name through `_ELEMENT_HANDLERS`;
    names without a handler render their children unchanged.
    """

    UNCERTAIN_MARKER = "(?)"

    def render(self, node: MarkupNode, context: RenderContext) -> Iterator[str]:
        """Yield the fragments of `node` in document order."""

        if isinstance(node, Text):
            yield _NEWLINE_RUN_RE.sub(" ", node.content)
        elif isinstance(node, Element):
            handler = self._ELEMENT_HANDLERS.get(node.name, MarkupRenderer._render_children)
            yield from handler(self, node, context)
        elif isinstance(node, Document):
            for child in node.children:
                yield from self.render(child, context)
        elif isinstance(node, (Comment, ProcessingInstruction)):
            return

    def render_text(self, node: MarkupNode, context: RenderContext) -> str:
        """Return the fragments of `node` joined without separator."""

        return "".join(self.render(node, context))

    def _render_children(self, element: Element, context: RenderContext) -> Iterator[str]:
        """Descend into all children of `element`."""

        for child in element.children:
            yield from self.render(child, context)

    def _render_nothing(self, element: Element, context: RenderContext) -> Iterator[str]:
        """Drop `element` and its whole subtree."""

        return iter(())

    def _render_forename(self, element: Element, context: RenderContext) -> Iterator[str]:
        """Render a forename, flagging uncertain readings."""

        yield from self._render_children(element, context)
        if element.get("cert") is not None:
            yield f" {self.UNCERTAIN_MARKER}"

    def _render_substitution(
        self, element: Element, context: RenderContext
    ) -> Iterator[str]:
        """Render only the element children of a substitution."""

        for child in element.children:
            if isinstance(child, Element):
                yield from self.render(child, context)

    def _render_line_break(self, element: Element, context: RenderContext) -> Iterator[str]:
        """Render a line break as newline unless it splits a word."""

        if element.get("type") != _IN_WORD:
            yield "\n"

    def _render_page_break(self, element: Element, context: RenderContext) -> Iterator[str]:
        """Render a page break as space unless it splits a word."""

        if element.get("type") != _IN_WORD:
            yield " "

    def _render_quotation(self, element: Element, context: RenderContext) -> Iterator[str]:
        """Render an inline quotation in double quotes."""

        fragments = list(self._render_children(element, context))
        yield from enquote(fragments, DOUBLE, context.locale)

    def _render_block_quotation(
        self, element: Element, context: RenderContext
    ) -> Iterator[str]:
        """Render a block quotation in the quote style chosen by `rend`."""

        style = DOUBLE if element.get("rend") == "double-quotes" else SINGLE
        fragments = list(self._render_children(element, context))
        yield from enquote(fragments, style, context.locale)

    def _render_supplied(self, element: Element, context: RenderContext) -> Iterator[str]:
        """Render editorially supplied text inside square brackets."""

        yield "["
        yield from self._render_children(element, context)
        yield "]"

    _ELEMENT_HANDLERS: dict[str, _ElementHandler] = {
        "forename": _render_forename,
        "del": _render_nothing,
        "subst": _render_substitution,
        "note": _render_nothing,
        "lb": _render_line_break,
        "pb": _render_page_break,
        "q": _render_quotation,
        "quote": _render_block_quotation,
        "supplied": _render_supplied,
    }


_RENDERER = MarkupRenderer()


def render(node: MarkupNode, context: RenderContext) -> Iterator[str]:
    """Yield the plain-text fragments of `node`."""

    return _RENDERER.render(node, context)


def render_text(node: MarkupNode, locale: str = "") -> str:
    """Render `node` for `locale` and join its fragments into one string."""

    return _RENDERER.render_text(node, RenderContext(locale=locale))
