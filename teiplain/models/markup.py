"""Editorial markup tree datatypes.

Responsibilities:
- Represent the closed set of markup node kinds consumed by the renderer.
- Keep trees immutable so a render pass only ever reads them.

Key types:
- `Document`, `Element`, `Text`, `ProcessingInstruction`, `Comment`
  (together `MarkupNode`) and `RenderContext`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Union


@dataclass(frozen=True, slots=True)
class Text:
    """Character data between or inside elements."""

    content: str


@dataclass(frozen=True, slots=True)
class Comment:
    """Markup comment; never rendered."""

    content: str = ""


@dataclass(frozen=True, slots=True)
class ProcessingInstruction:
    """Processing instruction; never rendered."""

    target: str = ""
    data: str = ""


@dataclass(frozen=True, slots=True)
class Element:
    """A named element with attributes and ordered children.

    Attributes:
        name: Local element name without namespace, e.g. `lb` or `subst`.
        attributes: Attribute values keyed by local attribute name.
        children: Child nodes in document order.
    """

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple[MarkupNode, ...] = ()

    def get(self, attribute: str) -> str | None:
        """Return one attribute value, or `None` when it is absent."""

        return self.attributes.get(attribute)


@dataclass(frozen=True, slots=True)
class Document:
    """Root of a markup tree, including top-level comments and instructions."""

    children: tuple[MarkupNode, ...] = ()


MarkupNode = Union[Document, Element, Text, ProcessingInstruction, Comment]


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Per-render settings threaded through every recursive call.

    Attributes:
        locale: Two-letter language code selecting quotation marks.
    """

    locale: str = ""


def iter_elements(node: MarkupNode, name: str) -> Iterator[Element]:
    """Yield elements with local name `name` below `node` in document order.

    Matching elements are not searched further, so nested matches are only
    reachable through their outermost ancestor.
    """

    if isinstance(node, Element) and node.name == name:
        yield node
        return
    if isinstance(node, (Document, Element)):
        for child in node.children:
            yield from iter_elements(child, name)
