"""TEI XML to markup tree conversion.

Responsibilities:
- Parse XML files or strings with `lxml` without network access.
- Convert parsed nodes into immutable `MarkupNode` trees with local names.
"""

from __future__ import annotations

from pathlib import Path

from lxml import etree

from ..models.markup import (
    Comment,
    Document,
    Element,
    MarkupNode,
    ProcessingInstruction,
    Text,
)


def _build_parser(encoding: str | None = None) -> etree.XMLParser:
    """Create a parser that keeps comments, instructions and whitespace."""

    return etree.XMLParser(
        encoding=encoding,
        remove_blank_text=False,
        remove_comments=False,
        remove_pis=False,
        resolve_entities=False,
        no_network=True,
    )


class TeiXmlReader:
    """Read TEI XML sources into `Document` trees."""

    def __init__(self) -> None:
        """Initialize parsers for byte input and already-decoded string input."""

        self._parser = _build_parser()
        self._string_parser = _build_parser(encoding="utf-8")

    def read_path(self, path: Path) -> Document:
        """Parse an XML file into a markup document.

        Raises:
            FileNotFoundError: If `path` does not exist.
            ValueError: If the file is not well-formed XML.
        """

        if not path.exists():
            raise FileNotFoundError(f"XML source not found: `{path}`.")
        return self.read_bytes(path.read_bytes())

    def read_string(self, xml: str) -> Document:
        """Parse XML text into a markup document."""

        return self._parse(xml.encode("utf-8"), self._string_parser)

    def read_bytes(self, payload: bytes) -> Document:
        """Parse raw XML bytes, honoring any encoding their declaration names."""

        return self._parse(payload, self._parser)

    def _parse(self, payload: bytes, parser: etree.XMLParser) -> Document:
        """Parse `payload` with `parser` and collect the root with its siblings."""

        try:
            root = etree.fromstring(payload, parser=parser)
        except etree.XMLSyntaxError as exc:
            raise ValueError(f"Malformed XML: {exc}") from exc

        preceding = reversed(list(root.itersiblings(preceding=True)))
        following = root.itersiblings()
        children = [
            *(self._convert(node) for node in preceding),
            self._convert(root),
            *(self._convert(node) for node in following),
        ]
        return Document(children=tuple(node for node in children if node is not None))

    def _convert(self, node: etree._Element) -> MarkupNode | None:
        """Convert one lxml node; entity references and unknown nodes yield `None`."""

        if isinstance(node, etree._Comment):
            return Comment(content=node.text or "")
        if isinstance(node, etree._ProcessingInstruction):
            return ProcessingInstruction(target=node.target, data=node.text or "")
        if isinstance(node, etree._Entity) or not isinstance(node.tag, str):
            return None

        children: list[MarkupNode] = []
        if node.text:
            children.append(Text(content=node.text))
        for child in node:
            converted = self._convert(child)
            if converted is not None:
                children.append(converted)
            if child.tail:
                children.append(Text(content=child.tail))

        attributes = {
            etree.QName(key).localname: value for key, value in node.attrib.items()
        }
        return Element(
            name=etree.QName(node).localname,
            attributes=attributes,
            children=tuple(children),
        )
