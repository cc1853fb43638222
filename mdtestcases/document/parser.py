"""Markdown parser producing top-level block nodes."""

from __future__ import annotations

from typing import Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from mdtestcases.document.nodes import CodeNode, Document, HeadingNode, InlineNode, Node, OtherNode


class MarkdownParser:
    """Parser for Markdown test documents.

    Only blocks at the top level of the document are returned; blocks
    nested in lists or blockquotes are part of their container.
    """

    def __init__(self, preset: str = "commonmark") -> None:
        """Initialize the parser.

        Args:
            preset: markdown-it preset name.
        """
        self.md = MarkdownIt(preset)

    def parse(self, content: str) -> Document:
        """Parse Markdown content.

        Args:
            content: Markdown source text.

        Returns:
            Document with the top-level blocks in source order.
        """
        tokens = self.md.parse(content)
        children: list[Node] = []

        for index, token in enumerate(tokens):
            if token.level != 0 or token.nesting == -1:
                continue

            if token.type == "heading_open":
                inline = tokens[index + 1] if index + 1 < len(tokens) else None
                children.append(self._parse_heading(token, inline))
            elif token.type == "fence":
                children.append(self._parse_fence(token))
            elif token.type == "code_block":
                children.append(
                    CodeNode(value=token.content.rstrip("\n"), line=_line_of(token))
                )
            else:
                node_type = token.type
                if node_type.endswith("_open"):
                    node_type = node_type[: -len("_open")]
                children.append(OtherNode(type=node_type, line=_line_of(token)))

        return Document(children=children)

    def _parse_heading(self, token: Token, inline: Token | None) -> HeadingNode:
        """Build a heading node from heading_open and its inline token."""
        children: list[InlineNode] = []
        if inline is not None and inline.type == "inline":
            children = _inline_children(inline.children or [])
        return HeadingNode(depth=int(token.tag[1:]), children=children, line=_line_of(token))

    def _parse_fence(self, token: Token) -> CodeNode:
        """Build a code node from a fence token."""
        parts = token.info.split(None, 1)
        lang = parts[0] if parts else ""
        meta = parts[1].strip() if len(parts) > 1 else ""

        value = token.content
        if value.endswith("\n"):
            value = value[:-1]

        return CodeNode(
            value=value,
            lang=lang or None,
            meta=meta or None,
            line=_line_of(token),
        )


def _line_of(token: Token) -> int:
    """1-based start line of a block token."""
    return token.map[0] + 1 if token.map else 0


def _inline_children(tokens: Sequence[Token]) -> list[InlineNode]:
    """Collapse inline tokens into top-level inline nodes.

    Paired tokens (strong_open ... strong_close) become one node whose
    value is the text they enclose. Soft line breaks join the surrounding
    text, so a multi-line setext heading is a single text node.
    """
    children: list[InlineNode] = []
    depth = 0
    for token in tokens:
        if token.nesting == 1:
            if depth == 0:
                children.append(InlineNode(type=token.type[: -len("_open")]))
            depth += 1
        elif token.nesting == -1:
            depth -= 1
        elif depth == 0:
            node_type, value = token.type, token.content
            if node_type == "softbreak":
                node_type, value = "text", "\n"
            if node_type == "text" and children and children[-1].type == "text":
                children[-1].value += value
            else:
                children.append(InlineNode(type=node_type, value=value))
        else:
            children[-1].value += token.content
    return children
