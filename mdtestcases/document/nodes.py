"""Block-level document nodes produced by the Markdown parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class InlineNode:
    """A top-level inline element inside a heading."""

    type: str  # e.g., "text", "strong", "image", "code_inline"
    value: str = ""


@dataclass
class HeadingNode:
    """An ATX or setext heading."""

    depth: int  # 1 = top-level
    children: list[InlineNode] = field(default_factory=list)
    line: int = 0

    @property
    def label(self) -> str | None:
        """Plain-text label, or None if the heading holds anything else."""
        if len(self.children) != 1:
            return None
        child = self.children[0]
        if child.type != "text":
            return None
        return child.value


@dataclass
class CodeNode:
    """A fenced or indented code block.

    The fence info string is split like a Markdown AST does it:
    ```` ```yaml options ```` has lang "yaml" and meta "options".
    """

    value: str
    lang: str | None = None
    meta: str | None = None
    line: int = 0


@dataclass
class OtherNode:
    """Any block the extractor does not care about."""

    type: str  # e.g., "paragraph", "bullet_list", "html_block"
    line: int = 0


Node = Union[HeadingNode, CodeNode, OtherNode]


@dataclass
class Document:
    """Top-level blocks of a Markdown document in source order."""

    children: list[Node] = field(default_factory=list)

    @property
    def headings(self) -> list[HeadingNode]:
        """Convenience accessor for the heading nodes."""
        return [n for n in self.children if isinstance(n, HeadingNode)]

    @property
    def code_blocks(self) -> list[CodeNode]:
        """Convenience accessor for the code block nodes."""
        return [n for n in self.children if isinstance(n, CodeNode)]
