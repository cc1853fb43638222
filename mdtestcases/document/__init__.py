"""Markdown document model and parser."""

from mdtestcases.document.nodes import (
    CodeNode,
    Document,
    HeadingNode,
    InlineNode,
    Node,
    OtherNode,
)
from mdtestcases.document.parser import MarkdownParser

__all__ = [
    "CodeNode",
    "Document",
    "HeadingNode",
    "InlineNode",
    "MarkdownParser",
    "Node",
    "OtherNode",
]
