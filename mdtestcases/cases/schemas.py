"""Test case data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

OptionsT = TypeVar("OptionsT")

UNNAMED_TEST = "(Unnamed test)"


@dataclass
class Section(Generic[OptionsT]):
    """An open heading scope during a document scan."""

    depth: int  # Heading level, 1 = top-level
    name: str
    line: int  # 1-based source line of the heading
    options: OptionsT  # Snapshot taken when the section opened


@dataclass
class TestCase(Generic[OptionsT]):
    """A test case extracted from a Markdown document.

    The name is the innermost heading open when the case was emitted, and
    ``headings`` holds the enclosing headings, outermost first.
    """

    __test__ = False  # Not a pytest test class

    name: str
    headings: list[str] = field(default_factory=list)
    line_number: int = 0
    options: OptionsT | None = None
    args: list[str] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        """Heading path including the test name, e.g. "Tests > Fruits > Apple"."""
        return " > ".join([*self.headings, self.name])

    def to_dict(self) -> dict[str, Any]:
        """Convert test case to dictionary."""
        options: Any = self.options
        if hasattr(options, "to_dict"):
            options = options.to_dict()
        return {
            "name": self.name,
            "headings": list(self.headings),
            "line_number": self.line_number,
            "options": options,
            "args": list(self.args),
        }
