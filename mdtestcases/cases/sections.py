"""Section stack tracking open headings and their options."""

from __future__ import annotations

import copy
import logging
from typing import Generic

from mdtestcases.cases.schemas import OptionsT, Section
from mdtestcases.document.nodes import HeadingNode
from mdtestcases.errors import MalformedHeadingError

logger = logging.getLogger(__name__)


class SectionStack(Generic[OptionsT]):
    """Open sections of a document scan, outermost first.

    Section depths are strictly increasing from bottom to top. A heading
    closes every open section at its depth or deeper before opening its own,
    and the new section starts from a copy of the options in effect. Closing
    a section discards its options, so the enclosing options apply again.
    """

    def __init__(self, root_options: OptionsT) -> None:
        """Initialize the stack.

        Args:
            root_options: Options in effect before any heading.
        """
        self.root_options = root_options
        self.sections: list[Section[OptionsT]] = []

    @property
    def innermost(self) -> Section[OptionsT] | None:
        """Innermost open section, if any."""
        return self.sections[-1] if self.sections else None

    @property
    def line(self) -> int:
        """Line of the innermost open heading, or 0."""
        section = self.innermost
        return section.line if section else 0

    def push_heading(self, heading: HeadingNode) -> None:
        """Open a section for a heading.

        Args:
            heading: Heading node with a plain-text label.

        Raises:
            MalformedHeadingError: If the heading is not plain text.
        """
        name = heading.label
        if name is None:
            raise MalformedHeadingError(heading.line)

        depth = heading.depth
        self.sections = [s for s in self.sections if s.depth < depth]
        section = Section(
            depth=depth,
            name=name,
            line=heading.line,
            options=copy.deepcopy(self.get_options()),
        )
        self.sections.append(section)
        logger.debug("Opened section %r (depth %d, line %d)", name, depth, heading.line)

    def set_options(self, options: OptionsT) -> None:
        """Replace the options of the innermost section, or the root options."""
        section = self.innermost
        if section is not None:
            section.options = options
        else:
            self.root_options = options

    def get_options(self) -> OptionsT:
        """Options currently in effect."""
        section = self.innermost
        return section.options if section is not None else self.root_options

    def get_headings(self) -> list[str]:
        """Names of the open sections, outermost first."""
        return [s.name for s in self.sections]
