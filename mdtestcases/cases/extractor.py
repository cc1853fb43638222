"""Extract test cases from Markdown documents."""

from __future__ import annotations

import copy
import logging
from typing import Generic

from mdtestcases.cases.schemas import UNNAMED_TEST, OptionsT, TestCase
from mdtestcases.cases.sections import SectionStack
from mdtestcases.document.nodes import CodeNode, Document, HeadingNode
from mdtestcases.document.parser import MarkdownParser
from mdtestcases.errors import OptionsParseError

logger = logging.getLogger(__name__)

OPTIONS_MARKER = "options"


class TestCaseExtractor:
    """Groups the code blocks of a document into test cases.

    Headings open sections. A code block whose meta equals the options
    marker (```` ```yaml options ````) is merged onto the options in effect
    for the current section and everything nested in it. Every other code
    block is an argument of the test case named after the innermost heading.
    A test case is emitted when the next heading or the end of the document
    is reached; headings without argument blocks emit nothing.
    """

    __test__ = False  # Not a pytest test class

    def __init__(
        self,
        options_marker: str = OPTIONS_MARKER,
        parser: MarkdownParser | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            options_marker: Code block meta that marks an options block.
            parser: Markdown parser to use (default: CommonMark).
        """
        self.options_marker = options_marker
        self.parser = parser or MarkdownParser()

    def get_test_cases(self, content: str, root_options: OptionsT) -> list[TestCase[OptionsT]]:
        """Parse Markdown content and extract its test cases.

        Args:
            content: Markdown source text.
            root_options: Options in effect before any options block.

        Returns:
            Test cases in document order.

        Raises:
            MalformedHeadingError: If a heading is not plain text.
            OptionsParseError: If an options block cannot be merged.
        """
        return self.extract(self.parser.parse(content), root_options)

    def extract(self, document: Document, root_options: OptionsT) -> list[TestCase[OptionsT]]:
        """Extract test cases from a parsed document.

        Args:
            document: Parsed document.
            root_options: Options in effect before any options block.

        Returns:
            Test cases in document order.

        Raises:
            MalformedHeadingError: If a heading is not plain text.
            OptionsParseError: If an options block cannot be merged.
        """
        run = _Extraction(SectionStack(root_options))

        for node in document.children:
            if isinstance(node, HeadingNode):
                run.flush()
                run.stack.push_heading(node)
            elif isinstance(node, CodeNode):
                if node.meta == self.options_marker:
                    run.apply_options(node)
                else:
                    run.args.append(node.value)

        run.flush()
        logger.info("Extracted %d test case(s)", len(run.test_cases))
        return run.test_cases


class _Extraction(Generic[OptionsT]):
    """State of one extraction pass."""

    def __init__(self, stack: SectionStack[OptionsT]) -> None:
        self.stack = stack
        self.args: list[str] = []
        self.test_cases: list[TestCase[OptionsT]] = []

    def apply_options(self, block: CodeNode) -> None:
        """Merge an options block onto the options in effect."""
        try:
            options = self.stack.get_options().merge_serialized(block.value)
        except ValueError as e:
            raise OptionsParseError(block.line, str(e)) from e
        self.stack.set_options(options)
        logger.debug("Applied options block at line %d", block.line)

    def flush(self) -> None:
        """Emit a test case from the pending args, if there are any."""
        if not self.args:
            return

        headings = self.stack.get_headings()
        name = headings.pop() if headings else UNNAMED_TEST
        test_case = TestCase(
            name=name,
            headings=headings,
            line_number=self.stack.line,
            options=copy.deepcopy(self.stack.get_options()),
            args=self.args,
        )
        self.test_cases.append(test_case)
        self.args = []
        logger.debug("Emitted test case %r with %d arg(s)", test_case.full_name, len(test_case.args))


def get_test_cases(content: str, root_options: OptionsT) -> list[TestCase[OptionsT]]:
    """Extract test cases from Markdown content.

    Args:
        content: Markdown source text.
        root_options: Options in effect before any options block; must
            implement ``MergeSerialized``.

    Returns:
        Test cases in document order.

    Raises:
        MalformedHeadingError: If a heading is not plain text.
        OptionsParseError: If an options block cannot be merged.
    """
    return TestCaseExtractor().get_test_cases(content, root_options)
