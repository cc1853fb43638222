"""Exceptions raised while extracting test cases."""

from __future__ import annotations


class MdTestCasesError(Exception):
    """Base exception for md-test-cases operations."""


class MalformedHeadingError(MdTestCasesError):
    """Heading label is not a single plain-text child."""

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(f"Markdown headings must contain plain text (line {line}).")


class OptionsError(MdTestCasesError, ValueError):
    """Options source could not be merged onto the current options."""


class OptionsParseError(MdTestCasesError):
    """An options code block was rejected by its options type."""

    def __init__(self, line: int, message: str) -> None:
        self.line = line
        self.message = message
        super().__init__(
            f"Failed to parse options from code block at line {line}: {message}"
        )
