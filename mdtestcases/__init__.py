"""Extract test cases from Markdown documents."""

from mdtestcases.cases import (
    OPTIONS_MARKER,
    UNNAMED_TEST,
    TestCase,
    TestCaseExtractor,
    get_test_cases,
)
from mdtestcases.errors import (
    MalformedHeadingError,
    MdTestCasesError,
    OptionsError,
    OptionsParseError,
)
from mdtestcases.options import MergeSerialized, YamlOptions

__version__ = "0.1.0"

__all__ = [
    "MalformedHeadingError",
    "MdTestCasesError",
    "MergeSerialized",
    "OPTIONS_MARKER",
    "OptionsError",
    "OptionsParseError",
    "TestCase",
    "TestCaseExtractor",
    "UNNAMED_TEST",
    "YamlOptions",
    "get_test_cases",
]
