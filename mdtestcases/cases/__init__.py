"""Section-scoped test case extraction."""

from mdtestcases.cases.schemas import UNNAMED_TEST, Section, TestCase
from mdtestcases.cases.sections import SectionStack
from mdtestcases.cases.extractor import OPTIONS_MARKER, TestCaseExtractor, get_test_cases

__all__ = [
    "OPTIONS_MARKER",
    "Section",
    "SectionStack",
    "TestCase",
    "TestCaseExtractor",
    "UNNAMED_TEST",
    "get_test_cases",
]
