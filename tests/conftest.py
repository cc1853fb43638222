"""Pytest fixtures for md-test-cases tests."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from mdtestcases.document import MarkdownParser
from mdtestcases.errors import OptionsError
from mdtestcases.options import YamlOptions

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@dataclass
class Options(YamlOptions):
    """Options used across the tests."""

    foo: int = 0
    bar: bool = False


@dataclass
class LimitedOptions(YamlOptions):
    """Options with a validation hook."""

    retries: int = 1
    label: str = ""

    def validate(self) -> None:
        if self.retries < 0:
            raise OptionsError("retries must not be negative")


@pytest.fixture
def parser() -> MarkdownParser:
    """Create a CommonMark parser."""
    return MarkdownParser()


@pytest.fixture
def root_options() -> Options:
    """Default root options."""
    return Options()


@pytest.fixture
def produce_md() -> str:
    """Markdown fixture with fruits and vegetables sections."""
    return (FIXTURES_DIR / "produce.md").read_text()
