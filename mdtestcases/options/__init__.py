"""Options types that can be set from Markdown code blocks."""

from mdtestcases.options.schemas import (
    MergeSerialized,
    YamlOptions,
    load_options_mapping,
)

__all__ = [
    "MergeSerialized",
    "YamlOptions",
    "load_options_mapping",
]
