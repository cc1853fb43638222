"""Options merge protocol and YAML-backed options base class."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Protocol, TypeVar, runtime_checkable

import yaml

from mdtestcases.errors import OptionsError

OptionsT = TypeVar("OptionsT", bound="MergeSerialized")
YamlOptionsT = TypeVar("YamlOptionsT", bound="YamlOptions")


@runtime_checkable
class MergeSerialized(Protocol):
    """Options type that can merge a serialized partial value onto itself.

    Implementations parse ``source`` as a sparse set of fields: fields present
    in the source take their new value, every other field is copied from
    ``self``. ``self`` must not be mutated. Malformed input raises
    ``OptionsError`` with a human-readable message.
    """

    def merge_serialized(self: OptionsT, source: str) -> OptionsT:
        ...


def load_options_mapping(source: str) -> dict[str, Any]:
    """Load an options block as a YAML mapping.

    Args:
        source: Raw text of the options block.

    Returns:
        Mapping of option names to values (empty for a blank block).

    Raises:
        OptionsError: If the text is not valid YAML or not a mapping.
    """
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise OptionsError(f"Invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise OptionsError(f"Options must be a mapping, got {type(data).__name__}")

    bad_keys = [repr(k) for k in data if not isinstance(k, str)]
    if bad_keys:
        raise OptionsError(f"Option names must be strings: {', '.join(bad_keys)}")

    return data


@dataclass
class YamlOptions:
    """Dataclass options merged from YAML code blocks.

    Subclasses declare their fields with defaults; each options block
    overrides only the fields it names (last write wins per field).
    Override ``validate`` to reject values after a merge.

    Example:
        @dataclass
        class Options(YamlOptions):
            foo: int = 0
            bar: bool = False
    """

    def merge_serialized(self: YamlOptionsT, source: str) -> YamlOptionsT:
        """Merge a YAML options block onto a copy of these options."""
        values = load_options_mapping(source)
        self._check_fields(values)
        for name, value in values.items():
            _check_type(name, getattr(self, name), value)

        merged = replace(self, **values)
        merged.validate()
        return merged

    def validate(self) -> None:
        """Hook for subclasses; raise OptionsError on invalid values."""

    def to_dict(self) -> dict[str, Any]:
        """Convert options to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls: type[YamlOptionsT], data: dict[str, Any]) -> YamlOptionsT:
        """Create options from dictionary, defaults for missing fields."""
        cls._check_fields(data)
        options = cls(**data)
        options.validate()
        return options

    @classmethod
    def _check_fields(cls, values: dict[str, Any]) -> None:
        allowed = {f.name for f in fields(cls) if f.init}
        extra = set(values) - allowed
        if extra:
            raise OptionsError(f"Unknown option(s): {', '.join(sorted(extra))}")


def _check_type(name: str, current: Any, value: Any) -> None:
    """Reject a value whose type differs from the field's current value.

    Fields currently None accept anything; ints are accepted for floats.
    """
    if current is None or value is None:
        return

    expected = type(current)
    if isinstance(current, bool) or isinstance(value, bool):
        ok = isinstance(current, bool) and isinstance(value, bool)
    elif expected is float:
        ok = isinstance(value, (int, float))
    else:
        ok = isinstance(value, expected)

    if not ok:
        raise OptionsError(
            f"Option '{name}' expects {expected.__name__}, got {type(value).__name__}"
        )
