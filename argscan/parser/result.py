# Argscan CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Defines `ParseResult`, the structured output of a parse."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union

OptionValue = Union[Literal[True], str]
StoredValue = Union[OptionValue, list[OptionValue]]


@dataclass
class ParseResult:
    """
    Recognized option values and leftover positional arguments.

    Attributes:
        values (dict[str, StoredValue]): Canonical long option name to `True`,
            a string, or a list of those for options declared `multiple`.
        positionals (list[str]): Non-option arguments in encounter order.
    """

    values: dict[str, StoredValue] = field(default_factory=dict)
    positionals: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, JSON-serializable copy of the result."""
        return {
            "values": {
                key: list(value) if isinstance(value, list) else value
                for key, value in self.values.items()
            },
            "positionals": list(self.positionals),
        }
