# Argscan CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionType` and `Option`, the two building blocks of an option schema,
and `build_schema()`, which validates a whole schema before any parsing starts.

A schema maps a canonical long option name (without leading dashes) to its
configuration:

- `type`: `OptionType.BOOLEAN` (a flag) or `OptionType.STRING` (takes a value)
- `short`: an optional single-character alias, unique across the schema
- `multiple`: whether repeated occurrences accumulate into a list

Entries may be given as `Option` instances or as plain mappings such as
`{"type": "string", "short": "f"}`. Any malformed entry raises
`ConfigurationError`, regardless of parse strictness.

Example:
    schema = build_schema({
        "force": {"type": "boolean", "short": "f"},
        "include": Option(OptionType.STRING, short="I", multiple=True),
    })
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from argscan.exceptions import ConfigurationError, InvalidArgumentTypeError
from argscan.logger import logger

_OPTION_KEYS = frozenset({"type", "short", "multiple"})


class OptionType(Enum):
    """
    Defines whether an option is a flag or consumes a value.

    Members:
        BOOLEAN: The option is a flag and never takes a value.
        STRING: The option takes a value, inline or from the next argument.

    Aliases:
        - "bool", "flag" → "boolean"
        - "str", "value" → "string"

    Example:
        OptionType("flag") → OptionType.BOOLEAN
    """

    BOOLEAN = "boolean"
    STRING = "string"

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        if isinstance(value, str):
            normalized = value.strip().lower()
            normalized = OPTION_TYPE_ALIASES.get(normalized, normalized)
            for member in cls:
                if member.value == normalized:
                    return member
        raise ValueError(
            f"Invalid {cls.__name__}: {value!r}. Must be one of: {VALID_TYPES}"
        )

    def __str__(self) -> str:
        return self.value


OPTION_TYPE_ALIASES = {
    "bool": "boolean",
    "flag": "boolean",
    "str": "string",
    "value": "string",
}
VALID_TYPES = ", ".join(member.value for member in OptionType)


@dataclass(frozen=True)
class Option:
    """
    Represents one declared long option.

    Attributes:
        type (OptionType): Whether the option is a flag or takes a value.
        short (str | None): Single-character alias used as `-x`.
        multiple (bool): Accumulate repeated occurrences into a list.
    """

    type: OptionType
    short: str | None = None
    multiple: bool = False

    @property
    def takes_value(self) -> bool:
        return self.type == OptionType.STRING

    def get_flag_text(self, long_option: str) -> str:
        """Render the option the way error messages name it, e.g. `-f, --file <value>`."""
        short_text = f"-{self.short}, " if self.short else ""
        value_text = " <value>" if self.takes_value else ""
        return f"{short_text}--{long_option}{value_text}"


def _validate_long_option(long_option: Any) -> str:
    if not isinstance(long_option, str) or not long_option:
        raise ConfigurationError(
            f"Option names must be non-empty strings, received {long_option!r}"
        )
    if long_option.startswith("-"):
        raise ConfigurationError(
            f"Option name '{long_option}' must be given without leading dashes"
        )
    if "=" in long_option:
        raise ConfigurationError(f"Option name '{long_option}' must not contain '='")
    return long_option


def _validate_type(value: Any, long_option: str) -> OptionType:
    if isinstance(value, OptionType):
        return value
    if not isinstance(value, str):
        raise ConfigurationError(
            f"options.{long_option}.type must be one of: {VALID_TYPES}. "
            f"Received {value!r}"
        )
    try:
        return OptionType(value)
    except ValueError as error:
        raise ConfigurationError(f"options.{long_option}.type: {error}") from error


def _validate_short(value: Any, long_option: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(
            f"options.{long_option}.short must be a string, "
            f"received {type(value).__name__}"
        )
    if len(value) != 1:
        raise ConfigurationError(
            f"options.{long_option}.short {value!r} must be a single character"
        )
    if value == "-":
        raise ConfigurationError(f"options.{long_option}.short must not be '-'")
    if value.isdigit():
        raise ConfigurationError(
            f"options.{long_option}.short '{value}' must not be a digit; "
            "digits are reserved for negative numbers"
        )
    return value


def _validate_multiple(value: Any, long_option: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"options.{long_option}.multiple must be a boolean, "
            f"received {type(value).__name__}"
        )
    return value


def _build_option(long_option: str, config: Option | Mapping[str, Any]) -> Option:
    if isinstance(config, Option):
        config = {
            "type": config.type,
            "short": config.short,
            "multiple": config.multiple,
        }
    elif not isinstance(config, Mapping):
        raise ConfigurationError(
            f"options.{long_option} must be an Option or a mapping, "
            f"received {type(config).__name__}"
        )

    unknown_keys = set(config) - _OPTION_KEYS
    if unknown_keys:
        raise ConfigurationError(
            f"options.{long_option} has unknown key(s): {', '.join(sorted(unknown_keys))}"
        )
    if "type" not in config:
        raise ConfigurationError(f"options.{long_option}.type is required")

    return Option(
        type=_validate_type(config["type"], long_option),
        short=_validate_short(config.get("short"), long_option),
        multiple=_validate_multiple(config.get("multiple", False), long_option),
    )


def build_schema(
    options: Mapping[str, Option | Mapping[str, Any]] | None,
) -> dict[str, Option]:
    """
    Validate an option schema and normalize every entry to an `Option`.

    Args:
        options (Mapping | None): Long option name to `Option` or config mapping.

    Returns:
        dict[str, Option]: The validated schema, in declaration order.

    Raises:
        InvalidArgumentTypeError: If `options` is not a mapping.
        ConfigurationError: If any entry is malformed or a short alias is reused.
    """
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        raise InvalidArgumentTypeError(
            f"options must be a mapping, received {type(options).__name__}"
        )

    schema: dict[str, Option] = {}
    short_owners: dict[str, str] = {}
    for long_option, config in options.items():
        long_option = _validate_long_option(long_option)
        option = _build_option(long_option, config)
        if option.short is not None:
            if option.short in short_owners:
                raise ConfigurationError(
                    f"options.{long_option}.short '-{option.short}' is already used "
                    f"by option '--{short_owners[option.short]}'"
                )
            short_owners[option.short] = long_option
        schema[long_option] = option

    logger.debug("Validated option schema with %d option(s).", len(schema))
    return schema
