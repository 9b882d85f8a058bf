# Argscan CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Binds a resolved option occurrence into a `ParseResult`.

`store_option()` validates the occurrence against the schema when parsing is
strict, then writes `True` (flag use) or the value string into the result.
Options declared `multiple` always store a list, even for a single use.
"""
from __future__ import annotations

from typing import Mapping

from argscan.exceptions import (
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from argscan.logger import logger
from argscan.parser.option import Option
from argscan.parser.result import ParseResult

# Accepted on the command line, never written into the result.
RESERVED_KEYS = frozenset({"__proto__", "__class__", "__dict__"})


def _suggest_long_options(long_option: str, options: Mapping[str, Option]) -> list[str]:
    if not long_option:
        return []
    return [f"--{name}" for name in options if name.startswith(long_option)]


def store_option(
    *,
    long_option: str,
    short_option: str | None,
    option_value: str | None,
    options: Mapping[str, Option],
    strict: bool,
    result: ParseResult,
) -> None:
    """
    Validate and store one option occurrence.

    Args:
        long_option (str): Canonical long name the occurrence resolved to.
        short_option (str | None): The alias used, if the option was given as `-x`.
        option_value (str | None): The value, or None when used as a flag.
        options (Mapping[str, Option]): The validated option schema.
        strict (bool): Raise on unknown options and type mismatches.
        result (ParseResult): The result to write into.

    Raises:
        UnknownOptionError: Strict mode, no schema entry.
        MissingArgumentError: Strict mode, string option without a value.
        UnexpectedArgumentError: Strict mode, boolean option with a value.
    """
    option = options.get(long_option)

    if strict:
        if option is None:
            if short_option is None:
                raise UnknownOptionError(
                    f"--{long_option}", _suggest_long_options(long_option, options)
                )
            raise UnknownOptionError(f"-{short_option}")

        if option.takes_value and option_value is None:
            raise MissingArgumentError(
                f"Option '{option.get_flag_text(long_option)}' argument missing"
            )

        if not option.takes_value and option_value is not None:
            raise UnexpectedArgumentError(
                f"Option '{option.get_flag_text(long_option)}' does not take an argument"
            )

    if long_option in RESERVED_KEYS:
        logger.debug("Discarding value for reserved option name '%s'.", long_option)
        return

    new_value = True if option_value is None else option_value
    if option is not None and option.multiple:
        existing = result.values.get(long_option)
        if isinstance(existing, list):
            existing.append(new_value)
        else:
            result.values[long_option] = [new_value]
    else:
        result.values[long_option] = new_value
    logger.debug("Stored option '%s' = %r.", long_option, new_value)
