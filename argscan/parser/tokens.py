# Argscan CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Classifies raw command-line arguments by their syntactic shape.

`classify_token()` is a pure function: it looks at one argument and the option
schema and returns a `Token` describing what the argument is. It never decides
whether an option is valid; that is the binder's job.

Shapes, in priority order:
- `--`                 → TERMINATOR
- `--name=value`       → LONG_OPTION_AND_VALUE
- `--name`             → LONE_LONG_OPTION
- `-5`, `-3.14`, `-`   → POSITIONAL (negative numbers and the stdin convention)
- `-f`                 → LONE_SHORT_OPTION
- `-fVALUE`            → SHORT_OPTION_AND_VALUE (when `f` takes a value)
- `-rf`                → SHORT_OPTION_GROUP
- anything else        → POSITIONAL
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from argscan.parser.option import Option

NUMBER_PATTERN = re.compile(r"-?\d+(\.\d+)?")


class TokenKind(Enum):
    """The syntactic shape of a single argument."""

    TERMINATOR = "terminator"
    POSITIONAL = "positional"
    LONE_SHORT_OPTION = "lone_short_option"
    SHORT_OPTION_GROUP = "short_option_group"
    SHORT_OPTION_AND_VALUE = "short_option_and_value"
    LONE_LONG_OPTION = "lone_long_option"
    LONG_OPTION_AND_VALUE = "long_option_and_value"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """
    A classified argument.

    Attributes:
        kind (TokenKind): The shape of the argument.
        raw (str): The argument exactly as it was passed.
        name (str | None): Long name or short character, for option shapes.
        value (str | None): The inline value, for `-fVALUE` and `--name=value`.
    """

    kind: TokenKind
    raw: str
    name: str | None = None
    value: str | None = None


def is_number(arg: str) -> bool:
    """Return True for digit strings and negative numbers like `-5` or `-3.14`."""
    return NUMBER_PATTERN.fullmatch(arg) is not None


def find_long_option_for_short(short_option: str, options: Mapping[str, Option]) -> str:
    """
    Resolve a short alias to the long option that declares it.

    Falls back to the alias itself, so `-f` still reaches a long option named `f`
    and an undeclared alias keeps its own name in lenient mode.
    """
    for long_option, option in options.items():
        if option.short == short_option:
            return long_option
    return short_option


def classify_token(arg: str, options: Mapping[str, Option]) -> Token:
    """
    Determine the syntactic shape of one argument.

    Args:
        arg (str): The raw argument.
        options (Mapping[str, Option]): The validated option schema.

    Returns:
        Token: The classified argument.
    """
    if arg == "--":
        return Token(TokenKind.TERMINATOR, arg)

    if arg.startswith("--"):
        index = arg.find("=")
        if index > 2:
            return Token(
                TokenKind.LONG_OPTION_AND_VALUE, arg, arg[2:index], arg[index + 1 :]
            )
        return Token(TokenKind.LONE_LONG_OPTION, arg, arg[2:])

    if not arg.startswith("-") or len(arg) < 2 or is_number(arg):
        return Token(TokenKind.POSITIONAL, arg)

    short_option = arg[1]
    if len(arg) == 2:
        return Token(TokenKind.LONE_SHORT_OPTION, arg, short_option)

    option = options.get(find_long_option_for_short(short_option, options))
    if option is not None and option.takes_value:
        return Token(TokenKind.SHORT_OPTION_AND_VALUE, arg, short_option, arg[2:])
    return Token(TokenKind.SHORT_OPTION_GROUP, arg)


def is_option_value(arg: str | None, options: Mapping[str, Option]) -> bool:
    """Return True if `arg` may be consumed as the value of a preceding option."""
    if arg is None:
        return False
    return classify_token(arg, options).kind == TokenKind.POSITIONAL
