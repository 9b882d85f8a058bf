# Argscan CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionParser`, the scan loop that turns a list of raw
arguments into a `ParseResult`, and `parse_args()`, its one-call entry point.

The parser walks the arguments left to right over a deque of unconsumed
arguments. Each argument is classified, short option groups are expanded into
option tokens pushed back onto the front of the deque, and every option
occurrence is handed to the binder. Everything after a bare `--` is positional.

Strict mode (the default) raises on unknown options, string options without a
value and boolean options given a value. Lenient mode never raises for those;
unknown options become implicit booleans.

Example Usage:
    parser = OptionParser({
        "recursive": {"type": "boolean", "short": "r"},
        "file": {"type": "string", "short": "f"},
    })
    result = parser.parse(["-rf", "notes.txt", "extra"])

    # result.values == {"recursive": True, "file": "notes.txt"}
    # result.positionals == ["extra"]

    parse_args(["-ab"], strict=False).values  # {"a": True, "b": True}
"""
from __future__ import annotations

from collections import deque
from typing import Any, Mapping, Sequence

from argscan.exceptions import InvalidArgumentTypeError
from argscan.logger import logger
from argscan.parser.binder import store_option
from argscan.parser.bundling import expand_short_group
from argscan.parser.option import Option, build_schema
from argscan.parser.result import ParseResult
from argscan.parser.tokens import (
    Token,
    TokenKind,
    classify_token,
    find_long_option_for_short,
    is_option_value,
)
from argscan.utils import get_main_args


class OptionParser:
    """
    Parses argument lists against a fixed option schema.

    The schema is validated once, in the constructor, so a malformed schema
    fails before any argument is scanned. A parser holds no per-parse state and
    can be reused and shared.
    """

    def __init__(
        self,
        options: Mapping[str, Option | Mapping[str, Any]] | None = None,
        strict: bool = True,
    ) -> None:
        """Validate the schema and strictness for later parses."""
        if not isinstance(strict, bool):
            raise InvalidArgumentTypeError(
                f"strict must be a boolean, received {type(strict).__name__}"
            )
        self.options: dict[str, Option] = build_schema(options)
        self.strict: bool = strict

    def _validate_args(self, args: Sequence[str]) -> None:
        if not isinstance(args, (list, tuple)):
            raise InvalidArgumentTypeError(
                f"args must be a list of strings, received {type(args).__name__}"
            )
        for index, arg in enumerate(args):
            if not isinstance(arg, str):
                raise InvalidArgumentTypeError(
                    f"args[{index}] must be a string, received {type(arg).__name__}"
                )

    def _store(
        self,
        long_option: str,
        short_option: str | None,
        option_value: str | None,
        result: ParseResult,
    ) -> None:
        store_option(
            long_option=long_option,
            short_option=short_option,
            option_value=option_value,
            options=self.options,
            strict=self.strict,
            result=result,
        )

    def _consume_value(
        self, long_option: str, remaining: deque[str | Token]
    ) -> str | None:
        """Take the next argument as the option's value if the option wants one."""
        option = self.options.get(long_option)
        if option is None or not option.takes_value:
            return None
        next_arg = remaining[0] if remaining else None
        if isinstance(next_arg, str) and is_option_value(next_arg, self.options):
            remaining.popleft()
            return next_arg
        return None

    def _handle_token(
        self, token: Token, remaining: deque[str | Token], result: ParseResult
    ) -> None:
        if token.kind == TokenKind.SHORT_OPTION_GROUP:
            expanded = expand_short_group(token.raw[1:], self.options, self.strict)
            remaining.extendleft(reversed(expanded))
        elif token.kind == TokenKind.LONE_SHORT_OPTION:
            assert token.name is not None, "short option should have a name"
            long_option = find_long_option_for_short(token.name, self.options)
            option_value = self._consume_value(long_option, remaining)
            self._store(long_option, token.name, option_value, result)
        elif token.kind == TokenKind.SHORT_OPTION_AND_VALUE:
            assert token.name is not None, "short option should have a name"
            long_option = find_long_option_for_short(token.name, self.options)
            self._store(long_option, token.name, token.value, result)
        elif token.kind == TokenKind.LONE_LONG_OPTION:
            assert token.name is not None, "long option should have a name"
            option_value = self._consume_value(token.name, remaining)
            self._store(token.name, None, option_value, result)
        elif token.kind == TokenKind.LONG_OPTION_AND_VALUE:
            assert token.name is not None, "long option should have a name"
            self._store(token.name, None, token.value, result)
        else:
            result.positionals.append(token.raw)

    def parse(self, args: Sequence[str]) -> ParseResult:
        """
        Parse arguments into option values and positionals.

        Args:
            args (Sequence[str]): The arguments to parse, without the program name.
                The sequence is copied and never modified.

        Returns:
            ParseResult: A fresh result for this call.

        Raises:
            InvalidArgumentTypeError: If `args` is not a list of strings.
            UnknownOptionError, MissingArgumentError, UnexpectedArgumentError:
                In strict mode, on the first invalid option.
        """
        self._validate_args(args)
        result = ParseResult()
        remaining: deque[str | Token] = deque(args)

        while remaining:
            arg = remaining.popleft()
            # Expanded groups are queued as tokens and are never reclassified.
            token = arg if isinstance(arg, Token) else classify_token(arg, self.options)
            if token.kind == TokenKind.TERMINATOR:
                logger.debug(
                    "Options terminator reached, %d argument(s) left.", len(remaining)
                )
                result.positionals.extend(remaining)
                break
            self._handle_token(token, remaining, result)

        return result

    def __str__(self) -> str:
        return f"OptionParser(options={len(self.options)}, strict={self.strict})"

    def __repr__(self) -> str:
        return str(self)


def parse_args(
    args: Sequence[str] | None = None,
    options: Mapping[str, Option | Mapping[str, Any]] | None = None,
    strict: bool = True,
) -> ParseResult:
    """
    Parse command-line arguments against an option schema.

    Args:
        args (Sequence[str] | None): Arguments to parse. Defaults to the running
            process's arguments (`sys.argv[1:]`).
        options (Mapping | None): The option schema. Defaults to no options.
        strict (bool): Raise on unknown or mistyped options (default: True).

    Returns:
        ParseResult: The parsed option values and positionals.
    """
    if args is None:
        args = get_main_args()
    return OptionParser(options, strict=strict).parse(args)
