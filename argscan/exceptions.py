# Argscan CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by Argscan.

Errors fall into two families: schema problems detected before any token is
scanned, and parse problems detected while binding options in strict mode.
Lenient parsing never raises the parse family; it degrades to best-effort
booleans and values instead.

Exception Hierarchy:
- ArgscanError
    ├── ConfigurationError
    │    └── InvalidArgumentTypeError
    ├── UnknownOptionError
    └── OptionValueError
         ├── MissingArgumentError
         └── UnexpectedArgumentError

Every class carries a stable `code` so callers can branch on the failure kind
without matching message text.
"""


class ArgscanError(Exception):
    """Base exception for Argscan."""

    code: str = "ERR_ARGSCAN"


class ConfigurationError(ArgscanError):
    """Exception raised when the option schema is malformed."""

    code = "ERR_INVALID_ARG_VALUE"


class InvalidArgumentTypeError(ConfigurationError):
    """Exception raised when `args`, `options` or `strict` has the wrong type."""

    code = "ERR_INVALID_ARG_TYPE"


class UnknownOptionError(ArgscanError):
    """Exception raised when a flag-shaped token has no schema entry."""

    code = "ERR_PARSE_ARGS_UNKNOWN_OPTION"

    def __init__(self, option: str, suggestions: list[str] | None = None) -> None:
        self.option = option
        self.suggestions = suggestions or []
        if self.suggestions:
            message = (
                f"Unknown option '{option}'. "
                f"Did you mean one of: {', '.join(self.suggestions)}?"
            )
        else:
            message = f"Unknown option '{option}'"
        super().__init__(message)


class OptionValueError(ArgscanError):
    """Exception raised when an option's value does not match its type."""

    code = "ERR_PARSE_ARGS_INVALID_OPTION_VALUE"


class MissingArgumentError(OptionValueError):
    """Exception raised when a string option is used without a value."""


class UnexpectedArgumentError(OptionValueError):
    """Exception raised when a boolean option is given an inline value."""
