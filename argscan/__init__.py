"""
Argscan CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgscanError,
    ConfigurationError,
    InvalidArgumentTypeError,
    MissingArgumentError,
    OptionValueError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from .parser import Option, OptionParser, OptionType, ParseResult, parse_args
from .version import __version__

logger = logging.getLogger("argscan")


__all__ = [
    "ArgscanError",
    "ConfigurationError",
    "InvalidArgumentTypeError",
    "MissingArgumentError",
    "Option",
    "OptionParser",
    "OptionType",
    "OptionValueError",
    "ParseResult",
    "UnexpectedArgumentError",
    "UnknownOptionError",
    "__version__",
    "parse_args",
]
