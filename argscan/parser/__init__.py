"""
Argscan CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .option import Option, OptionType, build_schema
from .option_parser import OptionParser, parse_args
from .result import ParseResult
from .tokens import Token, TokenKind, classify_token

__all__ = [
    "Option",
    "OptionParser",
    "OptionType",
    "ParseResult",
    "Token",
    "TokenKind",
    "build_schema",
    "classify_token",
    "parse_args",
]
