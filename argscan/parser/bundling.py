# Argscan CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Expands POSIX-style short option groups.

A group such as `-rf` is rewritten into the individual options `-r -f`, which
the scan loop then processes as if they had been passed separately. The
expansion yields already classified tokens, so a character such as `5` or `-`
stays an option and is never read back as a number or a terminator. A
value-taking option in the middle of a group claims the rest of the group as
its inline value (`-afFILE` → `-a -fFILE`). In strict mode that case is
rejected, since the option would silently swallow what look like flags.
"""
from __future__ import annotations

from typing import Mapping

from argscan.exceptions import MissingArgumentError, UnknownOptionError
from argscan.logger import logger
from argscan.parser.option import Option
from argscan.parser.tokens import Token, TokenKind, find_long_option_for_short


def expand_short_group(
    cluster: str, options: Mapping[str, Option], strict: bool
) -> list[Token]:
    """
    Expand the characters of a short option group into separate arguments.

    Args:
        cluster (str): The characters after the leading dash, e.g. `"rf"`.
        options (Mapping[str, Option]): The validated option schema.
        strict (bool): Reject undeclared aliases and mid-group string options.

    Returns:
        list[Token]: One short option token per option, e.g. `-r` and `-f`.

    Raises:
        UnknownOptionError: In strict mode, for an undeclared alias.
        MissingArgumentError: In strict mode, for a string option mid-group.
    """
    expanded: list[Token] = []
    last_index = len(cluster) - 1
    for index, short_option in enumerate(cluster):
        long_option = find_long_option_for_short(short_option, options)
        option = options.get(long_option)
        if option is None and strict:
            raise UnknownOptionError(
                f"-{cluster}" if short_option == "-" else f"-{short_option}"
            )

        if option is None or not option.takes_value or index == last_index:
            expanded.append(
                Token(TokenKind.LONE_SHORT_OPTION, f"-{short_option}", short_option)
            )
            continue

        if strict:
            raise MissingArgumentError(
                f"Option '{option.get_flag_text(long_option)}' argument missing: "
                f"it must be last in short option group '-{cluster}'"
            )
        # -abfFILE -> -a -b -fFILE
        expanded.append(
            Token(
                TokenKind.SHORT_OPTION_AND_VALUE,
                f"-{cluster[index:]}",
                short_option,
                cluster[index + 1 :],
            )
        )
        break

    logger.debug(
        "Expanded short option group '-%s' into %s.",
        cluster,
        [token.raw for token in expanded],
    )
    return expanded
