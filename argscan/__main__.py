"""
Argscan CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from argscan.config import SchemaConfig, find_schema_file, load_config
from argscan.console import console, error_console
from argscan.exceptions import ArgscanError
from argscan.parser import Option, OptionType, ParseResult, parse_args
from argscan.utils import get_main_args, get_program_invocation, setup_logging
from argscan.version import __version__

CLI_OPTIONS: dict[str, Option] = {
    "schema": Option(OptionType.STRING, short="s"),
    "lenient": Option(OptionType.BOOLEAN, short="l"),
    "json": Option(OptionType.BOOLEAN, short="j"),
    "log-mode": Option(OptionType.STRING),
    "verbose": Option(OptionType.BOOLEAN, short="v"),
    "version": Option(OptionType.BOOLEAN, short="V"),
}


def get_usage() -> str:
    program = get_program_invocation()
    return (
        f"usage: {program} [-s SCHEMA] [-l] [-j] [-v] [--log-mode MODE] [-V] "
        "-- ARGS..."
    )


def build_result_table(result: ParseResult) -> Table:
    """Render a parse result as a two-section Rich table."""
    table = Table(title="Parse result", show_header=True, box=box.SIMPLE)
    table.add_column("Name")
    table.add_column("Value")

    for name, value in result.values.items():
        values = value if isinstance(value, list) else [value]
        rendered = ", ".join(
            "true" if item is True else repr(item) for item in values
        )
        table.add_row(f"[option]--{escape(name)}[/]", f"[value]{escape(rendered)}[/]")

    for index, positional in enumerate(result.positionals):
        table.add_row(f"[dim]#{index}[/]", f"[positional]{escape(positional)}[/]")

    return table


def load_schema_config(schema_path: str | None) -> SchemaConfig:
    path = schema_path or find_schema_file()
    if path is None:
        return SchemaConfig()
    return load_config(path)


def main(argv: Sequence[str] | None = None) -> int:
    argv = get_main_args() if argv is None else list(argv)

    try:
        cli = parse_args(argv, CLI_OPTIONS)
    except ArgscanError as error:
        error_console.print(f"[error]error:[/] {escape(str(error))}")
        error_console.print(get_usage(), markup=False)
        return 2

    if cli.values.get("version"):
        console.print(f"argscan {__version__}", markup=False)
        return 0

    log_mode = cli.values.get("log-mode")
    schema_path = cli.values.get("schema")
    try:
        if cli.values.get("verbose") or log_mode:
            setup_logging(
                mode=log_mode if isinstance(log_mode, str) else None,
                log_filename=None,
                console_log_level=(
                    logging.DEBUG if cli.values.get("verbose") else logging.WARNING
                ),
            )
        config = load_schema_config(
            schema_path if isinstance(schema_path, str) else None
        )
        strict = config.strict and not cli.values.get("lenient")
        result = parse_args(cli.positionals, config.to_schema(), strict=strict)
    except (ArgscanError, OSError, ValueError) as error:
        error_console.print(f"[error]error:[/] {escape(str(error))}")
        return 2

    if cli.values.get("json"):
        console.print_json(data=result.to_dict())
    else:
        console.print(build_result_table(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
