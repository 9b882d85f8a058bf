# Argscan CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
CONTAINER_RUNTIMES = ("docker", "kubepods", "containerd", "podman")


def get_main_args() -> list[str]:
    """
    Return the user-supplied arguments of the running process.

    `sys.argv[0]` is the script path, the module path under `python -m`, or `-c`
    under `python -c`; the user's arguments always follow it.
    """
    return sys.argv[1:]


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    if script.endswith("__main__.py"):
        return "python -m argscan"
    return os.path.basename(script) or "argscan"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(runtime in content for runtime in CONTAINER_RUNTIMES)


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = "argscan.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure root logging with a Rich (`cli`) or JSON (`json`) console handler.

    `mode` defaults to `ARGSCAN_LOG_MODE`, then to `json` inside a container and
    `cli` elsewhere. A file handler is added when `log_filename` is set.

    Raises:
        ValueError: If `mode` is not `cli` or `json`.
    """
    if not mode:
        mode = os.getenv("ARGSCAN_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    if mode not in ("cli", "json"):
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
        )

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_formatter: logging.Formatter = pythonjsonlogger.json.JsonFormatter(
                JSON_LOG_FORMAT
            )
        else:
            file_formatter = logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        file_handler.setFormatter(file_formatter)
        root.addHandler(file_handler)

    logging.getLogger("argscan").debug("Logging initialized in '%s' mode.", mode)
