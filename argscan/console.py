# Argscan CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for the Argscan command-line tool."""
from rich.console import Console
from rich.theme import Theme

argscan_theme = Theme(
    {
        "option": "bold cyan",
        "value": "yellow",
        "positional": "green",
        "error": "bold red",
        "dim": "grey50",
    }
)

console = Console(theme=argscan_theme)
error_console = Console(theme=argscan_theme, stderr=True)
