# Argscan CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argscan."""
import logging

logger: logging.Logger = logging.getLogger("argscan")
