# Argscan CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads option schemas from YAML or TOML files.

A schema file declares options under an `options` table and may set the default
strictness:

    # argscan.yaml
    strict: true
    options:
      recursive:
        type: boolean
        short: r
      include:
        type: string
        short: I
        multiple: true
"""
from __future__ import annotations

import os
from pathlib import Path

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from argscan.exceptions import ConfigurationError
from argscan.logger import logger
from argscan.parser.option import Option, build_schema


class RawOption(BaseModel):
    """Raw option model for an Argscan schema file."""

    model_config = ConfigDict(extra="forbid")

    type: StrictStr
    short: StrictStr | None = None
    multiple: StrictBool = False


class SchemaConfig(BaseModel):
    """Argscan schema file model."""

    model_config = ConfigDict(extra="forbid")

    strict: StrictBool = True
    options: dict[str, RawOption] = Field(default_factory=dict)

    def to_schema(self) -> dict[str, Option]:
        return build_schema(
            {
                long_option: raw_option.model_dump()
                for long_option, raw_option in self.options.items()
            }
        )


def find_schema_file() -> Path | None:
    candidates = [
        Path.cwd() / "argscan.yaml",
        Path.cwd() / "argscan.toml",
        Path.cwd() / ".argscan.yaml",
        Path.cwd() / ".argscan.toml",
    ]
    env_path = os.environ.get("ARGSCAN_SCHEMA")
    if env_path:
        candidates.append(Path(env_path))
    return next((path for path in candidates if path.is_file()), None)


def load_config(file_path: Path | str) -> SchemaConfig:
    """
    Load an Argscan schema file.

    Args:
        file_path (Path | str): Path to the schema file (YAML or TOML).

    Returns:
        SchemaConfig: The validated schema file contents.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported.
        ConfigurationError: If the contents are not a valid schema.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such schema file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as schema_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(schema_file)
        elif suffix == ".toml":
            raw_config = toml.load(schema_file)
        else:
            raise ValueError(f"Unsupported schema format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            f"Schema file '{path}' must contain a mapping with an 'options' table.\n"
            "Example:\n"
            "options:\n"
            "  file:\n"
            "    type: string\n"
            "    short: f"
        )

    try:
        config = SchemaConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigurationError(f"Invalid schema file '{path}':\n{error}") from error

    logger.debug("Loaded %d option(s) from '%s'.", len(config.options), path)
    return config


def load_schema(file_path: Path | str) -> dict[str, Option]:
    """Load and validate the option schema declared in a YAML or TOML file."""
    return load_config(file_path).to_schema()
