# Copyright 2026 Lox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration model and YAML loader for the lox command-line driver."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".lox.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class LoxConfig(BaseModel):
    """Settings for the lox driver.

    Attributes:
        prompt: Text printed before each REPL line.
        encoding: Encoding used to read script files.
        color: Whether diagnostics are colored.
        token_format: How scanned tokens are printed ("text" or "yaml").
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    prompt: str = "lox> "
    encoding: str = "utf-8"
    color: bool = True
    token_format: Literal["text", "yaml"] = Field(alias="token-format", default="text")


def load_config(path: Path) -> LoxConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated LoxConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must be a YAML mapping")

    try:
        return LoxConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(directory: Path) -> LoxConfig:
    """Load ``.lox.yaml`` from ``directory`` if present, else return the defaults."""
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        return LoxConfig()
    return load_config(path)
