# Copyright 2026 Lox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for the lox driver."""

from lox.config.settings import CONFIG_FILE_NAME, ConfigError, LoxConfig, find_config, load_config

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "LoxConfig",
    "find_config",
    "load_config",
]
