# Copyright 2026 Lox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lox scripting language front end."""

__version__ = "0.1.0"
