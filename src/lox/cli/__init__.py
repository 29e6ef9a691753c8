# Copyright 2026 Lox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line driver for Lox."""
