# Copyright 2026 Lox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for token rendering in the CLI."""

import pytest
import yaml

from lox.cli.output import format_tokens
from lox.scanner import tokenize


def test_text_format_one_token_per_line() -> None:
    tokens = tokenize("x = 1.5;").tokens
    assert format_tokens(tokens) == (
        "IDENTIFIER x None\n"
        "EQUAL = None\n"
        "NUMBER 1.5 1.5\n"
        "SEMICOLON ; None\n"
        "EOF  None\n"
    )


def test_yaml_format_is_list_of_mappings() -> None:
    tokens = tokenize('print "hi";').tokens
    data = yaml.safe_load(format_tokens(tokens, "yaml"))
    assert data == [
        {"type": "PRINT", "lexeme": "print", "literal": None, "line": 1},
        {"type": "STRING", "lexeme": '"hi"', "literal": "hi", "line": 1},
        {"type": "SEMICOLON", "lexeme": ";", "literal": None, "line": 1},
        {"type": "EOF", "lexeme": "", "literal": None, "line": 1},
    ]


def test_yaml_format_keeps_number_literal_as_float() -> None:
    data = yaml.safe_load(format_tokens(tokenize("3").tokens, "yaml"))
    assert data[0]["literal"] == 3.0


def test_unknown_format_raises() -> None:
    with pytest.raises(ValueError, match="Unknown token format"):
        format_tokens([], "xml")
