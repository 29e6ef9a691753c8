# Copyright 2026 Lox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical analysis for Lox: tokens, the scanner, and error reporting."""

from lox.scanner.errors import (
    UNEXPECTED_CHARACTER,
    UNTERMINATED_STRING,
    ErrorReporter,
    ErrorSink,
    ScanError,
    ScanResult,
)
from lox.scanner.scanner import Scanner, tokenize
from lox.scanner.tokens import KEYWORDS, Token, TokenType

__all__ = [
    "ErrorReporter",
    "ErrorSink",
    "KEYWORDS",
    "ScanError",
    "ScanResult",
    "Scanner",
    "Token",
    "TokenType",
    "UNEXPECTED_CHARACTER",
    "UNTERMINATED_STRING",
    "tokenize",
]
