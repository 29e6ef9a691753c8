# Copyright 2026 Lox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Lox source text.

Converts raw source text into a flat sequence of tokens for subsequent parsing.
"""

from __future__ import annotations

from lox.scanner.errors import (
    UNEXPECTED_CHARACTER,
    UNTERMINATED_STRING,
    ErrorReporter,
    ErrorSink,
    ScanResult,
)
from lox.scanner.tokens import KEYWORDS, Token, TokenType

# ###############
# Public Interface
# ###############


class Scanner:
    """Scans one source text into tokens.

    Lexical errors are handed to the error sink and the offending characters
    are skipped; scanning always runs to the end of the input.
    """

    def __init__(self, source: str, reporter: ErrorSink | None = None) -> None:
        self._source = source
        self._reporter: ErrorSink = reporter if reporter is not None else ErrorReporter()

    @property
    def reporter(self) -> ErrorSink:
        return self._reporter

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source and return its tokens.

        Returns:
            A list of Token objects ending with a single EOF token.
        """
        return _ScanPass(self._source, self._reporter).run()


def tokenize(source: str) -> ScanResult:
    """Tokenize Lox source text, collecting lexical errors instead of raising.

    Args:
        source: The full text to scan.

    Returns:
        A ScanResult holding the tokens (ending with EOF) and any errors.
    """
    reporter = ErrorReporter()
    tokens = Scanner(source, reporter).scan_tokens()
    return ScanResult(tokens=tokens, errors=reporter.errors)


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Base character -> (kind without '=', kind with '=')
_EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

_IGNORED_WHITESPACE = " \r\t"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def _is_alphanumeric(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch)


class _ScanPass:
    """Cursor state for a single scan; discarded once the scan finishes."""

    def __init__(self, source: str, reporter: ErrorSink) -> None:
        self._source = source
        self._reporter = reporter
        self._start = 0
        self._current = 0
        self._line = 1
        self._tokens: list[Token] = []

    def run(self) -> list[Token]:
        """Scan every lexeme and append the terminal EOF token."""
        while not self._is_at_end():
            self._start = self._current
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        """Consume the current character and return it."""
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals ``expected``."""
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        """Return the current character without consuming it, or '' at end of input."""
        if self._is_at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        """Return the character after the current one, or '' past end of input."""
        if self._current + 1 >= len(self._source):
            return ""
        return self._source[self._current + 1]

    def _add_token(
        self, token_type: TokenType, literal: str | float | None = None, line: int | None = None
    ) -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(token_type, lexeme, literal, self._line if line is None else line))

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Consume one lexeme starting at the cursor."""
        ch = self._advance()

        if ch in _SINGLE_CHAR_TOKENS:
            self._add_token(_SINGLE_CHAR_TOKENS[ch])
        elif ch in _EQUAL_SUFFIX_TOKENS:
            single, double = _EQUAL_SUFFIX_TOKENS[ch]
            self._add_token(double if self._match("=") else single)
        elif ch == "/":
            if self._match("/"):
                # The newline is left for the next pass so the line counter advances there.
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif ch in _IGNORED_WHITESPACE:
            pass
        elif ch == "\n":
            self._line += 1
        elif ch == '"':
            self._scan_string()
        elif _is_digit(ch):
            self._scan_number()
        elif _is_alpha(ch):
            self._scan_identifier()
        else:
            self._reporter.report(self._line, "", UNEXPECTED_CHARACTER)

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        """Scan a double-quoted string; newlines are allowed inside it.

        The token carries the line of its opening quote.
        """
        start_line = self._line
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self._reporter.report(self._line, "", UNTERMINATED_STRING)
            return

        self._advance()  # closing "
        self._add_token(TokenType.STRING, self._source[self._start + 1 : self._current - 1], start_line)

    def _scan_number(self) -> None:
        """Scan a number literal.

        A fractional part requires at least one digit after the '.'; otherwise
        the '.' is left for the next lexeme.
        """
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()  # consume the '.'
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self._source[self._start : self._current]))

    def _scan_identifier(self) -> None:
        """Scan an identifier and map it to a keyword token type if applicable."""
        while _is_alphanumeric(self._peek()):
            self._advance()
        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))
