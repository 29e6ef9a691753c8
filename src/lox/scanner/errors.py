# Copyright 2026 Lox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error reporting for the Lox scanner.

Lexical errors never abort a scan. The scanner hands each problem to an
error sink and keeps going; callers inspect the collected errors afterwards
to decide whether the run failed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from lox.scanner.tokens import Token

# ###############
# Public Interface
# ###############

UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."


class ErrorSink(Protocol):
    """Anything that can receive lexical error reports."""

    def report(self, line: int, where: str, message: str) -> None: ...


@dataclass(frozen=True)
class ScanError:
    """A lexical problem found while scanning.

    Attributes:
        line: 1-based line number the problem was detected on.
        message: Human-readable description of the problem.
        where: Optional location context appended after ``Error``.
    """

    line: int
    message: str
    where: str = ""

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class ErrorReporter:
    """Default error sink that records every report as a ScanError."""

    def __init__(self) -> None:
        self._errors: list[ScanError] = []

    def report(self, line: int, where: str, message: str) -> None:
        self._errors.append(ScanError(line=line, message=message, where=where))

    def error(self, line: int, message: str) -> None:
        """Report an error with no extra location context."""
        self.report(line, "", message)

    @property
    def errors(self) -> list[ScanError]:
        return list(self._errors)

    @property
    def had_error(self) -> bool:
        """Return True if any error was reported since the last reset."""
        return len(self._errors) > 0

    def reset(self) -> None:
        """Forget all recorded errors."""
        self._errors.clear()


@dataclass
class ScanResult:
    """Result of scanning one source text.

    Attributes:
        tokens: All tokens, always ending with a single EOF token.
        errors: Lexical errors in the order they were found.
    """

    tokens: list[Token] = field(default_factory=list)
    errors: list[ScanError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any lexical errors were found."""
        return len(self.errors) > 0
