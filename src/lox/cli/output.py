# Copyright 2026 Lox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of scanned tokens for the command-line driver."""

import yaml

from lox.scanner.tokens import Token

# ###############
# Public Interface
# ###############


def format_tokens(tokens: list[Token], token_format: str = "text") -> str:
    """Render tokens as text, one per line, or as a YAML list of mappings.

    Args:
        tokens: Tokens to render.
        token_format: Either "text" or "yaml".

    Returns:
        The rendered tokens. Text output ends with a newline unless empty.

    Raises:
        ValueError: If ``token_format`` is not a known format.
    """
    if token_format == "text":
        return "".join(f"{token}\n" for token in tokens)
    if token_format == "yaml":
        return yaml.safe_dump([_token_to_dict(token) for token in tokens], sort_keys=False)
    raise ValueError(f"Unknown token format: {token_format!r}")


# ################
# Implementation
# ################


def _token_to_dict(token: Token) -> dict[str, object]:
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }
