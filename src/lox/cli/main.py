# Copyright 2026 Lox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the lox command-line driver."""

import argparse
import sys
from pathlib import Path
from typing import TextIO

from yachalk import chalk

from lox.cli.output import format_tokens
from lox.config.settings import ConfigError, LoxConfig, find_config, load_config
from lox.scanner.errors import ErrorReporter
from lox.scanner.scanner import Scanner

# ###############
# Public Interface
# ###############

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66
EXIT_CONFIG_ERROR = 78


def main() -> None:
    """Run the lox CLI."""
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Scan Lox source and print its tokens. Starts a REPL when no script is given.",
    )
    parser.add_argument(
        "script",
        nargs="*",
        help="Lox script to scan (omit to start the interactive prompt)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file (default: .lox.yaml in the current directory, if present)",
    )
    parser.add_argument(
        "--format",
        dest="token_format",
        choices=["text", "yaml"],
        default=None,
        help="Token output format (overrides the config file)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored diagnostics",
    )

    args = parser.parse_args()
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Resolve configuration and run either a script or the prompt."""
    if len(args.script) > 1:
        print("Usage: lox [script]", file=sys.stderr)
        return EXIT_USAGE

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.script:
        return _run_file(Path(args.script[0]), config)
    return _run_prompt(config, sys.stdin)


def _resolve_config(args: argparse.Namespace) -> LoxConfig:
    if args.config is not None:
        config = load_config(Path(args.config))
    else:
        config = find_config(Path.cwd())

    overrides: dict[str, object] = {}
    if args.token_format is not None:
        overrides["token_format"] = args.token_format
    if args.no_color:
        overrides["color"] = False
    return config.model_copy(update=overrides)


def _run_file(path: Path, config: LoxConfig) -> int:
    """Scan a whole script file; lexical errors yield a data-error exit code."""
    try:
        source = path.read_text(encoding=config.encoding)
    except FileNotFoundError:
        print(f"Error: script '{path}' does not exist.", file=sys.stderr)
        return EXIT_NO_INPUT
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        print(f"Error: cannot read script '{path}': {exc}", file=sys.stderr)
        return EXIT_NO_INPUT

    reporter = ErrorReporter()
    _run(source, reporter, config)
    return EXIT_DATA_ERROR if reporter.had_error else EXIT_OK


def _run_prompt(config: LoxConfig, stream: TextIO) -> int:
    """Scan input line by line until end of input."""
    reporter = ErrorReporter()
    while True:
        sys.stdout.write(config.prompt)
        sys.stdout.flush()
        line = stream.readline()
        if not line:
            sys.stdout.write("\n")
            break
        _run(line.rstrip("\n"), reporter, config)
        reporter.reset()
    return EXIT_OK


def _run(source: str, reporter: ErrorReporter, config: LoxConfig) -> None:
    """Scan one source text, print its tokens, then print any errors."""
    tokens = Scanner(source, reporter).scan_tokens()
    sys.stdout.write(format_tokens(tokens, config.token_format))
    for error in reporter.errors:
        message = str(error)
        print(chalk.red(message) if config.color else message, file=sys.stderr)
