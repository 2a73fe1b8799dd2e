# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point and orchestration for enginfo commands."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from contextlib import suppress

from enginfo.cli.commands import version as version_command
from enginfo.cli.helpers import register_argument as _register_argument
from enginfo.core.model_types import LogFormat
from enginfo.logging import LOG_FORMATS, LOG_LEVELS, configure_logging

logger: logging.Logger = logging.getLogger("enginfo.cli")

CommandHandler = Callable[[argparse.Namespace, Sequence[str]], int]


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the enginfo command-line interface.

    Parses global options, configures logging, and dispatches to the command
    handler. Arguments following the command name are passed to the command
    untouched; ``-v``/``--version`` is a shortcut for ``enginfo version``.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        Exit code from the executed command handler.
    """
    parser = _build_parser()
    args, extras = parser.parse_known_args(list(argv) if argv is not None else None)
    if args.command is None and args.version:
        args.command = "version"
    if args.command is None:
        parser.error("No command provided.")
    _initialize_logging(args.log_format, args.log_level)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    return handler(args, extras)


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with global options and subcommands."""
    parser = argparse.ArgumentParser(
        prog="enginfo",
        description="Report the versions of the native engines and companion tools.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_argument(
        parser,
        "--log-format",
        choices=LOG_FORMATS,
        default="text",
        help="Select logging output format (human-readable text or structured JSON).",
    )
    _register_argument(
        parser,
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help="Set verbosity of logged events.",
    )
    _register_argument(
        parser,
        "-v",
        "--version",
        action="store_true",
        help="Print component versions (same as `enginfo version`).",
    )
    subparsers = parser.add_subparsers(dest="command")
    version_command.register_version_command(subparsers)
    return parser


def _initialize_logging(log_format: str, log_level: str) -> None:
    """Configure logging; failures are ignored (best-effort initialisation)."""
    with suppress(Exception):  # best-effort logger init
        _ = configure_logging(LogFormat.from_str(log_format), log_level=log_level)


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "version": version_command.execute_version,
    }


__all__ = ["main"]
