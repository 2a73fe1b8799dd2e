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

"""``enginfo version``: print the versions of enginfo components."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from textwrap import dedent
from typing import TYPE_CHECKING, Final

from enginfo._internal.exceptions import ArgumentError, EngineError
from enginfo.cli.helpers import RaisingArgumentParser, echo, register_argument
from enginfo.config import ENV_FILENAME, build_environ, find_config_path
from enginfo.core.model_types import ENGINE_ROLES, LogComponent
from enginfo.features import read_feature_flags
from enginfo.logging import structured_extra
from enginfo.report import ReportMetadata, assemble_report, render_table

if TYPE_CHECKING:
    from collections.abc import Mapping

    from enginfo.cli.types import SubparserCollection
    from enginfo.core.model_types import EngineRole
    from enginfo.engines.resolver import EngineResolver

logger: logging.Logger = logging.getLogger("enginfo.cli")

VERSION_HELP: Final[str] = dedent(
    """
    Print current version of enginfo components

    Usage

      $ enginfo -v [options]
      $ enginfo version [options]

    Options

      -h, --help     Display this help message
          --json     Output JSON
    """,
)

ConfigFinder = Callable[[], "Path | None"]


class VersionCommand:
    """Report-producing entry point behind ``enginfo version``.

    Collaborators are injected so the command can run against fake engines and
    configuration in tests. Engine overrides may also come from a project
    ``.env`` file (``<cwd>/.env`` unless ``env_file`` is given); variables
    already set in ``environ`` win over the file.
    """

    def __init__(
        self,
        metadata: ReportMetadata,
        *,
        roles: Sequence[EngineRole] = ENGINE_ROLES,
        resolver: EngineResolver | None = None,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
        config_finder: ConfigFinder = find_config_path,
        env_file: Path | None = None,
    ) -> None:
        super().__init__()
        self.metadata = metadata
        self.roles = tuple(roles)
        self.resolver = resolver
        self.environ = environ
        self.cwd = cwd
        self.config_finder = config_finder
        self.env_file = env_file

    @classmethod
    def new(cls) -> VersionCommand:
        return cls(ReportMetadata.from_installation())

    @staticmethod
    def build_parser() -> RaisingArgumentParser:
        parser = RaisingArgumentParser(
            prog="enginfo version",
            add_help=False,
            usage_text=VERSION_HELP,
        )
        register_argument(parser, "-h", "--help", action="store_true")
        register_argument(parser, "-v", "--version", action="store_true")
        register_argument(parser, "--json", action="store_true")
        return parser

    async def parse(self, argv: Sequence[str]) -> str:
        """Parse ``argv`` and return the rendered report, or the help text.

        Raises:
            ArgumentError: If ``argv`` contains an unknown or malformed argument.
            EngineNotFoundError: If an engine binary cannot be located.
            ProbeError: If an engine binary cannot report its version.
        """
        args = self.build_parser().parse_args(list(argv))
        if args.help:
            return self.help()
        base = self.cwd if self.cwd is not None else Path.cwd()
        environ = build_environ(self.env_file or base / ENV_FILENAME, self.environ)
        feature_flags = read_feature_flags(self.config_finder())
        rows = await assemble_report(
            self.metadata,
            roles=self.roles,
            feature_flags=feature_flags,
            resolver=self.resolver,
            environ=environ,
            cwd=base,
        )
        return render_table(rows, as_json=bool(args.json))

    @staticmethod
    def help(error: str | None = None) -> str:
        """Return the usage text; with ``error``, raise it as an ``ArgumentError``."""
        if error:
            raise ArgumentError(error, VERSION_HELP)
        return VERSION_HELP


def register_version_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Attach the ``enginfo version`` command to the CLI.

    The subparser declares no options of its own; everything after ``version``
    is handed to ``VersionCommand.parse``.
    """
    _ = subparsers.add_parser(
        "version",
        help="Print the versions of enginfo components",
        add_help=False,
        parents=parents or [],
    )


def run_version(argv: Sequence[str], command: VersionCommand | None = None) -> int:
    """Run the version command and print its result.

    Returns:
        ``0`` on success, ``1`` when an engine cannot be resolved or probed,
        ``2`` on invalid arguments.
    """
    active = command if command is not None else VersionCommand.new()
    try:
        output = asyncio.run(active.parse(argv))
    except ArgumentError as exc:
        echo(str(exc), err=True)
        return 2
    except EngineError as exc:
        logger.error(  # noqa: TRY400
            "%s",
            exc,
            extra=structured_extra(LogComponent.CLI, engine=exc.role, exit_code=1),
        )
        return 1
    echo(output)
    return 0


def execute_version(args: argparse.Namespace, extras: Sequence[str]) -> int:
    """Execute the version subcommand with the arguments that followed it."""
    _ = args
    return run_version(extras)


__all__ = [
    "VERSION_HELP",
    "VersionCommand",
    "execute_version",
    "register_version_command",
    "run_version",
]
