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

"""Build the ordered rows of the version report.

Rows come out in a fixed order: tool identity, client library, platform, one
row per engine role in role order, engines hash, Studio, and finally preview
features when any are declared. Nothing is sorted.

Engines are located and probed one at a time. The first engine that cannot be
found or probed aborts the whole report; no partial report is produced.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Final

from enginfo.core.model_types import ENGINE_ROLES, LogComponent
from enginfo.core.types import EngineInfo, ReportRow
from enginfo.engines.locator import locate_engine
from enginfo.engines.prober import probe_version
from enginfo.engines.roles import ENGINE_LABELS
from enginfo.logging import structured_extra

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from enginfo.core.model_types import EngineRole
    from enginfo.engines.resolver import EngineResolver

    from .metadata import ReportMetadata

logger: logging.Logger = logging.getLogger("enginfo.report")

NOT_FOUND: Final[str] = "Not found"
PLATFORM_LABEL: Final[str] = "Current platform"
ENGINES_HASH_LABEL: Final[str] = "Default Engines Hash"
STUDIO_LABEL: Final[str] = "Studio"
PREVIEW_FEATURES_LABEL: Final[str] = "Preview Features"

__all__ = [
    "NOT_FOUND",
    "assemble_report",
    "collect_engine_infos",
    "display_path",
    "format_engine_info",
    "resolve_engine",
]


def display_path(path: Path, cwd: Path) -> str:
    """Return ``path`` relative to ``cwd``, or as given when it lies outside ``cwd``."""
    absolute = path if path.is_absolute() else cwd / path
    try:
        relative = os.path.relpath(absolute, cwd)
    except ValueError:  # different drives on Windows
        return str(path)
    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return str(path)
    return relative


def format_engine_info(info: EngineInfo, cwd: Path) -> str:
    """Return ``"<version> (at <path>[, resolved by <VAR>])"``."""
    resolved = f", resolved by {info.override_variable}" if info.override_variable else ""
    return f"{info.version} (at {display_path(info.path, cwd)}{resolved})"


async def resolve_engine(
    role: EngineRole,
    *,
    resolver: EngineResolver | None = None,
    environ: Mapping[str, str] | None = None,
) -> EngineInfo:
    """Locate and probe a single engine role."""
    located = await locate_engine(role, resolver=resolver, environ=environ)
    version = await probe_version(located.path, role)
    return EngineInfo(
        role=role,
        path=located.path,
        version=version,
        override_variable=located.override_variable,
    )


async def collect_engine_infos(
    roles: Sequence[EngineRole] = ENGINE_ROLES,
    *,
    resolver: EngineResolver | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[EngineInfo]:
    """Resolve every role in order, awaiting each before starting the next."""
    infos: list[EngineInfo] = []
    for role in roles:
        info = await resolve_engine(role, resolver=resolver, environ=environ)
        logger.debug(
            "Resolved %s %s",
            role,
            info.version,
            extra=structured_extra(LogComponent.REPORT, engine=role, path=info.path),
        )
        infos.append(info)
    return infos


async def assemble_report(
    metadata: ReportMetadata,
    *,
    roles: Sequence[EngineRole] = ENGINE_ROLES,
    feature_flags: Sequence[str] = (),
    resolver: EngineResolver | None = None,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> list[ReportRow]:
    """Return the report rows for ``roles`` and ``metadata``.

    Args:
        metadata: Installation facts collected at process start.
        roles: Engine roles to report, in display order.
        feature_flags: Preview features; the row is omitted when empty.
        resolver: Default-path collaborator forwarded to the locator.
        environ: Environment forwarded to the locator.
        cwd: Directory engine paths are shown relative to; the working directory
            when omitted.

    Raises:
        EngineNotFoundError: If an engine has no override and no default binary.
        ProbeError: If an engine binary cannot report its version.
    """
    base = cwd if cwd is not None else Path.cwd()
    infos = await collect_engine_infos(roles, resolver=resolver, environ=environ)
    rows = [
        ReportRow(metadata.tool_name, metadata.tool_version),
        ReportRow(metadata.client_package, metadata.client_version or NOT_FOUND),
        ReportRow(PLATFORM_LABEL, metadata.platform),
    ]
    rows.extend(ReportRow(ENGINE_LABELS[info.role], format_engine_info(info, base)) for info in infos)
    rows.append(ReportRow(ENGINES_HASH_LABEL, metadata.engines_hash))
    rows.append(ReportRow(STUDIO_LABEL, metadata.studio_version))
    if feature_flags:
        rows.append(ReportRow(PREVIEW_FEATURES_LABEL, ", ".join(feature_flags)))
    return rows
