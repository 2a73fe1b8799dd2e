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

"""Installation metadata shown alongside the engine rows.

Collected once at process start and passed to the report assembler, so the
assembler itself never reads package metadata or globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import metadata as importlib_metadata
from typing import Final

from enginfo import __version__
from enginfo.core.model_types import LogComponent
from enginfo.engines.platform import detect_platform
from enginfo.engines.resolver import ENGINES_VERSION
from enginfo.logging import structured_extra

logger: logging.Logger = logging.getLogger("enginfo.report.metadata")

TOOL_NAME: Final[str] = "enginfo"
CLIENT_PACKAGE: Final[str] = "enginfo-client"
STUDIO_VERSION: Final[str] = "0.511.0"

__all__ = [
    "CLIENT_PACKAGE",
    "STUDIO_VERSION",
    "TOOL_NAME",
    "ReportMetadata",
    "installed_version",
]


def installed_version(distribution: str) -> str | None:
    """Return the installed version of ``distribution``, or ``None`` if absent."""
    try:
        return importlib_metadata.version(distribution)
    except importlib_metadata.PackageNotFoundError:
        logger.debug(
            "Distribution %s is not installed",
            distribution,
            extra=structured_extra(LogComponent.REPORT, details={"distribution": distribution}),
        )
        return None


@dataclass(slots=True, frozen=True)
class ReportMetadata:
    """Non-engine facts printed in the version report.

    Attributes:
        tool_name: Name printed on the first row.
        tool_version: Version printed on the first row.
        client_package: Distribution name of the companion client library.
        client_version: Installed client version, ``None`` when not installed.
        engines_version: Pinned engines bundle version; its last dot-segment is
            the engines hash.
        studio_version: Version of the companion Studio UI.
        platform: Host platform identifier.
    """

    tool_name: str = TOOL_NAME
    tool_version: str = __version__
    client_package: str = CLIENT_PACKAGE
    client_version: str | None = None
    engines_version: str = ENGINES_VERSION
    studio_version: str = STUDIO_VERSION
    platform: str = ""

    @property
    def engines_hash(self) -> str:
        return self.engines_version.split(".")[-1]

    @classmethod
    def from_installation(cls, client_package: str = CLIENT_PACKAGE) -> ReportMetadata:
        """Build metadata from the running interpreter and installed distributions."""
        return cls(
            client_package=client_package,
            client_version=installed_version(client_package),
            platform=detect_platform(),
        )
