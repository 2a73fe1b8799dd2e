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

"""Default (non-overridden) binary resolution.

Binaries are looked up in the bundled engines directory first and on ``PATH``
second. Downloading or installing binaries is out of scope; the directory is
expected to be populated by the installer.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Final, Protocol

from enginfo._internal.exceptions import EngineNotFoundError
from enginfo.core.model_types import EngineRole, LogComponent
from enginfo.engines.platform import detect_platform, executable_name
from enginfo.engines.roles import ENGINE_BINARY_NAMES
from enginfo.logging import structured_extra

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger("enginfo.engines.resolver")

ENGINES_VERSION: Final[str] = "4.2.0-17.3c1f9a7be2d04e8b96c55d1f0a2e7b4c9d6f8a13"
ENGINES_DIR_ENV: Final[str] = "ENGINFO_ENGINES_DIR"


class EngineResolver(Protocol):
    """Collaborator that finds the default binary for a role."""

    async def resolve(self, role: EngineRole) -> Path:
        """Return the default binary path for ``role`` or raise ``EngineNotFoundError``."""
        ...  # pragma: no cover - Protocol definition


def default_engines_dir(
    engines_version: str = ENGINES_VERSION,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Return the bundled engines directory, honouring ``ENGINFO_ENGINES_DIR``."""
    env = os.environ if environ is None else environ
    configured = env.get(ENGINES_DIR_ENV)
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".cache" / "enginfo" / "engines" / engines_version


class BundledEngineResolver:
    """Resolve engines from the bundled directory, falling back to ``PATH``."""

    def __init__(
        self,
        engines_dir: Path | None = None,
        *,
        platform_id: str | None = None,
        search_path: bool = True,
    ) -> None:
        super().__init__()
        self.engines_dir = engines_dir if engines_dir is not None else default_engines_dir()
        self.platform_id = platform_id or detect_platform()
        self.search_path = search_path

    def candidates(self, role: EngineRole) -> list[Path]:
        """Return the bundled locations checked for ``role``, in priority order."""
        stem = ENGINE_BINARY_NAMES[role]
        return [
            self.engines_dir / executable_name(f"{stem}-{self.platform_id}", self.platform_id),
            self.engines_dir / executable_name(stem, self.platform_id),
        ]

    def _find(self, role: EngineRole) -> tuple[Path | None, list[str]]:
        searched: list[str] = []
        for candidate in self.candidates(role):
            searched.append(str(candidate))
            if candidate.is_file():
                return candidate, searched
        if self.search_path:
            name = executable_name(ENGINE_BINARY_NAMES[role], self.platform_id)
            searched.append(f"PATH:{name}")
            found = shutil.which(name)
            if found:
                return Path(found), searched
        return None, searched

    async def resolve(self, role: EngineRole) -> Path:
        path, searched = await asyncio.to_thread(self._find, role)
        if path is None:
            raise EngineNotFoundError(role, searched)
        logger.debug(
            "Resolved default %s binary at %s",
            role,
            path,
            extra=structured_extra(LogComponent.ENGINE, engine=role, path=path),
        )
        return path


__all__ = [
    "ENGINES_DIR_ENV",
    "ENGINES_VERSION",
    "BundledEngineResolver",
    "EngineResolver",
    "default_engines_dir",
]
