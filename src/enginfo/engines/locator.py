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

"""Decide which binary services an engine role.

An environment override wins whenever it names an existing path; nothing else
about the override (version, compatibility, executability) is checked here.
Otherwise the default resolver answers, and its failures propagate.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from enginfo.core.model_types import LogComponent
from enginfo.core.types import LocatedEngine
from enginfo.engines.resolver import BundledEngineResolver
from enginfo.engines.roles import ENGINE_ENV_VARS
from enginfo.logging import structured_extra

if TYPE_CHECKING:
    from collections.abc import Mapping

    from enginfo.core.model_types import EngineRole
    from enginfo.engines.resolver import EngineResolver

logger: logging.Logger = logging.getLogger("enginfo.engines.locator")

__all__ = ["locate_engine", "override_variable"]


def override_variable(role: EngineRole) -> str:
    """Return the environment variable that overrides ``role``'s binary."""
    return ENGINE_ENV_VARS[role]


async def locate_engine(
    role: EngineRole,
    *,
    resolver: EngineResolver | None = None,
    environ: Mapping[str, str] | None = None,
) -> LocatedEngine:
    """Return the binary path for ``role``.

    Args:
        role: Engine role to locate.
        resolver: Default-path collaborator; a ``BundledEngineResolver`` when omitted.
        environ: Environment to read the override from; ``os.environ`` when omitted.

    Returns:
        ``LocatedEngine`` tagged with the override variable when the override
        was used, untagged otherwise.

    Raises:
        EngineNotFoundError: If no override applies and the resolver finds nothing.
    """
    env = os.environ if environ is None else environ
    variable = override_variable(role)
    raw = env.get(variable)
    if raw:
        candidate = Path(raw)
        if await asyncio.to_thread(candidate.exists):
            logger.debug(
                "Using %s binary from %s",
                role,
                variable,
                extra=structured_extra(LogComponent.ENGINE, engine=role, env_var=variable, path=candidate),
            )
            return LocatedEngine(path=candidate, override_variable=variable)
        logger.debug(
            "Ignoring %s=%s: path does not exist",
            variable,
            raw,
            extra=structured_extra(LogComponent.ENGINE, engine=role, env_var=variable, path=candidate),
        )
    active = resolver if resolver is not None else BundledEngineResolver()
    return LocatedEngine(path=await active.resolve(role))
