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

"""Ask an engine binary for its version."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from enginfo._internal.exceptions import ProbeError
from enginfo.core.model_types import LogComponent
from enginfo.engines.roles import ENGINE_OUTPUT_NAMES, ENGINE_VERSION_ARGS
from enginfo.logging import structured_extra
from enginfo.runtime import run_command, version_from_output

if TYPE_CHECKING:
    from pathlib import Path

    from enginfo.core.model_types import EngineRole

logger: logging.Logger = logging.getLogger("enginfo.engines.prober")

__all__ = ["probe_version", "version_command"]


def version_command(path: Path, role: EngineRole) -> list[str]:
    """Return the argv that makes ``path`` print its version.

    Relative paths are anchored at the working directory; a bare name such as
    ``qe`` must never turn into a ``PATH`` lookup.
    """
    return [str(path.absolute()), *ENGINE_VERSION_ARGS[role]]


async def probe_version(path: Path, role: EngineRole) -> str:
    """Run the version query for ``role`` against ``path`` and parse the result.

    stdout is parsed first, stderr second. Failures are not retried and there is
    no timeout.

    Raises:
        ProbeError: If the binary cannot be started, exits non-zero, or prints
            nothing that looks like a version.
    """
    argv = version_command(path, role)
    try:
        output = await asyncio.to_thread(run_command, argv)
    except OSError as exc:
        raise ProbeError(role, path, str(exc) or type(exc).__name__) from exc
    if output.exit_code != 0:
        detail = (output.stderr or output.stdout).strip().splitlines()
        reason = f"exit code {output.exit_code}"
        if detail:
            reason = f"{reason}: {detail[0]}"
        raise ProbeError(role, path, reason)
    names = ENGINE_OUTPUT_NAMES[role]
    version = version_from_output(output.stdout, skip_names=names) or version_from_output(
        output.stderr,
        skip_names=names,
    )
    if version is None:
        raise ProbeError(role, path, "no version in output")
    logger.debug(
        "%s reports version %s",
        role,
        version,
        extra=structured_extra(
            LogComponent.ENGINE,
            engine=role,
            path=path,
            exit_code=output.exit_code,
            duration_ms=output.duration_ms,
        ),
    )
    return version
