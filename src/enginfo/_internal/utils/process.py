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

"""Subprocess helpers and typed command wrappers."""

from __future__ import annotations

import logging
import subprocess  # noqa: S404  # JUSTIFIED: centralised wrapper for engine version queries
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from enginfo._internal.logging_utils import structured_extra
from enginfo.core.model_types import LogComponent

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger: logging.Logger = logging.getLogger("enginfo.internal.process")

__all__ = ["CommandOutput", "run_command"]


@dataclass(slots=True)
class CommandOutput:
    args: list[str]
    stdout: str
    stderr: str
    exit_code: int
    duration_ms: float


def run_command(args: Iterable[str], cwd: Path | None = None) -> CommandOutput:
    """Run a subprocess and return its captured output.

    Never uses ``shell=True``. There is no timeout: a child that never exits
    blocks the caller.
    Output is decoded as UTF-8; undecodable bytes become U+FFFD.

    Args:
        args: Command line to execute. The first element is the executable.
        cwd: Optional working directory for the child process.

    Returns:
        ``CommandOutput`` with the argument vector, captured stdout/stderr,
        exit code, and duration in milliseconds.

    Raises:
        ValueError: If ``args`` is empty.
        TypeError: If any argument is empty.
        OSError: If the executable cannot be started (missing, not executable).
    """
    argv = list(args)
    if not argv:
        raise ValueError("Command must not be empty")
    if not all(argv):
        raise TypeError("Command arguments must be non-empty strings")
    start = time.perf_counter()
    debug_details: dict[str, object] = {}
    if cwd:
        debug_details["cwd"] = str(cwd)
    logger.debug(
        "Executing command: %s",
        " ".join(argv),
        extra=structured_extra(LogComponent.PROCESS, details=debug_details),
    )
    completed = subprocess.run(  # noqa: S603 - argv comes from resolved engine paths
        argv,
        check=False,
        cwd=str(cwd) if cwd else None,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    duration_ms = (time.perf_counter() - start) * 1000
    if completed.returncode != 0:
        logger.warning(
            "Command failed (exit=%s): %s",
            completed.returncode,
            " ".join(argv),
            extra=structured_extra(
                LogComponent.PROCESS,
                exit_code=completed.returncode,
                duration_ms=duration_ms,
            ),
        )
    return CommandOutput(
        args=argv,
        stdout=completed.stdout,
        stderr=completed.stderr,
        exit_code=completed.returncode,
        duration_ms=duration_ms,
    )
