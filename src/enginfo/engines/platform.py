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

"""Host platform identifier used in bundled binary names and the report."""

from __future__ import annotations

import platform as _platform
from typing import Final

__all__ = ["detect_platform", "executable_name"]

_MACHINE_ALIASES: Final[dict[str, str]] = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "aarch64": "arm64",
    "armv8": "arm64",
}


def detect_platform(system: str | None = None, machine: str | None = None) -> str:
    """Return ``"<system>-<machine>"``, e.g. ``linux-x86_64`` or ``darwin-arm64``."""
    system_name = (system if system is not None else _platform.system()).strip().lower() or "unknown"
    machine_name = (machine if machine is not None else _platform.machine()).strip().lower() or "unknown"
    return f"{system_name}-{_MACHINE_ALIASES.get(machine_name, machine_name)}"


def executable_name(stem: str, platform_id: str) -> str:
    """Append ``.exe`` on Windows platforms."""
    return f"{stem}.exe" if platform_id.startswith("windows") else stem
