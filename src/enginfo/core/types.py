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

"""Value objects produced while building a version report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from .model_types import EngineRole


@dataclass(slots=True, frozen=True)
class LocatedEngine:
    """Binary path chosen for a role, tagged with the env var that chose it."""

    path: Path
    override_variable: str | None = None

    @property
    def is_overridden(self) -> bool:
        return self.override_variable is not None


@dataclass(slots=True, frozen=True)
class EngineInfo:
    """Resolved binary and its self-reported version for one engine role."""

    role: EngineRole
    path: Path
    version: str
    override_variable: str | None = None


@dataclass(slots=True, frozen=True)
class ReportRow:
    label: str
    value: str


__all__ = ["EngineInfo", "LocatedEngine", "ReportRow"]
