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

"""Closed enumerations shared across enginfo layers."""

from __future__ import annotations

from typing import Final

from enginfo.compat import StrEnum


class EngineRole(StrEnum):
    """Logical function serviced by one native engine binary.

    Declaration order is the order engines appear in the version report.
    """

    QUERY_ENGINE = "query-engine"
    MIGRATION_ENGINE = "migration-engine"
    INTROSPECTION_ENGINE = "introspection-engine"
    FORMAT_ENGINE = "format-engine"

    @classmethod
    def from_str(cls, raw: str) -> EngineRole:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown engine role '{raw}'") from exc


ENGINE_ROLES: Final[tuple[EngineRole, ...]] = tuple(EngineRole)


class LogFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log format '{raw}'") from exc


class LogComponent(StrEnum):
    CLI = "cli"
    ENGINE = "engine"
    REPORT = "report"
    CONFIG = "config"
    PROCESS = "process"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log component '{raw}'") from exc


__all__ = ["ENGINE_ROLES", "EngineRole", "LogComponent", "LogFormat"]
