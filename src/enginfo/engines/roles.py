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

"""Static per-role tables: override variables, binary names, labels, version args.

Every table must be keyed by exactly the members of ``EngineRole``; the check
runs at import so a missing role fails fast instead of turning into an
always-empty lookup at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final, TypeVar

from enginfo._internal.exceptions import EnginfoValidationError
from enginfo.core.model_types import EngineRole

_V = TypeVar("_V")

ENGINE_ENV_VARS: Final[Mapping[EngineRole, str]] = MappingProxyType({
    EngineRole.QUERY_ENGINE: "ENGINFO_QUERY_ENGINE_BINARY",
    EngineRole.MIGRATION_ENGINE: "ENGINFO_MIGRATION_ENGINE_BINARY",
    EngineRole.INTROSPECTION_ENGINE: "ENGINFO_INTROSPECTION_ENGINE_BINARY",
    EngineRole.FORMAT_ENGINE: "ENGINFO_FMT_BINARY",
})

ENGINE_BINARY_NAMES: Final[Mapping[EngineRole, str]] = MappingProxyType({
    EngineRole.QUERY_ENGINE: "query-engine",
    EngineRole.MIGRATION_ENGINE: "migration-engine",
    EngineRole.INTROSPECTION_ENGINE: "introspection-engine",
    EngineRole.FORMAT_ENGINE: "schema-fmt",
})

ENGINE_LABELS: Final[Mapping[EngineRole, str]] = MappingProxyType({
    EngineRole.QUERY_ENGINE: "Query Engine (Binary)",
    EngineRole.MIGRATION_ENGINE: "Migration Engine",
    EngineRole.INTROSPECTION_ENGINE: "Introspection Engine",
    EngineRole.FORMAT_ENGINE: "Format Engine",
})

ENGINE_VERSION_ARGS: Final[Mapping[EngineRole, tuple[str, ...]]] = MappingProxyType({
    EngineRole.QUERY_ENGINE: ("--version",),
    EngineRole.MIGRATION_ENGINE: ("--version",),
    EngineRole.INTROSPECTION_ENGINE: ("--version",),
    EngineRole.FORMAT_ENGINE: ("--version",),
})

# Names an engine may print ahead of its version token.
ENGINE_OUTPUT_NAMES: Final[Mapping[EngineRole, tuple[str, ...]]] = MappingProxyType({
    EngineRole.QUERY_ENGINE: ("query-engine", "query-engine-cli"),
    EngineRole.MIGRATION_ENGINE: ("migration-engine", "migration-engine-cli"),
    EngineRole.INTROSPECTION_ENGINE: ("introspection-engine", "introspection-core"),
    EngineRole.FORMAT_ENGINE: ("schema-fmt", "fmt"),
})


class IncompleteRoleTableError(EnginfoValidationError):
    """Raised at import time when a role table does not cover every role."""

    def __init__(self, table: str, missing: set[str], extra: set[str]) -> None:
        self.table = table
        self.missing = missing
        self.extra = extra
        super().__init__(
            f"{table} must cover every engine role "
            f"(missing: {sorted(missing) or '-'}, unexpected: {sorted(extra) or '-'})",
        )


def ensure_exhaustive(table: str, mapping: Mapping[EngineRole, _V]) -> Mapping[EngineRole, _V]:
    """Return ``mapping`` unchanged after checking it covers exactly every role.

    Raises:
        IncompleteRoleTableError: If a role is missing or an unknown key is present.
    """
    expected = {role.value for role in EngineRole}
    actual = {str(key) for key in mapping}
    if expected != actual:
        raise IncompleteRoleTableError(table, expected - actual, actual - expected)
    return mapping


for _name, _table in (
    ("ENGINE_ENV_VARS", ENGINE_ENV_VARS),
    ("ENGINE_BINARY_NAMES", ENGINE_BINARY_NAMES),
    ("ENGINE_LABELS", ENGINE_LABELS),
    ("ENGINE_VERSION_ARGS", ENGINE_VERSION_ARGS),
    ("ENGINE_OUTPUT_NAMES", ENGINE_OUTPUT_NAMES),
):
    _ = ensure_exhaustive(_name, _table)

__all__ = [
    "ENGINE_BINARY_NAMES",
    "ENGINE_ENV_VARS",
    "ENGINE_LABELS",
    "ENGINE_OUTPUT_NAMES",
    "ENGINE_VERSION_ARGS",
    "IncompleteRoleTableError",
    "ensure_exhaustive",
]
