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


"""Unit tests for the per-role engine tables."""

from __future__ import annotations

import pytest

from enginfo.core.model_types import ENGINE_ROLES, EngineRole
from enginfo.engines.roles import (
    ENGINE_BINARY_NAMES,
    ENGINE_ENV_VARS,
    ENGINE_LABELS,
    ENGINE_OUTPUT_NAMES,
    ENGINE_VERSION_ARGS,
    IncompleteRoleTableError,
    ensure_exhaustive,
)

pytestmark = [pytest.mark.unit, pytest.mark.engine]


def test_roles_are_declared_in_report_order() -> None:
    assert [role.value for role in ENGINE_ROLES] == [
        "query-engine",
        "migration-engine",
        "introspection-engine",
        "format-engine",
    ]


@pytest.mark.parametrize(
    ("role", "variable"),
    [
        (EngineRole.QUERY_ENGINE, "ENGINFO_QUERY_ENGINE_BINARY"),
        (EngineRole.MIGRATION_ENGINE, "ENGINFO_MIGRATION_ENGINE_BINARY"),
        (EngineRole.INTROSPECTION_ENGINE, "ENGINFO_INTROSPECTION_ENGINE_BINARY"),
        (EngineRole.FORMAT_ENGINE, "ENGINFO_FMT_BINARY"),
    ],
)
def test_override_variables(role: EngineRole, variable: str) -> None:
    assert ENGINE_ENV_VARS[role] == variable


def test_labels_match_report_rows() -> None:
    assert ENGINE_LABELS[EngineRole.QUERY_ENGINE] == "Query Engine (Binary)"
    assert ENGINE_LABELS[EngineRole.MIGRATION_ENGINE] == "Migration Engine"
    assert ENGINE_LABELS[EngineRole.INTROSPECTION_ENGINE] == "Introspection Engine"
    assert ENGINE_LABELS[EngineRole.FORMAT_ENGINE] == "Format Engine"


def test_every_table_covers_every_role() -> None:
    for table in (
        ENGINE_ENV_VARS,
        ENGINE_BINARY_NAMES,
        ENGINE_LABELS,
        ENGINE_VERSION_ARGS,
        ENGINE_OUTPUT_NAMES,
    ):
        assert set(table) == set(EngineRole)


def test_override_variables_are_distinct() -> None:
    assert len(set(ENGINE_ENV_VARS.values())) == len(EngineRole)


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        ENGINE_LABELS[EngineRole.QUERY_ENGINE] = "changed"  # type: ignore[index]


def test_ensure_exhaustive_reports_missing_and_unexpected_keys() -> None:
    partial = {EngineRole.QUERY_ENGINE: "x", "bogus-engine": "y"}
    with pytest.raises(IncompleteRoleTableError) as excinfo:
        _ = ensure_exhaustive("PARTIAL", partial)  # type: ignore[arg-type]
    error = excinfo.value
    assert error.table == "PARTIAL"
    assert error.missing == {"migration-engine", "introspection-engine", "format-engine"}
    assert error.extra == {"bogus-engine"}
    assert "PARTIAL" in str(error)


def test_ensure_exhaustive_returns_mapping_unchanged() -> None:
    complete = {role: role.value for role in EngineRole}
    assert ensure_exhaustive("COMPLETE", complete) is complete


def test_engine_role_from_str_normalises_case() -> None:
    assert EngineRole.from_str(" Query-Engine ") is EngineRole.QUERY_ENGINE
    with pytest.raises(ValueError, match="Unknown engine role"):
        _ = EngineRole.from_str("studio")
