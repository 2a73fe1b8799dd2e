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


"""Unit tests for configuration discovery, loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from enginfo.config import (
    ConfigLoadFailure,
    ConfigReadError,
    InvalidConfigFileError,
    LoadedConfig,
    find_config_path,
    load_project_config,
    try_load_project_config,
)
from enginfo.config.models import (
    ConfigFieldTypeError,
    GeneratorModel,
    ProjectConfigModel,
    ensure_names,
)

pytestmark = [pytest.mark.unit, pytest.mark.config]


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")
    return path


def test_find_config_path_prefers_nearest_directory(tmp_path: Path) -> None:
    outer = _write(tmp_path / "enginfo.toml", "")
    nested = tmp_path / "app" / "src"
    nested.mkdir(parents=True)
    assert find_config_path(nested, environ={}) == outer

    inner = _write(tmp_path / "app" / ".enginfo.toml", "")
    assert find_config_path(nested, environ={}) == inner


def test_find_config_path_prefers_enginfo_toml_within_directory(tmp_path: Path) -> None:
    primary = _write(tmp_path / "enginfo.toml", "")
    _ = _write(tmp_path / ".enginfo.toml", "")
    assert find_config_path(tmp_path, environ={}) == primary


def test_find_config_path_requires_tool_section_in_pyproject(tmp_path: Path) -> None:
    _ = _write(tmp_path / "pyproject.toml", "[project]\nname = 'demo'\n")
    nested = tmp_path / "pkg"
    nested.mkdir()
    assert find_config_path(nested, environ={}) != tmp_path / "pyproject.toml"

    pyproject = _write(
        nested / "pyproject.toml",
        "[tool.enginfo]\n[[tool.enginfo.generators]]\nname = 'client'\n",
    )
    assert find_config_path(nested, environ={}) == pyproject


def test_find_config_path_honours_explicit_environment(tmp_path: Path) -> None:
    explicit = tmp_path / "elsewhere.toml"
    assert find_config_path(tmp_path, environ={"ENGINFO_CONFIG": str(explicit)}) == explicit


def test_load_project_config_reads_generators_in_order(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "enginfo.toml",
        """
[[generators]]
name = "client"
provider = "enginfo-client"
previewFeatures = ["fullTextSearch", "metrics", "fullTextSearch"]

[[generators]]
name = "docs"
preview_features = "tracing"
""",
    )
    config = load_project_config(path)
    assert config.path == path
    assert [generator.name for generator in config.generators] == ["client", "docs"]
    assert config.generators[0].provider == "enginfo-client"
    assert config.generators[0].preview_features == ("fullTextSearch", "metrics")
    assert config.generators[1].preview_features == ("tracing",)


def test_load_project_config_unwraps_pyproject_section(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "pyproject.toml",
        """
[project]
name = "demo"

[[tool.enginfo.generators]]
name = "client"
previewFeatures = ["views"]
""",
    )
    config = load_project_config(path)
    assert config.generators[0].preview_features == ("views",)


def test_load_project_config_rejects_unknown_keys(tmp_path: Path) -> None:
    path = _write(tmp_path / "enginfo.toml", "[[generators]]\nname = 'client'\nbinaryTargets = ['native']\n")
    with pytest.raises(InvalidConfigFileError) as excinfo:
        _ = load_project_config(path)
    assert excinfo.value.path == path


def test_load_project_config_reports_malformed_toml(tmp_path: Path) -> None:
    path = _write(tmp_path / "enginfo.toml", "[[generators]\nname = ")
    with pytest.raises(ConfigReadError):
        _ = load_project_config(path)


def test_try_load_project_config_wraps_expected_failures(tmp_path: Path) -> None:
    missing = tmp_path / "missing.toml"
    result = try_load_project_config(missing)
    assert isinstance(result, ConfigLoadFailure)
    assert result.path == missing
    assert isinstance(result.error, ConfigReadError)

    good = _write(tmp_path / "enginfo.toml", "[[generators]]\nname = 'client'\n")
    loaded = try_load_project_config(good)
    assert isinstance(loaded, LoadedConfig)
    assert loaded.config.generators[0].name == "client"


def test_config_version_must_match() -> None:
    with pytest.raises(ValueError, match="Unsupported config_version 3"):
        _ = ProjectConfigModel.model_validate({"config_version": 3})


def test_generator_name_must_not_be_blank() -> None:
    with pytest.raises(ValueError, match="generators.name"):
        _ = GeneratorModel.model_validate({"name": "   "})


def test_generator_accepts_field_name_and_alias() -> None:
    by_alias = GeneratorModel.model_validate({"name": "a", "previewFeatures": ["x"]})
    by_name = GeneratorModel.model_validate({"name": "a", "preview_features": ["x"]})
    assert by_alias.preview_features == by_name.preview_features == ["x"]


def test_ensure_names_normalises_and_validates() -> None:
    assert ensure_names(None, field_name="f") == []
    assert ensure_names(" metrics ", field_name="f") == ["metrics"]
    assert ensure_names(["a", " a", "b"], field_name="f") == ["a", "b"]
    with pytest.raises(ConfigFieldTypeError):
        _ = ensure_names(["a", ""], field_name="f")
    with pytest.raises(ConfigFieldTypeError):
        _ = ensure_names({"a": 1}, field_name="f")
