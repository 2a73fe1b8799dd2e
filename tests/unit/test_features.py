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


"""Unit tests for preview feature lookup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from enginfo.config import GeneratorConfig, ProjectConfig
from enginfo.features import first_preview_features, read_feature_flags

pytestmark = [pytest.mark.unit, pytest.mark.config]


def test_no_configuration_means_no_features() -> None:
    assert read_feature_flags(None) == []


def test_first_generator_declaring_features_wins(tmp_path: Path) -> None:
    path = tmp_path / "enginfo.toml"
    _ = path.write_text(
        """
[[generators]]
name = "docs"

[[generators]]
name = "client"
previewFeatures = ["fullTextSearch", "metrics"]

[[generators]]
name = "other"
previewFeatures = ["tracing"]
""",
        encoding="utf-8",
    )
    assert read_feature_flags(path) == ["fullTextSearch", "metrics"]


def test_invalid_configuration_is_ignored(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "enginfo.toml"
    _ = path.write_text("[[generators]]\nname = 42\n", encoding="utf-8")
    with caplog.at_level(logging.DEBUG, logger="enginfo.features"):
        assert read_feature_flags(path) == []
    assert any("Ignoring preview features" in record.getMessage() for record in caplog.records)


def test_unreadable_configuration_is_ignored(tmp_path: Path) -> None:
    assert read_feature_flags(tmp_path / "does-not-exist.toml") == []


def test_first_preview_features_does_not_merge() -> None:
    config = ProjectConfig(
        generators=(
            GeneratorConfig(name="a", preview_features=("x",)),
            GeneratorConfig(name="b", preview_features=("y",)),
        ),
    )
    assert first_preview_features(config) == ["x"]
    assert first_preview_features(ProjectConfig()) == []
