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

"""Best-effort lookup of preview features declared in the project configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from enginfo.compat import assert_never
from enginfo.config import ConfigLoadFailure, LoadedConfig, try_load_project_config
from enginfo.core.model_types import LogComponent
from enginfo.logging import structured_extra

if TYPE_CHECKING:
    from pathlib import Path

    from enginfo.config import ProjectConfig

logger: logging.Logger = logging.getLogger("enginfo.features")

__all__ = ["first_preview_features", "read_feature_flags"]


def first_preview_features(config: ProjectConfig) -> list[str]:
    """Return the preview features of the first generator that declares any.

    Lists are not merged across generators.
    """
    for generator in config.generators:
        if generator.preview_features:
            return list(generator.preview_features)
    return []


def read_feature_flags(config_path: Path | None) -> list[str]:
    """Return the preview feature names declared by the configuration at ``config_path``.

    A missing path, an unreadable file, or an invalid file all yield an empty
    list.
    """
    if config_path is None:
        return []
    result = try_load_project_config(config_path)
    if isinstance(result, ConfigLoadFailure):
        logger.debug(
            "Ignoring preview features: %s",
            result.error,
            extra=structured_extra(LogComponent.CONFIG, path=result.path),
        )
        return []
    if isinstance(result, LoadedConfig):
        return first_preview_features(result.config)
    assert_never(result)
