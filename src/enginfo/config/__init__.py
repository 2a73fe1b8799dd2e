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

"""Configuration package for enginfo."""

from __future__ import annotations

from .envfile import ENV_FILENAME, build_environ, load_env_file
from .loader import (
    CONFIG_FILENAMES,
    CONFIG_PATH_ENV,
    ConfigLoadFailure,
    ConfigLoadResult,
    LoadedConfig,
    find_config_path,
    load_project_config,
    try_load_project_config,
)
from .models import (
    CONFIG_VERSION,
    ConfigFieldTypeError,
    ConfigReadError,
    ConfigValidationError,
    GeneratorConfig,
    GeneratorModel,
    InvalidConfigFileError,
    ProjectConfig,
    ProjectConfigModel,
    UnsupportedConfigVersionError,
)

__all__ = [
    "CONFIG_FILENAMES",
    "ENV_FILENAME",
    "CONFIG_PATH_ENV",
    "CONFIG_VERSION",
    "ConfigFieldTypeError",
    "ConfigLoadFailure",
    "ConfigLoadResult",
    "ConfigReadError",
    "ConfigValidationError",
    "GeneratorConfig",
    "GeneratorModel",
    "InvalidConfigFileError",
    "LoadedConfig",
    "ProjectConfig",
    "ProjectConfigModel",
    "UnsupportedConfigVersionError",
    "build_environ",
    "find_config_path",
    "load_env_file",
    "load_project_config",
    "try_load_project_config",
]
