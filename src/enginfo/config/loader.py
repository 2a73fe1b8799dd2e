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

"""Configuration discovery and loading for enginfo.

The nearest configuration file wins: starting at the working directory and
walking up through its parents, the first directory holding ``enginfo.toml``,
``.enginfo.toml``, or a ``pyproject.toml`` with a ``[tool.enginfo]`` table is
used. ``ENGINFO_CONFIG`` names a file explicitly and disables the search.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final, Literal, Union, cast

from pydantic import ValidationError

from enginfo.compat import tomllib
from enginfo.core.model_types import LogComponent
from enginfo.logging import structured_extra

from .models import (
    ConfigReadError,
    InvalidConfigFileError,
    ProjectConfig,
    ProjectConfigModel,
    project_config_from_model,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger("enginfo.config")

CONFIG_PATH_ENV: Final[str] = "ENGINFO_CONFIG"
ConfigFilename = Literal["enginfo.toml", ".enginfo.toml", "pyproject.toml"]
CONFIG_FILENAMES: Final[tuple[ConfigFilename, ...]] = (
    "enginfo.toml",
    ".enginfo.toml",
    "pyproject.toml",
)


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    config: ProjectConfig


@dataclass(slots=True, frozen=True)
class ConfigLoadFailure:
    path: Path
    error: ConfigReadError | InvalidConfigFileError


ConfigLoadResult = Union[LoadedConfig, ConfigLoadFailure]


def _read_toml(path: Path) -> dict[str, object]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc


def _tool_section(raw: Mapping[str, object]) -> dict[str, object] | None:
    tool_obj = raw.get("tool")
    if not isinstance(tool_obj, dict):
        return None
    section = cast("dict[str, object]", tool_obj).get("enginfo")
    return cast("dict[str, object]", section) if isinstance(section, dict) else None


def _declares_tool_section(path: Path) -> bool:
    try:
        return _tool_section(_read_toml(path)) is not None
    except ConfigReadError:
        return False


def find_config_path(
    start: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Path | None:
    """Return the nearest enginfo configuration file, or ``None``.

    Args:
        start: Directory (or file) to start searching from; the working directory
            when omitted.
        environ: Environment used for ``ENGINFO_CONFIG``; ``os.environ`` when omitted.

    Returns:
        Path of the configuration file. An explicit ``ENGINFO_CONFIG`` is returned
        even when it does not exist so that the failure surfaces on load.
    """
    env = os.environ if environ is None else environ
    explicit = env.get(CONFIG_PATH_ENV)
    if explicit:
        return Path(explicit).expanduser()
    base = (start or Path.cwd()).resolve()
    if base.is_file():
        base = base.parent
    for directory in (base, *base.parents):
        for filename in CONFIG_FILENAMES:
            candidate = directory / filename
            if not candidate.is_file():
                continue
            if filename == "pyproject.toml" and not _declares_tool_section(candidate):
                continue
            logger.debug(
                "Using configuration file %s",
                candidate,
                extra=structured_extra(LogComponent.CONFIG, path=candidate),
            )
            return candidate
    return None


def load_project_config(path: Path) -> ProjectConfig:
    """Load and validate the configuration file at ``path``.

    Payloads nested under ``[tool.enginfo]`` are unwrapped, so the same schema
    works in ``pyproject.toml``.

    Raises:
        ConfigReadError: If the file cannot be read or is not valid TOML.
        InvalidConfigFileError: If the content fails schema validation.
    """
    raw_map = _read_toml(path)
    section = _tool_section(raw_map)
    if section is not None:
        raw_map = section
    try:
        model = ProjectConfigModel.model_validate(raw_map)
    except ValidationError as exc:
        raise InvalidConfigFileError(path, exc) from exc
    return project_config_from_model(path, model)


def try_load_project_config(path: Path) -> ConfigLoadResult:
    """Load ``path`` and report expected configuration failures as a value.

    Only read and validation failures become ``ConfigLoadFailure``; anything
    else propagates.
    """
    try:
        return LoadedConfig(load_project_config(path))
    except (ConfigReadError, InvalidConfigFileError) as exc:
        return ConfigLoadFailure(path=path, error=exc)


__all__ = [
    "CONFIG_FILENAMES",
    "CONFIG_PATH_ENV",
    "ConfigLoadFailure",
    "ConfigLoadResult",
    "LoadedConfig",
    "find_config_path",
    "load_project_config",
    "try_load_project_config",
]
