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

"""Configuration models and validation for enginfo.

Pydantic models validate the raw TOML payload; dataclasses carry the validated
values at runtime. The only section enginfo reads is the ordered list of
``generators``, each optionally declaring preview features.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Final, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from enginfo._internal.exceptions import EnginfoValidationError

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_VERSION: Final[int] = 0


class ConfigValidationError(EnginfoValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigFieldTypeError(ConfigValidationError):
    """Raised when a configuration field has an invalid type."""

    def __init__(self, field: str, expected: str) -> None:
        self.field = field
        self.expected = expected
        super().__init__(f"{field} must be {expected}")


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read or parsed as TOML."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails schema validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Invalid enginfo configuration in {path}: {error}")


def ensure_names(value: object, *, field_name: str) -> list[str]:
    """Normalise a string or list of strings into stripped, de-duplicated names.

    Order is preserved. Blank entries and non-string entries are rejected.

    Raises:
        ConfigFieldTypeError: If the value is not a string or a list of non-empty strings.
    """
    if value is None:
        return []
    items: Iterable[object]
    if isinstance(value, str):
        items = [value]
    elif isinstance(value, (list, tuple)):
        items = cast("Iterable[object]", value)
    else:
        raise ConfigFieldTypeError(field_name, "a list of strings")
    names: list[str] = []
    for item in items:
        if not isinstance(item, str) or not item.strip():
            raise ConfigFieldTypeError(field_name, "a list of non-empty strings")
        name = item.strip()
        if name not in names:
            names.append(name)
    return names


class GeneratorModel(BaseModel):
    """Pydantic model for one ``[[generators]]`` entry.

    Attributes:
        name: Generator identifier.
        provider: Optional package or command that implements the generator.
        preview_features: Opt-in preview features (alias ``previewFeatures``).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(populate_by_name=True, extra="forbid")
    name: str
    provider: str | None = None
    preview_features: list[str] = Field(default_factory=list, alias="previewFeatures")

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ConfigFieldTypeError("generators.name", "a non-empty string")
        return value.strip()

    @field_validator("preview_features", mode="before")
    @classmethod
    def _coerce_features(cls, value: object) -> list[str]:
        return ensure_names(value, field_name="generators.preview_features")


class ProjectConfigModel(BaseModel):
    """Pydantic model for the top-level enginfo configuration file."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    config_version: int = Field(default=CONFIG_VERSION)
    generators: list[GeneratorModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_version(self) -> ProjectConfigModel:
        if self.config_version != CONFIG_VERSION:
            raise UnsupportedConfigVersionError(self.config_version, CONFIG_VERSION)
        return self


@dataclass(slots=True, frozen=True)
class GeneratorConfig:
    name: str
    provider: str | None = None
    preview_features: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class ProjectConfig:
    """Validated configuration, with generators in declaration order."""

    path: Path | None = None
    generators: tuple[GeneratorConfig, ...] = field(default_factory=tuple)


def project_config_from_model(path: Path | None, model: ProjectConfigModel) -> ProjectConfig:
    return ProjectConfig(
        path=path,
        generators=tuple(
            GeneratorConfig(
                name=generator.name,
                provider=generator.provider,
                preview_features=tuple(generator.preview_features),
            )
            for generator in model.generators
        ),
    )


__all__ = [
    "CONFIG_VERSION",
    "ConfigFieldTypeError",
    "ConfigReadError",
    "ConfigValidationError",
    "GeneratorConfig",
    "GeneratorModel",
    "InvalidConfigFileError",
    "ProjectConfig",
    "ProjectConfigModel",
    "UnsupportedConfigVersionError",
    "ensure_names",
    "project_config_from_model",
]
