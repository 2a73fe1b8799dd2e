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


"""Logging setup for enginfo: one stderr handler, text or JSON records.

Records can carry engine-specific context through ``structured_extra``; the
JSON formatter copies those fields into each payload, the text formatter
ignores them.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Final, Literal, cast

from enginfo.compat import UTC, TypedDict, Unpack, override
from enginfo.core.model_types import EngineRole, LogComponent, LogFormat
from enginfo.json import normalise_for_json

ROOT_LOGGER_NAME: Final[str] = "enginfo"
LOG_FORMAT_ENV: Final[str] = "ENGINFO_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "ENGINFO_LOG_LEVEL"

LogLevelName = Literal["debug", "info", "warning", "error"]

_LEVELS: Final[Mapping[str, int]] = MappingProxyType({
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
})
LOG_LEVELS: Final[tuple[LogLevelName, ...]] = cast("tuple[LogLevelName, ...]", tuple(_LEVELS))
LOG_FORMATS: Final[tuple[Literal["text", "json"], ...]] = cast(
    "tuple[Literal['text', 'json'], ...]",
    tuple(format_.value for format_ in LogFormat),
)
CHILD_LOGGERS: Final[tuple[str, ...]] = (
    "enginfo.cli",
    "enginfo.config",
    "enginfo.engines",
    "enginfo.features",
    "enginfo.internal.process",
    "enginfo.report",
)


@dataclass(slots=True, frozen=True)
class LogConfig:
    format: LogFormat
    level: int
    level_name: str


class StructuredLogExtra(TypedDict, total=False):
    """Fields a log record may carry besides its message."""

    component: LogComponent
    engine: EngineRole
    env_var: str
    path: str
    exit_code: int
    duration_ms: float
    details: dict[str, object]


class _StructuredLogKwargs(TypedDict, total=False):
    engine: EngineRole | str
    env_var: str
    path: str | os.PathLike[str]
    exit_code: int
    duration_ms: float
    details: Mapping[str, object]


def _as_engine(value: object) -> EngineRole | None:
    if isinstance(value, EngineRole):
        return value
    try:
        return EngineRole.from_str(str(value))
    except ValueError:
        return None


def _as_details(value: object) -> dict[str, object] | None:
    if isinstance(value, Mapping) and value:
        return dict(cast("Mapping[str, object]", value))
    return None


# Unrecognised or empty values are dropped rather than logged verbatim.
_FIELD_NORMALISERS: Final[Mapping[str, Callable[[object], object | None]]] = MappingProxyType({
    "engine": _as_engine,
    "env_var": str,
    "path": lambda value: os.fspath(cast("str | os.PathLike[str]", value)),
    "exit_code": lambda value: int(cast("int | str", value)),
    "duration_ms": lambda value: float(cast("float | str", value)),
    "details": _as_details,
})
STRUCTURED_FIELDS: Final[tuple[str, ...]] = ("component", *_FIELD_NORMALISERS)


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Build the ``extra=`` mapping for a log call.

    ``None`` values are skipped, engine names are coerced to ``EngineRole``
    and paths to strings.
    """
    extra: dict[str, object] = {"component": component}
    for key, value in cast("dict[str, object]", kwargs).items():
        normalise = _FIELD_NORMALISERS.get(key)
        if normalise is None or value is None:
            continue
        normalised = normalise(value)
        if normalised is not None:
            extra[key] = normalised
    return cast("StructuredLogExtra", extra)


class JSONLogFormatter(logging.Formatter):
    """One JSON object per record, including any structured fields present."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
        }
        payload.update({field: getattr(record, field) for field in STRUCTURED_FIELDS if hasattr(record, field)})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(normalise_for_json(payload), ensure_ascii=False)


class TextLogFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def _level_from(value: str | int) -> tuple[int, str]:
    if isinstance(value, int):
        return value, logging.getLevelName(value).lower()
    name = value.strip().lower()
    if name not in _LEVELS:
        name = "info"
    return _LEVELS[name], name


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | int | None = None,
) -> LogConfig:
    """Install the enginfo stderr handler and return the settings applied.

    Args:
        log_format: ``text`` or ``json``; ``ENGINFO_LOG_FORMAT`` or ``text`` when omitted.
        log_level: Level name or number; ``ENGINFO_LOG_LEVEL`` or ``info`` when
            omitted. Unknown names fall back to ``info``.

    Raises:
        ValueError: If ``log_format`` names an unknown format.
    """
    format_value = log_format if log_format is not None else os.getenv(LOG_FORMAT_ENV) or LogFormat.TEXT
    selected = format_value if isinstance(format_value, LogFormat) else LogFormat.from_str(format_value)
    level, level_name = _level_from(log_level if log_level is not None else os.getenv(LOG_LEVEL_ENV) or "info")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONLogFormatter() if selected is LogFormat.JSON else TextLogFormatter())
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    for child in CHILD_LOGGERS:
        logging.getLogger(child).setLevel(level)
    return LogConfig(format=selected, level=level, level_name=level_name)


__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "structured_extra",
]
