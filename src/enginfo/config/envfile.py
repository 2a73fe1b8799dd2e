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


"""Project ``.env`` loading.

Values from the file only fill gaps: a variable already present in the real
environment is never replaced.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Final

from dotenv import dotenv_values

from enginfo.core.model_types import LogComponent
from enginfo.logging import structured_extra

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger("enginfo.config")

ENV_FILENAME: Final[str] = ".env"

__all__ = ["ENV_FILENAME", "build_environ", "load_env_file"]


def load_env_file(path: Path) -> dict[str, str]:
    """Return the non-empty assignments in ``path``; a missing file yields ``{}``."""
    if not path.is_file():
        return {}
    values: dict[str, str] = {}
    for key, value in dotenv_values(path).items():
        if not key or value in {None, ""}:
            continue
        values[key] = str(value)
    logger.debug(
        "Loaded %d variable(s) from %s",
        len(values),
        path,
        extra=structured_extra(LogComponent.CONFIG, path=path),
    )
    return values


def build_environ(
    env_file: Path | None = None,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return ``base`` (``os.environ`` when omitted) merged with ``env_file``.

    Args:
        env_file: Dotenv file to read; ``./.env`` when omitted.
        base: Environment that takes precedence over the file.
    """
    env = dict(os.environ if base is None else base)
    path = env_file if env_file is not None else Path.cwd() / ENV_FILENAME
    for key, value in load_env_file(path).items():
        _ = env.setdefault(key, value)
    return env
